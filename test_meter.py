import logging
import random

import pytest

from passmeter.core.config import ConfigManager, SettingsModel
from passmeter.core.logger import setup_logging
from passmeter.core.messages import DEFAULT_CATALOG, get_catalog
from passmeter.core.meter import TRACK_COLOR, StrengthMeter


@pytest.fixture
def meter():
    return StrengthMeter(SettingsModel(), rng=random.Random(11))


def test_idle_state(meter):
    state = meter.idle()
    assert state.text == ""
    assert state.percentage == 0
    assert state.bar_width == "0%"
    assert state.track_color == TRACK_COLOR
    assert state.percentage_text == ""
    assert state.feedback == "Start typing to create a strong password."


@pytest.mark.parametrize("password", ["", "   ", "\t\n"])
def test_blank_input_shows_idle(meter, password):
    verdict, state = meter.evaluate(password)
    assert verdict is None
    assert state == meter.idle()


def test_update_renders_verdict(meter):
    state = meter.update("Aa1!aaaaaaaa")
    assert state.text == "Very Strong"
    assert state.text_color == "#28a745"
    assert state.bar_color == "#28a745"
    assert state.bar_width == "90%"
    assert state.percentage_text == "Strength: 90%"
    assert state.feedback == DEFAULT_CATALOG["feedback_very_strong"]


def test_padded_input_is_classified_as_typed(meter):
    verdict, _ = meter.evaluate(" a ")
    assert verdict.criteria.has_lower


def test_generate_refreshes_display(meter):
    password, state = meter.generate()
    assert len(password) == 12
    assert state.percentage == 100
    assert state.text == "Ultra Strong"


def test_generate_uses_configured_length():
    meter = StrengthMeter(SettingsModel(min_length=16), rng=random.Random(1))
    password, state = meter.generate()
    assert len(password) == 16
    assert state.percentage == 100


def test_seeded_settings_are_reproducible():
    settings = SettingsModel(random_seed=2024)
    assert StrengthMeter(settings).generate() == StrengthMeter(settings).generate()


def test_turkish_meter():
    meter = StrengthMeter(SettingsModel(locale="tr"))
    state = meter.update("Aa1!Aa1!Aa1!")
    assert state.text == "Ultra Güçlü"
    assert state.percentage_text == "Güçlülük: 100%"
    assert meter.idle().feedback == "Güçlü bir şifre oluşturmak için yazmaya başlayın."


def test_unknown_locale_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="passmeter.messages"):
        assert get_catalog("xx") is DEFAULT_CATALOG
    assert "Unknown locale" in caplog.text


def test_settings_reject_short_min_length():
    with pytest.raises(ValueError):
        SettingsModel(min_length=4)


def test_settings_reject_unknown_locale():
    with pytest.raises(ValueError):
        SettingsModel(locale="de")


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("PASSMETER_MIN_LENGTH", "14")
    monkeypatch.setenv("PASSMETER_LOCALE", "TR")
    monkeypatch.setenv("PASSMETER_RANDOM_SEED", "7")
    settings = ConfigManager.get_settings()
    assert settings.min_length == 14
    assert settings.locale == "tr"
    assert settings.random_seed == 7


def test_config_defaults(monkeypatch):
    for name in ("PASSMETER_MIN_LENGTH", "PASSMETER_LOCALE", "PASSMETER_RANDOM_SEED", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    settings = ConfigManager.get_settings()
    assert settings.min_length == 12
    assert settings.locale == "en"
    assert settings.random_seed is None
    assert not settings.debug


def test_invalid_config_raises_runtime_error(monkeypatch):
    monkeypatch.setenv("PASSMETER_MIN_LENGTH", "0")
    with pytest.raises(RuntimeError, match="Invalid PassMeter configuration"):
        ConfigManager.get_settings()


def test_setup_logging_is_idempotent():
    setup_logging()
    setup_logging()
    handlers = [
        h for h in logging.getLogger("passmeter").handlers
        if getattr(h, "_passmeter_handler", False)
    ]
    assert len(handlers) == 1
