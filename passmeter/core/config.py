import os
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

from passmeter.core.generator import REQUIRED_POOLS
from passmeter.core.messages import CATALOGS
from passmeter.core.strength import MIN_LENGTH


class SettingsModel(BaseModel):
    min_length: int = MIN_LENGTH
    locale: str = "en"
    random_seed: Optional[int] = None
    debug: bool = False

    @field_validator("min_length")
    @classmethod
    def validate_min_length(cls, v):
        if v < len(REQUIRED_POOLS):
            raise ValueError(
                f"min_length must be at least {len(REQUIRED_POOLS)} so generated "
                f"passwords can hold every required character class"
            )
        return v

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v):
        if v.lower() not in CATALOGS:
            raise ValueError(f"Unsupported locale '{v}'. Allowed: {sorted(CATALOGS)}")
        return v.lower()


class ConfigManager:
    @staticmethod
    def get_settings() -> SettingsModel:
        seed = os.environ.get("PASSMETER_RANDOM_SEED", "")
        try:
            return SettingsModel(
                min_length=os.environ.get("PASSMETER_MIN_LENGTH", str(MIN_LENGTH)),
                locale=os.environ.get("PASSMETER_LOCALE", "en"),
                random_seed=seed or None,
                debug=os.environ.get("DEBUG", "false").lower() == "true",
            )
        except ValidationError as exc:
            raise RuntimeError(f"Invalid PassMeter configuration: {exc}") from exc


config = ConfigManager()
