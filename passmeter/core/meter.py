"""
Display state for the strength meter.

StrengthMeter turns classifier verdicts into what the page shows: the tier
label and its color, the bar width and color, the percentage line and the
feedback text. Everything it needs (threshold, message catalog, random
source) is handed to it at construction.
"""
import logging
import random
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from passmeter.core.config import SettingsModel
from passmeter.core.generator import generate_password
from passmeter.core.messages import get_catalog
from passmeter.core.strength import StrengthVerdict, classify, feedback_message

logger = logging.getLogger("passmeter.meter")

TRACK_COLOR = "#e9ecef"


class MeterState(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    text_color: str
    percentage: int
    bar_width: str
    bar_color: str
    track_color: str = TRACK_COLOR
    percentage_text: str
    feedback: str


class StrengthMeter:
    def __init__(self, settings: SettingsModel, rng: Optional[random.Random] = None):
        self.min_length = settings.min_length
        self.locale = settings.locale
        self.catalog = get_catalog(settings.locale)
        if rng is None:
            rng = random.Random(settings.random_seed)
        self.rng = rng

    def idle(self) -> MeterState:
        """State shown before any input and whenever the input is blank."""
        return MeterState(
            text="",
            text_color="",
            percentage=0,
            bar_width="0%",
            bar_color=TRACK_COLOR,
            percentage_text="",
            feedback=self.catalog["idle_prompt"],
        )

    def render(self, verdict: StrengthVerdict) -> MeterState:
        return MeterState(
            text=self.catalog["labels"][verdict.level.value],
            text_color=verdict.color,
            percentage=verdict.percentage,
            bar_width=f"{verdict.percentage}%",
            bar_color=verdict.color,
            percentage_text=f"{self.catalog['percentage_prefix']}: {verdict.percentage}%",
            feedback=feedback_message(verdict, self.catalog, self.min_length),
        )

    def evaluate(self, password: str) -> Tuple[Optional[StrengthVerdict], MeterState]:
        if password.strip() == "":
            return None, self.idle()
        verdict = classify(password, self.min_length)
        return verdict, self.render(verdict)

    def update(self, password: str) -> MeterState:
        return self.evaluate(password)[1]

    def generate(self) -> Tuple[str, MeterState]:
        """Generate a password and the display state it produces."""
        password = generate_password(self.min_length, self.rng)
        logger.info("Generated a new password suggestion")
        return password, self.update(password)
