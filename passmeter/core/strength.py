"""
Password strength classification for PassMeter.

Design principles:
- Six independent criteria: length, uppercase, lowercase, digit,
  special character, and at least two special characters
- Score is the number of the first five criteria met (0-5)
- The verdict is a total function of the criteria: every string,
  including the empty one, maps to exactly one tier
- Character classes are ASCII only ("Ş" is neither upper nor lower)
- Raw passwords are NEVER logged
"""
import logging
import string
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from passmeter.core.messages import DEFAULT_CATALOG

logger = logging.getLogger("passmeter.strength")

MIN_LENGTH = 12
SPECIAL_CHARS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)
_DIGITS = frozenset(string.digits)
_SPECIALS = frozenset(SPECIAL_CHARS)


class StrengthLevel(str, Enum):
    VERY_WEAK = "very_weak"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very_strong"
    ULTRA_STRONG = "ultra_strong"


# level -> (label, percentage, color)
TIERS: Dict[StrengthLevel, Tuple[str, int, str]] = {
    StrengthLevel.VERY_WEAK: ("Very Weak", 20, "#dc3545"),
    StrengthLevel.WEAK: ("Weak", 40, "#fd7e14"),
    StrengthLevel.MEDIUM: ("Medium", 60, "#ffc107"),
    StrengthLevel.STRONG: ("Strong", 80, "lightgreen"),
    StrengthLevel.VERY_STRONG: ("Very Strong", 90, "#28a745"),
    StrengthLevel.ULTRA_STRONG: ("Ultra Strong", 100, "#007f00"),
}

_LEVEL_BY_SCORE = {
    0: StrengthLevel.VERY_WEAK,
    1: StrengthLevel.VERY_WEAK,
    2: StrengthLevel.WEAK,
    3: StrengthLevel.MEDIUM,
    4: StrengthLevel.STRONG,
    5: StrengthLevel.VERY_STRONG,
}

# Order in which unmet criteria are reported to the user.
CRITERIA_ORDER = ("length", "lower", "upper", "digit", "special")


class CriteriaResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_min_length: bool
    has_upper: bool
    has_lower: bool
    has_digit: bool
    has_special: bool
    has_two_specials: bool

    @property
    def score(self) -> int:
        return sum((
            self.has_min_length,
            self.has_upper,
            self.has_lower,
            self.has_digit,
            self.has_special,
        ))


class StrengthVerdict(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: StrengthLevel
    label: str
    percentage: int
    color: str
    criteria: CriteriaResult


def count_specials(password: str) -> int:
    """Number of special characters in *password*; repeats count separately."""
    return sum(1 for ch in password if ch in _SPECIALS)


def evaluate_criteria(password: str, min_length: int = MIN_LENGTH) -> CriteriaResult:
    specials = count_specials(password)
    return CriteriaResult(
        has_min_length=len(password) >= min_length,
        has_upper=any(ch in _UPPER for ch in password),
        has_lower=any(ch in _LOWER for ch in password),
        has_digit=any(ch in _DIGITS for ch in password),
        has_special=specials >= 1,
        has_two_specials=specials >= 2,
    )


def classify(password: str, min_length: int = MIN_LENGTH) -> StrengthVerdict:
    """
    Classify a candidate password into one of the six strength tiers.

    Defined for every string. The empty string scores 0 and lands in the
    "Very Weak" tier at 20%; showing an empty meter for empty input is the
    caller's job (see StrengthMeter.update).
    """
    criteria = evaluate_criteria(password, min_length)
    score = criteria.score

    if score == 5 and criteria.has_two_specials:
        level = StrengthLevel.ULTRA_STRONG
    else:
        level = _LEVEL_BY_SCORE[score]

    label, percentage, color = TIERS[level]
    logger.debug("Classified candidate of length %d as %s", len(password), level.value)
    return StrengthVerdict(
        level=level,
        label=label,
        percentage=percentage,
        color=color,
        criteria=criteria,
    )


def unmet_criteria(criteria: CriteriaResult) -> List[str]:
    met = {
        "length": criteria.has_min_length,
        "lower": criteria.has_lower,
        "upper": criteria.has_upper,
        "digit": criteria.has_digit,
        "special": criteria.has_special,
    }
    return [key for key in CRITERIA_ORDER if not met[key]]


def feedback_message(
    verdict: StrengthVerdict,
    catalog: Optional[dict] = None,
    min_length: int = MIN_LENGTH,
) -> str:
    """
    Build the user-facing feedback text for a verdict.

    The two top tiers get a single sentence. Every other tier has at least
    one unmet base criterion, so the result is a header followed by one
    line per unmet criterion.
    """
    catalog = catalog or DEFAULT_CATALOG

    if verdict.level is StrengthLevel.ULTRA_STRONG:
        return catalog["feedback_ultra"]
    if verdict.level is StrengthLevel.VERY_STRONG:
        return catalog["feedback_very_strong"]

    lines = [catalog["feedback_header"]]
    for key in unmet_criteria(verdict.criteria):
        lines.append(catalog["criteria"][key].format(min_length=min_length))
    return "\n".join(lines)
