"""
Random password generation.

Every generated password carries at least one lowercase letter, one
uppercase letter, one digit and two special characters, so at the default
length it always classifies as Ultra Strong.

The default random source is a plain (non-cryptographic) random.Random.
Pass ``rng`` to seed it for reproducible output, or a random.SystemRandom
when unpredictability matters.
"""
import logging
import random
import string
from typing import Optional

from passmeter.core.strength import MIN_LENGTH, SPECIAL_CHARS

logger = logging.getLogger("passmeter.generator")

LOWER_CHARS = string.ascii_lowercase
UPPER_CHARS = string.ascii_uppercase
DIGIT_CHARS = string.digits
ALL_CHARS = LOWER_CHARS + UPPER_CHARS + DIGIT_CHARS + SPECIAL_CHARS

# One draw per pool; specials appear twice to guarantee two of them.
REQUIRED_POOLS = (LOWER_CHARS, UPPER_CHARS, DIGIT_CHARS, SPECIAL_CHARS, SPECIAL_CHARS)

_default_rng = random.Random()


def generate_password(length: int = MIN_LENGTH, rng: Optional[random.Random] = None) -> str:
    """
    Generate a random password of exactly ``length`` characters.

    Raises:
        ValueError: if ``length`` cannot hold the required characters.
    """
    if length < len(REQUIRED_POOLS):
        raise ValueError(
            f"Password length must be at least {len(REQUIRED_POOLS)} "
            f"to fit the required character classes (got {length})."
        )
    if rng is None:
        rng = _default_rng

    chars = [rng.choice(pool) for pool in REQUIRED_POOLS]
    chars.extend(rng.choice(ALL_CHARS) for _ in range(length - len(chars)))
    # random.shuffle is a Fisher-Yates shuffle
    rng.shuffle(chars)

    logger.debug("Generated password of length %d", length)
    return "".join(chars)
