"""
Shared Julian Day helpers used by every calendar converter.
"""

import math
from typing import Tuple

from jdncal.types import JDC, JDN


def truncate(value: float) -> int:
    """Round toward zero (the integer part used by the Meeus formulas)."""
    return math.trunc(value)


def to_jdn(jdc: JDC) -> JDN:
    """Day number of the civil day containing ``jdc``."""
    return math.floor(jdc + 0.5)


def day_of_week(jdc: JDC) -> int:
    """Day of week of ``jdc``: 0 = Sunday .. 6 = Saturday."""
    return math.floor(jdc + 1.5) % 7


def split_daytime(jdc: JDC) -> Tuple[JDN, float]:
    """Split a JDC into its civil day number and the fraction since midnight."""
    jdn = to_jdn(jdc)
    return jdn, jdc + 0.5 - jdn
