"""
This module defines upstream codes and constants for the application.
"""

from enum import Enum
from typing import Dict


class DayPartCode(str, Enum):
    """Part-of-day codes reported by the weather upstream."""

    DAY = "d"
    NIGHT = "n"


DAY_PART_NAMES: Dict[str, str] = {
    DayPartCode.DAY.value: "day",
    DayPartCode.NIGHT.value: "night",
}

# Highest cloud coverage (percent) at which the station counts as visible.
MAX_VISIBLE_CLOUD_COVERAGE = 30
