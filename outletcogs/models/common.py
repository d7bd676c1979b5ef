"""Common types used across the COGS engine."""

from enum import Enum

# ============================================================================
# Status Enums
# ============================================================================

class CogsStatus(str, Enum):
    """Daily COGS status against the adjusted target."""
    WITHIN_TARGET = "WITHIN TARGET"
    OVER_TARGET = "OVER TARGET"


class TrendDirection(str, Enum):
    """COGS percentage trend direction."""
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


def clean_outlet_name(value: str) -> str:
    """Strip an outlet name, rejecting names that are blank."""
    name = value.strip()
    if not name:
        raise ValueError("Outlet name must not be blank")
    return name
