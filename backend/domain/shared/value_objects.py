"""
Shared Value Objects used across multiple domains.

Value Objects are immutable objects that describe characteristics of a thing.
Two value objects are equal if all their properties are equal.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum


# =============================================================================
# ENUMERATIONS
# =============================================================================

class ProjectStatus(str, Enum):
    """Status of a project."""
    
    DRAFT = "draft"
    ACTIVE = "active"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ColorTheme(str, Enum):
    """Facility UI theme."""
    
    LIGHT = "light"
    DARK = "dark"


class TimeFormat(str, Enum):
    """Facility clock format."""
    
    H12 = "12h"
    H24 = "24h"


# =============================================================================
# VALUE OBJECTS
# =============================================================================

@dataclass(frozen=True)
class Progress:
    """
    Value object representing completion percentage (0-100).
    """
    
    percent: Decimal = Decimal('0')
    
    def __post_init__(self):
        if self.percent < 0 or self.percent > 100:
            raise ValueError("Progress must be between 0 and 100")
    
    @classmethod
    def from_counts(cls, completed: int, total: int) -> Progress:
        """Build progress from completed/total counts, rounded to 2 places."""
        if total <= 0:
            return cls(Decimal('0'))
        value = Decimal(completed) * 100 / Decimal(total)
        return cls(value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))
    
    @property
    def is_complete(self) -> bool:
        return self.percent >= 100
    
    def __str__(self) -> str:
        return f"{self.percent}%"
