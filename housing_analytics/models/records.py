"""Record types shared by the readers, the engine and the processors."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class PropertyRecord:
    """One residential property as read from the properties file.
    
    Attributes:
        zip_code: 5-digit ZIP code, or None when the source had none
        market_value: Assessed market value, positive or None
        total_livable_area: Livable area in square feet, positive or None
    """
    
    zip_code: Optional[int]
    market_value: Optional[int] = None
    total_livable_area: Optional[int] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary representation."""
        return {
            'zip_code': self.zip_code,
            'market_value': self.market_value,
            'total_livable_area': self.total_livable_area
        }


@dataclass(frozen=True)
class ParkingViolation:
    """One parking ticket."""
    
    ticket_number: Optional[str]
    plate_id: Optional[str]
    date: Optional[str]
    zip_code: Optional[int]
    violation: Optional[str]
    fine: int
    state: Optional[str]


@dataclass(frozen=True)
class PropertyValueSummary:
    """Minimum, maximum and median market value for one ZIP code.
    
    The all-zero summary means "no data". A ZIP whose valid values really
    were all zero cannot be told apart from it; since only positive values
    count as valid this cannot happen with data from the readers.
    """
    
    min: int
    max: int
    median: int
    
    @classmethod
    def empty(cls) -> "PropertyValueSummary":
        return cls(0, 0, 0)
    
    @property
    def is_empty(self) -> bool:
        return self.min == 0 and self.max == 0 and self.median == 0
    
    def __str__(self) -> str:
        return f"Min: {self.min}, Max: {self.max}, Median: {self.median}"


class StatisticKind(Enum):
    """Statistics the engine can compute for a ZIP code."""
    AVERAGE_MARKET_VALUE = "avg_market"
    AVERAGE_LIVABLE_AREA = "avg_livable"
    MARKET_VALUE_PER_CAPITA = "market_per_capita"
    PROPERTY_VALUE_SUMMARY = "property_summary"
