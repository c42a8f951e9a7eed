"""
Housing Analytics: ZIP-level statistics over Philadelphia property data

This package indexes residential property records by ZIP code and answers
memoized queries (average market value, average livable area, market value
per capita, min/max/median value), alongside population totals and parking
violation statistics.
"""

__version__ = "0.1.0"
__author__ = "Housing Analytics Team"

from .config import constants
from .models import PropertyRecord, PropertyValueSummary, StatisticKind
from .engine import HousingEngine, acquire, reset

__all__ = [
    "constants",
    "PropertyRecord",
    "PropertyValueSummary",
    "StatisticKind",
    "HousingEngine",
    "acquire",
    "reset"
]
