"""Record models for housing analytics."""

from .records import (
    PropertyRecord,
    ParkingViolation,
    PropertyValueSummary,
    StatisticKind
)

__all__ = [
    "PropertyRecord",
    "ParkingViolation",
    "PropertyValueSummary",
    "StatisticKind"
]
