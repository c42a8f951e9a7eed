"""Population and parking violation statistics."""

from .population import PopulationProcessor
from .violations import ParkingViolationProcessor, ViolationTypeCount

__all__ = [
    "PopulationProcessor",
    "ParkingViolationProcessor",
    "ViolationTypeCount"
]
