"""Housing analytics engine: record index, statistic cache, batch and facade."""

from .cache import StatisticCache
from .index import RecordIndex
from .batch import BatchCoordinator
from .facade import HousingEngine, acquire, reset, current_engine

__all__ = [
    "StatisticCache",
    "RecordIndex",
    "BatchCoordinator",
    "HousingEngine",
    "acquire",
    "reset",
    "current_engine"
]
