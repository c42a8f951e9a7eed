"""Shared housing analytics engine.

One ``HousingEngine`` serves a whole run. ``acquire`` creates it on the first
call and returns the same object afterwards; ``reset`` discards it so the
next ``acquire`` starts fresh (tests rely on this).
"""

import logging
import threading
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Union

from .batch import BatchCoordinator
from .cache import StatisticCache
from .index import RecordIndex
from ..aggregation import statistics
from ..data.sources import RecordSource, PopulationSource
from ..models.records import PropertyRecord, PropertyValueSummary, StatisticKind
from ..utils.exceptions import ConfigurationError, InvalidArgumentError

logger = logging.getLogger(__name__)

RecordPredicate = Callable[[PropertyRecord], bool]


class HousingEngine:
    """Memoizing per-ZIP statistics over property and population data.
    
    Every query checks the statistic cache, falls back to the record index,
    aggregates, and caches the result. I/O failures from either source are
    logged and turned into the "no data" result for that query.
    
    The index and cache assume the sources never change; call
    ``clear_cache`` after the underlying data does.
    """
    
    def __init__(self,
                 record_source: RecordSource,
                 population_source: PopulationSource,
                 max_workers: Optional[int] = None):
        """Initialize housing engine.
        
        Args:
            record_source: Provider of all property records
            population_source: Provider of the ZIP to population mapping
            max_workers: Thread pool size for batch queries (default: CPU count)
        """
        _require_sources(record_source, population_source)
        
        self.record_source = record_source
        self.population_source = population_source
        self.max_workers = max_workers
        self.index = RecordIndex(record_source)
        self.cache = StatisticCache()
        
        self._strategies: Dict[StatisticKind, Callable[[int], Union[int, PropertyValueSummary]]] = {
            StatisticKind.AVERAGE_MARKET_VALUE: self.average_market_value,
            StatisticKind.AVERAGE_LIVABLE_AREA: self.average_livable_area,
            StatisticKind.MARKET_VALUE_PER_CAPITA: self.market_value_per_capita,
            StatisticKind.PROPERTY_VALUE_SUMMARY: self.property_value_summary
        }
    
    def average_market_value(self, zip_code: int) -> int:
        """Average residential market value for a ZIP code (0 if no data)."""
        return self.cache.get_or_compute(
            (StatisticKind.AVERAGE_MARKET_VALUE, zip_code),
            lambda: statistics.average_market_value(self.index.records_for_zip(zip_code))
        )
    
    def average_livable_area(self, zip_code: int) -> int:
        """Average total livable area for a ZIP code (0 if no data)."""
        return self.cache.get_or_compute(
            (StatisticKind.AVERAGE_LIVABLE_AREA, zip_code),
            lambda: statistics.average_livable_area(self.index.records_for_zip(zip_code))
        )
    
    def market_value_per_capita(self, zip_code: int) -> int:
        """Total residential market value per resident (0 if no data).
        
        The population table is read fresh for every uncached query.
        """
        def compute() -> int:
            population = self._population_for(zip_code)
            if not population:
                return 0
            return statistics.market_value_per_capita(
                self.index.records_for_zip(zip_code), population
            )
        
        return self.cache.get_or_compute(
            (StatisticKind.MARKET_VALUE_PER_CAPITA, zip_code), compute
        )
    
    def property_value_summary(self, zip_code: int) -> PropertyValueSummary:
        """Min, max and median market value (all zero if no data)."""
        return self.cache.get_or_compute(
            (StatisticKind.PROPERTY_VALUE_SUMMARY, zip_code),
            lambda: statistics.property_value_summary(self.index.records_for_zip(zip_code))
        )
    
    def calculate(self,
                  kind: Union[str, StatisticKind],
                  zip_code: int) -> Union[int, PropertyValueSummary]:
        """Compute any supported statistic by kind.
        
        Args:
            kind: StatisticKind or its string value (e.g. "avg_market")
            zip_code: ZIP code to compute
            
        Returns:
            The statistic's value
        """
        if isinstance(kind, str):
            try:
                kind = StatisticKind(kind.lower())
            except ValueError:
                raise ValueError(f"Unknown statistic kind: {kind}")
        
        return self._strategies[kind](zip_code)
    
    def record_iterator(self, zip_code: int) -> Iterator[PropertyRecord]:
        """Iterate over the property records located in a ZIP code."""
        return iter(self.index.records_for_zip(zip_code))
    
    def filter_records(self,
                       records: Iterable[PropertyRecord],
                       predicates: Sequence[RecordPredicate]) -> List[PropertyRecord]:
        """Keep the records that satisfy every predicate.
        
        Predicates are applied in order. An empty sequence keeps everything.
        
        Args:
            records: Records to filter
            predicates: Functions taking a record and returning a bool
            
        Returns:
            List of records passing all predicates
        """
        if records is None:
            raise InvalidArgumentError("Records must not be None.")
        if predicates is None:
            raise InvalidArgumentError("Predicates must not be None.")
        
        predicates = list(predicates)
        if any(predicate is None for predicate in predicates):
            raise InvalidArgumentError("Predicates must not contain None.")
        
        filtered = list(records)
        for predicate in predicates:
            filtered = [record for record in filtered if predicate(record)]
        return filtered
    
    def compute_average_market_values_parallel(self,
                                               zip_codes: Iterable[int]) -> Dict[int, int]:
        """Average market value for many ZIP codes, computed concurrently.
        
        Each ZIP still goes through the cache and index, so results match
        ``average_market_value``.
        
        Args:
            zip_codes: ZIP codes to compute
            
        Returns:
            Dictionary mapping each distinct ZIP code to its average
        """
        coordinator = BatchCoordinator(self.average_market_value, self.max_workers)
        return coordinator.run(zip_codes)
    
    def clear_cache(self) -> None:
        """Forget every computed statistic and indexed ZIP slice."""
        self.cache.clear()
        self.index.clear()
        logger.info("Cleared statistic cache and record index")
    
    def _population_for(self, zip_code: int) -> Optional[int]:
        try:
            populations = self.population_source.read_populations()
        except OSError as e:
            logger.warning(f"Could not read populations for ZIP {zip_code}: {e}")
            return None
        
        if not populations:
            return None
        return populations.get(zip_code)


_engine: Optional[HousingEngine] = None
_engine_lock = threading.Lock()


def acquire(record_source: RecordSource,
            population_source: PopulationSource,
            max_workers: Optional[int] = None) -> HousingEngine:
    """Return the shared engine, creating it on first use.
    
    Once the engine exists, the arguments of later calls are ignored;
    construction is not reconfigurable without ``reset``.
    
    Args:
        record_source: Provider of all property records
        population_source: Provider of the ZIP to population mapping
        max_workers: Thread pool size for batch queries
        
    Returns:
        The shared HousingEngine
        
    Raises:
        ConfigurationError: If either source is None
    """
    global _engine
    _require_sources(record_source, population_source)
    
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = HousingEngine(record_source, population_source, max_workers)
                logger.info("Created shared housing engine")
                return _engine
    
    logger.debug("Shared housing engine already exists; ignoring new sources")
    return _engine


def reset() -> None:
    """Discard the shared engine (for testing)."""
    global _engine
    with _engine_lock:
        _engine = None


def current_engine() -> Optional[HousingEngine]:
    """Return the shared engine if one has been acquired."""
    return _engine


def _require_sources(record_source: Optional[RecordSource],
                     population_source: Optional[PopulationSource]) -> None:
    if record_source is None:
        raise ConfigurationError("Record source must not be None.")
    if population_source is None:
        raise ConfigurationError("Population source must not be None.")
