"""Parallel computation of one statistic across many ZIP codes."""

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, Iterable, Optional

from ..utils.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class BatchCoordinator:
    """Runs a per-ZIP computation on a bounded, per-call thread pool.
    
    A unit that raises is logged and recorded as 0; the rest of the batch
    carries on. Nothing is cancelled and there is no timeout, so a unit that
    never returns blocks ``run`` forever.
    """
    
    def __init__(self,
                 compute: Callable[[int], int],
                 max_workers: Optional[int] = None):
        """Initialize batch coordinator.
        
        Args:
            compute: Function computing the statistic for one ZIP code
            max_workers: Pool size (defaults to the number of CPUs)
        """
        self.compute = compute
        self.max_workers = max_workers or os.cpu_count() or 1
    
    def run(self, zip_codes: Iterable[int]) -> Dict[int, int]:
        """Compute the statistic for every ZIP code and wait for all of them.
        
        Args:
            zip_codes: ZIP codes to compute; duplicates are computed independently
            
        Returns:
            Dictionary mapping each distinct ZIP code to its result
        """
        if zip_codes is None:
            raise InvalidArgumentError("ZIP codes must not be None.")
        
        zip_codes = list(zip_codes)
        if not zip_codes:
            return {}
        
        logger.info(
            f"Computing {len(zip_codes):,} ZIP codes with {self.max_workers} workers"
        )
        
        results: Dict[int, int] = {}
        with ThreadPoolExecutor(max_workers=self.max_workers,
                                thread_name_prefix="zip-batch") as executor:
            futures = {
                executor.submit(self.compute, zip_code): zip_code
                for zip_code in zip_codes
            }
            
            for future in as_completed(futures):
                zip_code = futures[future]
                try:
                    results[zip_code] = future.result()
                except Exception as e:
                    logger.error(f"Failed to compute ZIP {zip_code}: {e}")
                    results.setdefault(zip_code, 0)
        
        return results
