"""Population totals."""

import logging
from typing import Mapping, Optional

from ..utils.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class PopulationProcessor:
    """Aggregates ZIP-level population counts."""
    
    def __init__(self, populations: Mapping[int, Optional[int]]):
        if populations is None:
            raise InvalidArgumentError("Population map must not be None.")
        self.populations = populations
    
    def total_population(self) -> int:
        """Sum of all ZIP populations, skipping missing values."""
        total = 0
        for zip_code, population in self.populations.items():
            if population is None:
                logger.warning(f"ZIP code {zip_code} has a null population value")
                continue
            total += int(population)
        return total
