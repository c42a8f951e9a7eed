"""Parking violation statistics by ZIP code."""

from collections import Counter
from dataclasses import dataclass
import logging
from typing import Dict, List, Mapping, Optional, Sequence

from ..config import constants
from ..models.records import ParkingViolation
from ..utils.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViolationTypeCount:
    """How often one violation type occurs in a ZIP code."""
    
    violation: str
    count: int
    percentage: float


class ParkingViolationProcessor:
    """Fines per capita and violation-type counts over parking tickets."""
    
    def __init__(self,
                 violations: Sequence[ParkingViolation],
                 populations: Mapping[int, int],
                 fines_state: str = constants.DEFAULT_FINES_STATE):
        """Initialize parking violation processor.
        
        Args:
            violations: All parking violations
            populations: ZIP code to population
            fines_state: Plate state whose tickets count toward fines per capita
        """
        if violations is None:
            raise InvalidArgumentError("Violations must not be None.")
        if populations is None:
            raise InvalidArgumentError("Population map must not be None.")
        
        self.violations = violations
        self.populations = populations
        self.fines_state = fines_state
    
    def fines_per_capita(self) -> Dict[int, float]:
        """Total fines per resident for each ZIP code.
        
        Only tickets with a ZIP code and a plate from ``fines_state`` count.
        ZIP codes with no known or zero population, or zero total fines, are
        left out.
        
        Returns:
            Dictionary ordered by ZIP code
        """
        totals: Dict[int, int] = {}
        for violation in self.violations:
            if violation.zip_code is None or violation.state != self.fines_state:
                continue
            totals[violation.zip_code] = totals.get(violation.zip_code, 0) + violation.fine
        
        per_capita = {}
        for zip_code in sorted(totals):
            population = self.populations.get(zip_code)
            if not population or totals[zip_code] == 0:
                continue
            per_capita[zip_code] = totals[zip_code] / population
        
        logger.debug(f"Computed fines per capita for {len(per_capita):,} ZIP codes")
        return per_capita
    
    def violation_types_by_zip(self) -> Dict[int, Dict[str, int]]:
        """Count of each violation type, per ZIP code."""
        by_zip: Dict[int, Counter] = {}
        for violation in self.violations:
            if violation.zip_code is None:
                continue
            by_zip.setdefault(violation.zip_code, Counter())[violation.violation] += 1
        return {zip_code: dict(counts) for zip_code, counts in by_zip.items()}
    
    def violation_types_for_zip(self, zip_code: int) -> Dict[str, int]:
        """Count of each violation type in one ZIP code."""
        counts = Counter(
            violation.violation for violation in self.violations
            if violation.zip_code is not None and violation.zip_code == zip_code
        )
        return dict(counts)
    
    def most_common_violation_type(self, zip_code: int) -> Optional[str]:
        """The most frequent violation type in a ZIP code, or None if it has none.
        
        Ties go to the type seen first.
        """
        counts = Counter(self.violation_types_for_zip(zip_code))
        if not counts:
            return None
        return counts.most_common(1)[0][0]
    
    def top_violation_types(self,
                            zip_code: int,
                            n: int = constants.TOP_VIOLATION_TYPES) -> List[ViolationTypeCount]:
        """The ``n`` most frequent violation types with their share of the ZIP total."""
        counts = Counter(self.violation_types_for_zip(zip_code))
        total = sum(counts.values())
        if total == 0:
            return []
        
        return [
            ViolationTypeCount(
                violation=violation,
                count=count,
                percentage=count / total * 100
            )
            for violation, count in counts.most_common(n)
        ]
