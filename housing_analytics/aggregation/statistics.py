"""Per-ZIP statistics over property records.

Every function here is pure: it looks only at the records (and population)
it is given. Only strictly positive, present values are valid; a subset with
no valid values yields 0, or the all-zero summary.
"""

from typing import Iterable, Optional

import numpy as np

from ..models.records import PropertyRecord, PropertyValueSummary

MARKET_VALUE = "market_value"
LIVABLE_AREA = "total_livable_area"


def round_half_away_from_zero(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest integer, ties away from zero.
    
    Works on the exact rational value, so large sums do not lose precision
    before rounding.
    
    Args:
        numerator: Dividend
        denominator: Non-zero divisor
        
    Returns:
        Rounded quotient
    """
    if denominator == 0:
        raise ZeroDivisionError("denominator must be non-zero")
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    
    quotient, remainder = divmod(abs(numerator), denominator)
    if 2 * remainder >= denominator:
        quotient += 1
    return quotient if numerator >= 0 else -quotient


def valid_values(records: Iterable[Optional[PropertyRecord]], field: str) -> np.ndarray:
    """Sorted positive values of one record field.
    
    Args:
        records: Property records; None entries are skipped
        field: Attribute name, e.g. ``"market_value"``
        
    Returns:
        Ascending int64 array of the present, strictly positive values
    """
    values = [
        value for value in (
            getattr(record, field) for record in records if record is not None
        )
        if value is not None and value > 0
    ]
    return np.sort(np.asarray(values, dtype=np.int64))


def average_of(records: Iterable[Optional[PropertyRecord]], field: str) -> int:
    """Rounded mean of the valid values of ``field``, 0 if there are none."""
    values = valid_values(records, field)
    if values.size == 0:
        return 0
    return round_half_away_from_zero(_exact_sum(values), int(values.size))


def average_market_value(records: Iterable[Optional[PropertyRecord]]) -> int:
    """Average residential market value."""
    return average_of(records, MARKET_VALUE)


def average_livable_area(records: Iterable[Optional[PropertyRecord]]) -> int:
    """Average total livable area."""
    return average_of(records, LIVABLE_AREA)


def market_value_per_capita(
    records: Iterable[Optional[PropertyRecord]],
    population: Optional[int]
) -> int:
    """Total valid market value divided by population.
    
    Args:
        records: Property records for one ZIP code
        population: Residents of that ZIP code; None or 0 yields 0
        
    Returns:
        Rounded market value per resident
    """
    if not population:
        return 0
    
    values = valid_values(records, MARKET_VALUE)
    return round_half_away_from_zero(_exact_sum(values), int(population))


def _exact_sum(values: np.ndarray) -> int:
    return sum(int(value) for value in values)


def median_of_sorted(values: np.ndarray) -> int:
    """Median of an ascending, non-empty array.
    
    Odd counts take the middle element; even counts take the rounded mean of
    the two middle elements.
    """
    size = int(values.size)
    middle = size // 2
    if size % 2 == 1:
        return int(values[middle])
    return round_half_away_from_zero(int(values[middle - 1]) + int(values[middle]), 2)


def property_value_summary(
    records: Iterable[Optional[PropertyRecord]]
) -> PropertyValueSummary:
    """Minimum, maximum and median market value.
    
    Returns the all-zero summary when no record has a valid market value.
    """
    values = valid_values(records, MARKET_VALUE)
    if values.size == 0:
        return PropertyValueSummary.empty()
    
    return PropertyValueSummary(
        min=int(values[0]),
        max=int(values[-1]),
        median=median_of_sorted(values)
    )
