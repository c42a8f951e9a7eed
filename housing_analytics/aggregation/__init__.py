"""Per-ZIP aggregation functions for housing analytics."""

from .statistics import (
    round_half_away_from_zero,
    valid_values,
    average_of,
    average_market_value,
    average_livable_area,
    market_value_per_capita,
    median_of_sorted,
    property_value_summary
)

__all__ = [
    'round_half_away_from_zero',
    'valid_values',
    'average_of',
    'average_market_value',
    'average_livable_area',
    'market_value_per_capita',
    'median_of_sorted',
    'property_value_summary'
]
