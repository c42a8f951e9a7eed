"""Unit tests for per-ZIP statistics."""

import pytest
import numpy as np
from hypothesis import given, strategies as st

from housing_analytics.aggregation.statistics import (
    round_half_away_from_zero, valid_values, average_of, average_market_value,
    average_livable_area, market_value_per_capita, median_of_sorted,
    property_value_summary
)
from housing_analytics.models.records import PropertyRecord, PropertyValueSummary


class TestRounding:
    """Test half-away-from-zero rounding."""
    
    def test_exact_quotient(self):
        assert round_half_away_from_zero(10, 2) == 5
        
    def test_ties_round_up(self):
        assert round_half_away_from_zero(5, 2) == 3
        assert round_half_away_from_zero(250001, 2) == 125001
        
    def test_below_half_rounds_down(self):
        assert round_half_away_from_zero(10, 3) == 3
        
    def test_above_half_rounds_up(self):
        assert round_half_away_from_zero(20, 3) == 7
        
    def test_negative_ties_round_away(self):
        assert round_half_away_from_zero(-5, 2) == -3
        assert round_half_away_from_zero(5, -2) == -3
        
    def test_zero_denominator(self):
        with pytest.raises(ZeroDivisionError):
            round_half_away_from_zero(1, 0)
            
    def test_large_sums_keep_precision(self):
        # Beyond float precision
        big = 2 ** 60 + 1
        assert round_half_away_from_zero(big * 2 + 1, 2) == big + 1
        
    @given(st.integers(min_value=0, max_value=10 ** 12),
           st.integers(min_value=1, max_value=10 ** 6))
    def test_within_half_of_true_quotient(self, numerator, denominator):
        result = round_half_away_from_zero(numerator, denominator)
        assert abs(2 * (result * denominator - numerator)) <= denominator


class TestValidValues:
    """Test extraction of usable values."""
    
    def test_skips_missing_and_non_positive(self):
        records = [
            PropertyRecord(19104, 300),
            PropertyRecord(19104, None),
            PropertyRecord(19104, 0),
            PropertyRecord(19104, -5),
            None,
            PropertyRecord(19104, 100)
        ]
        
        values = valid_values(records, "market_value")
        np.testing.assert_array_equal(values, [100, 300])
        assert values.dtype == np.int64
        
    def test_empty(self):
        assert valid_values([], "market_value").size == 0


class TestAverages:
    """Test rounded averages."""
    
    def test_average_market_value(self, sample_records):
        records_19104 = [r for r in sample_records if r.zip_code == 19104]
        assert average_market_value(records_19104) == 200000
        
    def test_average_livable_area_skips_missing(self):
        records = [
            PropertyRecord(19103, 150000, 1200),
            PropertyRecord(19103, 250000, None),
            PropertyRecord(19103, 250000, 1301)
        ]
        # 2501 / 2 = 1250.5
        assert average_livable_area(records) == 1251
        
    def test_average_with_no_valid_values(self):
        records = [PropertyRecord(19106, None, 900), PropertyRecord(19106, 0, 900)]
        assert average_market_value(records) == 0
        assert average_of([], "total_livable_area") == 0
        
    def test_single_value(self):
        assert average_market_value([PropertyRecord(19104, 123456)]) == 123456


class TestMarketValuePerCapita:
    """Test market value per resident."""
    
    def test_per_capita(self, sample_records):
        records_19104 = [r for r in sample_records if r.zip_code == 19104]
        assert market_value_per_capita(records_19104, 1000) == 600
        
    def test_rounds_half_up(self):
        records = [PropertyRecord(19104, 5)]
        assert market_value_per_capita(records, 2) == 3
        
    def test_zero_or_missing_population(self):
        records = [PropertyRecord(19104, 100000)]
        assert market_value_per_capita(records, 0) == 0
        assert market_value_per_capita(records, None) == 0
        
    def test_no_valid_values(self):
        assert market_value_per_capita([PropertyRecord(19104, None)], 100) == 0


class TestPropertyValueSummary:
    """Test min, max and median."""
    
    def test_odd_count(self, sample_records):
        records_19104 = [r for r in sample_records if r.zip_code == 19104]
        summary = property_value_summary(records_19104)
        assert summary == PropertyValueSummary(100000, 300000, 200000)
        
    def test_even_count_rounds_mean(self):
        records = [PropertyRecord(19103, v) for v in (300, 100, 200, 401)]
        summary = property_value_summary(records)
        assert summary.min == 100
        assert summary.max == 401
        # (200 + 300) / 2
        assert summary.median == 250
        
    def test_even_count_tie(self):
        assert median_of_sorted(np.array([1, 2])) == 2
        
    def test_single_value(self):
        summary = property_value_summary([PropertyRecord(19104, 42)])
        assert summary == PropertyValueSummary(42, 42, 42)
        
    def test_no_data(self):
        summary = property_value_summary([PropertyRecord(19104, None, 100)])
        assert summary == PropertyValueSummary.empty()
        assert summary.is_empty
        
    def test_str(self):
        assert str(PropertyValueSummary(1, 3, 2)) == "Min: 1, Max: 3, Median: 2"
