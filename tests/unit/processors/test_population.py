"""Unit tests for population totals."""

import pytest

from housing_analytics.processors.population import PopulationProcessor
from housing_analytics.utils.exceptions import InvalidArgumentError


class TestPopulationProcessor:
    """Test PopulationProcessor functionality."""
    
    def test_total_population(self, sample_populations):
        assert PopulationProcessor(sample_populations).total_population() == 1500
        
    def test_empty(self):
        assert PopulationProcessor({}).total_population() == 0
        
    def test_skips_missing_values(self):
        processor = PopulationProcessor({19104: 1000, 19103: None})
        assert processor.total_population() == 1000
        
    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError):
            PopulationProcessor(None)
