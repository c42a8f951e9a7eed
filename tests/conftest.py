"""Shared fixtures for housing analytics tests."""

import threading
from typing import Dict, List, Optional

import pytest

from housing_analytics.engine import facade
from housing_analytics.models.records import PropertyRecord, ParkingViolation
from housing_analytics.utils.exceptions import DataSourceError


class CountingRecordSource:
    """Record source that counts how often it is read."""
    
    def __init__(self, records: Optional[List[PropertyRecord]]):
        self.records = records
        self.calls = 0
        self._lock = threading.Lock()
    
    def read_records(self):
        with self._lock:
            self.calls += 1
        return self.records


class CountingPopulationSource:
    """Population source that counts how often it is read."""
    
    def __init__(self, populations: Optional[Dict[int, int]]):
        self.populations = populations
        self.calls = 0
    
    def read_populations(self):
        self.calls += 1
        return self.populations


class FailingRecordSource:
    """Record source whose file can never be read."""
    
    def read_records(self):
        raise DataSourceError("properties file is unreadable")


class FailingPopulationSource:
    """Population source whose file can never be read."""
    
    def read_populations(self):
        raise IOError("population file is unreadable")


@pytest.fixture(autouse=True)
def reset_engine():
    """Give every test a fresh shared engine."""
    facade.reset()
    yield
    facade.reset()


@pytest.fixture
def sample_records():
    """Three properties in 19104, two in 19103 and a few unusable rows."""
    return [
        PropertyRecord(19104, 100000, 1000),
        PropertyRecord(19104, 200000, 2000),
        PropertyRecord(19104, 300000, 3000),
        PropertyRecord(19103, 150000, 1200),
        PropertyRecord(19103, 250000, None),
        PropertyRecord(19106, None, 900),
        PropertyRecord(None, 500000, 5000),
    ]


@pytest.fixture
def sample_populations():
    return {19104: 1000, 19103: 500, 19106: 0}


@pytest.fixture
def record_source(sample_records):
    return CountingRecordSource(sample_records)


@pytest.fixture
def population_source(sample_populations):
    return CountingPopulationSource(sample_populations)


@pytest.fixture
def make_record_source():
    """Factory for counting record sources over arbitrary records."""
    return CountingRecordSource


@pytest.fixture
def make_population_source():
    """Factory for counting population sources over arbitrary mappings."""
    return CountingPopulationSource


@pytest.fixture
def failing_record_source():
    return FailingRecordSource()


@pytest.fixture
def failing_population_source():
    return FailingPopulationSource()


@pytest.fixture
def engine(record_source, population_source):
    """The shared engine over the sample records and populations."""
    return facade.acquire(record_source, population_source)


@pytest.fixture
def sample_violations():
    return [
        ParkingViolation("T001", "ABC123", "2024-01-01T10:00:00Z", 19104, "METER EXPIRED", 50, "PA"),
        ParkingViolation("T002", "DEF456", "2024-01-02T11:00:00Z", 19104, "METER EXPIRED", 60, "PA"),
        ParkingViolation("T003", "GHI789", "2024-01-03T12:00:00Z", 19104, "DOUBLE PARKED", 40, "PA"),
        ParkingViolation("T004", "JKL012", "2024-01-04T13:00:00Z", 19104, "METER EXPIRED", 100, "NJ"),
        ParkingViolation("T005", "MNO345", "2024-01-05T14:00:00Z", 19103, "BUS ONLY ZONE", 51, "PA"),
        ParkingViolation("T006", "PQR678", "2024-01-06T15:00:00Z", None, "METER EXPIRED", 36, "PA"),
        ParkingViolation("T007", "STU901", "2024-01-07T16:00:00Z", 19106, "FIRE HYDRANT", 76, "PA"),
    ]
