"""Shared utilities for housing analytics."""

from .exceptions import (
    HousingAnalyticsError,
    ConfigurationError,
    InvalidArgumentError,
    DataSourceError
)

__all__ = [
    "HousingAnalyticsError",
    "ConfigurationError",
    "InvalidArgumentError",
    "DataSourceError"
]
