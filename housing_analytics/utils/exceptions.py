"""Custom exceptions for housing analytics."""


class HousingAnalyticsError(Exception):
    """Base exception for housing analytics package."""
    pass


class ConfigurationError(HousingAnalyticsError, ValueError):
    """Raised when the engine or settings are configured incorrectly."""
    pass


class InvalidArgumentError(HousingAnalyticsError, ValueError):
    """Raised when a required argument is missing."""
    pass


class DataSourceError(HousingAnalyticsError, OSError):
    """Raised when an input file cannot be read or parsed."""
    pass
