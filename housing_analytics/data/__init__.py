"""Data loading module for housing analytics."""

from .schemas import (
    property_schema,
    population_schema,
    violation_schema,
    validate_properties,
    validate_populations,
    validate_violations
)
from .loaders import (
    load_properties,
    load_populations,
    load_violations,
    extract_zip_codes,
    parse_positive_integers
)
from .sources import (
    RecordSource,
    PopulationSource,
    PropertyFileSource,
    PopulationFileSource,
    InMemoryRecordSource,
    InMemoryPopulationSource
)

__all__ = [
    "property_schema",
    "population_schema",
    "violation_schema",
    "validate_properties",
    "validate_populations",
    "validate_violations",
    "load_properties",
    "load_populations",
    "load_violations",
    "extract_zip_codes",
    "parse_positive_integers",
    "RecordSource",
    "PopulationSource",
    "PropertyFileSource",
    "PopulationFileSource",
    "InMemoryRecordSource",
    "InMemoryPopulationSource"
]
