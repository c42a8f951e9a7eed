"""Data validation schemas using Pandera for housing analytics."""

import pandas as pd
import pandera.pandas as pa

from ..config import constants


ZIP_CODE_MAX = 10 ** constants.ZIP_CODE_LENGTH - 1


# Property records after ZIP extraction and value cleaning
property_schema = pa.DataFrameSchema({
    "zip_code": pa.Column(
        "Int64",
        nullable=False,
        checks=[
            pa.Check.in_range(0, ZIP_CODE_MAX)
        ],
        description="5-digit ZIP code"
    ),
    "market_value": pa.Column(
        "Int64",
        nullable=True,
        checks=[
            pa.Check.greater_than(0)
        ],
        description="Assessed market value"
    ),
    "total_livable_area": pa.Column(
        "Int64",
        nullable=True,
        checks=[
            pa.Check.greater_than(0)
        ],
        description="Total livable area in square feet"
    )
}, coerce=True)


# ZIP-level population counts
population_schema = pa.DataFrameSchema({
    "zip_code": pa.Column(
        "int64",
        nullable=False,
        description="ZIP code"
    ),
    "population": pa.Column(
        "int64",
        nullable=False,
        checks=[
            pa.Check.greater_than_or_equal_to(0)
        ],
        description="Residents in the ZIP code"
    )
}, coerce=True)


# Parking violations
violation_schema = pa.DataFrameSchema({
    "date": pa.Column(str, nullable=True, description="Timestamp of the ticket"),
    "fine": pa.Column(
        "int64",
        nullable=False,
        coerce=True,
        checks=[
            pa.Check.greater_than_or_equal_to(0)
        ],
        description="Fine amount in dollars"
    ),
    "violation": pa.Column(str, nullable=True, description="Violation description"),
    "plate_id": pa.Column(str, nullable=True, description="Anonymized plate"),
    "state": pa.Column(str, nullable=True, description="Plate registration state"),
    "ticket_number": pa.Column(str, nullable=True, description="Ticket identifier"),
    "zip_code": pa.Column(
        "Int64",
        nullable=True,
        coerce=True,
        description="ZIP code where the ticket was issued"
    )
})


def validate_properties(df: pd.DataFrame) -> pd.DataFrame:
    """
    Validate cleaned property data against schema.
    
    Parameters
    ----------
    df : pd.DataFrame
        Property data with zip_code, market_value and total_livable_area
        
    Returns
    -------
    pd.DataFrame
        Validated property data with nullable integer columns
        
    Raises
    ------
    pa.errors.SchemaError
        If validation fails
    """
    return property_schema.validate(df)


def validate_populations(df: pd.DataFrame) -> pd.DataFrame:
    """
    Validate population data against schema.
    
    Raises
    ------
    pa.errors.SchemaError
        If validation fails
    """
    return population_schema.validate(df)


def validate_violations(df: pd.DataFrame) -> pd.DataFrame:
    """Validate parking violation data against schema."""
    return violation_schema.validate(df)
