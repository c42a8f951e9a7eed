"""Data loading utilities for housing analytics."""

import json
import logging
from pathlib import Path
from typing import Union, Optional, Dict, List, Any

import numpy as np
import pandas as pd
import pandera.pandas as pa

from .schemas import validate_properties, validate_populations, validate_violations
from ..config import constants
from ..models.records import PropertyRecord, ParkingViolation
from ..utils.exceptions import DataSourceError

logger = logging.getLogger(__name__)


def load_properties(filepath: Union[str, Path]) -> List[PropertyRecord]:
    """
    Load residential property records from a CSV file.
    
    Parameters
    ----------
    filepath : str or Path
        Path to the properties CSV (header row required)
        
    Returns
    -------
    list of PropertyRecord
        One record per row with a usable ZIP code
        
    Raises
    ------
    DataSourceError
        If the file is missing, empty, unparseable or lacks a required column
    """
    filepath = _existing_file(filepath, "Properties")
    
    overlong = []

    try:
        width = len(pd.read_csv(filepath, nrows=0).columns)

        def truncate(fields: List[str]) -> List[str]:
            overlong.append(fields)
            return fields[:width]

        # Trailing fields beyond the header are ignored
        raw = pd.read_csv(
            filepath,
            dtype=str,
            keep_default_na=False,
            engine="python",
            on_bad_lines=truncate
        )
    except pd.errors.EmptyDataError as e:
        raise DataSourceError("CSV file is empty") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DataSourceError(f"Could not parse properties file {filepath}: {e}") from e

    if overlong:
        logger.debug(
            f"Truncated {len(overlong):,} property rows with more fields than the header"
        )

    raw.columns = [str(col).strip().lower() for col in raw.columns]
    missing = [
        col for col in constants.REQUIRED_PROPERTY_COLUMNS
        if col not in raw.columns
    ]
    if missing:
        raise DataSourceError(f"CSV file is missing required column(s): {missing}")
    
    raw = raw.fillna("")
    df = pd.DataFrame({
        constants.ZIP_CODE_COLUMN: extract_zip_codes(raw[constants.ZIP_CODE_COLUMN]),
        constants.MARKET_VALUE_COLUMN: parse_positive_integers(
            raw[constants.MARKET_VALUE_COLUMN]
        ),
        constants.LIVABLE_AREA_COLUMN: parse_positive_integers(
            raw[constants.LIVABLE_AREA_COLUMN]
        )
    })
    
    dropped = int(df[constants.ZIP_CODE_COLUMN].isna().sum())
    if dropped:
        logger.debug(f"Dropped {dropped:,} property rows without a usable ZIP code")
    df = df[df[constants.ZIP_CODE_COLUMN].notna()]
    
    df = _validated(validate_properties, df, filepath)
    
    records = [
        PropertyRecord(
            zip_code=int(zip_code),
            market_value=_optional_int(market_value),
            total_livable_area=_optional_int(livable_area)
        )
        for zip_code, market_value, livable_area in df.itertuples(index=False, name=None)
    ]
    logger.info(f"Loaded {len(records):,} property records from {filepath}")
    return records


def load_populations(filepath: Union[str, Path]) -> Dict[int, int]:
    """
    Load ZIP-level population counts.
    
    Each line holds a ZIP code and a population separated by whitespace.
    Blank, short and non-numeric lines are skipped.
    
    Parameters
    ----------
    filepath : str or Path
        Path to the population file
        
    Returns
    -------
    dict
        ZIP code to population
    """
    filepath = _existing_file(filepath, "Population")
    
    try:
        text = filepath.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise DataSourceError(f"Could not read population file {filepath}: {e}") from e
    
    lines = pd.Series(text.splitlines(), dtype=object).str.strip()
    lines = lines[lines != ""]
    if lines.empty:
        logger.warning(f"Population file {filepath} has no entries")
        return {}
    
    parts = lines.str.split(n=2, expand=True)
    if parts.shape[1] < 2:
        logger.warning(f"Population file {filepath} has no complete entries")
        return {}
    
    df = pd.DataFrame({
        "zip_code": _parse_integers(parts[0]),
        "population": _parse_integers(parts[1])
    }).dropna()
    
    negative = df["population"] < 0
    if negative.any():
        logger.warning(
            f"Dropped {int(negative.sum()):,} negative population entries "
            f"from {filepath}"
        )
        df = df[~negative]
    
    df = _validated(validate_populations, df, filepath)
    
    populations = {
        int(zip_code): int(population)
        for zip_code, population in df.itertuples(index=False, name=None)
    }
    logger.info(f"Loaded populations for {len(populations):,} ZIP codes from {filepath}")
    return populations


def load_violations(
    filepath: Union[str, Path],
    fmt: str = "csv"
) -> List[ParkingViolation]:
    """
    Load parking violations from a CSV or JSON file.
    
    Parameters
    ----------
    filepath : str or Path
        Path to the violations file
    fmt : str, default "csv"
        Either "csv" (headerless) or "json" (array of objects)
        
    Returns
    -------
    list of ParkingViolation
        
    Raises
    ------
    ValueError
        If the format is not supported
    DataSourceError
        If the file cannot be read or a fine is not a whole number
    """
    fmt = fmt.lower()
    if fmt not in constants.SUPPORTED_VIOLATION_FORMATS:
        raise ValueError(
            f"Unsupported violations format: {fmt}. "
            f"Supported formats: {constants.SUPPORTED_VIOLATION_FORMATS}"
        )
    
    filepath = _existing_file(filepath, "Parking violations")
    
    if fmt == "csv":
        df = _read_violations_csv(filepath)
    else:
        df = _read_violations_json(filepath)
    
    if df.empty:
        logger.warning(f"No parking violations found in {filepath}")
        return []
    
    df = _validated(validate_violations, df, filepath)
    
    violations = [
        ParkingViolation(
            ticket_number=row.ticket_number,
            plate_id=row.plate_id,
            date=row.date,
            zip_code=_optional_int(row.zip_code),
            violation=row.violation,
            fine=int(row.fine),
            state=row.state
        )
        for row in df.itertuples(index=False)
    ]
    logger.info(f"Loaded {len(violations):,} parking violations from {filepath}")
    return violations


def _read_violations_csv(filepath: Path) -> pd.DataFrame:
    try:
        raw = pd.read_csv(
            filepath,
            header=None,
            names=constants.VIOLATION_CSV_COLUMNS,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=constants.VIOLATION_CSV_COLUMNS)
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DataSourceError(f"Could not parse violations file {filepath}: {e}") from e
    
    fines = _parse_integers(raw["fine"].fillna("").str.strip())
    bad = fines.isna()
    if bad.any():
        first = raw.loc[bad, "fine"].iloc[0]
        raise DataSourceError(
            f"Invalid fine value {first!r} in {filepath} "
            f"({int(bad.sum()):,} rows affected)"
        )
    
    df = _string_columns(raw)
    df["fine"] = fines
    df["zip_code"] = _parse_integers(raw["zip_code"].fillna("").str.strip())
    return df


def _read_violations_json(filepath: Path) -> pd.DataFrame:
    try:
        with open(filepath, 'r') as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise DataSourceError(f"Error parsing JSON file {filepath}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DataSourceError(f"Could not read violations file {filepath}: {e}") from e
    
    if not isinstance(payload, list):
        raise DataSourceError(f"Expected a JSON array of violations in {filepath}")
    if not payload:
        return pd.DataFrame(columns=constants.VIOLATION_CSV_COLUMNS)
    
    raw = pd.DataFrame(payload, columns=constants.VIOLATION_CSV_COLUMNS, dtype=object)
    
    fines = raw["fine"].map(_json_number)
    if fines.isna().any():
        raise DataSourceError(f"Missing or non-numeric fine in {filepath}")
    
    df = _string_columns(raw)
    df["fine"] = fines.astype("int64")
    # Only JSON numbers count as ZIP codes
    df["zip_code"] = pd.array(
        [_json_number(value) for value in raw["zip_code"]],
        dtype="Int64"
    )
    return df


def extract_zip_codes(values: pd.Series) -> pd.Series:
    """
    Extract 5-digit ZIP codes from raw text.
    
    Non-digits are stripped; the first five remaining digits form the ZIP
    code. Values with fewer than five digits become missing.
    
    Parameters
    ----------
    values : pd.Series
        Raw ZIP code strings (e.g. "19104", "19104-3214")
        
    Returns
    -------
    pd.Series
        Nullable integer ZIP codes
    """
    digits = values.astype(str).str.replace(r"[^0-9]", "", regex=True)
    zips = digits.str[:constants.ZIP_CODE_LENGTH].where(
        digits.str.len() >= constants.ZIP_CODE_LENGTH
    )
    return pd.to_numeric(zips, errors="coerce").astype("Int64")


def parse_positive_integers(values: pd.Series) -> pd.Series:
    """
    Parse strictly positive whole numbers, turning anything else into missing.
    
    Parameters
    ----------
    values : pd.Series
        Raw numeric strings
        
    Returns
    -------
    pd.Series
        Nullable integers
    """
    numbers = _whole_numbers(values.astype(str).str.strip())
    return numbers.where(numbers > 0).astype("Int64")


def _parse_integers(values: pd.Series) -> pd.Series:
    return _whole_numbers(values).astype("Int64")


def _whole_numbers(values: pd.Series) -> pd.Series:
    numbers = pd.to_numeric(values, errors="coerce").astype("float64")
    whole = (
        np.isfinite(numbers)
        & (numbers == np.floor(numbers))
        & (numbers.abs() <= constants.MAX_INTEGER_VALUE)
    )
    return numbers.where(whole)


def _string_columns(raw: pd.DataFrame) -> pd.DataFrame:
    df = pd.DataFrame(index=raw.index)
    for col in ("date", "violation", "plate_id", "state", "ticket_number"):
        df[col] = raw[col].map(_optional_str).astype(object)
    return df[["date", "violation", "plate_id", "state", "ticket_number"]]


def _json_number(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not np.isfinite(value):
        return None
    if abs(value) > constants.MAX_INTEGER_VALUE:
        return None
    return int(value)


def _optional_str(value: Any) -> Optional[str]:
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return None
    return str(value)


def _optional_int(value: Any) -> Optional[int]:
    if pd.isna(value):
        return None
    return int(value)


def _existing_file(filepath: Union[str, Path], label: str) -> Path:
    filepath = Path(filepath)
    if not filepath.is_file():
        raise DataSourceError(f"{label} file not found: {filepath}")
    return filepath


def _validated(validate, df: pd.DataFrame, filepath: Path) -> pd.DataFrame:
    try:
        return validate(df)
    except pa.errors.SchemaError as e:
        raise DataSourceError(f"Invalid data in {filepath}: {e}") from e
