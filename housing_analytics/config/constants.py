"""Constants for housing analytics."""

# ZIP codes
ZIP_CODE_LENGTH = 5  # Digits kept from a raw ZIP field (ZIP+4 is truncated)

# Numeric fields
MAX_INTEGER_VALUE = 2 ** 31 - 1  # Larger values are treated as unparseable

# Property file columns
ZIP_CODE_COLUMN = "zip_code"
MARKET_VALUE_COLUMN = "market_value"
LIVABLE_AREA_COLUMN = "total_livable_area"
REQUIRED_PROPERTY_COLUMNS = [
    ZIP_CODE_COLUMN,
    MARKET_VALUE_COLUMN,
    LIVABLE_AREA_COLUMN
]

# Parking violation files
VIOLATION_CSV_COLUMNS = [
    "date",
    "fine",
    "violation",
    "plate_id",
    "state",
    "ticket_number",
    "zip_code"
]
SUPPORTED_VIOLATION_FORMATS = ["csv", "json"]

# Violation statistics
DEFAULT_FINES_STATE = "PA"  # Only plates registered here count toward fines
TOP_VIOLATION_TYPES = 3

# Population file
POPULATION_COLUMNS = ["zip_code", "population"]

# CLI menu
MENU_OPTIONS = {
    "0": "Exit",
    "1": "Total population for all ZIP Codes",
    "2": "Fines per capita for each ZIP Code",
    "3": "Average residential market value for a ZIP Code",
    "4": "Average residential total livable area for a ZIP Code",
    "5": "Residential market value per capita for a ZIP Code",
    "6": "Property value summary for a ZIP Code",
    "7": "Most common violation type for a ZIP Code"
}
