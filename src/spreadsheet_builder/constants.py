from enum import IntEnum

import enum_tools.documentation
from pendulum import naive

__all__ = [
    "BuiltinNumberFormat",
    "CellType",
    "SaveValidation",
    "StandardBorderStyle",
    "StandardCellStyle",
    "StandardFillStyle",
    "StandardFontStyle",
    "StandardNumberFormat",
]

# New document defaults
DEFAULT_SHEET_NAME = "Sheet1"
DEFAULT_COLUMN_INDEX = 1
DEFAULT_ROW_INDEX = 1
DEFAULT_COLUMN_NAME = "A"

# Style defaults
DEFAULT_FONT = "Calibri"
DEFAULT_FONT_SIZE = 11.0
DEFAULT_FONT_FAMILY = 2
DEFAULT_FONT_SCHEME = "minor"
DEFAULT_ALIGNMENT = ("general", "bottom")
DEFAULT_BORDER_STYLE = "thin"
DEFAULT_BORDER_COLOR = (0, 0, 0)

# Spreadsheet limits
ALPHABET_LENGTH = 26
MIN_NUMBER_FORMAT_ID = 164
MAX_SIGNIFICANT_DIGITS = 15
TABLE_STYLE_COUNTS = {"Light": 21, "Medium": 28, "Dark": 11}

# Serial dates count days from the 1900 date system epoch
EPOCH = naive(1899, 12, 30)
SECONDS_IN_DAY = 60 * 60 * 24


class CellType(IntEnum):
    EMPTY = 1
    TEXT = 2
    NUMBER = 3
    BOOL = 4
    DATE = 5
    FORMULA = 6


@enum_tools.documentation.document_enum
class SaveValidation(IntEnum):
    """
    Whether building a document raises an exception when the document does
    not pass structural validation.

    Passed to :py:class:`~spreadsheet_builder.Document` and optionally
    overridden for a single call to :py:meth:`~spreadsheet_builder.Document.build`.
    """

    NONE = 0
    """Never raise; validation errors can still be listed explicitly."""
    ALWAYS = 1
    """Always raise :py:class:`~spreadsheet_builder.ValidationError`."""
    DEBUG_ONLY = 2
    """Raise only when Python is not running with optimizations (``__debug__``)."""


@enum_tools.documentation.document_enum
class BuiltinNumberFormat(IntEnum):
    """
    Number formats that are built into every spreadsheet application.

    These IDs are never registered in a document; custom formats are
    numbered from ``164``.
    """

    GENERAL = 0
    """General"""
    NUMBER = 1
    """0"""
    TWO_DECIMALS_NO_COMMA = 2
    """0.00"""
    INTEGER = 3
    """#,##0"""
    TWO_DECIMALS = 4
    """#,##0.00"""
    PERCENT = 9
    """0%"""
    PERCENT_HUNDREDTHS = 10
    """0.00%"""
    EXPONENTIAL = 11
    """0.00E+00"""
    SHORT_FRACTION = 12
    """# ?/?"""
    FRACTION = 13
    """# ??/??"""
    SHORT_DATE = 14
    """d/m/yyyy"""
    MEDIUM_DATE = 15
    """d-mmm-yy"""
    DAY_MONTH = 16
    """d-mmm"""
    MONTH_YEAR = 17
    """mmm-yy"""
    SHORT_TIME = 18
    """h:mm AM/PM"""
    LONG_TIME = 19
    """h:mm:ss AM/PM"""
    HOUR_MINUTES = 20
    """H:mm"""
    MEDIUM_TIME = 21
    """H:mm:ss"""
    DATE_TIME = 22
    """m/d/yyyy H:mm"""
    PAREN_NEGATIVE_INTEGER = 37
    """#,##0 ;(#,##0)"""
    RED_NEGATIVE_INTEGER = 38
    """#,##0 ;[Red](#,##0)"""
    PAREN_NEGATIVE_FLOAT = 39
    """#,##0.00;(#,##0.00)"""
    RED_NEGATIVE_FLOAT = 40
    """#,##0.00;[Red](#,##0.00)"""
    CURRENCY = 44
    """Accounting format with a currency symbol"""
    MINUTE_SECONDS = 45
    """mm:ss"""
    ELAPSED_TIME = 46
    """[h]:mm:ss"""
    MINUTE_SECONDS_TENTHS = 47
    """mmss.0"""
    EXPONENTIAL_ENGINEERING = 48
    """##0.0E+0"""
    TEXT = 49
    """@"""


class StandardNumberFormat(IntEnum):
    GENERAL = 1
    FLOAT = 2
    DATETIME = 3


class StandardFontStyle(IntEnum):
    GENERAL = 1
    BOLD = 2
    HEADER = 3
    SUBHEADER = 4


class StandardFillStyle(IntEnum):
    GENERAL = 1
    GRAY125 = 2


class StandardBorderStyle(IntEnum):
    GENERAL = 1


@enum_tools.documentation.document_enum
class StandardCellStyle(IntEnum):
    """Composite cell styles registered in every new document."""

    GENERAL = 1
    """Default style for text and booleans."""
    INTEGER = 2
    """Integers with a thousands separator, also used for formulas."""
    FLOAT = 3
    """Floating point numbers with up to three decimals."""
    CURRENCY = 4
    """Accounting style used for ``Decimal`` values."""
    DATETIME = 5
    """Dates with a time of day."""
    DATE = 6
    """Dates without a time of day."""
    TIME = 7
    """Times of day."""
    DURATION = 8
    """Elapsed time in hours, minutes and seconds."""


STANDARD_NUMBER_FORMATS = {
    StandardNumberFormat.GENERAL: "0",
    StandardNumberFormat.FLOAT: "#,##0.###",
    StandardNumberFormat.DATETIME: "m/d/yyyy h:mm AM/PM",
}

# Font size, bold
STANDARD_FONTS = {
    StandardFontStyle.GENERAL: (11.0, False),
    StandardFontStyle.BOLD: (11.0, True),
    StandardFontStyle.HEADER: (20.0, True),
    StandardFontStyle.SUBHEADER: (14.0, True),
}

STANDARD_FILL_PATTERNS = {
    StandardFillStyle.GENERAL: "none",
    StandardFillStyle.GRAY125: "gray125",
}

# Number formats are either a built-in ID or a standard registered format
STANDARD_CELL_STYLE_FORMATS = {
    StandardCellStyle.GENERAL: BuiltinNumberFormat.GENERAL,
    StandardCellStyle.INTEGER: BuiltinNumberFormat.INTEGER,
    StandardCellStyle.FLOAT: StandardNumberFormat.FLOAT,
    StandardCellStyle.CURRENCY: BuiltinNumberFormat.CURRENCY,
    StandardCellStyle.DATETIME: StandardNumberFormat.DATETIME,
    StandardCellStyle.DATE: BuiltinNumberFormat.SHORT_DATE,
    StandardCellStyle.TIME: BuiltinNumberFormat.SHORT_TIME,
    StandardCellStyle.DURATION: BuiltinNumberFormat.ELAPSED_TIME,
}
