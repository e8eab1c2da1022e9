import logging
from dataclasses import dataclass
from datetime import date as builtin_date
from datetime import datetime as builtin_datetime
from datetime import time as builtin_time
from datetime import timedelta as builtin_timedelta
from decimal import Decimal
from typing import Any, Optional, Union
from warnings import warn

from pendulum import DateTime, duration

from spreadsheet_builder import __name__ as spreadsheet_builder_name
from spreadsheet_builder.constants import EPOCH, SECONDS_IN_DAY, CellType
from spreadsheet_builder.exceptions import UnsupportedWarning
from spreadsheet_builder.xrefs import column_index_to_name

logger = logging.getLogger(spreadsheet_builder_name)
debug = logger.debug

__all__ = [
    "BoolContent",
    "Cell",
    "DateContent",
    "EMPTY",
    "EmptyContent",
    "Formula",
    "FormulaContent",
    "NumberContent",
    "StyledValue",
    "TextContent",
    "from_serial",
    "to_serial",
]


@dataclass(frozen=True)
class EmptyContent:
    type = CellType.EMPTY

    @property
    def value(self):
        return None


EMPTY = EmptyContent()


@dataclass(frozen=True)
class TextContent:
    """Text stored as an index into the document's shared strings."""

    string_id: int
    type = CellType.TEXT

    @property
    def value(self) -> int:
        return self.string_id


@dataclass(frozen=True)
class NumberContent:
    value: Union[int, float, Decimal]
    type = CellType.NUMBER


@dataclass(frozen=True)
class BoolContent:
    value: bool
    type = CellType.BOOL


@dataclass(frozen=True)
class DateContent:
    """A date and time held as a serial number of days."""

    serial: float
    type = CellType.DATE

    @property
    def value(self) -> float:
        return self.serial


@dataclass(frozen=True)
class FormulaContent:
    """An unevaluated formula and the type its result is expected to have."""

    expression: str
    result_type: CellType = CellType.NUMBER
    type = CellType.FORMULA

    @property
    def value(self) -> str:
        return self.expression


CellContent = Union[EmptyContent, TextContent, NumberContent, BoolContent, DateContent, FormulaContent]


class Cell:
    """A single cell in a sheet row.

    .. NOTE::
        Do not instantiate directly. Cells are created by
        :py:class:`~spreadsheet_builder.Document` and
        :py:class:`~spreadsheet_builder.TableBuilder`.
    """

    __slots__ = ("row", "col", "content", "style_id")

    def __init__(
        self,
        row: int,
        col: int,
        content: CellContent = EMPTY,
        style_id: Optional[int] = None,
    ) -> None:
        self.row = row
        self.col = col
        self.content = content
        self.style_id = style_id

    def __str__(self) -> str:
        return f"{self.reference}:type={self.type.name}, value={self.content.value}, style_id={self.style_id}"

    def __repr__(self) -> str:
        return f"<Cell {self}>"

    @property
    def type(self) -> CellType:
        """CellType: The type of the cell's content."""
        return self.content.type

    @property
    def reference(self) -> str:
        """str: The cell's position in A1 notation."""
        return column_index_to_name(self.col) + str(self.row)

    @property
    def is_formula(self) -> bool:
        return self.content.type == CellType.FORMULA

    def set(self, content: CellContent, style_id: Optional[int] = None) -> None:
        """Replace the content and style of the cell."""
        self.content = content
        self.style_id = style_id


@dataclass(frozen=True)
class Formula:
    """A formula to write to a cell.

    Formulas are stored as text and are never evaluated. A leading ``=``
    is removed.

    .. code-block:: python

        doc.write("B10", Formula("SUM(B2:B9)"))

    Parameters
    ----------
    expression: str
        The text of the formula.
    result_type: CellType, optional, default: CellType.NUMBER
        The type of value the formula is expected to produce.
    """

    expression: str
    result_type: CellType = CellType.NUMBER

    def __post_init__(self):
        if not isinstance(self.expression, str):
            msg = "formula expression must be a string"
            raise TypeError(msg)
        if not isinstance(self.result_type, CellType):
            msg = "formula result type must be a CellType"
            raise TypeError(msg)
        if self.expression.startswith("="):
            object.__setattr__(self, "expression", self.expression[1:])

    def __str__(self) -> str:
        return "=" + self.expression


@dataclass(frozen=True)
class StyledValue:
    """A value to write together with the composite style to apply to it.

    .. code-block:: python

        table.add_row(StyledValue("Total:", bold), 4000)

    Parameters
    ----------
    value: Any
        The value to write.
    style_id: int, optional
        The composite cell style, or ``None`` for the default style of the value.
    result_type: CellType, optional
        Overrides the result type of a :py:class:`Formula` value.
    """

    value: Any
    style_id: Optional[int] = None
    result_type: Optional[CellType] = None

    def __str__(self) -> str:
        return "" if self.value is None else str(self.value)


def to_serial(value: Union[builtin_datetime, builtin_date, builtin_time, builtin_timedelta]) -> float:
    """Convert a date, time or duration to a serial number of days.

    Dates count from the 1900 date system epoch, times are a fraction of a
    day and durations are a number of days.
    """
    if isinstance(value, builtin_timedelta):
        return value.total_seconds() / SECONDS_IN_DAY

    if isinstance(value, builtin_time):
        seconds = value.hour * 3600 + value.minute * 60 + value.second
        return (seconds + value.microsecond / 1e6) / SECONDS_IN_DAY

    if not isinstance(value, builtin_datetime):
        value = builtin_datetime(value.year, value.month, value.day)

    if value.tzinfo is not None:
        if value.utcoffset():
            warn(
                f"timezone offset discarded from '{value}'",
                UnsupportedWarning,
                stacklevel=3,
            )
        value = value.replace(tzinfo=None)

    delta = value - EPOCH
    return delta.total_seconds() / SECONDS_IN_DAY


def from_serial(serial: float) -> DateTime:
    """Convert a serial number of days to a date and time, to the nearest millisecond."""
    return EPOCH + duration(seconds=round(serial * SECONDS_IN_DAY, 3))
