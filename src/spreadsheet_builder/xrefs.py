from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Optional

from spreadsheet_builder.constants import (
    ALPHABET_LENGTH,
    DEFAULT_COLUMN_INDEX,
    DEFAULT_COLUMN_NAME,
    DEFAULT_ROW_INDEX,
)

__all__ = [
    "CellRange",
    "CellReference",
    "column_index_to_name",
    "column_name_to_index",
    "xl_cell_to_rowcol",
    "xl_col_to_name",
    "xl_range",
    "xl_rowcol_to_cell",
]

_STRICT_REFERENCE = re.compile(r"(\$?)([A-Z]+)(\$?)([1-9]\d*)")


def column_index_to_name(column_index: int) -> str:
    """Convert a 1-based column index to its column name.

    Index ``0`` (or anything below it) is not an error and returns the
    default column name ``"A"``.

    Parameters
    ----------
    column_index: int
        The column number (1-based).

    Returns
    -------
    str:
        Column name, for example ``"A"``, ``"Z"``, ``"AA"``.
    """
    if column_index is None or column_index < 1:
        return DEFAULT_COLUMN_NAME

    col_str = ""
    while column_index > 0:
        column_index -= 1
        col_str = chr(ord("A") + column_index % ALPHABET_LENGTH) + col_str
        column_index //= ALPHABET_LENGTH
    return col_str


def column_name_to_index(column_name: Optional[str]) -> int:
    """Convert a column name to its 1-based column index.

    Conversion stops at the first character that is not an uppercase letter.
    An empty name, or one that does not start with an uppercase letter,
    returns the default column index ``1``.

    Parameters
    ----------
    column_name: str
        The column name, for example ``"AB"``.

    Returns
    -------
    int:
        The column number (1-based).
    """
    if not column_name or not _is_upper(column_name[0]):
        return DEFAULT_COLUMN_INDEX

    column_index = 0
    for char in column_name:
        if not _is_upper(char):
            break
        column_index = column_index * ALPHABET_LENGTH + (ord(char) - ord("A") + 1)
    return column_index


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _parse_row_index(row_str: str) -> int:
    if row_str.isdecimal() and int(row_str) > 0:
        return int(row_str)
    return DEFAULT_ROW_INDEX


@dataclass
class CellReference:
    """A reference to a single cell, optionally qualified by a sheet name.

    Column and row indexes are 1-based. A ``sheet_name`` of ``None`` means
    the document's active sheet. References are mutable so that they can be
    used as a cursor when writing rows of cells.

    .. code-block:: python

        >>> ref = CellReference.from_string("Sheet1!$B$3")
        >>> ref.column_index, ref.row_index
        (2, 3)
        >>> str(ref)
        'Sheet1!$B$3'
    """

    sheet_name: Optional[str] = None
    column_index: int = DEFAULT_COLUMN_INDEX
    row_index: int = DEFAULT_ROW_INDEX
    fixed_column: bool = False
    fixed_row: bool = False

    @classmethod
    def from_string(cls, reference: str, strict: bool = False) -> CellReference:
        """Parse a cell reference in A1 notation.

        Malformed column or row text resolves to column ``A`` or row ``1``
        unless ``strict`` is ``True``.

        Parameters
        ----------
        reference: str
            A reference such as ``"B3"``, ``"$B$3"`` or ``"Sheet1!B3"``.
        strict: bool, optional, default: False
            Raise an exception rather than resolve malformed components
            to their defaults.

        Raises
        ------
        TypeError:
            If ``reference`` is not a string.
        IndexError:
            If ``strict`` is ``True`` and the reference is malformed.
        """
        if not isinstance(reference, str):
            msg = "cell reference must be a string"
            raise TypeError(msg)

        sheet_name, sep, cell_str = reference.rpartition("!")
        sheet_name = sheet_name if sep else None

        if strict:
            match = _STRICT_REFERENCE.fullmatch(cell_str)
            if match is None or (sep and not sheet_name):
                msg = f"invalid cell reference {reference}"
                raise IndexError(msg)

        pos = 0
        fixed_column = cell_str[pos : pos + 1] == "$"
        pos += int(fixed_column)
        start = pos
        while pos < len(cell_str) and cell_str[pos].isalpha():
            pos += 1
        column_index = column_name_to_index(cell_str[start:pos])

        fixed_row = cell_str[pos : pos + 1] == "$"
        pos += int(fixed_row)
        start = pos
        while pos < len(cell_str) and cell_str[pos].isdecimal():
            pos += 1
        row_index = _parse_row_index(cell_str[start:pos])

        return cls(sheet_name, column_index, row_index, fixed_column, fixed_row)

    def __str__(self) -> str:
        ref_str = "" if self.sheet_name is None else self.sheet_name + "!"
        if self.fixed_column:
            ref_str += "$"
        ref_str += self.column_name
        if self.fixed_row:
            ref_str += "$"
        return ref_str + str(self.row_index)

    @property
    def column_name(self) -> str:
        """str: The name of the referenced column."""
        return column_index_to_name(self.column_index)

    @property
    def reference(self) -> str:
        """str: The full reference including any sheet name and fixed markers."""
        return str(self)

    @property
    def short_reference(self) -> str:
        """str: The column name and row number only, for example ``B3``."""
        return f"{self.column_name}{self.row_index}"

    def copy(self) -> CellReference:
        return replace(self)


@dataclass
class CellRange:
    """A rectangular range of cells between two references.

    Ranges are not normalized on construction; call :py:meth:`normalize`
    and check :py:attr:`is_valid` where the order of the corners matters.

    .. code-block:: python

        >>> cell_range = CellRange.from_string("C5:A1")
        >>> cell_range.is_valid
        False
        >>> str(cell_range.normalize())
        'A1:C5'
    """

    start: CellReference = None
    end: CellReference = None

    def __post_init__(self):
        self.start = CellReference() if self.start is None else self.start.copy()
        self.end = CellReference() if self.end is None else self.end.copy()

    @classmethod
    def from_string(cls, cell_range: str) -> CellRange:
        """Parse a range such as ``"A1:C5"``; a single reference is a one cell range.

        Raises
        ------
        TypeError:
            If ``cell_range`` is not a string.
        """
        if not isinstance(cell_range, str):
            msg = "cell range must be a string"
            raise TypeError(msg)

        start_str, sep, end_str = cell_range.partition(":")
        start = CellReference.from_string(start_str)
        end = CellReference.from_string(end_str) if sep else start
        return cls(start, end)

    def copy(self) -> CellRange:
        return CellRange(self.start, self.end)

    @property
    def is_valid(self) -> bool:
        """bool: ``True`` if the range has at least one row and one column."""
        return (
            self.end.column_index >= self.start.column_index
            and self.end.row_index >= self.start.row_index
        )

    @property
    def is_empty(self) -> bool:
        """bool: ``True`` if the range is a single cell or less."""
        return (
            self.end.column_index <= self.start.column_index
            and self.end.row_index <= self.start.row_index
        )

    def normalize(self) -> CellRange:
        """Swap the start and end of each axis so that end >= start."""
        if self.end.column_index < self.start.column_index:
            self.start.column_index, self.end.column_index = (
                self.end.column_index,
                self.start.column_index,
            )
        if self.end.row_index < self.start.row_index:
            self.start.row_index, self.end.row_index = (
                self.end.row_index,
                self.start.row_index,
            )
        return self

    def column_range(self, offset: int) -> CellRange:
        """Return the range of one column of this range.

        Parameters
        ----------
        offset: int
            Column number relative to the left column of this range (zero indexed).
        """
        cell_range = self.copy()
        cell_range.start.column_index += offset
        cell_range.end.column_index = cell_range.start.column_index
        return cell_range

    def row_range(self, offset: int) -> CellRange:
        """Return the range of one row of this range.

        Parameters
        ----------
        offset: int
            Row number relative to the top row of this range (zero indexed).
        """
        cell_range = self.copy()
        cell_range.start.row_index += offset
        cell_range.end.row_index = cell_range.start.row_index
        return cell_range

    @property
    def top_row_index(self) -> int:
        return self.start.row_index

    @property
    def bottom_row_index(self) -> int:
        return self.end.row_index

    @property
    def left_column_index(self) -> int:
        return self.start.column_index

    @property
    def right_column_index(self) -> int:
        return self.end.column_index

    @property
    def left_column_name(self) -> str:
        return self.start.column_name

    @property
    def right_column_name(self) -> str:
        return self.end.column_name

    @property
    def column_count(self) -> int:
        """int: Number of columns in the range."""
        return self.end.column_index - self.start.column_index + 1

    @column_count.setter
    def column_count(self, value: int):
        self.end.column_index = self.start.column_index + max(value - 1, 0)

    @property
    def row_count(self) -> int:
        """int: Number of rows in the range."""
        return self.end.row_index - self.start.row_index + 1

    @row_count.setter
    def row_count(self, value: int):
        self.end.row_index = self.start.row_index + value - 1

    def __str__(self) -> str:
        return f"{self.start}:{self.end}"

    @property
    def reference(self) -> str:
        return str(self)

    @property
    def short_reference(self) -> str:
        """str: The range without sheet names or fixed markers, for example ``A1:C5``."""
        return f"{self.start.short_reference}:{self.end.short_reference}"


# Zero-indexed helpers in the style of https://github.com/jmcnamara/XlsxWriter


def xl_cell_to_rowcol(cell_str: str) -> tuple:
    """Convert a cell reference in A1 notation to a zero indexed row and column.

    Parameters
    ----------
    cell_str:  str
        A1 notation cell reference

    Returns
    -------
    row, col: int, int
        Cell row and column numbers (zero indexed).
    """
    if not cell_str:
        return 0, 0

    ref = CellReference.from_string(cell_str, strict=True)
    return ref.row_index - 1, ref.column_index - 1


def xl_rowcol_to_cell(row, col, row_abs=False, col_abs=False):
    """Convert a zero indexed row and column cell reference to a A1 style string.

    Raises
    ------
    IndexError:
        If the row or column is below zero.
    """
    if row < 0:
        msg = f"row reference {row} below zero"
        raise IndexError(msg)

    if col < 0:
        msg = f"column reference {col} below zero"
        raise IndexError(msg)

    return str(CellReference(None, col + 1, row + 1, col_abs, row_abs))


def xl_col_to_name(col, col_abs=False):
    """Convert a zero indexed column cell reference to a string."""
    if col < 0:
        msg = f"column reference {col} below zero"
        raise IndexError(msg)

    return ("$" if col_abs else "") + column_index_to_name(col + 1)


def xl_range(first_row, first_col, last_row, last_col):
    """Convert zero indexed row and col cell references to a A1:B1 range string."""
    range1 = xl_rowcol_to_cell(first_row, first_col)
    range2 = xl_rowcol_to_cell(last_row, last_col)

    if range1 == range2:
        return range1
    else:
        return range1 + ":" + range2
