import logging
import math
from dataclasses import asdict, dataclass
from datetime import date as builtin_date
from datetime import datetime as builtin_datetime
from datetime import time as builtin_time
from datetime import timedelta as builtin_timedelta
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
from warnings import warn

import sigfig

from spreadsheet_builder import __name__ as spreadsheet_builder_name
from spreadsheet_builder.cell import (
    EMPTY,
    BoolContent,
    Cell,
    CellContent,
    DateContent,
    Formula,
    FormulaContent,
    NumberContent,
    StyledValue,
    TextContent,
    from_serial,
    to_serial,
)
from spreadsheet_builder.cell_storage import SheetData
from spreadsheet_builder.constants import (
    DEFAULT_SHEET_NAME,
    MAX_SIGNIFICANT_DIGITS,
    CellType,
    SaveValidation,
    StandardCellStyle,
)
from spreadsheet_builder.containers import ItemsList
from spreadsheet_builder.exceptions import ValidationError
from spreadsheet_builder.registry import SharedStringTable
from spreadsheet_builder.styles import Stylesheet, TableStyle
from spreadsheet_builder.xrefs import CellRange, CellReference

logger = logging.getLogger(spreadsheet_builder_name)
debug = logger.debug

__all__ = ["ColumnWidth", "Document", "Sheet", "Table"]

Reference = Union[str, CellReference]
Style = Union[int, StandardCellStyle, None]


@dataclass
class ColumnWidth:
    """The width of a run of columns, measured in characters of the default font."""

    min: int
    max: int
    width: float
    custom_width: bool = True


@dataclass
class Table:
    """A named table covering a range of one sheet.

    .. NOTE::
        Do not instantiate directly. Tables are created with
        :py:meth:`Document.create_table` or :py:meth:`TableBuilder.build`.
    """

    id: int
    name: str
    range: CellRange
    columns: List[str]
    style: Optional[TableStyle] = None
    header_row_count: int = 0

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def reference(self) -> str:
        """str: The table's range without sheet names, for example ``A7:G19``."""
        return self.range.short_reference

    @property
    def has_header(self) -> bool:
        return self.header_row_count > 0


class Sheet:
    """A sheet in a document holding cells, column widths and tables.

    .. NOTE::
        Do not instantiate directly. Sheets are created with
        :py:meth:`Document.add_sheet`.
    """

    def __init__(self, document, sheet_id: int, name: str):
        self._document = document
        self._sheet_id = sheet_id
        self._name = name
        self._data = SheetData()
        self._columns: List[ColumnWidth] = []
        self._tables: ItemsList[Table] = ItemsList("table")

    def __repr__(self) -> str:
        return f"<Sheet {self._sheet_id}: '{self._name}'>"

    @property
    def id(self) -> int:
        return self._sheet_id

    @property
    def name(self) -> str:
        """str: The name of the sheet."""
        return self._name

    @name.setter
    def name(self, value: str):
        if not isinstance(value, str) or not value:
            msg = "sheet name must be a non-empty string"
            raise TypeError(msg)
        other = self._document.sheet(value)
        if other is not None and other is not self:
            raise IndexError(f"sheet '{value}' already exists")
        debug("rename sheet: '%s' -> '%s'", self._name, value)
        for table in self._tables:
            for ref in (table.range.start, table.range.end):
                if ref.sheet_name is not None:
                    ref.sheet_name = value
        self._document._rename_defined_name_sheet(self._name, value)
        self._name = value

    @property
    def data(self) -> SheetData:
        """SheetData: The rows and cells of the sheet."""
        return self._data

    @property
    def columns(self) -> List[ColumnWidth]:
        return self._columns

    @property
    def tables(self) -> ItemsList[Table]:
        """List[:class:`Table`]: A list of tables in the sheet."""
        return self._tables


class Document:
    """
    Create a new in-memory spreadsheet document.

    A new document has a single, active sheet and a stylesheet holding the
    standard number formats, fonts, fills, borders and cell styles.

    .. code-block:: python

        doc = Document()
        doc.write("A1", "Company Name", style=header)
        doc.write("B2", datetime(2021, 6, 1))
        contents = doc.build()

    Parameters
    ----------
    sheet_name: *str*, *optional*, *default*: ``Sheet1``
        Name of the first sheet.
    validation: SaveValidation, optional, default: SaveValidation.NONE
        Whether :py:meth:`build` raises
        :py:class:`~spreadsheet_builder.ValidationError` when the document
        is not structurally valid.
    """

    def __init__(
        self,
        sheet_name: Optional[str] = DEFAULT_SHEET_NAME,
        validation: SaveValidation = SaveValidation.NONE,
    ):
        if not isinstance(validation, SaveValidation):
            msg = "validation must be a SaveValidation"
            raise TypeError(msg)

        self.validation = validation
        self._styles = Stylesheet()
        self._shared_strings = SharedStringTable()
        self._defined_names: Dict[str, str] = {}
        self._sheets: ItemsList[Sheet] = ItemsList("sheet")
        self._active_sheet = self.add_sheet(sheet_name)

    @property
    def sheets(self) -> List[Sheet]:
        """List[:class:`Sheet`]: A list of sheets in the document."""
        return self._sheets

    @property
    def styles(self) -> Stylesheet:
        """:class:`Stylesheet`: The document's number formats, fonts, fills, borders and cell styles."""
        return self._styles

    @property
    def shared_strings(self) -> SharedStringTable:
        """:class:`SharedStringTable`: The text referenced by text cells."""
        return self._shared_strings

    @property
    def defined_names(self) -> Dict[str, str]:
        return dict(self._defined_names)

    # Sheets

    def add_sheet(self, sheet_name: Optional[str] = None) -> Sheet:
        """
        Add a new sheet to the document.

        If no sheet name is provided, the next available numbered sheet
        will be generated in the series ``Sheet1``, ``Sheet2``, etc.
        The active sheet does not change.

        Raises
        ------
        IndexError:
            If the sheet name already exists in the document.
        TypeError:
            If the sheet name is not a string.
        """
        if sheet_name is not None:
            if not isinstance(sheet_name, str) or not sheet_name:
                msg = "sheet name must be a non-empty string"
                raise TypeError(msg)
            if sheet_name in self._sheets:
                raise IndexError(f"sheet '{sheet_name}' already exists")
        else:
            sheet_num = 1
            while f"sheet{sheet_num}" in self._sheets:
                sheet_num += 1
            sheet_name = f"Sheet{sheet_num}"

        sheet_id = max((sheet.id for sheet in self._sheets), default=0) + 1
        sheet = Sheet(self, sheet_id, sheet_name)
        self._sheets.append(sheet)
        debug("add_sheet: id=%d, name='%s'", sheet_id, sheet_name)
        return sheet

    def sheet(self, name: str) -> Optional[Sheet]:
        """Return the sheet called ``name``, ignoring case, or ``None``."""
        return self._sheets.get(name)

    @property
    def first_sheet(self) -> Optional[Sheet]:
        return self._sheets[0] if len(self._sheets) else None

    @property
    def active_sheet(self) -> Sheet:
        """:class:`Sheet`: The sheet used by references without a sheet name.

        Can be set using a :class:`Sheet` of this document or a sheet name.
        """
        return self._active_sheet

    @active_sheet.setter
    def active_sheet(self, value: Union[Sheet, str]):
        if isinstance(value, str):
            sheet = self.sheet(value)
            if sheet is None:
                raise KeyError(f"no sheet named '{value}'")
        elif isinstance(value, Sheet):
            if not any(sheet is value for sheet in self._sheets):
                raise KeyError(f"sheet '{value.name}' is not in this document")
            sheet = value
        else:
            msg = "active sheet must be a Sheet or sheet name"
            raise TypeError(msg)
        self._active_sheet = sheet

    def _target_sheet(self, sheet_name: Optional[str]) -> Optional[Sheet]:
        if sheet_name is None:
            return self._active_sheet
        return self.sheet(sheet_name)

    @staticmethod
    def _cell_reference(reference: Reference) -> CellReference:
        if isinstance(reference, CellReference):
            return reference
        if isinstance(reference, str):
            return CellReference.from_string(reference)
        t = type(reference).__name__
        raise TypeError(f"invalid cell reference type {t}")

    # Cells

    def cell(self, reference: Reference) -> Optional[Cell]:
        """Return the cell at ``reference`` or ``None`` if the cell does not exist."""
        ref = self._cell_reference(reference)
        sheet = self._target_sheet(ref.sheet_name)
        if sheet is None:
            return None
        return sheet.data.find_cell(ref)

    def create_cell(self, reference: Reference) -> Optional[Cell]:
        """
        Return the cell at ``reference``, creating an empty cell if required.

        Returns ``None`` if the reference names a sheet that does not exist.
        """
        ref = self._cell_reference(reference)
        sheet = self._target_sheet(ref.sheet_name)
        if sheet is None:
            return None
        return sheet.data.find_or_create_cell(ref)

    def delete_cell(self, reference: Reference) -> bool:
        """Remove the cell at ``reference``; return ``True`` if a cell was removed."""
        ref = self._cell_reference(reference)
        sheet = self._target_sheet(ref.sheet_name)
        if sheet is None:
            return False
        return sheet.data.delete_cell(ref)

    def write(self, reference: Reference, value: Any, style: Style = None) -> Optional[Cell]:
        """
        Write a value to a cell, replacing its content and style.

        The cell content and default style are chosen from the type of the value:

        ================  ==============  ================================
        Value             Content         Default style
        ================  ==============  ================================
        ``str``           text            ``StandardCellStyle.GENERAL``
        ``bool``          boolean         ``StandardCellStyle.GENERAL``
        ``int``           number          ``StandardCellStyle.INTEGER``
        ``float``         number          ``StandardCellStyle.FLOAT``
        ``Decimal``       number          ``StandardCellStyle.CURRENCY``
        ``datetime``      date            ``StandardCellStyle.DATETIME``
        ``date``          date            ``StandardCellStyle.DATE``
        ``time``          number          ``StandardCellStyle.TIME``
        ``timedelta``     number          ``StandardCellStyle.DURATION``
        ``Formula``       formula         ``StandardCellStyle.INTEGER``
        ================  ==============  ================================

        Any other value is written as text using ``str()``.

        Parameters
        ----------
        reference: str | CellReference
            The cell to write, for example ``"B7"`` or ``"Sheet2!B7"``.
        value: Any
            The value to write. A :py:class:`~spreadsheet_builder.StyledValue`
            carries its own style.
        style: int | StandardCellStyle, optional
            A cell style ID that overrides the default style.

        Returns
        -------
        Cell | None:
            The written cell or ``None`` if the reference names a sheet
            that does not exist.

        Warns
        -----
        RuntimeWarning:
            If a ``float`` is rounded to 15 significant digits.

        Raises
        ------
        IndexError:
            If ``style`` is not a registered cell style.
        ValueError:
            If ``value`` is a ``float`` that is infinite or not a number.
        """
        ref = self._cell_reference(reference)
        sheet = self._target_sheet(ref.sheet_name)
        if sheet is None:
            return None
        style_id = None if style is None else self._style_id(style)

        try:
            content, default_style_id = self.content_from_value(value)
        except ValueError as e:
            raise ValueError(f"{ref.short_reference}: {e}") from e

        cell = sheet.data.find_or_create_cell(ref)
        cell.set(content, default_style_id if style_id is None else style_id)
        return cell

    def _style_id(self, style: Style) -> int:
        if isinstance(style, StandardCellStyle):
            return self._styles.standard(style)
        if not isinstance(style, int) or isinstance(style, bool):
            msg = "style must be a cell style ID"
            raise TypeError(msg)
        if style not in self._styles.cell_formats:
            raise IndexError(f"cell style {style} does not exist")
        return style

    def content_from_value(self, value: Any) -> Tuple[CellContent, Optional[int]]:
        """Return the cell content and default cell style ID for a value."""
        if isinstance(value, StyledValue):
            style_id = None if value.style_id is None else self._style_id(value.style_id)
            content, default_style_id = self.content_from_value(value.value)
            if value.result_type is not None and isinstance(content, FormulaContent):
                content = FormulaContent(content.expression, value.result_type)
            return content, default_style_id if style_id is None else style_id

        if value is None:
            return EMPTY, None
        elif isinstance(value, Formula):
            content = FormulaContent(value.expression, value.result_type)
            style = StandardCellStyle.INTEGER
        elif isinstance(value, str):
            content = TextContent(self._shared_strings.add(value))
            style = StandardCellStyle.GENERAL
        elif isinstance(value, bool):
            content = BoolContent(value)
            style = StandardCellStyle.GENERAL
        elif isinstance(value, int):
            content = NumberContent(value)
            style = StandardCellStyle.INTEGER
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(f"'{value}' is not a finite number")
            rounded_value = sigfig.round(value, sigfigs=MAX_SIGNIFICANT_DIGITS, warn=False)
            if rounded_value != value:
                warn(
                    f"'{value}' rounded to {MAX_SIGNIFICANT_DIGITS} significant digits",
                    RuntimeWarning,
                    stacklevel=3,
                )
            content = NumberContent(rounded_value)
            style = StandardCellStyle.FLOAT
        elif isinstance(value, Decimal):
            content = NumberContent(value)
            style = StandardCellStyle.CURRENCY
        elif isinstance(value, builtin_datetime):
            content = DateContent(to_serial(value))
            style = StandardCellStyle.DATETIME
        elif isinstance(value, builtin_date):
            content = DateContent(to_serial(value))
            style = StandardCellStyle.DATE
        elif isinstance(value, builtin_time):
            content = NumberContent(to_serial(value))
            style = StandardCellStyle.TIME
        elif isinstance(value, builtin_timedelta):
            content = NumberContent(to_serial(value))
            style = StandardCellStyle.DURATION
        else:
            content = TextContent(self._shared_strings.add(str(value)))
            style = StandardCellStyle.GENERAL

        return content, self._styles.standard(style)

    def insert_row_cells(self, start: Reference, values: Iterable[Any]) -> bool:
        """
        Write a row of values starting at ``start``.

        Each value is converted as by :py:meth:`write`. A ``None`` value
        removes any existing cell in its column.

        Returns
        -------
        bool:
            ``False`` if the reference names a sheet that does not exist.
        """
        ref = self._cell_reference(start)
        sheet = self._target_sheet(ref.sheet_name)
        if sheet is None:
            return False

        cells = []
        for col, value in enumerate(values, start=ref.column_index):
            if value is None:
                cells.append(None)
                continue
            try:
                content, style_id = self.content_from_value(value)
            except ValueError as e:
                cell_ref = CellReference(None, col, ref.row_index).short_reference
                raise ValueError(f"{cell_ref}: {e}") from e
            cells.append(Cell(0, 0, content, style_id))
        sheet.data.insert_row_cells(ref, cells)
        return True

    def cell_value(self, reference: Reference) -> Any:
        """
        Return the value of a cell, or ``None`` if the cell is empty or missing.

        Text is returned as a ``str``, dates as a ``pendulum.DateTime`` and
        formulas as a :py:class:`~spreadsheet_builder.Formula`.
        """
        cell = self.cell(reference)
        if cell is None:
            return None

        content = cell.content
        if isinstance(content, TextContent):
            return self._shared_strings.get(content.string_id)
        elif isinstance(content, DateContent):
            return from_serial(content.serial)
        elif isinstance(content, FormulaContent):
            return Formula(content.expression, content.result_type)
        return content.value

    def cell_text(self, reference: Reference) -> Optional[str]:
        """
        Return the text of a cell as it would be stored.

        Formulas are returned with a leading ``=``, booleans as ``TRUE`` or
        ``FALSE`` and dates as their serial number. Returns ``None`` if the
        cell is empty or missing.
        """
        cell = self.cell(reference)
        if cell is None:
            return None

        content = cell.content
        if content.type == CellType.EMPTY:
            return None
        elif isinstance(content, FormulaContent):
            return "=" + content.expression
        elif isinstance(content, TextContent):
            text = self._shared_strings.get(content.string_id)
            return str(content.string_id) if text is None else text
        elif isinstance(content, BoolContent):
            return "TRUE" if content.value else "FALSE"
        return str(content.value)

    def cell_formula(self, reference: Reference) -> Optional[str]:
        """Return the formula of a cell without a leading ``=``, or ``None``."""
        cell = self.cell(reference)
        if cell is None or not cell.is_formula:
            return None
        return cell.content.expression

    # Columns

    def set_column_width(self, start: int, width: float, end: Optional[int] = None) -> None:
        """
        Set the width of one or more columns of the active sheet.

        Parameters
        ----------
        start: int
            The first column to set (1-based).
        width: float
            The column width in characters of the default font.
        end: int, optional
            The last column to set; defaults to ``start``.

        Raises
        ------
        IndexError:
            If ``start`` is less than one or ``end`` is less than ``start``.
        TypeError:
            If ``width`` is not a number.
        """
        end = start if end is None else end
        if start < 1 or end < start:
            raise IndexError(f"invalid column range {start}-{end}")
        if not isinstance(width, (int, float)) or isinstance(width, bool):
            msg = "column width must be a number"
            raise TypeError(msg)
        self._active_sheet.columns.append(ColumnWidth(start, end, float(width)))

    # Tables

    def table(self, name: str) -> Optional[Table]:
        """Return the table called ``name``, ignoring case, or ``None``."""
        for sheet in self._sheets:
            table = sheet.tables.get(name)
            if table is not None:
                return table
        return None

    def create_table(
        self,
        name: str,
        cell_range: Union[str, CellRange],
        headers: Optional[Iterable[str]] = None,
        style: Optional[TableStyle] = None,
    ) -> Optional[Table]:
        """
        Create a named table.

        The table is added to the sheet named by the start of the range, or
        the active sheet. Without ``headers`` the table has no header row and
        its columns are named ``Column1``, ``Column2``, etc.

        Parameters
        ----------
        name: str
            The name of the table, unique within the document.
        cell_range: str | CellRange
            The range of the table including any header row.
        headers: List[str], optional
            The table's column names.
        style: TableStyle, optional
            The table style.

        Returns
        -------
        Table | None:
            The new table or ``None`` if the range names a sheet that does not exist.

        Raises
        ------
        IndexError:
            If a table called ``name`` already exists.
        TypeError:
            If ``name`` is not a string or ``style`` is not a ``TableStyle``.
        """
        if not isinstance(name, str) or not name:
            msg = "table name must be a non-empty string"
            raise TypeError(msg)
        if style is not None and not isinstance(style, TableStyle):
            msg = "table style must be a TableStyle"
            raise TypeError(msg)
        if isinstance(cell_range, str):
            cell_range = CellRange.from_string(cell_range)
        elif isinstance(cell_range, CellRange):
            cell_range = cell_range.copy()
        else:
            t = type(cell_range).__name__
            raise TypeError(f"invalid cell range type {t}")

        sheet = self._target_sheet(cell_range.start.sheet_name)
        if sheet is None:
            return None
        if self.table(name) is not None:
            raise IndexError(f"table '{name}' already exists")

        if headers is not None:
            columns = [str(header) for header in headers]
        else:
            columns = [f"Column{n}" for n in range(1, cell_range.column_count + 1)]

        table_id = sum(len(sheet.tables) for sheet in self._sheets) + 1
        table = Table(
            id=table_id,
            name=name,
            range=cell_range,
            columns=columns,
            style=None if style is None or style.is_empty else style,
            header_row_count=1 if headers is not None else 0,
        )
        sheet.tables.append(table)
        debug("create_table: id=%d, name='%s', range=%s", table_id, name, cell_range.short_reference)
        return table

    # Defined names

    def define_name(self, name: str, reference: Reference) -> None:
        """
        Give a cell a name that can be used to find it later.

        Raises
        ------
        IndexError:
            If the name is already defined.
        """
        if not isinstance(name, str) or not name:
            msg = "defined name must be a non-empty string"
            raise TypeError(msg)
        if self._find_defined_name(name) is not None:
            raise IndexError(f"name '{name}' already defined")
        ref = self._cell_reference(reference).copy()
        if ref.sheet_name is None:
            ref.sheet_name = self._active_sheet.name
        self._defined_names[name] = str(ref)

    def _rename_defined_name_sheet(self, old_name: str, new_name: str) -> None:
        old_name = old_name.lower()
        for name, reference in self._defined_names.items():
            ref = CellReference.from_string(reference)
            if ref.sheet_name is not None and ref.sheet_name.lower() == old_name:
                ref.sheet_name = new_name
                self._defined_names[name] = str(ref)

    def _find_defined_name(self, name: str) -> Optional[str]:
        name = name.lower()
        for defined_name, reference in self._defined_names.items():
            if defined_name.lower() == name:
                return reference
        return None

    def reference_from_name(self, name: str) -> Optional[CellReference]:
        """Return the reference of a defined name, ignoring case, or ``None``."""
        reference = self._find_defined_name(name)
        if reference is None:
            return None
        return CellReference.from_string(reference)

    def cell_by_name(self, name: str) -> Optional[Cell]:
        """Return the cell with a defined name or ``None``."""
        reference = self.reference_from_name(name)
        if reference is None:
            return None
        return self.cell(reference)

    # Build

    def validation_errors(self) -> List[str]:
        """Return a list of the structural problems in the document."""
        errors = []
        for sheet in self._sheets:
            for cell in sheet.data.iter_cells():
                location = f"{sheet.name}!{cell.reference}"
                if cell.style_id is not None and cell.style_id not in self._styles.cell_formats:
                    errors.append(f"{location}: cell style {cell.style_id} does not exist")
                if (
                    isinstance(cell.content, TextContent)
                    and self._shared_strings.get(cell.content.string_id) is None
                ):
                    errors.append(f"{location}: shared string {cell.content.string_id} does not exist")
                if isinstance(cell.content, FormulaContent) and not cell.content.expression:
                    errors.append(f"{location}: empty formula")

            for table in sheet.tables:
                if not table.range.is_valid:
                    errors.append(f"table '{table.name}': invalid range {table.reference}")
                elif len(table.columns) != table.range.column_count:
                    errors.append(
                        f"table '{table.name}': {len(table.columns)} columns "
                        + f"in a range of {table.range.column_count} columns"
                    )

        for name, reference in self._defined_names.items():
            sheet_name = CellReference.from_string(reference).sheet_name
            if self.sheet(sheet_name) is None:
                errors.append(f"name '{name}': sheet '{sheet_name}' does not exist")

        return errors

    def build(self, validation: Optional[SaveValidation] = None) -> Dict[str, Any]:
        """
        Return the contents of the document as plain values.

        Parameters
        ----------
        validation: SaveValidation, optional
            Overrides the document's validation setting for this call.

        Raises
        ------
        ValidationError:
            If validation is ``SaveValidation.ALWAYS``, or
            ``SaveValidation.DEBUG_ONLY`` and Python is running without
            optimizations, and the document is not structurally valid.
        """
        validation = self.validation if validation is None else validation
        if validation == SaveValidation.ALWAYS or (validation == SaveValidation.DEBUG_ONLY and __debug__):
            errors = self.validation_errors()
            if errors:
                raise ValidationError(errors)

        debug("build: %d sheets, %d shared strings", len(self._sheets), len(self._shared_strings))
        return {
            "sheets": [self._build_sheet(sheet) for sheet in self._sheets],
            "active_sheet": self._active_sheet.name,
            "shared_strings": list(self._shared_strings),
            "styles": {
                "number_formats": _build_registry(self._styles.number_formats),
                "fonts": _build_registry(self._styles.fonts),
                "fills": _build_registry(self._styles.fills),
                "borders": _build_registry(self._styles.borders),
                "cell_formats": _build_registry(self._styles.cell_formats),
            },
            "defined_names": dict(self._defined_names),
        }

    def _build_sheet(self, sheet: Sheet) -> Dict[str, Any]:
        return {
            "id": sheet.id,
            "name": sheet.name,
            "columns": [asdict(column) for column in sheet.columns],
            "rows": [
                {
                    "index": row.index,
                    "cells": [_build_cell(cell) for cell in row],
                }
                for row in sheet.data
            ],
            "tables": [_build_table(table) for table in sheet.tables],
        }


def _build_cell(cell: Cell) -> Dict[str, Any]:
    cell_dict = {
        "reference": cell.reference,
        "type": cell.type.name.lower(),
        "value": cell.content.value,
        "style_id": cell.style_id,
    }
    if isinstance(cell.content, FormulaContent):
        cell_dict["result_type"] = cell.content.result_type.name.lower()
    return cell_dict


def _build_table(table: Table) -> Dict[str, Any]:
    return {
        "id": table.id,
        "name": table.name,
        "reference": table.reference,
        "header_row_count": table.header_row_count,
        "columns": [{"id": n, "name": name} for n, name in enumerate(table.columns, start=1)],
        "style": None if table.style is None else asdict(table.style),
    }


def _build_registry(registry) -> List[Dict[str, Any]]:
    return [dict(id=resource_id, **asdict(definition)) for resource_id, definition in registry]


