import logging
from typing import Any, Iterable, List, Optional, Union

from spreadsheet_builder import __name__ as spreadsheet_builder_name
from spreadsheet_builder.document import Document, Table
from spreadsheet_builder.styles import TableStyle
from spreadsheet_builder.xrefs import CellRange, CellReference

logger = logging.getLogger(spreadsheet_builder_name)
debug = logger.debug

__all__ = ["TableBuilder"]


class TableBuilder:
    """
    Write a table one row at a time and create a named table from it.

    A table either has a header row, written as soon as the builder is
    created, or a fixed number of columns. The width of the table is fixed
    when the builder is created; rows with more or fewer values than the
    table has columns are written as they are.

    .. code-block:: python

        table = TableBuilder(doc, "A7", headers=["Railcar", "Rate", "Total"])
        for railcar, rate in items:
            table.add_row(railcar, rate, Formula(f"B{table.row_index}*12"))
        total_range = table.column_range(2)
        table.add_row("Total", None, Formula(f"SUM({total_range})"))
        table.build("ItemsTable", TableStyle.medium(6))

    Parameters
    ----------
    document: Document
        The document to write to.
    reference: str | CellReference
        The top-left cell of the table. A sheet name selects the sheet the
        table is written to.
    columns: int, optional
        The number of columns in a table without a header row.
    headers: List[str], optional
        The column names of a table with a header row.

    Raises
    ------
    TypeError:
        If ``document`` or ``reference`` is ``None`` or if not exactly one
        of ``columns`` and ``headers`` is provided.
    """

    def __init__(
        self,
        document: Document,
        reference: Union[str, CellReference],
        columns: Optional[int] = None,
        headers: Optional[Iterable[str]] = None,
    ):
        if document is None:
            msg = "document cannot be None"
            raise TypeError(msg)
        if reference is None:
            msg = "reference cannot be None"
            raise TypeError(msg)
        if (columns is None) == (headers is None):
            msg = "either columns or headers must be provided"
            raise TypeError(msg)

        if isinstance(reference, str):
            reference = CellReference.from_string(reference)
        elif isinstance(reference, CellReference):
            reference = reference.copy()
        else:
            t = type(reference).__name__
            raise TypeError(f"invalid cell reference type {t}")

        self._document = document
        self._start = reference
        self._headers: Optional[List[str]] = None
        self._table: Optional[Table] = None
        self.row_index = reference.row_index

        if headers is not None:
            self._headers = list(headers)
            self._num_cols = len(self._headers)
            self.add_row(*self._headers)
        else:
            if not isinstance(columns, int) or isinstance(columns, bool) or columns < 1:
                msg = "number of columns must be a positive integer"
                raise TypeError(msg)
            self._num_cols = columns

    @property
    def has_header(self) -> bool:
        """bool: ``True`` if the table has a header row."""
        return self._headers is not None

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    def is_built(self) -> bool:
        """bool: ``True`` once :py:meth:`build` has created the named table."""
        return self._table is not None

    @property
    def table(self) -> Optional[Table]:
        return self._table

    def add_row(self, *values: Any) -> None:
        """
        Write a row of values and move to the next row.

        Values are converted as by :py:meth:`Document.write`. A ``None``
        value leaves its column empty.
        """
        start = CellReference(self._start.sheet_name, self._start.column_index, self.row_index)
        self._document.insert_row_cells(start, values)
        self.row_index += 1

    @property
    def start_reference(self) -> CellReference:
        """CellReference: The top-left cell of the table."""
        return self._start.copy()

    @property
    def end_reference(self) -> CellReference:
        """CellReference: The bottom-right cell of the rows written so far."""
        return CellReference(
            column_index=self._start.column_index + self._num_cols - 1,
            row_index=self.row_index - 1,
        )

    def table_range(self, include_header: bool = True) -> CellRange:
        """
        Return the range of the rows written so far.

        Parameters
        ----------
        include_header: bool, optional, default: True
            If ``False``, the header row is excluded. The range always
            includes at least one row.
        """
        cell_range = CellRange(self.start_reference, self.end_reference)
        if self.has_header and not include_header:
            cell_range.start.row_index += 1
            if cell_range.end.row_index < cell_range.start.row_index:
                cell_range.end.row_index = cell_range.start.row_index
        return cell_range

    def column_range(self, offset: int, include_header: bool = False) -> CellRange:
        """
        Return the range of one column of the table, for example for use in formulas.

        .. code-block:: python

            total_range = table.column_range(6)
            table.add_row("Total", Formula(f"SUM({total_range})"))

        Parameters
        ----------
        offset: int
            The column relative to the first column of the table (zero indexed).
        include_header: bool, optional, default: False
            If ``True``, the header row is included.
        """
        return self.table_range(include_header).column_range(offset)

    def row_range(self, offset: int, include_header: bool = False) -> CellRange:
        """Return the range of one row of the table (zero indexed)."""
        return self.table_range(include_header).row_range(offset)

    def build(self, name: str, style: Optional[TableStyle] = None) -> Optional[Table]:
        """
        Create a named table covering the rows written so far.

        Returns
        -------
        Table | None:
            The new table or ``None`` if the table's sheet does not exist.

        Raises
        ------
        IndexError:
            If a table called ``name`` already exists.
        """
        table = self._document.create_table(name, self.table_range(), self._headers, style)
        if table is not None:
            self._table = table
        debug("build table '%s': %s", name, self.table_range().short_reference)
        return table
