import logging
from bisect import bisect_left
from typing import Iterable, Iterator, List, Optional

from spreadsheet_builder import __name__ as spreadsheet_builder_name
from spreadsheet_builder.cell import Cell
from spreadsheet_builder.xrefs import CellReference

logger = logging.getLogger(spreadsheet_builder_name)
debug = logger.debug

__all__ = ["Row", "SheetData"]


class Row:
    """An ordered collection of cells, unique by column index.

    Cells are kept in ascending column order. Column indexes are held in
    a parallel list so that lookups and inserts can use binary search.
    """

    __slots__ = ("index", "_cells", "_cols")

    def __init__(self, index: int) -> None:
        self.index = index
        self._cells: List[Cell] = []
        self._cols: List[int] = []

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __repr__(self) -> str:
        return f"<Row {self.index}: {len(self._cells)} cells>"

    @property
    def column_indexes(self) -> List[int]:
        return list(self._cols)

    def find_cell(self, col: int) -> Optional[Cell]:
        """Return the cell in column ``col`` or ``None`` if there is no cell."""
        pos = bisect_left(self._cols, col)
        if pos < len(self._cols) and self._cols[pos] == col:
            return self._cells[pos]
        return None

    def find_or_create_cell(self, col: int) -> Cell:
        """Return the cell in column ``col``, inserting an empty cell if required."""
        pos = bisect_left(self._cols, col)
        if pos < len(self._cols) and self._cols[pos] == col:
            return self._cells[pos]

        cell = Cell(self.index, col)
        self._cells.insert(pos, cell)
        self._cols.insert(pos, col)
        return cell

    def delete_cell(self, col: int) -> bool:
        """Remove the cell in column ``col``; return ``True`` if a cell was removed."""
        pos = bisect_left(self._cols, col)
        if pos < len(self._cols) and self._cols[pos] == col:
            del self._cells[pos]
            del self._cols[pos]
            return True
        return False

    def replace_cells(self, start_col: int, cells: List[Optional[Cell]]) -> None:
        """Replace a contiguous run of columns starting at ``start_col``.

        Each item of ``cells`` is written to the next column. Existing cells
        in the run are discarded; a ``None`` item leaves its column empty.
        The whole run is written with a single splice of the row.
        """
        end_col = start_col + len(cells)
        lo = bisect_left(self._cols, start_col)
        hi = bisect_left(self._cols, end_col, lo)

        new_cells = []
        for col, cell in enumerate(cells, start=start_col):
            if cell is not None:
                cell.row = self.index
                cell.col = col
                new_cells.append(cell)

        self._cells[lo:hi] = new_cells
        self._cols[lo:hi] = [cell.col for cell in new_cells]


class SheetData:
    """The rows of one sheet, unique by row index and kept in ascending order.

    Rows and cells are created on demand. Lookups never create anything and
    return ``None`` when a row or cell does not exist.
    """

    def __init__(self) -> None:
        self._rows: List[Row] = []
        self._row_indexes: List[int] = []

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    @property
    def row_indexes(self) -> List[int]:
        return list(self._row_indexes)

    def find_row(self, row: int) -> Optional[Row]:
        pos = bisect_left(self._row_indexes, row)
        if pos < len(self._row_indexes) and self._row_indexes[pos] == row:
            return self._rows[pos]
        return None

    def find_or_create_row(self, row: int) -> Row:
        """Return the row with index ``row``, inserting an empty row if required."""
        pos = bisect_left(self._row_indexes, row)
        if pos < len(self._row_indexes) and self._row_indexes[pos] == row:
            return self._rows[pos]

        new_row = Row(row)
        self._rows.insert(pos, new_row)
        self._row_indexes.insert(pos, row)
        return new_row

    def find_cell(self, reference: CellReference) -> Optional[Cell]:
        row = self.find_row(reference.row_index)
        if row is None:
            return None
        return row.find_cell(reference.column_index)

    def find_or_create_cell(self, reference: CellReference) -> Cell:
        row = self.find_or_create_row(reference.row_index)
        return row.find_or_create_cell(reference.column_index)

    def delete_cell(self, reference: CellReference) -> bool:
        row = self.find_row(reference.row_index)
        if row is None:
            return False
        return row.delete_cell(reference.column_index)

    def insert_row_cells(self, start: CellReference, cells: Iterable[Optional[Cell]]) -> Row:
        """Write a contiguous run of cells into a row.

        The run starts at the column and row of ``start``. Positions of the
        cells are set from the run; any position a cell already had is
        ignored. Existing cells inside the run are replaced and ``None``
        entries clear their column.

        Parameters
        ----------
        start: CellReference
            The first cell of the run.
        cells: Iterable[Cell | None]
            The cells to write, one per column.

        Returns
        -------
        Row:
            The row that was written.
        """
        cells = list(cells)
        row = self.find_or_create_row(start.row_index)
        row.replace_cells(start.column_index, cells)
        debug("insert_row_cells: %s, %d cells", start.short_reference, len(cells))
        return row

    def iter_cells(self) -> Iterator[Cell]:
        """Yield every cell in row then column order."""
        for row in self._rows:
            yield from row
