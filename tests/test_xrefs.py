import pytest
from pytest_check import check

from spreadsheet_builder import (
    CellRange,
    CellReference,
    column_index_to_name,
    column_name_to_index,
    xl_cell_to_rowcol,
    xl_col_to_name,
    xl_range,
    xl_rowcol_to_cell,
)

# Reference text, sheet, column, row, fixed column, fixed row
REFERENCE_DATA = [
    ("A1", None, 1, 1, False, False),
    ("A2", None, 1, 2, False, False),
    ("A100", None, 1, 100, False, False),
    ("A1000", None, 1, 1000, False, False),
    ("B1", None, 2, 1, False, False),
    ("Z1", None, 26, 1, False, False),
    ("AA1", None, 27, 1, False, False),
    ("AB1", None, 28, 1, False, False),
    ("ZZ1", None, 702, 1, False, False),
    ("AAA1", None, 703, 1, False, False),
    ("Sheet1!A1", "Sheet1", 1, 1, False, False),
    ("Sheet1!A1000", "Sheet1", 1, 1000, False, False),
    ("Sheet1!Z1", "Sheet1", 26, 1, False, False),
    ("Sheet1!AA1", "Sheet1", 27, 1, False, False),
    ("Sheet1!AAA1", "Sheet1", 703, 1, False, False),
    ("Sheet1!$A$1", "Sheet1", 1, 1, True, True),
    ("Sheet1!$A$100", "Sheet1", 1, 100, True, True),
    ("Sheet1!$AB$1", "Sheet1", 28, 1, True, True),
    ("Sheet1!$ZZ$1", "Sheet1", 702, 1, True, True),
    ("Sheet1!$AAA$1", "Sheet1", 703, 1, True, True),
    ("$C7", None, 3, 7, True, False),
    ("C$7", None, 3, 7, False, True),
]

MALFORMED_REFERENCES = [
    ("", 1, 1),
    ("A0", 1, 1),
    ("A", 1, 1),
    ("7", 1, 7),
    ("a5", 1, 5),
    ("$", 1, 1),
    ("B-3", 2, 1),
]


@pytest.mark.parametrize("text,sheet,col,row,fixed_col,fixed_row", REFERENCE_DATA)
def test_parse_reference(text, sheet, col, row, fixed_col, fixed_row):
    ref = CellReference.from_string(text)
    check.equal(ref.sheet_name, sheet)
    check.equal(ref.column_index, col)
    check.equal(ref.row_index, row)
    check.equal(ref.fixed_column, fixed_col)
    check.equal(ref.fixed_row, fixed_row)
    check.equal(str(ref), text)
    check.equal(ref.reference, text)


@pytest.mark.parametrize("text,sheet,col,row,fixed_col,fixed_row", REFERENCE_DATA)
def test_reference_copy(text, sheet, col, row, fixed_col, fixed_row):
    ref = CellReference.from_string(text)
    ref_copy = ref.copy()
    assert ref_copy == ref
    assert ref_copy is not ref

    ref_copy.row_index += 1
    assert ref.row_index == row


def test_default_reference():
    ref = CellReference()
    assert ref.sheet_name is None
    assert ref.column_index == 1
    assert ref.row_index == 1
    assert str(ref) == "A1"
    assert ref.short_reference == "A1"


def test_short_reference():
    ref = CellReference.from_string("Sheet 2!$AB$12")
    assert ref.sheet_name == "Sheet 2"
    assert ref.short_reference == "AB12"
    assert ref.column_name == "AB"


def test_sheet_name_with_separator():
    ref = CellReference.from_string("Q1!Q2!B3")
    assert ref.sheet_name == "Q1!Q2"
    assert ref.short_reference == "B3"

    ref = CellReference.from_string("!B3")
    assert ref.sheet_name == ""


@pytest.mark.parametrize("text,col,row", MALFORMED_REFERENCES)
def test_malformed_reference(text, col, row):
    ref = CellReference.from_string(text)
    assert ref.column_index == col
    assert ref.row_index == row


@pytest.mark.parametrize("text", ["", "A0", "A", "7", "a5", "B3C", "!B3", "B-3"])
def test_malformed_reference_strict(text):
    with pytest.raises(IndexError) as e:
        _ = CellReference.from_string(text, strict=True)
    assert "invalid cell reference" in str(e)


def test_reference_type_errors():
    with pytest.raises(TypeError) as e:
        _ = CellReference.from_string(None)
    assert "cell reference must be a string" in str(e)

    with pytest.raises(TypeError) as e:
        _ = CellRange.from_string(None)
    assert "cell range must be a string" in str(e)


def test_column_names():
    assert column_index_to_name(1) == "A"
    assert column_index_to_name(26) == "Z"
    assert column_index_to_name(27) == "AA"
    assert column_index_to_name(702) == "ZZ"
    assert column_index_to_name(703) == "AAA"
    assert column_index_to_name(18278) == "ZZZ"
    assert column_index_to_name(0) == "A"
    assert column_index_to_name(None) == "A"

    assert column_name_to_index("A") == 1
    assert column_name_to_index("Z") == 26
    assert column_name_to_index("AA") == 27
    assert column_name_to_index("ZZ") == 702
    assert column_name_to_index("AAA") == 703
    assert column_name_to_index("ZZZ") == 18278
    assert column_name_to_index("") == 1
    assert column_name_to_index(None) == 1
    assert column_name_to_index("abc") == 1
    assert column_name_to_index("ABc") == 28


def test_column_name_bijection():
    names = set()
    for index in range(1, 18279):
        name = column_index_to_name(index)
        assert column_name_to_index(name) == index
        names.add(name)
    assert len(names) == 18278


def test_parse_range():
    cell_range = CellRange.from_string("B2:D9")
    assert cell_range.start.short_reference == "B2"
    assert cell_range.end.short_reference == "D9"
    assert cell_range.column_count == 3
    assert cell_range.row_count == 8
    assert cell_range.left_column_name == "B"
    assert cell_range.right_column_name == "D"
    assert cell_range.top_row_index == 2
    assert cell_range.bottom_row_index == 9
    assert str(cell_range) == "B2:D9"
    assert cell_range.is_valid
    assert not cell_range.is_empty

    cell_range = CellRange.from_string("Sheet1!$A$1:$C$3")
    assert str(cell_range) == "Sheet1!$A$1:$C$3"
    assert cell_range.short_reference == "A1:C3"


def test_single_cell_range():
    cell_range = CellRange.from_string("C4")
    assert str(cell_range) == "C4:C4"
    assert cell_range.is_valid
    assert cell_range.is_empty
    assert cell_range.column_count == 1
    assert cell_range.row_count == 1

    cell_range.end.row_index = 10
    assert cell_range.start.row_index == 4


def test_range_copies_references():
    start = CellReference.from_string("A1")
    end = CellReference.from_string("B2")
    cell_range = CellRange(start, end)
    start.column_index = 10
    assert cell_range.start.column_index == 1

    range_copy = cell_range.copy()
    range_copy.end.row_index = 20
    assert cell_range.end.row_index == 2


@pytest.mark.parametrize(
    "text,normalized",
    [
        ("C5:A1", "A1:C5"),
        ("A5:C1", "A1:C5"),
        ("C1:A5", "A1:C5"),
        ("A1:C5", "A1:C5"),
        ("B2", "B2:B2"),
    ],
)
def test_normalize(text, normalized):
    cell_range = CellRange.from_string(text)
    assert cell_range.normalize() is cell_range
    assert cell_range.is_valid
    assert str(cell_range) == normalized
    assert str(cell_range.normalize()) == normalized


def test_invalid_ranges():
    for text in ["C5:A1", "A5:C1", "C1:A5"]:
        assert not CellRange.from_string(text).is_valid

    assert CellRange.from_string("C5:A1").is_empty
    assert not CellRange.from_string("A5:C1").is_empty


def test_column_and_row_ranges():
    cell_range = CellRange.from_string("B2:E9")
    check.equal(str(cell_range.column_range(0)), "B2:B9")
    check.equal(str(cell_range.column_range(3)), "E2:E9")
    check.equal(str(cell_range.row_range(0)), "B2:E2")
    check.equal(str(cell_range.row_range(7)), "B9:E9")
    check.equal(str(cell_range), "B2:E9")


def test_range_counts():
    cell_range = CellRange.from_string("B2:B2")
    cell_range.column_count = 4
    cell_range.row_count = 10
    assert str(cell_range) == "B2:E11"

    cell_range.column_count = 0
    assert cell_range.column_count == 1
    assert str(cell_range) == "B2:B11"


def test_zero_indexed_helpers():
    assert xl_range(2, 2, 2, 2) == "C3"
    assert xl_range(0, 0, 9, 2) == "A1:C10"
    assert xl_col_to_name(0) == "A"
    assert xl_col_to_name(25) == "Z"
    assert xl_col_to_name(26) == "AA"
    assert xl_col_to_name(26, col_abs=True) == "$AA"
    assert xl_rowcol_to_cell(0, 0) == "A1"
    assert xl_rowcol_to_cell(9, 27, row_abs=True, col_abs=True) == "$AB$10"
    assert xl_cell_to_rowcol("AB10") == (9, 27)
    assert xl_cell_to_rowcol("$C$3") == (2, 2)
    assert xl_cell_to_rowcol("") == (0, 0)

    with pytest.raises(IndexError) as e:
        _ = xl_rowcol_to_cell(-1, 0)
    assert "row reference -1 below zero" in str(e)

    with pytest.raises(IndexError) as e:
        _ = xl_col_to_name(-2)
    assert "column reference -2 below zero" in str(e)

    with pytest.raises(IndexError) as e:
        _ = xl_cell_to_rowcol("3C")
    assert "invalid cell reference 3C" in str(e)
