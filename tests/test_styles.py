import pytest
from pytest_check import check

from spreadsheet_builder import (
    RGB,
    Alignment,
    Border,
    BorderLine,
    BuiltinNumberFormat,
    CellFormat,
    Document,
    Fill,
    Font,
    StandardBorderStyle,
    StandardCellStyle,
    StandardFillStyle,
    StandardFontStyle,
    StandardNumberFormat,
    Stylesheet,
    TableStyle,
)
from spreadsheet_builder.constants import DEFAULT_FONT, DEFAULT_FONT_SIZE


def test_standard_styles():
    styles = Stylesheet()

    check.equal(len(styles.number_formats), 3)
    check.equal(styles.standard(StandardNumberFormat.GENERAL), 164)
    check.equal(styles.standard(StandardNumberFormat.FLOAT), 165)
    check.equal(styles.standard(StandardNumberFormat.DATETIME), 166)
    check.equal(styles.number_formats[165].format_code, "#,##0.###")
    check.equal(styles.number_formats[166].format_code, "m/d/yyyy h:mm AM/PM")

    check.equal(len(styles.fonts), 4)
    check.equal(styles.standard(StandardFontStyle.GENERAL), 0)
    check.is_true(styles.fonts[styles.standard(StandardFontStyle.BOLD)].bold)
    check.equal(styles.fonts[styles.standard(StandardFontStyle.HEADER)].size, 20.0)
    check.equal(styles.fonts[styles.standard(StandardFontStyle.SUBHEADER)].size, 14.0)
    check.equal(styles.fonts[0].name, DEFAULT_FONT)
    check.equal(styles.fonts[0].size, DEFAULT_FONT_SIZE)

    check.equal(len(styles.fills), 2)
    check.equal(styles.fills[styles.standard(StandardFillStyle.GENERAL)].pattern, "none")
    check.equal(styles.fills[styles.standard(StandardFillStyle.GRAY125)].pattern, "gray125")

    check.equal(len(styles.borders), 1)
    check.equal(styles.standard(StandardBorderStyle.GENERAL), 0)

    check.equal(len(styles.cell_formats), 8)
    check.equal(styles.standard(StandardCellStyle.GENERAL), 0)
    check.equal(styles.standard(StandardCellStyle.DURATION), 7)


@pytest.mark.parametrize(
    "cell_style,number_format_id",
    [
        (StandardCellStyle.GENERAL, 0),
        (StandardCellStyle.INTEGER, 3),
        (StandardCellStyle.FLOAT, 165),
        (StandardCellStyle.CURRENCY, 44),
        (StandardCellStyle.DATETIME, 166),
        (StandardCellStyle.DATE, 14),
        (StandardCellStyle.TIME, 18),
        (StandardCellStyle.DURATION, 46),
    ],
)
def test_standard_cell_style_formats(cell_style, number_format_id):
    styles = Stylesheet()
    cell_format = styles.cell_formats[styles.standard(cell_style)]
    assert cell_format.number_format_id == number_format_id
    assert cell_format.font_id == 0
    assert cell_format.fill_id == 0
    assert cell_format.border_id == 0


def test_register_cell_format():
    doc = Document()
    styles = doc.styles

    percent_id = styles.register_number_format("0.0%")
    assert percent_id == 167
    red_font = styles.register_font(Font(bold=True, color=(230, 25, 25)))
    assert red_font == 4
    assert styles.fonts[red_font].color == RGB(230, 25, 25)
    yellow = styles.register_fill(Fill("solid", fg_color=RGB(255, 255, 0)))
    underline = styles.register_border(Border(bottom=BorderLine("double", RGB(29, 177, 0))))

    style_id = styles.register_cell_format(
        CellFormat(
            number_format_id=percent_id,
            font_id=red_font,
            fill_id=yellow,
            border_id=underline,
            alignment=("right", "top"),
            apply_font=True,
            apply_fill=True,
            apply_border=True,
        )
    )
    assert style_id == 8
    cell_format = styles.cell_formats[style_id]
    assert cell_format.alignment == Alignment("right", "top")
    assert cell_format.apply_alignment

    builtin_id = styles.register_cell_format(CellFormat(BuiltinNumberFormat.PERCENT))
    assert builtin_id == 9

    doc.write("A1", 0.25, style=style_id)
    assert doc.cell("A1").style_id == style_id


def test_register_cell_format_errors():
    styles = Stylesheet()

    with pytest.raises(IndexError) as e:
        _ = styles.register_cell_format(CellFormat(number_format_id=170))
    assert "number format 170 is not registered" in str(e)

    with pytest.raises(IndexError) as e:
        _ = styles.register_cell_format(CellFormat(font_id=9))
    assert "font 9 is not registered" in str(e)

    with pytest.raises(IndexError) as e:
        _ = styles.register_cell_format(CellFormat(fill_id=2))
    assert "fill 2 is not registered" in str(e)

    with pytest.raises(IndexError) as e:
        _ = styles.register_cell_format(CellFormat(border_id=1))
    assert "border 1 is not registered" in str(e)

    assert len(styles.cell_formats) == 8


def test_style_definition_errors():
    with pytest.raises(TypeError) as e:
        _ = Font(size=11)
    assert "size must be a float number of points" in str(e)

    with pytest.raises(TypeError) as e:
        _ = Font(name=12)
    assert "font name must be a string" in str(e)

    with pytest.raises(TypeError) as e:
        _ = Font(italic="yes")
    assert "italic argument must be boolean" in str(e)

    with pytest.raises(TypeError) as e:
        _ = Font(color=(1, 2))
    assert "RGB color must be an RGB or a tuple of 3 integers" in str(e)

    with pytest.raises(TypeError) as e:
        _ = Fill("stripes")
    assert "invalid fill pattern 'stripes'" in str(e)

    with pytest.raises(TypeError) as e:
        _ = BorderLine("wavy")
    assert "invalid border style" in str(e)

    with pytest.raises(TypeError) as e:
        _ = Border(left="thin")
    assert "left border must be a BorderLine" in str(e)

    with pytest.raises(TypeError) as e:
        _ = Alignment("middle", "top")
    assert "invalid horizontal alignment" in str(e)

    with pytest.raises(TypeError) as e:
        _ = Alignment("left", "middle")
    assert "invalid vertical alignment" in str(e)

    with pytest.raises(TypeError) as e:
        _ = CellFormat(font_id="bold")
    assert "font_id must be an integer" in str(e)

    with pytest.raises(TypeError) as e:
        _ = CellFormat(alignment="left")
    assert "Alignment must be an Alignment or a tuple of 2 strings" in str(e)


def test_standard_lookup_errors():
    styles = Stylesheet()
    with pytest.raises(LookupError) as e:
        _ = styles.standard(BuiltinNumberFormat.GENERAL)
    assert "invalid standard style type BuiltinNumberFormat" in str(e)


def test_alignment():
    alignment = Alignment("RIGHT", "Center")
    assert alignment.horizontal == "right"
    assert alignment.vertical == "center"
    assert Alignment() == ("general", "bottom")


def test_table_styles():
    assert TableStyle.light(1).name == "TableStyleLight1"
    assert TableStyle.medium(28).name == "TableStyleMedium28"
    assert TableStyle.dark(11).name == "TableStyleDark11"

    style = TableStyle.medium(4, show_row_stripes=False, show_first_column=True)
    assert not style.show_row_stripes
    assert style.show_first_column
    assert not style.show_last_column
    assert TableStyle().is_empty
    assert not style.is_empty

    with pytest.raises(IndexError) as e:
        _ = TableStyle.light(22)
    assert "light table style 22 out of range 1-21" in str(e)

    with pytest.raises(IndexError) as e:
        _ = TableStyle.dark(0)
    assert "dark table style 0 out of range 1-11" in str(e)
