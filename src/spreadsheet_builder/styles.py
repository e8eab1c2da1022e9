import logging
from collections import namedtuple
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from spreadsheet_builder import __name__ as spreadsheet_builder_name
from spreadsheet_builder.constants import (
    DEFAULT_ALIGNMENT,
    DEFAULT_BORDER_COLOR,
    DEFAULT_BORDER_STYLE,
    DEFAULT_FONT,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SCHEME,
    DEFAULT_FONT_SIZE,
    MIN_NUMBER_FORMAT_ID,
    STANDARD_CELL_STYLE_FORMATS,
    STANDARD_FILL_PATTERNS,
    STANDARD_FONTS,
    STANDARD_NUMBER_FORMATS,
    TABLE_STYLE_COUNTS,
    BuiltinNumberFormat,
    StandardBorderStyle,
    StandardCellStyle,
    StandardFillStyle,
    StandardFontStyle,
    StandardNumberFormat,
)
from spreadsheet_builder.registry import Registry

logger = logging.getLogger(spreadsheet_builder_name)
debug = logger.debug

__all__ = [
    "Alignment",
    "Border",
    "BorderLine",
    "CellFormat",
    "Fill",
    "Font",
    "NumberFormat",
    "RGB",
    "Stylesheet",
    "TableStyle",
]

RGB = namedtuple("RGB", ["r", "g", "b"])


def rgb_color(color) -> RGB:
    """Raise a TypeError if a color is not a valid RGB value."""
    if color is None:
        return None
    if isinstance(color, RGB):
        return color
    if isinstance(color, tuple):
        if not (len(color) == 3 and all(isinstance(x, int) for x in color)):
            msg = "RGB color must be an RGB or a tuple of 3 integers"
            raise TypeError(msg)
        return RGB(*color)
    msg = "RGB color must be an RGB or a tuple of 3 integers"
    raise TypeError(msg)


HORIZONTAL_ALIGNMENTS = ["general", "left", "center", "right", "fill", "justify"]
VERTICAL_ALIGNMENTS = ["top", "center", "bottom", "justify"]

_Alignment = namedtuple("Alignment", ["horizontal", "vertical"])


class Alignment(_Alignment):
    def __new__(cls, horizontal=DEFAULT_ALIGNMENT[0], vertical=DEFAULT_ALIGNMENT[1]):
        if not isinstance(horizontal, str) or horizontal.lower() not in HORIZONTAL_ALIGNMENTS:
            msg = "invalid horizontal alignment"
            raise TypeError(msg)
        if not isinstance(vertical, str) or vertical.lower() not in VERTICAL_ALIGNMENTS:
            msg = "invalid vertical alignment"
            raise TypeError(msg)

        return super(_Alignment, cls).__new__(cls, (horizontal.lower(), vertical.lower()))


@dataclass(frozen=True)
class NumberFormat:
    """A custom number format such as ``"#,##0.###"``."""

    format_code: str

    def __post_init__(self):
        if not isinstance(self.format_code, str) or not self.format_code:
            msg = "format code must be a non-empty string"
            raise TypeError(msg)


@dataclass(frozen=True)
class Font:
    """A font definition.

    Parameters
    ----------
    name: str, optional, default: DEFAULT_FONT
        Font name
    size: float, optional, default: DEFAULT_FONT_SIZE
        Font size in points
    bold: bool, optional, default: False
        ``True`` if the font is bold
    italic: bool, optional, default: False
        ``True`` if the font is italic
    underline: bool, optional, default: False
        ``True`` if the font is underlined
    strikethrough: bool, optional, default: False
        ``True`` if the font is struck through
    color: RGB, optional
        Font color, or ``None`` for the theme's text color
    family: int, optional, default: 2
        Font family number
    scheme: str, optional, default: "minor"
        Font scheme, or ``None`` for fonts outside the theme
    """

    name: str = DEFAULT_FONT
    size: float = DEFAULT_FONT_SIZE
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    color: RGB = None
    family: int = DEFAULT_FONT_FAMILY
    scheme: Optional[str] = DEFAULT_FONT_SCHEME

    def __post_init__(self):
        object.__setattr__(self, "color", rgb_color(self.color))

        if not isinstance(self.size, float):
            msg = "size must be a float number of points"
            raise TypeError(msg)
        if not isinstance(self.name, str):
            msg = "font name must be a string"
            raise TypeError(msg)

        for attr in ["bold", "italic", "underline", "strikethrough"]:
            if not isinstance(getattr(self, attr), bool):
                msg = f"{attr} argument must be boolean"
                raise TypeError(msg)


FILL_PATTERNS = [
    "none",
    "solid",
    "gray125",
    "gray0625",
    "darkGray",
    "mediumGray",
    "lightGray",
]


@dataclass(frozen=True)
class Fill:
    """A pattern fill with optional foreground and background colors."""

    pattern: str = "none"
    fg_color: RGB = None
    bg_color: RGB = None

    def __post_init__(self):
        object.__setattr__(self, "fg_color", rgb_color(self.fg_color))
        object.__setattr__(self, "bg_color", rgb_color(self.bg_color))
        if self.pattern not in FILL_PATTERNS:
            msg = f"invalid fill pattern '{self.pattern}'"
            raise TypeError(msg)


BORDER_STYLES = [
    "thin",
    "medium",
    "thick",
    "double",
    "dashed",
    "dotted",
    "hair",
    "dashDot",
    "dashDotDot",
    "mediumDashed",
]


@dataclass(frozen=True)
class BorderLine:
    """One edge of a cell border.

    .. code-block:: python

        border = Border(bottom=BorderLine("double", RGB(29, 177, 0)))
    """

    style: str = DEFAULT_BORDER_STYLE
    color: RGB = RGB(*DEFAULT_BORDER_COLOR)

    def __post_init__(self):
        object.__setattr__(self, "color", rgb_color(self.color))
        if self.style not in BORDER_STYLES:
            msg = "invalid border style"
            raise TypeError(msg)

    def __str__(self) -> str:
        return f"BorderLine(style={self.style}, color={self.color})"


@dataclass(frozen=True)
class Border:
    """The edges of a cell border; ``None`` edges are not drawn."""

    left: BorderLine = None
    right: BorderLine = None
    top: BorderLine = None
    bottom: BorderLine = None
    diagonal: BorderLine = None

    def __post_init__(self):
        for attr in ["left", "right", "top", "bottom", "diagonal"]:
            value = getattr(self, attr)
            if value is not None and not isinstance(value, BorderLine):
                msg = f"{attr} border must be a BorderLine"
                raise TypeError(msg)


@dataclass(frozen=True)
class CellFormat:
    """A composite cell style referencing a number format, font, fill and border by ID.

    Register cell formats with :py:meth:`Stylesheet.register_cell_format` and
    use the returned ID as the style of a cell.
    """

    number_format_id: int = BuiltinNumberFormat.GENERAL
    font_id: int = 0
    fill_id: int = 0
    border_id: int = 0
    alignment: Alignment = None
    apply_number_format: bool = True
    apply_font: bool = False
    apply_fill: bool = False
    apply_border: bool = False

    def __post_init__(self):
        for attr in ["number_format_id", "font_id", "fill_id", "border_id"]:
            if not isinstance(getattr(self, attr), int):
                msg = f"{attr} must be an integer"
                raise TypeError(msg)
        if self.alignment is not None:
            if isinstance(self.alignment, tuple) and not isinstance(self.alignment, Alignment):
                object.__setattr__(self, "alignment", Alignment(*self.alignment))
            elif not isinstance(self.alignment, Alignment):
                msg = "Alignment must be an Alignment or a tuple of 2 strings"
                raise TypeError(msg)

    @property
    def apply_alignment(self) -> bool:
        return self.alignment is not None


@dataclass(frozen=True)
class TableStyle:
    """The built-in style applied to a table.

    .. code-block:: python

        items = TableStyle.medium(6)
        headers = TableStyle.medium(4, show_row_stripes=False)

    Parameters
    ----------
    name: str, optional
        The style name, for example ``"TableStyleMedium6"``; ``None`` for no style.
    show_row_stripes: bool, optional, default: True
        ``True`` if alternate rows are banded
    show_first_column: bool, optional, default: False
        ``True`` if the first column is highlighted
    show_last_column: bool, optional, default: False
        ``True`` if the last column is highlighted
    """

    name: Optional[str] = None
    show_row_stripes: bool = True
    show_first_column: bool = False
    show_last_column: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.name

    @classmethod
    def light(cls, number: int, **kwargs):
        return cls._preset("Light", number, **kwargs)

    @classmethod
    def medium(cls, number: int, **kwargs):
        return cls._preset("Medium", number, **kwargs)

    @classmethod
    def dark(cls, number: int, **kwargs):
        return cls._preset("Dark", number, **kwargs)

    @classmethod
    def _preset(cls, variant: str, number: int, **kwargs):
        max_number = TABLE_STYLE_COUNTS[variant]
        if not isinstance(number, int) or not 1 <= number <= max_number:
            raise IndexError(f"{variant.lower()} table style {number} out of range 1-{max_number}")
        return cls(f"TableStyle{variant}{number}", **kwargs)


StandardStyle = Union[
    StandardNumberFormat,
    StandardFontStyle,
    StandardFillStyle,
    StandardBorderStyle,
    StandardCellStyle,
]


class Stylesheet:
    """The style resources of a document.

    Resources are registered in the order number formats, fonts, fills,
    borders and cell formats, with the standard entries of each kind
    registered when the stylesheet is created. Custom number format IDs
    start at ``164``; lower IDs are the built-in formats.

    .. code-block:: python

        styles = doc.styles
        bold = styles.register_cell_format(
            CellFormat(font_id=styles.standard(StandardFontStyle.BOLD), apply_font=True)
        )
        doc.write("A1", "Total:", style=bold)
    """

    def __init__(self) -> None:
        self.number_formats: Registry[NumberFormat] = Registry(
            "number format", first_id=MIN_NUMBER_FORMAT_ID
        )
        self.fonts: Registry[Font] = Registry("font")
        self.fills: Registry[Fill] = Registry("fill")
        self.borders: Registry[Border] = Registry("border")
        self.cell_formats: Registry[CellFormat] = Registry("cell format")
        self._register_standard_styles()

    def _register_standard_styles(self) -> None:
        for key, format_code in STANDARD_NUMBER_FORMATS.items():
            self.number_formats.register(NumberFormat(format_code), name=key)

        for key, (size, bold) in STANDARD_FONTS.items():
            self.fonts.register(Font(size=size, bold=bold), name=key)

        for key, pattern in STANDARD_FILL_PATTERNS.items():
            self.fills.register(Fill(pattern), name=key)

        self.borders.register(
            Border(),
            name=StandardBorderStyle.GENERAL,
        )

        for key, number_format in STANDARD_CELL_STYLE_FORMATS.items():
            if isinstance(number_format, StandardNumberFormat):
                number_format_id = self.standard(number_format)
            else:
                number_format_id = int(number_format)
            self.cell_formats.register(
                CellFormat(
                    number_format_id=number_format_id,
                    font_id=self.standard(StandardFontStyle.GENERAL),
                    fill_id=self.standard(StandardFillStyle.GENERAL),
                    border_id=self.standard(StandardBorderStyle.GENERAL),
                ),
                name=key,
            )

    def _registry(self, key: IntEnum) -> Registry:
        if isinstance(key, StandardNumberFormat):
            return self.number_formats
        if isinstance(key, StandardFontStyle):
            return self.fonts
        if isinstance(key, StandardFillStyle):
            return self.fills
        if isinstance(key, StandardBorderStyle):
            return self.borders
        if isinstance(key, StandardCellStyle):
            return self.cell_formats
        t = type(key).__name__
        raise LookupError(f"invalid standard style type {t}")

    def standard(self, key: StandardStyle) -> int:
        """Return the ID of a standard style, for example ``StandardCellStyle.DATE``."""
        return self._registry(key).lookup(key)

    def register_number_format(self, number_format: Union[NumberFormat, str]) -> int:
        if isinstance(number_format, str):
            number_format = NumberFormat(number_format)
        return self.number_formats.register(number_format)

    def register_font(self, font: Font) -> int:
        return self.fonts.register(font)

    def register_fill(self, fill: Fill) -> int:
        return self.fills.register(fill)

    def register_border(self, border: Border) -> int:
        return self.borders.register(border)

    def register_cell_format(self, cell_format: CellFormat) -> int:
        """Register a composite cell style and return its ID.

        Raises
        ------
        IndexError:
            If the cell format refers to a number format, font, fill or border
            that has not been registered.
        """
        if not self.is_number_format_id(cell_format.number_format_id):
            raise IndexError(f"number format {cell_format.number_format_id} is not registered")
        if cell_format.font_id not in self.fonts:
            raise IndexError(f"font {cell_format.font_id} is not registered")
        if cell_format.fill_id not in self.fills:
            raise IndexError(f"fill {cell_format.fill_id} is not registered")
        if cell_format.border_id not in self.borders:
            raise IndexError(f"border {cell_format.border_id} is not registered")
        return self.cell_formats.register(cell_format)

    def is_number_format_id(self, number_format_id: int) -> bool:
        """bool: ``True`` if the ID is a built-in or registered number format."""
        if 0 <= number_format_id < MIN_NUMBER_FORMAT_ID:
            return True
        return number_format_id in self.number_formats
