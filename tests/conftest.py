from collections import namedtuple

import pytest

from spreadsheet_builder import CellFormat, Document, StandardCellStyle, StandardFontStyle

InvoiceStyles = namedtuple("InvoiceStyles", ["bold", "currency", "date"])


@pytest.fixture(name="doc")
def doc_fixture():
    yield Document()


@pytest.fixture(name="invoice_styles")
def invoice_styles_fixture(doc):
    styles = doc.styles
    bold = styles.register_cell_format(
        CellFormat(font_id=styles.standard(StandardFontStyle.BOLD), apply_font=True)
    )
    yield InvoiceStyles(
        bold=bold,
        currency=styles.standard(StandardCellStyle.CURRENCY),
        date=styles.standard(StandardCellStyle.DATE),
    )
