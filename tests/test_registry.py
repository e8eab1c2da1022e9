import pytest

from spreadsheet_builder import Document, Font, NumberFormat, Registry, SharedStringTable


def test_shared_strings_deduplicate():
    strings = SharedStringTable()
    assert strings.add("Railcar") == 0
    assert strings.add("Covered Hopper") == 1
    assert strings.add("Railcar") == 0
    assert strings.add("railcar") == 2
    assert len(strings) == 3
    assert list(strings) == ["Railcar", "Covered Hopper", "railcar"]
    assert strings.get(1) == "Covered Hopper"
    assert strings.get(3) is None
    assert "Railcar" in strings
    assert "Model" not in strings


def test_shared_strings_in_document():
    doc = Document()
    for row in range(1, 11):
        doc.write(f"A{row}", "TILX332106")
        doc.write(f"B{row}", "Covered Hopper")

    assert len(doc.shared_strings) == 2
    assert doc.cell("A1").content.string_id == doc.cell("A10").content.string_id
    assert doc.cell_value("B7") == "Covered Hopper"


def test_shared_string_type_error():
    strings = SharedStringTable()
    with pytest.raises(TypeError) as e:
        _ = strings.add(None)
    assert "shared string must be a string" in str(e)


def test_registry_ids():
    fonts = Registry("font")
    assert fonts.next_id == 0
    assert fonts.register(Font()) == 0
    assert fonts.register(Font(bold=True), name="bold") == 1
    # Equal definitions are not de-duplicated
    assert fonts.register(Font()) == 2
    assert len(fonts) == 3
    assert fonts.lookup("bold") == 1
    assert fonts.lookup("italic") is None
    assert fonts[1].bold
    assert fonts.get(5) is None
    assert 2 in fonts
    assert 3 not in fonts
    assert [font_id for font_id, _ in fonts] == [0, 1, 2]


def test_registry_first_id():
    number_formats = Registry("number format", first_id=164)
    assert number_formats.register(NumberFormat("0.0")) == 164
    assert number_formats.register(NumberFormat("0.00")) == 165
    assert number_formats[165].format_code == "0.00"
    assert 163 not in number_formats
    assert number_formats.get(0) is None


def test_registry_errors():
    fonts = Registry("font")
    fonts.register(Font(), name="general")

    with pytest.raises(TypeError) as e:
        _ = fonts.register(None)
    assert "font definition cannot be None" in str(e)

    with pytest.raises(IndexError) as e:
        _ = fonts.register(Font(), name="general")
    assert "font 'general' already registered" in str(e)

    with pytest.raises(IndexError) as e:
        _ = fonts[4]
    assert "font 4 out of range" in str(e)

    with pytest.raises(LookupError) as e:
        _ = fonts["general"]
    assert "invalid index type str" in str(e)
