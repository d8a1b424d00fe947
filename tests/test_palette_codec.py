"""Tests for palette JSON codecs and import text parsing."""

import json

import pytest

from palette_codec import (
    CURRENT_FORMAT,
    LEGACY_FORMAT,
    PaletteFormatError,
    PaletteImportError,
    decode,
    deserialize,
    deserialize_legacy,
    parse_import_text,
    serialize,
)
from palette_model import ColorPalette, NamedColor


@pytest.fixture
def palettes():
    return [
        ColorPalette("Sunset", [NamedColor((255, 94, 77), "Coral"), NamedColor((255, 195, 0))]),
        ColorPalette("Café", [NamedColor((111, 78, 55), "Crème brûlée")]),
    ]


class TestSerialize:

    def test_shape(self, palettes):
        data = json.loads(serialize(palettes))
        assert data[0] == {
            "name": "Sunset",
            "colors": [
                {"name": "Coral", "hex": "#FF5E4D"},
                {"name": "#FFC300", "hex": "#FFC300"},
            ],
        }

    def test_pretty_printed_and_keeps_unicode(self, palettes):
        text = serialize(palettes)
        assert "\n  " in text
        assert "Café" in text

    def test_round_trip(self, palettes):
        assert deserialize(serialize(palettes)) == palettes

    def test_empty_list(self):
        assert deserialize(serialize([])) == []


class TestDeserialize:

    def test_missing_name_uses_hex(self):
        text = json.dumps([{"name": "P", "colors": [{"hex": "#112233"}]}])
        assert deserialize(text)[0].entries == [NamedColor((0x11, 0x22, 0x33), "#112233")]

    def test_missing_hex_is_skipped(self):
        text = json.dumps([{"name": "P", "colors": [{"name": "nothing"}, {"hex": "#000000"}]}])
        assert deserialize(text)[0].count() == 1

    def test_missing_colors_gives_empty_palette(self):
        assert deserialize('[{"name": "P"}]')[0].count() == 0

    def test_invalid_hex_fails_document(self):
        text = json.dumps([{"name": "P", "colors": [{"name": "x", "hex": "nope"}]}])
        with pytest.raises(PaletteFormatError):
            deserialize(text)

    @pytest.mark.parametrize("text", [
        "not json",
        '{"name": "P"}',
        '["P"]',
        '[{"colors": []}]',
        '[{"name": "P", "colors": ["#FF0000"]}]',
        '[{"name": "P", "colors": [{"name": {"en": "Red"}, "hex": "#FF0000"}]}]',
        '[{"name": "P", "colors": [{"name": ["Red"], "hex": "#FF0000"}]}]',
        '[{"name": "P", "colors": [{"name": "x", "hex": "rgb(300, 0, 0)"}]}]',
    ])
    def test_malformed_documents(self, text):
        with pytest.raises(PaletteFormatError):
            deserialize(text)

    def test_scalar_color_name_becomes_text(self):
        text = json.dumps([{"name": "P", "colors": [{"name": 5, "hex": "#000000"}]}])
        assert deserialize(text)[0].entries == [NamedColor((0, 0, 0), "5")]


class TestDeserializeLegacy:

    def test_invalid_hex_entries_are_skipped(self):
        text = '[{"name": "X", "colorHexCodes": ["#112233", "not-a-color"]}]'
        result = deserialize_legacy(text)
        assert len(result) == 1
        assert result[0].name == "X"
        assert result[0].entries == [NamedColor((0x11, 0x22, 0x33), "#112233")]

    def test_colors_field(self):
        result = deserialize_legacy('[{"name": "Y", "colors": ["#FF0000", "#0F0"]}]')
        assert result[0].colors() == [(255, 0, 0), (0, 255, 0)]
        assert result[0].entries[1].name == "#00FF00"

    def test_colors_preferred_over_hex_codes(self):
        text = '[{"name": "Z", "colors": ["#FF0000"], "colorHexCodes": ["#0000FF"]}]'
        assert deserialize_legacy(text)[0].colors() == [(255, 0, 0)]

    def test_empty_colors_falls_back_to_hex_codes(self):
        text = '[{"name": "Z", "colors": [], "colorHexCodes": ["#0000FF"]}]'
        assert deserialize_legacy(text)[0].colors() == [(0, 0, 255)]

    def test_no_color_fields(self):
        assert deserialize_legacy('[{"name": "Bare"}]')[0].count() == 0

    def test_invalid_entry_logs_warning(self, caplog):
        deserialize_legacy('[{"name": "X", "colors": ["bogus"]}]')
        assert "bogus" in caplog.text

    def test_out_of_range_entry_is_skipped(self):
        text = '[{"name": "X", "colors": ["rgb(300, 0, 0)", "#0000FF"]}]'
        assert deserialize_legacy(text)[0].colors() == [(0, 0, 255)]

    @pytest.mark.parametrize("text", [
        '[{"name": "P", "colors": 7}]',
        '[{"name": "P", "colors": "#FF0000"}]',
        '[{"name": "P", "colors": [], "colorHexCodes": {"a": "#FF0000"}}]',
    ])
    def test_non_list_color_fields_rejected(self, text):
        with pytest.raises(PaletteFormatError):
            deserialize_legacy(text)


class TestDecode:

    def test_records_are_tagged(self):
        current = decode('[{"name": "A", "colors": []}]', CURRENT_FORMAT)
        legacy = decode('[{"name": "A", "colors": []}]', LEGACY_FORMAT)
        assert current[0].format == CURRENT_FORMAT
        assert legacy[0].format == LEGACY_FORMAT
        assert current[0].palette == legacy[0].palette

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            decode("[]", "xml")


class TestParseImportText:

    def test_name_and_colors_in_order(self):
        palette = parse_import_text("MyPalette\n#FF0000\n#00FF00")
        assert palette.name == "MyPalette"
        assert palette.colors() == [(255, 0, 0), (0, 255, 0)]
        assert [e.name for e in palette.entries] == ["#FF0000", "#00FF00"]

    def test_blank_lines_and_whitespace_ignored(self):
        palette = parse_import_text("  Name  \n\n  #F00 \n\n#0000ff\n")
        assert palette.name == "Name"
        assert palette.colors() == [(255, 0, 0), (0, 0, 255)]

    def test_single_line_rejected(self):
        with pytest.raises(PaletteImportError):
            parse_import_text("OnlyName")

    def test_empty_text_rejected(self):
        with pytest.raises(PaletteImportError):
            parse_import_text("")

    def test_invalid_color_names_token(self):
        with pytest.raises(PaletteImportError, match="#ZZZZZZ"):
            parse_import_text("P\n#FF0000\n#ZZZZZZ")

    def test_out_of_range_color_rejected(self):
        with pytest.raises(PaletteImportError, match="rgb"):
            parse_import_text("P\nrgb(300, 0, 0)")
