"""
Palette Codec Module
JSON serialization of palette lists (current and legacy formats)
and parsing of the plain-text import format
"""

import json
import logging
from collections import namedtuple

from palette_model import ColorPalette, NamedColor, parse_color

CURRENT_FORMAT = 'current'
LEGACY_FORMAT = 'legacy'

# One decoded JSON record, tagged with the on-disk shape it came from
DecodedPalette = namedtuple('DecodedPalette', ['format', 'palette'])


class PaletteFormatError(ValueError):
    """Raised when a palette document cannot be decoded"""


class PaletteImportError(ValueError):
    """Raised when import text is not a valid palette"""


def serialize(palettes):
    """Serialize palettes to pretty-printed JSON text (current format)"""
    data = []
    for palette in palettes:
        data.append({
            'name': palette.name,
            'colors': [{'name': entry.name, 'hex': entry.hex} for entry in palette.entries]
        })
    return json.dumps(data, indent=2, ensure_ascii=False)


def _load_records(text):
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PaletteFormatError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise PaletteFormatError("Palette file must contain a JSON array")
    for record in data:
        if not isinstance(record, dict):
            raise PaletteFormatError("Palette entries must be JSON objects")
        if not isinstance(record.get('name'), str):
            raise PaletteFormatError("Palette is missing a name")
    return data


def _decode_current_record(record):
    palette = ColorPalette(record['name'])
    colors = record.get('colors') or []
    if not isinstance(colors, list):
        raise PaletteFormatError(f"Palette '{record['name']}': 'colors' must be a list")

    for item in colors:
        if not isinstance(item, dict):
            raise PaletteFormatError(
                f"Palette '{record['name']}': color entries must be objects with 'name' and 'hex'")
        hex_code = item.get('hex')
        if hex_code is None:
            continue
        try:
            color = parse_color(hex_code)
        except (ValueError, AttributeError) as e:
            raise PaletteFormatError(
                f"Palette '{record['name']}': invalid color {hex_code!r}") from e
        name = item.get('name')
        if name is None:
            name = hex_code
        elif isinstance(name, (dict, list)):
            raise PaletteFormatError(f"Palette '{record['name']}': color name must be a string")
        palette.add_entry(color, str(name))
    return DecodedPalette(CURRENT_FORMAT, palette)


def _decode_legacy_record(record):
    for field in ('colors', 'colorHexCodes'):
        if record.get(field) is not None and not isinstance(record[field], list):
            raise PaletteFormatError(f"Palette '{record['name']}': '{field}' must be a list")
    colors = record.get('colors')
    hex_codes = colors if colors else record.get('colorHexCodes')

    palette = ColorPalette(record['name'])
    for hex_code in hex_codes or []:
        try:
            palette.add_entry(parse_color(hex_code))
        except (ValueError, AttributeError):
            logging.warning(f"Invalid color format: {hex_code!r} (palette '{record['name']}')")
    return DecodedPalette(LEGACY_FORMAT, palette)


_DECODERS = {
    CURRENT_FORMAT: _decode_current_record,
    LEGACY_FORMAT: _decode_legacy_record,
}


def decode(text, fmt=CURRENT_FORMAT):
    """Decode a palette document into a list of tagged DecodedPalette records"""
    try:
        decoder = _DECODERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown palette format: {fmt}")
    return [decoder(record) for record in _load_records(text)]


def deserialize(text):
    """Decode the current format: [{name, colors: [{name, hex}]}]"""
    return [decoded.palette for decoded in decode(text, CURRENT_FORMAT)]


def deserialize_legacy(text):
    """Decode the legacy format: [{name, colors | colorHexCodes: [hex, ...]}]

    Invalid hex codes are skipped with a warning.
    """
    return [decoded.palette for decoded in decode(text, LEGACY_FORMAT)]


def parse_import_text(text):
    """
    Parse import text into a palette

    Args:
        text: first line is the palette name, each following non-blank line a color

    Returns:
        ColorPalette with entries named by their hex codes
    """
    lines = (text or '').strip().split('\n')
    if len(lines) < 2:
        raise PaletteImportError("Palette must have a name and at least one color.")

    name = lines[0].strip()
    colors = []
    for line in lines[1:]:
        token = line.strip()
        if not token:
            continue
        try:
            colors.append(parse_color(token))
        except ValueError:
            raise PaletteImportError(
                f"Color '{token}' is not a valid hex color. Format should be #RRGGBB.")

    if not name or not colors:
        raise PaletteImportError("Palette must have a name and at least one color.")
    return ColorPalette(name, [NamedColor(color) for color in colors])
