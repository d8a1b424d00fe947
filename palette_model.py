"""
Palette Model Module
Named color palettes and color parsing/formatting helpers
"""

from typing import List, Optional, Tuple

from PIL import ImageColor

RGB = Tuple[int, int, int]


def parse_color(text: str) -> RGB:
    """Parse a web color string (#RGB, #RRGGBB, #RRGGBBAA, names, rgb()) into RGB.

    Raises ValueError when the string is not a recognizable color.
    """
    if text is None:
        raise ValueError("color specifier must not be None")
    value = text.strip()
    if not value:
        raise ValueError("color specifier must not be empty")
    rgba = ImageColor.getrgb(value)
    # alpha is dropped
    rgb = tuple(int(c) for c in rgba[:3])
    # ImageColor does not clamp rgb() components
    if any(not 0 <= c <= 255 for c in rgb):
        raise ValueError(f"color channel out of range 0-255: {text!r}")
    return rgb


def to_hex(color: RGB) -> str:
    """Convert RGB to uppercase #RRGGBB"""
    return '#{:02X}{:02X}{:02X}'.format(*color[:3])


class NamedColor:
    """A single palette entry: an RGB color and its display name"""

    def __init__(self, color: RGB, name: Optional[str] = None):
        self.color = tuple(color[:3])
        self.name = name if name and name.strip() else to_hex(self.color)

    @property
    def hex(self) -> str:
        return to_hex(self.color)

    def __eq__(self, other):
        if not isinstance(other, NamedColor):
            return NotImplemented
        return self.color == other.color and self.name == other.name

    def __repr__(self):
        return f"NamedColor({self.hex}, {self.name!r})"


class ColorPalette:
    """A named, ordered list of color entries.

    The model does no validation: name uniqueness and non-empty entry lists
    are enforced by the palette collection.
    """

    def __init__(self, name: str, entries: Optional[List[NamedColor]] = None):
        self.name = name
        self._entries = list(entries) if entries else []

    @classmethod
    def from_colors(cls, name: str, colors: List[RGB]) -> 'ColorPalette':
        """Build a palette whose entries are named by their hex codes"""
        palette = cls(name)
        palette.set_colors(colors)
        return palette

    @property
    def entries(self) -> List[NamedColor]:
        return list(self._entries)

    def rename(self, new_name: str):
        self.name = new_name

    def set_entries(self, entries: List[NamedColor]):
        self._entries = list(entries)

    def set_colors(self, colors: List[RGB]):
        self._entries = [NamedColor(color) for color in colors]

    def colors(self) -> List[RGB]:
        return [entry.color for entry in self._entries]

    def add_entry(self, color: RGB, name: Optional[str] = None) -> NamedColor:
        entry = NamedColor(color, name)
        self._entries.append(entry)
        return entry

    def remove_entry(self, color: RGB) -> bool:
        """Remove the first entry with this color. Returns True if one was removed."""
        color = tuple(color[:3])
        for idx, entry in enumerate(self._entries):
            if entry.color == color:
                del self._entries[idx]
                return True
        return False

    def count(self) -> int:
        return len(self._entries)

    def __len__(self):
        return len(self._entries)

    def __eq__(self, other):
        if not isinstance(other, ColorPalette):
            return NotImplemented
        return self.name == other.name and self._entries == other._entries

    def __repr__(self):
        return f"ColorPalette({self.name!r}, {len(self._entries)} colors)"
