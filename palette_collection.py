"""
Palette Collection Module
The set of open palettes and its naming rules
"""

import logging


class PaletteError(Exception):
    """Base class for palette collection errors"""


class InvalidPaletteError(PaletteError):
    """Palette has a blank name or no colors"""


class DuplicatePaletteError(PaletteError):
    """Another open palette already uses the name"""

    def __init__(self, name):
        super().__init__(f"A palette with the name '{name}' already exists.")
        self.name = name


class PaletteCollection:
    """Ordered list of open palettes, unique by name"""

    def __init__(self):
        self.palettes = []

    def __len__(self):
        return len(self.palettes)

    def __iter__(self):
        return iter(self.palettes)

    def is_empty(self):
        return not self.palettes

    def names(self):
        return [p.name for p in self.palettes]

    def find(self, name):
        """Return the palette with this name, or None"""
        for palette in self.palettes:
            if palette.name == name:
                return palette
        return None

    def index_of(self, name):
        for idx, palette in enumerate(self.palettes):
            if palette.name == name:
                return idx
        return -1

    def has_name(self, name, exclude=None):
        return any(p.name == name and p is not exclude for p in self.palettes)

    @staticmethod
    def validate(name, entries):
        if name is None or not name.strip() or not entries:
            raise InvalidPaletteError("Palette must have a name and at least one color.")

    def add(self, palette):
        """Append a new palette; rejects invalid palettes and name collisions"""
        self.validate(palette.name, palette.entries)
        if self.has_name(palette.name):
            raise DuplicatePaletteError(palette.name)
        self.palettes.append(palette)
        logging.info(f"Added palette '{palette.name}' ({palette.count()} colors)")
        return palette

    def update(self, palette, name, entries):
        """Replace a palette's name and entries in place.

        The unchanged name is always accepted; a new name must not belong
        to a different open palette.
        """
        self.validate(name, entries)
        if name != palette.name and self.has_name(name, exclude=palette):
            raise DuplicatePaletteError(name)
        old_name = palette.name
        palette.rename(name)
        palette.set_entries(entries)
        logging.info(f"Updated palette '{old_name}' -> '{name}' ({palette.count()} colors)")
        return palette

    def merge(self, palettes):
        """Add loaded palettes, silently skipping name collisions.

        Returns:
            (added, skipped) lists of palettes
        """
        added, skipped = [], []
        for palette in palettes:
            if self.has_name(palette.name):
                skipped.append(palette)
                continue
            self.palettes.append(palette)
            added.append(palette)
        if skipped:
            logging.info(f"Skipped {len(skipped)} palette(s) with existing names: "
                         f"{', '.join(p.name for p in skipped)}")
        return added, skipped
