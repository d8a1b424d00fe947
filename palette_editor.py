"""
Palette Entry Editor
Staging list behind the Add/Edit palette dialog
"""

from palette_model import NamedColor

ADD_LABEL = 'Add Color'
UPDATE_LABEL = 'Update Color'


class Idle:
    """No staged entry selected; submitting appends"""

    button_label = ADD_LABEL

    def __eq__(self, other):
        return isinstance(other, Idle)

    def __repr__(self):
        return 'Idle()'


class Editing:
    """A staged entry is selected; submitting replaces it"""

    button_label = UPDATE_LABEL

    def __init__(self, index):
        self.index = index

    def __eq__(self, other):
        return isinstance(other, Editing) and other.index == self.index

    def __repr__(self):
        return f'Editing({self.index})'


class PaletteEntryEditor:
    """Working copy of a palette's name and entries while a dialog is open"""

    def __init__(self, name='', entries=None):
        self.name = name
        self.entries = [NamedColor(e.color, e.name) for e in entries] if entries else []
        self.mode = Idle()

    @property
    def button_label(self):
        return self.mode.button_label

    def select(self, index):
        """Select a staged entry (or None to clear).

        Returns:
            The selected NamedColor, whose color and name go into the edit fields
        """
        if index is None or not 0 <= index < len(self.entries):
            self.mode = Idle()
            return None
        self.mode = Editing(index)
        return self.entries[index]

    def submit(self, color, name=''):
        """Add a new entry, or update the selected one"""
        entry = NamedColor(color, name.strip() if name else None)
        if isinstance(self.mode, Editing):
            self.entries[self.mode.index] = entry
            self.mode = Idle()
        else:
            self.entries.append(entry)
        return entry

    def remove_selected(self):
        if not isinstance(self.mode, Editing):
            return None
        removed = self.entries.pop(self.mode.index)
        self.mode = Idle()
        return removed

    def result(self):
        return self.name, list(self.entries)
