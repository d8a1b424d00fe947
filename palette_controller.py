"""
Palette Controller
Menu actions over the open palettes and their notebook tabs
"""

import os
import logging
from tkinter import ttk, filedialog, messagebox

from palette_codec import parse_import_text, PaletteImportError
from palette_collection import PaletteCollection, PaletteError, InvalidPaletteError
from palette_dialogs import PaletteDialog, ImportPaletteDialog
from palette_model import ColorPalette
from palette_view import PaletteView
from file_handler import PaletteFileError

JSON_FILETYPES = [('JSON Files', '*.json'), ('All Files', '*.*')]


class PaletteController:
    """Owns the palette collection and the tabbed display"""

    def __init__(self, root, parent, file_handler, config_manager, on_recent_changed=None,
                 notebook=None):
        self.root = root
        self.file_handler = file_handler
        self.config_manager = config_manager
        self.on_recent_changed = on_recent_changed
        self.collection = PaletteCollection()

        if notebook is None:
            notebook = ttk.Notebook(parent)
            notebook.pack(fill='both', expand=True)
        self.notebook = notebook

    # --- Rendering ---
    def _create_view(self, palette):
        return PaletteView(self.notebook, palette,
                           swatch_size=self.config_manager.get('swatch_size', 128),
                           gap=self.config_manager.get('grid_gap', 8))

    def render_palette(self, palette):
        """Add a tab for the palette and select it"""
        view = self._create_view(palette)
        self.notebook.add(view, text=palette.name)
        self.notebook.select(view)

    def selected_tab(self):
        selection = self.notebook.select()
        return selection or None

    # --- Actions ---
    def add_palette(self):
        dialog = PaletteDialog(self.root, 'Add Color Palette', 'Create a new color palette', 'Add')
        result = dialog.show()
        if result is None:
            return

        name, entries = result
        try:
            palette = self.collection.add(ColorPalette(name, entries))
        except InvalidPaletteError as e:
            messagebox.showerror('Invalid Input', str(e), parent=self.root)
            logging.warning(f"Add rejected: {e}")
            return
        except PaletteError as e:
            messagebox.showerror('Duplicate Name', str(e), parent=self.root)
            logging.warning(f"Add rejected: {e}")
            return
        self.render_palette(palette)

    def edit_palette(self):
        tab = self.selected_tab()
        if tab is None:
            messagebox.showwarning('No Palette Selected', 'Please select a palette to edit.',
                                   parent=self.root)
            return

        palette = self.collection.find(self.notebook.tab(tab, 'text'))
        if palette is None:
            messagebox.showerror('Palette Not Found', 'The selected palette could not be found.',
                                 parent=self.root)
            return

        dialog = PaletteDialog(self.root, 'Edit Color Palette', 'Edit the color palette', 'Save',
                               name=palette.name, entries=palette.entries)
        result = dialog.show()
        if result is None:
            return

        name, entries = result
        try:
            self.collection.update(palette, name, entries)
        except InvalidPaletteError as e:
            messagebox.showerror('Invalid Input', str(e), parent=self.root)
            logging.warning(f"Edit of '{palette.name}' rejected: {e}")
            return
        except PaletteError as e:
            messagebox.showerror('Duplicate Name', str(e), parent=self.root)
            logging.warning(f"Edit of '{palette.name}' rejected: {e}")
            return

        # Replace the tab content in place
        index = self.notebook.index(tab)
        self.notebook.forget(tab)
        view = self._create_view(palette)
        position = index if index < len(self.notebook.tabs()) else 'end'
        self.notebook.insert(position, view, text=palette.name)
        self.notebook.select(view)
        messagebox.showinfo('Edit Successful', f"Color palette '{name}' was successfully updated.",
                            parent=self.root)

    def import_palette(self):
        text = ImportPaletteDialog(self.root).show()
        if text is None:
            return

        try:
            palette = self.collection.add(parse_import_text(text))
        except PaletteImportError as e:
            messagebox.showerror('Invalid Input', str(e), parent=self.root)
            logging.warning(f"Import rejected: {e}")
            return
        except PaletteError as e:
            messagebox.showerror('Duplicate Name', str(e), parent=self.root)
            logging.warning(f"Import rejected: {e}")
            return

        self.render_palette(palette)
        messagebox.showinfo('Import Successful',
                            f"Color palette '{palette.name}' was successfully imported "
                            f"with {palette.count()} colors.", parent=self.root)

    def save_palettes(self):
        if self.collection.is_empty():
            messagebox.showwarning('No Palettes',
                                   'Please add at least one color palette before saving.',
                                   parent=self.root)
            return

        path = filedialog.asksaveasfilename(
            title='Save Color Palettes',
            defaultextension='.json',
            initialdir=self._initial_dir(),
            filetypes=JSON_FILETYPES,
            parent=self.root
        )
        if not path:
            return

        try:
            self.file_handler.save_palettes(path, list(self.collection))
        except PaletteFileError as e:
            messagebox.showerror('Save Error',
                                 f'An error occurred while saving the palettes: {e}', parent=self.root)
            return

        self._remember_file(path)
        messagebox.showinfo('Save Successful',
                            f'Color palettes were successfully saved to {os.path.basename(path)}',
                            parent=self.root)

    def load_palettes(self, legacy=False):
        path = filedialog.askopenfilename(
            title='Load Legacy Color Palettes' if legacy else 'Load Color Palettes',
            initialdir=self._initial_dir(),
            filetypes=JSON_FILETYPES,
            parent=self.root
        )
        if not path:
            return
        self.load_palettes_from(path, legacy=legacy)

    def load_legacy_palettes(self):
        self.load_palettes(legacy=True)

    def load_palettes_from(self, path, legacy=False):
        """Load a palette file and add every palette whose name is not already open"""
        try:
            loaded = self.file_handler.load_palettes(path, legacy=legacy)
        except PaletteFileError as e:
            if legacy:
                logging.exception(f"Legacy load failed: {path}")
            messagebox.showerror('Load Error',
                                 f"An error occurred while loading the {'legacy ' if legacy else ''}"
                                 f"palettes: {e}", parent=self.root)
            return

        if not loaded:
            messagebox.showwarning('No Palettes', 'No color palettes were found in the selected file.',
                                   parent=self.root)
            return

        # Name collisions are skipped without a per-palette report
        added, _skipped = self.collection.merge(loaded)
        for palette in added:
            self.render_palette(palette)

        self._remember_file(path, recent=not legacy)
        messagebox.showinfo('Load Successful',
                            f"{'Legacy color' if legacy else 'Color'} palettes were successfully "
                            f"loaded from {os.path.basename(path)}", parent=self.root)

    # --- Helpers ---
    def _initial_dir(self):
        last_dir = self.config_manager.get('last_directory')
        return last_dir if last_dir and os.path.isdir(last_dir) else os.getcwd()

    def _remember_file(self, path, recent=True):
        self.config_manager.set('last_directory', os.path.dirname(path))
        self.config_manager.save_config()
        if not recent:
            return
        self.file_handler.add_recent_file(path)
        if self.on_recent_changed:
            self.on_recent_changed()
