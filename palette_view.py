"""
Palette View Module
Renders a palette as a near-square grid of color swatches
"""

import math
import tkinter as tk
from tkinter import ttk, messagebox


def grid_columns(count):
    """Number of columns for a near-square grid of count swatches"""
    if count <= 0:
        return 1
    return int(math.ceil(math.sqrt(count)))


def grid_position(index, count):
    """(row, column) of swatch index in a grid of count swatches"""
    cols = grid_columns(count)
    return index // cols, index % cols


def is_dark(color):
    """Check if color is dark"""
    luminance = 0.299 * color[0] + 0.587 * color[1] + 0.114 * color[2]
    return luminance < 128


class PaletteView(ttk.Frame):
    """Scrollable grid of swatches for one palette (the content of a notebook tab)"""

    def __init__(self, parent, palette, swatch_size=128, gap=8):
        super().__init__(parent)
        self.swatch_size = swatch_size
        self.gap = gap
        self._tooltip = None

        self.canvas = tk.Canvas(self, bg='white', highlightthickness=0)
        scrollbar = ttk.Scrollbar(self, orient='vertical', command=self.canvas.yview)
        self.grid_frame = tk.Frame(self.canvas, bg='white')
        self.grid_frame.bind('<Configure>',
                             lambda e: self.canvas.configure(scrollregion=self.canvas.bbox('all')))
        self.canvas.create_window((0, 0), window=self.grid_frame, anchor='nw')
        self.canvas.configure(yscrollcommand=scrollbar.set)

        self.canvas.pack(side='left', fill='both', expand=True)
        scrollbar.pack(side='right', fill='y')

        self.render(palette)

    def render(self, palette):
        """Rebuild the swatch grid from the palette's entries"""
        for widget in self.grid_frame.winfo_children():
            widget.destroy()

        entries = palette.entries
        for i, entry in enumerate(entries):
            row, col = grid_position(i, len(entries))
            cell = self._create_swatch(entry)
            cell.grid(row=row, column=col, padx=self.gap // 2, pady=self.gap // 2)

    def _create_swatch(self, entry):
        frm = tk.Frame(self.grid_frame, bg='white', highlightthickness=1, highlightbackground='lightgrey')

        lbl = tk.Label(frm, text=entry.name, bg='white', font=('Segoe UI', 9, 'bold'))
        lbl.pack(fill='x')

        size = self.swatch_size
        canvas = tk.Canvas(frm, width=size, height=size, bd=0, highlightthickness=5,
                           highlightbackground='lightgrey', bg=entry.hex, cursor='hand2')
        canvas.pack()
        canvas.create_text(size // 2, size - 12, text=entry.hex,
                           fill='white' if is_dark(entry.color) else 'black', font=('Arial', 8))

        def on_enter(e):
            frm.config(bg='#e4ade6')
            lbl.config(bg='#e4ade6')
            self._show_tooltip(e, f"RGB: {entry.hex}")

        def on_leave(e):
            frm.config(bg='white')
            lbl.config(bg='white')
            self._hide_tooltip()

        menu = tk.Menu(canvas, tearoff=0)
        menu.add_command(label='Copy RGB Value',
                         command=lambda: self._copy('RGB Value Copied', entry.hex,
                                                    f"RGB value {entry.hex} has been copied to clipboard."))
        menu.add_command(label='Copy Color Name',
                         command=lambda: self._copy('Color Name Copied', entry.name,
                                                    f'Color name "{entry.name}" has been copied to clipboard.'))

        def on_right_click(e):
            self._hide_tooltip()
            menu.tk_popup(e.x_root, e.y_root)

        for widget in (frm, canvas, lbl):
            widget.bind('<Enter>', on_enter)
            widget.bind('<Leave>', on_leave)
        canvas.bind('<Button-3>', on_right_click)
        # macOS secondary click
        canvas.bind('<Button-2>', on_right_click)
        return frm

    def _show_tooltip(self, event, text):
        self._hide_tooltip()
        tip = tk.Toplevel(self)
        tip.wm_overrideredirect(True)
        tip.wm_geometry(f"+{event.x_root + 10}+{event.y_root + 10}")
        tk.Label(tip, text=text, bg='#FFFFE0', relief='solid', borderwidth=1,
                 font=('Segoe UI', 9), padx=5, pady=3).pack()
        self._tooltip = tip

    def _hide_tooltip(self):
        if self._tooltip is not None:
            self._tooltip.destroy()
            self._tooltip = None

    def _copy(self, title, text, message):
        self.clipboard_clear()
        self.clipboard_append(text)
        messagebox.showinfo(title, message, parent=self)
