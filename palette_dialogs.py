"""
Palette Dialogs
Add/Edit palette dialog and Import palette dialog
"""

import tkinter as tk
from tkinter import ttk, colorchooser

from palette_editor import PaletteEntryEditor, ADD_LABEL
from palette_model import parse_color, to_hex

IMPORT_EXAMPLE = "Example:\nMy Palette\n#FF0000\n#00FF00\n#0000FF"


class PaletteDialog:
    """Modal dialog collecting a palette name and its color entries"""

    def __init__(self, parent, title, header, confirm_label, name='', entries=None):
        self.editor = PaletteEntryEditor(name, entries)
        self.result = None
        self.current_color = (255, 0, 0)

        self.dialog = tk.Toplevel(parent)
        self.dialog.title(title)
        self.dialog.geometry('460x480')
        self.dialog.transient(parent)
        self.dialog.grab_set()
        self.dialog.protocol('WM_DELETE_WINDOW', self.cancel)

        self.create_ui(header, confirm_label)
        self.refresh_list()
        self.name_entry.focus_set()

    def create_ui(self, header, confirm_label):
        main = ttk.Frame(self.dialog, padding=10)
        main.pack(fill='both', expand=True)
        main.columnconfigure(1, weight=1)

        ttk.Label(main, text=header, font=('Arial', 10, 'bold')).grid(
            row=0, column=0, columnspan=3, sticky='w', pady=(0, 10))

        ttk.Label(main, text='Palette Name:').grid(row=1, column=0, sticky='w')
        self.name_var = tk.StringVar(value=self.editor.name)
        self.name_entry = ttk.Entry(main, textvariable=self.name_var)
        self.name_entry.grid(row=1, column=1, columnspan=2, sticky='ew', pady=3)

        ttk.Label(main, text='Color:').grid(row=2, column=0, sticky='w')
        self.swatch = tk.Canvas(main, width=50, height=22, highlightthickness=1,
                                highlightbackground='gray', bg=to_hex(self.current_color))
        self.swatch.grid(row=2, column=1, sticky='w', pady=3)
        ttk.Button(main, text='Choose...', command=self.choose_color).grid(row=2, column=2, sticky='e')

        ttk.Label(main, text='Color Name:').grid(row=3, column=0, sticky='w')
        self.color_name_var = tk.StringVar()
        ttk.Entry(main, textvariable=self.color_name_var).grid(
            row=3, column=1, columnspan=2, sticky='ew', pady=3)

        btn_row = ttk.Frame(main)
        btn_row.grid(row=4, column=0, columnspan=3, sticky='w', pady=5)
        self.btn_add = ttk.Button(btn_row, text=ADD_LABEL, command=self.on_add_color)
        self.btn_add.pack(side='left', padx=(0, 5))
        ttk.Button(btn_row, text='Remove Selected', command=self.on_remove_color).pack(side='left')

        list_frame = ttk.Frame(main)
        list_frame.grid(row=5, column=0, columnspan=3, sticky='nsew')
        main.rowconfigure(5, weight=1)

        scrollbar = ttk.Scrollbar(list_frame)
        scrollbar.pack(side='right', fill='y')
        self.color_list = tk.Listbox(list_frame, yscrollcommand=scrollbar.set, exportselection=False)
        self.color_list.pack(side='left', fill='both', expand=True)
        scrollbar.config(command=self.color_list.yview)
        self.color_list.bind('<<ListboxSelect>>', self.on_select)

        bottom = ttk.Frame(main)
        bottom.grid(row=6, column=0, columnspan=3, sticky='e', pady=(10, 0))
        ttk.Button(bottom, text=confirm_label, command=self.confirm).pack(side='left', padx=5)
        ttk.Button(bottom, text='Cancel', command=self.cancel).pack(side='left')

    def refresh_list(self):
        self.color_list.delete(0, tk.END)
        for i, entry in enumerate(self.editor.entries):
            self.color_list.insert(tk.END, f"{entry.name}  ({entry.hex})")
            self.color_list.itemconfig(i, background=entry.hex,
                                       foreground='white' if sum(entry.color) < 384 else 'black')

    def set_color(self, color):
        self.current_color = color
        self.swatch.config(bg=to_hex(color))

    def choose_color(self):
        result = colorchooser.askcolor(color=to_hex(self.current_color), title='Choose Color',
                                       parent=self.dialog)
        if result and result[1]:
            self.set_color(parse_color(result[1]))

    def on_select(self, event=None):
        selection = self.color_list.curselection()
        entry = self.editor.select(selection[0] if selection else None)
        if entry is not None:
            self.set_color(entry.color)
            self.color_name_var.set(entry.name)
        self.btn_add.config(text=self.editor.button_label)

    def on_add_color(self):
        self.editor.submit(self.current_color, self.color_name_var.get())
        self.refresh_list()
        self.color_list.selection_clear(0, tk.END)
        self.btn_add.config(text=self.editor.button_label)
        self.color_name_var.set('')

    def on_remove_color(self):
        if self.editor.remove_selected() is not None:
            self.refresh_list()
            self.btn_add.config(text=self.editor.button_label)
            self.color_name_var.set('')

    def confirm(self):
        self.editor.name = self.name_var.get()
        self.result = self.editor.result()
        self.dialog.destroy()

    def cancel(self):
        self.result = None
        self.dialog.destroy()

    def show(self):
        """Block until the dialog closes; returns (name, entries) or None"""
        self.dialog.wait_window()
        return self.result


class ImportPaletteDialog:
    """Modal dialog returning raw palette text"""

    def __init__(self, parent):
        self.result = None

        self.dialog = tk.Toplevel(parent)
        self.dialog.title('Import Color Palette')
        self.dialog.geometry('400x360')
        self.dialog.transient(parent)
        self.dialog.grab_set()
        self.dialog.protocol('WM_DELETE_WINDOW', self.cancel)

        frame = ttk.Frame(self.dialog, padding=10)
        frame.pack(fill='both', expand=True)

        ttk.Label(frame, text='Import a color palette from text',
                  font=('Arial', 10, 'bold')).pack(anchor='w')
        ttk.Label(frame, text='First line: palette name. Following lines: one hex color each.').pack(
            anchor='w', pady=(2, 6))

        self.text = tk.Text(frame, height=10, wrap='none')
        self.text.pack(fill='both', expand=True)

        ttk.Label(frame, text=IMPORT_EXAMPLE, foreground='gray').pack(anchor='w', pady=6)

        bottom = ttk.Frame(frame)
        bottom.pack(fill='x')
        ttk.Button(bottom, text='Cancel', command=self.cancel).pack(side='right')
        ttk.Button(bottom, text='Import', command=self.confirm).pack(side='right', padx=5)

        self.text.focus_set()

    def confirm(self):
        self.result = self.text.get('1.0', 'end-1c')
        self.dialog.destroy()

    def cancel(self):
        self.result = None
        self.dialog.destroy()

    def show(self):
        self.dialog.wait_window()
        return self.result
