"""
Title Bar Module
Custom title bar for the undecorated main window
"""

import tkinter as tk


class WindowDrag:
    """Tracks the pointer offset inside the window while the title bar is dragged"""

    def __init__(self):
        self.x_offset = 0
        self.y_offset = 0

    def press(self, x, y):
        """Pointer position relative to the window at button press"""
        self.x_offset = x
        self.y_offset = y

    def drag(self, x_root, y_root):
        """New window position for the current pointer screen position"""
        return x_root - self.x_offset, y_root - self.y_offset


class TitleBar(tk.Frame):
    """Icon, title, and minimize/maximize/close buttons; drag to move the window"""

    def __init__(self, window, title, icon=None, height=64):
        super().__init__(window, bg='#f0f0f0', height=height)
        self.window = window
        self.drag_state = WindowDrag()
        self._restore_geometry = None
        self.pack_propagate(False)

        if icon is not None:
            self.icon_label = tk.Label(self, image=icon, bg='#f0f0f0')
            self.icon_label.pack(side='left', padx=(10, 0))

        self.title_label = tk.Label(self, text=title, bg='#f0f0f0', font=('Segoe UI', 12, 'bold'))
        self.title_label.pack(side='left', padx=5)

        button_style = {'bg': '#f0f0f0', 'relief': 'flat', 'bd': 0,
                        'font': ('Segoe UI', 11, 'bold'), 'width': 3}
        tk.Button(self, text='✕', fg='#E81123', command=window.on_closing,
                  **button_style).pack(side='right', padx=(0, 10))
        tk.Button(self, text='□', command=self.toggle_maximize, **button_style).pack(side='right')
        tk.Button(self, text='_', command=self.minimize, **button_style).pack(side='right')

        for widget in (self, self.title_label):
            widget.bind('<ButtonPress-1>', self.on_press)
            widget.bind('<B1-Motion>', self.on_drag)
            widget.bind('<Double-Button-1>', lambda e: self.toggle_maximize())

    def on_press(self, event):
        # offset within the window, not within the clicked widget
        self.drag_state.press(event.x_root - self.window.winfo_x(),
                              event.y_root - self.window.winfo_y())

    def on_drag(self, event):
        x, y = self.drag_state.drag(event.x_root, event.y_root)
        self.window.geometry(f"+{x}+{y}")

    def toggle_maximize(self):
        if self._restore_geometry:
            self.window.geometry(self._restore_geometry)
            self._restore_geometry = None
        else:
            self._restore_geometry = self.window.geometry()
            width = self.window.winfo_screenwidth()
            height = self.window.winfo_screenheight()
            self.window.geometry(f"{width}x{height}+0+0")

    def minimize(self):
        # Window managers refuse to iconify override-redirect windows
        self.window.overrideredirect(False)
        self.window.iconify()

        def restore(event):
            if self.window.state() == 'normal':
                self.window.overrideredirect(True)
                self.window.unbind('<Map>')

        self.window.bind('<Map>', restore)
