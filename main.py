from PIL import Image, ImageTk, ImageDraw
import tkinter as tk
from tkinter import ttk
import os
import logging

from config_manager import ConfigManager
from file_handler import FileHandler
from palette_controller import PaletteController
from platform_services import detect_platform_services
from title_bar import TitleBar

ICON_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'images', 'appicon.png')
ICON_COLORS = ['#E74C3C', '#F1C40F', '#2ECC71', '#3498DB']


def setup_logging(level='INFO'):
    """Setup logging to file in Temp directory and to the console."""
    temp_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'Temp')
    os.makedirs(temp_dir, exist_ok=True)
    log_file = os.path.join(temp_dir, 'app.log')

    # Clear existing handlers to avoid duplicates
    logger = logging.getLogger()
    logger.handlers.clear()
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    console_handler = logging.StreamHandler()

    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info("=" * 50)
    logger.info("Logging system initialized")
    return logger


def configured_log_level(config_manager):
    """Logging level named by the loaded config, INFO when unknown"""
    level = str(config_manager.get('log_level', 'INFO')).upper()
    value = getattr(logging, level, None)
    return value if isinstance(value, int) else logging.INFO


def create_app_icon(size=64):
    """App icon image: loaded from images/appicon.png, or drawn as a 2x2 swatch grid"""
    if os.path.exists(ICON_PATH):
        try:
            return Image.open(ICON_PATH).convert('RGBA').resize((size, size))
        except OSError as e:
            logging.error(f"Could not load app icon {ICON_PATH}: {e}")

    img = Image.new('RGBA', (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    pad = max(2, size // 16)
    cell = (size - pad * 3) // 2
    for i, color in enumerate(ICON_COLORS):
        x = pad + (i % 2) * (cell + pad)
        y = pad + (i // 2) * (cell + pad)
        draw.rectangle([x, y, x + cell, y + cell], fill=color, outline='#333333')
    return img


class PaletteApp(tk.Tk):
    def __init__(self):
        super().__init__()

        logger = setup_logging()
        self.config_manager = ConfigManager()
        # Config is read after the handlers exist so its load errors reach the log
        logger.setLevel(configured_log_level(self.config_manager))
        self.file_handler = FileHandler(
            data_dir=self.config_manager.get('data_dir', 'data'),
            max_recent=self.config_manager.get('max_recent_files', 10)
        )
        self.platform_services = detect_platform_services()

        title = self.config_manager.get('window_title', 'Color Palette Viewer')
        self.title(title)
        window_width = self.config_manager.get('window_width', 800)
        window_height = self.config_manager.get('window_height', 600)
        self.geometry(f"{window_width}x{window_height}")

        self.setup_icons()

        if self.config_manager.get('undecorated', True):
            self.overrideredirect(True)
            bar_height = self.config_manager.get('title_bar_height', 64)
            self._title_icon = ImageTk.PhotoImage(create_app_icon(bar_height - 8))
            self.title_bar = TitleBar(self, title, icon=self._title_icon, height=bar_height)
            self.title_bar.pack(fill='x')

        self.protocol("WM_DELETE_WINDOW", self.on_closing)

        self.create_widgets()
        self.bind_shortcuts()
        logging.info(f"Application started ({self.platform_services.name})")

    def setup_icons(self):
        """Window icon, plus the dock icon where the platform supports one."""
        self._app_icon = ImageTk.PhotoImage(create_app_icon(64))
        self.iconphoto(False, self._app_icon)
        if self.platform_services.supports_dock_icon:
            self.platform_services.set_dock_icon(self, self._app_icon)

    def create_widgets(self):
        toolbar = ttk.Frame(self, padding=(10, 6))
        toolbar.pack(fill='x')

        content = ttk.Frame(self, padding=(10, 0, 10, 10))
        content.pack(fill='both', expand=True)

        self.controller = PaletteController(self, content, self.file_handler, self.config_manager,
                                            on_recent_changed=self.update_recent_menu)

        ttk.Button(toolbar, text='Add Palette', command=self.controller.add_palette).pack(side='left')
        ttk.Button(toolbar, text='Edit Palette', command=self.controller.edit_palette).pack(side='left', padx=(6, 0))
        ttk.Button(toolbar, text='Import Palette', command=self.controller.import_palette).pack(side='left', padx=(6, 0))

        # File menu
        file_button = ttk.Menubutton(toolbar, text='File')
        self.filemenu = tk.Menu(file_button, tearoff=0)
        self.filemenu.add_command(label='Save Palettes...', command=self.controller.save_palettes)
        self.filemenu.add_command(label='Load Palettes...', command=self.controller.load_palettes)
        self.filemenu.add_command(label='Load Legacy Palettes...', command=self.controller.load_legacy_palettes)

        self.recent_menu = tk.Menu(self.filemenu, tearoff=0)
        self.filemenu.add_cascade(label='Open Recent', menu=self.recent_menu)
        self.update_recent_menu()

        self.filemenu.add_separator()
        self.filemenu.add_command(label='Quit', command=self.on_closing)
        file_button['menu'] = self.filemenu
        file_button.pack(side='right')

    def bind_shortcuts(self):
        """Setup keyboard shortcuts."""
        self.bind('<Control-n>', lambda e: self.controller.add_palette())
        self.bind('<Control-e>', lambda e: self.controller.edit_palette())
        self.bind('<Control-i>', lambda e: self.controller.import_palette())
        self.bind('<Control-s>', lambda e: self.controller.save_palettes())
        self.bind('<Control-o>', lambda e: self.controller.load_palettes())
        self.bind('<Control-q>', lambda e: self.on_closing())

    def update_recent_menu(self):
        """Update the Open Recent submenu."""
        self.recent_menu.delete(0, tk.END)
        recent_files = self.file_handler.load_recent_files()
        if not recent_files:
            self.recent_menu.add_command(label='(No recent files)', state='disabled')
            return
        for filepath in recent_files:
            self.recent_menu.add_command(
                label=os.path.basename(filepath),
                command=lambda p=filepath: self.controller.load_palettes_from(p)
            )

    def on_closing(self):
        logging.info("Application closed")
        self.destroy()


def main():
    app = PaletteApp()
    app.mainloop()


if __name__ == "__main__":
    main()
