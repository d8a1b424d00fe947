"""
Platform Services
Optional per-platform window integration (dock icon)
"""

import sys
import tkinter as tk
import logging


class PlatformServices:
    """Default services: no dock icon"""

    name = 'generic'
    supports_dock_icon = False

    def set_dock_icon(self, root, photo):
        return False


class MacPlatformServices(PlatformServices):
    """macOS: Tk applies a default iconphoto to the dock"""

    name = 'macos'
    supports_dock_icon = True

    def set_dock_icon(self, root, photo):
        try:
            root.iconphoto(True, photo)
            return True
        except tk.TclError as e:
            logging.error(f"Error setting macOS dock icon: {e}")
            return False


def detect_platform_services(platform=None):
    platform = platform or sys.platform
    if platform == 'darwin':
        return MacPlatformServices()
    return PlatformServices()
