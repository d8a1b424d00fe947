"""
File Handler Module
Handles palette file save/load and the encrypted recent files list
"""

import os
import json
import base64
import logging
from cryptography.fernet import Fernet, InvalidToken

import palette_codec

EMBEDDED_KEY = b'VkZURWYzbUtiSFJ0Z2oyWHFwQjRwbjlSVldyakFrOWJPTUhjbGlDZmJZdz0='


class PaletteFileError(Exception):
    """Palette file could not be written or read"""


class FileHandler:
    """Palette file I/O and encrypted app data files"""

    def __init__(self, data_dir='data', max_recent=10):
        self._fernet_key = base64.b64decode(EMBEDDED_KEY)
        self.data_dir = data_dir
        self.max_recent = max_recent

    def _encrypt_aes(self, data_string):
        """AES encryption"""
        return Fernet(self._fernet_key).encrypt(data_string.encode('utf-8'))

    def _decrypt_aes(self, encrypted_data):
        """AES decryption"""
        return Fernet(self._fernet_key).decrypt(encrypted_data).decode('utf-8')

    def save_palettes(self, path, palettes):
        """Write palettes as pretty-printed UTF-8 JSON, replacing the file atomically"""
        if not path:
            raise PaletteFileError("No save path specified")

        data_json = palette_codec.serialize(palettes)
        temp_path = path + '.tmp'
        try:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(temp_path, 'w', encoding='utf-8') as f:
                f.write(data_json)

            os.replace(temp_path, path)
        except OSError as e:
            if os.path.exists(temp_path):
                try:
                    os.remove(temp_path)
                except OSError:
                    logging.warning(f"Could not remove temp file: {temp_path}")
            logging.error(f"Save failed: {path} - {e}")
            raise PaletteFileError(str(e)) from e

        logging.info(f"Saved {len(palettes)} palette(s): {path}")

    def load_palettes(self, path, legacy=False):
        """Read a palette file in the current (or legacy) format"""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logging.error(f"Load failed: {path} - {e}")
            raise PaletteFileError(str(e)) from e

        try:
            if legacy:
                palettes = palette_codec.deserialize_legacy(text)
            else:
                palettes = palette_codec.deserialize(text)
        except palette_codec.PaletteFormatError as e:
            logging.error(f"Load failed: {path} - {e}")
            raise PaletteFileError(str(e)) from e

        logging.info(f"Loaded {len(palettes)} palette(s) from {path}"
                     f"{' (legacy format)' if legacy else ''}")
        return palettes

    def load_recent_files(self):
        """Load recent files list, dropping files that no longer exist"""
        recent_files = self.load_data_file('recent_files.dat', default=[])
        if not isinstance(recent_files, list):
            return []
        return [f for f in recent_files if isinstance(f, str) and os.path.exists(f)]

    def save_recent_files(self, recent_files):
        return self.save_data_file('recent_files.dat', recent_files)

    def add_recent_file(self, file_path):
        """Move file_path to the front of the recent files list"""
        recent_files = self.load_recent_files()
        if file_path in recent_files:
            recent_files.remove(file_path)
        recent_files.insert(0, file_path)
        recent_files = recent_files[:self.max_recent]
        self.save_recent_files(recent_files)
        return recent_files

    def save_data_file(self, filename, data):
        """Save data to encrypted .dat file"""
        try:
            os.makedirs(self.data_dir, exist_ok=True)

            filepath = os.path.join(self.data_dir, filename)
            if not filepath.endswith('.dat'):
                filepath += '.dat'

            encrypted = self._encrypt_aes(json.dumps(data, ensure_ascii=False))
            with open(filepath, 'wb') as f:
                f.write(encrypted)

            logging.info(f"Saved data file: {filepath}")
            return True
        except OSError as e:
            logging.error(f"Save data file error: {e}")
            return False

    def load_data_file(self, filename, default=None):
        """Load data from encrypted .dat file"""
        filepath = os.path.join(self.data_dir, filename)
        if not filepath.endswith('.dat'):
            filepath += '.dat'

        if not os.path.exists(filepath):
            return default

        try:
            with open(filepath, 'rb') as f:
                encrypted_data = f.read()
            data = json.loads(self._decrypt_aes(encrypted_data))
            logging.info(f"Loaded data file: {filepath}")
            return data
        except (OSError, InvalidToken, ValueError) as e:
            logging.error(f"Load data file error: {filepath} - {e!r}")
            return default
