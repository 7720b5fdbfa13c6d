import re
import unicodedata
from typing import Optional

from tiktok_downloader.config.settings import config


def sanitize_filename(name: Optional[str], max_length: int = 200) -> str:
    """
    Sanitize a client-supplied filename for a Content-Disposition header.
    Anything outside printable ASCII becomes '_' so the header stays
    latin-1 safe and cannot be split or escape its quotes.
    """
    default = config.relay.default_filename
    if not name:
        return default

    name = unicodedata.normalize("NFKC", name)
    name = re.sub(r'[\\/:*?"<>|;]', '_', name)
    name = re.sub(r'[^\x20-\x7e]', '_', name)

    windows_reserved = {
        'CON', 'PRN', 'AUX', 'NUL',
        'COM1', 'COM2', 'COM3', 'COM4', 'COM5', 'COM6', 'COM7', 'COM8', 'COM9',
        'LPT1', 'LPT2', 'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9'
    }
    stem = name.split(".", 1)[0]
    if stem.upper() in windows_reserved:
        name = f"_{name}"

    name = name[:max_length].strip().strip(".")
    return name or default
