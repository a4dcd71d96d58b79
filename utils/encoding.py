"""
Image payload encoding for the card API.
"""

import base64
from pathlib import Path

from constants import FALLBACK_MIME, MIME_BY_EXTENSION
from utils.core import debug_print
from utils.errors import ImageReadError


def guess_mime(path):
    """Return the image MIME type for a file name, defaulting to JPEG."""
    ext = Path(path).suffix.lower()
    return MIME_BY_EXTENSION.get(ext, FALLBACK_MIME)


def _read_image(path):
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ImageReadError(path, e.strerror or str(e)) from e
    debug_print(f"Read {len(data)} bytes from {path}")
    return data


def encode_base64(path):
    """Read an image file and return its standard base64 encoding.

    Raises
    ------
    ImageReadError
        If the file cannot be read.
    """
    return base64.b64encode(_read_image(path)).decode("ascii")


def encode_data_uri(path):
    """Read an image file and return it as a ``data:<mime>;base64,...`` URI."""
    mime = guess_mime(path)
    return f"data:{mime};base64,{encode_base64(path)}"
