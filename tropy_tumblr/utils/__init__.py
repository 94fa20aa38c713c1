"""Utility functions for Tropy to Tumblr."""

from .auth import get_oauth, load_options_file
from .file_utils import get_file_metadata, get_image_dimensions, guess_mime_type, photo_exists

__all__ = [
    "get_oauth",
    "load_options_file",
    "photo_exists",
    "guess_mime_type",
    "get_file_metadata",
    "get_image_dimensions",
]
