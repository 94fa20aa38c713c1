"""File utilities for Tropy to Tumblr."""

import logging
import mimetypes
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from PIL import Image

logger = logging.getLogger(__name__)


@dataclass
class FileMetadata:
    """File metadata."""
    filename: str
    size: int
    modified: str
    mime_type: str
    width: int
    height: int


def photo_exists(path: Optional[str]) -> bool:
    """Check whether a photo path is set and exists on disk."""
    # os.path.exists treats integers as file descriptors
    return isinstance(path, str) and bool(path) and os.path.exists(path)


def guess_mime_type(file_path: str) -> str:
    """Guess the MIME type of a file from its name.

    Args:
        file_path: Path to the file

    Returns:
        The MIME type, or application/octet-stream when unknown
    """
    mime_type, _ = mimetypes.guess_type(file_path)
    return mime_type or "application/octet-stream"


def get_file_metadata(file_path: str) -> Optional[FileMetadata]:
    """Get metadata for a file.

    Args:
        file_path: Path to file

    Returns:
        FileMetadata object containing file metadata, or None if the path is not a file
    """
    try:
        if not os.path.isfile(file_path):
            return None

        stat = os.stat(file_path)
        width, height = get_image_dimensions(file_path)

        return FileMetadata(
            filename=os.path.basename(file_path),
            size=stat.st_size,
            modified=datetime.fromtimestamp(stat.st_mtime).isoformat(),
            mime_type=guess_mime_type(file_path),
            width=width,
            height=height,
        )
    except OSError as e:
        logger.warning("Failed to get metadata for %s: %s", file_path, str(e))
        return None


def get_image_dimensions(file_path: str) -> Tuple[int, int]:
    """Get dimensions of an image file.

    Args:
        file_path: Path to image file

    Returns:
        Tuple containing width and height of image, (0, 0) if it cannot be read
    """
    try:
        with Image.open(file_path) as img:
            return img.size
    except (IOError, OSError) as e:
        logger.warning("Failed to get dimensions for %s: %s", file_path, str(e))
        return (0, 0)
