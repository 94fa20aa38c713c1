"""Extraction of photos and tags from Tropy JSON-LD exports."""

import logging
from typing import Any, List, Mapping, Optional

from tropy_tumblr.models import ExportSelection
from tropy_tumblr.utils.file_utils import photo_exists

logger = logging.getLogger(__name__)

GRAPH_KEY = "@graph"


def get_items(data: Optional[Mapping[str, Any]]) -> List[Any]:
    """Return the item graph of an export, or an empty list if there is none."""
    if not isinstance(data, Mapping):
        return []
    graph = data.get(GRAPH_KEY)
    if not isinstance(graph, list):
        return []
    return graph


def has_items(data: Optional[Mapping[str, Any]]) -> bool:
    """Check whether an export carries at least one item."""
    return bool(get_items(data))


def extract_selection(data: Optional[Mapping[str, Any]]) -> ExportSelection:
    """Collect local photo paths and tags from a Tropy export.

    Photo paths are kept only when they are set and exist on disk at the time
    of the call. Tags are deduplicated, keeping the order they were first seen
    in, and are otherwise passed through untouched. Tags need not be hashable.

    Args:
        data: The export document, as handed to the plugin by Tropy

    Returns:
        ExportSelection with the photo paths and tags; empty if the export has
        no items or none of its photos exist locally
    """
    photo_paths: List[str] = []
    tags: List[Any] = []

    for item in get_items(data):
        if not isinstance(item, Mapping):
            continue

        photos = item.get("photo")
        if isinstance(photos, list):
            for photo in photos:
                if not isinstance(photo, Mapping):
                    continue
                path = photo.get("path")
                if photo_exists(path):
                    photo_paths.append(path)
                else:
                    logger.debug("Skipping missing photo %s", path)

        item_tags = item.get("tag")
        if isinstance(item_tags, list):
            for tag in item_tags:
                if tag not in tags:
                    tags.append(tag)

    return ExportSelection(photo_paths=photo_paths, tags=tags)
