"""Reading Tropy export payloads."""

from .payload import extract_selection, get_items, has_items

__all__ = ["extract_selection", "get_items", "has_items"]
