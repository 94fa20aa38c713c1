"""Tropy plugin posting the photos of exported items to Tumblr."""

from .main import TropyToTumblr

__all__ = ["TropyToTumblr"]
