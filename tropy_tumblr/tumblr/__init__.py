"""Tumblr API client."""

from .uploader import TumblrUploader

__all__ = ["TumblrUploader"]
