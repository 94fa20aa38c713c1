"""Models for Tropy to Tumblr."""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

# Keys as they appear in the plugin's Tropy preferences.
OPTION_KEYS = {
    "blogName": "blog_name",
    "consumerKey": "consumer_key",
    "consumerSecret": "consumer_secret",
    "token": "token",
    "tokenSecret": "token_secret",
}


@dataclass(frozen=True)
class PluginOptions:
    """Tumblr blog and OAuth credentials for one plugin instance."""
    blog_name: str = "YOUR_BLOG_NAME"
    consumer_key: str = "YOUR_DEFAULT_CONSUMER_KEY"
    consumer_secret: str = field(default="YOUR_DEFAULT_CONSUMER_SECRET", repr=False)
    token: str = field(default="YOUR_DEFAULT_TOKEN", repr=False)
    token_secret: str = field(default="YOUR_DEFAULT_TOKEN_SECRET", repr=False)

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "PluginOptions":
        """Merge host options over the defaults.

        A key the host sets to a non-None value wins; anything else keeps the
        default. Unrecognized keys are ignored.

        Args:
            options: Options mapping supplied by the host, using its camelCase keys

        Returns:
            PluginOptions with the merged values
        """
        overrides = {}
        for key, attr in OPTION_KEYS.items():
            value = (options or {}).get(key)
            if value is not None:
                overrides[attr] = str(value)
        return cls(**overrides)

    @property
    def post_url(self) -> str:
        """Tumblr endpoint for creating a post on this blog."""
        return f"https://api.tumblr.com/v2/blog/{self.blog_name}.tumblr.com/post"


@dataclass
class ExportSelection:
    """Photos and tags picked out of a Tropy export."""
    photo_paths: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    caption: str = ""

    def is_empty(self) -> bool:
        """True when there is no local photo to post."""
        return not self.photo_paths


class TumblrError(Exception):
    """Base exception for Tumblr operations."""


class ResponseParseError(TumblrError):
    """Raised when the Tumblr response body is not valid JSON."""


class TumblrApiError(TumblrError):
    """Raised when Tumblr answers with a failure status."""

    def __init__(self, message: str, status_code: int, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ConfigurationError(Exception):
    """Raised when an options file cannot be loaded."""
