"""Posting photos to Tumblr."""

import json
import logging
import os
from contextlib import ExitStack
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import requests

from tropy_tumblr.models import PluginOptions, ResponseParseError, TumblrApiError
from tropy_tumblr.utils.auth import get_oauth
from tropy_tumblr.utils.file_utils import guess_mime_type

logger = logging.getLogger(__name__)

POST_TYPE = "photo"
PHOTO_FIELD = "data[]"


def format_tag(tag: Any) -> str:
    """Render a tag the way Tumblr expects it in the tags field."""
    if tag is None:
        return ""
    if isinstance(tag, bool):
        return "true" if tag else "false"
    return str(tag)


class TumblrUploader:
    """Creates multi-photo posts on a Tumblr blog."""

    def __init__(self, options: PluginOptions, session: Optional[requests.Session] = None):
        """Initialize the uploader."""
        self.options = options
        self.session = session or requests.Session()
        self.auth = get_oauth(options)

    def build_fields(self, caption: str, tags: Iterable[str]) -> List[Tuple[str, str]]:
        """Build the text fields of a photo post."""
        fields = [("type", POST_TYPE), ("caption", caption)]
        tags = list(tags)
        if tags:
            fields.append(("tags", ",".join(format_tag(tag) for tag in tags)))
        return fields

    def post_photos(
        self, photo_paths: Sequence[str], caption: str = "", tags: Iterable[str] = ()
    ) -> Dict[str, Any]:
        """Post photos to the blog as a single photo post.

        The request is attempted exactly once. Photo files are streamed from
        disk and closed again however the request ends.

        Args:
            photo_paths: Paths of the photos to upload
            caption: Post caption
            tags: Tags to attach to the post

        Returns:
            The parsed Tumblr response

        Raises:
            ResponseParseError: If the response body is not valid JSON
            TumblrApiError: If Tumblr answers with a failure status
            requests.RequestException: If the request itself fails
        """
        url = self.options.post_url
        fields = self.build_fields(caption, tags)

        with ExitStack() as stack:
            files = []
            for path in photo_paths:
                photo = stack.enter_context(open(path, "rb"))
                files.append((PHOTO_FIELD, (os.path.basename(path), photo, guess_mime_type(path))))

            logger.debug("POST %s with %d photo(s)", url, len(files))
            response = self.session.post(url, data=fields, files=files, auth=self.auth)

        return self.parse_response(response)

    def parse_response(self, response: requests.Response) -> Dict[str, Any]:
        """Interpret a Tumblr API response.

        Args:
            response: Response to the post request

        Returns:
            The parsed JSON body

        Raises:
            ResponseParseError: If the body is not valid JSON
            TumblrApiError: If the status code signals failure
        """
        try:
            body = response.json()
        except ValueError as e:
            raise ResponseParseError(f"Tumblr response is not valid JSON: {e}") from e

        if not response.ok:
            raise TumblrApiError(
                f"Tumblr API error (status={response.status_code}): {json.dumps(body)}",
                status_code=response.status_code,
                body=body,
            )

        return body
