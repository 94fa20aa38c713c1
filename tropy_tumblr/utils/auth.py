"""Authentication utilities for the Tumblr API."""

import json
import os
from typing import Any, Dict

from oauthlib.oauth1 import SIGNATURE_HMAC, SIGNATURE_TYPE_AUTH_HEADER
from requests_oauthlib import OAuth1

from tropy_tumblr.models import ConfigurationError, PluginOptions


def get_oauth(options: PluginOptions) -> OAuth1:
    """Build the OAuth 1.0a signer for Tumblr requests.

    Requests are signed with HMAC-SHA1 and the signature travels in the
    Authorization header. Multipart bodies are not part of the signature base
    string, only the method, URL and OAuth parameters are.

    Args:
        options: Plugin options holding the consumer and access credentials

    Returns:
        OAuth1 auth object to pass to requests
    """
    return OAuth1(
        client_key=options.consumer_key,
        client_secret=options.consumer_secret,
        resource_owner_key=options.token,
        resource_owner_secret=options.token_secret,
        signature_method=SIGNATURE_HMAC,
        signature_type=SIGNATURE_TYPE_AUTH_HEADER,
    )


def load_options_file(options_path: str) -> Dict[str, Any]:
    """Read plugin options from a JSON file.

    The file uses the same keys as the plugin's Tropy preferences
    (blogName, consumerKey, consumerSecret, token, tokenSecret).

    Args:
        options_path: Path to the JSON options file

    Returns:
        The options mapping

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a JSON object
    """
    if not os.path.exists(options_path):
        raise ConfigurationError(f"Missing options file at {options_path}")

    try:
        with open(options_path, "r", encoding="utf-8") as options_file:
            options = json.load(options_file)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Error reading options file {options_path}: {e}") from e

    if not isinstance(options, dict):
        raise ConfigurationError(f"Options file {options_path} must contain a JSON object")
    return options
