"""Unit tests for models."""

import dataclasses

import pytest

from tropy_tumblr.models import (
    OPTION_KEYS,
    ExportSelection,
    PluginOptions,
    TumblrApiError,
    TumblrError,
)


def test_plugin_options_defaults():
    """Test that missing options fall back to the placeholders."""
    options = PluginOptions.from_options(None)

    assert options.blog_name == "YOUR_BLOG_NAME"
    assert options.consumer_key == "YOUR_DEFAULT_CONSUMER_KEY"
    assert options.consumer_secret == "YOUR_DEFAULT_CONSUMER_SECRET"
    assert options.token == "YOUR_DEFAULT_TOKEN"
    assert options.token_secret == "YOUR_DEFAULT_TOKEN_SECRET"
    assert PluginOptions.from_options({}) == options


def test_plugin_options_override_per_key():
    """Test that each user value wins over its default."""
    options = PluginOptions.from_options(
        {"blogName": "myblog", "token": "abc", "tokenSecret": None, "unknown": "x"}
    )

    assert options.blog_name == "myblog"
    assert options.token == "abc"
    assert options.token_secret == "YOUR_DEFAULT_TOKEN_SECRET"
    assert options.consumer_key == "YOUR_DEFAULT_CONSUMER_KEY"


def test_plugin_options_immutable():
    """Test that options cannot be changed after construction."""
    options = PluginOptions.from_options({"blogName": "myblog"})
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.blog_name = "other"


def test_plugin_options_post_url():
    """Test the post endpoint for a blog."""
    options = PluginOptions.from_options({"blogName": "myblog"})
    assert options.post_url == "https://api.tumblr.com/v2/blog/myblog.tumblr.com/post"


def test_plugin_options_repr_hides_secrets(tumblr_options):
    """Test that secrets are left out of the repr."""
    text = repr(PluginOptions.from_options(tumblr_options))

    assert "archive-test" in text
    assert "test_consumer_secret" not in text
    assert "test_token_secret" not in text


def test_export_selection_is_empty():
    """Test the empty check on selections."""
    assert ExportSelection().is_empty()
    assert ExportSelection(tags=["a"]).is_empty()
    assert not ExportSelection(photo_paths=["/tmp/a.jpg"]).is_empty()
    assert ExportSelection().caption == ""


def test_tumblr_api_error():
    """Test the API error carries status and body."""
    error = TumblrApiError("boom", status_code=401, body={"meta": {"status": 401}})

    assert isinstance(error, TumblrError)
    assert error.status_code == 401
    assert error.body == {"meta": {"status": 401}}
    assert str(error) == "boom"


def test_option_keys_are_not_fields():
    """Test that the host key mapping is not part of the options record."""
    field_names = {f.name for f in dataclasses.fields(PluginOptions)}

    assert field_names == set(OPTION_KEYS.values())
