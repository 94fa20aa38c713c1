"""Test configuration for pytest."""

import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
from PIL import Image

# Add the project root directory to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def test_image(tmp_path) -> Path:
    """Create a test image file."""
    image_path = tmp_path / "test_image.jpg"
    img = Image.new("RGB", (100, 200), color="red")
    img.save(image_path)
    return image_path


@pytest.fixture
def make_export() -> Callable[..., Dict[str, Any]]:
    """Build a Tropy JSON-LD export from item dicts."""

    def _make_export(*items: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "@context": {"@vocab": "https://tropy.org/v1/tropy#"},
            "@graph": list(items),
            "version": "1.15.0",
        }

    return _make_export


@pytest.fixture
def tumblr_options() -> Dict[str, str]:
    """Plugin options as Tropy passes them."""
    return {
        "blogName": "archive-test",
        "consumerKey": "test_consumer_key",
        "consumerSecret": "test_consumer_secret",
        "token": "test_token",
        "tokenSecret": "test_token_secret",
    }
