"""
Palette API test configuration.

Provides:
- a fixed API key for the app under test
- a TestClient with the lifespan started
- in-memory image generation with Pillow
"""

import io
import os

import pytest
from fastapi.testclient import TestClient
from PIL import Image

TEST_API_KEY = "test-secret"

# Must be set before the app module reads its settings
os.environ["API_KEY"] = TEST_API_KEY
os.environ.pop("MAX_UPLOAD_BYTES", None)
os.environ.pop("PALETTE_SIZE", None)
os.environ.pop("COLOR_QUALITY", None)

from palette_api.config import get_settings  # noqa: E402

get_settings.cache_clear()

from palette_api.main import app  # noqa: E402


def make_image_bytes(base=(230, 0, 0), spread=(26, 20, 20), size=(64, 64), fmt="PNG") -> bytes:
    """Encode a lightly textured image around ``base``.

    Each channel varies within ``spread`` so the quantizer has real boxes to
    split; the default is red-dominated.
    """
    width, height = size
    (r, g, b), (sr, sg, sb) = base, spread
    img = Image.new("RGB", size)
    img.putdata(
        [
            (r + (x * 7) % sr, g + (x * 3 + y) % sg, b + (y * 5) % sb)
            for y in range(height)
            for x in range(width)
        ]
    )
    out = io.BytesIO()
    img.save(out, format=fmt)
    return out.getvalue()


@pytest.fixture
def client():
    """TestClient with startup/shutdown run."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def color_service(client):
    return client.app.state.color_service


@pytest.fixture
def red_image():
    return make_image_bytes()


@pytest.fixture
def api_key():
    return TEST_API_KEY


@pytest.fixture
def image_factory():
    return make_image_bytes
