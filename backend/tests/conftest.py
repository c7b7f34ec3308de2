"""
Shared pytest fixtures for the Vatika.AI backend tests.
"""
import io
from unittest.mock import patch

import pytest
from PIL import Image

from vatika.services.recommender import recommend


@pytest.fixture
def png_bytes():
    """A small RGB PNG image."""
    img = Image.new("RGB", (64, 48), color="green")
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def balcony_recommendation():
    return recommend(20_000, "balcony")


@pytest.fixture
def living_room_recommendation():
    return recommend(100_000, "living-room")


@pytest.fixture
def api_client():
    """FastAPI test client with no real storage or model access."""
    from fastapi.testclient import TestClient

    from vatika.api.main import app

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def mock_storage():
    """Patch Supabase and R2 calls made by the design routes."""
    with patch("vatika.api.routes_design.save_design") as save, \
            patch("vatika.api.routes_design.load_designs") as load, \
            patch("vatika.api.routes_design.delete_design") as delete, \
            patch("vatika.api.routes_design.delete_image") as delete_image:
        load.return_value = []
        delete.return_value = []
        yield {
            "save_design": save,
            "load_designs": load,
            "delete_design": delete,
            "delete_image": delete_image,
        }
