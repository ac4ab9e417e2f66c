"""
Fixtures pytest partagees pour les tests moviedb.

Ce module contient les fixtures communes utilisees dans les tests:
- Decodeur et fabrique de descripteurs configures
- Mock du transport (ITransport)
- Octets d'une image PNG valide
"""

from io import BytesIO
from unittest.mock import AsyncMock

import pytest
from PIL import Image

from moviedb.adapters.api.cache import ImageCache
from moviedb.adapters.api.decoding import Decoder
from moviedb.adapters.api.endpoints import EndpointBuilder
from moviedb.adapters.api.tmdb_client import TMDBClient
from moviedb.core.ports.transport import ITransport

TEST_API_KEY = "test_api_key"


@pytest.fixture
def decoder() -> Decoder:
    """Decoder avec la configuration par defaut."""
    return Decoder()


@pytest.fixture
def endpoints() -> EndpointBuilder:
    """EndpointBuilder pointant sur les hotes TMDB par defaut."""
    return EndpointBuilder(api_key=TEST_API_KEY)


@pytest.fixture
def mock_transport() -> AsyncMock:
    """
    Mock de ITransport pour les tests.

    execute() doit etre configure dans chaque test (return_value ou side_effect).
    """
    return AsyncMock(spec=ITransport)


@pytest.fixture
def image_cache() -> ImageCache:
    """Cache d'images vide, isole par test."""
    return ImageCache(maxsize=8)


@pytest.fixture
def client(mock_transport: AsyncMock, image_cache: ImageCache) -> TMDBClient:
    """TMDBClient avec transport mocke et cache isole."""
    return TMDBClient(api_key=TEST_API_KEY, transport=mock_transport, image_cache=image_cache)


@pytest.fixture
def png_bytes() -> bytes:
    """Octets d'une image PNG 4x4 valide."""
    buffer = BytesIO()
    Image.new("RGB", (4, 4), color=(200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()
