"""
Shared test configuration and fixtures for provider tests.
"""

from decimal import Decimal
from unittest.mock import AsyncMock

import httpx
import pytest

from domain.models.rate import ConversionRequest


@pytest.fixture
def conversion_request():
    return ConversionRequest(source_currency='USD', target_currency='EUR', amount=Decimal('100.0'))


@pytest.fixture
def mock_client():
    """Mock httpx.AsyncClient; tests set `post.return_value` or `post.side_effect`."""
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def make_response():
    """Build a real httpx.Response so raise_for_status() behaves as in production."""
    def _make(text: str = '', status_code: int = 200) -> httpx.Response:
        return httpx.Response(
            status_code,
            text=text,
            request=httpx.Request('POST', 'https://provider.example.com/rate'),
        )

    return _make
