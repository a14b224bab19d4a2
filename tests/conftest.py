"""
Pytest configuration and shared fixtures for all tests.

This file provides:
- Test environment variables (set before the app is imported)
- Mock Graph API / forwarding services and aiohttp responses
- Test data factories for webhook payloads
- FastAPI async test client wired to the DI container
"""

import os
import sys
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

TEST_ENV = {
    "APP_SECRET": "test_app_secret",
    "VERIFY_TOKEN": "verify_token",
    "ACCESS_TOKEN": "test_access_token",
    "ZAPIER_WEBHOOK_URL": "https://hooks.example.com/catch/123/abc",
    "HTTP_TIMEOUT_SECONDS": "5",
}
for _key, _value in TEST_ENV.items():
    os.environ.setdefault(_key, _value)

from faker import Faker
from httpx import AsyncClient, ASGITransport
from dependency_injector import providers

from core.config import settings
from core.container import get_container, reset_container
from core.schemas.instagram import CommentDetails, FetchResult, ForwardResult, MediaDetails
from core.utils.signature import compute_signature
from main import app

fake = Faker()


@pytest.fixture
def mock_session():
    """aiohttp.ClientSession stand-in; set ``.get`` / ``.post`` return values per test."""
    session = AsyncMock()
    session.closed = False
    session.get = MagicMock()
    session.post = MagicMock()
    return session


# ============================================================================
# TEST DATA FACTORIES
# ============================================================================


@pytest.fixture
def comment_details_factory():
    def _create(comment_id: str = None, **kwargs) -> CommentDetails:
        return CommentDetails(
            id=comment_id or str(fake.random_number(digits=17, fix_len=True)),
            text=kwargs.get("text", fake.sentence()),
            username=kwargs.get("username", fake.user_name()),
            timestamp=kwargs.get("timestamp", "2024-05-01T12:00:00+0000"),
        )

    return _create


@pytest.fixture
def media_details_factory():
    def _create(media_id: str = None, **kwargs) -> MediaDetails:
        return MediaDetails(
            id=media_id or str(fake.random_number(digits=17, fix_len=True)),
            caption=kwargs.get("caption", fake.sentence()),
            media_type=kwargs.get("media_type", "IMAGE"),
            permalink=kwargs.get("permalink", "https://www.instagram.com/p/Cabc123/"),
            timestamp=kwargs.get("timestamp", "2024-04-30T09:00:00+0000"),
        )

    return _create


@pytest.fixture
def webhook_payload_factory():
    """Build Instagram webhook payloads with any number of comment changes."""

    def _create(*comments: tuple[str, str], obj: str = "instagram", extra_changes=None) -> dict:
        changes = [
            {
                "field": "comments",
                "value": {
                    "id": comment_id,
                    "media": {"id": media_id, "media_product_type": "FEED"},
                    "text": "Test comment",
                    "from": {"id": "user_123", "username": "test_user"},
                },
            }
            for comment_id, media_id in comments
        ]
        changes.extend(extra_changes or [])
        return {
            "object": obj,
            "entry": [
                {
                    "id": "instagram_business_account_id",
                    "time": 1234567890,
                    "changes": changes,
                }
            ],
        }

    return _create


@pytest.fixture
def sample_webhook_payload(webhook_payload_factory):
    """Sample Instagram webhook payload with a single comment."""
    return webhook_payload_factory(("comment_123", "media_123"))


# ============================================================================
# MOCK SERVICE FIXTURES
# ============================================================================


@pytest.fixture
def mock_instagram_service(comment_details_factory, media_details_factory):
    """Graph API service whose fetches succeed and echo the requested ids."""
    service = MagicMock()
    service.get_comment_details = AsyncMock(
        side_effect=lambda comment_id: FetchResult.ok(comment_details_factory(comment_id), status_code=200)
    )
    service.get_media_details = AsyncMock(
        side_effect=lambda media_id: FetchResult.ok(media_details_factory(media_id), status_code=200)
    )
    service.close = AsyncMock()
    return service


@pytest.fixture
def mock_forwarding_service():
    service = MagicMock()
    service.forward = AsyncMock(return_value=ForwardResult(success=True, status_code=200))
    service.close = AsyncMock()
    return service


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def sign_payload():
    """Sign a raw body the way Instagram does."""

    def _sign(body: bytes) -> str:
        return compute_signature(body, settings.app_secret)

    return _sign


@pytest.fixture
async def integration_environment(
    mock_instagram_service, mock_forwarding_service
) -> AsyncGenerator[dict, None]:
    """App client with outbound HTTP services replaced by mocks."""
    reset_container()
    container = get_container()
    container.instagram_service.override(providers.Object(mock_instagram_service))
    container.forwarding_service.override(providers.Object(mock_forwarding_service))

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield {
            "client": client,
            "instagram_service": mock_instagram_service,
            "forwarding_service": mock_forwarding_service,
        }

    container.instagram_service.reset_override()
    container.forwarding_service.reset_override()
    reset_container()
