"""Integration tests for the webhook server."""

from collections.abc import Iterator

import pytest
from aiohttp.test_utils import TestClient, TestServer
from loguru import logger

from src.constants import NEW_REVIEW_WEBHOOK_PATH
from src.services.webhook import create_app


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru output."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.mark.asyncio
async def test_new_review_acknowledged(log_messages: list[str]) -> None:
    """Test a JSON review notification is logged and acknowledged."""
    payload = {"book_id": 42, "rating": 5, "reviewer": "Layla"}

    async with TestClient(TestServer(create_app())) as client:
        response = await client.post(NEW_REVIEW_WEBHOOK_PATH, json=payload)

        assert response.status == 200
        assert await response.json() == {"success": True, "message": "Webhook received"}

    assert any("Webhook received for new review" in message for message in log_messages)


@pytest.mark.asyncio
async def test_non_latin_payload(log_messages: list[str]) -> None:
    """Test payloads with Arabic text are accepted."""
    payload = {"title": "كتاب الرجال من المريخ والنساء من الزهرة"}

    async with TestClient(TestServer(create_app())) as client:
        response = await client.post(NEW_REVIEW_WEBHOOK_PATH, json=payload)

        assert response.status == 200


@pytest.mark.asyncio
async def test_malformed_body_returns_500(log_messages: list[str]) -> None:
    """Test invalid JSON is answered with an error acknowledgement."""
    async with TestClient(TestServer(create_app())) as client:
        response = await client.post(
            NEW_REVIEW_WEBHOOK_PATH,
            data="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status == 500
        assert await response.json() == {
            "success": False,
            "message": "Error processing webhook",
        }

    assert any("Error processing webhook" in message for message in log_messages)


@pytest.mark.asyncio
async def test_empty_body_returns_500() -> None:
    """Test an empty body is not a valid notification."""
    async with TestClient(TestServer(create_app())) as client:
        response = await client.post(NEW_REVIEW_WEBHOOK_PATH)

        assert response.status == 500


@pytest.mark.asyncio
async def test_only_post_allowed() -> None:
    """Test other methods are rejected by the router."""
    async with TestClient(TestServer(create_app())) as client:
        response = await client.get(NEW_REVIEW_WEBHOOK_PATH)

        assert response.status == 405


@pytest.mark.asyncio
async def test_unknown_charset_returns_500(log_messages: list[str]) -> None:
    """Test a body in an unknown charset gets the JSON error acknowledgement."""
    async with TestClient(TestServer(create_app())) as client:
        response = await client.post(
            NEW_REVIEW_WEBHOOK_PATH,
            data=b'{"rating": 5}',
            headers={"Content-Type": "application/json; charset=no-such-charset"},
        )

        assert response.status == 500
        assert await response.json() == {
            "success": False,
            "message": "Error processing webhook",
        }

    assert any("Error processing webhook" in message for message in log_messages)
