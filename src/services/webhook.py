"""Webhook endpoints served with aiohttp.

The new-review hook only records the payload. The sender is not verified.
"""

import json

from aiohttp import web

from src.constants import NEW_REVIEW_WEBHOOK_PATH
from src.models.content import WebhookAck
from src.utils.logging import get_logger

logger = get_logger(__name__)


def _ack_response(ack: WebhookAck, status: int = 200) -> web.Response:
    return web.json_response(ack.model_dump(), status=status)


async def handle_new_review(request: web.Request) -> web.Response:
    """
    Log a new-review notification and acknowledge it.

    Args:
        request: Incoming POST request with a JSON body

    Returns:
        200 with ``{"success": true, "message": "Webhook received"}``, or 500
        when the body cannot be decoded as JSON
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError, LookupError) as e:
        logger.error("Error processing webhook", path=request.path, error=str(e))
        return _ack_response(
            WebhookAck(success=False, message="Error processing webhook"), status=500
        )

    logger.info("Webhook received for new review", payload=body)
    return _ack_response(WebhookAck(success=True, message="Webhook received"))


def create_app() -> web.Application:
    """Build the webhook application."""
    app = web.Application()
    app.router.add_post(NEW_REVIEW_WEBHOOK_PATH, handle_new_review)
    return app
