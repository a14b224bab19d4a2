"""
Event Forwarding Service

Posts normalized comment events to the downstream automation webhook
(a Zapier catch hook or anything that accepts a JSON POST).
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from ..schemas.events import NormalizedEvent
from ..schemas.instagram import ForwardResult
from .base_service import DEFAULT_TIMEOUT_SECONDS, BaseHTTPService

logger = logging.getLogger(__name__)


class EventForwardingService(BaseHTTPService):
    """Delivers events downstream; failures are logged and reported, never raised."""

    def __init__(
        self,
        webhook_url: str,
        session: Optional[aiohttp.ClientSession] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        if not webhook_url:
            raise ValueError("Forwarding webhook URL is required")

        super().__init__(session=session, timeout_seconds=timeout_seconds)
        self.webhook_url = webhook_url

    async def forward(self, event: NormalizedEvent) -> ForwardResult:
        """
        POST the event once. No retry.

        Returns:
            ForwardResult; success only for a 2xx response
        """
        comment_id = event.comment.id

        try:
            session = await self._get_session()
            async with session.post(self.webhook_url, json=event.model_dump(mode="json")) as response:
                if 200 <= response.status < 300:
                    logger.info(
                        f"Event forwarded | comment_id={comment_id} | post_id={event.post.id} | "
                        f"status_code={response.status}"
                    )
                    return ForwardResult(success=True, status_code=response.status)

                error_body = await response.text()
                logger.error(
                    f"Error forwarding event | comment_id={comment_id} | "
                    f"status_code={response.status} | error={error_body[:500]}"
                )
                return ForwardResult(
                    success=False,
                    error=f"HTTP {response.status}: {error_body[:500]}",
                    status_code=response.status,
                )

        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(
                f"Error forwarding event | comment_id={comment_id} | error={type(e).__name__}: {e}"
            )
            return ForwardResult(success=False, error=f"{type(e).__name__}: {e}")
