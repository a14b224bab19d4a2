"""Relay comment use case - enriches Instagram comment notifications and forwards them."""

import asyncio
import logging
from typing import Optional

from ..interfaces.services import IEventForwarder, IInstagramService
from ..schemas.events import NormalizedEvent, RelaySummary
from ..schemas.instagram import FetchResult, ForwardResult
from ..schemas.webhook import CommentReference, WebhookEnvelope

logger = logging.getLogger(__name__)


class RelayCommentUseCase:
    """
    Turn one webhook delivery into zero or more forwarded events.

    Responsibilities:
    - Ignore payloads that are not from Instagram
    - Walk entries and changes in order, picking comment changes
    - Fetch comment and media details concurrently for each comment
    - Forward the merged event only when both fetches succeed

    Comments are handled one after another so forwarding order follows
    payload order.
    """

    def __init__(
        self,
        instagram_service: IInstagramService,
        forwarding_service: IEventForwarder,
    ):
        self.instagram_service = instagram_service
        self.forwarding_service = forwarding_service

    async def execute(self, envelope: WebhookEnvelope) -> RelaySummary:
        if not envelope.is_instagram():
            logger.info(f"Ignoring webhook for unsupported object | object={envelope.object}")
            return RelaySummary(status="ignored")

        summary = RelaySummary(status="processed")
        for reference in envelope.iter_comment_references():
            summary.comments_seen += 1
            result = await self.relay_comment(reference)
            if result is None:
                summary.skipped += 1
            elif result.success:
                summary.forwarded += 1
            else:
                summary.forward_failed += 1

        logger.info(
            f"Webhook relayed | comments={summary.comments_seen} | forwarded={summary.forwarded} | "
            f"forward_failed={summary.forward_failed} | skipped={summary.skipped}"
        )
        return summary

    async def relay_comment(self, reference: CommentReference) -> Optional[ForwardResult]:
        """
        Enrich and forward a single comment.

        Returns:
            The forward outcome, or None if the comment was dropped before forwarding
        """
        comment_id, media_id = reference
        logger.info(f"New comment detected | comment_id={comment_id} | media_id={media_id}")

        try:
            # Both fetches always settle before we move on
            comment_result, media_result = await asyncio.gather(
                self.instagram_service.get_comment_details(comment_id),
                self.instagram_service.get_media_details(media_id),
                return_exceptions=True,
            )
            comment_result = self._settle(comment_result, "comment", comment_id)
            media_result = self._settle(media_result, "media", media_id)

            if not comment_result.success or not media_result.success:
                logger.warning(
                    f"Dropping comment, details unavailable | comment_id={comment_id} | media_id={media_id} | "
                    f"comment_error={comment_result.error} | media_error={media_result.error}"
                )
                return None

            event = NormalizedEvent.from_details(comment_result.data, media_result.data)
            return await self.forwarding_service.forward(event)

        except Exception:
            logger.exception(f"Unexpected error relaying comment | comment_id={comment_id}")
            return None

    @staticmethod
    def _settle(outcome, kind: str, object_id: str) -> FetchResult:
        """Turn an exception returned by gather into a failed fetch."""
        if isinstance(outcome, Exception):
            logger.error(
                f"Unexpected error fetching {kind} | id={object_id} | error={type(outcome).__name__}: {outcome}",
                exc_info=outcome,
            )
            return FetchResult.failed(f"{type(outcome).__name__}: {outcome}")
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome
