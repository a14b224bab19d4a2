"""Outbound event document posted to the automation endpoint."""

from typing import Literal

from pydantic import BaseModel, Field

from ..utils.time import iso_utc
from .instagram import CommentDetails, MediaDetails

NEW_COMMENT_EVENT = "new_comment"


class EventComment(BaseModel):
    id: str
    text: str | None = None
    username: str | None = None
    timestamp: str | None = None


class EventPost(BaseModel):
    id: str
    caption: str = ""
    media_type: str | None = None
    permalink: str | None = None
    timestamp: str | None = None


class NormalizedEvent(BaseModel):
    event_type: Literal["new_comment"] = NEW_COMMENT_EVENT
    comment: EventComment
    post: EventPost
    notification_time: str = Field(default_factory=iso_utc)

    @classmethod
    def from_details(cls, comment: CommentDetails, media: MediaDetails) -> "NormalizedEvent":
        """Merge both fetched records; notification_time is stamped now."""
        return cls(
            notification_time=iso_utc(),
            comment=EventComment(
                id=comment.id,
                text=comment.text,
                username=comment.username,
                timestamp=comment.timestamp,
            ),
            post=EventPost(
                id=media.id,
                caption=media.caption or "",
                media_type=media.media_type,
                permalink=media.permalink,
                timestamp=media.timestamp,
            ),
        )


class RelaySummary(BaseModel):
    """What happened to one webhook delivery."""

    status: Literal["processed", "ignored"]
    comments_seen: int = 0
    forwarded: int = 0
    forward_failed: int = 0
    skipped: int = 0
