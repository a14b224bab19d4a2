"""Core Pydantic schemas for the application."""

from .webhook import (
    CommentReference,
    ChangeEvent,
    EntryItem,
    WebhookEnvelope,
)
from .instagram import (
    CommentDetails,
    MediaDetails,
    FetchResult,
    ForwardResult,
)
from .events import (
    NormalizedEvent,
    RelaySummary,
)

__all__ = [
    "CommentReference",
    "ChangeEvent",
    "EntryItem",
    "WebhookEnvelope",
    "CommentDetails",
    "MediaDetails",
    "FetchResult",
    "ForwardResult",
    "NormalizedEvent",
    "RelaySummary",
]
