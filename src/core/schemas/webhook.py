"""Inbound Instagram webhook payload models.

Every field is optional: Instagram sends sparse payloads and anything we do not
recognise is skipped rather than rejected. Only the outer envelope is validated
up front; entries, changes and comment values are validated one at a time so a
single odd change never hides its siblings.
"""

import logging
from typing import Any, Iterator, NamedTuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

INSTAGRAM_OBJECT = "instagram"
COMMENTS_FIELD = "comments"

M = TypeVar("M", bound=BaseModel)


class ChangeMedia(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str | None = None


class ChangeValue(BaseModel):
    """The part of a comment change we act on: comment id and parent media id."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str | None = None
    media: ChangeMedia | None = None


class ChangeEvent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    field: Any = None
    value: Any = None

    def is_comment(self) -> bool:
        return self.field == COMMENTS_FIELD


class EntryItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Any = None
    changes: list[Any] | None = None


class CommentReference(NamedTuple):
    comment_id: str
    media_id: str


def _validate_or_skip(model: type[M], raw: Any, what: str) -> M | None:
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        logger.debug(f"Skipping malformed {what} | errors={e.error_count()}")
        return None


class WebhookEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    object: str | None = None
    entry: list[Any] = Field(default_factory=list)

    def is_instagram(self) -> bool:
        return self.object == INSTAGRAM_OBJECT

    def iter_changes(self) -> Iterator[ChangeEvent]:
        """Yield well-formed changes across all entries, in payload order."""
        for raw_entry in self.entry:
            entry = _validate_or_skip(EntryItem, raw_entry, "entry")
            if entry is None:
                continue
            for raw_change in entry.changes or []:
                change = _validate_or_skip(ChangeEvent, raw_change, "change")
                if change is not None:
                    yield change

    def iter_comment_references(self) -> Iterator[CommentReference]:
        """Yield (comment_id, media_id) for every comment change, in payload order.

        Non-comment changes, malformed comment values and changes missing
        either id are skipped.
        """
        for change in self.iter_changes():
            if not change.is_comment() or change.value is None:
                continue
            value = _validate_or_skip(ChangeValue, change.value, "comment value")
            if value is None:
                continue
            comment_id = value.id
            media_id = value.media.id if value.media else None
            if not comment_id or not media_id:
                continue
            yield CommentReference(comment_id=comment_id, media_id=media_id)
