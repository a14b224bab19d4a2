"""Graph API records and call outcomes."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

T = TypeVar("T")


class CommentDetails(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    text: str | None = None
    username: str | None = None
    timestamp: str | None = None


class MediaDetails(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    caption: str = ""
    media_type: str | None = None
    permalink: str | None = None
    timestamp: str | None = None

    @field_validator("caption", mode="before")
    @classmethod
    def _empty_caption(cls, value: Any) -> Any:
        # Posts without a caption omit the field or send null
        return "" if value is None else value


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a single Graph API read."""

    success: bool
    data: T | None = None
    error: str | None = None
    status_code: int | None = None

    @classmethod
    def ok(cls, data: T, status_code: int | None = None) -> "FetchResult[T]":
        return cls(success=True, data=data, status_code=status_code)

    @classmethod
    def failed(cls, error: str, status_code: int | None = None) -> "FetchResult[T]":
        return cls(success=False, error=error, status_code=status_code)


@dataclass(frozen=True)
class ForwardResult:
    """Outcome of posting an event downstream."""

    success: bool
    error: str | None = None
    status_code: int | None = None
