"""Service protocols the use cases depend on."""

from typing import Protocol

from ..schemas.events import NormalizedEvent
from ..schemas.instagram import FetchResult, ForwardResult


class IInstagramService(Protocol):
    async def get_comment_details(self, comment_id: str) -> FetchResult:
        ...

    async def get_media_details(self, media_id: str) -> FetchResult:
        ...


class IEventForwarder(Protocol):
    async def forward(self, event: NormalizedEvent) -> ForwardResult:
        ...
