import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import aiohttp
from pydantic import BaseModel

from ..schemas.instagram import CommentDetails, FetchResult, MediaDetails
from .base_service import DEFAULT_TIMEOUT_SECONDS, BaseHTTPService

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_URL = "https://graph.instagram.com"


@dataclass(frozen=True)
class GraphResource:
    """A Graph API node type: which fields to request and how to parse them."""

    name: str
    fields: tuple[str, ...]
    model: type[BaseModel]

    @property
    def fields_param(self) -> str:
        return ",".join(self.fields)


COMMENT_RESOURCE = GraphResource(
    name="comment",
    fields=("id", "text", "username", "timestamp", "media"),
    model=CommentDetails,
)

MEDIA_RESOURCE = GraphResource(
    name="media",
    fields=("id", "caption", "media_type", "permalink", "timestamp"),
    model=MediaDetails,
)


class InstagramGraphAPIService(BaseHTTPService):
    """Read-only client for the Instagram Graph API."""

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_GRAPH_URL,
        session: Optional[aiohttp.ClientSession] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        if not access_token:
            raise ValueError("Instagram access token is required")

        super().__init__(session=session, timeout_seconds=timeout_seconds)
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")

    async def fetch_resource(self, resource: GraphResource, resource_id: str) -> FetchResult:
        """
        Read one Graph API node.

        Single attempt, no retry. Every failure (transport error, timeout,
        non-2xx status, unparseable body) comes back as a failed FetchResult.

        Args:
            resource: Node type descriptor (fields + response model)
            resource_id: Graph API id of the node

        Returns:
            FetchResult with the parsed record on success
        """
        url = f"{self.base_url}/{resource_id}"
        params = {
            "fields": resource.fields_param,
            "access_token": self.access_token,
        }

        logger.debug(f"Fetching {resource.name} | id={resource_id}")

        try:
            session = await self._get_session()
            async with session.get(url, params=params) as response:
                if response.status < 200 or response.status >= 300:
                    error_body = await response.text()
                    logger.error(
                        f"Error fetching {resource.name} details | id={resource_id} | "
                        f"status_code={response.status} | error={error_body[:500]}"
                    )
                    return FetchResult.failed(
                        f"HTTP {response.status}: {error_body[:500]}",
                        status_code=response.status,
                    )

                response_data = await response.json(content_type=None)
                record = resource.model.model_validate(response_data)

                logger.info(
                    f"{resource.name.capitalize()} details retrieved | id={resource_id} | "
                    f"status_code={response.status}"
                )
                return FetchResult.ok(record, status_code=response.status)

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(
                f"Error fetching {resource.name} details | id={resource_id} | "
                f"error={type(e).__name__}: {e}"
            )
            return FetchResult.failed(f"{type(e).__name__}: {e}")
        except ValueError as e:
            # Non-JSON body or a payload that does not fit the model
            logger.error(f"Malformed {resource.name} response | id={resource_id} | error={e}")
            return FetchResult.failed(f"malformed response: {e}")

    async def get_comment_details(self, comment_id: str) -> FetchResult:
        """Fetch text, author and timestamp for a comment."""
        return await self.fetch_resource(COMMENT_RESOURCE, comment_id)

    async def get_media_details(self, media_id: str) -> FetchResult:
        """Fetch caption, type, permalink and timestamp for a post."""
        return await self.fetch_resource(MEDIA_RESOURCE, media_id)
