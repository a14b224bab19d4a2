"""Base service class with shared aiohttp session handling."""

import logging
from typing import Optional

import aiohttp

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class BaseHTTPService:
    """Owns a lazily created aiohttp session with a bounded total timeout.

    A session passed in by the caller is used as-is and never closed here.
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.timeout_seconds = timeout_seconds
        self._session = session
        self._should_close_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout_seconds),
                connector=aiohttp.TCPConnector(limit=100, limit_per_host=30),
            )
            self._should_close_session = True
            logger.debug(f"Created new aiohttp.ClientSession | service={type(self).__name__}")
        return self._session

    async def close(self):
        """Close the aiohttp session if we created it."""
        if self._session and not self._session.closed and self._should_close_session:
            await self._session.close()
            logger.info(f"{type(self).__name__} session closed")

    async def __aenter__(self):
        await self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
