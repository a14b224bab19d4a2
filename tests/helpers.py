"""Shared test helpers that are not fixtures."""

import json
from unittest.mock import AsyncMock


def make_aiohttp_response(status: int = 200, json_data=None, text: str = "") -> AsyncMock:
    """Build an object usable as ``async with session.get(...) as response``."""
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.json = AsyncMock(return_value=json_data)
    mock_response.text = AsyncMock(return_value=text or json.dumps(json_data))
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)
    return mock_response
