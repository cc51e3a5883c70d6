from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Mapping, Optional

import aiohttp

from photo_search.application.interfaces import IHttpTransport, TransportResponse
from photo_search.core.exceptions import PayloadError, TransportError, UpstreamStatusError

logger = logging.getLogger(__name__)


class AiohttpTransport(IHttpTransport):
    """IHttpTransport implementation using aiohttp.

    Opens a short-lived ClientSession per request unless a session is
    injected, in which case the caller owns its lifecycle.
    """

    def __init__(
        self,
        *,
        timeout: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self.timeout = timeout
        self._session = session

    async def get(self, url: str, params: Mapping[str, Any]) -> TransportResponse:
        query = {k: str(v) for k, v in params.items() if v is not None}
        try:
            if self._session is not None:
                return await self._fetch(self._session, url, query)
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                return await self._fetch(session, url, query)
        except aiohttp.ClientResponseError as e:
            raise UpstreamStatusError(
                f"GET {url} returned {e.status}: {e.message}", status=e.status, url=url
            ) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"GET {url} failed: {e}", url=url) from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"GET {url} timed out", url=url) from e

    async def _fetch(
        self, session: aiohttp.ClientSession, url: str, query: Mapping[str, str]
    ) -> TransportResponse:
        async with session.get(url, params=query) as response:
            response.raise_for_status()
            text = await response.text()
            try:
                body = json.loads(text) if text else None
            except ValueError as e:
                raise PayloadError(f"GET {url} returned a non-JSON body", payload=text) from e
            logger.debug("GET %s -> %s", url, response.status)
            return TransportResponse(
                status=response.status,
                body=body,
                headers=dict(response.headers),
            )
