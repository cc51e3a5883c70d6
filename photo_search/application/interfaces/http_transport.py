from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol


@dataclass(frozen=True)
class TransportResponse:
    """Decoded result of one GET exchange."""

    status: int
    body: Any
    headers: Mapping[str, str] = field(default_factory=dict)

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default


class IHttpTransport(Protocol):
    """Performs a single HTTP GET with query-string parameters.

    Implementations raise ``TransportError`` on network failures,
    ``UpstreamStatusError`` for status >= 400 and ``PayloadError`` when the
    body is not JSON.
    """

    async def get(self, url: str, params: Mapping[str, Any]) -> TransportResponse:
        ...
