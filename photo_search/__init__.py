"""Async client for the Unsplash photo-search API."""

from photo_search.core.config import ClientConfig, Settings, settings
from photo_search.core.exceptions import (
    PayloadError,
    PhotoSearchError,
    TransportError,
    UpstreamStatusError,
)
from photo_search.core.pyd_schemas import (
    CollectionItem,
    Color,
    Orientation,
    PhotoItem,
    ResultEnvelope,
    SearchOutcome,
)
from photo_search.infrastructure.adapters import AiohttpTransport, UnsplashSearchGateway

__all__ = [
    "AiohttpTransport",
    "ClientConfig",
    "CollectionItem",
    "Color",
    "Orientation",
    "PayloadError",
    "PhotoItem",
    "PhotoSearchError",
    "ResultEnvelope",
    "SearchOutcome",
    "Settings",
    "TransportError",
    "UnsplashSearchGateway",
    "UpstreamStatusError",
    "settings",
]
