from .http_transport_aiohttp import AiohttpTransport
from .image_search_unsplash import UnsplashSearchGateway

__all__ = [
    "AiohttpTransport",
    "UnsplashSearchGateway",
]
