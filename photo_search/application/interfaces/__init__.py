from .http_transport import IHttpTransport, TransportResponse
from .image_search import IPhotoSearchGateway, OnComplete

__all__ = [
    "IHttpTransport",
    "TransportResponse",
    "IPhotoSearchGateway",
    "OnComplete",
]
