from __future__ import annotations

from typing import Callable, Optional, Protocol

from photo_search.core.pyd_schemas import SearchOutcome

OnComplete = Callable[[SearchOutcome], None]


class IPhotoSearchGateway(Protocol):
    """Port for searching photos and collections of a stock-photo provider.

    Every query coroutine resolves to a ``SearchOutcome`` and never raises for
    upstream failures. ``on_complete``, when given, receives the same outcome.
    """

    async def search(
        self,
        query: str,
        page: int = 1,
        page_size: Optional[int] = None,
        order_by: str = "relevant",
        orientation: Optional[str] = None,
        color: Optional[str] = None,
        on_complete: Optional[OnComplete] = None,
    ) -> SearchOutcome:
        ...

    async def get_user_photos(
        self,
        username: str,
        page: int = 1,
        page_size: Optional[int] = None,
        order_by: str = "latest",
        orientation: Optional[str] = None,
        on_complete: Optional[OnComplete] = None,
    ) -> SearchOutcome:
        ...

    async def search_collections(
        self,
        query: str,
        page: int = 1,
        page_size: Optional[int] = None,
        on_complete: Optional[OnComplete] = None,
    ) -> SearchOutcome:
        ...

    async def get_collection_photos(
        self,
        collection_id: str,
        page: int = 1,
        page_size: Optional[int] = None,
        orientation: Optional[str] = None,
        on_complete: Optional[OnComplete] = None,
    ) -> SearchOutcome:
        ...

    def notify_download(self, download_location: str) -> None:
        """Fire-and-forget download tracking required by the provider's terms."""
        ...
