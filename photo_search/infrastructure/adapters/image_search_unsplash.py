from __future__ import annotations

import asyncio
import logging
import re
from functools import partial
from typing import Optional, Set

from photo_search.application.interfaces import (
    IHttpTransport,
    IPhotoSearchGateway,
    OnComplete,
    TransportResponse,
)
from photo_search.core.config import ClientConfig
from photo_search.core.exceptions import PhotoSearchError, TransportError
from photo_search.core.pyd_schemas import ResultEnvelope, SearchOutcome
from photo_search.infrastructure.adapters.http_transport_aiohttp import AiohttpTransport
from photo_search.infrastructure.adapters.unsplash.normalizers import (
    body_search_envelope,
    build_envelope,
    header_listing_envelope,
    normalize_collection,
    normalize_photo,
)
from photo_search.infrastructure.adapters.unsplash.queries import (
    CollectionPhotosRequest,
    CollectionSearchRequest,
    PhotoLookupRequest,
    PhotoSearchRequest,
    QueryRequest,
    UserPhotosRequest,
)

logger = logging.getLogger(__name__)

TOTAL_HEADER = "x-total"


def extract_direct_link_slug(query: str, site_url: str) -> Optional[str]:
    """Return the photo slug when ``query`` is a pasted photo page URL.

    ``https://unsplash.com/photos/xyz-abc123`` -> ``"abc123"``. Anything that
    is not a site URL, or has no word token after its last hyphen, gives None.
    """
    if not query or not query.startswith(f"{site_url}/"):
        return None
    match = re.match(rf"^{re.escape(site_url)}/.*-(\w+)$", query.strip())
    if match is None:
        return None
    return match.group(1)


class UnsplashSearchGateway(IPhotoSearchGateway):
    """IPhotoSearchGateway implementation for the Unsplash API.

    Builds one request per call, normalizes the JSON payload and never lets
    upstream failures escape: they come back as an empty SearchOutcome that
    carries the error.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[IHttpTransport] = None,
    ) -> None:
        self.config = config or ClientConfig.from_settings()
        self.transport = transport or AiohttpTransport(timeout=self.config.request_timeout)
        self._pending: Set[asyncio.Task] = set()
        if not self.config.api_key:
            logger.debug("UnsplashSearchGateway: missing API key; requests will be rejected")

    # ----- Query operations -----
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
        slug = extract_direct_link_slug(query, self.config.site_url)
        if slug:
            outcome = await self._lookup(PhotoLookupRequest(slug=slug), query)
            if outcome.ok:
                return self._deliver(outcome, on_complete)
            logger.info("Direct lookup for slug %s failed; falling back to search", slug)

        request = PhotoSearchRequest(
            query=query,
            page=page,
            page_size=page_size,
            order_by=order_by,
            orientation=orientation or None,
            color=color or None,
        )
        outcome = await self._execute(
            request,
            lambda resp: body_search_envelope(
                resp.body, page=request.page, query=query, mapper=self._photo_mapper()
            ),
        )
        return self._deliver(outcome, on_complete)

    async def get_user_photos(
        self,
        username: str,
        page: int = 1,
        page_size: Optional[int] = None,
        order_by: str = "latest",
        orientation: Optional[str] = None,
        on_complete: Optional[OnComplete] = None,
    ) -> SearchOutcome:
        request = UserPhotosRequest(
            username=username,
            page=page,
            page_size=page_size,
            order_by=order_by,
            orientation=orientation or None,
        )
        outcome = await self._execute(request, partial(self._header_listing, request))
        return self._deliver(outcome, on_complete)

    async def search_collections(
        self,
        query: str,
        page: int = 1,
        page_size: Optional[int] = None,
        on_complete: Optional[OnComplete] = None,
    ) -> SearchOutcome:
        request = CollectionSearchRequest(query=query, page=page, page_size=page_size)
        outcome = await self._execute(
            request,
            lambda resp: body_search_envelope(
                resp.body, page=request.page, query=query, mapper=normalize_collection
            ),
        )
        return self._deliver(outcome, on_complete)

    async def get_collection_photos(
        self,
        collection_id: str,
        page: int = 1,
        page_size: Optional[int] = None,
        orientation: Optional[str] = None,
        on_complete: Optional[OnComplete] = None,
    ) -> SearchOutcome:
        request = CollectionPhotosRequest(
            collection_id=str(collection_id),
            page=page,
            page_size=page_size,
            orientation=orientation or None,
        )
        outcome = await self._execute(request, partial(self._header_listing, request))
        return self._deliver(outcome, on_complete)

    # ----- Download tracking -----
    def notify_download(self, download_location: str) -> None:
        """Schedule download tracking on the running loop and return immediately."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.error("Cannot track download %s: no running event loop", download_location)
            return
        task = loop.create_task(self.track_download(download_location))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def track_download(self, download_location: str) -> None:
        """Hit the photo's download endpoint; failures are logged, never raised."""
        try:
            await self.transport.get(download_location, {"client_id": self.config.api_key})
            logger.debug("Tracked download %s", download_location)
        except PhotoSearchError as e:
            logger.error("Failed to track download %s: %s", download_location, e.message)
        except Exception as e:  # noqa: BLE001
            logger.error("Unexpected error tracking download %s: %s", download_location, e)

    async def drain(self) -> None:
        """Wait for download notifications still in flight."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    # ----- Internals -----
    def _url(self, request: QueryRequest) -> str:
        return f"{self.config.base_url}{request.path}"

    def _photo_mapper(self):
        return partial(
            normalize_photo,
            app_id=self.config.app_id,
            url_suffix=self.config.url_suffix,
            site_url=self.config.site_url,
            template=self.config.attribution_template,
        )

    def _header_listing(self, request: QueryRequest, resp: TransportResponse) -> ResultEnvelope:
        return header_listing_envelope(
            resp.body,
            resp.header(TOTAL_HEADER),
            page=request.page,
            page_size=request.effective_page_size(self.config.default_page_size),
            query=request.label,
            mapper=self._photo_mapper(),
        )

    async def _lookup(self, request: PhotoLookupRequest, query: str) -> SearchOutcome:
        return await self._execute(
            request,
            lambda resp: build_envelope(
                total=1,
                total_pages=1,
                # one-item result; the caller's page argument does not apply
                page=1,
                query=query,
                raw_items=[resp.body],
                mapper=self._photo_mapper(),
            ),
        )

    async def _execute(self, request: QueryRequest, parse) -> SearchOutcome:
        url = self._url(request)
        params = request.to_params(self.config.api_key, self.config.default_page_size)
        try:
            response = await self.transport.get(url, params)
            envelope = parse(response)
        except PhotoSearchError as e:
            logger.warning("Unsplash request %s failed: %s", request.path, e.message)
            return SearchOutcome.empty(e)
        except Exception as e:  # noqa: BLE001
            logger.error("Unexpected error requesting %s: %s", request.path, e)
            return SearchOutcome.empty(TransportError(f"GET {url} failed: {e}", url=url))
        logger.debug(
            "Unsplash %s page %s -> %s/%s results",
            request.path,
            envelope.page,
            len(envelope.results),
            envelope.total,
        )
        return SearchOutcome.success(envelope)

    @staticmethod
    def _deliver(outcome: SearchOutcome, on_complete: Optional[OnComplete]) -> SearchOutcome:
        if on_complete is not None:
            on_complete(outcome)
        return outcome
