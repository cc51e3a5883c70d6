"""
Mapping of raw Unsplash payloads into the envelope/item shapes callers use.
"""

from __future__ import annotations

import html
import logging
import math
from typing import Any, Callable, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from photo_search.core.config import DEFAULT_ATTRIBUTION_TEMPLATE
from photo_search.core.exceptions import PayloadError
from photo_search.core.pyd_schemas import CollectionItem, Item, PhotoItem, ResultEnvelope

logger = logging.getLogger(__name__)

SERVICE_NAME = "Unsplash"
ATTRIBUTION_TEMPLATE = DEFAULT_ATTRIBUTION_TEMPLATE


def next_page_for(page: int, total_pages: int) -> Optional[int]:
    return page + 1 if total_pages > page else None


def previous_page_for(page: int) -> Optional[int]:
    return page - 1 if page > 1 else None


def parse_total_header(value: Optional[str]) -> int:
    """Parse the ``x-total`` header; missing or unparseable values count as 0."""
    if value is None:
        return 0
    try:
        total = int(str(value).strip())
    except ValueError:
        logger.debug("Ignoring unparseable x-total header: %r", value)
        return 0
    return max(total, 0)


def total_pages_for(total: int, page_size: int) -> int:
    """ceil(total / page_size) when both are positive, else a single page."""
    if total > 0 and page_size > 0:
        return math.ceil(total / page_size)
    return 1


def referral_link(url: str, app_id: str) -> str:
    """Tag a link with the utm parameters the API guidelines ask for."""
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}utm_source={app_id}&utm_medium=referral"


def build_attribution(
    user: Mapping[str, Any], app_id: str, site_url: str, template: str = ATTRIBUTION_TEMPLATE
) -> str:
    """Render the credit line; ``template`` takes user_url, user_name, site_url and service."""
    profile = ((user.get("links") or {}).get("html")) or f"{site_url}/@{user.get('username', '')}"
    return (template or ATTRIBUTION_TEMPLATE).format(
        user_url=referral_link(profile, app_id),
        user_name=html.escape(str(user.get("name") or user.get("username") or "")),
        site_url=referral_link(f"{site_url}/", app_id),
        service=SERVICE_NAME,
    )


def normalize_photo(
    image: Mapping[str, Any],
    *,
    app_id: str,
    url_suffix: str,
    site_url: str,
    template: str = ATTRIBUTION_TEMPLATE,
) -> PhotoItem:
    """Map one raw photo object to a PhotoItem.

    Raises KeyError/TypeError/ValidationError on unexpected shapes; callers
    wrap them as PayloadError.
    """
    urls = image["urls"]
    user = image.get("user") or {}
    links = image.get("links") or {}
    raw = urls["raw"]
    return PhotoItem(
        id=image.get("id"),
        width=image.get("width"),
        height=image.get("height"),
        color=image.get("color"),
        alt_description=image.get("alt_description"),
        description=image.get("description"),
        likes=image.get("likes") or 0,
        user=dict(user),
        slug=image.get("slug"),
        url=raw + url_suffix if url_suffix else urls["regular"],
        raw=raw,
        thumb=urls.get("thumb"),
        download_location=links.get("download_location"),
        attribution=build_attribution(user, app_id, site_url, template),
    )


def normalize_collection(collection: Mapping[str, Any]) -> CollectionItem:
    cover = collection.get("cover_photo")
    thumb = cover["urls"]["small"] if cover else None
    return CollectionItem(
        id=str(collection["id"]),
        title=collection.get("title"),
        description=collection.get("description"),
        total_photos=collection.get("total_photos") or 0,
        user=dict(collection.get("user") or {}),
        cover_photo=dict(cover) if cover else None,
        thumb=thumb,
    )


def _map_items(raw_items: Any, mapper: Callable[[Mapping[str, Any]], Item]) -> List[Item]:
    if not isinstance(raw_items, Sequence) or isinstance(raw_items, (str, bytes)):
        raise PayloadError("Expected a list of results", payload=raw_items)
    try:
        return [mapper(item) for item in raw_items]
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        raise PayloadError(f"Unexpected item shape: {e}", payload=raw_items) from e


def build_envelope(
    *,
    total: Any,
    total_pages: Any,
    page: int,
    query: str,
    raw_items: Any,
    mapper: Callable[[Mapping[str, Any]], Item],
) -> ResultEnvelope:
    """Assemble a ResultEnvelope with computed next/previous page links."""
    try:
        total = int(total or 0)
        total_pages = int(total_pages or 0)
    except (TypeError, ValueError) as e:
        raise PayloadError(f"Invalid pagination metadata: {e}") from e
    items = _map_items(raw_items, mapper)
    try:
        return ResultEnvelope(
            total=total,
            total_pages=total_pages,
            page=page,
            next_page=next_page_for(page, total_pages),
            previous_page=previous_page_for(page),
            query=query,
            results=items,
        )
    except ValidationError as e:
        raise PayloadError(f"Invalid pagination metadata: {e}") from e


def body_search_envelope(
    body: Any, *, page: int, query: str, mapper: Callable[[Mapping[str, Any]], Item]
) -> ResultEnvelope:
    """Envelope for search endpoints, which carry totals in the body."""
    if not isinstance(body, Mapping):
        raise PayloadError("Expected a JSON object", payload=body)
    return build_envelope(
        total=body.get("total"),
        total_pages=body.get("total_pages"),
        page=page,
        query=query,
        raw_items=body.get("results", []),
        mapper=mapper,
    )


def header_listing_envelope(
    body: Any,
    total_header: Optional[str],
    *,
    page: int,
    page_size: int,
    query: str,
    mapper: Callable[[Mapping[str, Any]], Item],
) -> ResultEnvelope:
    """Envelope for listing endpoints: a bare JSON array plus an ``x-total`` header."""
    total = parse_total_header(total_header)
    return build_envelope(
        total=total,
        total_pages=total_pages_for(total, page_size),
        page=page,
        query=query,
        raw_items=body,
        mapper=mapper,
    )
