"""Request models for each Unsplash endpoint the gateway calls.

Each model knows its path and how to turn itself into query-string params.
Optional filters are left out of the params entirely when unset; the API
treats an empty ``orientation=`` differently from an absent one.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Literal, Optional
from urllib.parse import quote

from pydantic import BaseModel, PositiveInt, constr

from photo_search.core.pyd_schemas import Color, Orientation

SearchOrder = Literal["relevant", "latest"]
ListingOrder = Literal["latest", "oldest", "popular", "views", "downloads"]


class QueryRequest(BaseModel):
    """Common paging fields shared by every listing/search request."""

    page: PositiveInt = 1
    page_size: Optional[PositiveInt] = None

    paginated: ClassVar[bool] = True

    @property
    def path(self) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    @property
    def label(self) -> str:
        """Value echoed back as the envelope's ``query``."""
        return ""

    def effective_page_size(self, default_page_size: int) -> int:
        return self.page_size or default_page_size

    def extra_params(self) -> Dict[str, Any]:
        return {}

    def to_params(self, client_id: str, default_page_size: int) -> Dict[str, Any]:
        params: Dict[str, Any] = {"client_id": client_id}
        if self.paginated:
            params["page"] = self.page
            params["per_page"] = self.effective_page_size(default_page_size)
        for key, value in self.extra_params().items():
            if value is None or value == "":
                continue
            params[key] = value.value if hasattr(value, "value") else value
        return params


class PhotoLookupRequest(QueryRequest):
    slug: constr(strip_whitespace=True, min_length=1)

    paginated: ClassVar[bool] = False

    @property
    def path(self) -> str:
        return f"/photos/{quote(self.slug, safe='')}"


class PhotoSearchRequest(QueryRequest):
    query: str
    order_by: SearchOrder = "relevant"
    orientation: Optional[Orientation] = None
    color: Optional[Color] = None

    @property
    def path(self) -> str:
        return "/search/photos"

    @property
    def label(self) -> str:
        return self.query

    def extra_params(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "order_by": self.order_by,
            "orientation": self.orientation,
            "color": self.color,
        }


class UserPhotosRequest(QueryRequest):
    username: constr(strip_whitespace=True, min_length=1)
    order_by: ListingOrder = "latest"
    orientation: Optional[Orientation] = None

    @property
    def path(self) -> str:
        return f"/users/{quote(self.username, safe='')}/photos"

    @property
    def label(self) -> str:
        return self.username

    def extra_params(self) -> Dict[str, Any]:
        return {"order_by": self.order_by, "orientation": self.orientation}


class CollectionSearchRequest(QueryRequest):
    query: str

    @property
    def path(self) -> str:
        return "/search/collections"

    @property
    def label(self) -> str:
        return self.query

    def extra_params(self) -> Dict[str, Any]:
        return {"query": self.query}


class CollectionPhotosRequest(QueryRequest):
    collection_id: constr(strip_whitespace=True, min_length=1)
    orientation: Optional[Orientation] = None

    @property
    def path(self) -> str:
        return f"/collections/{quote(self.collection_id, safe='')}/photos"

    @property
    def label(self) -> str:
        return self.collection_id

    def extra_params(self) -> Dict[str, Any]:
        return {"orientation": self.orientation}
