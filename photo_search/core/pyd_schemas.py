from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from photo_search.core.exceptions import PhotoSearchError


class Orientation(str, Enum):
    landscape = "landscape"
    portrait = "portrait"
    squarish = "squarish"


class Color(str, Enum):
    black_and_white = "black_and_white"
    black = "black"
    white = "white"
    yellow = "yellow"
    orange = "orange"
    red = "red"
    purple = "purple"
    magenta = "magenta"
    green = "green"
    teal = "teal"
    blue = "blue"


class PhotoItem(BaseModel):
    type: Literal["photo"] = "photo"
    id: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    color: Optional[str] = None
    alt_description: Optional[str] = None
    description: Optional[str] = None
    likes: int = 0
    user: Dict[str, Any] = Field(default_factory=dict)
    slug: Optional[str] = None
    # raw + suffix when a suffix is configured, else the "regular" variant
    url: str
    raw: str
    thumb: Optional[str] = None
    download_location: Optional[str] = None
    attribution: str


class CollectionItem(BaseModel):
    type: Literal["collection"] = "collection"
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    total_photos: int = 0
    user: Dict[str, Any] = Field(default_factory=dict)
    cover_photo: Optional[Dict[str, Any]] = None
    thumb: Optional[str] = None


Item = Union[PhotoItem, CollectionItem]


class ResultEnvelope(BaseModel):
    """Pagination metadata plus the normalized items of one page."""

    total: NonNegativeInt
    total_pages: NonNegativeInt
    page: NonNegativeInt
    next_page: Optional[int] = None
    previous_page: Optional[int] = None
    query: str
    results: List[Item] = Field(default_factory=list)


class SearchOutcome(BaseModel):
    """What a query operation delivers: an envelope, or nothing plus the reason.

    ``results`` is always iterable; on failure it is empty, so callers that
    only care about items never need to branch.
    """

    envelope: Optional[ResultEnvelope] = None
    error: Optional[PhotoSearchError] = None

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @property
    def ok(self) -> bool:
        return self.envelope is not None

    @property
    def results(self) -> List[Item]:
        return list(self.envelope.results) if self.envelope is not None else []

    @classmethod
    def success(cls, envelope: ResultEnvelope) -> "SearchOutcome":
        return cls(envelope=envelope)

    @classmethod
    def empty(cls, error: Optional[PhotoSearchError] = None) -> "SearchOutcome":
        return cls(error=error)
