"""
Shared fixtures: a scripted fake transport and raw Unsplash payload builders.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

import pytest

from photo_search.application.interfaces import TransportResponse
from photo_search.core.config import ClientConfig
from photo_search.infrastructure.adapters import UnsplashSearchGateway

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def pytest_configure(config):  # pylint: disable=unused-argument
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("photo_search").setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def log_test_name(request):
    """Log test name when test starts and finishes."""
    logger = logging.getLogger(request.node.nodeid)
    logger.info("Starting test: %s", request.node.name)
    start_time = datetime.now()

    def log_test_end():
        duration = (datetime.now() - start_time).total_seconds()
        logger.info("Finished after %.2fs", duration)

    request.addfinalizer(log_test_end)


class FakeTransport:
    """Records every GET and answers from a path -> response (or exception) map."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None) -> None:
        self.routes: Dict[str, Any] = dict(routes or {})
        self.calls: List[Dict[str, Any]] = []

    def add(self, path: str, body: Any = None, headers: Optional[Mapping[str, str]] = None, status: int = 200):
        self.routes[path] = TransportResponse(status=status, body=body, headers=dict(headers or {}))

    def fail(self, path: str, exc: Exception):
        self.routes[path] = exc

    async def get(self, url: str, params: Mapping[str, Any]) -> TransportResponse:
        self.calls.append({"url": url, "params": dict(params)})
        for path, answer in self.routes.items():
            if url.endswith(path):
                if isinstance(answer, Exception):
                    raise answer
                return answer
        raise AssertionError(f"Unexpected request to {url}")

    def paths(self) -> List[str]:
        return [c["url"] for c in self.calls]


def make_user(name: str = "Jane Doe", username: str = "janedoe") -> Dict[str, Any]:
    return {
        "id": f"u-{username}",
        "username": username,
        "name": name,
        "links": {"html": f"https://unsplash.com/@{username}"},
    }


def make_photo(photo_id: str = "abc123", **overrides) -> Dict[str, Any]:
    photo = {
        "id": photo_id,
        "slug": f"a-cat-{photo_id}",
        "width": 4000,
        "height": 3000,
        "color": "#262626",
        "description": "A cat on a sofa",
        "alt_description": "grey cat",
        "likes": 12,
        "user": make_user(),
        "urls": {
            "raw": f"https://images.unsplash.com/photo-{photo_id}?ixid=1",
            "full": f"https://images.unsplash.com/photo-{photo_id}?q=100",
            "regular": f"https://images.unsplash.com/photo-{photo_id}?w=1080",
            "small": f"https://images.unsplash.com/photo-{photo_id}?w=400",
            "thumb": f"https://images.unsplash.com/photo-{photo_id}?w=200",
        },
        "links": {
            "download_location": f"https://api.unsplash.com/photos/{photo_id}/download?ixid=1",
        },
    }
    photo.update(overrides)
    return photo


def make_collection(collection_id: str = "42", with_cover: bool = True) -> Dict[str, Any]:
    return {
        "id": collection_id,
        "title": "Cats",
        "description": None,
        "total_photos": 17,
        "user": make_user(),
        "cover_photo": make_photo("cover1") if with_cover else None,
    }


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def config():
    return ClientConfig(api_key="test-key", app_id="my_app", default_page_size=20)


@pytest.fixture
def gateway(config, transport):
    return UnsplashSearchGateway(config=config, transport=transport)
