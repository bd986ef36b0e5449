"""Shared fixtures: a recording stand-in for the Ola Maps API."""
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from places_proxy.config import Settings
from places_proxy.dependencies import get_ola_maps_client, resolve_origin
from places_proxy.main import app
from places_proxy.services.ola_maps import OlaMapsClient

TEST_SETTINGS = Settings(
    ola_maps_api_key="test-key",
    ola_maps_base_url="https://api.olamaps.test",
    _env_file=None,
)


class FakeOlaMaps:
    """
    Routes outbound requests by path and records each of them.

    ``nearby`` maps a ``types`` filter to the places returned for it, or to an
    int status code to fail that search. ``photos`` maps a photo reference to
    the URL returned for it, or to a status code to fail the lookup.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.nearby: Dict[str, Any] = {}
        self.photos: Dict[str, Any] = {}
        self.autocomplete: Any = {"predictions": [], "status": "ok"}
        self.autocomplete_status = 200

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        params = request.url.params

        if path == "/places/v1/nearbysearch":
            result = self.nearby.get(params["types"], [])
            if isinstance(result, int):
                return httpx.Response(result, json={"status": "error"})
            return httpx.Response(200, json={"predictions": result, "status": "ok"})

        if path == "/places/v1/photo":
            result = self.photos.get(params["photo_reference"], 404)
            if isinstance(result, int):
                return httpx.Response(result, json={"status": "error"})
            return httpx.Response(200, json={"photos": [{"photoUri": result}], "status": "ok"})

        if path == "/places/v1/autocomplete":
            return httpx.Response(self.autocomplete_status, json=self.autocomplete)

        return httpx.Response(404, json={"message": "unknown path"})

    def calls_to(self, path: str) -> List[httpx.Request]:
        return [request for request in self.requests if request.url.path == path]


@pytest.fixture
def upstream() -> FakeOlaMaps:
    return FakeOlaMaps()


@pytest.fixture
def make_client(upstream: FakeOlaMaps) -> Callable[..., OlaMapsClient]:
    def factory(origin: Optional[str] = None, user_agent: Optional[str] = None) -> OlaMapsClient:
        return OlaMapsClient.from_settings(
            TEST_SETTINGS,
            origin=origin,
            user_agent=user_agent,
            transport=httpx.MockTransport(upstream),
        )

    return factory


@pytest.fixture
def api(make_client) -> TestClient:
    def override(request: Request) -> OlaMapsClient:
        return make_client(
            origin=resolve_origin(request, TEST_SETTINGS),
            user_agent=request.headers.get("user-agent"),
        )

    app.dependency_overrides[get_ola_maps_client] = override
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
