"""Dependencies for FastAPI routes."""
from fastapi import Depends, Request

from places_proxy.config import Settings, get_settings
from places_proxy.services.nearby_aggregator import NearbyPlacesAggregator
from places_proxy.services.ola_maps import OlaMapsClient


def resolve_origin(request: Request, settings: Settings) -> str:
    """Origin presented upstream: the caller's Origin, then Referer, then the default."""
    return (
        request.headers.get("origin")
        or request.headers.get("referer")
        or settings.default_origin
    )


def get_ola_maps_client(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> OlaMapsClient:
    """
    Build an Ola Maps client for the current request.

    The caller's origin and user agent are forwarded so the upstream
    domain allow-list sees the browser's origin rather than this server.
    """
    return OlaMapsClient.from_settings(
        settings,
        origin=resolve_origin(request, settings),
        user_agent=request.headers.get("user-agent"),
    )


def get_nearby_aggregator(
    client: OlaMapsClient = Depends(get_ola_maps_client),
    settings: Settings = Depends(get_settings),
) -> NearbyPlacesAggregator:
    return NearbyPlacesAggregator(client, limit=settings.nearby_result_limit)
