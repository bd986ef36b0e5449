"""Nearby places router aggregating Ola Maps nearby searches."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from places_proxy.dependencies import get_nearby_aggregator
from places_proxy.exceptions import ApiError
from places_proxy.models.places import NearbyRequest, NearbyResponse
from places_proxy.services.nearby_aggregator import NearbyPlacesAggregator
from places_proxy.utils.coordinates import parse_location

router = APIRouter(prefix="/api", tags=["places"])
logger = logging.getLogger(__name__)


@router.post("/nearby", response_model=NearbyResponse)
async def nearby_places(
    payload: Optional[NearbyRequest] = None,
    aggregator: NearbyPlacesAggregator = Depends(get_nearby_aggregator),
):
    """
    Nearby places grouped by category.

    Each category is searched independently; a category whose search fails
    or returns nothing is left out of ``data``.
    """
    request = payload or NearbyRequest()
    if not request.location:
        raise ApiError(400, "Location is required")

    try:
        parse_location(request.location)
    except ValueError as exc:
        raise ApiError(400, str(exc)) from exc

    try:
        grouped = await aggregator.aggregate(
            location=request.location,
            radius=request.radius,
            types=request.types,
        )
    except Exception as exc:
        logger.error(f"Nearby places error: {exc}")
        raise ApiError(500, "Failed to fetch nearby places", details=str(exc)) from exc

    return {"success": True, "data": grouped}
