"""
Search forwarding router.

Forwards free-text queries to Ola Maps autocomplete and attaches a static
map preview to each prediction.
"""
import logging
from typing import Any, Dict, Optional

import httpx
from fastapi import APIRouter, Depends

from places_proxy.exceptions import ApiError
from places_proxy.dependencies import get_ola_maps_client
from places_proxy.models.places import SearchRequest, SearchResponse
from places_proxy.services.ola_maps import OlaMapsClient
from places_proxy.utils.coordinates import extract_lat_lng

router = APIRouter(tags=["search"])
logger = logging.getLogger(__name__)

DOMAIN_HINT = "Domain not whitelisted. Please add your domain to the Ola Maps API key settings."


@router.post("/chat", response_model=SearchResponse)
async def search(
    payload: Optional[SearchRequest] = None,
    client: OlaMapsClient = Depends(get_ola_maps_client),
):
    """
    Proxy for Ola Maps Autocomplete.

    Returns the upstream payload with every prediction carrying a
    ``map_url`` when its coordinates are known.
    """
    message = payload.message if payload else None
    if not message or not message.strip():
        raise ApiError(400, "Message is required")

    logger.info(f"API key present: {bool(client.api_key)}")

    try:
        data = await client.autocomplete(message)
        predictions = [
            _with_map_url(prediction, client)
            for prediction in data.get("predictions") or []
        ]
    except Exception as exc:
        details = _error_details(exc)
        logger.error(f"Ola Maps autocomplete error: {details}")
        if isinstance(exc, httpx.HTTPStatusError):
            logger.error(f"Error status: {exc.response.status_code}")
            logger.error(f"Error headers: {dict(exc.response.headers)}")

        hint = None
        if _is_domain_restriction(details):
            logger.error("Domain restriction error detected")
            logger.error("Add your domain to the Ola Maps API key whitelist in the dashboard")
            logger.error("Or ensure the Referer/Origin header matches a whitelisted domain")
            hint = DOMAIN_HINT

        raise ApiError(500, "Failed to fetch map data", details=details, hint=hint) from exc

    return {
        "success": True,
        "data": {**data, "predictions": predictions},
    }


def _with_map_url(prediction: Dict[str, Any], client: OlaMapsClient) -> Dict[str, Any]:
    coordinates = extract_lat_lng(prediction)
    if coordinates is None:
        return prediction
    lat, lng = coordinates
    return {**prediction, "map_url": client.static_map_url(lat, lng)}


def _error_details(exc: Exception) -> Any:
    """Upstream JSON body when there is one, else the error text."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            return exc.response.json()
        except ValueError:
            return exc.response.text or str(exc)
    return str(exc)


def _is_domain_restriction(details: Any) -> bool:
    message = details.get("message") if isinstance(details, dict) else details
    if not isinstance(message, str):
        return False
    return "Domain" in message or "not allowed" in message
