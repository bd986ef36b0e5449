"""
Nearby places aggregation.

One nearby search is issued per category and the results are grouped by
category. Failures are contained where they happen:
- a failed category search leaves that category out of the response
- a failed photo lookup leaves that place without ``photo_url``
"""

import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from places_proxy.models.places import CategoryEnum
from places_proxy.services.ola_maps import OlaMapsClient
from places_proxy.utils.categories import resolve_category_types

logger = logging.getLogger(__name__)


def first_photo_reference(place: Dict[str, Any]) -> Optional[str]:
    """Return the first photo reference of a place, or None."""
    photos = place.get("photos")
    if not photos or not isinstance(photos, list):
        return None

    first = photos[0]
    if isinstance(first, dict):
        return first.get("photo_reference") or first.get("photoReference")
    if isinstance(first, str) and first:
        return first
    return None


class NearbyPlacesAggregator:
    """Fan a nearby search out over categories and enrich results with photos."""

    def __init__(self, client: OlaMapsClient, limit: int = 10):
        self.client = client
        self.limit = limit

    async def aggregate(
        self,
        location: str,
        radius: int = 1000,
        types: Optional[str] = None,
    ) -> Dict[str, List[Dict[str, Any]]]:
        """
        Search every category concurrently and group the results.

        Args:
            location: Center as "lat,lng"
            radius: Search radius in meters
            types: Optional filter that replaces every category's own filter

        Returns:
            Mapping of category name to enriched places, in category order,
            without empty or failed categories
        """
        category_types = resolve_category_types(types)

        results = await asyncio.gather(
            *[
                self._search_category(category, type_filter, location, radius)
                for category, type_filter in category_types.items()
            ],
            return_exceptions=True,
        )

        grouped: Dict[str, List[Dict[str, Any]]] = {}
        for category, result in zip(category_types, results):
            if isinstance(result, httpx.HTTPStatusError):
                logger.error(
                    f"Nearby search failed for {category.value}: "
                    f"{result.response.status_code} {result.response.text}"
                )
                continue
            if isinstance(result, BaseException):
                logger.error(f"Nearby search failed for {category.value}: {result}")
                continue
            if result:
                grouped[category.value] = result

        logger.info(
            f"Nearby search at {location} (radius={radius}m): "
            + ", ".join(f"{name}={len(places)}" for name, places in grouped.items())
        )
        return grouped

    async def _search_category(
        self,
        category: CategoryEnum,
        type_filter: str,
        location: str,
        radius: int,
    ) -> List[Dict[str, Any]]:
        data = await self.client.nearby_search(
            location=location,
            radius=radius,
            types=type_filter,
            limit=self.limit,
        )
        places = _extract_places(data)
        if not places:
            return []

        enriched = await asyncio.gather(
            *[self._attach_photo(place) for place in places],
            return_exceptions=True,
        )

        return [
            place if isinstance(result, BaseException) else result
            for place, result in zip(places, enriched)
        ]

    async def _attach_photo(self, place: Dict[str, Any]) -> Dict[str, Any]:
        """Copy ``place`` and add ``photo_url`` when its photo resolves."""
        enriched = place.copy()

        photo_reference = first_photo_reference(place)
        if not photo_reference:
            return enriched

        try:
            photo_url = await self.client.photo(photo_reference)
        except Exception as exc:
            logger.warning(f"Photo lookup failed for place {place.get('place_id')}: {exc}")
            return enriched

        if photo_url:
            enriched["photo_url"] = photo_url
        return enriched


def _extract_places(data: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """Nearby search answers with ``predictions``; older payloads use ``results``."""
    places = data.get("predictions")
    if places is None:
        places = data.get("results")
    return [place for place in places or [] if isinstance(place, dict)]
