"""Client for the Ola Maps places API."""
import logging
from typing import Any, Dict, Optional

import httpx

from places_proxy.config import Settings

logger = logging.getLogger(__name__)


class PhotoNotFoundError(Exception):
    """Raised when a photo lookup answers without a usable URL."""


class OlaMapsClient:
    """Stateless HTTP client wrapper for the Ola Maps REST API.

    Every call forwards the API key and presents the caller's origin as
    ``Referer``/``Origin`` so the key's domain allow-list accepts it.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.olamaps.io",
        origin: str = "http://localhost:3000",
        user_agent: str = "OlaMaps-Client/1.0",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.origin = origin
        self.user_agent = user_agent
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        origin: Optional[str] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "OlaMapsClient":
        return cls(
            api_key=settings.ola_maps_api_key,
            base_url=settings.ola_maps_base_url,
            origin=origin or settings.default_origin,
            user_agent=user_agent or settings.default_user_agent,
            timeout=settings.upstream_timeout,
            transport=transport,
        )

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Referer": self.origin,
            "Origin": self.origin,
            "User-Agent": self.user_agent,
        }

    def _params(self, **params: Any) -> Dict[str, Any]:
        params["api_key"] = self.api_key
        return {key: value for key, value in params.items() if value is not None}

    async def _get(self, path: str, params: Dict[str, Any]) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
        ) as client:
            response = await client.get(
                f"{self.base_url}{path}",
                params=self._params(**params),
                headers=self._headers(),
            )
            response.raise_for_status()
            return response

    async def autocomplete(self, query: str) -> Dict[str, Any]:
        """Text search returning ``{"predictions": [...], ...}``."""
        logger.info(f"Autocomplete request with origin: {self.origin}")
        response = await self._get("/places/v1/autocomplete", {"input": query})
        return response.json()

    async def nearby_search(
        self,
        location: str,
        radius: int,
        types: str,
        limit: int = 10,
    ) -> Dict[str, Any]:
        """Venues around ``location`` matching the comma separated ``types``."""
        response = await self._get(
            "/places/v1/nearbysearch",
            {
                "layers": "venue",
                "location": location,
                "radius": radius,
                "types": types,
                "limit": limit,
            },
        )
        return response.json()

    async def photo(self, photo_reference: str) -> str:
        """Resolve a photo reference to a URL the browser can load."""
        response = await self._get(
            "/places/v1/photo", {"photo_reference": photo_reference}
        )

        content_type = response.headers.get("content-type", "")
        if content_type.startswith("image/"):
            return str(response.url)

        payload = response.json()
        candidates = []
        photos = payload.get("photos") if isinstance(payload, dict) else None
        if photos and isinstance(photos[0], dict):
            candidates.append(photos[0])
        if isinstance(payload, dict):
            candidates.append(payload)

        for candidate in candidates:
            for key in ("photoUri", "photo_url", "url"):
                if candidate.get(key):
                    return candidate[key]

        raise PhotoNotFoundError(f"No photo URL for reference {photo_reference}")

    def static_map_url(self, lat: float, lng: float, zoom: int = 15, size: str = "400x300") -> str:
        """Static map image centred on a coordinate."""
        url = f"{self.base_url}/maps/v1/static?center={lat},{lng}&zoom={zoom}&size={size}"
        if self.api_key:
            url += f"&api_key={self.api_key}"
        return url
