"""Helpers for coordinate strings exchanged with the frontend."""
from typing import Any, Dict, Optional, Tuple


def parse_location(location: str) -> Tuple[float, float]:
    """
    Parse a ``"lat,lng"`` string.

    Raises:
        ValueError: If the string is not two numbers or they are out of range
    """
    parts = [part.strip() for part in location.split(",")]
    if len(parts) != 2:
        raise ValueError("location must be formatted as 'lat,lng'")

    try:
        lat, lng = float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError("location must be formatted as 'lat,lng'") from None

    if not -90 <= lat <= 90:
        raise ValueError(f"latitude {lat} is out of range")
    if not -180 <= lng <= 180:
        raise ValueError(f"longitude {lng} is out of range")

    return lat, lng


def extract_lat_lng(record: Dict[str, Any]) -> Optional[Tuple[float, float]]:
    """Read ``geometry.location.lat/lng`` from an upstream record, if present."""
    location = (record.get("geometry") or {}).get("location") or {}
    lat = location.get("lat")
    lng = location.get("lng")
    if lat is None or lng is None:
        return None
    return lat, lng
