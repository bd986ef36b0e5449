"""Utility functions for the backend."""

from places_proxy.utils.categories import DEFAULT_CATEGORY_TYPES, resolve_category_types
from places_proxy.utils.coordinates import extract_lat_lng, parse_location

__all__ = [
    "DEFAULT_CATEGORY_TYPES",
    "resolve_category_types",
    "extract_lat_lng",
    "parse_location",
]
