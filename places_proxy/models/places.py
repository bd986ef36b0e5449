"""Pydantic models for Places."""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class CategoryEnum(str, Enum):
    """Buckets a nearby search is split into."""
    AMENITIES = "amenities"
    CONNECTIVITY = "connectivity"
    SHOPPING = "shopping"
    SERVICES = "services"


class NearbyRequest(BaseModel):
    """Request model for the nearby aggregation."""
    location: Optional[str] = Field(None, description="Center as 'lat,lng'")
    radius: int = Field(1000, gt=0, description="Search radius in meters")
    types: Optional[str] = Field(
        None, description="Place type filter applied to every category"
    )


class NearbyResponse(BaseModel):
    """Places grouped by category; empty categories are omitted."""
    success: bool = True
    data: Dict[str, List[Dict[str, Any]]]


class SearchRequest(BaseModel):
    """Free-text search forwarded to autocomplete."""
    message: Optional[str] = None


class SearchResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any]
