"""
Category Mapper Utility
Maps nearby-search categories to Ola Maps place type filters.
"""
from types import MappingProxyType
from typing import Mapping, Optional

from places_proxy.models.places import CategoryEnum


# Default place type filter per category
DEFAULT_CATEGORY_TYPES: Mapping[CategoryEnum, str] = MappingProxyType({
    CategoryEnum.AMENITIES: "restaurant,cafe,hospital,pharmacy",
    CategoryEnum.CONNECTIVITY: "transit_station,bus_station,subway_station,train_station",
    CategoryEnum.SHOPPING: "shopping_mall,store,supermarket",
    CategoryEnum.SERVICES: "atm,bank,gas_station,parking",
})


def resolve_category_types(types: Optional[str] = None) -> Mapping[CategoryEnum, str]:
    """
    Build the category -> type filter table for one request.

    When ``types`` is given every category is searched with that same filter,
    so the upstream receives one identical query per category.

    Args:
        types: Optional comma separated type filter supplied by the caller

    Returns:
        Read-only mapping in category declaration order
    """
    if types:
        return MappingProxyType({category: types for category in CategoryEnum})
    return MappingProxyType({category: DEFAULT_CATEGORY_TYPES[category] for category in CategoryEnum})
