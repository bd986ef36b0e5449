"""Unit tests for category resolution and coordinate helpers."""
import pytest

from places_proxy.models.places import CategoryEnum
from places_proxy.utils import (
    DEFAULT_CATEGORY_TYPES,
    extract_lat_lng,
    parse_location,
    resolve_category_types,
)


class TestResolveCategoryTypes:
    def test_defaults(self):
        resolved = resolve_category_types()
        assert list(resolved) == list(CategoryEnum)
        assert dict(resolved) == dict(DEFAULT_CATEGORY_TYPES)

    def test_override_collapses_categories(self):
        resolved = resolve_category_types("hospital")
        assert list(resolved) == list(CategoryEnum)
        assert set(resolved.values()) == {"hospital"}

    def test_empty_override_uses_defaults(self):
        assert dict(resolve_category_types("")) == dict(DEFAULT_CATEGORY_TYPES)

    def test_override_leaves_defaults_untouched(self):
        resolve_category_types("hospital")
        assert DEFAULT_CATEGORY_TYPES[CategoryEnum.SHOPPING] == "shopping_mall,store,supermarket"

    def test_resolved_table_is_read_only(self):
        with pytest.raises(TypeError):
            resolve_category_types()[CategoryEnum.SERVICES] = "atm"


class TestParseLocation:
    def test_valid(self):
        assert parse_location("18.97,72.83") == (18.97, 72.83)
        assert parse_location(" -33.86 , 151.2 ") == (-33.86, 151.2)

    @pytest.mark.parametrize("value", ["", "18.97", "18.97,72.83,1", "north,east", "nan,72.8"])
    def test_malformed(self, value):
        with pytest.raises(ValueError):
            parse_location(value)

    @pytest.mark.parametrize("value", ["90.1,0", "-91,0", "0,180.5", "0,-181"])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError):
            parse_location(value)


class TestExtractLatLng:
    def test_present(self):
        assert extract_lat_lng({"geometry": {"location": {"lat": 1.5, "lng": 2.5}}}) == (1.5, 2.5)

    def test_zero_coordinates_are_kept(self):
        assert extract_lat_lng({"geometry": {"location": {"lat": 0, "lng": 0}}}) == (0, 0)

    def test_missing(self):
        assert extract_lat_lng({}) is None
        assert extract_lat_lng({"geometry": None}) is None
        assert extract_lat_lng({"geometry": {"location": {"lat": 1.5}}}) is None
