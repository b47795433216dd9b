"""Tests for multi-region reconciliation."""

from diligence.catalog import MULTI_REGION
from diligence.engine.geography import sync_multi_region


class TestSyncMultiRegion:
    """Tests for adding and retracting the multi-region tag."""

    def test_two_regions_add_tag(self):
        assert sync_multi_region(["us", "eu"]) == ["us", "eu", MULTI_REGION]

    def test_tag_not_duplicated(self):
        result = sync_multi_region(["us", MULTI_REGION, "eu"])
        assert result.count(MULTI_REGION) == 1
        assert result == ["us", MULTI_REGION, "eu"]

    def test_single_region_retracts_tag(self):
        assert sync_multi_region(["us", MULTI_REGION]) == ["us"]

    def test_single_region_without_tag_unchanged(self):
        assert sync_multi_region(["apac"]) == ["apac"]

    def test_lone_tag_left_alone(self):
        assert sync_multi_region([MULTI_REGION]) == [MULTI_REGION]

    def test_empty_selection(self):
        assert sync_multi_region([]) == []

    def test_real_region_order_preserved(self):
        result = sync_multi_region(["latam", "africa", "canada"])
        assert result[:3] == ["latam", "africa", "canada"]

    def test_duplicate_real_region_counts_once(self):
        assert sync_multi_region(["us", "us", MULTI_REGION]) == ["us", "us"]

    def test_accepts_tuple_and_returns_new_list(self):
        selection = ("us", "eu")
        result = sync_multi_region(selection)
        assert isinstance(result, list)
        assert selection == ("us", "eu")

    def test_idempotent(self):
        once = sync_multi_region(["us", "eu"])
        assert sync_multi_region(once) == once
