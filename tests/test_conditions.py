"""Tests for condition matching."""

import pytest
from pydantic import ValidationError

from diligence.engine.conditions import matches_conditions
from diligence.models import Condition
from tests.helpers import make_inputs


class TestMatchesConditions:
    """Tests for per-dimension matching."""

    def test_empty_condition_matches(self):
        assert matches_conditions(Condition(), make_inputs())

    def test_empty_condition_matches_unusual_inputs(self):
        inputs = make_inputs(transaction_type="??", headcount="lots", geographies=[])
        assert matches_conditions(Condition(), inputs)

    def test_transaction_type_in_list(self):
        condition = Condition(transaction_types=["full-acquisition", "carve-out"])
        assert matches_conditions(condition, make_inputs())

    def test_transaction_type_not_in_list(self):
        condition = Condition(transaction_types=["carve-out", "venture-series"])
        assert not matches_conditions(condition, make_inputs())

    def test_product_type(self):
        assert matches_conditions(Condition(product_types=["b2b-saas"]), make_inputs())
        assert not matches_conditions(Condition(product_types=["deep-tech-ip"]), make_inputs())

    def test_tech_archetype(self):
        condition = Condition(tech_archetypes=["hybrid-legacy"])
        assert not matches_conditions(condition, make_inputs())
        assert matches_conditions(condition, make_inputs(tech_archetype="hybrid-legacy"))

    def test_growth_stage(self):
        condition = Condition(growth_stages=["scaling", "mature"])
        assert matches_conditions(condition, make_inputs())
        assert not matches_conditions(condition, make_inputs(growth_stage="early"))

    def test_and_across_fields(self):
        condition = Condition(
            transaction_types=["full-acquisition"],
            product_types=["on-premise-enterprise"],
        )
        assert not matches_conditions(condition, make_inputs())

    def test_headcount_minimum(self):
        assert not matches_conditions(Condition(headcount_min="201-500"), make_inputs())

    def test_revenue_minimum_equal(self):
        assert matches_conditions(Condition(revenue_min="5-25m"), make_inputs())

    def test_company_age_minimum(self):
        assert not matches_conditions(Condition(company_age_min="10-20yr"), make_inputs())

    def test_all_minimums_must_pass(self):
        condition = Condition(headcount_min="1-50", revenue_min="5-25m", company_age_min="20yr+")
        assert not matches_conditions(condition, make_inputs())

    def test_unknown_bracket_fails_open(self):
        condition = Condition(headcount_min="500+")
        assert matches_conditions(condition, make_inputs(headcount="enormous"))


class TestExclusion:
    """Exclusion always overrides inclusion."""

    def test_excluded_transaction_type(self):
        condition = Condition(exclude_transaction_types=["full-acquisition"])
        assert not matches_conditions(condition, make_inputs())

    def test_exclusion_beats_inclusion(self):
        condition = Condition(
            transaction_types=["full-acquisition"],
            exclude_transaction_types=["full-acquisition"],
        )
        assert not matches_conditions(condition, make_inputs())

    def test_other_transaction_type_not_excluded(self):
        condition = Condition(exclude_transaction_types=["venture-series"])
        assert matches_conditions(condition, make_inputs())


class TestGeographyOverlap:
    """Geography passes on any intersection with the selection."""

    def test_overlap_matches(self):
        assert matches_conditions(Condition(geographies=["eu", "us"]), make_inputs())

    def test_no_overlap_fails(self):
        assert not matches_conditions(Condition(geographies=["eu", "apac"]), make_inputs())

    def test_any_selected_region_counts(self):
        inputs = make_inputs(geographies=["us", "latam", "africa"])
        assert matches_conditions(Condition(geographies=["africa"]), inputs)

    def test_empty_selection_fails_declared_geography(self):
        inputs = make_inputs(geographies=[])
        assert not matches_conditions(Condition(geographies=["us"]), inputs)

    @pytest.mark.parametrize(
        "selected,declared",
        [
            (["eu"], ["eu", "uk"]),
            (["uk", "apac"], ["eu"]),
            (["canada"], ["canada"]),
            ([], ["us"]),
        ],
    )
    def test_matches_iff_intersection(self, selected, declared):
        inputs = make_inputs(geographies=selected)
        expected = bool(set(selected) & set(declared))
        assert matches_conditions(Condition(geographies=declared), inputs) is expected


class TestSecondaryDimensions:
    """Business-model style dimensions use plain membership."""

    def test_business_model_match(self):
        condition = Condition(business_models=["usage-based"])
        assert matches_conditions(condition, make_inputs(business_model="usage-based"))
        assert not matches_conditions(condition, make_inputs(business_model="services-led"))

    def test_unanswered_dimension_fails_declared_list(self):
        condition = Condition(data_sensitivity=["high"])
        assert not matches_conditions(condition, make_inputs())

    def test_unanswered_dimension_ignored_when_undeclared(self):
        assert matches_conditions(Condition(product_types=["b2b-saas"]), make_inputs())

    def test_all_secondary_dimensions(self):
        condition = Condition(
            scale_intensity=["high"],
            transformation_states=["mid-migration"],
            data_sensitivity=["moderate", "high"],
            operating_models=["hybrid"],
        )
        inputs = make_inputs(
            scale_intensity="high",
            transformation_state="mid-migration",
            data_sensitivity="moderate",
            operating_model="hybrid",
        )
        assert matches_conditions(condition, inputs)
        assert not matches_conditions(condition, inputs.model_copy(update={"operating_model": "centralized-eng"}))


class TestConditionModel:
    """Structural rules enforced when a condition is built."""

    def test_empty_list_rejected(self):
        with pytest.raises(ValidationError):
            Condition(product_types=[])

    def test_empty_exclusion_rejected(self):
        with pytest.raises(ValidationError):
            Condition(exclude_transaction_types=[])

    def test_wildcard_detection(self):
        assert Condition().is_wildcard()
        assert not Condition(revenue_min="5-25m").is_wildcard()

    def test_condition_is_immutable(self):
        condition = Condition(product_types=["b2b-saas"])
        with pytest.raises(ValidationError):
            condition.product_types = ("deep-tech-ip",)
