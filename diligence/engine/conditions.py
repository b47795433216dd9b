"""Applicability matching of declared conditions against wizard answers."""

from typing import Optional

from diligence.models import Condition, UserInputs
from .brackets import meets_minimum_bracket


def _admits(allowed: Optional[tuple[str, ...]], value: Optional[str]) -> bool:
    """Single-valued membership; an undeclared list admits everything."""
    if allowed is None:
        return True
    return value in allowed


def matches_conditions(condition: Condition, inputs: UserInputs) -> bool:
    """Check if a condition applies to the user's inputs.

    Undeclared fields are wildcards. Lists use OR logic within a field and all
    declared fields must pass. Geography passes on any overlap with the user's
    selections. An excluded transaction type always fails the match.
    """
    if (
        condition.exclude_transaction_types is not None
        and inputs.transaction_type in condition.exclude_transaction_types
    ):
        return False

    single_valued = (
        (condition.transaction_types, inputs.transaction_type),
        (condition.product_types, inputs.product_type),
        (condition.tech_archetypes, inputs.tech_archetype),
        (condition.growth_stages, inputs.growth_stage),
        (condition.business_models, inputs.business_model),
        (condition.scale_intensity, inputs.scale_intensity),
        (condition.transformation_states, inputs.transformation_state),
        (condition.data_sensitivity, inputs.data_sensitivity),
        (condition.operating_models, inputs.operating_model),
    )
    for allowed, value in single_valued:
        if not _admits(allowed, value):
            return False

    if condition.geographies is not None:
        if set(condition.geographies).isdisjoint(inputs.geographies):
            return False

    minimums = (
        ("headcount", inputs.headcount, condition.headcount_min),
        ("revenue-range", inputs.revenue_range, condition.revenue_min),
        ("company-age", inputs.company_age, condition.company_age_min),
    )
    for dimension, user_value, minimum in minimums:
        if minimum is not None and not meets_minimum_bracket(dimension, user_value, minimum):
            return False

    return True
