"""Ordinal comparison for tiered profile fields."""

from diligence.catalog import BRACKET_ORDER


def meets_minimum_bracket(dimension: str, user_value: str, minimum_value: str) -> bool:
    """Check whether the user's bracket is at or above a minimum bracket.

    Comparison is positional within ``BRACKET_ORDER[dimension]``. If the
    dimension or either value is not in the ordering, the check passes so that
    unrecognized data never hides a candidate.
    """
    order = BRACKET_ORDER.get(dimension)
    if order is None:
        return True

    if user_value not in order or minimum_value not in order:
        return True

    return order.index(user_value) >= order.index(minimum_value)
