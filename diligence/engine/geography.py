"""Reconcile the derived multi-region tag with the raw geography selection."""

from typing import Sequence

from diligence.catalog import MULTI_REGION


def sync_multi_region(geographies: Sequence[str]) -> list[str]:
    """Add or retract the multi-region tag based on real selections.

    Two or more distinct real regions imply multi-region; one real region
    retracts it. A selection consisting only of the tag is left as is.
    Returns a new list and preserves the order of real regions.
    """
    result = list(geographies)
    real = {g for g in result if g != MULTI_REGION}

    if len(real) >= 2:
        if MULTI_REGION not in result:
            result.append(MULTI_REGION)
        return result

    if not real:
        return result

    return [g for g in result if g != MULTI_REGION]
