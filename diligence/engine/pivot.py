"""Archetype pivot: drop cloud-only candidates for non-cloud deployments."""

import logging
from typing import Sequence

from diligence.models import Question, UserInputs

logger = logging.getLogger(__name__)

CLOUD_STYLE_ARCHETYPES = frozenset({"modern-cloud-native", "hybrid-legacy"})
NON_CLOUD_ARCHETYPES = frozenset({"self-managed-infra", "datacenter-vendor"})
CLOUD_NATIVE = "modern-cloud-native"
ON_PREMISE_PRODUCT = "on-premise-enterprise"


def pivot_applies(inputs: UserInputs) -> bool:
    """True when the deployment cannot host cloud-only practices."""
    if inputs.tech_archetype in NON_CLOUD_ARCHETYPES:
        return True
    return inputs.product_type == ON_PREMISE_PRODUCT and inputs.tech_archetype != CLOUD_NATIVE


def is_cloud_only(question: Question) -> bool:
    """True when the question declares only cloud-style archetypes."""
    archetypes = question.conditions.tech_archetypes
    if not archetypes:
        return False
    return set(archetypes) <= CLOUD_STYLE_ARCHETYPES


def apply_archetype_pivot(candidates: Sequence[Question], inputs: UserInputs) -> list[Question]:
    """Remove cloud-only candidates when the pivot applies.

    Wildcard candidates (no declared archetypes) are always kept.
    """
    if not pivot_applies(inputs):
        return list(candidates)

    kept = [q for q in candidates if not is_cloud_only(q)]
    dropped = len(candidates) - len(kept)
    if dropped:
        logger.debug(
            f"Archetype pivot removed {dropped} cloud-only candidates "
            f"for {inputs.product_type}/{inputs.tech_archetype}"
        )
    return kept
