"""Cross-field risk rules that a single static condition cannot express."""

import logging
from typing import Sequence

from diligence.data import MANUAL_OPS_MASKING
from diligence.models import RiskAnchor, UserInputs
from .brackets import meets_minimum_bracket

logger = logging.getLogger(__name__)

# Revenue at or above this bracket ...
MATURITY_REVENUE_FLOOR = "25-100m"
# ... with headcount at or below this bracket ...
MATURITY_HEADCOUNT_CEILING = "51-200"
# ... in a company at this growth stage
MATURITY_GROWTH_STAGE = "mature"


def masks_manual_operations(inputs: UserInputs) -> bool:
    """High revenue per head in a mature company suggests hidden manual work."""
    return (
        inputs.growth_stage == MATURITY_GROWTH_STAGE
        and meets_minimum_bracket("revenue-range", inputs.revenue_range, MATURITY_REVENUE_FLOOR)
        and meets_minimum_bracket("headcount", MATURITY_HEADCOUNT_CEILING, inputs.headcount)
    )


def apply_maturity_overrides(
    existing_anchors: Sequence[RiskAnchor],
    inputs: UserInputs,
    anchor: RiskAnchor = MANUAL_OPS_MASKING,
) -> list[RiskAnchor]:
    """Append the manual-operations-masking anchor when the heuristic fires.

    Never duplicates an anchor id that is already present.
    """
    result = list(existing_anchors)
    if not masks_manual_operations(inputs):
        return result

    if any(a.id == anchor.id for a in result):
        return result

    logger.debug(f"Maturity override injected {anchor.id}")
    result.append(anchor)
    return result
