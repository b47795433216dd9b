"""Static integrity checks over the question and risk-anchor banks.

These run once when the banks are loaded. The engine itself never validates:
it tolerates unknown values at match time.
"""

import re
from collections import Counter
from typing import Iterable, Mapping, Sequence

from diligence.catalog import BRACKET_ORDER, TOPICS, TopicMeta, option_ids
from diligence.models import Condition, Question, RiskAnchor

ANCHOR_ID_PATTERN = re.compile(r"^risk-[a-z0-9-]+$")

# Condition list field -> wizard field id
LIST_FIELDS = {
    "transaction_types": "transaction-type",
    "exclude_transaction_types": "transaction-type",
    "product_types": "product-type",
    "tech_archetypes": "tech-archetype",
    "growth_stages": "growth-stage",
    "geographies": "geography",
    "business_models": "business-model",
    "scale_intensity": "scale-intensity",
    "transformation_states": "transformation-state",
    "data_sensitivity": "data-sensitivity",
    "operating_models": "operating-model",
}

# Condition minimum field -> bracket dimension
BRACKET_FIELDS = {
    "headcount_min": "headcount",
    "revenue_min": "revenue-range",
    "company_age_min": "company-age",
}


class BankIntegrityError(ValueError):
    """Raised when a shipped bank fails static validation."""

    def __init__(self, issues: list[str]):
        self.issues = issues
        super().__init__("Bank integrity check failed:\n  " + "\n  ".join(issues))


def check_condition(owner_id: str, condition: Condition) -> list[str]:
    """Report condition values that are not in the option catalogs."""
    issues = []

    for field_name, wizard_field in LIST_FIELDS.items():
        values = getattr(condition, field_name)
        if values is None:
            continue
        valid = option_ids(wizard_field)
        for value in values:
            if value not in valid:
                issues.append(f"{owner_id}: invalid {field_name} value '{value}'")

    for field_name, dimension in BRACKET_FIELDS.items():
        value = getattr(condition, field_name)
        if value is not None and value not in BRACKET_ORDER[dimension]:
            issues.append(f"{owner_id}: invalid {field_name} value '{value}'")

    return issues


def _duplicate_ids(ids: Iterable[str]) -> list[str]:
    counts = Counter(ids)
    return [f"duplicate id '{item}'" for item, count in counts.items() if count > 1]


def validate_question_bank(
    questions: Sequence[Question],
    topics: Mapping[str, TopicMeta] = TOPICS,
) -> list[str]:
    """Return a list of integrity issues in a question bank (empty if clean)."""
    issues = _duplicate_ids(q.id for q in questions)

    for question in questions:
        meta = topics.get(question.topic)
        if meta is None:
            issues.append(f"{question.id}: unknown topic '{question.topic}'")
        else:
            if question.topic_label != meta.label:
                issues.append(
                    f"{question.id}: topic_label '{question.topic_label}' "
                    f"does not match '{meta.label}'"
                )
            if not question.id.startswith(meta.id_prefix):
                issues.append(f"{question.id}: id does not start with '{meta.id_prefix}'")
        issues.extend(check_condition(question.id, question.conditions))

    return issues


def validate_risk_anchors(anchors: Sequence[RiskAnchor]) -> list[str]:
    """Return a list of integrity issues in a risk-anchor bank (empty if clean)."""
    issues = _duplicate_ids(a.id for a in anchors)

    for anchor in anchors:
        if not ANCHOR_ID_PATTERN.match(anchor.id):
            issues.append(f"{anchor.id}: id is not 'risk-' kebab-case")
        if anchor.conditions.is_wildcard():
            issues.append(f"{anchor.id}: condition is a pure wildcard")
        issues.extend(check_condition(anchor.id, anchor.conditions))

    return issues
