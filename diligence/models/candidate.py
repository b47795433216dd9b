"""Question and risk-anchor models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Priority(str, Enum):
    """Importance rank of a question, most important first."""

    HIGH = "high"
    MEDIUM = "medium"
    STANDARD = "standard"


class Relevance(str, Enum):
    """Relevance rank of a risk anchor, most relevant first."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ExitImpact(str, Enum):
    """How a finding tends to move the exit multiple."""

    MULTIPLE_EXPANDER = "Multiple Expander"
    VALUATION_DRAG = "Valuation Drag"
    OPERATIONAL_RISK = "Operational Risk"


PRIORITY_RANK: dict[Priority, int] = {
    Priority.HIGH: 0,
    Priority.MEDIUM: 1,
    Priority.STANDARD: 2,
}

RELEVANCE_RANK: dict[Relevance, int] = {
    Relevance.HIGH: 0,
    Relevance.MEDIUM: 1,
    Relevance.LOW: 2,
}


class Condition(BaseModel):
    """Applicability predicate for a question or risk anchor.

    Every field is optional and ``None`` means the dimension does not restrict
    applicability. Lists use OR semantics within a field and AND semantics
    across fields. A declared list must not be empty.
    """

    model_config = ConfigDict(frozen=True)

    transaction_types: Optional[tuple[str, ...]] = None
    exclude_transaction_types: Optional[tuple[str, ...]] = None
    product_types: Optional[tuple[str, ...]] = None
    tech_archetypes: Optional[tuple[str, ...]] = None
    growth_stages: Optional[tuple[str, ...]] = None
    geographies: Optional[tuple[str, ...]] = None

    # Ordinal "at least" minimums
    headcount_min: Optional[str] = None
    revenue_min: Optional[str] = None
    company_age_min: Optional[str] = None

    # Secondary business dimensions
    business_models: Optional[tuple[str, ...]] = None
    scale_intensity: Optional[tuple[str, ...]] = None
    transformation_states: Optional[tuple[str, ...]] = None
    data_sensitivity: Optional[tuple[str, ...]] = None
    operating_models: Optional[tuple[str, ...]] = None

    @field_validator(
        "transaction_types",
        "exclude_transaction_types",
        "product_types",
        "tech_archetypes",
        "growth_stages",
        "geographies",
        "business_models",
        "scale_intensity",
        "transformation_states",
        "data_sensitivity",
        "operating_models",
    )
    @classmethod
    def _reject_empty_list(cls, value: Optional[tuple[str, ...]]):
        if value is not None and len(value) == 0:
            raise ValueError("an empty list is not a wildcard; omit the field instead")
        return value

    def is_wildcard(self) -> bool:
        """True when no dimension is restricted."""
        return all(value is None for value in self.model_dump().values())


class Question(BaseModel):
    """A diligence question from the question bank."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable identifier, unique across the bank")
    topic: str = Field(description="Topic identifier from the topic catalog")
    topic_label: str
    audience: str = Field(description="Who the question is addressed to")
    text: str
    rationale: str
    priority: Priority
    conditions: Condition = Field(default_factory=Condition)

    # Strategic metadata
    exit_impact: Optional[ExitImpact] = None
    lookout_signal: Optional[str] = None


class RiskAnchor(BaseModel):
    """A standalone risk flag, ranked by relevance rather than grouped by topic."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    relevance: Relevance
    conditions: Condition = Field(default_factory=Condition)
