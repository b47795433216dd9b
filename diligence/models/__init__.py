"""Data models for the Diligence Script Engine."""

from .inputs import UserInputs
from .candidate import (
    Condition,
    ExitImpact,
    Priority,
    PRIORITY_RANK,
    Question,
    Relevance,
    RELEVANCE_RANK,
    RiskAnchor,
)
from .script import GeneratedScript, ScriptMetadata, TopicGroup

__all__ = [
    "UserInputs",
    "Condition",
    "ExitImpact",
    "Priority",
    "PRIORITY_RANK",
    "Question",
    "Relevance",
    "RELEVANCE_RANK",
    "RiskAnchor",
    "GeneratedScript",
    "ScriptMetadata",
    "TopicGroup",
]
