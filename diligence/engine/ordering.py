"""Stable rank-based ordering for questions and risk anchors."""

from typing import Sequence

from diligence.models import PRIORITY_RANK, RELEVANCE_RANK, Question, RiskAnchor


def sort_by_priority(candidates: Sequence[Question]) -> list[Question]:
    """Sort questions high -> medium -> standard, keeping input order on ties."""
    return sorted(candidates, key=lambda q: PRIORITY_RANK[q.priority])


def sort_by_relevance(anchors: Sequence[RiskAnchor]) -> list[RiskAnchor]:
    """Sort risk anchors high -> medium -> low, keeping input order on ties."""
    return sorted(anchors, key=lambda a: RELEVANCE_RANK[a.relevance])
