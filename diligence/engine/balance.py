"""Topic-diverse selection under per-topic floor and total cap."""

import logging
from typing import Sequence

from diligence.config import settings
from diligence.models import Question
from .ordering import sort_by_priority

logger = logging.getLogger(__name__)


def balance_across_topics(
    candidates: Sequence[Question],
    min_total: int,
    max_total: int,
    min_per_topic: int = settings.min_per_topic,
) -> list[Question]:
    """Select a bounded, topic-balanced subset of a filtered candidate pool.

    Phase 1 reserves up to ``min_per_topic`` questions from every topic, taken
    in priority order. Phase 2 fills the remaining slots from all topics by
    global priority until ``max_total`` is reached. The per-topic floor wins
    over the cap, so the result may exceed ``max_total`` when there are many
    topics.
    """
    by_topic: dict[str, list[Question]] = {}
    for question in candidates:
        by_topic.setdefault(question.topic, []).append(question)

    selected: set[str] = set()
    result: list[Question] = []

    def take(question: Question):
        selected.add(question.id)
        result.append(question)

    # Phase 1: reserve the per-topic floor
    for questions in by_topic.values():
        taken = 0
        for question in sort_by_priority(questions):
            if taken >= min_per_topic:
                break
            if question.id in selected:
                continue
            take(question)
            taken += 1

    # Phase 2: fill by global priority
    for question in sort_by_priority(candidates):
        if len(result) >= max_total:
            break
        if question.id not in selected:
            take(question)

    if len(result) < min_total:
        logger.warning(
            f"Only {len(result)} questions available, below the target minimum of {min_total}"
        )

    return result
