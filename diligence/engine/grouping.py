"""Bucket a final selection into ordered, labeled topic sections."""

import logging
from typing import Mapping, Sequence

from diligence.catalog import TOPICS, TopicMeta
from diligence.models import Question, TopicGroup
from .ordering import sort_by_priority

logger = logging.getLogger(__name__)


def group_by_topic(
    candidates: Sequence[Question],
    topics: Mapping[str, TopicMeta] = TOPICS,
) -> list[TopicGroup]:
    """Group questions into topic sections in canonical topic order.

    Empty topics are omitted. Each section is sorted by priority.
    """
    unknown = {q.topic for q in candidates} - set(topics)
    if unknown:
        logger.warning(f"Dropping questions with uncatalogued topics: {sorted(unknown)}")

    groups = []
    for topic_id, meta in sorted(topics.items(), key=lambda item: item[1].order):
        questions = sort_by_priority([q for q in candidates if q.topic == topic_id])
        if not questions:
            continue
        groups.append(
            TopicGroup(
                topic_id=topic_id,
                topic_label=meta.label,
                audience=meta.audience,
                subtitle=meta.subtitle,
                questions=questions,
            )
        )

    return groups
