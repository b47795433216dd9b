"""Script generator: runs the selection pipeline end to end."""

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from diligence.config import Settings, settings as default_settings
from diligence.data import QUESTIONS, RISK_ANCHORS
from diligence.models import GeneratedScript, Question, RiskAnchor, ScriptMetadata, UserInputs
from .balance import balance_across_topics
from .conditions import matches_conditions
from .geography import sync_multi_region
from .grouping import group_by_topic
from .ordering import sort_by_priority, sort_by_relevance
from .overrides import apply_maturity_overrides
from .pivot import apply_archetype_pivot

logger = logging.getLogger(__name__)


class ScriptGenerator:
    """Build a diligence script from a question bank and a risk-anchor bank."""

    def __init__(
        self,
        questions: Sequence[Question] = QUESTIONS,
        risk_anchors: Sequence[RiskAnchor] = RISK_ANCHORS,
        settings: Optional[Settings] = None,
    ):
        self.questions = tuple(questions)
        self.risk_anchors = tuple(risk_anchors)
        self.settings = settings or default_settings

    def generate(self, inputs: UserInputs) -> GeneratedScript:
        """Generate the script for one set of wizard answers."""
        effective = self._effective_inputs(inputs)

        selected = self.select_questions(effective)
        topics = group_by_topic(selected)
        anchors = self.select_risk_anchors(effective)

        total = sum(len(group.questions) for group in topics)
        logger.debug(
            f"Generated script: {total} questions in {len(topics)} topics, "
            f"{len(anchors)} risk anchors"
        )

        return GeneratedScript(
            topics=topics,
            risk_anchors=anchors,
            metadata=ScriptMetadata(
                generated_at=datetime.now(timezone.utc),
                total_questions=total,
                inputs=inputs,
            ),
        )

    def select_questions(self, inputs: UserInputs) -> list[Question]:
        """Filter, pivot, sort and balance the question bank."""
        matched = [q for q in self.questions if matches_conditions(q.conditions, inputs)]
        pivoted = apply_archetype_pivot(matched, inputs)
        ordered = sort_by_priority(pivoted)
        logger.debug(f"{len(matched)} questions matched, {len(pivoted)} after archetype pivot")

        return balance_across_topics(
            ordered,
            self.settings.min_total_questions,
            self.settings.max_total_questions,
            min_per_topic=self.settings.min_per_topic,
        )

    def select_risk_anchors(self, inputs: UserInputs) -> list[RiskAnchor]:
        """Filter the anchor bank, apply maturity overrides, rank by relevance."""
        matched = [a for a in self.risk_anchors if matches_conditions(a.conditions, inputs)]
        augmented = apply_maturity_overrides(matched, inputs)
        return sort_by_relevance(augmented)

    @staticmethod
    def _effective_inputs(inputs: UserInputs) -> UserInputs:
        """Inputs used for matching, with the multi-region tag reconciled."""
        geographies = tuple(sync_multi_region(inputs.geographies))
        if geographies == inputs.geographies:
            return inputs
        return inputs.model_copy(update={"geographies": geographies})


def generate_script(
    inputs: UserInputs,
    questions: Sequence[Question] = QUESTIONS,
    risk_anchors: Sequence[RiskAnchor] = RISK_ANCHORS,
    settings: Optional[Settings] = None,
) -> GeneratedScript:
    """Generate a diligence script (convenience wrapper around ScriptGenerator)."""
    generator = ScriptGenerator(questions, risk_anchors, settings)
    return generator.generate(inputs)
