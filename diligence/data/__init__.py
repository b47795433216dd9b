"""Static question and risk-anchor banks, validated once at import."""

import logging

from diligence.models import Question, RiskAnchor
from diligence.validation import (
    BankIntegrityError,
    validate_question_bank,
    validate_risk_anchors,
)
from .questions import QUESTION_RECORDS
from .risk_anchors import MANUAL_OPS_MASKING_RECORD, RISK_ANCHOR_RECORDS

logger = logging.getLogger(__name__)


def load_questions(records: list[dict]) -> tuple[Question, ...]:
    """Build and validate a question bank from raw records."""
    questions = tuple(Question.model_validate(record) for record in records)
    issues = validate_question_bank(questions)
    if issues:
        raise BankIntegrityError(issues)
    logger.debug(f"Loaded {len(questions)} questions")
    return questions


def load_risk_anchors(records: list[dict]) -> tuple[RiskAnchor, ...]:
    """Build and validate a risk-anchor bank from raw records."""
    anchors = tuple(RiskAnchor.model_validate(record) for record in records)
    issues = validate_risk_anchors(anchors)
    if issues:
        raise BankIntegrityError(issues)
    logger.debug(f"Loaded {len(anchors)} risk anchors")
    return anchors


QUESTIONS = load_questions(QUESTION_RECORDS)
RISK_ANCHORS = load_risk_anchors(RISK_ANCHOR_RECORDS)
MANUAL_OPS_MASKING = RiskAnchor.model_validate(MANUAL_OPS_MASKING_RECORD)

__all__ = [
    "QUESTIONS",
    "RISK_ANCHORS",
    "MANUAL_OPS_MASKING",
    "load_questions",
    "load_risk_anchors",
]
