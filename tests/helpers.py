"""Shared factories for engine tests."""

from diligence.catalog import TOPICS
from diligence.models import Question, RiskAnchor, UserInputs


def make_inputs(**kwargs) -> UserInputs:
    """Create test inputs with defaults."""
    defaults = {
        "transaction_type": "full-acquisition",
        "product_type": "b2b-saas",
        "tech_archetype": "modern-cloud-native",
        "headcount": "51-200",
        "revenue_range": "5-25m",
        "growth_stage": "scaling",
        "company_age": "5-10yr",
        "geographies": ["us"],
    }
    defaults.update(kwargs)
    return UserInputs(**defaults)


def make_question(**kwargs) -> Question:
    """Create a test question with defaults."""
    topic = kwargs.get("topic", "architecture")
    defaults = {
        "id": "test-q",
        "topic": topic,
        "topic_label": TOPICS[topic].label if topic in TOPICS else topic,
        "audience": "CTO",
        "text": "Test question text that is long enough",
        "rationale": "Test rationale that is long enough",
        "priority": "standard",
        "conditions": {},
    }
    defaults.update(kwargs)
    return Question(**defaults)


def make_anchor(**kwargs) -> RiskAnchor:
    """Create a test risk anchor with defaults."""
    defaults = {
        "id": "risk-test",
        "title": "Test Risk",
        "description": "Test description that is long enough",
        "relevance": "medium",
        "conditions": {"growth_stages": ["early"]},
    }
    defaults.update(kwargs)
    return RiskAnchor(**defaults)
