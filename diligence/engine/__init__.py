"""Rules-matching and selection engine."""

from .brackets import meets_minimum_bracket
from .conditions import matches_conditions
from .pivot import apply_archetype_pivot
from .ordering import sort_by_priority, sort_by_relevance
from .balance import balance_across_topics
from .grouping import group_by_topic
from .geography import sync_multi_region
from .overrides import apply_maturity_overrides
from .generator import ScriptGenerator, generate_script

__all__ = [
    "meets_minimum_bracket",
    "matches_conditions",
    "apply_archetype_pivot",
    "sort_by_priority",
    "sort_by_relevance",
    "balance_across_topics",
    "group_by_topic",
    "sync_multi_region",
    "apply_maturity_overrides",
    "ScriptGenerator",
    "generate_script",
]
