"""Tests for topic balancing."""

from collections import Counter

from diligence.engine.balance import balance_across_topics
from tests.helpers import make_question

TOPIC_IDS = ["architecture", "operations", "carveout-integration", "security-risk"]


def make_pool(count: int, priority_for=lambda i: "high"):
    return [
        make_question(id=f"q{i}", topic=TOPIC_IDS[i % 4], priority=priority_for(i))
        for i in range(count)
    ]


class TestBalanceAcrossTopics:
    """Tests for floor-then-fill selection."""

    def test_includes_all_topics(self):
        pool = []
        for topic in TOPIC_IDS:
            for n, priority in enumerate(["high", "medium", "standard"]):
                pool.append(make_question(id=f"{topic}-{n}", topic=topic, priority=priority))
        result = balance_across_topics(pool, 12, 12)
        assert {q.topic for q in result} == set(TOPIC_IDS)

    def test_caps_at_max_total(self):
        result = balance_across_topics(make_pool(30), 15, 20)
        assert len(result) == 20

    def test_floor_of_three_per_topic(self):
        pool = make_pool(40, lambda i: "high" if i < 8 else "standard")
        result = balance_across_topics(pool, 15, 20)
        counts = Counter(q.topic for q in result)
        assert all(counts[topic] >= 3 for topic in TOPIC_IDS)

    def test_floor_holds_against_priority_skew(self):
        # Every high-priority question is architecture; other topics still get 3
        pool = [make_question(id=f"a{i}", topic="architecture", priority="high") for i in range(20)]
        pool += [make_question(id=f"s{i}", topic="security-risk", priority="standard") for i in range(5)]
        result = balance_across_topics(pool, 15, 20)
        counts = Counter(q.topic for q in result)
        assert counts["security-risk"] == 3
        assert counts["architecture"] == 17

    def test_small_topic_contributes_everything(self):
        pool = make_pool(12)
        pool.append(make_question(id="lonely", topic="extra", priority="standard"))
        result = balance_across_topics(pool, 5, 13)
        assert "lonely" in [q.id for q in result]

    def test_small_topic_never_exceeds_its_pool(self):
        pool = [make_question(id="c1", topic="carveout-integration")]
        pool += [make_question(id=f"a{i}", topic="architecture") for i in range(10)]
        result = balance_across_topics(pool, 5, 8)
        counts = Counter(q.topic for q in result)
        assert counts["carveout-integration"] == 1
        assert len(result) == 8

    def test_floor_wins_over_cap(self):
        topics = [f"topic-{n}" for n in range(6)]
        pool = [
            make_question(id=f"{t}-{i}", topic=t, priority="high")
            for t in topics for i in range(4)
        ]
        result = balance_across_topics(pool, 10, 10)
        assert len(result) == 18

    def test_no_duplicates(self):
        result = balance_across_topics(make_pool(40), 15, 20)
        ids = [q.id for q in result]
        assert len(ids) == len(set(ids))

    def test_fill_follows_global_priority(self):
        pool = [make_question(id=f"a{i}", topic="architecture", priority="standard") for i in range(5)]
        pool += [make_question(id=f"o{i}", topic="operations", priority="high") for i in range(5)]
        result = balance_across_topics(pool, 0, 8)
        # Floor takes a0-a2 and o0-o2, fill prefers remaining high ones
        assert {q.id for q in result} == {"a0", "a1", "a2", "o0", "o1", "o2", "o3", "o4"}

    def test_custom_floor(self):
        result = balance_across_topics(make_pool(40), 0, 0, min_per_topic=1)
        assert len(result) == 4

    def test_under_minimum_returns_what_exists(self, caplog):
        pool = make_pool(6)
        with caplog.at_level("WARNING"):
            result = balance_across_topics(pool, 15, 20)
        assert len(result) == 6
        assert "below the target minimum" in caplog.text

    def test_empty_pool(self):
        assert balance_across_topics([], 15, 20) == []
