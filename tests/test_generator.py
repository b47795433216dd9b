"""End-to-end tests for script generation."""

import itertools
from collections import Counter

import pytest

from diligence.catalog import MULTI_REGION, option_ids
from diligence.config import Settings
from diligence.data import MANUAL_OPS_MASKING
from diligence.engine import ScriptGenerator, generate_script
from diligence.engine.pivot import is_cloud_only
from diligence.models import PRIORITY_RANK, RELEVANCE_RANK
from tests.helpers import make_anchor, make_inputs, make_question

GDPR_QUESTION_ID = "sec-05"


def question_ids(script):
    return [q.id for q in script.all_questions()]


class TestScenarios:
    """Representative transactions."""

    def test_carve_out_of_hybrid_legacy_company(self):
        inputs = make_inputs(
            transaction_type="carve-out",
            tech_archetype="hybrid-legacy",
            company_age="5-10yr",
        )
        script = generate_script(inputs)

        groups = {g.topic_id: g for g in script.topics}
        assert "carveout-integration" in groups
        assert len(groups["carveout-integration"].questions) >= 3
        assert "risk-tech-debt" in [a.id for a in script.risk_anchors]

    def test_eu_operations_include_gdpr(self):
        script = generate_script(make_inputs(geographies=["eu"]))
        assert GDPR_QUESTION_ID in question_ids(script)

    def test_us_only_excludes_gdpr(self):
        script = generate_script(make_inputs(geographies=["us"]))
        assert GDPR_QUESTION_ID not in question_ids(script)

    def test_lean_mature_company_gets_masking_anchor_once(self):
        inputs = make_inputs(revenue_range="25-100m", headcount="51-200", growth_stage="mature")
        script = generate_script(inputs)
        ids = [a.id for a in script.risk_anchors]
        assert ids.count(MANUAL_OPS_MASKING.id) == 1

    def test_self_managed_infra_has_no_cloud_only_questions(self):
        script = generate_script(make_inputs(tech_archetype="self-managed-infra"))
        assert not any(is_cloud_only(q) for q in script.all_questions())

    def test_venture_round_skips_separation_questions(self):
        script = generate_script(make_inputs(transaction_type="venture-series"))
        assert "ci-13" not in question_ids(script)


def representative_inputs():
    """A spread of valid inputs covering every primary option."""
    geographies = [[], ["us"], ["eu"], ["us", "eu"], ["apac", MULTI_REGION], [MULTI_REGION]]
    brackets = [
        ("1-50", "0-5m", "under-2yr"),
        ("51-200", "25-100m", "5-10yr"),
        ("500+", "100m+", "20yr+"),
    ]
    combos = itertools.product(
        option_ids("transaction-type"),
        option_ids("product-type"),
        option_ids("tech-archetype"),
        option_ids("growth-stage"),
    )
    for n, (transaction, product, archetype, stage) in enumerate(combos):
        headcount, revenue, age = brackets[n % len(brackets)]
        yield make_inputs(
            transaction_type=transaction,
            product_type=product,
            tech_archetype=archetype,
            growth_stage=stage,
            headcount=headcount,
            revenue_range=revenue,
            company_age=age,
            geographies=geographies[n % len(geographies)],
        )


SECONDARY_INPUTS = [
    {"business_model": "services-led", "operating_model": "outsourced-heavy"},
    {"scale_intensity": "high", "data_sensitivity": "high", "transformation_state": "mid-migration"},
    {"business_model": "usage-based", "operating_model": "hybrid", "transformation_state": "recently-modernized"},
]


class TestInvariants:
    """Properties that hold for every valid input."""

    def test_total_within_bounds(self):
        generator = ScriptGenerator()
        for inputs in representative_inputs():
            script = generator.generate(inputs)
            assert 15 <= script.metadata.total_questions <= 20, inputs

    @pytest.mark.parametrize("secondary", SECONDARY_INPUTS)
    def test_total_within_bounds_with_secondary_answers(self, secondary):
        for archetype in option_ids("tech-archetype"):
            script = generate_script(make_inputs(tech_archetype=archetype, **secondary))
            assert 15 <= script.metadata.total_questions <= 20

    def test_total_matches_group_sizes(self):
        script = generate_script(make_inputs())
        assert script.metadata.total_questions == len(script.all_questions())

    def test_no_duplicate_questions(self):
        for inputs in itertools.islice(representative_inputs(), 50):
            ids = question_ids(generate_script(inputs))
            assert len(ids) == len(set(ids))

    def test_topic_floor_when_pool_allows(self):
        script = generate_script(make_inputs(transaction_type="carve-out"))
        counts = Counter(q.topic for q in script.all_questions())
        assert all(count >= 3 for count in counts.values())
        assert len(counts) == 4

    def test_groups_sorted_by_priority(self):
        script = generate_script(make_inputs(transaction_type="business-integration"))
        for group in script.topics:
            ranks = [PRIORITY_RANK[q.priority] for q in group.questions]
            assert ranks == sorted(ranks)

    def test_anchors_sorted_by_relevance(self):
        inputs = make_inputs(
            tech_archetype="hybrid-legacy",
            transaction_type="carve-out",
            geographies=["eu", "uk"],
            revenue_range="25-100m",
            growth_stage="mature",
        )
        script = generate_script(inputs)
        ranks = [RELEVANCE_RANK[a.relevance] for a in script.risk_anchors]
        assert ranks == sorted(ranks)
        assert len(script.risk_anchors) > 1

    def test_deterministic(self):
        generator = ScriptGenerator()
        inputs = make_inputs(transaction_type="majority-stake", geographies=["uk", "latam"])
        assert question_ids(generator.generate(inputs)) == question_ids(generator.generate(inputs))


class TestMetadata:
    """Tests for what the script echoes back."""

    def test_inputs_echoed_verbatim(self):
        inputs = make_inputs(geographies=["us", "eu"])
        script = generate_script(inputs)
        assert script.metadata.inputs == inputs
        assert MULTI_REGION not in script.metadata.inputs.geographies

    def test_generated_at_is_timezone_aware(self):
        script = generate_script(make_inputs())
        assert script.metadata.generated_at.tzinfo is not None


class TestCustomBanks:
    """ScriptGenerator with injected banks and settings."""

    def test_geography_sync_applies_before_matching(self):
        questions = [
            make_question(id="arch-multi", conditions={"geographies": [MULTI_REGION]}),
            make_question(id="arch-any"),
        ]
        generator = ScriptGenerator(questions=questions, risk_anchors=[])

        multi = generator.generate(make_inputs(geographies=["us", "canada"]))
        assert "arch-multi" in question_ids(multi)

        single = generator.generate(make_inputs(geographies=["us", MULTI_REGION]))
        assert "arch-multi" not in question_ids(single)

    def test_settings_bound_the_selection(self):
        questions = [
            make_question(id=f"{topic[:4]}-{i}", topic=topic)
            for topic in ["architecture", "operations", "security-risk"]
            for i in range(6)
        ]
        settings = Settings(min_per_topic=1, min_total_questions=3, max_total_questions=5)
        script = ScriptGenerator(questions, [], settings).generate(make_inputs())
        assert script.metadata.total_questions == 5
        assert len(script.topics) == 3

    def test_unmatched_anchors_excluded(self):
        anchors = [
            make_anchor(id="risk-early", conditions={"growth_stages": ["early"]}),
            make_anchor(id="risk-scaling", conditions={"growth_stages": ["scaling"]}),
        ]
        generator = ScriptGenerator(risk_anchors=anchors)
        script = generator.generate(make_inputs(growth_stage="scaling"))
        assert [a.id for a in script.risk_anchors] == ["risk-scaling"]

    def test_empty_bank_yields_empty_script(self):
        script = ScriptGenerator(questions=[], risk_anchors=[]).generate(make_inputs())
        assert script.topics == []
        assert script.metadata.total_questions == 0
