"""Export and console rendering of generated scripts."""

import csv
from pathlib import Path
from typing import TextIO

from diligence.catalog import get_option_label
from diligence.models import GeneratedScript, UserInputs

# (wizard field id, UserInputs attribute, display label)
SUMMARY_FIELDS = [
    ("transaction-type", "transaction_type", "Transaction"),
    ("product-type", "product_type", "Product"),
    ("tech-archetype", "tech_archetype", "Tech Stack"),
    ("headcount", "headcount", "Headcount"),
    ("revenue-range", "revenue_range", "Revenue"),
    ("growth-stage", "growth_stage", "Growth Stage"),
    ("company-age", "company_age", "Company Age"),
    ("geography", "geographies", "Geography"),
    ("business-model", "business_model", "Business Model"),
    ("scale-intensity", "scale_intensity", "Scale"),
    ("transformation-state", "transformation_state", "Transformation"),
    ("data-sensitivity", "data_sensitivity", "Data Sensitivity"),
    ("operating-model", "operating_model", "Operating Model"),
]


def summarize_inputs(inputs: UserInputs) -> list[tuple[str, str]]:
    """Label/value pairs describing the inputs, using catalog labels."""
    summary = []
    for field_id, attribute, label in SUMMARY_FIELDS:
        value = getattr(inputs, attribute)
        if value is None:
            continue
        if isinstance(value, tuple):
            text = ", ".join(get_option_label(field_id, v) for v in value) or "-"
        else:
            text = get_option_label(field_id, value)
        summary.append((label, text))
    return summary


def script_to_markdown(script: GeneratedScript) -> str:
    """Render a script as a Markdown document."""
    lines = ["# Technical Due Diligence Script", ""]

    for label, text in summarize_inputs(script.metadata.inputs):
        lines.append(f"- **{label}:** {text}")
    lines.append("")
    lines.append(
        f"_{script.metadata.total_questions} questions, generated "
        f"{script.metadata.generated_at.isoformat()}_"
    )

    for number, group in enumerate(script.topics, 1):
        lines += ["", f"## {number}. {group.topic_label}", "", f"Audience: {group.audience}", ""]
        for question in group.questions:
            lines.append(f"- **[{question.priority.value}]** {question.text}")
            lines.append(f"  - Why it matters: {question.rationale}")
            if question.lookout_signal:
                lines.append(f"  - Lookout: {question.lookout_signal}")

    if script.risk_anchors:
        lines += ["", "## Risk Anchors", ""]
        for anchor in script.risk_anchors:
            lines.append(f"- **{anchor.title}** ({anchor.relevance.value}): {anchor.description}")

    return "\n".join(lines) + "\n"


def write_csv(script: GeneratedScript, stream: TextIO):
    """Write one row per question, followed by one row per risk anchor."""
    writer = csv.writer(stream)

    writer.writerow(["Section", "ID", "Priority", "Audience", "Text", "Rationale"])

    for group in script.topics:
        for q in group.questions:
            writer.writerow([
                group.topic_label,
                q.id,
                q.priority.value,
                group.audience,
                q.text,
                q.rationale,
            ])

    for anchor in script.risk_anchors:
        writer.writerow([
            "Risk Anchors",
            anchor.id,
            anchor.relevance.value,
            "",
            anchor.title,
            anchor.description,
        ])


def export_to_csv(script: GeneratedScript, output_path: Path):
    """Export a script to a CSV file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        write_csv(script, f)


def print_summary(script: GeneratedScript):
    """Print a summary of the script to console."""
    print("\n" + "=" * 60)
    print("TECHNICAL DUE DILIGENCE SCRIPT")
    print("=" * 60)

    for label, text in summarize_inputs(script.metadata.inputs):
        print(f"{label}: {text}")

    print(f"\nTotal questions: {script.metadata.total_questions}")
    print(f"Risk anchors: {len(script.risk_anchors)}")

    for group in script.topics:
        print("\n" + "-" * 60)
        print(f"{group.topic_label.upper()} ({group.audience})")
        print("-" * 60)
        for q in group.questions:
            print(f"\n[{q.priority.value}] {q.id}")
            print(f"   {q.text}")

    if script.risk_anchors:
        print("\n" + "-" * 60)
        print("RISK ANCHORS")
        print("-" * 60)
        for anchor in script.risk_anchors:
            print(f"\n[{anchor.relevance.value}] {anchor.title}")
            print(f"   {anchor.description}")

    print("\n" + "=" * 60)
