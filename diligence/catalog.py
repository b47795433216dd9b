"""Wizard option catalogs, bracket orderings and topic metadata.

The engine reads these tables but never generates them. Option identifiers
are what conditions and ``UserInputs`` refer to; labels are for display only.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from diligence.models import UserInputs

logger = logging.getLogger(__name__)

MULTI_REGION = "multi-region"


@dataclass(frozen=True)
class WizardOption:
    """One selectable answer."""

    id: str
    label: str
    description: str = ""


@dataclass(frozen=True)
class WizardField:
    """A single enumerated field and its valid options."""

    id: str
    label: str
    input_field: str  # attribute name on UserInputs
    options: tuple[WizardOption, ...]
    multi_select: bool = False


@dataclass(frozen=True)
class WizardStep:
    """A wizard page; compound steps carry several fields."""

    id: str
    title: str
    subtitle: str
    fields: tuple[WizardField, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TopicMeta:
    """Display metadata for a question topic."""

    label: str
    audience: str
    subtitle: str
    order: int
    id_prefix: str


def _options(*pairs: tuple) -> tuple[WizardOption, ...]:
    return tuple(WizardOption(*pair) for pair in pairs)


def _single(step_id: str, title: str, subtitle: str, input_field: str, options) -> WizardStep:
    return WizardStep(
        id=step_id,
        title=title,
        subtitle=subtitle,
        fields=(WizardField(id=step_id, label=title, input_field=input_field, options=options),),
    )


WIZARD_STEPS: tuple[WizardStep, ...] = (
    _single(
        "transaction-type",
        "Transaction Type",
        "What type of deal is being evaluated?",
        "transaction_type",
        _options(
            ("full-acquisition", "Full Acquisition", "Complete purchase of the target entity"),
            ("majority-stake", "Majority Stake", "Controlling interest with existing ownership retained"),
            ("business-integration", "Portfolio Integration", "Merging operations of two existing entities"),
            ("carve-out", "Carve-out", "Separation of a business unit from a parent company"),
            ("venture-series", "Venture Series A/B", "Growth-stage equity investment round"),
        ),
    ),
    _single(
        "product-type",
        "Product Type",
        "What does the target company build or deliver?",
        "product_type",
        _options(
            ("b2b-saas", "B2B SaaS", "Cloud-hosted software sold to businesses"),
            ("b2c-marketplace", "B2C Marketplace", "Consumer-facing platform connecting buyers and sellers"),
            ("on-premise-enterprise", "On-Premise Enterprise", "Software deployed within customer infrastructure"),
            ("deep-tech-ip", "Deep-Tech / IP", "Technology driven by proprietary research or patents"),
            ("tech-enabled-service", "Tech-Enabled Business / Service Company",
             "Service delivery augmented by proprietary technology"),
        ),
    ),
    _single(
        "tech-archetype",
        "Tech Stack Archetype",
        "How is the technology infrastructure provisioned?",
        "tech_archetype",
        _options(
            ("modern-cloud-native", "Modern Cloud Native", "Built on public cloud with containerization and IaC"),
            ("hybrid-legacy", "Hybrid Legacy", "Mix of cloud services and legacy on-premise systems"),
            ("self-managed-infra", "Self-Managed Infrastructure", "On-premises servers owned and operated by the company"),
            ("datacenter-vendor", "Datacenter Vendor", "Hardware housed in third-party data centers"),
        ),
    ),
    WizardStep(
        id="company-profile",
        title="Company Profile",
        subtitle="Describe the target company's scale and maturity.",
        fields=(
            WizardField(
                id="headcount",
                label="Target Size (Headcount)",
                input_field="headcount",
                options=_options(
                    ("1-50", "1 – 50"),
                    ("51-200", "51 – 200"),
                    ("201-500", "201 – 500"),
                    ("500+", "500+"),
                ),
            ),
            WizardField(
                id="revenue-range",
                label="Revenue Range",
                input_field="revenue_range",
                options=_options(
                    ("0-5m", "$0 – $5M"),
                    ("5-25m", "$5M – $25M"),
                    ("25-100m", "$25M – $100M"),
                    ("100m+", "$100M+"),
                ),
            ),
            WizardField(
                id="growth-stage",
                label="Growth Stage",
                input_field="growth_stage",
                options=_options(
                    ("early", "Early"),
                    ("scaling", "Scaling"),
                    ("mature", "Mature"),
                ),
            ),
            WizardField(
                id="company-age",
                label="Company Age",
                input_field="company_age",
                options=_options(
                    ("under-2yr", "Under 2 years"),
                    ("2-5yr", "2 – 5 years"),
                    ("5-10yr", "5 – 10 years"),
                    ("10-20yr", "10 – 20 years"),
                    ("20yr+", "20+ years"),
                ),
            ),
        ),
    ),
    WizardStep(
        id="geography",
        title="Geography",
        subtitle="Where does the target operate? Select all that apply.",
        fields=(
            WizardField(
                id="geography",
                label="Geography",
                input_field="geographies",
                multi_select=True,
                options=_options(
                    ("us", "United States", "North American operations"),
                    ("canada", "Canada", "Canadian operations"),
                    ("eu", "European Union", "EU member state operations"),
                    ("uk", "United Kingdom", "UK operations (post-Brexit)"),
                    ("latam", "Latin America", "LATAM regional operations"),
                    ("africa", "Africa", "African continent operations"),
                    ("apac", "Asia-Pacific", "APAC regional operations"),
                    (MULTI_REGION, "Multi-Region", "Operations spanning geographies"),
                ),
            ),
        ),
    ),
    _single(
        "business-model",
        "Business Model",
        "What is the primary delivery and monetization model?",
        "business_model",
        _options(
            ("productized-platform", "Productized Platform", "Self-serve product with platform economics"),
            ("customized-deployments", "Customized Deployments", "Tailored implementations for each customer"),
            ("services-led", "Services-Led", "Professional services as primary revenue driver"),
            ("usage-based", "Usage-Based", "Consumption-based pricing model"),
            ("ip-licensing", "IP Licensing", "Revenue from intellectual property licensing"),
        ),
    ),
    _single(
        "scale-intensity",
        "Scale Intensity",
        "What is the operational scale and user volume pressure?",
        "scale_intensity",
        _options(
            ("low", "Low", "Internal tools or small user base"),
            ("moderate", "Moderate", "Thousands of users with steady growth"),
            ("high", "High", "Millions of users or high transaction volume"),
        ),
    ),
    _single(
        "transformation-state",
        "Transformation State",
        "What is the current state of technology modernization?",
        "transformation_state",
        _options(
            ("stable", "Stable", "No active modernization; current stack is maintained"),
            ("mid-migration", "Mid-Migration", "Actively transitioning between technology stacks"),
            ("actively-modernizing", "Actively Modernizing", "Systematic upgrade of architecture and tooling"),
            ("recently-modernized", "Recently Modernized",
             "Major modernization completed within past 12–18 months"),
        ),
    ),
    _single(
        "data-sensitivity",
        "Data Sensitivity",
        "What is the sensitivity level of the data the target handles?",
        "data_sensitivity",
        _options(
            ("low", "Low", "Non-sensitive operational data"),
            ("moderate", "Moderate", "Business-sensitive data with standard protection requirements"),
            ("high", "High", "PII, PHI, financial data, or regulated data categories"),
        ),
    ),
    _single(
        "operating-model",
        "Operating Model",
        "How is the engineering organization structured?",
        "operating_model",
        _options(
            ("centralized-eng", "Centralized Engineering", "Single engineering org with unified leadership"),
            ("product-aligned-teams", "Product-Aligned Teams", "Autonomous squads aligned to product areas"),
            ("outsourced-heavy", "Outsourced-Heavy", "Significant reliance on external development partners"),
            ("hybrid", "Hybrid", "Mix of internal teams and outsourced capabilities"),
        ),
    ),
)

# Ordinal bracket ordering, lowest first
BRACKET_ORDER: dict[str, tuple[str, ...]] = {
    "headcount": ("1-50", "51-200", "201-500", "500+"),
    "revenue-range": ("0-5m", "5-25m", "25-100m", "100m+"),
    "company-age": ("under-2yr", "2-5yr", "5-10yr", "10-20yr", "20yr+"),
}

# Canonical topic order is dict order (matches TopicMeta.order)
TOPICS: dict[str, TopicMeta] = {
    "architecture": TopicMeta(
        label="Architecture",
        audience="CTO / VP Engineering / Senior Architect",
        subtitle="System design, scalability patterns, and technical infrastructure foundation",
        order=1,
        id_prefix="arch-",
    ),
    "operations": TopicMeta(
        label="Operations & Delivery",
        audience="VP Engineering / VP Product",
        subtitle="Development processes, deployment practices, and operational excellence",
        order=2,
        id_prefix="ops-",
    ),
    "carveout-integration": TopicMeta(
        label="Carve-out / Integration",
        audience="CIO / COO / CTO / PE Leadership",
        subtitle="Separation readiness, integration complexity, and dependency mapping",
        order=3,
        id_prefix="ci-",
    ),
    "security-risk": TopicMeta(
        label="Security, Compliance & Governance",
        audience="CIO / CISO / VP Security",
        subtitle="Security posture, regulatory compliance, and risk management frameworks",
        order=4,
        id_prefix="sec-",
    ),
}


def iter_fields():
    """Yield every enumerated wizard field in wizard order."""
    for step in WIZARD_STEPS:
        yield from step.fields


def get_field(field_id: str) -> Optional[WizardField]:
    """Look up a field by its wizard id (e.g. 'revenue-range')."""
    for wizard_field in iter_fields():
        if wizard_field.id == field_id:
            return wizard_field
    return None


def option_ids(field_id: str) -> tuple[str, ...]:
    """Valid option identifiers for a field, empty if the field is unknown."""
    wizard_field = get_field(field_id)
    if wizard_field is None:
        return ()
    return tuple(option.id for option in wizard_field.options)


def get_option_label(field_id: str, option_id: str) -> str:
    """Human-readable label for an option, falling back to the raw id."""
    wizard_field = get_field(field_id)
    if wizard_field is None:
        return option_id
    for option in wizard_field.options:
        if option.id == option_id:
            return option.label
    return option_id


def unknown_options(inputs: UserInputs) -> list[tuple[str, str]]:
    """List (field id, value) pairs in the inputs that the catalog does not know.

    Unanswered secondary dimensions are not reported.
    """
    unknown = []
    for wizard_field in iter_fields():
        value = getattr(inputs, wizard_field.input_field)
        if value is None:
            continue
        values = value if wizard_field.multi_select else (value,)
        valid = {option.id for option in wizard_field.options}
        for item in values:
            if item not in valid:
                unknown.append((wizard_field.id, item))
    if unknown:
        logger.warning(f"Inputs contain values outside the catalog: {unknown}")
    return unknown
