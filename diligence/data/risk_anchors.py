"""Predictive risk-anchor bank.

Anchors flag structural risks raised by combinations of archetype, company
age, geography and the secondary business dimensions. Cross-field rules that
a single condition cannot express live in ``diligence.engine.overrides``;
the anchors they inject are defined at the bottom of this module.
"""

RISK_ANCHOR_RECORDS = [
    {
        "id": "risk-hw-eol",
        "title": "Hardware End-of-Life Risk",
        "description": "Self-managed infrastructure in companies over 10 years old frequently contains hardware approaching or past end-of-life. Budget for hardware refresh or cloud migration as a capital expenditure item in the deal model.",
        "relevance": "high",
        "conditions": {
            "tech_archetypes": ["self-managed-infra"],
            "company_age_min": "10-20yr",
        },
    },
    {
        "id": "risk-colo-hw",
        "title": "Colocation Hardware Lifecycle",
        "description": "Datacenter colocation deployments in mature companies often rely on aging hardware with limited vendor support. Assess the remaining useful life of physical assets and the existence of a documented migration plan.",
        "relevance": "high",
        "conditions": {
            "tech_archetypes": ["datacenter-vendor"],
            "company_age_min": "10-20yr",
        },
    },
    {
        "id": "risk-tech-debt",
        "title": "Technical Debt Accumulation",
        "description": "Hybrid legacy environments in companies aged 5-10+ years accumulate significant technical debt across integration layers. Expect modernization costs to exceed initial estimates by 40-60%.",
        "relevance": "medium",
        "conditions": {
            "tech_archetypes": ["hybrid-legacy"],
            "company_age_min": "5-10yr",
        },
    },
    {
        "id": "risk-key-person",
        "title": "Key-Person Technical Dependencies",
        "description": "Small engineering teams (under 50) in on-premise or self-managed environments often concentrate critical knowledge in 1-2 individuals. Assess bus factor and knowledge transfer risk before close.",
        "relevance": "high",
        "conditions": {
            "tech_archetypes": ["self-managed-infra"],
            "headcount_min": "1-50",
        },
    },
    {
        "id": "risk-ip-docs",
        "title": "IP Documentation Gaps",
        "description": "Early-stage deep-tech companies frequently have undocumented IP, informal patent strategies, and research code that lacks production-grade engineering. Verify IP ownership chain and documentation completeness.",
        "relevance": "medium",
        "conditions": {
            "product_types": ["deep-tech-ip"],
            "growth_stages": ["early"],
        },
    },
    {
        "id": "risk-manual-ops",
        "title": "Manual Operations Dependency",
        "description": "Tech-enabled service companies with mature operations often mask manual processes behind a technology facade. Validate the actual automation ratio before projecting margin improvement.",
        "relevance": "medium",
        "conditions": {
            "product_types": ["tech-enabled-service"],
            "growth_stages": ["scaling", "mature"],
        },
    },
    {
        "id": "risk-labor-specialist",
        "title": "Specialized Labor Dependencies",
        "description": "Self-managed infrastructure and datacenter colocations require specialized operations staff (network engineers, hardware technicians) that are increasingly scarce and expensive in the labor market.",
        "relevance": "medium",
        "conditions": {
            "tech_archetypes": ["self-managed-infra", "datacenter-vendor"],
        },
    },
    {
        "id": "risk-carveout-entangle",
        "title": "Carve-out Technology Entanglement",
        "description": "Carve-outs from parent companies in hybrid legacy environments carry elevated separation risk. Shared databases, identity systems, and network infrastructure create interdependencies that extend transition timelines.",
        "relevance": "high",
        "conditions": {
            "transaction_types": ["carve-out"],
            "tech_archetypes": ["hybrid-legacy"],
        },
    },
    {
        "id": "risk-gdpr-multi",
        "title": "Cross-Border Data Compliance",
        "description": "Multi-region operations require careful navigation of GDPR (EU/UK), LGPD (LATAM), POPIA (Africa), APAC data residency laws, and cross-border data transfer mechanisms. Non-compliance creates material regulatory exposure and can block market access.",
        "relevance": "high",
        "conditions": {
            "geographies": ["eu", "uk", "apac", "latam", "africa"],
        },
    },
    {
        "id": "risk-legacy-vendor",
        "title": "Legacy Vendor Lock-in",
        "description": "On-premise enterprise products in companies over 10 years old frequently have deep vendor dependencies (Oracle, IBM, SAP) with multi-year contracts and high switching costs that constrain modernization options.",
        "relevance": "medium",
        "conditions": {
            "product_types": ["on-premise-enterprise"],
            "company_age_min": "10-20yr",
        },
    },
    {
        "id": "risk-brexit-data",
        "title": "Post-Brexit Data Transfer Risk",
        "description": "UK operations require separate GDPR compliance (UK GDPR + DPA 2018) and Standard Contractual Clauses for EU data transfers. Regulatory divergence between UK and EU creates ongoing compliance overhead.",
        "relevance": "medium",
        "conditions": {
            "geographies": ["uk"],
        },
    },
    {
        "id": "risk-latam-infra",
        "title": "LATAM Infrastructure Maturity",
        "description": "Latin American markets often face infrastructure challenges including inconsistent cloud service availability, connectivity issues, and varying levels of cybersecurity framework maturity. Budget for potential infrastructure upgrades.",
        "relevance": "medium",
        "conditions": {
            "geographies": ["latam"],
            "tech_archetypes": ["modern-cloud-native", "hybrid-legacy"],
        },
    },
    {
        "id": "risk-africa-regulatory",
        "title": "African Regulatory Fragmentation",
        "description": "African markets have fragmented data protection and technology regulations across countries (POPIA, Nigeria DPA, Kenya DPA, etc.). Multi-country operations require jurisdiction-specific compliance strategies and local data residency planning.",
        "relevance": "high",
        "conditions": {
            "geographies": ["africa"],
        },
    },
    {
        "id": "risk-mid-migration",
        "title": "In-Flight Migration Exposure",
        "description": "Platforms caught mid-migration run parallel stacks with duplicated cost and split operational knowledge. Ownership changes commonly stall migrations, leaving both systems in production for longer than planned.",
        "relevance": "medium",
        "conditions": {
            "transformation_states": ["mid-migration"],
        },
    },
    {
        "id": "risk-outsourced-ip",
        "title": "Outsourced IP Assignment Gaps",
        "description": "Outsourced-heavy engineering organizations frequently lack complete IP assignment from every vendor and contractor. Confirm assignment coverage for all code in production before relying on IP representations.",
        "relevance": "medium",
        "conditions": {
            "operating_models": ["outsourced-heavy"],
        },
    },
    {
        "id": "risk-regulated-data",
        "title": "Regulated Data Breach Liability",
        "description": "Targets holding PII, PHI, or financial data carry breach notification duties and regulatory penalties that survive the transaction. Quantify exposure and confirm insurance coverage as part of the deal model.",
        "relevance": "high",
        "conditions": {
            "data_sensitivity": ["high"],
        },
    },
    {
        "id": "risk-early-scale",
        "title": "Premature Scale Pressure",
        "description": "Early-stage platforms already facing high usage volume often carry shortcuts in capacity planning and observability. Expect near-term reliability investment ahead of roadmap work.",
        "relevance": "low",
        "conditions": {
            "growth_stages": ["early"],
            "scale_intensity": ["high"],
        },
    },
]

# Injected by the maturity override rather than matched by condition
MANUAL_OPS_MASKING_RECORD = {
    "id": "risk-manual-ops-masking",
    "title": "Manual Operations Masking",
    "description": "Mature companies generating $25M+ revenue with 200 or fewer employees show unusually high revenue per head. This often hides manual, founder-era operating processes or heavy reliance on contractors that do not appear in headcount. Validate how work actually gets done before underwriting scale.",
    "relevance": "high",
}
