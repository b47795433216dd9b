"""Wizard answers consumed by the engine."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserInputs(BaseModel):
    """Immutable snapshot of the wizard answers for one transaction."""

    model_config = ConfigDict(frozen=True)

    transaction_type: str = Field(description="Deal type, e.g. 'carve-out'")
    product_type: str = Field(description="What the target builds or delivers")
    tech_archetype: str = Field(description="How the infrastructure is provisioned")
    headcount: str = Field(description="Headcount bracket, e.g. '51-200'")
    revenue_range: str = Field(description="Revenue bracket, e.g. '5-25m'")
    growth_stage: str = Field(description="early, scaling or mature")
    company_age: str = Field(description="Company age bracket, e.g. '5-10yr'")
    geographies: tuple[str, ...] = Field(
        default=(),
        description="Selected regions; display order is preserved",
    )

    # Secondary business dimensions (None = not answered)
    business_model: Optional[str] = None
    scale_intensity: Optional[str] = None
    transformation_state: Optional[str] = None
    data_sensitivity: Optional[str] = None
    operating_model: Optional[str] = None
