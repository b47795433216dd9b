"""API routes for the Diligence Script Engine."""

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from diligence.catalog import BRACKET_ORDER, MULTI_REGION, TOPICS, WIZARD_STEPS, unknown_options
from diligence.engine import generate_script, sync_multi_region
from diligence.models import GeneratedScript, UserInputs

logger = logging.getLogger(__name__)

router = APIRouter()


class GeographyRequest(BaseModel):
    """Request body for reconciling the geography selection."""
    geographies: list[str]


class GeographyResponse(BaseModel):
    """Reconciled geography selection."""
    geographies: list[str]


class OptionItem(BaseModel):
    id: str
    label: str
    description: str = ""


class FieldItem(BaseModel):
    id: str
    label: str
    multi_select: bool
    options: list[OptionItem]


class StepItem(BaseModel):
    id: str
    title: str
    subtitle: str
    fields: list[FieldItem]


class TopicItem(BaseModel):
    id: str
    label: str
    audience: str
    subtitle: str


class CatalogResponse(BaseModel):
    """Wizard configuration consumed by the front end."""
    steps: list[StepItem]
    brackets: dict[str, list[str]]
    topics: list[TopicItem]
    multi_region: str


@router.post("/script", response_model=GeneratedScript)
async def create_script(inputs: UserInputs):
    """Generate a diligence script from wizard answers."""
    unknown = unknown_options(inputs)
    if unknown:
        logger.info(f"Generating script with uncatalogued values: {unknown}")
    return generate_script(inputs)


@router.post("/geographies/sync", response_model=GeographyResponse)
async def sync_geographies(request: GeographyRequest):
    """Add or retract the multi-region tag as the user toggles regions."""
    return GeographyResponse(geographies=sync_multi_region(request.geographies))


@router.get("/catalog", response_model=CatalogResponse)
async def get_catalog():
    """Return wizard steps, bracket orderings and topic metadata."""
    steps = [
        StepItem(
            id=step.id,
            title=step.title,
            subtitle=step.subtitle,
            fields=[
                FieldItem(
                    id=f.id,
                    label=f.label,
                    multi_select=f.multi_select,
                    options=[
                        OptionItem(id=o.id, label=o.label, description=o.description)
                        for o in f.options
                    ],
                )
                for f in step.fields
            ],
        )
        for step in WIZARD_STEPS
    ]
    topics = [
        TopicItem(id=topic_id, label=meta.label, audience=meta.audience, subtitle=meta.subtitle)
        for topic_id, meta in sorted(TOPICS.items(), key=lambda item: item[1].order)
    ]
    return CatalogResponse(
        steps=steps,
        brackets={dimension: list(order) for dimension, order in BRACKET_ORDER.items()},
        topics=topics,
        multi_region=MULTI_REGION,
    )
