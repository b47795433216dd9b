"""Generated script output models."""

from datetime import datetime

from pydantic import BaseModel, Field

from .candidate import Question, RiskAnchor
from .inputs import UserInputs


class TopicGroup(BaseModel):
    """One labeled section of the script."""

    topic_id: str
    topic_label: str
    audience: str
    subtitle: str = ""
    questions: list[Question] = Field(default_factory=list)


class ScriptMetadata(BaseModel):
    """Generation details echoed alongside the script."""

    generated_at: datetime
    total_questions: int
    inputs: UserInputs = Field(description="Verbatim echo of the wizard answers")


class GeneratedScript(BaseModel):
    """The final deliverable: grouped questions plus ranked risk anchors."""

    topics: list[TopicGroup] = Field(default_factory=list)
    risk_anchors: list[RiskAnchor] = Field(default_factory=list)
    metadata: ScriptMetadata

    def all_questions(self) -> list[Question]:
        """Flatten the topic groups in display order."""
        return [q for group in self.topics for q in group.questions]
