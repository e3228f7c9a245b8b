"""
Story schemas: existing stories sent by the caller and stories proposed by the
model.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

GENERATED_SUMMARY_MAX_CHARS = 250
MIN_STORY_POINTS = 1
MAX_STORY_POINTS = 5


class Story(BaseModel):
    """Existing story on the epic (input only)."""

    model_config = ConfigDict(extra="ignore")

    key: str = Field(default="", description="Tracker key, e.g. PROJ-123")
    summary: str = Field(default="", description="One-line story summary")
    intent: Optional[str] = Field(None, description="Intent the story addresses")

    @field_validator("key", "summary", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @property
    def covered_intent(self) -> str:
        """Trimmed intent, empty when the story is not mapped to one."""
        return (self.intent or "").strip()


class GeneratedStory(BaseModel):
    """Story proposed by the suggestion pipeline."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str = Field(..., max_length=GENERATED_SUMMARY_MAX_CHARS)
    intent: str
    story_points: int = Field(
        ...,
        alias="storyPoints",
        ge=MIN_STORY_POINTS,
        le=MAX_STORY_POINTS,
    )
