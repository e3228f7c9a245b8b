from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from epic_alignment.schemas import Epic, Story, Ticket


class AnalyzeRequest(BaseModel):
    """Request to score an epic against the selected ticket intents."""
    epic: Optional[Epic] = None
    stories: List[Story] = Field(default_factory=list)
    tickets: List[Ticket] = Field(default_factory=list)
    intents: List[str] = Field(default_factory=list)

    @field_validator("stories", "tickets", "intents", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return [] if v is None else v


class AnalyzeResponse(BaseModel):
    """Alignment score with summary and suggestions."""
    model_config = ConfigDict(populate_by_name=True)

    score: float = Field(..., ge=0.0, le=1.0)
    summary: str
    suggestions: List[str] = Field(..., min_length=1)
    likelihood_percent: Optional[int] = Field(
        None, alias="likelihoodPercent", ge=0, le=100
    )
