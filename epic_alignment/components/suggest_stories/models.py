from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from epic_alignment.schemas import Epic, GeneratedStory, Story, Ticket


class SuggestStoriesRequest(BaseModel):
    """Request to propose new stories for the selected intents."""
    model_config = ConfigDict(populate_by_name=True)

    epic: Optional[Epic] = None
    intents: List[str] = Field(default_factory=list)
    existing_stories: List[Story] = Field(default_factory=list, alias="existingStories")
    tickets: List[Ticket] = Field(default_factory=list)

    @field_validator("intents", "existing_stories", "tickets", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return [] if v is None else v


class SuggestStoriesResponse(BaseModel):
    """Up to three proposed stories."""
    stories: List[GeneratedStory] = Field(default_factory=list, max_length=3)
