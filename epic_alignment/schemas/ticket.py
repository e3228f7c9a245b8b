"""
Support ticket schema. Tickets arrive in large batches and are bounded before
they reach a prompt.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Ticket(BaseModel):
    """Support-issue record classified into an intent."""

    model_config = ConfigDict(extra="ignore")

    intent: str = Field(default="", description="Classified intent label")
    subject: str = Field(default="")
    description: str = Field(default="")

    @field_validator("intent", "subject", "description", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v
