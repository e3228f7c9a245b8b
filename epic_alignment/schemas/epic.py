"""
Epic schema as posted by the epic viewer.

Both fields are optional on the wire; prompts render missing values as
"Untitled" and "(none)".
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_EPIC_NAME = "Untitled"
DEFAULT_EPIC_DESCRIPTION = "(none)"


class Epic(BaseModel):
    """Goal grouping a set of stories."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, description="Epic name")
    description: Optional[str] = Field(None, description="Free-text goal of the epic")

    @property
    def display_name(self) -> str:
        return self.name or DEFAULT_EPIC_NAME

    @property
    def display_description(self) -> str:
        return self.description or DEFAULT_EPIC_DESCRIPTION
