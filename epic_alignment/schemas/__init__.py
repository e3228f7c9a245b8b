"""
Pydantic schemas shared by the analyze and suggest-stories components.
"""

from .epic import Epic, DEFAULT_EPIC_NAME, DEFAULT_EPIC_DESCRIPTION
from .story import (
    Story,
    GeneratedStory,
    GENERATED_SUMMARY_MAX_CHARS,
    MIN_STORY_POINTS,
    MAX_STORY_POINTS,
)
from .ticket import Ticket

__all__ = [
    "Epic",
    "DEFAULT_EPIC_NAME",
    "DEFAULT_EPIC_DESCRIPTION",
    "Story",
    "GeneratedStory",
    "GENERATED_SUMMARY_MAX_CHARS",
    "MIN_STORY_POINTS",
    "MAX_STORY_POINTS",
    "Ticket",
]
