"""
Context Assembler Service

Renders epic, story, ticket and intent data into the text blocks that the
analyze and suggest-stories prompts are built from. Every collection and
string is bounded here before it reaches a prompt.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from epic_alignment.schemas import Epic, Story, Ticket
from epic_alignment.utils.truncation import clip, take_first

NO_INTENT_MARKER = "—"


@dataclass(frozen=True)
class PromptPair:
    """System and user instruction sent to the model for one request."""

    system: str
    user: str


@dataclass(frozen=True)
class TicketBounds:
    max_tickets: int
    subject_max_chars: int
    description_max_chars: int


@dataclass(frozen=True)
class StoryBounds:
    max_stories: Optional[int] = None
    summary_max_chars: Optional[int] = None


def format_intents(intents: Iterable[str]) -> str:
    """Selected intents joined for display."""
    return ", ".join(intents)


def format_epic(epic: Optional[Epic]) -> str:
    epic = epic or Epic()
    return f"Epic: {epic.display_name}\nDescription: {epic.display_description}"


def format_story_lines(stories: Sequence[Story], bounds: StoryBounds = StoryBounds()) -> str:
    """One `- <key>: <summary> [intent=<intent>]` line per story."""
    if bounds.max_stories is not None:
        stories = take_first(stories, bounds.max_stories)

    lines: List[str] = []
    for s in stories:
        summary = s.summary
        if bounds.summary_max_chars is not None:
            summary = clip(summary, bounds.summary_max_chars)
        lines.append(f"- {s.key}: {summary} [intent={s.intent or NO_INTENT_MARKER}]")
    return "\n".join(lines)


def format_ticket_lines(tickets: Sequence[Ticket], bounds: TicketBounds) -> str:
    """One `- (<intent>) <subject>: <description>` line per ticket."""
    lines: List[str] = []
    for t in take_first(tickets, bounds.max_tickets):
        subject = clip(t.subject, bounds.subject_max_chars)
        description = clip(t.description, bounds.description_max_chars)
        lines.append(f"- ({t.intent}) {subject}: {description}")
    return "\n".join(lines)
