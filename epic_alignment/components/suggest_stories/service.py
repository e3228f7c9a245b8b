from typing import Optional
from epic_alignment.components.base.component import BaseComponent
from epic_alignment.components.base.config import Settings
from epic_alignment.components.base.logging import get_logger
from epic_alignment.services.context_assembler import (
    PromptPair,
    StoryBounds,
    TicketBounds,
    format_epic,
    format_intents,
    format_story_lines,
    format_ticket_lines,
)
from epic_alignment.services.response_validator import validate_generated_stories
from epic_alignment.utils.openai_client import OpenAIClient
from epic_alignment.utils.structured_output import parse_structured_content
from .models import SuggestStoriesRequest, SuggestStoriesResponse
from .prompts import SUGGEST_STORIES_SYSTEM_PROMPT, SUGGEST_STORIES_USER_PROMPT

logger = get_logger(__name__)


class SuggestStoriesService(BaseComponent[SuggestStoriesRequest, SuggestStoriesResponse]):
    """Story suggestion agent as a component."""

    def __init__(self, settings: Settings, client: Optional[OpenAIClient] = None):
        self.settings = settings
        self.client = client or OpenAIClient(settings)

    @property
    def component_name(self) -> str:
        return "suggest_stories"

    async def process(self, request: SuggestStoriesRequest) -> SuggestStoriesResponse:
        """Generate up to three new stories using the LLM."""
        self.client.require_credentials()

        logger.info(
            "Suggesting stories: %d existing stories, %d tickets, %d intents",
            len(request.existing_stories), len(request.tickets), len(request.intents),
        )
        prompts = self.build_prompts(request)

        raw_response = await self.client.complete(
            system_prompt=prompts.system,
            user_prompt=prompts.user,
            temperature=self.settings.suggest_temperature,
            max_tokens=self.settings.suggest_max_tokens,
        )

        parsed = parse_structured_content(raw_response, component_name=self.component_name)
        stories = validate_generated_stories(parsed.data, request.intents)
        if len(stories) < 3:
            logger.warning("Model produced %d usable stories", len(stories))

        return SuggestStoriesResponse(stories=stories)

    def build_prompts(self, request: SuggestStoriesRequest) -> PromptPair:
        """Render the system and user instructions for one suggestion request."""
        s = self.settings
        story_bounds = StoryBounds(
            max_stories=s.max_existing_stories,
            summary_max_chars=s.story_summary_max_chars,
        )
        ticket_bounds = TicketBounds(
            max_tickets=s.suggest_max_tickets,
            subject_max_chars=s.ticket_subject_max_chars,
            description_max_chars=s.ticket_description_max_chars,
        )

        intents = format_intents(request.intents)
        system = SUGGEST_STORIES_SYSTEM_PROMPT.format(allowed_intents=intents)
        user = SUGGEST_STORIES_USER_PROMPT.format(
            epic_block=format_epic(request.epic),
            intents=intents,
            story_lines=format_story_lines(request.existing_stories, story_bounds),
            ticket_lines=format_ticket_lines(request.tickets, ticket_bounds),
        )
        return PromptPair(system=system, user=user)
