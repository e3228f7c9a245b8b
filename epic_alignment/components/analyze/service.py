from typing import Optional
from epic_alignment.components.base.component import BaseComponent
from epic_alignment.components.base.config import Settings
from epic_alignment.components.base.logging import get_logger
from epic_alignment.services import fallback_scorer
from epic_alignment.services.context_assembler import (
    PromptPair,
    StoryBounds,
    TicketBounds,
    format_epic,
    format_intents,
    format_story_lines,
    format_ticket_lines,
)
from epic_alignment.services.response_validator import validate_analysis
from epic_alignment.utils.openai_client import OpenAIClient
from epic_alignment.utils.structured_output import parse_structured_content
from .models import AnalyzeRequest, AnalyzeResponse
from .prompts import (
    ANALYZE_SYSTEM_PROMPT,
    ANALYZE_USER_PROMPT,
    KPI_INSTRUCTION_VERSION,
    KPI_LIKELIHOOD_FIELD,
    KPI_LIKELIHOOD_INSTRUCTION,
)

logger = get_logger(__name__)


class AnalyzeService(BaseComponent[AnalyzeRequest, AnalyzeResponse]):
    """Epic/intent alignment scoring as a component."""

    def __init__(self, settings: Settings, client: Optional[OpenAIClient] = None):
        self.settings = settings
        self.client = client or OpenAIClient(settings)

    @property
    def component_name(self) -> str:
        return "analyze"

    async def process(self, request: AnalyzeRequest) -> AnalyzeResponse:
        """Score alignment using the LLM, falling back to heuristics for bad numbers."""
        self.client.require_credentials()

        logger.info(
            "Analyzing epic: %d stories, %d tickets, %d intents",
            len(request.stories), len(request.tickets), len(request.intents),
        )
        prompts = self.build_prompts(request)

        raw_response = await self.client.complete(
            system_prompt=prompts.system,
            user_prompt=prompts.user,
            temperature=self.settings.analyze_temperature,
        )

        parsed = parse_structured_content(raw_response, component_name=self.component_name)
        validated = validate_analysis(parsed.data)

        score = validated.score
        likelihood = validated.likelihood_percent
        if score is None or (self.settings.kpi_likelihood_enabled and likelihood is None):
            estimate = fallback_scorer.estimate(request.stories, request.tickets, request.intents)
            logger.info(
                "Using fallback estimate (score=%.3f, likelihood=%d)",
                estimate.score, estimate.likelihood_percent,
            )
            if score is None:
                score = estimate.score
            if likelihood is None:
                likelihood = estimate.likelihood_percent

        return AnalyzeResponse(
            score=score,
            summary=validated.summary,
            suggestions=validated.suggestions,
            likelihood_percent=likelihood if self.settings.kpi_likelihood_enabled else None,
        )

    def build_prompts(self, request: AnalyzeRequest) -> PromptPair:
        """Render the system and user instructions for one analyze request."""
        s = self.settings
        if s.kpi_likelihood_enabled:
            likelihood_field = KPI_LIKELIHOOD_FIELD
            likelihood_instruction = KPI_LIKELIHOOD_INSTRUCTION.format(kpi_target=s.kpi_target)
            logger.debug("KPI likelihood instruction %s", KPI_INSTRUCTION_VERSION)
        else:
            likelihood_field = ""
            likelihood_instruction = ""

        ticket_bounds = TicketBounds(
            max_tickets=s.analyze_max_tickets,
            subject_max_chars=s.ticket_subject_max_chars,
            description_max_chars=s.ticket_description_max_chars,
        )

        system = ANALYZE_SYSTEM_PROMPT.format(likelihood_field=likelihood_field)
        user = ANALYZE_USER_PROMPT.format(
            epic_block=format_epic(request.epic),
            intents=format_intents(request.intents),
            story_lines=format_story_lines(request.stories, StoryBounds()),
            ticket_lines=format_ticket_lines(request.tickets, ticket_bounds),
            likelihood_instruction=likelihood_instruction,
        )
        return PromptPair(system=system, user=user)
