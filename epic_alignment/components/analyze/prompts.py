ANALYZE_SYSTEM_PROMPT = """You are an analyst. Score how well the epic and its stories address the selected intents across the provided tickets.
Return JSON with fields: score (0..1), summary (1-2 sentences), suggestions (array of 3-6 crisp items){likelihood_field}."""

ANALYZE_USER_PROMPT = """{epic_block}

Selected intents: {intents}

Stories:
{story_lines}

Tickets (sample):
{ticket_lines}

Instructions:
1) Score 0..1 overall alignment (not per-story).
2) One-sentence summary.
3) Concrete suggestions to raise the score.{likelihood_instruction}"""

# Bump when the KPI wording changes so downstream numbers stay comparable.
KPI_INSTRUCTION_VERSION = "v1"

KPI_LIKELIHOOD_FIELD = ", likelihoodPercent (integer 0..100)"

KPI_LIKELIHOOD_INSTRUCTION = """
4) likelihoodPercent: your estimated probability (0-100) that delivering this epic as scoped will {kpi_target}."""
