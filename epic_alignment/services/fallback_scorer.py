"""
Deterministic alignment heuristics used when the model's numbers are unusable.

    coveredIntents   = non-empty story intents
    relevantTickets  = tickets whose intent was selected
    score            = relevant tickets with a covered intent / relevant tickets
    coverage         = selected intents that are covered / selected intents
    likelihood       = round(100 * clamp(0.7 * score + 0.3 * coverage, 0, 1))
"""

import math
from dataclasses import dataclass
from typing import Sequence, Set

from epic_alignment.schemas import Story, Ticket

SCORE_WEIGHT = 0.7
COVERAGE_WEIGHT = 0.3


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class FallbackEstimate:
    score: float
    coverage: float
    likelihood_percent: int


def covered_intents(stories: Sequence[Story]) -> Set[str]:
    return {s.covered_intent for s in stories if s.covered_intent}


def alignment_score(stories: Sequence[Story], tickets: Sequence[Ticket], intents: Sequence[str]) -> float:
    """Share of selected-intent tickets whose intent some story already covers."""
    selected = set(intents)
    relevant = [t for t in tickets if t.intent in selected]
    if not relevant:
        return 0.0
    covered = covered_intents(stories)
    return sum(1 for t in relevant if t.intent in covered) / len(relevant)


def intent_coverage(stories: Sequence[Story], intents: Sequence[str]) -> float:
    """Share of selected intents that at least one story covers."""
    selected = set(intents)
    if not selected:
        return 0.0
    return len(selected & covered_intents(stories)) / len(selected)


def likelihood_percent(score: float, coverage: float) -> int:
    blended = SCORE_WEIGHT * score + COVERAGE_WEIGHT * coverage
    return round_half_up(100 * clamp(blended, 0.0, 1.0))


def estimate(stories: Sequence[Story], tickets: Sequence[Ticket], intents: Sequence[str]) -> FallbackEstimate:
    """Compute score, coverage and likelihood from request data alone."""
    score = alignment_score(stories, tickets, intents)
    coverage = intent_coverage(stories, intents)
    return FallbackEstimate(
        score=score,
        coverage=coverage,
        likelihood_percent=likelihood_percent(score, coverage),
    )
