"""
Field-by-field validation of the model's structured output.

Nothing here raises. Out-of-range numbers are clamped, wrong types are
dropped, and missing text fields are replaced with fixed defaults. Numeric
fields that cannot be trusted come back as None so the caller can apply the
fallback heuristics.
"""

import math
import re
import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from epic_alignment.components.base.logging import get_logger
from epic_alignment.schemas import (
    GeneratedStory,
    GENERATED_SUMMARY_MAX_CHARS,
    MIN_STORY_POINTS,
    MAX_STORY_POINTS,
)
from epic_alignment.services.fallback_scorer import clamp, round_half_up

logger = get_logger(__name__)

DEFAULT_SUMMARY = "LLM returned no summary."
DEFAULT_SUGGESTIONS = [
    "Add at least one story explicitly mapped to each selected intent.",
    "Tighten acceptance criteria to mirror ticket language and edge cases.",
    "Add UI copy improvements for error states called out in tickets.",
]
MAX_SUGGESTIONS = 6
MAX_GENERATED_STORIES = 3
DEFAULT_STORY_POINTS = 3

# nine digits already clamp to the max; more would hit the int-conversion digit limit
_LEADING_INT = re.compile(r"^\s*([+-]?\d{1,9})")


@dataclass
class ValidatedAnalysis:
    """Sanitized analyze output. None numbers mean "use the fallback"."""

    score: Optional[float]
    likelihood_percent: Optional[int]
    summary: str
    suggestions: List[str]
    summary_defaulted: bool = False
    suggestions_defaulted: bool = False

    @property
    def score_defaulted(self) -> bool:
        return self.score is None

    @property
    def likelihood_defaulted(self) -> bool:
        return self.likelihood_percent is None


def _as_real(value: Any) -> Optional[float]:
    """Finite int/float, excluding bools."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        # integer beyond float range; still clamps like any out-of-range number
        return sys.float_info.max if value > 0 else -sys.float_info.max
    return value if math.isfinite(value) else None


def sanitize_score(value: Any) -> Optional[float]:
    number = _as_real(value)
    if number is None:
        return None
    return clamp(number, 0.0, 1.0)


def sanitize_likelihood(value: Any) -> Optional[int]:
    number = _as_real(value)
    if number is None:
        return None
    return int(clamp(round_half_up(number), 0, 100))


def sanitize_summary(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def sanitize_suggestions(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    items = []
    for item in value:
        if item is None or isinstance(item, (dict, list)):
            continue
        text = str(item).strip()
        if text:
            items.append(text)
    return items[:MAX_SUGGESTIONS] or None


def validate_analysis(data: Dict[str, Any]) -> ValidatedAnalysis:
    """Sanitize an analyze response object."""
    summary = sanitize_summary(data.get("summary"))
    suggestions = sanitize_suggestions(data.get("suggestions"))

    result = ValidatedAnalysis(
        score=sanitize_score(data.get("score")),
        likelihood_percent=sanitize_likelihood(data.get("likelihoodPercent")),
        summary=summary if summary is not None else DEFAULT_SUMMARY,
        suggestions=suggestions if suggestions is not None else list(DEFAULT_SUGGESTIONS),
        summary_defaulted=summary is None,
        suggestions_defaulted=suggestions is None,
    )

    defaulted = [
        name
        for name, flag in (
            ("score", result.score_defaulted),
            ("likelihoodPercent", result.likelihood_defaulted),
            ("summary", result.summary_defaulted),
            ("suggestions", result.suggestions_defaulted),
        )
        if flag
    ]
    if defaulted:
        logger.info("Analyze output defaulted fields: %s", ", ".join(defaulted))
    return result


def parse_story_points(value: Any) -> int:
    """Integer story points clamped to 1..5; unparseable values become 3."""
    points: Optional[int] = None
    if isinstance(value, bool):
        points = None
    elif isinstance(value, int):
        points = value
    elif isinstance(value, float) and math.isfinite(value):
        points = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            points = int(match.group(1))

    if points is None:
        points = DEFAULT_STORY_POINTS
    return int(clamp(points, MIN_STORY_POINTS, MAX_STORY_POINTS))


def sanitize_story(candidate: Dict[str, Any], intents: Sequence[str]) -> GeneratedStory:
    summary = candidate.get("summary")
    summary = "" if summary is None else str(summary)

    intent = candidate.get("intent")
    if not isinstance(intent, str) or intent not in intents:
        intent = intents[0] if intents else ""

    return GeneratedStory(
        summary=summary[:GENERATED_SUMMARY_MAX_CHARS],
        intent=intent,
        story_points=parse_story_points(candidate.get("storyPoints")),
    )


def validate_generated_stories(data: Dict[str, Any], intents: Sequence[str]) -> List[GeneratedStory]:
    """Sanitize the `stories` array; keeps at most three and never pads."""
    raw = data.get("stories")
    if not isinstance(raw, list):
        logger.warning("Suggest output has no stories array")
        return []

    candidates = raw[:MAX_GENERATED_STORIES]
    stories = []
    for candidate in candidates:
        if not isinstance(candidate, dict):
            logger.warning("Story candidate is not an object: %r", candidate)
            candidate = {}
        stories.append(sanitize_story(candidate, intents))
    return stories
