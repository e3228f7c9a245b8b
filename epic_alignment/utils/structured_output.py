"""Parsing of structured (JSON object) model output.

The upstream call requests JSON-object output, but the content is still
untrusted free-form generation. This module turns it into a dict or reports
that it could not, without ever raising to the caller:

- Markdown code fences and prose around the object are stripped
- Trailing commas before closing brackets are removed
- Anything that does not decode to a JSON object is a parse failure
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from epic_alignment.components.base.exceptions import MalformedResponseError
from epic_alignment.components.base.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParsedContent:
    """Result of parsing model output: the object, or an empty dict and the reason."""

    data: Dict[str, Any] = field(default_factory=dict)
    ok: bool = True
    error: Optional[str] = None

    @classmethod
    def failure(cls, error: str) -> "ParsedContent":
        return cls(data={}, ok=False, error=error)


def _extract_json_block(text: str) -> str:
    """Extract JSON object from surrounding text or markdown."""
    text = re.sub(r'^```(?:json)?\s*', '', text, flags=re.MULTILINE)
    text = re.sub(r'```\s*$', '', text, flags=re.MULTILINE)

    first_brace = text.find('{')
    last_brace = text.rfind('}')

    if first_brace != -1 and last_brace > first_brace:
        return text[first_brace:last_brace + 1]
    return text.strip()


def _fix_trailing_commas(text: str) -> str:
    """Remove trailing commas before closing brackets."""
    return re.sub(r',\s*([\}\]])', r'\1', text)


def _decode_object(raw: str) -> Dict[str, Any]:
    """Decode `raw` into a dict or raise MalformedResponseError."""
    if not raw or not raw.strip():
        raise MalformedResponseError("Empty response", component="structured_output")

    try:
        value = json.loads(raw)
    except (ValueError, RecursionError):
        repaired = _fix_trailing_commas(_extract_json_block(raw))
        try:
            value = json.loads(repaired)
        except (ValueError, RecursionError) as e:
            raise MalformedResponseError(
                f"Failed to parse: {e}", component="structured_output"
            ) from e
        logger.info("Model output was repaired before parsing")

    if not isinstance(value, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(value).__name__}",
            component="structured_output",
        )
    return value


def parse_structured_content(raw: Optional[str], component_name: str = "unknown") -> ParsedContent:
    """
    Parse model output into a JSON object.

    Args:
        raw: Message content returned by the model
        component_name: Name of the calling component, for logging

    Returns:
        ParsedContent with ok=False and an empty dict when the content is not
        a JSON object
    """
    try:
        return ParsedContent(data=_decode_object(raw or ""))
    except MalformedResponseError as e:
        logger.warning("[%s] Malformed model output: %s", component_name, e.message)
        logger.debug("[%s] Raw response: %s", component_name, (raw or "")[:500])
        return ParsedContent.failure(e.message)
