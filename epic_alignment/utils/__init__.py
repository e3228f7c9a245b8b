from .openai_client import OpenAIClient, RetryPolicy
from .structured_output import ParsedContent, parse_structured_content
from .truncation import clip, take_first

__all__ = [
    "OpenAIClient",
    "RetryPolicy",
    "ParsedContent",
    "parse_structured_content",
    "clip",
    "take_first",
]
