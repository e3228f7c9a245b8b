from typing import Optional, Dict, Any


class ComponentError(Exception):
    """Base exception for all component errors."""

    status_code: int = 500
    error_label: str = "Unhandled error"

    def __init__(
        self,
        message: str,
        component: str = "unknown",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.component = component
        self.details = details or {}
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        """Body returned to HTTP callers."""
        return {"error": self.error_label, "detail": self.message}


class ConfigurationError(ComponentError):
    """A required setting (the upstream credential) is missing."""

    status_code = 500

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class UpstreamError(ComponentError):
    """The text-generation service failed after the retry budget was spent."""

    status_code = 502
    error_label = "OpenAI error"

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        body: str = "",
        component: str = "openai",
    ):
        self.status = status
        self.body = body
        super().__init__(message, component=component, details={"status": status})

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.error_label, "status": self.status, "detail": self.body}


class MalformedResponseError(ComponentError):
    """Model output is not a JSON object. Recovered by the parser, never surfaced."""


class UnhandledError(ComponentError):
    """Any failure that is not one of the typed errors above."""
