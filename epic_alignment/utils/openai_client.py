import asyncio
import httpx
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional
from epic_alignment.components.base.config import Settings
from epic_alignment.components.base.exceptions import ConfigurationError, UpstreamError
from epic_alignment.components.base.logging import get_logger

logger = get_logger(__name__)

MISSING_KEY_MESSAGE = "Missing OPENAI_API_KEY"
UPSTREAM_BODY_MAX_CHARS = 1200

SleepFn = Callable[[float], Awaitable[Any]]


@dataclass(frozen=True)
class RetryPolicy:
    """Fixed single retry: two attempts, constant backoff, no circuit breaker."""

    max_attempts: int = 2
    backoff_seconds: float = 0.6

    @staticmethod
    def is_retryable(status_code: int) -> bool:
        """Rate limiting and server-side faults are worth one more try."""
        return status_code == 429 or status_code >= 500

    @classmethod
    def from_settings(cls, settings: Settings) -> "RetryPolicy":
        return cls(
            max_attempts=max(1, settings.upstream_max_attempts),
            backoff_seconds=settings.upstream_backoff_seconds,
        )


class OpenAIClient:
    """Async client for OpenAI chat completions in JSON-object mode."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: SleepFn = asyncio.sleep,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        self.api_key = settings.openai_api_key
        self.base_url = settings.openai_base_url.rstrip("/")
        self.model = settings.openai_model
        self.timeout = settings.openai_timeout_seconds
        self.retry_policy = retry_policy or RetryPolicy.from_settings(settings)
        self._transport = transport
        self._sleep = sleep

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)

    def require_credentials(self) -> None:
        """Fail fast, before any network call, when the API key is absent."""
        if not self.has_credentials:
            raise ConfigurationError(MISSING_KEY_MESSAGE, component="openai")

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_tokens: Optional[int] = None,
    ) -> str:
        """Return the message content of one chat completion.

        Retries once after a fixed backoff when the first attempt is rate
        limited or hits a server error. Raises UpstreamError when the budget is
        spent or the failure is not retryable.
        """
        self.require_credentials()

        payload: Dict[str, Any] = {
            "model": self.model,
            "temperature": temperature,
            "response_format": {"type": "json_object"},
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens

        headers = {"Authorization": f"Bearer {self.api_key}"}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            attempt = 0
            while True:
                attempt += 1
                response = await self._post(client, payload, headers)
                if response.is_success:
                    logger.debug("OpenAI call succeeded on attempt %d", attempt)
                    return self._extract_content(response)

                status = response.status_code
                body = response.text[:UPSTREAM_BODY_MAX_CHARS]
                if attempt < self.retry_policy.max_attempts and self.retry_policy.is_retryable(status):
                    logger.warning(
                        "OpenAI returned %d on attempt %d, retrying in %.1fs",
                        status, attempt, self.retry_policy.backoff_seconds,
                    )
                    await self._sleep(self.retry_policy.backoff_seconds)
                    continue

                logger.error("OpenAI returned %d after %d attempt(s)", status, attempt)
                raise UpstreamError(f"OpenAI returned HTTP {status}", status=status, body=body)

    async def _post(
        self,
        client: httpx.AsyncClient,
        payload: Dict[str, Any],
        headers: Dict[str, str],
    ) -> httpx.Response:
        try:
            return await client.post(
                f"{self.base_url}/chat/completions", json=payload, headers=headers
            )
        except httpx.TimeoutException as e:
            raise UpstreamError(
                f"OpenAI request timed out after {self.timeout}s",
                body=str(e)[:UPSTREAM_BODY_MAX_CHARS],
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(
                f"OpenAI unavailable: {e}", body=str(e)[:UPSTREAM_BODY_MAX_CHARS]
            ) from e

    @staticmethod
    def _extract_content(response: httpx.Response) -> str:
        """Pull choices[0].message.content; anything unreadable becomes ""."""
        try:
            data = response.json()
        except ValueError:
            logger.warning("OpenAI success response was not JSON")
            return ""

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            return ""
        message = choices[0].get("message")
        content = message.get("content") if isinstance(message, dict) else None
        return content if isinstance(content, str) else ""
