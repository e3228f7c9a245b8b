"""
Shared fixtures: explicit settings, a scripted fake of the OpenAI endpoint,
and a sleep that records instead of waiting.
"""
import json

import httpx
import pytest

from epic_alignment.components.base.config import Settings
from epic_alignment.utils.openai_client import OpenAIClient


def make_settings(**overrides) -> Settings:
    values = {"openai_api_key": "sk-test", "environment": "test"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def completion(content, status_code: int = 200) -> httpx.Response:
    """A chat-completions response whose message content is `content`."""
    if not isinstance(content, str):
        content = json.dumps(content)
    return httpx.Response(status_code, json={"choices": [{"message": {"content": content}}]})


class FakeOpenAI:
    """Replays canned responses and records every request it receives."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses)
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError("unexpected extra call to OpenAI")
        return self.responses.pop(0)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def payload(self, index: int = 0) -> dict:
        return json.loads(self.requests[index].content)


class RecordingSleep:
    def __init__(self):
        self.calls = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def client_factory(settings, sleep):
    """Build an OpenAIClient wired to a FakeOpenAI."""

    def factory(fake: FakeOpenAI, client_settings: Settings = None) -> OpenAIClient:
        return OpenAIClient(client_settings or settings, transport=fake.transport, sleep=sleep)

    return factory
