"""
HTTP boundary: routes, wire names and failure bodies.
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from epic_alignment.components.analyze.router import get_service as get_analyze_service
from epic_alignment.components.analyze.service import AnalyzeService
from epic_alignment.components.base.config import get_settings
from epic_alignment.components.suggest_stories.router import get_service as get_suggest_service
from epic_alignment.components.suggest_stories.service import SuggestStoriesService
from epic_alignment.main import app
from epic_alignment.utils.openai_client import OpenAIClient

from conftest import FakeOpenAI, RecordingSleep, completion, make_settings

ANALYZE_BODY = {
    "epic": {"name": "Checkout"},
    "stories": [{"key": "PAY-1", "summary": "Retry payments", "intent": "billing"}],
    "tickets": [{"intent": "billing", "subject": "Charged twice", "description": "Refund please"}],
    "intents": ["billing"],
}

SUGGEST_BODY = {
    "epic": {"name": "Checkout"},
    "intents": ["billing"],
    "existingStories": [{"key": "PAY-1", "summary": "Retry payments", "intent": "billing"}],
    "tickets": [{"intent": "billing", "subject": "Charged twice", "description": "Refund please"}],
}


@pytest.fixture
def api():
    yield TestClient(app)
    app.dependency_overrides.clear()


def use_fake(fake: FakeOpenAI, settings=None):
    settings = settings or make_settings()
    client = OpenAIClient(settings, transport=fake.transport, sleep=RecordingSleep())
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_analyze_service] = lambda: AnalyzeService(settings, client)
    app.dependency_overrides[get_suggest_service] = lambda: SuggestStoriesService(settings, client)


def test_health(api):
    response = api.get("/api/health")
    assert response.status_code == 200
    assert response.text == "ok"


def test_analyze_success(api):
    use_fake(FakeOpenAI(completion({
        "score": 0.9, "summary": "Good.", "suggestions": ["a", "b", "c"], "likelihoodPercent": 70,
    })))
    response = api.post("/api/analyze", json=ANALYZE_BODY)
    assert response.status_code == 200
    assert response.json() == {
        "score": 0.9,
        "summary": "Good.",
        "suggestions": ["a", "b", "c"],
        "likelihoodPercent": 70,
    }


def test_analyze_without_kpi_has_no_likelihood_field(api):
    use_fake(FakeOpenAI(completion({"score": 0.4})), make_settings(kpi_likelihood_enabled=False))
    body = api.post("/api/analyze", json=ANALYZE_BODY).json()
    assert "likelihoodPercent" not in body
    assert body["score"] == 0.4


def test_analyze_malformed_content_is_not_an_error(api):
    use_fake(FakeOpenAI(completion("not json at all")))
    response = api.post("/api/analyze", json=ANALYZE_BODY)
    assert response.status_code == 200
    body = response.json()
    assert body["summary"] == "LLM returned no summary."
    assert len(body["suggestions"]) == 3
    assert body["score"] == 1.0
    assert body["likelihoodPercent"] == 100


def test_analyze_missing_key_is_500_without_network(api):
    fake = FakeOpenAI()
    use_fake(fake, make_settings(openai_api_key=None))
    response = api.post("/api/analyze", json=ANALYZE_BODY)
    assert response.status_code == 500
    assert response.json() == {"error": "Missing OPENAI_API_KEY"}
    assert fake.requests == []


def test_missing_key_through_default_wiring(api):
    app.dependency_overrides[get_settings] = lambda: make_settings(openai_api_key=None)
    response = api.post("/api/suggest_stories", json=SUGGEST_BODY)
    assert response.status_code == 500
    assert "OPENAI_API_KEY" in response.json()["error"]


def test_analyze_upstream_failure_is_502(api):
    fake = FakeOpenAI(httpx.Response(500, text="down"), httpx.Response(503, text="still down"))
    use_fake(fake)
    response = api.post("/api/analyze", json=ANALYZE_BODY)
    assert response.status_code == 502
    assert response.json() == {"error": "OpenAI error", "status": 503, "detail": "still down"}
    assert len(fake.requests) == 2


def test_unexpected_error_is_500(api):
    def handler(request):
        raise ValueError("surprise")

    settings = make_settings()
    client = OpenAIClient(settings, transport=httpx.MockTransport(handler), sleep=RecordingSleep())
    app.dependency_overrides[get_analyze_service] = lambda: AnalyzeService(settings, client)

    response = api.post("/api/analyze", json=ANALYZE_BODY)
    assert response.status_code == 500
    assert response.json() == {"error": "Unhandled error", "detail": "surprise"}


def test_analyze_accepts_minimal_body(api):
    use_fake(FakeOpenAI(completion("{}")))
    response = api.post("/api/analyze", json={})
    assert response.status_code == 200
    assert response.json()["score"] == 0.0
    assert response.json()["likelihoodPercent"] == 0


def test_suggest_stories_success(api):
    use_fake(FakeOpenAI(completion({"stories": [
        {"summary": f"story {i}", "intent": "billing", "storyPoints": i} for i in range(1, 6)
    ]})))
    response = api.post("/api/suggest_stories", json=SUGGEST_BODY)
    assert response.status_code == 200
    assert response.json() == {"stories": [
        {"summary": "story 1", "intent": "billing", "storyPoints": 1},
        {"summary": "story 2", "intent": "billing", "storyPoints": 2},
        {"summary": "story 3", "intent": "billing", "storyPoints": 3},
    ]}


def test_suggest_stories_upstream_failure(api):
    use_fake(FakeOpenAI(httpx.Response(403, text="forbidden")))
    response = api.post("/api/suggest_stories", json=SUGGEST_BODY)
    assert response.status_code == 502
    assert response.json()["status"] == 403


def test_lifespan_starts_and_stops():
    with TestClient(app) as client:
        assert client.get("/api/health").text == "ok"
