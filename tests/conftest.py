import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app


class FakeResponse:
    def __init__(self, status_code=200, reason="OK"):
        self.status_code = status_code
        self.reason = reason

    @property
    def ok(self):
        return self.status_code < 400


class WebhookRecorder:
    """Stands in for requests.post and remembers every call."""

    def __init__(self, response=None, exc=None):
        self.calls = []
        self.response = response or FakeResponse()
        self.exc = exc

    def __call__(self, url, json=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def settings():
    return Settings(lead_webhook_url="https://hooks.example.test/lead-mag", webhook_timeout_seconds=2)


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def webhook(monkeypatch):
    recorder = WebhookRecorder()
    monkeypatch.setattr("app.leads.service.requests.post", recorder)
    return recorder


@pytest.fixture
def sample_inputs():
    return {
        "projectsPerYear": 10,
        "avgBudgetPerProject": 500000,
        "avgCostOverrunPct": 15,
        "avgScheduleSlipWeeks": 4,
        "costPerWeekOfDelay": 25000,
        "probMajorIssuePct": 30,
        "avgCostPerMajorIssue": 100000,
        "engagementCost": 5000,
    }


@pytest.fixture
def sample_lead():
    return {
        "firstName": "Dana",
        "email": "dana@example.com",
        "company": "Acme Builders",
        "role": "PMO Director",
    }
