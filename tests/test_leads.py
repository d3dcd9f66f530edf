"""Lead capture and webhook forwarding."""

import pytest
import requests

from app.config import Settings
from app.leads.schemas import LeadSubmission
from app.leads.service import build_webhook_payload, send_to_webhook

from conftest import FakeResponse, WebhookRecorder


@pytest.fixture
def submission_body(sample_lead):
    return {
        "lead": sample_lead,
        "calculation": {
            "totalAnnualWaste": 2050000,
            "savings10": 205000,
            "savings15": 307500,
            "savings25": 512500,
        },
    }


@pytest.fixture
def submission(submission_body):
    return LeadSubmission(**submission_body)


class TestWebhookPayload:

    def test_flat_payload(self, submission):
        payload = build_webhook_payload(submission, "roi-calculator")

        assert payload["firstName"] == "Dana"
        assert payload["email"] == "dana@example.com"
        assert payload["company"] == "Acme Builders"
        assert payload["role"] == "PMO Director"
        assert payload["totalAnnualWaste"] == 2050000
        assert payload["savings10"] == 205000
        assert payload["savings15"] == 307500
        assert payload["savings25"] == 512500
        assert payload["source"] == "roi-calculator"
        assert payload["timestamp"].endswith("+00:00")


class TestSendToWebhook:

    def test_success(self, submission, settings, webhook):
        assert send_to_webhook(submission, settings) is True
        assert len(webhook.calls) == 1
        call = webhook.calls[0]
        assert call["url"] == settings.lead_webhook_url
        assert call["timeout"] == settings.webhook_timeout_seconds
        assert call["json"]["email"] == "dana@example.com"

    def test_http_error_returns_false(self, submission, settings, monkeypatch):
        recorder = WebhookRecorder(response=FakeResponse(502, "Bad Gateway"))
        monkeypatch.setattr("app.leads.service.requests.post", recorder)
        assert send_to_webhook(submission, settings) is False

    def test_network_error_returns_false(self, submission, settings, monkeypatch):
        recorder = WebhookRecorder(exc=requests.ConnectionError("refused"))
        monkeypatch.setattr("app.leads.service.requests.post", recorder)
        assert send_to_webhook(submission, settings) is False

    def test_unconfigured_url_skips_call(self, submission, webhook):
        assert send_to_webhook(submission, Settings(lead_webhook_url="")) is False
        assert webhook.calls == []


class TestLeadEndpoint:

    def test_submit_forwards_lead(self, client, submission_body, webhook):
        response = client.post("/api/v1/leads", json=submission_body)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert len(webhook.calls) == 1
        assert webhook.calls[0]["json"]["savings25"] == 512500

    def test_webhook_failure_does_not_fail_request(self, client, submission_body, monkeypatch):
        recorder = WebhookRecorder(exc=requests.Timeout("slow"))
        monkeypatch.setattr("app.leads.service.requests.post", recorder)

        response = client.post("/api/v1/leads", json=submission_body)
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert len(recorder.calls) == 1

    @pytest.mark.parametrize("field,value", [
        ("email", "not-an-email"),
        ("firstName", ""),
        ("company", ""),
        ("role", ""),
    ])
    def test_invalid_lead_rejected(self, client, submission_body, webhook, field, value):
        submission_body["lead"][field] = value
        response = client.post("/api/v1/leads", json=submission_body)

        assert response.status_code == 422
        assert webhook.calls == []

    def test_missing_calculation_rejected(self, client, sample_lead, webhook):
        response = client.post("/api/v1/leads", json={"lead": sample_lead})
        assert response.status_code == 422
        assert webhook.calls == []

    def test_health(self, client):
        response = client.get("/api/v1/leads/health")
        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "endpoint": "/api/v1/leads",
            "webhook_configured": True,
        }
