# app/leads/service.py

import logging
from datetime import datetime, timezone
from typing import Any, Dict

import requests

from app.config import Settings
from .schemas import LeadSubmission

logger = logging.getLogger(__name__)


def build_webhook_payload(data: LeadSubmission, source: str) -> Dict[str, Any]:
    """Flat JSON body expected by the automation workflow."""
    return {
        # Lead contact info
        "firstName": data.lead.first_name,
        "email": data.lead.email,
        "company": data.lead.company,
        "role": data.lead.role,
        # Calculation results
        "totalAnnualWaste": data.calculation.total_annual_waste,
        "savings10": data.calculation.savings10,
        "savings15": data.calculation.savings15,
        "savings25": data.calculation.savings25,
        # Metadata
        "source": source,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def send_to_webhook(data: LeadSubmission, settings: Settings) -> bool:
    """
    Forward a lead to the automation webhook.

    Best effort: returns False on any failure and never raises, so a
    broken webhook can't take the report download down with it.
    """
    if not settings.lead_webhook_url:
        logger.warning("[webhook] LEAD_WEBHOOK_URL not set, lead for %s not forwarded", data.lead.company)
        return False

    payload = build_webhook_payload(data, settings.lead_source)
    logger.info("[webhook] Sending lead to %s", settings.lead_webhook_url)

    try:
        response = requests.post(
            settings.lead_webhook_url,
            json=payload,
            timeout=settings.webhook_timeout_seconds,
        )
    except requests.RequestException as e:
        logger.warning("[webhook] Error sending lead: %s", e)
        return False

    if not response.ok:
        logger.warning("[webhook] Webhook failed: %s %s", response.status_code, response.reason)
        return False

    logger.info("[webhook] Lead sent successfully")
    return True


def dispatch_lead(data: LeadSubmission, settings: Settings) -> None:
    """Background-task entry point."""
    ok = send_to_webhook(data, settings)
    logger.info("[lead] Captured lead from %s (%s)", data.lead.company, data.lead.role)
    if not ok:
        logger.warning("[lead] Webhook failed but continuing...")
