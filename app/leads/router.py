# app/leads/router.py

from fastapi import APIRouter, BackgroundTasks, Depends

from app.config import Settings, get_settings
from .schemas import LeadAck, LeadHealth, LeadSubmission
from . import service

router = APIRouter()


@router.post(
    "",
    response_model=LeadAck,
    summary="Capture a lead and forward it to the automation webhook",
)
def submit_lead(
    payload: LeadSubmission,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(get_settings),
):
    # Webhook runs after the response; its outcome never reaches the user
    background_tasks.add_task(service.dispatch_lead, payload, settings)
    return LeadAck(success=True)


@router.get(
    "/health",
    response_model=LeadHealth,
    summary="Lead endpoint health check",
)
def lead_health(settings: Settings = Depends(get_settings)):
    return LeadHealth(
        endpoint="/api/v1/leads",
        webhook_configured=bool(settings.lead_webhook_url),
    )
