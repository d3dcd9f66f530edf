# app/reports/schemas.py

from typing import Any, Dict

from pydantic import BaseModel

from app.leads.schemas import LeadContact


class ReportRequest(BaseModel):
    lead: LeadContact
    # validated by the calculator so field errors match /calculator/roi
    inputs: Dict[str, Any]
