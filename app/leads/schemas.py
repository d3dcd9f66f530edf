# app/leads/schemas.py

import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LeadContact(_CamelModel):
    first_name: str = Field(..., min_length=1)
    email: str
    company: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def _check_email(cls, v: str) -> str:
        v = v.strip()
        if not _EMAIL_RE.match(v):
            raise ValueError("must be a valid email address")
        return v


class LeadCalculation(_CamelModel):
    total_annual_waste: float
    savings10: float
    savings15: float
    savings25: float


class LeadSubmission(_CamelModel):
    lead: LeadContact
    calculation: LeadCalculation


class LeadAck(BaseModel):
    success: bool = True


class LeadHealth(BaseModel):
    status: str = "ok"
    endpoint: str
    webhook_configured: bool
