# app/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field


def _split_csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings(BaseModel):
    app_name: str = "Project Waste ROI Calculator API"
    lead_webhook_url: str = ""
    webhook_timeout_seconds: float = Field(10.0, gt=0)
    lead_source: str = "roi-calculator"
    payback_months_cap: float = Field(999.0, gt=0)
    cors_allow_origins: List[str] = ["*"]
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read settings from the environment (.env is loaded by app.main)."""
    return Settings(
        lead_webhook_url=os.getenv("LEAD_WEBHOOK_URL") or os.getenv("N8N_WEBHOOK_URL") or "",
        webhook_timeout_seconds=float(os.getenv("WEBHOOK_TIMEOUT_SECONDS", "10")),
        lead_source=os.getenv("LEAD_SOURCE", "roi-calculator"),
        payback_months_cap=float(os.getenv("PAYBACK_MONTHS_CAP", "999")),
        cors_allow_origins=_split_csv(os.getenv("CORS_ALLOW_ORIGINS", "*")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
