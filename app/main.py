# app/main.py

from pathlib import Path
from dotenv import load_dotenv

# -------------------------------------------------------------------
# Load .env BEFORE importing anything that relies on environment vars
# -------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

# -------------------------------------------------------------------
# FastAPI + CORS
# -------------------------------------------------------------------
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.logging_config import configure_logging

# Routers
from app.calculator.router import router as calculator_router
from app.leads.router import router as leads_router
from app.reports.router import router as reports_router

settings = get_settings()
configure_logging(settings.log_level)

# -------------------------------------------------------------------
# FastAPI APP CONFIG
# -------------------------------------------------------------------
app = FastAPI(
    title=settings.app_name,
    description="Annual project waste estimate, savings scenarios and lead capture.",
)


# -------------------------------------------------------------------
# MIDDLEWARE
# -------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------------------------------------------------
# ROUTES
# -------------------------------------------------------------------
app.include_router(
    calculator_router,
    prefix="/api/v1/calculator",
    tags=["Calculator"],
)

app.include_router(
    leads_router,
    prefix="/api/v1/leads",
    tags=["Leads"],
)

app.include_router(
    reports_router,
    prefix="/api/v1/reports",
    tags=["Reports"],
)


# -------------------------------------------------------------------
# ROOT PING / HEALTHCHECK
# -------------------------------------------------------------------
@app.get("/")
def read_root():
    return {
        "status": "ok",
        "service": settings.app_name,
    }
