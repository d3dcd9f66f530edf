# app/reports/router.py

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from fastapi.responses import Response

from app.calculator import service as calculator_service
from app.calculator.validation import ValidationError
from app.config import Settings, get_settings
from app.leads import service as lead_service
from app.leads.schemas import LeadCalculation, LeadSubmission
from .pdf import render_roi_report, report_filename
from .schemas import ReportRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/roi",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
    summary="Compute ROI, notify the webhook and download the PDF report",
)
def download_roi_report(
    payload: ReportRequest,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(get_settings),
):
    # 1. Compute (invalid input blocks both the report and the notification)
    try:
        result = calculator_service.compute_roi(payload.inputs, payback_cap=settings.payback_months_cap)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})

    # 2. Render
    try:
        pdf_bytes = render_roi_report(result, payload.lead)
    except Exception as e:
        logger.exception("[report] PDF rendering failed")
        raise HTTPException(status_code=500, detail=f"Failed to render report: {e}")

    # 3. Notify (best effort, after the response)
    submission = LeadSubmission(
        lead=payload.lead,
        calculation=LeadCalculation(**calculator_service.notification_figures(result)),
    )
    background_tasks.add_task(lead_service.dispatch_lead, submission, settings)

    filename = report_filename(payload.lead.company)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
