# app/calculator/router.py

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException

from app.config import Settings, get_settings
from . import service, share
from .fields import DEFAULT_INPUTS, INPUT_FIELDS
from .schemas import CalculatorInput, CalculatorOutput, InputFieldMeta, SharedInputsOut, ShareTokenOut
from .validation import ValidationError, validate_or_raise

router = APIRouter()


def _unprocessable(e: ValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})


@router.get(
    "/defaults",
    response_model=CalculatorInput,
    summary="Default inputs for Quick Estimate mode",
)
def get_default_inputs():
    return DEFAULT_INPUTS


@router.get(
    "/fields",
    response_model=List[InputFieldMeta],
    summary="Input field metadata (labels, tooltips, bounds)",
)
def list_input_fields():
    return INPUT_FIELDS


@router.post(
    "/roi",
    response_model=CalculatorOutput,
    summary="Compute waste breakdown and savings scenarios",
)
def calculate_roi(
    payload: Dict[str, Any] = Body(...),
    settings: Settings = Depends(get_settings),
):
    try:
        return service.compute_roi(payload, payback_cap=settings.payback_months_cap)
    except ValidationError as e:
        raise _unprocessable(e)


@router.post(
    "/share",
    response_model=ShareTokenOut,
    summary="Encode inputs into a shareable token",
)
def create_share_token(payload: Dict[str, Any] = Body(...)):
    try:
        inputs = validate_or_raise(payload)
    except ValidationError as e:
        raise _unprocessable(e)
    return ShareTokenOut(token=share.encode_share_token(inputs))


@router.get(
    "/share/{token}",
    response_model=SharedInputsOut,
    summary="Restore inputs from a share token (falls back to defaults)",
)
def read_share_token(token: str):
    inputs = share.decode_share_token(token)
    if inputs is None:
        return SharedInputsOut(inputs=DEFAULT_INPUTS, from_token=False)
    return SharedInputsOut(inputs=inputs, from_token=True)
