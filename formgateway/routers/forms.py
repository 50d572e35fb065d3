"""Form submission endpoints"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import Any, Dict
import logging

from formgateway.dependencies import get_form_handler, read_submission
from formgateway.exceptions import FormValidationError
from formgateway.models.forms import ErrorResponse, FormSubmitResponse, ValidationErrorResponse
from formgateway.services.form_handler import FormHandler

logger = logging.getLogger(__name__)
router = APIRouter()

RESPONSES = {
    400: {"model": ValidationErrorResponse},
    429: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


async def submit(handler: FormHandler, submission: Dict[str, Any]):
    """Run a submission through its handler, answering violations with 400"""
    try:
        return await handler.handle(submission)
    except FormValidationError as e:
        return JSONResponse(
            status_code=400,
            content=ValidationErrorResponse(errors=e.violations).model_dump(),
        )


@router.post("/submit-quote", response_model=FormSubmitResponse, responses=RESPONSES)
async def submit_quote(
    submission: Dict[str, Any] = Depends(read_submission),
    handler: FormHandler = Depends(get_form_handler("quote")),
):
    """Handle a quote request (PUBLIC endpoint)"""
    return await submit(handler, submission)


@router.post("/submit-guard", response_model=FormSubmitResponse, responses=RESPONSES)
async def submit_guard(
    submission: Dict[str, Any] = Depends(read_submission),
    handler: FormHandler = Depends(get_form_handler("guard")),
):
    """Handle a security guard job application (PUBLIC endpoint)"""
    return await submit(handler, submission)


@router.post("/submit-company", response_model=FormSubmitResponse, responses=RESPONSES)
async def submit_company(
    submission: Dict[str, Any] = Depends(read_submission),
    handler: FormHandler = Depends(get_form_handler("company")),
):
    """Handle a company security-service request (PUBLIC endpoint)"""
    return await submit(handler, submission)


@router.post("/submit-fleet-worker", response_model=FormSubmitResponse, responses=RESPONSES)
async def submit_fleet_worker(
    submission: Dict[str, Any] = Depends(read_submission),
    handler: FormHandler = Depends(get_form_handler("fleet-worker")),
):
    """Handle a fleet services worker application (PUBLIC endpoint)"""
    return await submit(handler, submission)
