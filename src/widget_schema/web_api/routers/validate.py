"""
Validate Router
===============
Endpoints for validating schema documents.
"""
from fastapi import APIRouter, HTTPException

from widget_schema import api as core_api
from widget_schema.web_api.config import settings
from widget_schema.web_api.schemas.document import (
    DiagnosticModel,
    ValidateRequest,
    ValidateResponse,
)

router = APIRouter()


@router.post("/validate", response_model=ValidateResponse)
async def validate_document(request: ValidateRequest):
    """
    Validate one schema document.

    - **text**: Full document text
    - **uri**: Document identity echoed back in the response
    """
    if len(request.text) > settings.MAX_DOCUMENT_CHARS:
        raise HTTPException(status_code=413, detail="Document too large")

    diagnostics = core_api.validate_text(request.text, uri=request.uri)
    return ValidateResponse(
        uri=request.uri,
        diagnostics=[DiagnosticModel(**d.to_dict()) for d in diagnostics],
        count=len(diagnostics),
    )
