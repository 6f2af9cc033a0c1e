"""
Assist Router
=============
Endpoints for completions, insertion text, the catalog and templates.
"""
from fastapi import APIRouter, HTTPException

from widget_schema import api as core_api
from widget_schema.assist.insertion import InsertionError
from widget_schema.web_api.config import settings
from widget_schema.web_api.schemas.document import (
    CompletionRequest,
    CompletionResponse,
    InsertRequest,
    InsertResponse,
)

router = APIRouter()


@router.post("/complete", response_model=CompletionResponse)
async def complete(request: CompletionRequest):
    """Completion items for the text before the cursor."""
    return CompletionResponse(items=core_api.complete(request.line_prefix))


@router.post("/insert", response_model=InsertResponse)
async def insert(request: InsertRequest):
    """
    Insertion text for a typed field fragment.

    - **kind**: ``dropdown`` or ``html-editor``
    - **line** / **character**: zero-based cursor position
    """
    if len(request.text) > settings.MAX_DOCUMENT_CHARS:
        raise HTTPException(status_code=413, detail="Document too large")
    try:
        result = core_api.insert(request.text, request.line, request.character, request.kind)
    except InsertionError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return InsertResponse(**result)


@router.get("/catalog")
async def catalog():
    """The supported data types, in declaration order."""
    return {"data_types": core_api.catalog()}


@router.get("/templates/{name}")
async def template(name: str):
    """A named template rendered with a 4-space indent."""
    try:
        return {"name": name, "text": core_api.render_template(name)}
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown template: {name}")
