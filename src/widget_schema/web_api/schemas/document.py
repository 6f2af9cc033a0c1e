"""
Document Schemas
================
Request and response models for validation and assist endpoints.
"""
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class ValidateRequest(BaseModel):
    """Request to validate a schema document"""

    text: str = Field(..., description="Full document text")
    uri: str = Field(default="untitled:schema.json", description="Document identity")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": '{"sliders": {"data_type": "nested", "key": "sliders", "label": "Sliders"}}',
                "uri": "file:///widgets/sliders.json",
            }
        }
    )


class PositionModel(BaseModel):
    line: int = Field(..., ge=0)
    character: int = Field(..., ge=0)


class RangeModel(BaseModel):
    start: PositionModel
    end: PositionModel


class DiagnosticModel(BaseModel):
    """One validation finding"""

    range: RangeModel
    message: str
    severity: str = Field(default="error")
    rule_id: str
    source: str = Field(default="widget-schema")


class ValidateResponse(BaseModel):
    """Diagnostics for one document; replaces any previous set"""

    uri: str
    diagnostics: List[DiagnosticModel] = Field(default_factory=list)
    count: int = Field(default=0)


class CompletionRequest(BaseModel):
    line_prefix: str = Field(..., description="Line text from its start up to the cursor")


class CompletionResponse(BaseModel):
    items: List[Dict[str, Any]] = Field(default_factory=list)


class InsertRequest(BaseModel):
    """Request for a typed field fragment at a cursor"""

    text: str = Field(..., description="Full document text")
    line: int = Field(..., ge=0, description="Zero-based cursor line")
    character: int = Field(..., ge=0, description="Zero-based cursor column")
    kind: Literal["dropdown", "html-editor"]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": '{\n    "choice": {\n        "data_type": \n    }\n}',
                "line": 2,
                "character": 21,
                "kind": "dropdown",
            }
        }
    )


class InsertResponse(BaseModel):
    text: str
    line: int
    character: int
