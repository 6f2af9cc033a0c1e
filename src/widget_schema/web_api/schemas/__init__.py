"""
Pydantic Schemas
================
Request and response models for the API.
"""
from .document import (
    CompletionRequest,
    CompletionResponse,
    DiagnosticModel,
    InsertRequest,
    InsertResponse,
    ValidateRequest,
    ValidateResponse,
)

__all__ = [
    "CompletionRequest",
    "CompletionResponse",
    "DiagnosticModel",
    "InsertRequest",
    "InsertResponse",
    "ValidateRequest",
    "ValidateResponse",
]
