"""
Widget Schema Web API
=====================
FastAPI-based REST API exposing validation and authoring assistance.

Quick Start:
    uvicorn widget_schema.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
