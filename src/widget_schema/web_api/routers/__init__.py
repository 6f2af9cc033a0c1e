"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import assist, health, validate

__all__ = ["assist", "health", "validate"]
