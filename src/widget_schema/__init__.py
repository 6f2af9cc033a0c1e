"""widget_schema — validation and authoring assistance for widget schema documents."""

__all__ = [
    "__version__",
    "validate_text",
    "validate_file",
    "validate_path",
    "complete",
    "insert",
]
__version__ = "0.1.0"

# Programmatic engine entrypoints (backend use).
from widget_schema.api import (  # noqa: E402, F401
    complete,
    insert,
    validate_file,
    validate_path,
    validate_text,
)
