"""
widget_schema.api
=================

Programmatic entrypoints for using widget_schema as a backend engine.

Goals:
  - No argparse / CLI dependencies
  - Stable, JSON-friendly outputs that match ``diagnostics.schema.json``

Non-goals:
  - Owning the editor (document buffers, cursors, edit application)
  - Owning presentation — callers render diagnostics and completions

Usage::

    from widget_schema.api import validate_text, validate_path, complete

    diagnostics = validate_text('{"img": {"data_type": "picture"}}')
    report = validate_path("schemas/")
    items = complete('    "data_type":')
"""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from widget_schema import __version__
from widget_schema.assist.completion import provide_completions
from widget_schema.assist.insertion import plan_insertion
from widget_schema.catalog import DATA_TYPES, TEMPLATES, to_plain
from widget_schema.contracts.load import validate_instance
from widget_schema.core.config import ValidationConfig
from widget_schema.core.discover import discover_schema_files
from widget_schema.core.orchestrator import DocumentSnapshot, ValidationOrchestrator
from widget_schema.model.diagnostic import Diagnostic

REPORT_SCHEMA = "diagnostics.schema.json"
DEFAULT_URI = "untitled:schema.json"


def _to_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


# ── validation ──────────────────────────────────────────────────────


def validate_text(
    text: str,
    *,
    uri: str = DEFAULT_URI,
    orchestrator: Optional[ValidationOrchestrator] = None,
) -> list[Diagnostic]:
    """Validate a single document held in memory."""
    engine = orchestrator or ValidationOrchestrator()
    return engine.validate(DocumentSnapshot(uri=uri, text=text))


def validate_file(
    path: str | Path,
    *,
    orchestrator: Optional[ValidationOrchestrator] = None,
) -> list[Diagnostic]:
    """Validate one schema document on disk.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    """
    p = _to_path(path)
    if not p.is_file():
        raise FileNotFoundError(f"validate_file: file does not exist: {p}")
    text = p.read_text(encoding="utf-8", errors="replace")
    return validate_text(text, uri=p.as_posix(), orchestrator=orchestrator)


def build_report(results: Mapping[str, Sequence[Diagnostic]]) -> dict[str, Any]:
    """Assemble the ``diagnostics_v1`` report and check it against its schema."""
    by_rule: Counter[str] = Counter()
    documents = []
    for uri, diagnostics in results.items():
        by_rule.update(d.rule_id for d in diagnostics)
        documents.append({"uri": uri, "diagnostics": [d.to_dict() for d in diagnostics]})

    report = {
        "schema_version": "diagnostics_v1",
        "tool_version": __version__,
        "documents": documents,
        "summary": {
            "documents_total": len(documents),
            "diagnostics_total": sum(by_rule.values()),
            "by_rule": dict(sorted(by_rule.items())),
        },
    }
    validate_instance(report, REPORT_SCHEMA)
    return report


def collect_diagnostics(
    root: str | Path,
    *,
    config: Optional[ValidationConfig] = None,
    exclude: Optional[list[str]] = None,
) -> dict[str, list[Diagnostic]]:
    """Validate a file, or every schema document under a directory.

    Returns diagnostics keyed by the document's POSIX path.

    Raises
    ------
    FileNotFoundError
        If *root* does not exist.
    """
    root_p = _to_path(root)
    if not root_p.exists():
        raise FileNotFoundError(f"validate_path: root does not exist: {root_p}")

    cfg = config or ValidationConfig()
    orchestrator = ValidationOrchestrator(config=cfg)
    results: dict[str, list[Diagnostic]] = {}
    for path in discover_schema_files(root_p, cfg, exclude=exclude):
        results[path.as_posix()] = validate_file(path, orchestrator=orchestrator)
    return results


def validate_path(
    root: str | Path,
    *,
    config: Optional[ValidationConfig] = None,
    exclude: Optional[list[str]] = None,
) -> dict[str, Any]:
    """Like :func:`collect_diagnostics`, returning the ``diagnostics_v1`` report."""
    return build_report(collect_diagnostics(root, config=config, exclude=exclude))


# ── assistance ──────────────────────────────────────────────────────


def complete(line_prefix: str) -> list[dict[str, Any]]:
    """Completion items for the text before the cursor, as dicts."""
    return [item.to_dict() for item in provide_completions(line_prefix)]


def insert(text: str, line: int, character: int, kind: str) -> dict[str, Any]:
    """Insertion text for *kind* (``dropdown`` or ``html-editor``) at a cursor."""
    return plan_insertion(text, line, character, kind).to_dict()


def catalog() -> list[dict[str, Any]]:
    return [
        {
            "identifier": d.identifier,
            "detail": d.detail,
            "description": d.description,
            "example": to_plain(d.example) if d.example is not None else None,
        }
        for d in DATA_TYPES.values()
    ]


def render_template(name: str = "widget-template") -> str:
    """Pretty-print a named template with a 4-space indent.

    Raises ``KeyError`` for unknown template names.
    """
    return json.dumps(to_plain(TEMPLATES[name].body), indent=4)
