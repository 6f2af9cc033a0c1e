"""File discovery — find schema documents respecting exclusion patterns."""

from __future__ import annotations

from pathlib import Path

from widget_schema.core.config import ValidationConfig

# Default exclusion prefixes (relative to scan root).
_DEFAULT_EXCLUDES = frozenset(
    {
        ".git",
        ".github",
        ".venv",
        "venv",
        "__pycache__",
        "node_modules",
        "dist",
        "build",
        ".tox",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        ".vscode",
    }
)


def discover_schema_files(
    root: Path,
    config: ValidationConfig | None = None,
    *,
    exclude: list[str] | None = None,
) -> list[Path]:
    """Recursively find schema documents under *root*.

    Parameters
    ----------
    root:
        Directory to scan, or a single file (returned as-is).
    config:
        Supplies the recognised file suffixes and the size limit.
    exclude:
        Directory basenames to skip.  Merged with built-in defaults.

    Returns
    -------
    Sorted list of absolute ``Path`` objects.
    """
    cfg = config or ValidationConfig()
    if root.is_file():
        return [root.resolve()]

    skip = _DEFAULT_EXCLUDES | set(exclude or [])
    results: list[Path] = []
    for p in root.rglob("*"):
        try:
            if not p.is_file() or not cfg.matches_suffix(p.name):
                continue
            if any(part in skip for part in p.relative_to(root).parts):
                continue
            if p.stat().st_size > cfg.max_document_bytes:
                continue
        except OSError:
            continue
        results.append(p.resolve())

    return sorted(set(results))
