"""CLI entry-point for widget_schema.

Usage:
    python -m widget_schema <path>
    python -m widget_schema <path> --json
    python -m widget_schema validate <path> [<path> ...] [--json] [--exclude DIR ...]
    python -m widget_schema complete <line-prefix>
    python -m widget_schema insert <file> --line N --column C --kind dropdown|html-editor [--write]
    python -m widget_schema catalog [--json]
    python -m widget_schema template [--name NAME] [--list]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from widget_schema import __version__
from widget_schema.api import (
    catalog as _api_catalog,
    complete as _api_complete,
    insert as _api_insert,
    render_template as _api_render_template,
    build_report as _api_build_report,
    collect_diagnostics as _api_collect_diagnostics,
)
from widget_schema.assist.insertion import InsertionError, InsertionKind
from widget_schema.catalog import TEMPLATES
from widget_schema.utils.exit_codes import ExitCode
from widget_schema.utils.json_norm import stable_json_dump, stable_json_dumps

_logger = logging.getLogger("widget_schema")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_human(report: dict) -> None:
    """Print ``path:line:col: severity: message [RULE]`` lines to stdout."""
    for document in report.get("documents", []):
        uri = document.get("uri", "?")
        for d in document.get("diagnostics", []):
            start = d["range"]["start"]
            # Editors count lines and columns from 1.
            print(
                f"{uri}:{start['line'] + 1}:{start['character'] + 1}: "
                f"{d['severity']}: {d['message']} [{d['rule_id']}]"
            )

    summary = report.get("summary", {})
    total = summary.get("diagnostics_total", 0)
    docs = summary.get("documents_total", 0)
    print(f"\n{total} diagnostic(s) in {docs} document(s)", file=sys.stderr)


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging on stderr.",
    )


def _add_validate_args(p: argparse.ArgumentParser, *, many: bool) -> None:
    p.add_argument(
        "paths" if many else "path",
        nargs="+" if many else None,
        type=Path,
        help="Schema document(s) or directories to validate.",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the diagnostics_v1 report JSON to stdout.",
    )
    p.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="DIR",
        help="Directory basename to skip while discovering documents (repeatable).",
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="widget-schema",
        description="Validate and scaffold widget schema documents.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = p.add_subparsers(dest="command")

    # ── validate ────────────────────────────────────────────────────
    val_p = sub.add_parser("validate", help="Validate schema documents.")
    _add_validate_args(val_p, many=True)
    _add_common(val_p)

    # ── complete ────────────────────────────────────────────────────
    comp_p = sub.add_parser(
        "complete",
        help="List completions for the text before the cursor.",
    )
    comp_p.add_argument("prefix", help='Line text up to the cursor, e.g. \'"data_type":\'')
    _add_common(comp_p)

    # ── insert ──────────────────────────────────────────────────────
    ins_p = sub.add_parser(
        "insert",
        help="Generate a typed field fragment for a cursor position.",
    )
    ins_p.add_argument("file", type=Path, help="Schema document to insert into.")
    ins_p.add_argument("--line", type=int, required=True, help="Zero-based cursor line.")
    ins_p.add_argument(
        "--column",
        type=int,
        default=None,
        help="Zero-based cursor column (default: end of line).",
    )
    ins_p.add_argument(
        "--kind",
        choices=[k.value for k in InsertionKind],
        required=True,
        help="Fragment to insert.",
    )
    ins_p.add_argument(
        "--write",
        action="store_true",
        default=False,
        help="Apply the insertion to the file instead of printing it.",
    )
    _add_common(ins_p)

    # ── catalog ─────────────────────────────────────────────────────
    cat_p = sub.add_parser("catalog", help="List the supported data types.")
    cat_p.add_argument("--json", dest="json_out", action="store_true", default=False)
    _add_common(cat_p)

    # ── template ────────────────────────────────────────────────────
    tpl_p = sub.add_parser("template", help="Print a widget template.")
    tpl_p.add_argument("--name", default="widget-template", help="Template name.")
    tpl_p.add_argument(
        "--list",
        dest="list_only",
        action="store_true",
        default=False,
        help="List template names instead of printing one.",
    )
    _add_common(tpl_p)
    return p


def _build_default_parser() -> argparse.ArgumentParser:
    """Parser for default positional mode.

    Argparse subparsers greedily consume the first positional token, so
    ``widget-schema <path> --json`` would treat ``<path>`` as a command.
    This parser is used when the first positional token is *not* a known
    subcommand.
    """
    p = argparse.ArgumentParser(
        prog="widget-schema",
        description="Validate and scaffold widget schema documents.",
    )
    _add_validate_args(p, many=False)
    _add_common(p)
    p.set_defaults(command=None)
    return p


# ── handlers ────────────────────────────────────────────────────────


def _handle_validate(paths: list[Path], *, json_out: bool, exclude: list[str]) -> int:
    results = {}
    for path in paths:
        try:
            results.update(_api_collect_diagnostics(path, exclude=exclude))
        except FileNotFoundError as e:
            print(f"error: {e}", file=sys.stderr)
            return ExitCode.ERROR

    report = _api_build_report(results)
    if json_out:
        stable_json_dump(report, sys.stdout)
    else:
        _print_human(report)
    return ExitCode.VIOLATION if report["summary"]["diagnostics_total"] else ExitCode.SUCCESS


def _handle_insert(args: argparse.Namespace) -> int:
    path: Path = args.file
    if not path.is_file():
        print(f"error: file does not exist: {path}", file=sys.stderr)
        return ExitCode.ERROR

    text = path.read_text(encoding="utf-8")
    lines = text.split("\n")
    column = args.column
    if column is None and 0 <= args.line < len(lines):
        column = len(lines[args.line])
    try:
        insertion = _api_insert(text, args.line, column if column is not None else 0, args.kind)
    except InsertionError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if not args.write:
        print(insertion["text"])
        return ExitCode.SUCCESS

    target = lines[insertion["line"]]
    col = insertion["character"]
    lines[insertion["line"]] = target[:col] + insertion["text"] + target[col:]
    path.write_text("\n".join(lines), encoding="utf-8")
    _logger.info("Inserted %s fragment into %s", args.kind, path)
    return ExitCode.SUCCESS


def _handle_catalog(args: argparse.Namespace) -> int:
    entries = _api_catalog()
    if args.json_out:
        stable_json_dump(entries, sys.stdout)
        return ExitCode.SUCCESS
    width = max(len(e["identifier"]) for e in entries)
    for e in entries:
        print(f"{e['identifier']:<{width}}  {e['detail']}: {e['description']}")
    return ExitCode.SUCCESS


def _handle_template(args: argparse.Namespace) -> int:
    if args.list_only:
        for name, template in TEMPLATES.items():
            print(f"{name}: {template.description}")
        return ExitCode.SUCCESS
    try:
        print(_api_render_template(args.name))
    except KeyError:
        print(
            f"error: unknown template {args.name!r} (known: {', '.join(TEMPLATES)})",
            file=sys.stderr,
        )
        return ExitCode.ERROR
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = clean, 1 = diagnostics, 2 = error)."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]

    known_commands = {"validate", "complete", "insert", "catalog", "template"}
    first_positional = next(
        (a for a in effective_argv if not a.startswith("-")), None
    )
    if first_positional and first_positional not in known_commands:
        args = _build_default_parser().parse_args(effective_argv)
    else:
        args = _build_parser().parse_args(effective_argv)

    _configure_logging(getattr(args, "verbose", False))

    if args.command == "validate":
        return _handle_validate(args.paths, json_out=args.json_out, exclude=args.exclude)

    if args.command == "complete":
        print(stable_json_dumps(_api_complete(args.prefix)), end="")
        return ExitCode.SUCCESS

    if args.command == "insert":
        return _handle_insert(args)

    if args.command == "catalog":
        return _handle_catalog(args)

    if args.command == "template":
        return _handle_template(args)

    # ── default positional-path mode ────────────────────────────────
    if getattr(args, "path", None) is None:
        print("error: please provide a path or use a subcommand.", file=sys.stderr)
        return ExitCode.ERROR

    return _handle_validate([args.path], json_out=args.json_out, exclude=args.exclude)


if __name__ == "__main__":
    raise SystemExit(main())
