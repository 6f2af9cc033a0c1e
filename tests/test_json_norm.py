"""Tests for the canonical JSON normalization layer."""

import json
from pathlib import Path

from widget_schema.model import Severity
from widget_schema.model.diagnostic import Diagnostic, Range
from widget_schema.utils.json_norm import stable_json_dump, stable_json_dumps


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    # Keys should be sorted in the serialized output
    assert s.index('"a"') < s.index('"b"')


def test_stable_json_dumps_normalizes_paths():
    s = stable_json_dumps({"p": Path("a") / "b"})
    obj = json.loads(s)
    assert obj["p"] == "a/b"


def test_stable_json_dumps_enums_and_dataclasses():
    d = Diagnostic(range=Range.from_coords(1, 2, 1, 5), message="m", rule_id="WS_DATA_TYPE_001")
    obj = json.loads(stable_json_dumps({"sev": Severity.WARNING, "d": d}))
    assert obj["sev"] == "warning"
    assert obj["d"]["range"]["start"] == {"line": 1, "character": 2}
    assert obj["d"]["severity"] == "error"


def test_stable_json_dumps_keeps_list_order():
    obj = json.loads(stable_json_dumps({"x": ["text", "image", "dropdown"]}))
    assert obj["x"] == ["text", "image", "dropdown"]


def test_stable_json_dump_writes_to_file_like(tmp_path):
    out = tmp_path / "x.json"
    with out.open("w", encoding="utf-8") as f:
        stable_json_dump({"b": 1, "a": 2}, f)
    txt = out.read_text(encoding="utf-8")
    assert txt.endswith("\n")
    assert '"a"' in txt and '"b"' in txt
