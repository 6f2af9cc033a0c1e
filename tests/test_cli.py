"""CLI tests — ``main(argv)`` in-process, output captured with capsys."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from widget_schema.__main__ import main
from widget_schema.utils.exit_codes import ExitCode

GOOD = '{"f": {"data_type": "text", "key": "f", "label": "F"}}'
BAD = '{"sliders":{"data_type":"nested","key":"wrong","label":"Sliders"}}'


@pytest.fixture
def good_file(tmp_path: Path) -> Path:
    p = tmp_path / "good.json"
    p.write_text(GOOD, encoding="utf-8")
    return p


@pytest.fixture
def bad_file(tmp_path: Path) -> Path:
    p = tmp_path / "bad.json"
    p.write_text(BAD, encoding="utf-8")
    return p


class TestValidate:
    def test_clean_document_exits_zero(self, good_file, capsys):
        assert main([str(good_file)]) == ExitCode.SUCCESS
        assert "0 diagnostic(s) in 1 document(s)" in capsys.readouterr().err

    def test_violation_exits_one(self, bad_file, capsys):
        assert main(["validate", str(bad_file)]) == ExitCode.VIOLATION
        out = capsys.readouterr().out
        assert ":1:40: error: Keys should equal object names!" in out
        assert "[WS_KEY_MISMATCH_001]" in out

    def test_json_report(self, good_file, bad_file, capsys):
        assert main(["validate", str(good_file), str(bad_file), "--json"]) == ExitCode.VIOLATION
        report = json.loads(capsys.readouterr().out)
        assert report["schema_version"] == "diagnostics_v1"
        assert report["summary"]["documents_total"] == 2
        assert report["summary"]["by_rule"] == {"WS_KEY_MISMATCH_001": 1}

    def test_default_mode_matches_validate(self, bad_file, capsys):
        main([str(bad_file), "--json"])
        a = capsys.readouterr().out
        main(["validate", str(bad_file), "--json"])
        b = capsys.readouterr().out
        assert a == b

    def test_directory_and_exclude(self, tmp_path, capsys):
        (tmp_path / "skip").mkdir()
        (tmp_path / "skip" / "bad.json").write_text(BAD, encoding="utf-8")
        (tmp_path / "ok.json").write_text(GOOD, encoding="utf-8")
        assert main(["validate", str(tmp_path), "--exclude", "skip"]) == ExitCode.SUCCESS
        assert main(["validate", str(tmp_path)]) == ExitCode.VIOLATION

    def test_missing_path_is_an_error(self, tmp_path, capsys):
        assert main(["validate", str(tmp_path / "nope.json")]) == ExitCode.ERROR
        assert "does not exist" in capsys.readouterr().err

    def test_no_arguments(self, capsys):
        assert main([]) == ExitCode.ERROR


class TestAssistCommands:
    def test_complete(self, capsys):
        assert main(["complete", '    "data_type":']) == ExitCode.SUCCESS
        items = json.loads(capsys.readouterr().out)
        assert [i["label"] for i in items] == ["text", "image", "dropdown", "area", "nested"]

    def test_catalog_text(self, capsys):
        assert main(["catalog"]) == ExitCode.SUCCESS
        out = capsys.readouterr().out.splitlines()
        assert len(out) == 5
        assert out[0].startswith("text ")

    def test_catalog_json(self, capsys):
        assert main(["catalog", "--json"]) == ExitCode.SUCCESS
        assert len(json.loads(capsys.readouterr().out)) == 5

    def test_template(self, capsys):
        assert main(["template"]) == ExitCode.SUCCESS
        assert "sliders" in json.loads(capsys.readouterr().out)

    def test_template_list(self, capsys):
        assert main(["template", "--list"]) == ExitCode.SUCCESS
        assert capsys.readouterr().out.startswith("widget-template: ")

    def test_unknown_template(self, capsys):
        assert main(["template", "--name", "nope"]) == ExitCode.ERROR
        assert "unknown template" in capsys.readouterr().err


class TestInsert:
    DOC = '{\n    "choice": {\n        "data_type": \n    }\n}'

    def test_prints_fragment(self, tmp_path, capsys):
        p = tmp_path / "w.json"
        p.write_text(self.DOC, encoding="utf-8")
        assert main(["insert", str(p), "--line", "2", "--kind", "dropdown"]) == ExitCode.SUCCESS
        out = capsys.readouterr().out
        assert out.startswith('"dropdown",\n        "choices": {')
        assert p.read_text(encoding="utf-8") == self.DOC

    def test_write_then_validate(self, tmp_path, capsys):
        p = tmp_path / "w.json"
        p.write_text(self.DOC, encoding="utf-8")
        assert main(["insert", str(p), "--line", "2", "--kind", "dropdown", "--write"]) == 0
        doc = json.loads(p.read_text(encoding="utf-8"))
        assert doc["choice"]["data_type"] == "dropdown"
        doc["choice"].update(key="choice", label="Choice")
        p.write_text(json.dumps(doc, indent=4), encoding="utf-8")
        assert main(["validate", str(p)]) == ExitCode.SUCCESS

    def test_bad_line(self, tmp_path, capsys):
        p = tmp_path / "w.json"
        p.write_text(self.DOC, encoding="utf-8")
        assert main(["insert", str(p), "--line", "50", "--kind", "html-editor"]) == ExitCode.ERROR
        assert "error:" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        code = main(["insert", str(tmp_path / "x.json"), "--line", "0", "--kind", "dropdown"])
        assert code == ExitCode.ERROR
