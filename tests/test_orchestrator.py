"""Tests for the validation orchestrator and its diagnostic collection."""

from __future__ import annotations

import json
import logging

import pytest

from widget_schema.core.config import ValidationConfig
from widget_schema.core.orchestrator import (
    DiagnosticCollection,
    DocumentSnapshot,
    OrchestratorState,
    ReentrantValidationError,
    ValidationOrchestrator,
    parse_document,
)
from widget_schema.model import Severity
from widget_schema.rules import (
    WS_DATA_TYPE_001,
    WS_HTML_EDITOR_001,
    WS_INVALID_JSON_001,
    WS_KEY_MISMATCH_001,
    WS_MISSING_PROPS_001,
    WS_ROOT_OBJECT_001,
)


def _snap(text: str, uri: str = "file:///w/schema.json", **kw) -> DocumentSnapshot:
    return DocumentSnapshot(uri=uri, text=text, **kw)


@pytest.fixture
def orchestrator() -> ValidationOrchestrator:
    return ValidationOrchestrator()


class TestParseDocument:
    def test_parses_objects(self):
        assert parse_document('{"a": 1}') == {"a": 1}

    @pytest.mark.parametrize("bad", ["", "{", '{"a": NaN}', '{"a": Infinity}', "{'a': 1}"])
    def test_rejects_malformed(self, bad):
        with pytest.raises(ValueError):
            parse_document(bad)


class TestMalformedDocuments:
    @pytest.mark.parametrize("text", ["", "{", '{"a": }', '{"a": NaN}', "not json"])
    def test_single_diagnostic_at_document_start(self, orchestrator, text):
        out = orchestrator.validate(_snap(text))
        assert len(out) == 1
        d = out[0]
        assert d.rule_id == WS_INVALID_JSON_001
        assert d.message.startswith("Invalid JSON format: ")
        assert d.range.to_tuple() == (0, 0, 0, 1)
        assert d.severity is Severity.ERROR

    @pytest.mark.parametrize("text", ["[]", "[{}]", "42", '"text"', "null", "true"])
    def test_non_object_root(self, orchestrator, text):
        out = orchestrator.validate(_snap(text))
        assert [d.rule_id for d in out] == [WS_ROOT_OBJECT_001]
        assert out[0].range.to_tuple() == (0, 0, 0, 1)

    def test_empty_object_is_clean(self, orchestrator):
        assert orchestrator.validate(_snap("{}")) == []


class TestEndToEnd:
    def test_key_mismatch_example(self, orchestrator):
        text = '{"sliders":{"data_type":"nested","key":"wrong","label":"Sliders"}}'
        out = orchestrator.validate(_snap(text))
        assert [d.message for d in out] == [
            'Keys should equal object names! Expected: "sliders", Found: "wrong"'
        ]

    def test_data_type_example(self, orchestrator):
        text = '{"img":{"data_type":"picture","key":"img","label":"Img"}}'
        out = orchestrator.validate(_snap(text))
        assert [d.message for d in out] == [
            "Invalid data_type. Expected one of: text, image, dropdown, area, nested"
        ]

    def test_html_editor_example_is_clean(self, orchestrator):
        text = '{"f":{"data_type":"area","key":"f","label":"F","display":"html-editor"}}'
        assert orchestrator.validate(_snap(text)) == []

    def test_passes_report_in_fixed_order(self, orchestrator):
        text = json.dumps(
            {
                "a": {"data_type": "bogus", "key": "x", "label": "A", "display": "html-editor"},
                "b": {"key": "b"},
            },
            indent=2,
        )
        out = orchestrator.validate(_snap(text))
        assert [d.rule_id for d in out] == [
            WS_KEY_MISMATCH_001,
            WS_MISSING_PROPS_001,
            WS_DATA_TYPE_001,
            WS_HTML_EDITOR_001,
        ]

    def test_validation_is_idempotent(self, orchestrator):
        text = '{"a": {"key": "z"}, "b": {"data_type": "x", "key": "b", "label": "B"}}'
        first = orchestrator.validate(_snap(text))
        second = orchestrator.validate(_snap(text))
        assert first == second
        assert len(first) == 3

    def test_deep_valid_nesting_with_one_mismatch(self, orchestrator):
        depth = 100
        inner: dict = {"data_type": "text", "key": "wrong", "label": "Leaf"}
        name = "leaf"
        for level in range(depth):
            inner = {name: inner}
            name = f"n{level}"
            inner = {"data_type": "nested", "key": name, "label": name, "schema": inner}
        doc = {name: inner}
        out = orchestrator.validate(_snap(json.dumps(doc)))
        assert [d.rule_id for d in out] == [WS_KEY_MISMATCH_001]
        assert 'Expected: "leaf", Found: "wrong"' in out[0].message


class _FailingPass:
    id = "boom"
    version = "0.0.1"

    def run(self, root, text, diagnostics):
        diagnostics.append(None)
        raise RuntimeError("boom")


class _ReentrantPass:
    id = "reentrant"
    version = "0.0.1"

    def __init__(self):
        self.orchestrator = None
        self.errors = []

    def run(self, root, text, diagnostics):
        try:
            self.orchestrator.validate(DocumentSnapshot(uri="inner.json", text="{}"))
        except ReentrantValidationError as exc:
            self.errors.append(exc)


class TestPassIsolation:
    def test_failing_pass_is_logged_and_skipped(self, caplog):
        from widget_schema.analyzers import default_passes

        orchestrator = ValidationOrchestrator(passes=[_FailingPass(), *default_passes()])
        text = '{"img":{"data_type":"picture","key":"img","label":"Img"}}'
        with caplog.at_level(logging.ERROR, logger="widget_schema.core.orchestrator"):
            out = orchestrator.validate(_snap(text))
        assert [d.rule_id for d in out] == [WS_DATA_TYPE_001]
        assert "Validation pass 'boom' raised an exception" in caplog.text

    def test_reentrant_validate_is_refused(self):
        probe = _ReentrantPass()
        orchestrator = ValidationOrchestrator(passes=[probe])
        probe.orchestrator = orchestrator
        orchestrator.validate(_snap("{}"))
        assert len(probe.errors) == 1
        assert orchestrator.state is OrchestratorState.IDLE

    def test_state_returns_to_idle_after_malformed_input(self, orchestrator):
        orchestrator.validate(_snap("{"))
        assert orchestrator.state is OrchestratorState.IDLE


class TestPublishing:
    def test_publish_replaces_previous_entry(self, orchestrator):
        uri = "file:///w/a.json"
        orchestrator.publish(_snap('{"a": {"key": "b"}}', uri=uri))
        assert len(orchestrator.collection.get(uri)) == 2
        orchestrator.publish(_snap('{"a": {"data_type": "text", "key": "a", "label": "A"}}', uri=uri))
        assert orchestrator.collection.get(uri) == ()
        assert uri in orchestrator.collection

    def test_close_clears_entry(self, orchestrator):
        snap = _snap("{")
        orchestrator.on_document_changed(snap)
        assert snap.uri in orchestrator.collection
        orchestrator.on_document_closed(snap)
        assert snap.uri not in orchestrator.collection
        assert orchestrator.collection.get(snap.uri) == ()

    def test_non_schema_documents_are_ignored(self, orchestrator):
        snap = DocumentSnapshot(uri="file:///w/readme.md", text="# hi", language_id="markdown")
        assert orchestrator.on_document_changed(snap) is None
        assert len(orchestrator.collection) == 0

    def test_suffix_match_without_json_language(self, orchestrator):
        snap = DocumentSnapshot(uri="file:///w/widget.JSON", text="{", language_id="plaintext")
        out = orchestrator.on_document_changed(snap)
        assert out is not None and len(out) == 1

    def test_activation_without_editor_is_a_no_op(self, orchestrator):
        assert orchestrator.on_document_activated(None) is None

    def test_activation_validates(self, orchestrator):
        out = orchestrator.on_document_activated(_snap("[]"))
        assert [d.rule_id for d in out] == [WS_ROOT_OBJECT_001]

    def test_dispose_clears_everything(self, orchestrator):
        orchestrator.publish(_snap("{}", uri="a.json"))
        orchestrator.publish(_snap("{}", uri="b.json"))
        assert orchestrator.collection.uris() == ["a.json", "b.json"]
        orchestrator.dispose()
        assert len(orchestrator.collection) == 0

    def test_shared_collection(self):
        collection = DiagnosticCollection(name="shared")
        orchestrator = ValidationOrchestrator(collection=collection)
        orchestrator.publish(_snap("{", uri="x.json"))
        assert len(collection.get("x.json")) == 1

    def test_custom_language_ids(self):
        orchestrator = ValidationOrchestrator(
            config=ValidationConfig(language_ids=("jsonc",), file_suffixes=(".widget",))
        )
        assert orchestrator.is_schema_document(
            DocumentSnapshot(uri="a.txt", text="", language_id="jsonc")
        )
        assert orchestrator.is_schema_document(
            DocumentSnapshot(uri="page.widget", text="", language_id="plaintext")
        )
        assert not orchestrator.is_schema_document(
            DocumentSnapshot(uri="a.json", text="", language_id="plaintext")
        )
