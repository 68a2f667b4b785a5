from __future__ import annotations

import json
from pathlib import Path

import pytest
from helpers import node, program

from doccov import __version__
from doccov.cli.main import main
from doccov.core.exit_codes import ERR_FINDINGS, ERR_INPUT, ERR_VALIDATION, OK
from doccov.core.model import NodeKind
from doccov.io.tree import tree_payload

SAMPLE = Path(__file__).resolve().parents[1] / "fixtures" / "sample_tree.json"


def _write_tree(tmp_path: Path, root) -> Path:
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(tree_payload(root)), encoding="utf-8")
    return path


@pytest.mark.integration
def test_check_sample_reports_module_and_field(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--json", "--run-id", "cli-test", "check", str(SAMPLE)])
    assert rc == ERR_FINDINGS
    payload = json.loads(capsys.readouterr().out)
    assert payload["run_id"] == "cli-test"
    assert [(row["name"], row["label"]) for row in payload["rows"]] == [("m", "a module"), ("x", "a struct field")]


@pytest.mark.integration
def test_check_text_output(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["check", str(SAMPLE)])
    out = capsys.readouterr().out.splitlines()
    assert rc == ERR_FINDINGS
    assert out[0] == "src/lib.rs:8:1: warning: missing documentation for a module [missing_docs_in_private_items]"
    assert out[-1] == "doccov: 2 undocumented item(s)"


@pytest.mark.integration
def test_test_harness_flag_and_env_silence_findings(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    assert main(["check", str(SAMPLE), "--test-harness"]) == OK
    monkeypatch.setenv("DOCCOV_TEST_HARNESS", "1")
    assert main(["check", "--json", str(SAMPLE)]) == OK
    payload = json.loads(capsys.readouterr().out.splitlines()[-1])
    assert payload["status"] == "pass"
    assert payload["test_harness"] is True


@pytest.mark.integration
def test_clean_tree_exits_ok_and_writes_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    tree = _write_tree(tmp_path, program(node(NodeKind.FUNCTION, "main")))
    out = tmp_path / "reports" / "coverage.json"
    assert main(["check", str(tree), "--out", str(out)]) == OK
    assert json.loads(out.read_text(encoding="utf-8"))["status"] == "pass"
    assert "passed" in capsys.readouterr().out


@pytest.mark.integration
def test_ci_defaults_to_json(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CI", "true")
    main(["check", str(SAMPLE)])
    assert json.loads(capsys.readouterr().out)["schema_name"] == "doccov.coverage-report.v1"


@pytest.mark.integration
def test_missing_tree_is_reported_as_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--json", "check", str(tmp_path / "missing.json")])
    assert rc == ERR_INPUT
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert err["schema_name"] == "doccov.error.v1"
    assert err["errors"][0]["code"] == ERR_INPUT


@pytest.mark.integration
def test_invalid_tree_is_a_validation_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "tree.json"
    path.write_text(json.dumps({"schema_name": "doccov.tree.v1", "schema_version": 1, "root": {"name": "no kind"}}), encoding="utf-8")
    assert main(["check", str(path)]) == ERR_VALIDATION
    assert capsys.readouterr().err.splitlines()[-1].startswith("doccov: error: schema validation failed")


@pytest.mark.integration
def test_verbose_logs_structured_events(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--verbose", "--log-json", "--run-id", "log-run", "check", str(SAMPLE)])
    events = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
    assert [event["action"] for event in events] == ["start", "loaded", "finish"]
    assert all(event["run_id"] == "log-run" for event in events)
    assert events[1]["nodes"] == 13


def test_quiet_run_logs_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--quiet", "check", str(SAMPLE)])
    assert capsys.readouterr().err == ""


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["version"]) == OK
    assert capsys.readouterr().out.strip() == f"doccov {__version__}"
    assert main(["version", "--json"]) == OK
    assert json.loads(capsys.readouterr().out)["doccov_version"] == __version__


@pytest.mark.integration
def test_non_utf8_tree_is_an_input_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "tree.json"
    path.write_bytes(b"\xff\xfe{\x00}\x00")
    assert main(["check", str(path)]) == ERR_INPUT
    assert "is not UTF-8 text" in capsys.readouterr().err.splitlines()[-1]
