from __future__ import annotations

import argparse
import json
import sys

from .. import __version__
from ..core.context import RunContext
from ..core.environment import CheckEnvironment
from ..core.errors import ScriptError
from ..core.exit_codes import ERR_FINDINGS, ERR_INTERNAL, OK
from ..core.visitor import LINT, check
from ..io.tree import load_tree
from ..reporting.report import build_report_payload, render_text
from ..runtime.logging import log_event
from .output import emit, render_error, write_payload


def _version_string() -> str:
    return f"doccov {__version__}"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="doccov", description=LINT.description)
    p.add_argument("--version", action="version", version=_version_string())
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--run-id", help="run identifier stamped on reports and log events")
    p.add_argument("--log-json", action="store_true", help="emit log events as JSON lines")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd", required=True)

    version_p = sub.add_parser("version", help="print the tool version")
    version_p.add_argument("--json", dest="sub_json", action="store_true", help="emit JSON output")

    check_p = sub.add_parser("check", help="report undocumented declarations in a declaration tree document")
    check_p.add_argument("tree", help="path to a doccov.tree.v1 JSON document")
    check_p.add_argument("--json", dest="sub_json", action="store_true", help="emit JSON output")
    check_p.add_argument(
        "--test-harness",
        action="store_true",
        help="the tree comes from a test-harness build; no declaration is reported",
    )
    check_p.add_argument("--out", help="also write the JSON report payload to this path")
    return p


def _run_check(ctx: RunContext, ns: argparse.Namespace) -> int:
    root = load_tree(ns.tree)
    log_event(ctx, "info", "cli", "loaded", tree=ns.tree, nodes=sum(1 for _ in root.walk()))
    env = CheckEnvironment(test_harness=ctx.test_harness)
    reports = check(root, env)
    payload = build_report_payload(reports, run_id=ctx.run_id, source=str(ns.tree), test_harness=ctx.test_harness)
    if ns.out:
        written = write_payload(ns.out, payload)
        log_event(ctx, "info", "cli", "report_written", path=str(written))
    if ctx.output_format == "json":
        emit(payload, as_json=True)
    else:
        print(render_text(reports))
    return ERR_FINDINGS if reports else OK


def main(argv: list[str] | None = None) -> int:
    raw_argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    ns = parser.parse_args(raw_argv)
    cli_json = bool(ns.json or ns.sub_json)
    as_json = cli_json or ns.format == "json"
    if ns.cmd == "version":
        payload = {"schema_version": 1, "tool": "doccov", "status": "ok", "doccov_version": __version__}
        print(json.dumps(payload, sort_keys=True) if as_json else _version_string())
        return OK
    try:
        ctx = RunContext.from_args(
            ns.run_id,
            ns.format,
            bool(getattr(ns, "test_harness", False)),
            ns.verbose,
            ns.quiet,
            ns.log_json,
            cli_json=cli_json,
        )
    except ScriptError as exc:
        print(render_error(as_json=as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    try:
        log_event(ctx, "info", "cli", "start", cmd=ns.cmd, fmt=ctx.output_format, test_harness=ctx.test_harness)
        rc = _run_check(ctx, ns)
        log_event(ctx, "info", "cli", "finish", cmd=ns.cmd, rc=rc)
        return rc
    except ScriptError as exc:
        log_event(ctx, "error", "cli", "error", cmd=ns.cmd, kind=exc.kind, code=exc.code)
        print(
            render_error(
                as_json=(ctx.output_format == "json"),
                message=str(exc),
                code=exc.code,
                kind=exc.kind,
                run_id=ctx.run_id,
            ),
            file=sys.stderr,
        )
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(
            render_error(
                as_json=(ctx.output_format == "json"),
                message=f"internal error: {exc}",
                code=ERR_INTERNAL,
                kind="internal_error",
                run_id=ctx.run_id,
            ),
            file=sys.stderr,
        )
        return ERR_INTERNAL
