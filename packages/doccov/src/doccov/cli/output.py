"""CLI payload output helpers."""

from __future__ import annotations

from pathlib import Path

from ..contracts.ids import ERROR
from ..core.errors import ScriptError
from ..core.exit_codes import ERR_INPUT
from ..core.runtime.serialize import dumps_json


def emit(payload: dict[str, object], as_json: bool) -> None:
    print(dumps_json(payload, pretty=not as_json))


def write_payload(path: str | Path, payload: dict[str, object]) -> Path:
    out = Path(path)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(dumps_json(payload, pretty=True) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ScriptError(f"cannot write {out}: {exc.strerror or exc}", ERR_INPUT, "output_error") from exc
    return out


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error", run_id: str = "") -> str:
    if as_json:
        return dumps_json(
            {
                "schema_name": ERROR,
                "schema_version": 1,
                "tool": "doccov",
                "status": "error",
                "run_id": run_id,
                "errors": [{"code": code, "kind": kind, "message": message}],
            },
            pretty=False,
        )
    return f"doccov: error: {message}"
