from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .errors import ScriptError
from .exit_codes import ERR_CONFIG
from .runtime.clock import utc_now
from .runtime.env import getenv, getenv_flag

OutputFormat = Literal["text", "json"]

_FORMATS = ("text", "json")


def _generated_run_id() -> str:
    return "doccov-" + utc_now().strftime("%Y%m%d-%H%M%S")


def resolve_output_format(*, cli_json: bool, cli_format: str | None, ci_present: bool) -> OutputFormat:
    if cli_json:
        return "json"
    if cli_format:
        if cli_format not in _FORMATS:
            raise ScriptError(f"unsupported output format `{cli_format}`: expected one of {list(_FORMATS)}", ERR_CONFIG, "config_error")
        return cli_format  # type: ignore[return-value]
    return "json" if ci_present else "text"


@dataclass(frozen=True)
class RunContext:
    run_id: str
    output_format: OutputFormat
    test_harness: bool
    verbose: bool
    quiet: bool
    log_json: bool

    @classmethod
    def from_args(
        cls,
        run_id: str | None = None,
        output_format: str | None = None,
        test_harness: bool = False,
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
        cli_json: bool = False,
    ) -> "RunContext":
        if verbose and quiet:
            raise ScriptError("conflicting verbosity flags: use either --verbose or --quiet", ERR_CONFIG, "config_error")
        fmt = resolve_output_format(cli_json=cli_json, cli_format=output_format, ci_present=bool(getenv("CI")))
        return cls(
            run_id=run_id or getenv("DOCCOV_RUN_ID") or _generated_run_id(),
            output_format=fmt,
            test_harness=bool(test_harness) or getenv_flag("DOCCOV_TEST_HARNESS"),
            verbose=bool(verbose),
            quiet=bool(quiet),
            log_json=bool(log_json) or getenv_flag("DOCCOV_LOG_JSON"),
        )
