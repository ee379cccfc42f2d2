from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults, optional JSON file, command-line overrides), the audit run and
result rendering. This is the single place where fatal audit errors are
turned into exit codes.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from orgaudit.core.pipeline.engine import run_analysis
from orgaudit.core.pipeline.validator import validate_config
from orgaudit.core.reporting.renderer import render_report
from orgaudit.domain.analysis_models import AnalysisResult, create_error_result
from orgaudit.domain.config import get_default_config, load_config
from orgaudit.domain.errors import OrgAuditError
from orgaudit.infra.logging import LoggingConfig, configure_logging, get_logger
from orgaudit.interface.cli import args as cli_args
from orgaudit.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (diagnostics on stderr, report on stdout)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Configuration resolution
    try:
        base_conf = load_config(args.config_path) if args.config_path else get_default_config()
    except OrgAuditError as e:
        return _fail(str(e), args.input_path or "", json_output=args.json_output)

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Pre-flight
    if not args.input_path:
        logger.error(i18n.t("app.usage"))
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    # 5. Audit
    try:
        result = run_analysis(args.input_path, clean_conf)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except OrgAuditError as e:
        return _fail(str(e), args.input_path, clean_conf, json_output=args.json_output)

    # 6. Output
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_report(result)

    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge the non-None overrides into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


def _fail(
        error: str,
        input_path: str,
        cfg: Optional[Dict[str, Any]] = None,
        *,
        json_output: bool = False,
) -> int:
    """Report a fatal error on the appropriate streams and return the failure code."""
    msg = i18n.t("cli.errors.analysis_fail", error=error)
    logger.error(msg)
    if json_output:
        print(json.dumps(asdict(create_error_result(error, input_path, cfg)), ensure_ascii=False, indent=2))
    else:
        print(f"ERROR: {msg}", file=sys.stderr)
    return EXIT_FAILURE


def _print_human_report(result: AnalysisResult) -> None:
    """Print the rendered report to stdout."""
    for line in render_report(result):
        print(line)


if __name__ == "__main__":
    sys.exit(main())
