from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from orgaudit.domain import constants as const
from orgaudit.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the orgaudit CLI.

    The input file is optional at the parser level so that a missing argument
    can be answered with a usage message instead of an argparse abort.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=const.APP_NAME,
        description=i18n.t("app.description"),
    )

    p.add_argument(
        "input_path",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.input"),
    )

    # --- Thresholds ---
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help=i18n.t("cli.args.config"),
    )
    p.add_argument(
        "--min-ratio",
        dest="min_salary_ratio",
        type=float,
        default=None,
        help=i18n.t("cli.args.min_ratio"),
    )
    p.add_argument(
        "--max-ratio",
        dest="max_salary_ratio",
        type=float,
        default=None,
        help=i18n.t("cli.args.max_ratio"),
    )
    p.add_argument(
        "--max-depth",
        dest="max_reporting_depth",
        type=int,
        default=None,
        help=i18n.t("cli.args.max_depth"),
    )

    # --- Output and diagnostics ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options given on the command line appear in the result.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}
    for key in ("min_salary_ratio", "max_salary_ratio", "max_reporting_depth"):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value
    return overrides
