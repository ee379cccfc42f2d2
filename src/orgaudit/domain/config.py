from __future__ import annotations

"""
Configuration Domain Management.

Dict-based run configuration: defaults for the audit thresholds and an
optional JSON file that overrides them.
"""

import json
import logging
import os
from typing import Any, Dict

from orgaudit.domain import constants as const
from orgaudit.domain.errors import ConfigError

logger = logging.getLogger(__name__)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default run configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Salary band, relative to the average salary of direct reports
        "min_salary_ratio": const.DEFAULT_MIN_SALARY_RATIO,
        "max_salary_ratio": const.DEFAULT_MAX_SALARY_RATIO,

        # Reporting line
        "max_reporting_depth": const.DEFAULT_MAX_REPORTING_DEPTH,

        # Input
        "encoding": const.DEFAULT_ENCODING,
    }


def load_config(path: str) -> Dict[str, Any]:
    """
    Load a JSON configuration file and merge it over the defaults.

    Unknown keys are dropped with a warning so typos do not silently pass.

    Args:
        path: Path to the JSON file.

    Returns:
        Dict[str, Any]: The merged (not yet validated) configuration.

    Raises:
        ConfigError: If the file is missing, unreadable or not a JSON object.
    """
    if not os.path.exists(path):
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Failed to load configuration '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration '{path}' must contain a JSON object.")

    config = get_default_config()
    for key, value in data.items():
        if key not in config:
            logger.warning(f"Ignoring unknown configuration key '{key}' in {path}")
            continue
        config[key] = value

    logger.debug(f"Configuration loaded from {path}")
    return config
