from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between raw configuration (JSON file, CLI overrides) and the audit
run. Coerces types, injects defaults and checks that the thresholds are
consistent with each other.
"""

import codecs
import logging
from typing import Any, Dict, List, Tuple

from orgaudit.domain.config import get_default_config
from orgaudit.domain.errors import ConfigError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise ConfigError on invalid values instead of
                falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          the list of warnings produced.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if config is None:
        return defaults, warnings

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise ConfigError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in ("min_salary_ratio", "max_salary_ratio"):
        merged[field] = _as_positive_float(merged.get(field), defaults[field], field, warnings, strict)

    merged["max_reporting_depth"] = _as_non_negative_int(
        merged.get("max_reporting_depth"), defaults["max_reporting_depth"],
        "max_reporting_depth", warnings, strict
    )

    merged["encoding"] = _as_encoding(merged.get("encoding"), defaults["encoding"], warnings, strict)

    if merged["min_salary_ratio"] > merged["max_salary_ratio"]:
        msg = (
            f"Inconsistent salary band: min_salary_ratio ({merged['min_salary_ratio']}) "
            f"is greater than max_salary_ratio ({merged['max_salary_ratio']})."
        )
        if strict:
            raise ConfigError(msg)
        warnings.append(f"{msg} Using default band.")
        merged["min_salary_ratio"] = defaults["min_salary_ratio"]
        merged["max_salary_ratio"] = defaults["max_salary_ratio"]

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_positive_float(value: Any, fallback: float, field: str, warnings: List[str], strict: bool) -> float:
    """Coerce numeric input (or numeric strings when lenient) to a float > 0."""
    if value is None:
        return fallback

    number = None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
    elif isinstance(value, str) and not strict:
        try:
            number = float(value.strip())
            warnings.append(f"Field '{field}' converted from '{value}' to {number}.")
        except ValueError:
            number = None

    if number is not None and number > 0:
        return number

    msg = f"Invalid field '{field}': expected a positive number, received {value!r}."
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_non_negative_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce input to an int >= 0, accepting integral floats and digit strings when lenient."""
    if value is None:
        return fallback

    number = None
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif not strict:
        if isinstance(value, float) and value.is_integer():
            number = int(value)
            warnings.append(f"Field '{field}' converted from {value} to {number}.")
        elif isinstance(value, str) and value.strip().isdigit():
            number = int(value.strip())
            warnings.append(f"Field '{field}' converted from '{value}' to {number}.")

    if number is not None and number >= 0:
        return number

    msg = f"Invalid field '{field}': expected a non-negative integer, received {value!r}."
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_encoding(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Ensure the input encoding is a codec Python knows about."""
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip():
        try:
            codecs.lookup(value.strip())
            return value.strip()
        except LookupError:
            pass

    msg = f"Invalid field 'encoding': unknown codec {value!r}."
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
