from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default injection and type coercion in lenient mode.
2. ConfigError in strict mode.
3. Consistency of the salary band.
"""

import pytest

from orgaudit.core.pipeline.validator import validate_config
from orgaudit.domain.errors import ConfigError


def test_none_returns_defaults(default_config):
    cfg, warnings = validate_config(None)
    assert cfg == default_config
    assert warnings == []


def test_partial_config_is_completed():
    cfg, warnings = validate_config({"max_reporting_depth": 6})
    assert cfg["max_reporting_depth"] == 6
    assert cfg["min_salary_ratio"] == 1.2
    assert warnings == []


def test_numeric_strings_are_coerced_with_warning():
    cfg, warnings = validate_config({"min_salary_ratio": "1.1", "max_reporting_depth": "3"})
    assert cfg["min_salary_ratio"] == 1.1
    assert cfg["max_reporting_depth"] == 3
    assert len(warnings) == 2


@pytest.mark.parametrize("field,value", [
    ("min_salary_ratio", -1),
    ("max_salary_ratio", "lots"),
    ("max_reporting_depth", -2),
    ("max_reporting_depth", True),
    ("encoding", "no-such-codec"),
])
def test_invalid_values_fall_back(field, value, default_config):
    cfg, warnings = validate_config({field: value})
    assert cfg[field] == default_config[field]
    assert any(field in w for w in warnings)


def test_strict_mode_raises():
    with pytest.raises(ConfigError):
        validate_config({"max_reporting_depth": "3"}, strict=True)


def test_inverted_band_is_reset():
    cfg, warnings = validate_config({"min_salary_ratio": 2.0, "max_salary_ratio": 1.5})
    assert (cfg["min_salary_ratio"], cfg["max_salary_ratio"]) == (1.2, 1.5)
    assert any("Inconsistent salary band" in w for w in warnings)


def test_inverted_band_is_fatal_when_strict():
    with pytest.raises(ConfigError, match="Inconsistent salary band"):
        validate_config({"min_salary_ratio": 2.0, "max_salary_ratio": 1.5}, strict=True)


def test_non_dict_input_uses_defaults(default_config):
    cfg, warnings = validate_config(["not", "a", "dict"])
    assert cfg == default_config
    assert len(warnings) == 1
