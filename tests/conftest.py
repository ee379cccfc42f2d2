from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package is importable uninstalled.
2. Provides shared employee data and a CSV writer fixture.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

HEADER = "Id,firstName,lastName,salary,managerId"

# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def default_config() -> Dict[str, Any]:
    """Validated default configuration."""
    return {
        "min_salary_ratio": 1.2,
        "max_salary_ratio": 1.5,
        "max_reporting_depth": 4,
        "encoding": "utf-8",
    }


@pytest.fixture
def sample_lines() -> List[str]:
    """The reference organization: CEO Joe with two reports and a chain below Martin."""
    return [
        HEADER,
        "123,Joe,Doe,60000,",
        "124,Martin,Chekov,45000,123",
        "125,Bob,Ronstad,47000,123",
        "300,Alice,Hasacat,50000,124",
        "305,Brett,Hardleaf,34000,300",
    ]


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[List[str], str], Path]:
    """Return a helper writing lines to a CSV file under tmp_path."""
    def _write(lines: List[str], name: str = "employees.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write
