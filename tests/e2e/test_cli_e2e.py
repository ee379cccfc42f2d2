from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the package entry point in a subprocess and validates exit codes,
stream separation (report on stdout, diagnostics on stderr) and the report
content.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"

HEADER = "Id,firstName,lastName,salary,managerId"


def run_cli(args: List[str]) -> subprocess.CompletedProcess[str]:
    """Execute ``python -m orgaudit`` with 'src' on PYTHONPATH."""
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    return subprocess.run(
        [sys.executable, "-m", "orgaudit"] + args,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_happy_path(write_csv):
    """TC-01: Findings are printed on stdout, logs on stderr."""
    path = write_csv([
        HEADER,
        "123,Joe,Doe,100000,",
        "124,Martin,Chekov,70000,123",
        "300,Alice,Hasacat,55000,124",
        "305,Brett,Hardleaf,40000,300",
        "400,Carol,Smith,35000,305",
        "500,David,Jones,30000,400",
        "600,Eve,White,25000,500",
    ])

    result = run_cli([str(path)])

    assert result.returncode == 0, result.stderr
    out = result.stdout
    assert "David Jones (ID: 500) has a reporting line which is too long. Managers above: 5 (Max allowed: 4)." in out
    assert "Eve White (ID: 600) has a reporting line which is too long. Managers above: 6 (Max allowed: 4)." in out
    assert "Carol Smith" not in out
    assert "Reading employee data from" in result.stderr
    assert "Reading employee data from" not in out


def test_cli_missing_argument_prints_usage():
    """TC-02: No input file yields a usage message and a clean exit."""
    result = run_cli([])

    assert result.returncode == 2
    assert "usage: orgaudit" in result.stderr
    assert "Traceback" not in result.stderr


def test_cli_malformed_salary(write_csv):
    """TC-03: A fatal data error is reported without a traceback."""
    path = write_csv([HEADER, "123,Joe,Doe,abc,"])

    result = run_cli([str(path)])

    assert result.returncode == 1
    assert "Invalid salary format for employee 123" in result.stderr
    assert "Traceback" not in result.stderr
    assert result.stdout == ""


def test_cli_missing_input_file(tmp_path):
    """TC-03b: An unreadable source ends the run cleanly with exit code 1."""
    result = run_cli([str(tmp_path / "missing.csv")])

    assert result.returncode == 1
    assert "ERROR:" in result.stderr
    assert "Cannot read employee data" in result.stderr
    assert "Traceback" not in result.stderr
    assert result.stdout == ""


def test_cli_management_cycle(write_csv):
    """TC-03c: A management cycle is reported as a fatal data error."""
    path = write_csv([HEADER, "1,Ann,Lee,100,", "2,Bo,Ng,90,3", "3,Cy,Oh,80,2"])

    result = run_cli([str(path)])

    assert result.returncode == 1
    assert "ERROR:" in result.stderr
    assert "Management cycle detected" in result.stderr
    assert "Traceback" not in result.stderr


def test_cli_duplicate_root_warning(write_csv):
    """TC-04: A second CEO is a warning; the run still succeeds."""
    path = write_csv([HEADER, "1,Ann,Lee,100,", "2,Bo,Ng,90,"])

    result = run_cli([str(path)])

    assert result.returncode == 0
    assert "WARNING | Multiple CEOs found" in result.stderr


def test_cli_help_message():
    """TC-05: Smoke test for argparse help."""
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "usage: orgaudit" in result.stdout
    assert "--max-depth" in result.stdout
