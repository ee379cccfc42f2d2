from __future__ import annotations

"""
Audit Finding Models.

Structured, immutable results produced by the auditors and consumed by the
report renderer and the JSON output of the CLI.
"""

from dataclasses import dataclass
from enum import Enum


class FindingKind(str, Enum):
    UNDERPAID = "underpaid"
    OVERPAID = "overpaid"
    LONG_REPORTING_LINE = "long_reporting_line"


@dataclass(frozen=True)
class SalaryFinding:
    """
    A manager paid outside the allowed band.

    Attributes:
        kind: UNDERPAID or OVERPAID.
        employee_id: Id of the manager.
        first_name: Given name of the manager.
        last_name: Family name of the manager.
        salary: Current salary of the manager.
        average_report_salary: Mean salary of the direct reports.
        min_expected: Lower edge of the allowed band.
        max_expected: Upper edge of the allowed band.
        amount: Deficit (UNDERPAID) or excess (OVERPAID) relative to the band.
    """
    kind: FindingKind
    employee_id: str
    first_name: str
    last_name: str
    salary: int
    average_report_salary: float
    min_expected: float
    max_expected: float
    amount: float


@dataclass(frozen=True)
class ReportingLineFinding:
    """
    An employee with too many managers above them.

    Attributes:
        kind: Always LONG_REPORTING_LINE.
        employee_id: Id of the employee.
        first_name: Given name.
        last_name: Family name.
        managers_count: Managers between the employee and the top.
        max_allowed: Configured maximum.
    """
    kind: FindingKind
    employee_id: str
    first_name: str
    last_name: str
    managers_count: int
    max_allowed: int
