from __future__ import annotations

"""
Manager Salary Audit.

A manager is expected to earn between ``min_salary_ratio`` and
``max_salary_ratio`` times the average salary of their direct reports. Both
edges are inclusive.
"""

import logging
from typing import List, Optional

from orgaudit.domain.context import AuditContext
from orgaudit.domain.finding_models import FindingKind, SalaryFinding
from orgaudit.domain.org_models import Hierarchy, Person

logger = logging.getLogger(__name__)


def audit_salaries(hierarchy: Hierarchy, ctx: AuditContext) -> List[SalaryFinding]:
    """
    Flag every manager paid outside the allowed band.

    Args:
        hierarchy: The built organization tree (read only).
        ctx: Run context providing the band multipliers.

    Returns:
        List[SalaryFinding]: Findings in hierarchy insertion order.
    """
    findings: List[SalaryFinding] = []
    for person in hierarchy:
        if not person.is_manager:
            continue
        finding = _check_manager(hierarchy, person, ctx)
        if finding is not None:
            findings.append(finding)

    logger.debug(f"Salary audit finished with {len(findings)} finding(s).")
    return findings


def _check_manager(hierarchy: Hierarchy, manager: Person, ctx: AuditContext) -> Optional[SalaryFinding]:
    reports = hierarchy.reports_of(manager)
    average = sum(r.salary for r in reports) / len(reports)
    min_expected = average * ctx.min_salary_ratio
    max_expected = average * ctx.max_salary_ratio

    if manager.salary < min_expected:
        kind = FindingKind.UNDERPAID
        amount = min_expected - manager.salary
    elif manager.salary > max_expected:
        kind = FindingKind.OVERPAID
        amount = manager.salary - max_expected
    else:
        return None

    return SalaryFinding(
        kind=kind,
        employee_id=manager.employee_id,
        first_name=manager.first_name,
        last_name=manager.last_name,
        salary=manager.salary,
        average_report_salary=average,
        min_expected=min_expected,
        max_expected=max_expected,
        amount=amount,
    )
