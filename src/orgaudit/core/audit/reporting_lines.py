from __future__ import annotations

"""
Reporting Line Audit.

Counts the managers above each employee by walking resolved manager ids
upwards. The walk is bounded by the population size and tracks visited ids,
so malformed data with a management cycle fails instead of looping.
"""

import logging
from typing import List

from orgaudit.domain.context import AuditContext
from orgaudit.domain.errors import CycleDetectedError
from orgaudit.domain.finding_models import FindingKind, ReportingLineFinding
from orgaudit.domain.org_models import Hierarchy

logger = logging.getLogger(__name__)


def reporting_depth(hierarchy: Hierarchy, employee_id: str) -> int:
    """
    Return the number of managers above an employee.

    The root and employees whose manager id did not resolve have depth 0.

    Raises:
        KeyError: Unknown employee id.
        CycleDetectedError: The walk revisits an employee.
    """
    person = hierarchy.persons[employee_id]
    chain = [employee_id]
    visited = {employee_id}
    limit = len(hierarchy)

    while person.manager is not None:
        if person.manager in visited or len(chain) > limit:
            raise CycleDetectedError(employee_id, chain + [person.manager])
        visited.add(person.manager)
        chain.append(person.manager)
        person = hierarchy.persons[person.manager]

    return len(chain) - 1


def audit_reporting_lines(hierarchy: Hierarchy, ctx: AuditContext) -> List[ReportingLineFinding]:
    """
    Flag employees with more than ``ctx.max_reporting_depth`` managers above them.

    Args:
        hierarchy: The built organization tree (read only).
        ctx: Run context providing the maximum depth.

    Returns:
        List[ReportingLineFinding]: Findings in hierarchy insertion order.
    """
    findings: List[ReportingLineFinding] = []
    max_allowed = ctx.max_reporting_depth

    for person in hierarchy:
        if person.employee_id == hierarchy.root_id:
            continue
        depth = reporting_depth(hierarchy, person.employee_id)
        if depth > max_allowed:
            findings.append(
                ReportingLineFinding(
                    kind=FindingKind.LONG_REPORTING_LINE,
                    employee_id=person.employee_id,
                    first_name=person.first_name,
                    last_name=person.last_name,
                    managers_count=depth,
                    max_allowed=max_allowed,
                )
            )

    logger.debug(f"Reporting line audit finished with {len(findings)} finding(s).")
    return findings
