from __future__ import annotations

"""
Hierarchy Builder.

Reconstructs the management tree from unordered, reference-based records in
two passes: first every Person is created, then manager ids are resolved and
reports appended in input order. Recoverable problems (extra roots, dangling
manager ids) become warnings on the audit context; the rest is fatal.
"""

import logging
from typing import Dict, Iterable

from orgaudit.domain import constants as const
from orgaudit.domain.context import AuditContext
from orgaudit.domain.errors import DuplicateIdError, NoRootFoundError
from orgaudit.domain.org_models import EmployeeRecord, Hierarchy, Person

logger = logging.getLogger(__name__)


def build_hierarchy(records: Iterable[EmployeeRecord], ctx: AuditContext) -> Hierarchy:
    """
    Build the id-indexed organization tree.

    Args:
        records: Parsed employee records in input order.
        ctx: Run context receiving non-fatal warnings.

    Returns:
        Hierarchy: Persons keyed by id, with the designated root.

    Raises:
        DuplicateIdError: Two records share an id.
        NoRootFoundError: Records exist but none lacks a manager id.
    """
    hierarchy = Hierarchy()
    seen_lines: Dict[str, int] = {}

    # 1. Create one unlinked Person per record
    for record in records:
        if record.employee_id in hierarchy.persons:
            raise DuplicateIdError(
                record.employee_id, seen_lines[record.employee_id], record.line_no
            )
        seen_lines[record.employee_id] = record.line_no
        hierarchy.persons[record.employee_id] = Person.from_record(record)

        if record.manager_id is None:
            if hierarchy.root_id is None:
                hierarchy.root_id = record.employee_id
            else:
                ctx.warn(
                    const.WARN_DUPLICATE_ROOT,
                    f"Multiple CEOs found: employee {record.employee_id} has no manager. "
                    f"Using the first one encountered ({hierarchy.root_id}).",
                    employee_id=record.employee_id,
                )

    if hierarchy.persons and hierarchy.root_id is None:
        raise NoRootFoundError()

    # 2. Resolve manager references
    for person in hierarchy:
        if person.manager_id is None:
            continue
        manager = hierarchy.get(person.manager_id)
        if manager is None:
            ctx.warn(
                const.WARN_DANGLING_MANAGER,
                f"Manager with ID {person.manager_id} for employee {person.employee_id} not found.",
                employee_id=person.employee_id,
            )
            continue
        person.manager = manager.employee_id
        manager.reports.append(person.employee_id)

    logger.info(
        f"Hierarchy built: {len(hierarchy)} employee(s), root {hierarchy.root_id}, "
        f"{len(ctx.warnings)} warning(s)."
    )
    return hierarchy
