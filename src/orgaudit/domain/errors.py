from __future__ import annotations

"""
Domain Error Taxonomy.

Every fatal condition of an audit run is an ``OrgAuditError`` subclass so the
CLI can convert the whole family into a clean exit code. Non-fatal conditions
are not exceptions; they are ``BuildWarning`` entries on the audit context.
"""

from typing import List, Optional


class OrgAuditError(Exception):
    """Base class for fatal audit failures."""


class InputSourceError(OrgAuditError):
    """The employee source could not be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Cannot read employee data from '{path}': {reason}")


class MalformedRecordError(OrgAuditError):
    """A data line could not be turned into an employee record."""

    def __init__(self, message: str, line_no: int = 0, employee_id: Optional[str] = None):
        self.line_no = line_no
        self.employee_id = employee_id
        prefix = f"Line {line_no}: " if line_no else ""
        super().__init__(prefix + message)


class DuplicateIdError(OrgAuditError):
    """Two records share the same employee id."""

    def __init__(self, employee_id: str, first_line: int = 0, second_line: int = 0):
        self.employee_id = employee_id
        super().__init__(
            f"Duplicate employee id '{employee_id}' "
            f"(lines {first_line} and {second_line})."
        )


class NoRootFoundError(OrgAuditError):
    """No record in a non-empty dataset is free of a manager reference."""

    def __init__(self) -> None:
        super().__init__("No CEO found in the employee data: every record has a manager id.")


class CycleDetectedError(OrgAuditError):
    """An upward manager walk revisited an employee."""

    def __init__(self, employee_id: str, chain: List[str]):
        self.employee_id = employee_id
        self.chain = list(chain)
        super().__init__(
            f"Management cycle detected while walking up from '{employee_id}': "
            + " -> ".join(self.chain)
        )


class ConfigError(OrgAuditError):
    """Configuration could not be loaded or is inconsistent."""
