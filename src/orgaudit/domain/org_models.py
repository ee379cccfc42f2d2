from __future__ import annotations

"""
Organization Data Models.

Defines the raw parsed record, the Person node and the id-indexed arena
(Hierarchy) the auditors traverse. Links between people are stored as
employee ids, never as object references.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

# -----------------------------------------------------------------------------
# INPUT RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EmployeeRecord:
    """
    One parsed line of the employee source.

    Attributes:
        employee_id: Unique identifier of the employee.
        first_name: Given name.
        last_name: Family name.
        salary: Non-negative yearly salary.
        manager_id: Identifier of the direct manager, None for the root.
        line_no: 1-based line of the source the record came from.
    """
    employee_id: str
    first_name: str
    last_name: str
    salary: int
    manager_id: Optional[str] = None
    line_no: int = 0

# -----------------------------------------------------------------------------
# HIERARCHY NODES
# -----------------------------------------------------------------------------

@dataclass
class Person:
    """
    A node of the organization tree.

    ``manager_id`` is the raw reference from the source and survives even
    when it does not resolve; ``manager`` is the resolved id and stays None
    for the root and for dangling references.
    """
    employee_id: str
    first_name: str
    last_name: str
    salary: int
    manager_id: Optional[str] = None
    manager: Optional[str] = None
    reports: List[str] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: EmployeeRecord) -> "Person":
        return cls(
            employee_id=record.employee_id,
            first_name=record.first_name,
            last_name=record.last_name,
            salary=record.salary,
            manager_id=record.manager_id,
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_manager(self) -> bool:
        return bool(self.reports)


@dataclass
class Hierarchy:
    """
    Arena of Persons keyed by employee id, in input order.

    Attributes:
        persons: Mapping of employee id to Person.
        root_id: Id of the designated root, None only for an empty dataset.
    """
    persons: Dict[str, Person] = field(default_factory=dict)
    root_id: Optional[str] = None

    def __len__(self) -> int:
        return len(self.persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(self.persons.values())

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self.persons

    def get(self, employee_id: str) -> Optional[Person]:
        return self.persons.get(employee_id)

    @property
    def root(self) -> Optional[Person]:
        if self.root_id is None:
            return None
        return self.persons[self.root_id]

    def manager_of(self, person: Person) -> Optional[Person]:
        """Return the resolved manager of ``person`` or None."""
        if person.manager is None:
            return None
        return self.persons[person.manager]

    def reports_of(self, person: Person) -> List[Person]:
        """Return the direct reports of ``person`` in insertion order."""
        return [self.persons[rid] for rid in person.reports]
