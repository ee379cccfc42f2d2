from __future__ import annotations

"""
Unit tests for the Hierarchy Builder.

Verifies:
1. Manager/report linking in input order and the structural invariant.
2. First-wins root selection with duplicate-root warnings.
3. Dangling manager references as warnings, not failures.
4. Fatal duplicate ids and missing root.
"""

import pytest

from orgaudit.core.hierarchy.builder import build_hierarchy
from orgaudit.core.ingestion.reader import parse_records
from orgaudit.domain import constants as const
from orgaudit.domain.context import AuditContext
from orgaudit.domain.errors import DuplicateIdError, NoRootFoundError


def _build(lines, ctx=None):
    ctx = ctx or AuditContext()
    return build_hierarchy(parse_records(["Id,firstName,lastName,salary,managerId"] + lines), ctx), ctx


def test_builds_reference_organization(sample_lines):
    """Five people, CEO 123 with reports 124 and 125 in input order."""
    ctx = AuditContext()
    hierarchy = build_hierarchy(parse_records(sample_lines), ctx)

    assert len(hierarchy) == 5
    assert hierarchy.root_id == "123"
    assert hierarchy.persons["123"].reports == ["124", "125"]
    assert hierarchy.persons["124"].reports == ["300"]
    assert hierarchy.persons["300"].reports == ["305"]
    assert hierarchy.persons["305"].reports == []
    assert ctx.warnings == []


def test_every_non_root_is_listed_once_under_its_manager(sample_lines):
    hierarchy = build_hierarchy(parse_records(sample_lines), AuditContext())

    for person in hierarchy:
        if person.employee_id == hierarchy.root_id:
            assert person.manager is None
            continue
        manager = hierarchy.manager_of(person)
        assert manager is not None
        assert manager.employee_id in hierarchy
        assert manager.reports.count(person.employee_id) == 1


def test_reports_follow_input_order_even_when_manager_comes_later():
    hierarchy, _ = _build([
        "2,Bo,Ng,50,1",
        "3,Cy,Oh,50,1",
        "1,Ann,Lee,100,",
    ])
    assert hierarchy.root_id == "1"
    assert hierarchy.persons["1"].reports == ["2", "3"]


def test_second_root_is_a_warning_and_first_wins():
    hierarchy, ctx = _build([
        "1,Ann,Lee,100,",
        "2,Bo,Ng,90,",
        "3,Cy,Oh,50,2",
    ])

    assert hierarchy.root_id == "1"
    duplicates = ctx.warnings_with_code(const.WARN_DUPLICATE_ROOT)
    assert len(duplicates) == 1
    assert duplicates[0].employee_id == "2"
    # The extra root still manages its own reports
    assert hierarchy.persons["2"].manager is None
    assert hierarchy.persons["2"].reports == ["3"]


def test_dangling_manager_is_a_warning_and_person_stays_unlinked():
    hierarchy, ctx = _build([
        "1,Ann,Lee,100,",
        "2,Bo,Ng,90,999",
    ])

    bo = hierarchy.persons["2"]
    assert bo.manager is None
    assert bo.manager_id == "999"
    assert hierarchy.persons["1"].reports == []

    dangling = ctx.warnings_with_code(const.WARN_DANGLING_MANAGER)
    assert len(dangling) == 1
    assert "999" in dangling[0].message
    assert dangling[0].employee_id == "2"


def test_duplicate_id_is_fatal():
    with pytest.raises(DuplicateIdError) as exc_info:
        _build([
            "1,Ann,Lee,100,",
            "1,Bo,Ng,90,1",
        ])
    assert exc_info.value.employee_id == "1"
    assert "lines 2 and 3" in str(exc_info.value)


def test_missing_root_is_fatal():
    with pytest.raises(NoRootFoundError):
        _build([
            "1,Ann,Lee,100,2",
            "2,Bo,Ng,90,1",
        ])


def test_empty_input_builds_empty_hierarchy():
    hierarchy, ctx = _build([])
    assert len(hierarchy) == 0
    assert hierarchy.root_id is None
    assert hierarchy.root is None
    assert ctx.warnings == []
