from __future__ import annotations

"""
Employee Source Reader.

Turns the comma-delimited employee file into EmployeeRecord objects:

    Id,firstName,lastName,salary,managerId
    123,Joe,Doe,60000,
    124,Martin,Chekov,45000,123

The header line is discarded without validation. Fields are not quoted or
escaped, so a comma inside a name produces an extra field and the line is
rejected.
"""

import logging
import re
from typing import Iterable, Iterator, List

from orgaudit.domain import constants as const
from orgaudit.domain.errors import InputSourceError, MalformedRecordError
from orgaudit.domain.org_models import EmployeeRecord

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
MIN_FIELDS = 4
MAX_FIELDS = 5

_SALARY_RX = re.compile(r"[0-9]+")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_records(path: str, encoding: str = const.DEFAULT_ENCODING) -> List[EmployeeRecord]:
    """
    Read and parse an employee file.

    Args:
        path: Path of the delimited source.
        encoding: Text encoding of the source.

    Returns:
        List[EmployeeRecord]: Records in file order.

    Raises:
        InputSourceError: If the file cannot be opened or decoded.
        MalformedRecordError: On the first line that cannot be parsed.
    """
    logger.info(f"Reading employee data from: {path}")
    try:
        with open(path, "r", encoding=encoding) as f:
            records = list(parse_records(f))
    except (OSError, UnicodeDecodeError) as e:
        raise InputSourceError(path, str(e)) from e

    logger.debug(f"Parsed {len(records)} employee record(s) from {path}")
    return records


def parse_records(lines: Iterable[str]) -> Iterator[EmployeeRecord]:
    """
    Parse employee lines, skipping the header and blank lines.

    Args:
        lines: Raw text lines, header first.

    Yields:
        EmployeeRecord: One record per data line.
    """
    for line_no, line in enumerate(lines, start=1):
        if line_no == 1:
            continue
        text = line.rstrip("\r\n")
        if not text.strip():
            continue
        yield parse_line(text, line_no)


def parse_line(line: str, line_no: int = 0) -> EmployeeRecord:
    """
    Parse a single data line.

    Raises:
        MalformedRecordError: Wrong field count, empty id or invalid salary.
    """
    parts = [p.strip() for p in line.split(FIELD_SEPARATOR)]

    # Trailing empty fields carry no data ("123,Joe,Doe,60000,,")
    while len(parts) > MAX_FIELDS and not parts[-1]:
        parts.pop()

    if len(parts) < MIN_FIELDS or len(parts) > MAX_FIELDS:
        raise MalformedRecordError(
            f"Invalid CSV line format (expected {MIN_FIELDS} or {MAX_FIELDS} fields, "
            f"found {len(parts)}): {line}",
            line_no=line_no,
        )

    employee_id, first_name, last_name, raw_salary = parts[:4]
    if not employee_id:
        raise MalformedRecordError(f"Missing employee id: {line}", line_no=line_no)

    if not _SALARY_RX.fullmatch(raw_salary):
        raise MalformedRecordError(
            f"Invalid salary format for employee {employee_id}: {raw_salary!r}",
            line_no=line_no,
            employee_id=employee_id,
        )

    if len(raw_salary) > len(str(const.MAX_SALARY)) or int(raw_salary) > const.MAX_SALARY:
        raise MalformedRecordError(
            f"Invalid salary for employee {employee_id}: {raw_salary[:20]!r} is out of range "
            f"(maximum {const.MAX_SALARY})",
            line_no=line_no,
            employee_id=employee_id,
        )

    manager_id = parts[4] if len(parts) == MAX_FIELDS else ""

    return EmployeeRecord(
        employee_id=employee_id,
        first_name=first_name,
        last_name=last_name,
        salary=int(raw_salary),
        manager_id=manager_id or None,
        line_no=line_no,
    )
