from __future__ import annotations

"""
Domain Constants.

Default audit thresholds and the identifiers of non-fatal build warnings.
"""

from typing import Final

APP_NAME: Final = "orgaudit"

# Manager salary must lie within [MIN, MAX] x average salary of direct reports
DEFAULT_MIN_SALARY_RATIO: Final = 1.20
DEFAULT_MAX_SALARY_RATIO: Final = 1.50

# Maximum number of managers allowed between an employee and the CEO
DEFAULT_MAX_REPORTING_DEPTH: Final = 4

# Largest salary accepted from the source (signed 32-bit range)
MAX_SALARY: Final = 2**31 - 1

DEFAULT_ENCODING: Final = "utf-8"

# -----------------------------------------------------------------------------
# WARNING CODES
# -----------------------------------------------------------------------------
WARN_DUPLICATE_ROOT: Final = "duplicate_root"
WARN_DANGLING_MANAGER: Final = "dangling_manager"
