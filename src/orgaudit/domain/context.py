from __future__ import annotations

"""
Audit Run Context.

Explicit state threaded through the builder and the auditors: the active
thresholds and the non-fatal warnings collected so far.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from orgaudit.domain import constants as const

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildWarning:
    """
    A recoverable data problem detected while building the hierarchy.

    Attributes:
        code: Machine-readable category (see ``constants.WARN_*``).
        message: Human-readable description.
        employee_id: Employee the warning is about, if any.
    """
    code: str
    message: str
    employee_id: Optional[str] = None


@dataclass
class AuditContext:
    min_salary_ratio: float = const.DEFAULT_MIN_SALARY_RATIO
    max_salary_ratio: float = const.DEFAULT_MAX_SALARY_RATIO
    max_reporting_depth: int = const.DEFAULT_MAX_REPORTING_DEPTH
    warnings: List[BuildWarning] = field(default_factory=list)

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "AuditContext":
        """Create a context from a validated configuration dictionary."""
        return cls(
            min_salary_ratio=float(cfg.get("min_salary_ratio", const.DEFAULT_MIN_SALARY_RATIO)),
            max_salary_ratio=float(cfg.get("max_salary_ratio", const.DEFAULT_MAX_SALARY_RATIO)),
            max_reporting_depth=int(cfg.get("max_reporting_depth", const.DEFAULT_MAX_REPORTING_DEPTH)),
        )

    def warn(self, code: str, message: str, employee_id: Optional[str] = None) -> BuildWarning:
        """Record a non-fatal warning and forward it to the log."""
        warning = BuildWarning(code=code, message=message, employee_id=employee_id)
        self.warnings.append(warning)
        logger.warning(message)
        return warning

    def warnings_with_code(self, code: str) -> List[BuildWarning]:
        return [w for w in self.warnings if w.code == code]
