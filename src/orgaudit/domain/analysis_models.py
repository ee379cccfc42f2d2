from __future__ import annotations

"""
Analysis Result Models.

Defines the result object passed from the pipeline engine to the interface
layer, plus the factories that build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from orgaudit.domain.context import BuildWarning
from orgaudit.domain.finding_models import FindingKind, ReportingLineFinding, SalaryFinding

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of a complete audit run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: The employee source that was analyzed.
        employee_count: Number of employees in the hierarchy.
        root_id: Id of the designated CEO.
        salary_findings: Managers paid outside the band.
        reporting_line_findings: Employees with too long a reporting line.
        warnings: Non-fatal problems found while building the hierarchy.
        config: Effective configuration of the run.
        summary: Aggregated counters.
    """
    ok: bool
    error: str

    input_path: str
    employee_count: int = 0
    root_id: Optional[str] = None

    salary_findings: List[SalaryFinding] = field(default_factory=list)
    reporting_line_findings: List[ReportingLineFinding] = field(default_factory=list)
    warnings: List[BuildWarning] = field(default_factory=list)

    config: Dict[str, Any] = field(default_factory=dict)
    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def findings_count(self) -> int:
        return len(self.salary_findings) + len(self.reporting_line_findings)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        input_path: str,
        cfg: Optional[Dict[str, Any]] = None,
        warnings: Optional[List[BuildWarning]] = None,
) -> AnalysisResult:
    """
    Create a failed analysis result.

    Args:
        error: Detailed error description.
        input_path: The source that was being analyzed.
        cfg: Configuration in effect, if it was resolved.
        warnings: Warnings collected before the failure.

    Returns:
        AnalysisResult: An immutable error result.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        input_path=input_path,
        warnings=list(warnings or []),
        config=dict(cfg or {}),
    )


def create_success_result(
        input_path: str,
        cfg: Dict[str, Any],
        employee_count: int,
        root_id: Optional[str],
        salary_findings: List[SalaryFinding],
        reporting_line_findings: List[ReportingLineFinding],
        warnings: List[BuildWarning],
) -> AnalysisResult:
    """
    Create a successful analysis result and its summary counters.

    Returns:
        AnalysisResult: An immutable success result.
    """
    summary = {
        "employees": employee_count,
        "underpaid": sum(1 for f in salary_findings if f.kind is FindingKind.UNDERPAID),
        "overpaid": sum(1 for f in salary_findings if f.kind is FindingKind.OVERPAID),
        "long_reporting_lines": len(reporting_line_findings),
        "warnings": len(warnings),
    }
    return AnalysisResult(
        ok=True,
        error="",
        input_path=input_path,
        employee_count=employee_count,
        root_id=root_id,
        salary_findings=list(salary_findings),
        reporting_line_findings=list(reporting_line_findings),
        warnings=list(warnings),
        config=dict(cfg),
        summary=summary,
    )
