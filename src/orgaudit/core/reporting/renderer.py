from __future__ import annotations

"""
Report Renderer.

Formats structured audit findings as human-readable lines. The renderer only
consumes finding objects; it never looks at the hierarchy.
"""

from dataclasses import asdict
from typing import List, Sequence

from orgaudit.domain.analysis_models import AnalysisResult
from orgaudit.domain.finding_models import FindingKind, ReportingLineFinding, SalaryFinding
from orgaudit.utils.i18n import i18n

_SALARY_KEYS = {
    FindingKind.UNDERPAID: "report.salary.underpaid",
    FindingKind.OVERPAID: "report.salary.overpaid",
}


def render_salary_findings(findings: Sequence[SalaryFinding]) -> List[str]:
    """Render one line per salary finding, or a single summary line if there are none."""
    if not findings:
        return [i18n.t("report.salary.none")]
    return [i18n.t(_SALARY_KEYS[f.kind], **asdict(f)) for f in findings]


def render_reporting_line_findings(findings: Sequence[ReportingLineFinding]) -> List[str]:
    """Render one line per reporting line finding, or a single summary line if there are none."""
    if not findings:
        return [i18n.t("report.reporting_line.none")]
    return [i18n.t("report.reporting_line.too_long", **asdict(f)) for f in findings]


def render_report(result: AnalysisResult) -> List[str]:
    """
    Render both analysis sections of a result, each under its header.

    Args:
        result: A successful analysis result.

    Returns:
        List[str]: Report lines, without trailing newlines.
    """
    lines: List[str] = [i18n.t("report.salary.header")]
    lines.extend(render_salary_findings(result.salary_findings))
    lines.append("")
    lines.append(i18n.t("report.reporting_line.header"))
    lines.extend(render_reporting_line_findings(result.reporting_line_findings))
    return lines
