from __future__ import annotations

"""
Audit Pipeline.

Coordinates one audit run:
1. Validates the configuration and builds the run context.
2. Reads and parses the employee source.
3. Builds the hierarchy.
4. Runs the salary and reporting line audits (read-only, independent).
5. Packs everything into an AnalysisResult.

Fatal conditions propagate as OrgAuditError subclasses.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from orgaudit.core.audit.reporting_lines import audit_reporting_lines
from orgaudit.core.audit.salaries import audit_salaries
from orgaudit.core.hierarchy.builder import build_hierarchy
from orgaudit.core.ingestion.reader import read_records
from orgaudit.core.pipeline.validator import validate_config
from orgaudit.domain.analysis_models import AnalysisResult, create_success_result
from orgaudit.domain.context import AuditContext
from orgaudit.domain.org_models import EmployeeRecord
from orgaudit.utils.i18n import i18n

logger = logging.getLogger(__name__)


def run_analysis(
        input_path: str,
        config: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """
    Execute the full audit for an employee file.

    Args:
        input_path: Path of the employee source.
        config: Raw or partial configuration; defaults fill the gaps.

    Returns:
        AnalysisResult: Findings, warnings and summary counters.

    Raises:
        OrgAuditError: Unreadable source, malformed record, duplicate id,
                       missing root or management cycle.
    """
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    records = read_records(input_path, encoding=cfg["encoding"])
    return analyze_records(records, cfg, input_path=input_path)


def analyze_records(
        records: Iterable[EmployeeRecord],
        cfg: Dict[str, Any],
        *,
        input_path: str = "",
) -> AnalysisResult:
    """
    Build the hierarchy from already parsed records and run both audits.

    Args:
        records: Parsed employee records in input order.
        cfg: Validated configuration.
        input_path: Source label reported in the result.
    """
    ctx = AuditContext.from_config(cfg)

    hierarchy = build_hierarchy(records, ctx)
    logger.info(i18n.t("cli.status.loaded"))

    salary_findings = audit_salaries(hierarchy, ctx)
    reporting_line_findings = audit_reporting_lines(hierarchy, ctx)

    logger.info(
        f"Analysis completed: {len(salary_findings)} salary finding(s), "
        f"{len(reporting_line_findings)} reporting line finding(s)."
    )
    return create_success_result(
        input_path=input_path,
        cfg=cfg,
        employee_count=len(hierarchy),
        root_id=hierarchy.root_id,
        salary_findings=salary_findings,
        reporting_line_findings=reporting_line_findings,
        warnings=ctx.warnings,
    )
