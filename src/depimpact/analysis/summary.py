"""Severity summary over an ingested report."""

from collections import Counter
from collections.abc import Mapping

from ..shared.models import AnalysisSummary, DependencyRecord, SeverityLevel


def summarize(records: Mapping[str, DependencyRecord]) -> AnalysisSummary:
    """Count dependencies, vulnerable dependencies and vulnerabilities per severity.

    Severities are matched exactly against HIGH, MEDIUM and LOW. CRITICAL and
    any other value fall into none of the buckets.
    """
    severities = Counter(
        vuln.severity for record in records.values() for vuln in record.vulnerabilities
    )

    return AnalysisSummary(
        total_dependencies=len(records),
        vulnerable_count=sum(1 for record in records.values() if not record.is_clean),
        high_severity=severities[SeverityLevel.HIGH.value],
        medium_severity=severities[SeverityLevel.MEDIUM.value],
        low_severity=severities[SeverityLevel.LOW.value],
    )
