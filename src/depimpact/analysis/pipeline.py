"""
Request-level analysis operations.

Each call rebuilds its records from the raw report; nothing is cached
between calls.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..shared.models import AnalysisResult, ImpactResult, ReachabilityResult
from .edges import parse_dependency_edges
from .impact import find_record, propagate_impact
from .ingest import ingest_report, project_info, report_date
from .reachability import classify_reachability
from .simulation import synthesize_simulations
from .summary import summarize

logger = logging.getLogger(__name__)


def analyze(report: Mapping[str, Any] | None, graph_text: str | None = None) -> AnalysisResult:
    """Summarize a scan report and parse the build graph.

    Args:
        report: Parsed scan report
        graph_text: Build dependency graph text output

    Returns:
        Summary, ingested dependencies and graph edges
    """
    records = ingest_report(report)
    summary = summarize(records)
    edges = parse_dependency_edges(graph_text)

    logger.info(
        f"Analyzed {summary.total_dependencies} dependencies "
        f"({summary.vulnerable_count} vulnerable), {len(edges)} graph edges"
    )

    return AnalysisResult(
        summary=summary,
        dependencies=list(records.values()),
        graph=edges,
        report_date=report_date(report),
        project_info=project_info(report),
    )


def impact_analysis(report: Mapping[str, Any] | None, vulnerable_id: str) -> ImpactResult:
    """Compute direct impact and upgrade simulations for a vulnerable dependency.

    Raises:
        DependencyNotFoundError: If the report has no such dependency
    """
    records = ingest_report(report)
    source = find_record(records, vulnerable_id)

    impact = propagate_impact(records, vulnerable_id)
    simulations = synthesize_simulations(source, vulnerable_id)

    logger.info(
        f"Impact of {vulnerable_id}: {len(impact)} affected, {len(simulations)} simulations"
    )

    return ImpactResult(simulations=simulations, impact=impact)


def reachability_analysis(
    report: Mapping[str, Any] | None, graph_text: str | None
) -> ReachabilityResult:
    """Classify every component by transitive reachability of a vulnerable one."""
    records = ingest_report(report)
    result = classify_reachability(records, parse_dependency_edges(graph_text))

    logger.info(
        f"Reachability: {len(result.vulnerable)} vulnerable, "
        f"{len(result.impacted)} transitively impacted"
    )

    return result
