"""
Dependency impact analysis.

Report ingestion, build graph parsing, impact propagation, upgrade version
recommendation, simulation and severity summaries.
"""

from .edges import artifact_file_name, parse_dependency_edges
from .impact import find_record, propagate_impact
from .ingest import ingest_report
from .loaders import load_graph_text, load_report
from .pipeline import analyze, impact_analysis, reachability_analysis
from .reachability import build_dependency_graph, classify_reachability
from .recommend import (
    extract_explicit_versions,
    extract_fallback_version,
    recommend_versions,
)
from .simulation import synthesize_simulations
from .summary import summarize

__all__ = [
    "analyze",
    "impact_analysis",
    "reachability_analysis",
    "ingest_report",
    "parse_dependency_edges",
    "artifact_file_name",
    "find_record",
    "propagate_impact",
    "recommend_versions",
    "extract_explicit_versions",
    "extract_fallback_version",
    "synthesize_simulations",
    "summarize",
    "build_dependency_graph",
    "classify_reachability",
    "load_report",
    "load_graph_text",
]
