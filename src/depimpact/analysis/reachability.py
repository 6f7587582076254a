"""
Transitive reachability over the build dependency graph.

Unlike :mod:`depimpact.analysis.impact`, which only looks at direct
dependents, this marks every component that reaches a vulnerable
component through any chain of dependencies.
"""

import logging
from collections.abc import Iterable, Mapping

import networkx as nx

from ..shared.models import DependencyEdge, DependencyRecord, ReachabilityResult

logger = logging.getLogger(__name__)


def build_dependency_graph(
    edges: Iterable[DependencyEdge],
    records: Mapping[str, DependencyRecord] | None = None,
) -> nx.DiGraph:
    """Build a directed graph with an edge from each dependent to its dependency.

    Args:
        edges: Parsed build graph edges
        records: Optional ingested records; each becomes a node carrying its vulnerability count

    Returns:
        NetworkX directed graph
    """
    graph = nx.DiGraph()

    for file_name, record in (records or {}).items():
        graph.add_node(file_name, vulnerabilities=len(record.vulnerabilities))

    for edge in edges:
        graph.add_edge(edge.source, edge.target)

    return graph


def classify_reachability(
    records: Mapping[str, DependencyRecord], edges: Iterable[DependencyEdge]
) -> ReachabilityResult:
    """Classify components as vulnerable, transitively impacted or clean.

    Graph nodes that are not in the report can still be impacted.
    """
    graph = build_dependency_graph(edges, records)
    vulnerable = {name for name, record in records.items() if not record.is_clean}

    impacted: set[str] = set()
    for node in vulnerable:
        impacted.update(nx.ancestors(graph, node))
    impacted -= vulnerable

    clean = set(records) - vulnerable - impacted

    logger.debug(
        f"Reachability: {len(vulnerable)} vulnerable, {len(impacted)} impacted, {len(clean)} clean"
    )

    return ReachabilityResult(
        vulnerable=sorted(vulnerable),
        impacted=sorted(impacted),
        clean=sorted(clean),
    )
