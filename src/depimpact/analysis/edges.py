"""
Build dependency graph parsing.

Reads the DOT-style output of ``mvn dependency:tree -DoutputType=dot``,
where each edge line carries two quoted Maven coordinates::

    "com.example:app:jar:1.0.0" -> "org.lib:core:jar:2.1.0:compile" ;

and turns it into edges between ``{artifactId}-{version}.jar`` file names,
the naming convention used by the scan report.
"""

import logging
import re

from ..shared.models import DependencyEdge

logger = logging.getLogger(__name__)

QUOTED_RE = re.compile(r'"([^"]+)"')


def artifact_file_name(coordinate: str) -> str | None:
    """Convert ``group:artifact:type:version[:scope]`` to ``artifact-version.jar``.

    Returns:
        The synthesized file name, or None when the coordinate has fewer than four fields
    """
    parts = coordinate.split(":")
    if len(parts) < 4:
        return None

    artifact_id, version = parts[1], parts[3]
    return f"{artifact_id}-{version}.jar"


def parse_edge_line(line: str) -> DependencyEdge | None:
    """Parse one line; only lines with exactly two quoted coordinates yield an edge."""
    quoted = QUOTED_RE.findall(line)
    if len(quoted) != 2:
        return None

    source = artifact_file_name(quoted[0])
    target = artifact_file_name(quoted[1])
    if source is None or target is None:
        logger.debug(f"Skipping unparsable graph line: {line.strip()}")
        return None

    return DependencyEdge(source=source, target=target)


def parse_dependency_edges(text: str | None) -> list[DependencyEdge]:
    """Parse a build graph text blob into edges, in line order."""
    if not text:
        return []

    edges = []
    for line in text.splitlines():
        edge = parse_edge_line(line)
        if edge is not None:
            edges.append(edge)

    return edges
