"""Upgrade simulations for a vulnerable dependency."""

from ..shared.models import DependencyEdge, DependencyRecord, Simulation
from .recommend import first_description, recommend_versions


def simulation_id(vulnerable_id: str, version: str) -> str:
    return f"{vulnerable_id}-upgrade-to-{version}"


def synthesize_simulations(record: DependencyRecord, vulnerable_id: str) -> list[Simulation]:
    """Build one simulation per recommended version, in recommendation order.

    Versions are not de-duplicated, so a description that lists the same
    version twice produces two simulations with the same id.

    Args:
        record: Record of the vulnerable dependency
        vulnerable_id: Identifier of the vulnerable dependency

    Returns:
        Simulations scored by the number of vulnerabilities on ``record``
    """
    severity_score = len(record.vulnerabilities)

    return [
        Simulation(
            id=simulation_id(vulnerable_id, version),
            description=f"Simulate upgrading {vulnerable_id} to {version}",
            severity_score=severity_score,
            recommended_version=version,
            graph=[DependencyEdge(source=vulnerable_id, target=version)],
        )
        for version in recommend_versions(first_description(record))
    ]
