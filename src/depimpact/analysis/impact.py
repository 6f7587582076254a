"""One-hop impact propagation from a vulnerable dependency to its clean direct dependents."""

from collections.abc import Mapping

from ..shared.exceptions import DependencyNotFoundError, create_error_context
from ..shared.models import DependencyRecord, ImpactEntry


def find_record(
    records: Mapping[str, DependencyRecord], vulnerable_id: str
) -> DependencyRecord:
    """Look up the record for ``vulnerable_id``.

    Raises:
        DependencyNotFoundError: If the report has no such dependency
    """
    record = records.get(vulnerable_id)
    if record is None:
        raise DependencyNotFoundError(
            "Vulnerable dependency not found",
            create_error_context(
                vulnerable_dependency=vulnerable_id, known_dependencies=len(records)
            ),
        )
    return record


def propagate_impact(
    records: Mapping[str, DependencyRecord], vulnerable_id: str
) -> list[ImpactEntry]:
    """List clean records that directly depend on ``vulnerable_id``.

    Only direct dependents are considered; see
    :func:`depimpact.analysis.reachability.classify_reachability` for the
    transitive view.

    Raises:
        DependencyNotFoundError: If the report has no such dependency
    """
    find_record(records, vulnerable_id)

    return [
        ImpactEntry(
            source=vulnerable_id,
            target=record.file_name,
            transitive_depth=record.transitive_depth,
            dependency_type=record.dependency_type,
            used_in=list(record.used_in),
            recommendation=(
                f"After upgrading {vulnerable_id}, verify integration with {record.file_name}"
            ),
        )
        for record in records.values()
        if vulnerable_id in record.dependencies and record.is_clean
    ]
