"""
Scan report ingestion.

Normalizes the loosely-typed dependency list of a Dependency-Check style
report into ``DependencyRecord`` objects keyed by file name, and derives
the reverse ("used in") links in a second pass.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..shared.models import DependencyRecord, Vulnerability

logger = logging.getLogger(__name__)


def _as_list(value: Any) -> list[Any]:
    """Treat absent, null or non-list values as an empty list."""
    return list(value) if isinstance(value, list) else []


def build_vulnerability(raw: Any) -> Vulnerability:
    """Build a Vulnerability from a raw report entry.

    Args:
        raw: Vulnerability dictionary from the report

    Returns:
        Normalized vulnerability; missing text fields become empty strings
    """
    if not isinstance(raw, Mapping):
        return Vulnerability()

    severity = raw.get("severity")
    return Vulnerability(
        name=str(raw.get("name") or ""),
        severity=str(severity) if severity is not None else None,
        description=str(raw.get("description") or ""),
    )


def build_record(raw: Mapping[str, Any]) -> DependencyRecord | None:
    """Build a DependencyRecord from a raw report dependency, or None if it has no file name."""
    file_name = raw.get("fileName")
    if not file_name:
        return None

    return DependencyRecord(
        file_name=str(file_name),
        dependencies=[str(dep) for dep in _as_list(raw.get("dependencies"))],
        vulnerabilities=[build_vulnerability(v) for v in _as_list(raw.get("vulnerabilities"))],
    )


def ingest_report(report: Mapping[str, Any] | None) -> dict[str, DependencyRecord]:
    """Ingest a scan report into a mapping of file name to record.

    Never raises: malformed entries are skipped and missing collections
    are treated as empty.

    Args:
        report: Parsed scan report

    Returns:
        Mapping of ``fileName`` to record, in report order, with ``used_in`` populated
    """
    records: dict[str, DependencyRecord] = {}
    if not isinstance(report, Mapping):
        return records

    for raw in _as_list(report.get("dependencies")):
        if not isinstance(raw, Mapping):
            logger.debug(f"Skipping non-object dependency entry: {raw!r}")
            continue

        record = build_record(raw)
        if record is None:
            logger.debug("Skipping dependency entry without fileName")
            continue

        records[record.file_name] = record

    link_reverse_dependencies(records)
    return records


def link_reverse_dependencies(records: dict[str, DependencyRecord]) -> None:
    """Populate ``used_in`` for every record from the forward dependency lists.

    Dependencies that name a file absent from ``records`` are dropped from
    the reverse index; no placeholder record is created for them.
    """
    for record in records.values():
        for dep in record.dependencies:
            target = records.get(dep)
            if target is not None:
                target.used_in.append(record.file_name)


def report_date(report: Mapping[str, Any] | None) -> str | None:
    """Return ``projectInfo.reportDate`` when present."""
    if not isinstance(report, Mapping):
        return None

    project_info = report.get("projectInfo")
    if not isinstance(project_info, Mapping):
        return None

    value = project_info.get("reportDate")
    return str(value) if value is not None else None


def project_info(report: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Return the report's ``projectInfo`` object unchanged, if it has one."""
    if not isinstance(report, Mapping):
        return None

    info = report.get("projectInfo")
    return dict(info) if isinstance(info, Mapping) else None
