"""
Loading of finished scan and build artifacts.

The scan report and the build graph text are produced by external tools.
Any failure to read them surfaces here as an ``ExternalToolError`` that
carries the path and the underlying error text.
"""

import json
import logging
from pathlib import Path
from typing import Any

from ..shared.exceptions import (
    GraphLoadError,
    ReportLoadError,
    create_error_context,
    wrap_external_error,
)

logger = logging.getLogger(__name__)


def load_report(path: Path) -> dict[str, Any]:
    """Load a Dependency-Check JSON report.

    Args:
        path: Path to the report file

    Returns:
        Parsed report

    Raises:
        ReportLoadError: If the file is missing, unreadable or not a JSON object
    """
    context = create_error_context(path=str(path), operation="load_report")

    try:
        with open(path, encoding="utf-8") as f:
            report = json.load(f)
    except (OSError, ValueError) as e:
        wrapped = wrap_external_error(e, dict(context))
        raise ReportLoadError(
            "Failed to read scan report", {**wrapped.context, "details": wrapped.message}
        ) from e

    if not isinstance(report, dict):
        raise ReportLoadError(
            "Scan report must be a JSON object",
            {**context, "details": f"top-level value is {type(report).__name__}"},
        )

    logger.debug(f"Loaded scan report from {path}")
    return report


def load_graph_text(path: Path) -> str:
    """Read build graph text output.

    Raises:
        GraphLoadError: If the file is missing or unreadable
    """
    context = create_error_context(path=str(path), operation="load_graph")

    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        wrapped = wrap_external_error(e, dict(context))
        raise GraphLoadError(
            "Failed to read dependency graph", {**wrapped.context, "details": wrapped.message}
        ) from e

    logger.debug(f"Loaded dependency graph from {path}")
    return text
