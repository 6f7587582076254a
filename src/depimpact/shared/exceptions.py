"""
Custom exception hierarchy for the dependency impact toolkit.
"""

import json
from typing import Any


class DepImpactError(Exception):
    """Base exception for all dependency impact toolkit errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize with message and optional context.

        Args:
            message: Error message
            context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


# Analysis exceptions
class AnalysisError(DepImpactError):
    """Base exception for analysis operations."""

    pass


class DependencyNotFoundError(AnalysisError):
    """Requested dependency has no record in the ingested report."""

    pass


# External collaborator exceptions (scan report, build graph)
class ExternalToolError(DepImpactError):
    """An upstream scan or build artifact failed or is unreadable."""

    pass


class ReportLoadError(ExternalToolError):
    """Scan report could not be read or decoded."""

    pass


class GraphLoadError(ExternalToolError):
    """Build dependency graph output could not be read."""

    pass


class OutputWriteError(ExternalToolError):
    """A result file could not be written."""

    pass


def wrap_external_error(
    error: Exception, context: dict[str, Any] | None = None
) -> DepImpactError:
    """Wrap external exceptions in our custom exception hierarchy.

    Args:
        error: External exception to wrap
        context: Additional context information

    Returns:
        Appropriate DepImpactError subclass
    """
    error_message = str(error)
    error_context = context or {}
    error_context["original_error"] = type(error).__name__

    # JSONDecodeError is a ValueError, so it has to be checked first
    if isinstance(error, json.JSONDecodeError):
        return ReportLoadError(f"Invalid JSON: {error_message}", error_context)

    elif isinstance(error, FileNotFoundError):
        return ExternalToolError(f"File not found: {error_message}", error_context)

    elif isinstance(error, PermissionError):
        return ExternalToolError(f"Permission denied: {error_message}", error_context)

    elif isinstance(error, UnicodeError):
        return ExternalToolError(f"Undecodable output: {error_message}", error_context)

    elif isinstance(error, OSError):
        return ExternalToolError(f"I/O error: {error_message}", error_context)

    elif isinstance(error, ValueError | TypeError):
        return DepImpactError(f"Data validation error: {error_message}", error_context)

    else:
        return DepImpactError(f"Unexpected error: {error_message}", error_context)


def create_error_context(**kwargs) -> dict[str, Any]:
    """Create error context dictionary with standardized keys.

    Args:
        **kwargs: Context key-value pairs

    Returns:
        Context dictionary
    """
    context = {}

    for key, value in kwargs.items():
        if value is not None:
            context[key] = value

    return context
