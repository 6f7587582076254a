"""
Shared module for core functionality.

Contains core models, exceptions and logging shared across the toolkit.
"""

from .exceptions import (
    AnalysisError,
    DependencyNotFoundError,
    DepImpactError,
    ExternalToolError,
    GraphLoadError,
    OutputWriteError,
    ReportLoadError,
    create_error_context,
    wrap_external_error,
)
from .logging import get_logger, setup_logging
from .models import (
    AnalysisResult,
    AnalysisSummary,
    DependencyEdge,
    DependencyRecord,
    ImpactEntry,
    ImpactResult,
    ProcessingConfig,
    ReachabilityResult,
    SeverityLevel,
    Simulation,
    Vulnerability,
)

__all__ = [
    # Core models
    "AnalysisResult",
    "AnalysisSummary",
    "DependencyEdge",
    "DependencyRecord",
    "ImpactEntry",
    "ImpactResult",
    "ProcessingConfig",
    "ReachabilityResult",
    "SeverityLevel",
    "Simulation",
    "Vulnerability",
    # Core exceptions
    "DepImpactError",
    "AnalysisError",
    "DependencyNotFoundError",
    "ExternalToolError",
    "ReportLoadError",
    "GraphLoadError",
    "OutputWriteError",
    "wrap_external_error",
    "create_error_context",
    # Utils
    "setup_logging",
    "get_logger",
]
