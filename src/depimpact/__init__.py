"""
Dependency Impact Toolkit - vulnerability impact analysis for Maven builds.

This toolkit provides functionality for:
- Summarizing Dependency-Check vulnerability reports
- Building reverse-dependency ("used in") indexes
- Finding clean components put at risk by a vulnerable dependency
- Simulating upgrades to versions recommended in vulnerability descriptions
"""

__version__ = "0.1.0"

from .analysis import analyze, impact_analysis, reachability_analysis
from .shared.exceptions import DepImpactError
from .shared.models import AnalysisResult, ImpactResult, ProcessingConfig

__all__ = [
    "__version__",
    "analyze",
    "impact_analysis",
    "reachability_analysis",
    "DepImpactError",
    "AnalysisResult",
    "ImpactResult",
    "ProcessingConfig",
]
