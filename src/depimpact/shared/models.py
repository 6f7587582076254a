"""
Core data models for the dependency impact toolkit using simple dataclasses.

Field names are snake_case; ``to_dict`` renders the camelCase keys used by
the scan report and by the JSON payloads handed back to callers.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

DIRECT_DEPENDENCY = "direct"
DEFAULT_TRANSITIVE_DEPTH = 1
HIGH_IMPACT = "High"


class SeverityLevel(str, Enum):
    """Severity values reported by the vulnerability scanner."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


@dataclass
class ProcessingConfig:
    """Configuration for an analysis run."""

    output_dir: Path | None = None
    json_indent: int = 2
    log_level: str = "INFO"
    log_file: Path | None = None


@dataclass
class Vulnerability:
    """A single vulnerability attached to a dependency."""

    name: str = ""
    severity: str | None = None
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "description": self.description}
        if self.severity is not None:
            data["severity"] = self.severity
        return data


@dataclass
class DependencyRecord:
    """A component from the scan report with its forward and reverse links."""

    file_name: str
    dependencies: list[str] = field(default_factory=list)
    vulnerabilities: list[Vulnerability] = field(default_factory=list)
    used_in: list[str] = field(default_factory=list)
    dependency_type: str = DIRECT_DEPENDENCY
    transitive_depth: int = DEFAULT_TRANSITIVE_DEPTH

    @property
    def is_clean(self) -> bool:
        return not self.vulnerabilities

    def to_dict(self) -> dict[str, Any]:
        return {
            "fileName": self.file_name,
            "dependencies": list(self.dependencies),
            "vulnerabilities": [v.to_dict() for v in self.vulnerabilities],
            "usedIn": list(self.used_in),
            "dependencyType": self.dependency_type,
            "transitiveDepth": self.transitive_depth,
        }


@dataclass
class DependencyEdge:
    """Directed edge of the build dependency graph (``source`` depends on ``target``)."""

    source: str
    target: str

    def to_dict(self) -> dict[str, str]:
        return {"from": self.source, "to": self.target}


@dataclass
class ImpactEntry:
    """A clean component flagged because it directly depends on a vulnerable one."""

    source: str
    target: str
    impact_level: str = HIGH_IMPACT
    transitive_depth: int = DEFAULT_TRANSITIVE_DEPTH
    dependency_type: str = DIRECT_DEPENDENCY
    used_in: list[str] = field(default_factory=list)
    recommendation: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "impactLevel": self.impact_level,
            "transitiveDepth": self.transitive_depth,
            "dependencyType": self.dependency_type,
            "usedIn": list(self.used_in),
            "recommendation": self.recommendation,
        }


@dataclass
class Simulation:
    """Hypothetical upgrade of a vulnerable dependency to a recommended version."""

    id: str
    description: str
    severity_score: int
    recommended_version: str
    graph: list[DependencyEdge] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "severityScore": self.severity_score,
            "recommendedVersion": self.recommended_version,
            "graph": [edge.to_dict() for edge in self.graph],
        }


@dataclass
class AnalysisSummary:
    """Aggregate counts over an ingested report."""

    total_dependencies: int = 0
    vulnerable_count: int = 0
    high_severity: int = 0
    medium_severity: int = 0
    low_severity: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "totalDependencies": self.total_dependencies,
            "vulnerableCount": self.vulnerable_count,
            "highSeverity": self.high_severity,
            "mediumSeverity": self.medium_severity,
            "lowSeverity": self.low_severity,
        }


@dataclass
class AnalysisResult:
    """Result of the analysis operation."""

    summary: AnalysisSummary
    dependencies: list[DependencyRecord] = field(default_factory=list)
    graph: list[DependencyEdge] = field(default_factory=list)
    report_date: str | None = None
    project_info: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "summary": self.summary.to_dict(),
            "dependencies": [record.to_dict() for record in self.dependencies],
            "graph": [edge.to_dict() for edge in self.graph],
        }
        if self.report_date is not None:
            data["reportDate"] = self.report_date
        if self.project_info is not None:
            data["projectInfo"] = self.project_info
        return data


@dataclass
class ImpactResult:
    """Result of the impact operation for one vulnerable dependency."""

    simulations: list[Simulation] = field(default_factory=list)
    impact: list[ImpactEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "simulations": [s.to_dict() for s in self.simulations],
            "impact": [entry.to_dict() for entry in self.impact],
        }


@dataclass
class ReachabilityResult:
    """Transitive classification of components over the build graph."""

    vulnerable: list[str] = field(default_factory=list)
    impacted: list[str] = field(default_factory=list)
    clean: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "vulnerable": list(self.vulnerable),
            "impacted": list(self.impacted),
            "clean": list(self.clean),
        }
