"""
Pytest configuration and shared fixtures for Dependency Impact Toolkit tests.
"""

import json
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_report_data() -> dict[str, Any]:
    """Return a Dependency-Check style report.

    ``log4j-core`` is vulnerable; ``app`` and ``spring-boot`` depend on it
    directly, ``jackson-databind`` is vulnerable itself and also depends on it.
    ``web`` depends on ``app`` only.
    """
    return {
        "projectInfo": {"name": "demo", "reportDate": "2024-05-01T10:00:00.000Z"},
        "dependencies": [
            {
                "fileName": "log4j-core-2.14.1.jar",
                "vulnerabilities": [
                    {
                        "name": "CVE-2021-44228",
                        "severity": "CRITICAL",
                        "description": (
                            "Apache Log4j2 2.0-beta9 through 2.14.1 JNDI features do not "
                            "protect against attacker controlled LDAP endpoints. Users are "
                            "recommended to upgrade to version 2.15.0, which fixes this issue."
                        ),
                    },
                    {
                        "name": "CVE-2021-45046",
                        "severity": "HIGH",
                        "description": "It is recommended to upgrade to version 2.16.0.",
                    },
                ],
            },
            {
                "fileName": "app-1.0.0.jar",
                "dependencies": ["log4j-core-2.14.1.jar", "commons-lang3-3.12.0.jar"],
                "vulnerabilities": [],
            },
            {
                "fileName": "spring-boot-2.6.0.jar",
                "dependencies": ["log4j-core-2.14.1.jar"],
            },
            {
                "fileName": "jackson-databind-2.12.0.jar",
                "dependencies": ["log4j-core-2.14.1.jar", "missing-9.9.9.jar"],
                "vulnerabilities": [
                    {
                        "name": "CVE-2020-36518",
                        "severity": "MEDIUM",
                        "description": "Fixed in 2.12.6 and 2.13.2.1 releases.",
                    },
                    {"name": "CVE-2022-42003", "severity": "LOW"},
                ],
            },
            {
                "fileName": "commons-lang3-3.12.0.jar",
                "dependencies": None,
                "vulnerabilities": None,
            },
            {
                "fileName": "web-1.0.0.jar",
                "dependencies": ["app-1.0.0.jar"],
            },
        ],
    }


@pytest.fixture
def sample_graph_text() -> str:
    """Return ``mvn dependency:tree -DoutputType=dot`` style output."""
    return "\n".join(
        [
            "[INFO] --- maven-dependency-plugin:3.6.0:tree (default-cli) @ web ---",
            'digraph "com.example:web:jar:1.0.0" { ',
            '\t"com.example:web:jar:1.0.0" -> "com.example:app:jar:1.0.0:compile" ; ',
            '\t"com.example:app:jar:1.0.0:compile" -> '
            '"org.apache.logging.log4j:log4j-core:jar:2.14.1:compile" ; ',
            '\t"com.example:app:jar:1.0.0:compile" -> '
            '"org.apache.commons:commons-lang3:jar:3.12.0:compile" ; ',
            " } ",
            "[INFO] BUILD SUCCESS",
        ]
    )


@pytest.fixture
def sample_report_file(temp_dir: Path, sample_report_data: dict[str, Any]) -> Path:
    """Write the sample report and return its path."""
    report_path = temp_dir / "dependency-check-report.json"
    with open(report_path, "w") as f:
        json.dump(sample_report_data, f)
    return report_path


@pytest.fixture
def sample_graph_file(temp_dir: Path, sample_graph_text: str) -> Path:
    """Write the sample graph output and return its path."""
    graph_path = temp_dir / "dependency-tree.dot"
    graph_path.write_text(sample_graph_text)
    return graph_path
