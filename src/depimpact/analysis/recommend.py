"""
Upgrade version recommendation from free-text vulnerability descriptions.

Two strategies are tried in order and the first one that produces a result
wins:

1. Explicit: the description states the fix, e.g. "Users are recommended
   to upgrade to version 2.15.0, which fixes this issue." Every listed
   version is returned verbatim.
2. Fallback: the highest ``major.minor.patch`` mentioned anywhere in the
   description, with its patch number bumped by one. Descriptions with no
   such number yield ``"latest"``.

Neither strategy validates that the versions exist.
"""

import re
from collections.abc import Callable

from ..shared.models import DependencyRecord

LATEST_VERSION = "latest"

EXPLICIT_RE = re.compile(
    r"recommend(?:ed)? to upgrade to version\s+(.+?)(?=, which|\.(?:\s|$)|\n|$)",
    re.IGNORECASE,
)
OR_RE = re.compile(r"\bor\b", re.IGNORECASE)
SEMVER_RE = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+")

VersionStrategy = Callable[[str], list[str]]


def extract_explicit_versions(description: str) -> list[str]:
    """Return the versions named in a "recommended to upgrade to version" phrase.

    Args:
        description: Vulnerability description

    Returns:
        Versions in the order listed, or an empty list when there is no such phrase
    """
    match = EXPLICIT_RE.search(description)
    if not match:
        return []

    listed = OR_RE.sub(",", match.group(1))
    return [version.strip() for version in listed.split(",") if version.strip()]


def extract_fallback_version(description: str) -> str:
    """Bump the patch number of the highest three-part version in the text."""
    matches = SEMVER_RE.findall(description)
    if not matches:
        return LATEST_VERSION

    # sorted() is stable, so equal tuples keep their order of appearance
    semvers = sorted(tuple(int(part) for part in match.split(".")) for match in matches)
    major, minor, patch = semvers[-1]
    return f"{major}.{minor}.{patch + 1}"


def _fallback_strategy(description: str) -> list[str]:
    return [extract_fallback_version(description)]


STRATEGIES: tuple[VersionStrategy, ...] = (extract_explicit_versions, _fallback_strategy)


def recommend_versions(description: str | None) -> list[str]:
    """Recommend upgrade versions for a vulnerability description.

    Always returns at least one version string.
    """
    text = description or ""
    for strategy in STRATEGIES:
        versions = strategy(text)
        if versions:
            return versions
    return [LATEST_VERSION]


def first_description(record: DependencyRecord) -> str:
    """Description of the first recorded vulnerability, or an empty string."""
    if not record.vulnerabilities:
        return ""
    return record.vulnerabilities[0].description or ""
