"""
Tests for upgrade version recommendation.
"""

from depimpact.analysis.recommend import (
    extract_explicit_versions,
    extract_fallback_version,
    first_description,
    recommend_versions,
)
from depimpact.shared.models import DependencyRecord, Vulnerability


class TestExplicitVersions:
    """Tests for the explicit "recommended to upgrade to version" strategy."""

    def test_single_version_with_which_clause(self) -> None:
        """Test the version ends at ", which"."""
        text = "Users are recommended to upgrade to version 4.2.1, which fixes the issue."
        assert extract_explicit_versions(text) == ["4.2.1"]

    def test_or_separated_versions(self) -> None:
        """Test "or" separates candidates and the final period ends the list."""
        text = "It is recommended to upgrade to version 1.2.3 or 1.3.0."
        assert extract_explicit_versions(text) == ["1.2.3", "1.3.0"]

    def test_comma_and_or_list(self) -> None:
        """Test a mixed comma and "or" list."""
        text = "Recommend to upgrade to version 2.12.7.1, 2.13.4.2 or 2.14.0"
        assert extract_explicit_versions(text) == ["2.12.7.1", "2.13.4.2", "2.14.0"]

    def test_case_insensitive(self) -> None:
        """Test phrase matching ignores case."""
        text = "RECOMMENDED TO UPGRADE TO VERSION 5.0.0. Other text."
        assert extract_explicit_versions(text) == ["5.0.0"]

    def test_version_dots_do_not_end_match(self) -> None:
        """Test a dot inside a version is not treated as a sentence end."""
        assert extract_explicit_versions("recommended to upgrade to version 3.0.1") == ["3.0.1"]

    def test_line_break_ends_match(self) -> None:
        """Test the version list stops at the end of its line."""
        text = "Users are recommended to upgrade to version 1.2.3\nOther releases: 9.9.9"
        assert extract_explicit_versions(text) == ["1.2.3"]
        assert recommend_versions(text) == ["1.2.3"]

    def test_no_phrase(self) -> None:
        """Test descriptions without the phrase yield nothing."""
        assert extract_explicit_versions("Upgrade to 1.2.3 as soon as possible.") == []
        assert extract_explicit_versions("") == []


class TestFallbackVersion:
    """Tests for the patch-bump fallback strategy."""

    def test_bumps_highest_version(self) -> None:
        """Test the highest mentioned version gets a patch bump."""
        text = "Affects versions 1.0.0 through 1.2.0 of the library."
        assert extract_fallback_version(text) == "1.2.1"

    def test_numeric_ordering(self) -> None:
        """Test components compare as integers, not strings."""
        assert extract_fallback_version("Seen in 2.9.9 and 2.10.0") == "2.10.1"

    def test_order_of_appearance_irrelevant(self) -> None:
        """Test the maximum wins regardless of position."""
        assert extract_fallback_version("Fixed in 3.1.4, introduced in 1.0.0") == "3.1.5"

    def test_four_part_version_uses_leading_triple(self) -> None:
        """Test only strict three-part matches are considered."""
        assert extract_fallback_version("Fixed in 2.13.2.1") == "2.13.3"

    def test_no_numbers(self) -> None:
        """Test text without a three-part version yields latest."""
        assert extract_fallback_version("A remote code execution flaw.") == "latest"
        assert extract_fallback_version("Version 2.0 is affected") == "latest"

    def test_non_ascii_digits_ignored(self) -> None:
        """Test only ASCII digits form a version number."""
        assert extract_fallback_version("affects ٣.٤.٥ only") == "latest"
        assert recommend_versions("affects １.２.３") == ["latest"]


class TestRecommendVersions:
    """Tests for the composed recommender."""

    def test_explicit_wins_over_fallback(self) -> None:
        """Test an explicit recommendation is returned verbatim."""
        text = (
            "Versions 2.0.0 to 2.14.1 are affected. "
            "Users are recommended to upgrade to version 2.15.0, which disables lookups."
        )
        assert recommend_versions(text) == ["2.15.0"]

    def test_falls_back(self) -> None:
        """Test the fallback is used when no explicit phrase exists."""
        assert recommend_versions("Mentions 1.0.0 and 1.2.0 only.") == ["1.2.1"]

    def test_never_empty(self) -> None:
        """Test there is always at least one recommendation."""
        assert recommend_versions("nothing useful") == ["latest"]
        assert recommend_versions("") == ["latest"]
        assert recommend_versions(None) == ["latest"]

    def test_duplicates_preserved(self) -> None:
        """Test repeated candidates are not de-duplicated."""
        text = "recommended to upgrade to version 1.0.1 or 1.0.1."
        assert recommend_versions(text) == ["1.0.1", "1.0.1"]


class TestFirstDescription:
    """Tests for first_description."""

    def test_only_first_vulnerability_used(self) -> None:
        """Test later vulnerabilities are ignored."""
        record = DependencyRecord(
            file_name="lib-1.0.0.jar",
            vulnerabilities=[
                Vulnerability(name="CVE-1", description="first"),
                Vulnerability(name="CVE-2", description="second"),
            ],
        )
        assert first_description(record) == "first"

    def test_no_vulnerabilities(self) -> None:
        """Test clean records have an empty description."""
        assert first_description(DependencyRecord(file_name="lib-1.0.0.jar")) == ""
