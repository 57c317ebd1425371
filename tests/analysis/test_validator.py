"""Tests for license policy validation."""
from license_policy.analysis.validator import (
    get_used_licenses,
    validate_dependencies,
    validate_dependency,
)
from license_policy.models.dependency import Dependency, Verdict
from license_policy.models.license import License, LicenseCatalog
from license_policy.models.policy import ViolationKind


class TestValidateDependency:
    """Tests for validate_dependency function."""

    def test_allowed_license(self, catalog: LicenseCatalog) -> None:
        """Test that an allowed license raises no violation."""
        result, violations = validate_dependency(
            Dependency(name="lib", license="MIT"), catalog
        )

        assert result.verdict == Verdict.ALLOWED
        assert result.reason == "MIT"
        assert violations == []

    def test_blank_license(self, catalog: LicenseCatalog) -> None:
        """Test that a blank license is NOT_FOUND and reported as unlisted."""
        result, violations = validate_dependency(
            Dependency(name="mystery", license=""), catalog
        )

        assert result.verdict == Verdict.NOT_FOUND
        assert result.reason is None
        assert len(violations) == 1
        assert violations[0].kind == ViolationKind.UNLISTED
        assert violations[0].message == "No License found for Dependency: mystery"

    def test_blank_license_with_empty_catalog(self) -> None:
        """Test that blank licenses are NOT_FOUND regardless of catalog."""
        result, _ = validate_dependency(Dependency(name="x"), LicenseCatalog())

        assert result.verdict == Verdict.NOT_FOUND

    def test_and_with_denied_license(self, catalog: LicenseCatalog) -> None:
        """Test that a denied conjunct is reported as not allowed."""
        result, violations = validate_dependency(
            Dependency(name="lib", license="(MIT AND GPL-3.0)"), catalog
        )

        assert result.verdict == Verdict.NOT_ALLOWED
        assert result.reason == "GPL-3.0"
        assert len(violations) == 1
        assert violations[0].kind == ViolationKind.NOT_ALLOWED
        assert "GPL v3" in violations[0].message
        assert "MIT License" not in violations[0].message

    def test_message_names_every_denied_license(self) -> None:
        """Test that every denied matching license is named in the message."""
        catalog = LicenseCatalog(
            licenses=(
                License(identifier="GPL-3.0", name="GPL v3", allowed=False),
                License(identifier="AGPL-3.0", name="AGPL v3", allowed=False),
                License(identifier="MIT", name="MIT License", allowed=True),
            )
        )

        result, violations = validate_dependency(
            Dependency(name="lib", license="(AGPL-3.0 AND MIT)"), catalog
        )

        # "GPL-3.0" occurs inside "AGPL-3.0" and is matched as well
        assert result.reason == "GPL-3.0"
        assert violations[0].message == (
            "Dependency lib uses a not allowed license: GPL v3 AGPL v3"
        )

    def test_and_with_unknown_license(self, catalog: LicenseCatalog) -> None:
        """Test that an unknown conjunct is reported as not found."""
        result, violations = validate_dependency(
            Dependency(name="lib", license="(MIT AND Zlib)"), catalog
        )

        assert result.verdict == Verdict.NOT_FOUND
        assert result.reason == "Zlib"
        assert violations[0].kind == ViolationKind.UNLISTED

    def test_or_with_allowed_alternative(self, catalog: LicenseCatalog) -> None:
        """Test that an OR-group passes with one allowed alternative."""
        result, violations = validate_dependency(
            Dependency(name="lib", license="(MIT OR GPL-3.0)"), catalog
        )

        assert result.verdict == Verdict.ALLOWED
        assert violations == []

    def test_denied_single_license(self, catalog: LicenseCatalog) -> None:
        """Test that a denied single license is flagged as not allowed."""
        result, violations = validate_dependency(
            Dependency(name="lib", license="GPL-3.0"), catalog
        )

        assert result.verdict == Verdict.NOT_FOUND
        assert result.reason == "GPL-3.0"
        assert violations[0].kind == ViolationKind.NOT_ALLOWED
        assert "GPL v3" in violations[0].message

    def test_unknown_single_license(self, catalog: LicenseCatalog) -> None:
        """Test that an unrecognized license is reported as not found."""
        result, violations = validate_dependency(
            Dependency(name="lib", license="Custom License"), catalog
        )

        assert result.verdict == Verdict.NOT_FOUND
        assert violations[0].kind == ViolationKind.UNLISTED

    def test_parentheses_only_is_unlisted(self, catalog: LicenseCatalog) -> None:
        """Test that an expression without identifiers is reported as not found."""
        result, violations = validate_dependency(
            Dependency(name="lib", license="()"), catalog
        )

        assert result.verdict == Verdict.NOT_FOUND
        assert len(violations) == 1
        assert violations[0].kind == ViolationKind.UNLISTED
        assert violations[0].message == "No License found for Dependency: lib"

    def test_repeated_allowed_conjunct_names_no_denied_license(
        self, catalog: LicenseCatalog
    ) -> None:
        """Test that a failed AND without denied matches is reported as not found."""
        result, violations = validate_dependency(
            Dependency(name="lib", license="(MIT AND MIT)"), catalog
        )

        assert result.verdict == Verdict.NOT_FOUND
        assert [v.kind for v in violations] == [ViolationKind.UNLISTED]


class TestValidateDependencies:
    """Tests for validate_dependencies function."""

    def test_scenario(self, catalog: LicenseCatalog) -> None:
        """Test verdicts for a mix of dependencies."""
        dependencies = [
            Dependency(name="a", license="MIT"),
            Dependency(name="b", license="GPL-3.0"),
            Dependency(name="c", license="(MIT AND GPL-3.0)"),
            Dependency(name="d", license="(MIT OR GPL-3.0)"),
            Dependency(name="e", license=""),
        ]

        report = validate_dependencies(dependencies, catalog)

        verdicts = {r.dependency.name: r.verdict for r in report.results}
        assert verdicts == {
            "a": Verdict.ALLOWED,
            "b": Verdict.NOT_FOUND,
            "c": Verdict.NOT_ALLOWED,
            "d": Verdict.ALLOWED,
            "e": Verdict.NOT_FOUND,
        }
        assert [v.dependency_name for v in report.violations] == ["b", "c", "e"]
        assert report.has_violations
        assert report.count(Verdict.ALLOWED) == 2

    def test_input_not_mutated(self, catalog: LicenseCatalog) -> None:
        """Test that reasons are returned on copies, not set on the input."""
        dependency = Dependency(name="lib", license="MIT")

        report = validate_dependencies([dependency], catalog)

        assert dependency.reason is None
        assert report.dependencies[0].reason == "MIT"
        assert report.dependencies[0].name == "lib"

    def test_empty_dependencies(self, catalog: LicenseCatalog) -> None:
        """Test that no dependencies give an empty report."""
        report = validate_dependencies([], catalog)

        assert report.results == []
        assert not report.has_violations


class TestGetUsedLicenses:
    """Tests for get_used_licenses function."""

    def test_returns_cited_licenses_sorted(self) -> None:
        """Test that licenses cited as reasons are returned once, sorted."""
        catalog = LicenseCatalog(
            licenses=(
                License(identifier="MIT", name="MIT License", allowed=True),
                License(identifier="Apache-2.0", name="Apache 2", allowed=True),
                License(identifier="Zlib", name="zlib", allowed=True),
            )
        )
        dependencies = [
            Dependency(name="a", license="MIT", reason="MIT"),
            Dependency(name="b", license="MIT", reason="MIT"),
            Dependency(name="c", license="Apache-2.0", reason="Apache-2.0"),
            Dependency(name="d", license="Unknown"),
        ]

        used = get_used_licenses(dependencies, catalog)

        assert [lic.identifier for lic in used] == ["Apache-2.0", "MIT"]

    def test_ignores_reasons_outside_catalog(self, catalog: LicenseCatalog) -> None:
        """Test that reasons without a catalog entry are skipped."""
        dependencies = [Dependency(name="a", license="Zlib", reason="Zlib")]

        assert get_used_licenses(dependencies, catalog) == []
