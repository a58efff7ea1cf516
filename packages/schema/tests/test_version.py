"""
Tests for version parsing and comparison.

Tests cover:
- Version parsing and grammar rejection
- Operator parsing
- Release precedence
- Constraint satisfaction for every operator
"""

import pytest

from packset_schema import (
    ComparisonOp,
    EmptyInputError,
    FormatError,
    IntegerOverflowError,
    OperatorFormatError,
    Version,
    compare_releases,
    op_to_text,
    parse_op,
    parse_version,
)

# ============================================================================
# Version Parsing Tests
# ============================================================================


class TestVersionParsing:
    """Tests for version parsing."""

    def test_parse_simple_version(self):
        v = parse_version("1.2.3")
        assert (v.major, v.minor, v.patch, v.release) == (1, 2, 3, "")

    def test_parse_zero_components(self):
        assert parse_version("0.0.0") == Version(0, 0, 0)

    def test_parse_release(self):
        v = parse_version("2.1.0-alpha.1")
        assert v.release == "alpha.1"
        assert v.release_identifiers == ["alpha", "1"]
        assert v.is_prerelease

    @pytest.mark.parametrize("text", ["1.0.0-0", "1.0.0-rc.0"])
    def test_zero_release_identifier_is_rejected(self, text):
        with pytest.raises(FormatError) as exc_info:
            parse_version(text)
        assert exc_info.value.value == text

    def test_release_is_case_insensitive(self):
        v = parse_version("1.0.0-RC.2")
        assert v.release == "RC.2"

    @pytest.mark.parametrize(
        "text",
        [
            "4.2.01",  # leading zero in patch
            "04.2.1",  # leading zero in major
            "1.02.3",
            "1.2",
            "1.2.3.4",
            "v1.2.3",
            "1.2.3-",
            "1.2.3-01",  # leading zero in numeric identifier
            "1.2.3-1a",  # alphanumeric must start with a letter
            "1.2.3-a..b",
            "1.2.3-a_b",
            " 1.2.3",
            "1.2.3 ",
            ">1.2.3",
        ],
    )
    def test_invalid_version_raises_format_error(self, text):
        with pytest.raises(FormatError) as exc_info:
            parse_version(text)
        assert exc_info.value.value == text
        assert "major.minor.patch" in exc_info.value.expected

    def test_empty_version_raises_empty_input(self):
        with pytest.raises(EmptyInputError):
            parse_version("")

    def test_overflow(self):
        with pytest.raises(IntegerOverflowError) as exc_info:
            parse_version("4294967296.0.0")
        assert exc_info.value.component == "major"

    def test_max_component_is_accepted(self):
        assert parse_version("0.0.4294967295").patch == 4294967295

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_version("nope")

    def test_round_trip(self):
        for text in ["0.0.1", "1.2.3", "10.20.30-rc.1.build", "1.0.0-alpha"]:
            v = parse_version(text)
            assert v.to_text() == text
            assert str(v) == text
            assert parse_version(v.to_text()) == v
            assert Version.from_text(text) == v

    def test_version_is_immutable(self):
        v = parse_version("1.2.3")
        with pytest.raises(AttributeError):
            v.major = 2

    def test_direct_construction_is_validated(self):
        with pytest.raises(FormatError):
            Version(1, 0, 0, "01")
        with pytest.raises(FormatError):
            Version(-1, 0, 0)


class TestOperatorParsing:
    """Tests for operator parsing."""

    @pytest.mark.parametrize(
        "token,op",
        [
            ("=", ComparisonOp.EQ),
            ("!=", ComparisonOp.NE),
            (">", ComparisonOp.GT),
            ("<", ComparisonOp.LT),
            (">=", ComparisonOp.GE),
            ("<=", ComparisonOp.LE),
            ("~", ComparisonOp.APPROX),
        ],
    )
    def test_parse_op(self, token, op):
        assert parse_op(token) is op
        assert str(op) == token

    @pytest.mark.parametrize("token", ["", "==", "~>", "=<", "!", "~="])
    def test_invalid_op(self, token):
        with pytest.raises(OperatorFormatError):
            parse_op(token)

    def test_unset_operator_text(self):
        assert op_to_text(None) == ""
        assert op_to_text(ComparisonOp.GE) == ">="


# ============================================================================
# Release Precedence Tests
# ============================================================================


class TestReleaseComparison:
    """Tests for prerelease precedence."""

    def test_both_empty(self):
        assert compare_releases("", "") == 0

    def test_empty_is_greater(self):
        assert compare_releases("", "alpha") == 1
        assert compare_releases("alpha", "") == -1

    def test_alphanumeric_beats_numeric(self):
        assert compare_releases("a", "1") == 1
        assert compare_releases("1", "a") == -1

    def test_numeric_compares_as_integers(self):
        assert compare_releases("2", "10") == -1
        assert compare_releases("10", "2") == 1

    def test_alphanumeric_compares_bytewise(self):
        assert compare_releases("alpha", "beta") == -1
        assert compare_releases("beta", "alpha") == 1
        assert compare_releases("Beta", "alpha") == -1  # uppercase sorts first

    def test_shorter_prefix_loses(self):
        assert compare_releases("alph", "alpha") == -1

    def test_longer_list_wins(self):
        assert compare_releases("alpha.1", "alpha") == 1
        assert compare_releases("alpha", "alpha.1") == -1

    def test_semver_ordering(self):
        ordered = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        versions = [parse_version(v) for v in ordered]
        assert sorted(reversed(versions)) == versions
        for lower, higher in zip(versions, versions[1:]):
            assert lower < higher
            assert higher > lower


# ============================================================================
# Satisfaction Tests
# ============================================================================


def satisfies(base: str, op: ComparisonOp, other: str) -> bool:
    return parse_version(base).satisfies(op, parse_version(other))


class TestSatisfies:
    """Tests for Version.satisfies."""

    def test_major_ordering(self):
        assert satisfies("1.9.9", ComparisonOp.LT, "2.0.0")
        assert satisfies("2.0.0", ComparisonOp.GT, "1.9.9")

    def test_prerelease_precedence(self):
        assert satisfies("1.0.0", ComparisonOp.GT, "1.0.0-a")
        assert satisfies("1.0.0-a", ComparisonOp.LT, "1.0.0")

    def test_equal(self):
        assert satisfies("1.2.3", ComparisonOp.EQ, "1.2.3")
        assert satisfies("1.2.3-rc.1", ComparisonOp.EQ, "1.2.3-rc.1")
        assert not satisfies("1.2.3", ComparisonOp.EQ, "1.2.4")
        assert not satisfies("1.2.3-rc.1", ComparisonOp.EQ, "1.2.3")

    def test_not_equal(self):
        assert satisfies("1.2.3", ComparisonOp.NE, "1.2.4")
        assert not satisfies("1.2.3", ComparisonOp.NE, "1.2.3")

    def test_greater_and_less(self):
        assert satisfies("1.3.0", ComparisonOp.GT, "1.2.9")
        assert not satisfies("1.2.3", ComparisonOp.GT, "1.2.3")
        assert satisfies("1.2.2", ComparisonOp.LT, "1.2.3")
        assert not satisfies("1.2.3", ComparisonOp.LT, "1.2.3")

    def test_greater_equal_and_less_equal(self):
        assert satisfies("1.2.3", ComparisonOp.GE, "1.2.3")
        assert satisfies("1.2.4", ComparisonOp.GE, "1.2.3")
        assert not satisfies("1.2.3-rc.1", ComparisonOp.GE, "1.2.3")
        assert satisfies("1.2.3", ComparisonOp.LE, "1.2.3")
        assert satisfies("2.0.0", ComparisonOp.LE, "2.1.3")
        assert not satisfies("1.2.4", ComparisonOp.LE, "1.2.3")

    def test_approx_within_family(self):
        assert satisfies("1.2.3", ComparisonOp.APPROX, "1.2.3")
        assert satisfies("1.2.9", ComparisonOp.APPROX, "1.2.3")
        assert satisfies("1.2.3", ComparisonOp.APPROX, "1.2.3-pre")
        assert not satisfies("1.2.2", ComparisonOp.APPROX, "1.2.3")
        assert not satisfies("1.2.3-pre", ComparisonOp.APPROX, "1.2.3")

    def test_approx_never_crosses_major_or_minor(self):
        assert not satisfies("2.0.0", ComparisonOp.APPROX, "1.0.0")
        assert not satisfies("1.3.0", ComparisonOp.APPROX, "1.2.3")
        assert not satisfies("0.9.0", ComparisonOp.APPROX, "1.0.0")

    def test_equality_requires_identical_release(self):
        base = Version(1, 0, 0, "Alpha")
        assert base.satisfies(ComparisonOp.EQ, Version(1, 0, 0, "Alpha"))
        different = Version(1, 0, 0, "alpha")
        assert not base.satisfies(ComparisonOp.EQ, different)
        assert base.satisfies(ComparisonOp.NE, different)

    def test_release_case_orders_bytewise(self):
        upper, lower = parse_version("1.0.0-Alpha"), parse_version("1.0.0-alpha")
        assert upper.satisfies(ComparisonOp.LT, lower)
        assert upper.satisfies(ComparisonOp.LE, lower)
        assert not upper.satisfies(ComparisonOp.GT, lower)
        assert lower.satisfies(ComparisonOp.GT, upper)
        assert lower.satisfies(ComparisonOp.APPROX, upper)

    @pytest.mark.parametrize("op", list(ComparisonOp))
    def test_satisfies_is_total(self, op):
        versions = [parse_version(v) for v in ["0.0.0", "1.0.0-a", "1.0.0", "1.0.1", "2.0.0-1"]]
        for a in versions:
            for b in versions:
                assert isinstance(a.satisfies(op, b), bool)

    def test_compare_is_antisymmetric(self):
        a, b = parse_version("1.0.0-beta.2"), parse_version("1.0.0-beta.11")
        assert a.compare(b) == -b.compare(a) == -1
