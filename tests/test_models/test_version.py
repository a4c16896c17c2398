"""Tests for Version parsing and ordering."""

import pytest

from hostcheck.models import Version


def test_parse_three_fields() -> None:
    assert Version.parse("3.5.0") == Version(3, 5, 0)


def test_parse_ignores_trailing_content() -> None:
    """Anything after the patch digits is not significant."""
    assert Version.parse("3.5.0-rc1") == Version(3, 5, 0)
    assert Version.parse("3.5.0.1") == Version(3, 5, 0)


def test_parse_accepts_leading_v() -> None:
    assert Version.parse("v3.6.2") == Version(3, 6, 2)
    assert Version.parse("  V3.6.2\n") == Version(3, 6, 2)


def test_parse_major_minor_only() -> None:
    """Snapshot version files may carry only major.minor."""
    assert Version.parse("3.7") == Version(3, 7, 0)


def test_parse_stops_at_suffixed_field() -> None:
    assert Version.parse("3.6rc1.4") == Version(3, 6, 0)


@pytest.mark.parametrize("text", ["", "GitHub", "v", ".3.5", "x.1.2"])
def test_parse_rejects_missing_major(text: str) -> None:
    with pytest.raises(ValueError, match="Unparseable version"):
        Version.parse(text)


def test_negative_fields_rejected() -> None:
    with pytest.raises(ValueError):
        Version(3, -1, 0)


def test_multi_digit_fields_compare_numerically() -> None:
    """3.9.0 sorts below 3.10.0, unlike a string comparison."""
    assert Version.parse("3.9.0") < Version.parse("3.10.0")
    assert Version.parse("3.10.0") > Version.parse("3.9.9")
    assert "3.9.0" > "3.10.0"  # the lexical trap this model avoids


def test_ordering_is_major_then_minor_then_patch() -> None:
    assert Version(2, 99, 99) < Version(3, 0, 0)
    assert Version(3, 4, 99) < Version(3, 5, 0)
    assert Version(3, 5, 0) < Version(3, 5, 1)


def test_equal_versions_compare_equal() -> None:
    v = Version.parse("3.6.2")
    assert v == Version(3, 6, 2)
    assert v >= v
    assert v <= v
    assert not v < v


def test_sorting_matches_numeric_order() -> None:
    versions = [Version.parse(s) for s in ["3.10.0", "3.9.0", "3.10.1", "2.22.0"]]
    assert [str(v) for v in sorted(versions)] == ["2.22.0", "3.9.0", "3.10.0", "3.10.1"]


def test_ordinal_encoding() -> None:
    assert Version(3, 5, 0).ordinal == 30500
    assert Version(3, 9, 0).ordinal < Version(3, 10, 0).ordinal


def test_release_drops_patch() -> None:
    assert Version(3, 6, 4).release == Version(3, 6, 0)


def test_str_is_dotted() -> None:
    assert str(Version.parse("v3.6.2-beta")) == "3.6.2"
