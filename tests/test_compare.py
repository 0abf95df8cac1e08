# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import logging

import pytest

from semver_label import (
    InvalidVersionError,
    Version,
    compare,
    compare_strings,
    new,
    parse,
    version_key,
)


class TestCompare:
    """Tests for compare function."""

    @pytest.mark.parametrize(
        "a,b,want",
        [
            ("0.0.0", "0.0.0", 0),
            ("0.0.1", "0.0.0", 1),
            ("0.0.2", "0.0.3", -1),
            ("0.1.2", "0.0.3", 1),
            ("0.1.2", "1.0.3", -1),
            ("2.0.5", "1.30.90", 1),
            ("1.0.0", "2.0.0", -1),
            ("2.0.0", "2.1.0", -1),
            ("2.1.0", "2.1.1", -1),
            ("1.9.0", "1.10.0", -1),
        ],
    )
    def test_core_order(self, a, b, want):
        """Test numeric ordering of major, minor and patch."""
        assert compare(parse(a), parse(b)) == want
        assert compare(parse(b), parse(a)) == -want

    def test_core_before_release(self):
        """Test that the core is compared before release labels."""
        assert compare(parse("1.1.5"), parse("1.1.2-rel-blah")) == 1
        assert compare(parse("1.1.5-rel-blah"), parse("1.1.2")) == 1

    def test_release_before_final(self):
        """Test that a release label orders before the final version."""
        assert compare(parse("1.0.0-rc1"), parse("1.0.0")) == -1
        assert compare(parse("1.57.0"), parse("1.57.0-beta1")) == 1

    def test_numeric_identifiers(self):
        """Test that numeric identifiers compare by value."""
        assert compare("1.0.0-beta.2", "1.0.0-beta.11") == -1
        assert compare("1.0.0-10", "1.0.0-2") == 1
        assert compare("1.0.0-01", "1.0.0-1") == 0

    def test_mixed_identifiers_compare_as_text(self):
        """Test that a numeric and an alphanumeric identifier compare as text."""
        assert compare("1.0.0-10", "1.0.0-9a") == -1
        assert compare("1.0.0-alpha", "1.0.0-1") == 1
        assert compare("1.0.0-B", "1.0.0-a") == -1

    def test_shorter_label_first(self):
        """Test that a prefix label orders before the longer label."""
        assert compare("1.0.0-alpha", "1.0.0-alpha.1") == -1
        assert compare("1.0.0-alpha.1.x", "1.0.0-alpha.1") == 1

    @pytest.mark.parametrize(
        "a,b",
        [
            ("1.2.3-four+five.six", "1.2.3-four"),
            ("1.2.3-four", "1.2.3-four+five"),
            ("1.2.3-four+five", "1.2.3-four+six.seven"),
            ("1.0.0+build1", "1.0.0+build2"),
        ],
    )
    def test_build_metadata_ignored(self, a, b):
        """Test that build metadata is ignored in comparison."""
        assert compare(parse(a), parse(b)) == 0
        assert parse(a).equiv(parse(b))

    def test_zero_value(self):
        """Test comparison against the zero Version."""
        assert compare(parse("0.0.0"), Version()) == 0
        assert compare(parse("0.0.0+fizz.bang"), Version()) == 0

    def test_strings_are_parsed_strictly(self):
        """Test that compare rejects invalid version strings."""
        with pytest.raises(InvalidVersionError):
            compare("v1.0.0", "1.0.0")

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse("1.0.0")
        assert compare(v, "2.0.0") == -1
        assert compare("1.0.0", v) == 0


class TestPrecedenceChain:
    """Tests for the precedence example chain from semver.org."""

    CHAIN = [
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-alpha.beta",
        "1.0.0-beta",
        "1.0.0-beta.2",
        "1.0.0-beta.11",
        "1.0.0-rc.1",
        "1.0.0",
    ]

    def test_chain(self):
        """Test each version orders before the next."""
        for lo, hi in zip(self.CHAIN, self.CHAIN[1:]):
            assert compare(lo, hi) == -1, f"{lo} should be < {hi}"
            assert compare(hi, lo) == 1, f"{hi} should be > {lo}"

    def test_sorting(self):
        """Test sorting a shuffled chain with version_key."""
        shuffled = list(reversed(self.CHAIN))
        shuffled[2], shuffled[5] = shuffled[5], shuffled[2]
        assert sorted(shuffled, key=version_key) == self.CHAIN

    def test_sorting_version_objects(self):
        """Test sorting Version objects with the ordering operators."""
        versions = [parse(s) for s in reversed(self.CHAIN)]
        assert [str(v) for v in sorted(versions)] == self.CHAIN
        assert str(max(versions)) == "1.0.0"


class TestVersionMethods:
    """Tests for before, after, equiv and the ordering operators."""

    def test_before_after(self):
        """Test before and after."""
        a, b = parse("1.0.0-rc.1"), parse("1.0.0")
        assert a.before(b)
        assert not b.before(a)
        assert b.after(a)
        assert not a.after(b)
        assert not a.equiv(b)

    def test_equiv_is_not_equality(self):
        """Test that equiv ignores build metadata while == does not."""
        v = new(1, 5, 3).with_release("rc1.4")
        w = parse("1.5.3-rc1.4+modified")
        assert v.equiv(w)
        assert v != w

    def test_operators(self):
        """Test the rich comparison operators."""
        a, b = parse("1.0.0-alpha"), parse("1.0.0-alpha.1")
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert not a > b

    def test_operators_ignore_build(self):
        """Test that build-only differences are neither less nor greater."""
        a, b = parse("1.0.0+x"), parse("1.0.0+y")
        assert not a < b
        assert not a > b
        assert a <= b
        assert a >= b

    def test_methods_match_compare(self):
        """Test that before, after and equiv agree with compare."""
        pairs = [("1.0.0-rc.1", "1.0.0"), ("1.0.0+a", "1.0.0+b"), ("2.0.0", "1.9.9-x")]
        for a, b in pairs:
            va, vb = parse(a), parse(b)
            want = compare(va, vb)
            assert va.before(vb) == (want < 0)
            assert va.after(vb) == (want > 0)
            assert va.equiv(vb) == (want == 0)

    def test_operators_reject_other_types(self):
        """Test that ordering against a non-Version is a TypeError."""
        with pytest.raises(TypeError):
            parse("1.0.0") < "2.0.0"  # type: ignore


class TestCompareStrings:
    """Tests for compare_strings function."""

    def test_cleaned_before_comparison(self):
        """Test that inputs are cleaned before parsing."""
        assert compare_strings("v1", "1.0.0") == 0
        assert compare_strings(" v1.2 ", "1.10") == -1
        assert compare_strings("1.0.0-rc..1", "1.0.0") == -1

    def test_fallback_to_plain_strings(self):
        """Test that unparseable inputs compare as plain strings."""
        assert compare_strings("nonsense", "hoo-hah") == 1
        assert compare_strings("hoo-hah", "nonsense") == -1
        assert compare_strings("nonsense", "nonsense") == 0

    def test_fallback_uses_raw_inputs(self):
        """Test that the fallback compares the inputs, not the cleaned forms."""
        # "v2" cleans to 2.0.0 but "junk" never parses, so "junk" < "v2"
        assert compare_strings("v2", "junk") == 1
        # "10.0.0" > "9.0.0" as versions but not as text
        assert compare_strings("10.0.0", "9.0.0") == 1
        assert compare_strings("10.0.0", "9.0.0!") == -1

    def test_fallback_is_logged(self, caplog):
        """Test that the fallback emits a debug record."""
        with caplog.at_level(logging.DEBUG, logger="semver_label.compare"):
            compare_strings("nonsense", "1.0.0")
        assert "plain strings" in caplog.text
