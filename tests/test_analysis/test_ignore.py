"""Tests for ignore rules."""

import re

import pytest

from unused_css.analysis.ignore import IgnoreMatcher
from unused_css.errors import ConfigurationError


class TestEmptyMatcher:
    def test_ignores_nothing(self):
        matcher = IgnoreMatcher()
        assert not matcher
        assert matcher.should_ignore("anything") is False


class TestLiteralRules:
    def test_exact_match_only(self):
        matcher = IgnoreMatcher(["foo"])
        assert matcher.should_ignore("foo")
        assert not matcher.should_ignore("foobar")
        assert not matcher.should_ignore("fo")
        assert not matcher.should_ignore("Foo")


class TestPatternRules:
    def test_anchored(self):
        matcher = IgnoreMatcher([re.compile(r"^nav-")])
        assert matcher.should_ignore("nav-item")
        assert not matcher.should_ignore("main-nav-item")

    def test_unanchored_search(self):
        matcher = IgnoreMatcher([re.compile("hidden")])
        assert matcher.should_ignore("is-hidden-sm")

    def test_mixed_rules(self):
        matcher = IgnoreMatcher(["keep", re.compile(r"^js-")])
        assert matcher("keep")
        assert matcher("js-toggle")
        assert not matcher("other")


class TestUnsupportedRules:
    @pytest.mark.parametrize("rule", [42, None, ["nested"]])
    def test_rejected(self, rule):
        with pytest.raises(ConfigurationError):
            IgnoreMatcher([rule])  # type: ignore[list-item]
