"""Repository pattern matching."""

from resvn.matching.matcher import AllMatcher, AnyMatcher, Matcher, get_matcher, match_all

__all__ = ["AllMatcher", "AnyMatcher", "Matcher", "get_matcher", "match_all"]
