"""Regular-expression selection of repositories from the cache."""

import re
from abc import ABC, abstractmethod

import structlog

from resvn.core.exceptions import InvalidPatternError
from resvn.core.models.repository import MatchMode, PatternSet

logger = structlog.get_logger(__name__)


def compile_patterns(patterns: list[str], case_insensitive: bool) -> list[re.Pattern[str]]:
    """Compile each pattern, naming the first one that fails."""
    flags = re.IGNORECASE if case_insensitive else 0
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern, flags))
        except re.error as e:
            raise InvalidPatternError(pattern, str(e)) from e
    return compiled


def match_all(names: list[str], patterns: PatternSet) -> list[str]:
    """Names matching every include pattern and no exclude pattern, in order."""
    include = compile_patterns(patterns.include, patterns.case_insensitive)
    exclude = compile_patterns(patterns.exclude, patterns.case_insensitive)

    selected = []
    for name in names:
        if not all(expr.search(name) for expr in include):
            continue
        if any(expr.search(name) for expr in exclude):
            continue
        selected.append(name)
    return selected


class Matcher(ABC):
    """Selects repositories from the cached list."""

    @abstractmethod
    def groups(self, names: list[str], patterns: PatternSet) -> list[tuple[list[str], list[str]]]:
        """Return (patterns, matched names) for each independent sub-match."""
        ...

    def match(self, names: list[str], patterns: PatternSet) -> list[str]:
        """Concatenate all sub-matches in order."""
        return [name for _, matched in self.groups(names, patterns) for name in matched]


class AllMatcher(Matcher):
    """Logical-and: one pass, every include pattern must match.

    An invalid pattern aborts the whole match.
    """

    def groups(self, names: list[str], patterns: PatternSet) -> list[tuple[list[str], list[str]]]:
        return [(list(patterns.include), match_all(names, patterns))]


class AnyMatcher(Matcher):
    """Logical-or: one sub-match per include pattern against the full list.

    Sub-match results are not de-duplicated, so a name matching two include
    patterns is selected twice. An invalid pattern is skipped with a warning.
    """

    def groups(self, names: list[str], patterns: PatternSet) -> list[tuple[list[str], list[str]]]:
        results = []
        for pattern in patterns.include:
            single = patterns.model_copy(update={"include": [pattern]})
            try:
                matched = match_all(names, single)
            except InvalidPatternError as e:
                logger.warning(
                    "warning: skipping invalid expression",
                    pattern=e.pattern,
                    include=pattern,
                    reason=e.message,
                )
                matched = []
            results.append(([pattern], matched))
        return results


def get_matcher(mode: MatchMode) -> Matcher:
    """Create the matcher for a match mode."""
    if mode == MatchMode.ANY:
        return AnyMatcher()
    elif mode == MatchMode.ALL:
        return AllMatcher()
    else:
        raise ValueError(f"Unknown match mode: {mode}")
