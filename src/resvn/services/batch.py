"""Batch service: select repositories, then list them or run a command."""

import structlog

from resvn.core.exceptions import NoMatchError
from resvn.core.models.config import RunConfig
from resvn.core.models.repository import MatchMode, PatternSet
from resvn.dispatch.dispatcher import Dispatcher
from resvn.matching.matcher import get_matcher

logger = structlog.get_logger(__name__)


class BatchService:
    """Drives one invocation over an already loaded repository list."""

    def __init__(self, config: RunConfig, dispatcher: Dispatcher) -> None:
        self._config = config
        self._dispatcher = dispatcher
        self._matcher = get_matcher(config.match_mode)

    def run(self, names: list[str], patterns: PatternSet, command: list[str]) -> None:
        """List or run against the repositories selected by patterns.

        Without patterns, every cached repository is listed, but only when
        no command is given; a command is never run against the whole cache.
        """
        if not patterns.include:
            if not command:
                self._dispatcher.list_repositories(names)
            return

        groups = self._matcher.groups(names, patterns)
        total = sum(len(matched) for _, matched in groups)
        logger.debug("matched repositories", mode=self._config.match_mode.value, count=total)

        if total == 0 and (command or self._config.match_mode == MatchMode.ALL):
            raise NoMatchError(list(patterns.include))

        for _, matched in groups:
            if command:
                self._dispatcher.run(matched, command)
            else:
                self._dispatcher.list_repositories(matched)
