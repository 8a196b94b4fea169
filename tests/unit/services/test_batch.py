"""Tests for the batch service."""

import pytest
from factories import ExecutionResultFactory, PatternSetFactory, RunConfigFactory
from fakes import FakeExecutor

from resvn.core.exceptions import ExecutionFailureError, InvalidPatternError, NoMatchError
from resvn.core.models.repository import MatchMode, PatternSet
from resvn.dispatch.dispatcher import Dispatcher
from resvn.services.batch import BatchService


def _service(executor: FakeExecutor, **config) -> BatchService:
    run_config = RunConfigFactory(base_url="http://h", **config)
    return BatchService(run_config, Dispatcher(run_config, executor))


@pytest.mark.unit
class TestBatchServiceListing:
    """Tests for list mode."""

    def test_no_patterns_lists_everything(
        self, repositories: list[str], fake_executor: FakeExecutor, capsys: pytest.CaptureFixture
    ) -> None:
        _service(fake_executor).run(repositories, PatternSet(), [])
        lines = capsys.readouterr().out.splitlines()
        assert lines == [f"http://h/svn/{name}" for name in repositories]
        assert fake_executor.calls == []

    def test_no_patterns_with_command_does_nothing(
        self, repositories: list[str], fake_executor: FakeExecutor, capsys: pytest.CaptureFixture
    ) -> None:
        _service(fake_executor).run(repositories, PatternSet(), ["info", "@"])
        assert capsys.readouterr().out == ""
        assert fake_executor.calls == []

    def test_lists_matches(
        self, repositories: list[str], fake_executor: FakeExecutor, capsys: pytest.CaptureFixture
    ) -> None:
        _service(fake_executor).run(repositories, PatternSetFactory(include=["^DAPA"], exclude=["Calc"]), [])
        assert capsys.readouterr().out.splitlines() == [
            "http://h/svn/DAPA_Project",
            "http://h/svn/DAPA_Components",
            "http://h/svn/DAPA_Utilities",
        ]

    def test_any_mode_listing_without_matches_is_not_an_error(
        self, repositories: list[str], fake_executor: FakeExecutor, capsys: pytest.CaptureFixture
    ) -> None:
        _service(fake_executor, match_mode=MatchMode.ANY).run(repositories, PatternSetFactory(include=["zzz"]), [])
        assert capsys.readouterr().out == ""


@pytest.mark.unit
class TestBatchServiceErrors:
    """Tests for NoMatch and InvalidPattern policy."""

    def test_all_mode_no_match(self, repositories: list[str], fake_executor: FakeExecutor) -> None:
        with pytest.raises(NoMatchError) as exc_info:
            _service(fake_executor).run(repositories, PatternSetFactory(include=["zzz"]), [])
        assert exc_info.value.patterns == ["zzz"]

    def test_any_mode_no_match_with_command(self, repositories: list[str], fake_executor: FakeExecutor) -> None:
        with pytest.raises(NoMatchError):
            _service(fake_executor, match_mode=MatchMode.ANY).run(
                repositories, PatternSetFactory(include=["zzz", "yyy"]), ["info"]
            )

    def test_all_mode_invalid_pattern_is_fatal(self, repositories: list[str], fake_executor: FakeExecutor) -> None:
        with pytest.raises(InvalidPatternError):
            _service(fake_executor).run(repositories, PatternSetFactory(include=["DAPA", "("]), ["info"])
        assert fake_executor.calls == []

    def test_any_mode_invalid_pattern_is_skipped(self, repositories: list[str], fake_executor: FakeExecutor) -> None:
        _service(fake_executor, match_mode=MatchMode.ANY).run(
            repositories, PatternSetFactory(include=["(", "tools"]), ["info", "@"]
        )
        assert fake_executor.calls == [["info", "http://h/svn/tools"]]


@pytest.mark.unit
class TestBatchServiceRun:
    """Tests for run mode."""

    def test_runs_all_mode_matches(self, repositories: list[str], fake_executor: FakeExecutor) -> None:
        _service(fake_executor).run(
            repositories,
            PatternSetFactory(include=["^DAPA"], exclude=["Calc", "DIOS"]),
            ["export", "-r", "123", "@/tags/foo", "./^/tags/foo"],
        )
        assert fake_executor.calls == [
            ["export", "-r", "123", f"http://h/svn/{name}/tags/foo", f"./{name}/tags/foo"]
            for name in ("DAPA_Project", "DAPA_Components", "DAPA_Utilities")
        ]

    def test_any_mode_runs_duplicates(self, repositories: list[str], fake_executor: FakeExecutor) -> None:
        _service(fake_executor, match_mode=MatchMode.ANY).run(
            repositories, PatternSetFactory(include=["tools", "^to"]), ["info", "^"]
        )
        assert fake_executor.calls == [["info", "tools"], ["info", "tools"]]

    def test_dry_run(self, repositories: list[str], fake_executor: FakeExecutor) -> None:
        _service(fake_executor, dry_run=True).run(repositories, PatternSetFactory(include=["DAPA"]), ["info"])
        assert fake_executor.calls == []

    def test_failure_stops_any_mode_batch(self, repositories: list[str]) -> None:
        executor = FakeExecutor([ExecutionResultFactory(failed=True)])
        with pytest.raises(ExecutionFailureError):
            _service(executor, match_mode=MatchMode.ANY).run(
                repositories, PatternSetFactory(include=["Firm", "tools"]), ["info"]
            )
        assert executor.calls == [["info"]]
