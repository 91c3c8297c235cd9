"""Unit tests for the simulation runner."""

import itertools
import logging
from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from faultline.core.models import OutcomeKind, RequestUnit
from faultline.simulation import (
    SimulationRunner,
    all_present_sequence,
    build_sequence,
    create_policy,
    describe_outcome,
    reference_sequence,
)


class FakeClock:
    """Clock advancing one second per reading."""

    def __init__(self):
        self._ticks = itertools.count()

    def __call__(self) -> float:
        return float(next(self._ticks))


@pytest.fixture
def runner():
    return SimulationRunner(failure_rate=0.01, clock=FakeClock())


class TestReferenceSequence:
    """Test the seven-request reference scenario."""

    def test_safe_policy(self, runner):
        report = runner.run(create_policy("safe"), reference_sequence())

        assert report.successful == 5
        assert report.failed == 2
        assert report.availability_pct == pytest.approx(500 / 7)
        assert round(report.availability_pct, 1) == 71.4
        assert report.abort_index is None

    def test_resilient_policy_matches_safe_counts(self, runner):
        report = runner.run(create_policy("resilient"), reference_sequence())

        assert (report.successful, report.failed) == (5, 2)
        assert round(report.availability_pct, 1) == 71.4
        assert report.abort_index is None
        fallbacks = [o.index for o in report.outcomes if o.kind is OutcomeKind.FALLBACK_USED]
        assert fallbacks == [3, 6]

    def test_unsafe_policy_aborts_at_first_missing_request(self, runner):
        report = runner.run(create_policy("unsafe"), reference_sequence())

        assert report.successful == 2
        assert report.failed == 5
        assert report.abort_index == 3
        assert report.aborted
        assert report.availability_pct == pytest.approx(200 / 7)

    def test_unsafe_outcomes_never_skip_ahead(self, runner):
        report = runner.run(create_policy("unsafe"), reference_sequence())

        kinds = [outcome.kind for outcome in report.outcomes]
        assert kinds == [
            OutcomeKind.PROCESSED,
            OutcomeKind.PROCESSED,
            OutcomeKind.FATAL_ABORT,
            OutcomeKind.DROPPED,
            OutcomeKind.DROPPED,
            OutcomeKind.DROPPED,
            OutcomeKind.DROPPED,
        ]
        assert [outcome.index for outcome in report.outcomes] == list(range(1, 8))

    def test_unsafe_abort_is_logged(self, runner, caplog):
        with caplog.at_level(logging.ERROR, logger="faultline.simulation.runner"):
            runner.run(create_policy("unsafe"), reference_sequence())

        assert any("aborted at request 3" in record.getMessage() for record in caplog.records)


class TestRunnerInvariants:
    """Test properties that hold for every policy."""

    @pytest.mark.parametrize("policy_name", ["unsafe", "safe", "resilient"])
    def test_all_present_sequence_is_fully_available(self, runner, policy_name):
        requests = all_present_sequence(10)
        report = runner.run(create_policy(policy_name), requests)

        assert report.successful == 10
        assert report.failed == 0
        assert report.availability_pct == 100.0
        assert report.abort_index is None

    @pytest.mark.parametrize("policy_name", ["unsafe", "safe", "resilient"])
    @pytest.mark.parametrize("payloads", [
        [None],
        ["a", None, None, "b"],
        [None, "a", "b", "c", "d"],
        ["a", "b", "c", None],
        ["", None, ""],
    ])
    def test_every_request_is_accounted_for(self, runner, policy_name, payloads):
        requests = build_sequence(payloads)
        report = runner.run(create_policy(policy_name), requests)

        assert report.successful + report.failed == len(requests)
        assert report.total == len(requests)
        assert len(report.outcomes) == len(requests)

    @pytest.mark.parametrize("policy_name", ["unsafe", "safe", "resilient"])
    def test_runs_are_idempotent(self, policy_name):
        runner = SimulationRunner(clock=FakeClock())
        policy = create_policy(policy_name)

        first = runner.run(policy, reference_sequence())
        second = runner.run(policy, reference_sequence())

        assert first.counts() == second.counts()
        assert first.outcomes == second.outcomes
        assert first.elapsed == second.elapsed == timedelta(seconds=1)

    def test_single_missing_request_under_unsafe(self, runner):
        report = runner.run(create_policy("unsafe"), [RequestUnit.missing()])

        assert report.successful == 0
        assert report.failed == 1
        assert report.abort_index == 1
        assert report.outcomes[0].kind is OutcomeKind.FATAL_ABORT

    def test_unsafe_without_missing_requests_has_no_abort_index(self, runner):
        report = runner.run(create_policy("unsafe"), all_present_sequence(3))

        assert report.abort_index is None
        assert not report.aborted


class TestRunnerContract:
    """Test the runner's calling contract."""

    def test_none_sequence(self, runner):
        with pytest.raises(TypeError):
            runner.run(create_policy("safe"), None)

    def test_empty_sequence(self, runner):
        with pytest.raises(ValueError, match="at least one request"):
            runner.run(create_policy("safe"), [])

    def test_invalid_failure_rate(self):
        with pytest.raises(ValueError):
            SimulationRunner(failure_rate=2.0)

    def test_accepts_generators(self, runner):
        requests = (RequestUnit.present(f"req{i}") for i in range(3))
        report = runner.run(create_policy("safe"), requests)

        assert report.total == 3

    def test_progress_called_once_per_request(self):
        progress = MagicMock()
        runner = SimulationRunner(progress=progress, clock=FakeClock())
        policy = create_policy("unsafe")

        runner.run(policy, reference_sequence())

        assert progress.call_count == 7
        first_call = progress.call_args_list[0]
        assert first_call.args[0] is policy
        assert first_call.args[1].index == 1
        assert first_call.args[2] == 7
        indices = [call.args[1].index for call in progress.call_args_list]
        assert indices == list(range(1, 8))

    def test_default_progress_logs_at_info(self, caplog):
        runner = SimulationRunner(clock=FakeClock())

        with caplog.at_level(logging.INFO, logger="faultline.simulation.runner"):
            runner.run(create_policy("safe"), build_sequence(["a", None]))

        messages = [record.getMessage() for record in caplog.records]
        assert any("Request 1: ✓" in message for message in messages)
        assert any("Error logged: No input provided" in message for message in messages)

    def test_run_all(self, runner):
        reports = runner.run_all(reference_sequence())

        assert [report.policy for report in reports] == ["unsafe", "safe", "resilient"]
        assert [report.successful for report in reports] == [2, 5, 5]


class TestDescribeOutcome:
    def test_fatal_abort_mentions_dropped_requests(self, runner):
        report = runner.run(create_policy("unsafe"), reference_sequence())

        line = describe_outcome(report.outcomes[2], report.total)

        assert "SERVICE CRASHED" in line
        assert "4 dropped" in line

    def test_fallback_line(self, runner):
        report = runner.run(create_policy("resilient"), build_sequence([None]))

        assert "Degraded (fallback)" in describe_outcome(report.outcomes[0], 1)
