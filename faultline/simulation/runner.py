"""
Simulation harness that drives a request sequence through a policy.

Runtime is the real test: failures will occur in production, and the
question is how the design responds. The runner answers it by feeding the
same requests to each policy and comparing availability.
"""

import logging
import time
from datetime import timedelta
from enum import Enum
from typing import Callable, List, Optional, Sequence

from faultline.core.errors import FatalRequestError
from faultline.core.models.outcome import Outcome, OutcomeKind
from faultline.core.models.report import SimulationReport
from faultline.core.models.request import RequestUnit
from faultline.core.utils.constants import DEFAULT_FAILURE_RATE
from faultline.simulation.policies import PolicyExecutor, all_policies
from faultline.simulation.service import Service

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[PolicyExecutor, Outcome, int], None]


class RunState(Enum):
    RUNNING = "running"
    ABORTED = "aborted"
    COMPLETED = "completed"


def describe_outcome(outcome: Outcome, total: int) -> str:
    """Render a one-line, human-readable progress message for an outcome."""
    prefix = f"Request {outcome.index}:"
    if outcome.kind is OutcomeKind.PROCESSED:
        return f"{prefix} ✓"
    if outcome.kind is OutcomeKind.RECOVERED_ERROR:
        return f"{prefix} ✗ Error logged: {outcome.detail}"
    if outcome.kind is OutcomeKind.FALLBACK_USED:
        return f"{prefix} ATTENTION Degraded (fallback)"
    if outcome.kind is OutcomeKind.FATAL_ABORT:
        remaining = total - outcome.index
        return (f"{prefix} ✗ SERVICE CRASHED - all subsequent requests lost "
                f"({remaining} dropped)")
    return f"{prefix} ✗ Dropped"


def _log_progress(policy: PolicyExecutor, outcome: Outcome, total: int) -> None:
    logger.info("[%s] %s", policy.name, describe_outcome(outcome, total))


class SimulationRunner:
    """Runs request sequences through failure-handling policies.

    The runner keeps no state between runs: each call to ``run`` builds its
    own Service and returns exactly one report.
    """

    def __init__(
        self,
        failure_rate: float = DEFAULT_FAILURE_RATE,
        progress: Optional[ProgressCallback] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        """Initialize the runner.

        Args:
            failure_rate: Nominal failure rate handed to each Service
            progress: Called once per request with the policy, outcome and
                sequence length. Defaults to logging at INFO.
            clock: Monotonic clock in seconds used to time runs
        """
        Service(failure_rate)  # raises ValueError for a rate outside 0..1
        self.failure_rate = failure_rate
        self.progress = progress or _log_progress
        self.clock = clock

    def run(self, policy: PolicyExecutor, requests: Sequence[RequestUnit]) -> SimulationReport:
        """Drive ``requests`` through ``policy`` and report the results."""
        if requests is None:
            raise TypeError("requests must be a sequence of RequestUnit, not None")
        requests = list(requests)
        if not requests:
            raise ValueError("requests must contain at least one request")

        service = Service(self.failure_rate)
        total = len(requests)
        outcomes: List[Outcome] = []
        state = RunState.RUNNING
        abort_index: Optional[int] = None

        logger.debug("Simulating %d requests with %s policy", total, policy.name)
        start = self.clock()

        for index, request in enumerate(requests, start=1):
            if state is RunState.ABORTED:
                outcome = Outcome.dropped(index)
            else:
                outcome = self._dispatch(policy, service, request, index)
                if outcome.kind is OutcomeKind.FATAL_ABORT:
                    state = RunState.ABORTED
                    abort_index = index
                    logger.error(
                        "%s policy aborted at request %d; %d remaining requests lost",
                        policy.name, index, total - index
                    )
            outcomes.append(outcome)
            self.progress(policy, outcome, total)

        elapsed = timedelta(seconds=self.clock() - start)
        if state is RunState.RUNNING:
            state = RunState.COMPLETED

        successful = sum(1 for outcome in outcomes if outcome.succeeded)
        failed = total - successful

        report = SimulationReport(
            policy=policy.name,
            total=total,
            successful=successful,
            failed=failed,
            elapsed=elapsed,
            # Denominator is the whole sequence, including requests lost to an abort
            availability_pct=successful / total * 100.0,
            abort_index=abort_index,
            outcomes=outcomes,
        )
        logger.info(
            "%s run %s: %d successful, %d failed, %.1f%% available",
            policy.name, state.value, successful, failed, report.availability_pct
        )
        return report

    def run_all(self, requests: Sequence[RequestUnit]) -> List[SimulationReport]:
        """Run every policy against the same requests."""
        requests = list(requests) if requests is not None else None
        return [self.run(policy, requests) for policy in all_policies()]

    def _dispatch(
        self,
        policy: PolicyExecutor,
        service: Service,
        request: RequestUnit,
        index: int,
    ) -> Outcome:
        """Process one request inside its own protected scope.

        A fatal fault may unwind out of the policy but never out of this call;
        it is classified as a FatalAbort outcome for the request that raised it.
        """
        try:
            return policy.process(service, request, index)
        except FatalRequestError as e:
            return Outcome.fatal_abort(index, str(e))
