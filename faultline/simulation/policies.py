"""
Failure-handling policies.

Each policy wraps one of the Service processing entry points and turns its
result into an Outcome. The Unsafe policy deliberately lets the fatal fault
escape; containing it is the runner's job.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Type, Union

from faultline.core.models.outcome import Outcome
from faultline.core.models.request import RequestUnit
from faultline.core.utils.constants import FALLBACK_PAYLOAD
from faultline.simulation.service import Service

__all__ = [
    "PolicyKind",
    "PolicyExecutor",
    "UnsafePolicy",
    "SafePolicy",
    "ResilientPolicy",
    "create_policy",
    "all_policies",
]


class PolicyKind(str, Enum):
    """Available failure-handling designs"""
    UNSAFE = "unsafe"
    SAFE = "safe"
    RESILIENT = "resilient"


class PolicyExecutor(ABC):
    """Processes one request under a fixed failure-propagation contract."""

    kind: PolicyKind
    description: str = ""

    @property
    def name(self) -> str:
        return self.kind.value

    @abstractmethod
    def process(self, service: Service, request: RequestUnit, index: int) -> Outcome:
        """Process a single request and classify the result."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class UnsafePolicy(PolicyExecutor):
    kind = PolicyKind.UNSAFE
    description = "Fail-fast with unwrap: one failure brings down the entire service"

    def process(self, service: Service, request: RequestUnit, index: int) -> Outcome:
        # FatalRequestError propagates to the caller untouched
        return Outcome.processed(index, service.process_unsafe(request.payload))


class SafePolicy(PolicyExecutor):
    kind = PolicyKind.SAFE
    description = "Graceful degradation: failures are contained and logged, service continues"

    def process(self, service: Service, request: RequestUnit, index: int) -> Outcome:
        result = service.process_safe(request.payload)
        if result.is_ok:
            return Outcome.processed(index, result.value)
        return Outcome.recovered_error(index, result.error)


class ResilientPolicy(PolicyExecutor):
    kind = PolicyKind.RESILIENT
    description = "Fallback response: the service stays up and reports degraded requests"

    def process(self, service: Service, request: RequestUnit, index: int) -> Outcome:
        response = service.process_resilient(request.payload)
        # Processed responses always carry a prefix, so only the fallback matches exactly
        if response == FALLBACK_PAYLOAD:
            return Outcome.fallback_used(index, response)
        return Outcome.processed(index, response)


_POLICIES: Dict[PolicyKind, Type[PolicyExecutor]] = {
    PolicyKind.UNSAFE: UnsafePolicy,
    PolicyKind.SAFE: SafePolicy,
    PolicyKind.RESILIENT: ResilientPolicy,
}


def create_policy(kind: Union[PolicyKind, str]) -> PolicyExecutor:
    """Build a policy executor from its kind or name."""
    try:
        return _POLICIES[PolicyKind(kind)]()
    except ValueError:
        valid = ", ".join(k.value for k in PolicyKind)
        raise ValueError(f"Unknown policy '{kind}'. Expected one of: {valid}") from None


def all_policies() -> List[PolicyExecutor]:
    """One fresh executor per policy, in unsafe, safe, resilient order."""
    return [create_policy(kind) for kind in PolicyKind]
