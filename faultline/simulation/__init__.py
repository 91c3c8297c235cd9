"""
Simulation harness for comparing failure-handling policies.
"""

from .service import Service
from .policies import (
    PolicyExecutor,
    PolicyKind,
    ResilientPolicy,
    SafePolicy,
    UnsafePolicy,
    all_policies,
    create_policy,
)
from .runner import RunState, SimulationRunner, describe_outcome
from .sequences import all_present_sequence, build_sequence, missing_positions, reference_sequence

__all__ = [
    "Service",
    "PolicyExecutor",
    "PolicyKind",
    "UnsafePolicy",
    "SafePolicy",
    "ResilientPolicy",
    "all_policies",
    "create_policy",
    "RunState",
    "SimulationRunner",
    "describe_outcome",
    "all_present_sequence",
    "build_sequence",
    "missing_positions",
    "reference_sequence",
]
