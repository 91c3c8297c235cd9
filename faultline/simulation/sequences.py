"""
Request sequences used by the simulation.
"""

from typing import Iterable, List, Optional

from faultline.core.models.request import RequestUnit
from faultline.core.utils.constants import REFERENCE_PAYLOADS


def build_sequence(payloads: Iterable[Optional[str]]) -> List[RequestUnit]:
    """Turn raw payloads into request units; None marks a missing request."""
    return [RequestUnit(payload=payload) for payload in payloads]


def reference_sequence() -> List[RequestUnit]:
    """Seven requests with missing requests at positions 3 and 6."""
    return build_sequence(REFERENCE_PAYLOADS)


def all_present_sequence(count: int = len(REFERENCE_PAYLOADS)) -> List[RequestUnit]:
    """``count`` requests, none of them missing."""
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    return build_sequence(f"req{i}" for i in range(1, count + 1))


def missing_positions(requests: Iterable[RequestUnit]) -> List[int]:
    """1-indexed positions of the missing requests."""
    return [i for i, request in enumerate(requests, start=1) if not request.is_present]
