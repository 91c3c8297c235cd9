"""
Request-processing service with one entry point per failure-handling design.
"""

import logging
from typing import Optional

from faultline.core.errors import FatalRequestError
from faultline.core.models.result import ProcessResult
from faultline.core.utils.constants import (
    DEFAULT_FAILURE_RATE,
    FALLBACK_PAYLOAD,
    MISSING_INPUT_MESSAGE,
    PROCESSED_PREFIX,
)

logger = logging.getLogger(__name__)


class Service:
    """Processes single requests.

    The failure rate is the nominal lambda of the service. It is carried as
    metadata for reporting and never used to generate failures; the request
    sequence alone decides which requests fail.
    """

    def __init__(self, failure_rate: float = DEFAULT_FAILURE_RATE):
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError(f"failure_rate must be between 0.0 and 1.0, got {failure_rate}")
        self._failure_rate = float(failure_rate)

    @property
    def failure_rate(self) -> float:
        return self._failure_rate

    def __repr__(self) -> str:
        return f"Service(failure_rate={self._failure_rate})"

    def process_unsafe(self, payload: Optional[str]) -> str:
        """Fail-fast: a missing request is a single point of total failure."""
        if payload is None:
            raise FatalRequestError("called unwrap on a missing request")
        return f"{PROCESSED_PREFIX}{payload}"

    def process_safe(self, payload: Optional[str]) -> ProcessResult:
        """Graceful degradation: a missing request comes back as an error value."""
        if payload is None:
            return ProcessResult.fail(MISSING_INPUT_MESSAGE)
        return ProcessResult.ok(f"{PROCESSED_PREFIX}{payload}")

    def process_resilient(self, payload: Optional[str]) -> str:
        """Fallback: a missing request is answered with a canned response."""
        if payload is None:
            # Keep the service alive but make the failure visible on the error channel
            logger.warning("Request failed, using fallback")
            return FALLBACK_PAYLOAD
        return f"{PROCESSED_PREFIX}{payload}"
