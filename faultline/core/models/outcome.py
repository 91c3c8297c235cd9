"""Per-request outcome model."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

__all__: list[str] = ["Outcome", "OutcomeKind"]


class OutcomeKind(str, Enum):
    """How a single request ended up"""
    PROCESSED = "processed"
    RECOVERED_ERROR = "recovered_error"
    FALLBACK_USED = "fallback_used"
    FATAL_ABORT = "fatal_abort"
    DROPPED = "dropped"  # never dispatched, the run had already aborted


class Outcome(BaseModel):
    """Tagged result for one request in a run."""

    index: int = Field(..., ge=1, description="1-indexed position in the request sequence")
    kind: OutcomeKind
    detail: Optional[str] = Field(default=None, description="Payload or error message")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def processed(cls, index: int, payload: str) -> "Outcome":
        return cls(index=index, kind=OutcomeKind.PROCESSED, detail=payload)

    @classmethod
    def recovered_error(cls, index: int, message: str) -> "Outcome":
        return cls(index=index, kind=OutcomeKind.RECOVERED_ERROR, detail=message)

    @classmethod
    def fallback_used(cls, index: int, payload: str) -> "Outcome":
        return cls(index=index, kind=OutcomeKind.FALLBACK_USED, detail=payload)

    @classmethod
    def fatal_abort(cls, index: int, message: str) -> "Outcome":
        return cls(index=index, kind=OutcomeKind.FATAL_ABORT, detail=message)

    @classmethod
    def dropped(cls, index: int) -> "Outcome":
        return cls(index=index, kind=OutcomeKind.DROPPED)

    @property
    def succeeded(self) -> bool:
        """Only a fully processed request counts toward availability."""
        return self.kind is OutcomeKind.PROCESSED

    def to_dict(self) -> dict:
        return {"index": self.index, "kind": self.kind.value, "detail": self.detail}
