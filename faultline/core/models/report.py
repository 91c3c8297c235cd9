"""Simulation report model."""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, List, Optional

from faultline.core.models.outcome import Outcome

__all__: list[str] = ["SimulationReport"]


@dataclass
class SimulationReport:
    """Aggregate results of driving one request sequence through one policy."""
    policy: str
    total: int
    successful: int
    failed: int
    elapsed: timedelta
    availability_pct: float
    abort_index: Optional[int] = None
    outcomes: List[Outcome] = field(default_factory=list)

    @property
    def aborted(self) -> bool:
        return self.abort_index is not None

    def counts(self) -> tuple:
        """Everything but timing, for comparing runs."""
        return (self.policy, self.total, self.successful, self.failed,
                self.availability_pct, self.abort_index)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "policy": self.policy,
            "total": self.total,
            "successful": self.successful,
            "failed": self.failed,
            "elapsed_seconds": self.elapsed.total_seconds(),
            "availability_pct": round(self.availability_pct, 1),
            "abort_index": self.abort_index,
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationReport':
        """Create from dictionary."""
        return cls(
            policy=data["policy"],
            total=data["total"],
            successful=data["successful"],
            failed=data["failed"],
            elapsed=timedelta(seconds=data.get("elapsed_seconds", 0.0)),
            availability_pct=data["availability_pct"],
            abort_index=data.get("abort_index"),
            outcomes=[Outcome(**item) for item in data.get("outcomes", [])],
        )
