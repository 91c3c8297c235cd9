"""Core data models."""

from .request import RequestUnit
from .result import ProcessResult
from .outcome import Outcome, OutcomeKind
from .report import SimulationReport

__all__ = ["RequestUnit", "ProcessResult", "Outcome", "OutcomeKind", "SimulationReport"]
