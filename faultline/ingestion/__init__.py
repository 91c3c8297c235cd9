"""Request sequence ingestion and parsing module."""

from .parser import ParsedSequence, SequenceParser

__all__ = ["ParsedSequence", "SequenceParser"]
