"""Faultline CLI commands."""

from . import demo, simulate, validate

__all__ = ["demo", "simulate", "validate"]
