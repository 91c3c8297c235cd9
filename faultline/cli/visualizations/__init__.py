"""CLI visualization components for Faultline."""

from .report_display import ReportDisplayManager

__all__ = ["ReportDisplayManager"]
