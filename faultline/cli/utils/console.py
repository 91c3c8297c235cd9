"""Faultline console utilities for simulation output formatting."""

from rich.console import Console
from rich.theme import Theme
from rich.text import Text
from typing import Any

from faultline.cli.design_standards import AVAILABILITY_STYLES, COLORS, LAYOUT, SYMBOLS
from faultline.core.models.outcome import Outcome, OutcomeKind

FAULTLINE_THEME = Theme(COLORS)


class FaultlineConsole(Console):
    """Themed console for simulation output."""

    def __init__(self, **kwargs):
        kwargs.setdefault("width", LAYOUT['terminal_width'])
        super().__init__(theme=FAULTLINE_THEME, **kwargs)

    def print_header(self, text: str) -> None:
        """Print a styled header."""
        self.print()
        self.print(f"[primary]{text}[/primary]")
        self.print("─" * len(text), style="muted")

    def print_metric(self, label: str, value: Any, style: str = "info") -> None:
        """Print a metric with label and value."""
        self.print(f"  [muted]{label}:[/muted] [{style}]{value}[/{style}]")

    def print_outcome(self, outcome: Outcome, total: int) -> None:
        """Print the progress line for a single request."""
        self.print(Text("  ").append_text(format_outcome(outcome, total)))


def availability_style(availability_pct: float) -> str:
    for threshold, style in AVAILABILITY_STYLES:
        if availability_pct >= threshold:
            return style
    return "error"


def format_outcome(outcome: Outcome, total: int) -> Text:
    """Format one request outcome as a progress line."""
    prefix = f"Request {outcome.index}: "
    if outcome.kind is OutcomeKind.PROCESSED:
        return Text(f"{prefix}{SYMBOLS['pass']}", style="success")
    if outcome.kind is OutcomeKind.RECOVERED_ERROR:
        return Text(f"{prefix}{SYMBOLS['fail']} Error logged: {outcome.detail}", style="warning")
    if outcome.kind is OutcomeKind.FALLBACK_USED:
        return Text(f"{prefix}{SYMBOLS['warning_text']} {SYMBOLS['degraded_text']} (fallback)", style="warning")
    if outcome.kind is OutcomeKind.FATAL_ABORT:
        return Text(
            f"{prefix}{SYMBOLS['fail']} SERVICE {SYMBOLS['crash_text']} - "
            f"all subsequent requests lost ({total - outcome.index} dropped)",
            style="error",
        )
    return Text(f"{prefix}{SYMBOLS['fail']} {SYMBOLS['dropped_text']}", style="muted")


def format_error(message: str) -> Text:
    """Format an error message with allowed symbols only."""
    return Text(f"{SYMBOLS['fail']} {message}", style="error")


def format_success(message: str) -> Text:
    """Format a success message with allowed symbols only."""
    return Text(f"{SYMBOLS['pass']} {message}", style="success")


def format_warning(message: str) -> Text:
    """Format a warning message with professional text."""
    return Text(f"{SYMBOLS['warning_text']} {message}", style="warning")


def format_info(message: str) -> Text:
    return Text(f"{SYMBOLS['info_text']} {message}", style="info")
