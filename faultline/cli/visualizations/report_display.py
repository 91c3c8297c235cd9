"""CLI visualization for simulation reports and policy comparisons."""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from faultline.cli.design_standards import LAYOUT, POLICY_STYLES, SYMBOLS
from faultline.cli.message_templates import (
    COMMAND_MESSAGES,
    POLICY_MESSAGES,
    format_duration,
    format_percentage,
)
from faultline.cli.utils.console import FaultlineConsole, availability_style
from faultline.core.models.report import SimulationReport


class ReportDisplayManager:
    """Renders simulation reports to a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or FaultlineConsole()

    def display_report(self, report: SimulationReport) -> None:
        """Display the summary panel for a single run."""
        messages = COMMAND_MESSAGES['simulate']
        style = availability_style(report.availability_pct)

        lines = [
            f"[muted]{POLICY_MESSAGES.get(report.policy, '')}[/muted]",
            "",
            messages['results'].format(successful=report.successful, failed=report.failed),
            messages['uptime'].format(duration=format_duration(report.elapsed.total_seconds())),
            f"[{style}]" + messages['availability'].format(
                availability=format_percentage(report.availability_pct)) + f"[/{style}]",
        ]
        if report.aborted:
            lines.append(
                "[error]" + messages['crash'].format(
                    index=report.abort_index, remaining=report.total - report.abort_index
                ) + "[/error]"
            )

        self.console.print()
        self.console.print(
            Panel(
                "\n".join(lines),
                title=f"{report.policy.upper()} policy",
                border_style=POLICY_STYLES.get(report.policy, "info"),
                padding=LAYOUT['panel_padding'],
            )
        )

    def display_comparison(self, reports: List[SimulationReport]) -> None:
        """Display a side-by-side comparison of several runs."""
        table = Table(title="Policy Comparison", show_header=True, header_style="primary")
        table.add_column("Policy", style="accent", width=LAYOUT['policy_column_width'])
        table.add_column("Successful", justify="right")
        table.add_column("Failed", justify="right")
        table.add_column("Availability", justify="right")
        table.add_column("Aborted At", justify="right")
        table.add_column("Elapsed", justify="right", style="muted")

        for report in reports:
            style = availability_style(report.availability_pct)
            table.add_row(
                report.policy,
                str(report.successful),
                str(report.failed),
                f"[{style}]{format_percentage(report.availability_pct)}[/{style}]",
                str(report.abort_index) if report.aborted else SYMBOLS['pass'],
                format_duration(report.elapsed.total_seconds()),
            )

        self.console.print()
        self.console.print(table)
        self.console.print()
