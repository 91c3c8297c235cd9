"""Unit tests for report rendering."""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from faultline.cli.message_templates import format_duration, format_failure_rate, format_percentage
from faultline.cli.utils import FaultlineConsole, availability_style, format_outcome
from faultline.cli.visualizations import ReportDisplayManager
from faultline.core.models import Outcome
from faultline.simulation import SimulationRunner, create_policy, reference_sequence


@pytest.fixture
def reports():
    runner = SimulationRunner(clock=iter(range(100)).__next__)
    return runner.run_all(reference_sequence())


class TestReportDisplayManager:
    """Test ReportDisplayManager output."""

    @pytest.fixture
    def mock_console(self):
        """Create mock console."""
        return MagicMock(spec=Console)

    def test_display_report_prints_panel(self, mock_console, reports):
        ReportDisplayManager(mock_console).display_report(reports[0])

        panels = [call.args[0] for call in mock_console.print.call_args_list
                  if call.args and isinstance(call.args[0], Panel)]
        assert len(panels) == 1
        assert "Total system failure at request 3" in panels[0].renderable

    def test_display_report_without_abort(self, mock_console, reports):
        ReportDisplayManager(mock_console).display_report(reports[1])

        panel = next(call.args[0] for call in mock_console.print.call_args_list
                     if call.args and isinstance(call.args[0], Panel))
        assert "Total system failure" not in panel.renderable
        assert "5 successful, 2 failed" in panel.renderable

    def test_display_comparison_table(self, mock_console, reports):
        ReportDisplayManager(mock_console).display_comparison(reports)

        tables = [call.args[0] for call in mock_console.print.call_args_list
                  if call.args and isinstance(call.args[0], Table)]
        assert len(tables) == 1
        assert tables[0].row_count == 3

    def test_renders_on_real_console(self, reports):
        console = FaultlineConsole(record=True, width=100)
        display = ReportDisplayManager(console)

        display.display_report(reports[2])
        display.display_comparison(reports)

        text = console.export_text()
        assert "RESILIENT policy" in text
        assert "71.4%" in text
        assert "28.6%" in text


class TestFormatting:
    @pytest.mark.parametrize("value,style", [
        (100.0, "success"),
        (71.4, "warning"),
        (28.6, "error"),
    ])
    def test_availability_style(self, value, style):
        assert availability_style(value) == style

    def test_format_outcome(self):
        assert format_outcome(Outcome.processed(1, "Processed: a"), 7).plain == "Request 1: ✓"
        assert "4 dropped" in format_outcome(Outcome.fatal_abort(3, "boom"), 7).plain
        assert "DROPPED" in format_outcome(Outcome.dropped(5), 7).plain

    def test_format_helpers(self):
        assert format_percentage(500 / 7) == "71.4%"
        assert format_duration(0.0000123) == "12.3µs"
        assert format_duration(0.0042) == "4.20ms"
        assert format_duration(2.5) == "2.50s"
        assert format_failure_rate(0.01) == "λ = 0.01 (1%)"
