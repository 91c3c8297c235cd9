"""Faultline validate command - check a request sequence file."""

from pathlib import Path

import click
from rich.table import Table
from rich.text import Text

from faultline.cli.design_standards import SYMBOLS
from faultline.cli.message_templates import COMMAND_MESSAGES, format_failure_rate
from faultline.cli.utils import FaultlineConsole, format_error, format_success, format_warning
from faultline.core.errors import SequenceParseError
from faultline.ingestion import SequenceParser

console = FaultlineConsole()


@click.command()
@click.argument('sequence_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--show-requests', '-r', is_flag=True, help='List every request in the sequence')
def validate(sequence_path: str, show_requests: bool):
    """Validate a request sequence file.

    This command checks that the YAML file can be used with
    'faultline simulate --requests-file' and shows how it will be read.

    Example:
        faultline validate requests.yaml
        faultline validate requests.yaml --show-requests
    """
    sequence_path = Path(sequence_path)
    console.print(f"\n[primary]Validating request sequence:[/primary] {sequence_path.name}\n")

    parser = SequenceParser()
    try:
        parsed = parser.parse(sequence_path)
    except SequenceParseError as e:
        console.print(format_error(f"Parsing failed: {e}"))
        raise click.exceptions.Exit(1) from e

    for warning in parser.get_warnings():
        console.print(format_warning(warning))

    messages = COMMAND_MESSAGES['validate']
    console.print(format_success(messages['parsed'].format(
        name=parsed.name, total=len(parsed.requests), missing=parsed.missing_count
    )))
    if parsed.failure_rate is not None:
        console.print_metric(
            "Failure rate",
            messages['failure_rate'].format(failure_rate=format_failure_rate(parsed.failure_rate)),
        )

    if show_requests:
        table = Table(show_header=True, header_style="primary")
        table.add_column("#", justify="right", style="muted")
        table.add_column("Payload")
        table.add_column("Present", justify="center")
        for index, request in enumerate(parsed.requests, start=1):
            marker = f"[success]{SYMBOLS['pass']}[/success]" if request.is_present else f"[error]{SYMBOLS['fail']}[/error]"
            table.add_row(str(index), Text(str(request)), marker)
        console.print()
        console.print(table)

    if parsed.missing_count == 0:
        console.print(format_warning("No missing requests: every policy will report 100% availability"))

    console.print(f"\n[success]{SYMBOLS['pass']}[/success] Validation complete\n")
