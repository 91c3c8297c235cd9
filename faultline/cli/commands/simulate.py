"""Faultline simulate command - compare failure-handling policies."""

import json
from pathlib import Path
from typing import List, Optional

import click

from faultline.cli.message_templates import COMMAND_MESSAGES, format_failure_rate
from faultline.cli.utils import FaultlineConsole, atomic_write_json, format_error, format_success, json_serializer
from faultline.cli.visualizations import ReportDisplayManager
from faultline.config import get_settings
from faultline.core.models.outcome import Outcome
from faultline.core.models.report import SimulationReport
from faultline.core.models.request import RequestUnit
from faultline.ingestion import SequenceParser
from faultline.simulation import (
    PolicyExecutor,
    PolicyKind,
    SimulationRunner,
    all_policies,
    all_present_sequence,
    create_policy,
    missing_positions,
    reference_sequence,
)

console = FaultlineConsole()

POLICY_CHOICES = [kind.value for kind in PolicyKind] + ["all"]


@click.command()
@click.option(
    "--policy",
    "-p",
    type=click.Choice(POLICY_CHOICES),
    default="all",
    show_default=True,
    help="Failure-handling policy to simulate",
)
@click.option(
    "--requests-file",
    "-f",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with the request sequence (default: built-in reference sequence)",
)
@click.option(
    "--all-present",
    type=click.IntRange(min=1),
    default=None,
    help="Use N requests with none missing instead of the reference sequence",
)
@click.option(
    "--failure-rate",
    type=click.FloatRange(0.0, 1.0),
    default=None,
    help="Nominal service failure rate, reported only (default: from settings)",
)
@click.option("--json", "json_output", is_flag=True, help="Output JSON instead of rich text")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write the reports to this JSON file",
)
@click.option("--quiet", "-q", is_flag=True, help="Hide per-request progress lines")
def simulate(
    policy: str,
    requests_file: Optional[str],
    all_present: Optional[int],
    failure_rate: Optional[float],
    json_output: bool,
    output: Optional[str],
    quiet: bool,
):
    """Drive a request sequence through one or all failure-handling policies.

    The reference sequence holds seven requests, two of them missing. Each
    policy sees exactly the same requests:

    \b
      unsafe     a missing request crashes the service; the rest are lost
      safe       a missing request becomes an error value; processing goes on
      resilient  a missing request gets a fallback answer, counted as degraded

    Example:
        faultline simulate
        faultline simulate --policy unsafe
        faultline simulate -f requests.yaml --json
    """
    if requests_file and all_present:
        raise click.UsageError("--requests-file and --all-present cannot be used together")

    try:
        _simulate_impl(policy, requests_file, all_present, failure_rate, json_output, output, quiet)
    except Exception as e:
        if json_output:
            print(json.dumps({"error": str(e)}, indent=2))
        else:
            console.print(format_error(f"Simulation failed: {str(e)}"))
        raise click.exceptions.Exit(1) from e


def _simulate_impl(
    policy: str,
    requests_file: Optional[str],
    all_present: Optional[int],
    failure_rate: Optional[float],
    json_output: bool,
    output: Optional[str],
    quiet: bool,
) -> None:
    sequence_name, requests, file_rate = _load_requests(requests_file, all_present)

    # Command line wins over the sequence file, which wins over settings
    if failure_rate is None:
        failure_rate = file_rate if file_rate is not None else get_settings().failure_rate

    policies = all_policies() if policy == "all" else [create_policy(policy)]
    show_progress = not (json_output or quiet)

    runner = SimulationRunner(
        failure_rate=failure_rate,
        progress=_print_progress if show_progress else None,
    )

    if not json_output:
        messages = COMMAND_MESSAGES['simulate']
        console.print_header(f"Sequence: {sequence_name}")
        console.print(messages['starting'].format(
            total=len(requests),
            missing=len(missing_positions(requests)),
            count=len(policies),
        ))
        console.print_metric("Nominal failure rate", format_failure_rate(failure_rate))

    reports = _run_policies(runner, policies, requests, json_output)

    payload = {
        "sequence": sequence_name,
        "failure_rate": failure_rate,
        "total_requests": len(requests),
        "reports": [report.to_dict() for report in reports],
    }

    if output:
        atomic_write_json(output, payload, indent=2)

    if json_output:
        print(json.dumps(payload, indent=2, default=json_serializer))
        return

    display = ReportDisplayManager(console)
    if len(reports) > 1:
        display.display_comparison(reports)
    if output:
        console.print(format_success(COMMAND_MESSAGES['simulate']['saved'].format(path=Path(output))))


def _load_requests(requests_file: Optional[str], all_present: Optional[int]):
    """Resolve the request sequence from the command options.

    Returns:
        tuple: (sequence name, requests, failure rate from file or None)
    """
    if requests_file:
        parsed = SequenceParser().parse(requests_file)
        return parsed.name, parsed.requests, parsed.failure_rate
    if all_present:
        return f"all-present ({all_present})", all_present_sequence(all_present), None
    return "reference", reference_sequence(), None


def _run_policies(
    runner: SimulationRunner,
    policies: List[PolicyExecutor],
    requests: List[RequestUnit],
    json_output: bool,
) -> List[SimulationReport]:
    display = ReportDisplayManager(console)
    reports = []
    for policy in policies:
        if not json_output:
            console.print_header(
                COMMAND_MESSAGES['simulate']['header'].format(policy=policy.name)
            )
        report = runner.run(policy, requests)
        if not json_output:
            display.display_report(report)
        reports.append(report)
    return reports


def _print_progress(policy: PolicyExecutor, outcome: Outcome, total: int) -> None:
    console.print_outcome(outcome, total)
