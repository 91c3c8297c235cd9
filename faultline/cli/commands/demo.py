"""Faultline demo command - walk through how unchecked unwraps propagate."""

from typing import Any, Callable

import click
from rich.panel import Panel
from rich.text import Text

from faultline.cli.design_standards import SYMBOLS
from faultline.cli.message_templates import CASCADE_MESSAGES, LESSON_MESSAGES, TAKEAWAYS
from faultline.cli.utils import FaultlineConsole, format_error, format_info, format_success, format_warning
from faultline.core.errors import FatalRequestError
from faultline.core.models.result import ProcessResult
from faultline.illustrations import (
    divide,
    get_element,
    get_element_safe,
    get_nested_value,
    parse_and_double,
    parse_and_double_safe,
    read_config_file,
    read_config_file_safe,
)

console = FaultlineConsole()


@click.command()
@click.option(
    "--config-path",
    default="nonexistent.txt",
    show_default=True,
    help="File the file-reading example tries to open",
)
@click.option("--no-lessons", is_flag=True, help="Skip the closing lessons")
def demo(config_path: str, no_lessons: bool):
    """Show how one missing value unwinds into a crash, and the alternatives.

    Runs five small examples twice: once unwrapping every intermediate
    value, once handling each error as a value.

    Example:
        faultline demo
        faultline demo --no-lessons
    """
    try:
        _demo_impl(config_path, no_lessons)
    except Exception as e:
        console.print(format_error(f"Demo failed: {str(e)}"))
        raise click.exceptions.Exit(1) from e


def _demo_impl(config_path: str, no_lessons: bool) -> None:
    console.print_header("Example 1: Basic Division")
    quotient = divide(10, 2)
    if quotient is not None:
        console.print(format_success(f"10 / 2 = {quotient}"))
    else:
        console.print(format_error("Division failed"))
    console.print(format_warning("unwrapping divide(10, 0) would crash here"))

    console.print_header("Example 2: Chained Operations")
    _show_crash(lambda: parse_and_double("not a number"),
                "Invalid string caused the parse unwrap to crash")
    console.print(format_success(f'parse_and_double("10") = {parse_and_double("10")}'))

    console.print_header("Example 3: File Operations")
    _show_crash(lambda: read_config_file(config_path),
                "File couldn't be read, the open unwrap crashed")
    _show_result(read_config_file_safe(config_path), "File contents")

    console.print_header("Example 4: Nested Optional Unwrapping")
    console.print(format_success(f"Nested value: {get_nested_value(((42,),))}"))
    _show_crash(lambda: get_nested_value(((None,),)),
                "Deep missing value caused the innermost unwrap to crash")

    console.print_header("Example 5: Collection Access")
    numbers = [1, 2, 3, 4, 5]
    console.print(format_success(f"Element at index 2: {get_element(numbers, 2)}"))
    _show_crash(lambda: get_element(numbers, 10),
                "Out of bounds access caused the unwrap to crash")
    _show_result(get_element_safe(numbers, 10), "Element at index 10")

    console.print_header("The Cascade Effect")
    console.print("When an unwrap fails, it:")
    for step, message in enumerate(CASCADE_MESSAGES, start=1):
        console.print(f"  {step}. {message}")

    console.print_header("Better Approaches")
    _show_result(parse_and_double_safe("15"), "Safe parsing: 15 ->")
    _show_result(parse_and_double_safe("invalid"), "Result")

    if not no_lessons:
        _show_lessons()


def _show_crash(operation: Callable[[], Any], explanation: str) -> None:
    """Run an unwrapping operation and report the crash it causes."""
    try:
        value = operation()
    except FatalRequestError as e:
        console.print(format_error(f"CRASH CAUGHT: {explanation}"))
        console.print(Text(f"  {e}", style="muted"))
        return
    console.print(format_success(f"Success: {value}"))


def _show_result(result: ProcessResult, label: str) -> None:
    if result.is_ok:
        console.print(format_success(f"{label} {result.value}"))
    else:
        console.print(format_success(f"Error handled gracefully: {result.error}"))


def _show_lessons() -> None:
    lines = []
    for number, (headline, detail) in enumerate(LESSON_MESSAGES.values(), start=1):
        lines.append(f"[primary]{number}. {headline}[/primary]")
        lines.append(f"   [muted]{SYMBOLS['right']} {detail}[/muted]")
    console.print()
    console.print(Panel("\n".join(lines), title="Lessons", border_style="primary"))

    console.print()
    for takeaway in TAKEAWAYS:
        console.print(format_success(takeaway))
    console.print()
    console.print(format_info("Run 'faultline simulate' to see the three designs under load."))
