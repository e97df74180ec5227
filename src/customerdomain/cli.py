"""
Command Line Interface for customerdomain
"""

import logging
from enum import Enum
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .demos import DemoName, DemoReport, run_demo
from .exceptions import CustomerDomainError
from .formatter import DemoFormatter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("customerdomain")

app = typer.Typer(
    name="customerdomain",
    help="Customer discount demos: from boolean flags to explicit variants",
    no_args_is_help=False,
)
console = Console()


# Demo choices accepted on the command line: every DemoName plus "all"
DemoSelection = Enum(
    "DemoSelection",
    [(name.name, name.value) for name in DemoName] + [("ALL", "all")],
    type=str,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        from . import __version__
        console.print(f"customerdomain version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    demo: DemoSelection = typer.Option(
        DemoSelection.FINAL,
        "--demo",
        "-d",
        envvar="CUSTOMERDOMAIN_DEMO",
        case_sensitive=False,
        help="Which iteration to run"
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print plain text lines instead of rich panels"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information"
    ),
) -> None:

    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled")

    try:
        for report in _run_selected(demo):
            _display_report(report, plain)

    except CustomerDomainError as e:
        logger.error(f"customerdomain error: {e}")
        raise typer.Exit(code=1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if verbose:
            logger.exception("Full traceback:")
        raise typer.Exit(code=1)


def _run_selected(demo: DemoSelection) -> List[DemoReport]:
    """
    Run the selected demo, or every demo in teaching order
    """
    if demo == DemoSelection.ALL:
        names = list(DemoName)
    else:
        names = [DemoName(demo.value)]

    reports = []
    for name in names:
        logger.debug(f"Running {name.value} demo")
        reports.append(run_demo(name))
    return reports


def _display_report(report: DemoReport, plain: bool) -> None:
    """
    Print one report to the console
    """
    formatter = DemoFormatter(console=console)

    if plain:
        console.print(formatter.format_plain_report(report), markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(formatter.format_report(report))

    for line in report.mismatches:
        logger.debug(f"{line.name}: got {line.total}, expected {line.expected}")

    console.print()


if __name__ == "__main__":
    app()
