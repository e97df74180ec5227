"""
Rich text formatter for displaying demo reports
"""

from decimal import Decimal
from typing import List, Optional, Union

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .demos import DemoLine, DemoReport
from .exceptions import FormattingError


def format_money(amount: Decimal) -> str:
    """Format an amount in pounds with two decimal places"""
    return f"£{amount:.2f}"


def format_line(line: DemoLine) -> str:
    """
    Format a demo line as plain text

    Returns a string shaped like "John (Eligible, £100.00): £90.00"
    """
    return (
        f"{line.name} ({line.classification}, {format_money(line.spend)}): "
        f"{format_money(line.total)}"
    )


class DemoFormatter:
    """
    Formatter for demo reports with rich text features
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize the formatter
        """
        self.console = console or Console()

        # Totals that agree with expectations and those that don't
        self.colors = {
            True: "green",
            False: "bold red",
        }

    def format_line(self, line: DemoLine) -> str:
        """
        Format a single demo line as plain text
        Returns a string shaped like "John (Eligible, £100.00): £90.00"
        """
        return format_line(line)

    def format_report(self, report: DemoReport) -> Group:
        """
        Format a complete report with header, totals, sections and notes
        Returns Rich Group object containing the formatted report
        """
        try:
            renderables = [self._create_header(report)]

            if report.lines:
                renderables.append(self._create_totals_table(report.lines))

            for heading, entries in report.sections.items():
                renderables.append(self._format_section(heading, entries))

            if report.notes:
                notes = Text()
                for note in report.notes:
                    notes.append(f"{note}\n", style="dim")
                renderables.append(notes)

            return Group(*renderables)

        except Exception as e:
            raise FormattingError(f"Failed to format report: {e}") from e

    def _create_header(self, report: DemoReport) -> Panel:
        """
        Create the header panel with title and tagline
        """
        tagline = Text(report.tagline, style="italic")
        return Panel(
            tagline,
            title=f"[bold]{report.title}[/bold]",
            border_style="blue"
        )

    def _create_totals_table(self, lines: List[DemoLine]) -> Table:
        """
        Create a table with one row per computed total
        """
        table = Table(show_header=True, header_style="bold")
        table.add_column("Customer")
        table.add_column("Classification")
        table.add_column("Spend", justify="right")
        table.add_column("Total", justify="right")
        table.add_column("Expected", justify="right")

        for line in lines:
            expected = format_money(line.expected) if line.expected is not None else "???"
            table.add_row(
                line.name,
                line.classification,
                format_money(line.spend),
                Text(format_money(line.total), style=self.colors[line.matches_expected]),
                expected,
            )

        return table

    def _format_section(self, heading: str, entries: List[Union[str, DemoLine]]) -> Panel:
        """
        Format a headed group of lines
        """
        content = Text()
        for i, entry in enumerate(entries):
            if i > 0:
                content.append("\n")
            if isinstance(entry, DemoLine):
                content.append(self.format_line(entry), style=self.colors[entry.matches_expected])
            else:
                content.append(entry)

        return Panel(
            content,
            title=heading,
            border_style="dim",
            padding=(0, 1)
        )

    def format_plain_report(self, report: DemoReport) -> str:
        """
        Format a report as plain text, one line per entry
        """
        lines = [f"=== {report.title} ===", report.tagline, ""]

        for line in report.lines:
            lines.append(self.format_line(line))

        for heading, entries in report.sections.items():
            lines.append("")
            lines.append(f"--- {heading} ---")
            for entry in entries:
                lines.append(self.format_line(entry) if isinstance(entry, DemoLine) else entry)

        if report.notes:
            lines.append("")
            lines.extend(report.notes)

        return "\n".join(lines)
