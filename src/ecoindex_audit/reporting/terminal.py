"""Rich terminal report renderer.

Composes a Rich panel, gauge, and details table into the user-facing
terminal output for an EcoIndex audit.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from ecoindex_audit.audit.ecoindex import make_table_details
from ecoindex_audit.audit.models import TableDetails, TableHeading
from ecoindex_audit.data.models import EcoIndexResult, Grade
from ecoindex_audit.reporting.ascii_charts import format_bytes, score_gauge


class TerminalRenderer:
    """Renders EcoIndex results to the terminal using Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(self, result: EcoIndexResult, title: str = "EcoIndex") -> None:
        """Render the full report for a single result."""
        self._render_header(result, title)
        self._render_index(result)
        self.render_details(make_table_details([result]))
        self._render_footer()

    def render_details(self, details: TableDetails) -> None:
        """Render a details table, one column per heading in order."""
        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        for heading in details.headings:
            justify = "center" if heading.key == "grade" else "right"
            table.add_column(heading.text, justify=justify)

        for item in details.items:
            table.add_row(*(self._format_cell(h, item) for h in details.headings))

        self.console.print()
        self.console.print(table)

    # ------------------------------------------------------------------
    # Private rendering methods
    # ------------------------------------------------------------------

    def _render_header(self, result: EcoIndexResult, title: str) -> None:
        header_text = Text()
        header_text.append("ECOINDEX", style="bold cyan")
        header_text.append(" | ", style="dim")
        header_text.append(f"{result.dom_size:,} DOM elements", style="")
        header_text.append(f" | {result.request_count:,} requests", style="")
        header_text.append(f" | {format_bytes(result.transferred_size_bytes)}", style="")

        self.console.print()
        self.console.print(Panel(header_text, title=title))

    def _render_index(self, result: EcoIndexResult) -> None:
        gauge = score_gauge(result.index, width=30)
        color = result.grade.color

        self.console.print()
        self.console.print(f"  [bold]ECOINDEX[/bold]: {gauge}")
        self.console.print(
            f"  [bold]GRADE[/bold]: [{color}]{result.grade.value}[/{color}]"
            f"  [dim]|[/dim]  GHG {result.greenhouse_gas_emission:.2f} gCO2e"
            f"  [dim]|[/dim]  Water {result.water_consumption:.2f} cl"
        )

    def _render_footer(self) -> None:
        self.console.print()
        self.console.print(Rule(style="dim"))

    @staticmethod
    def _format_cell(heading: TableHeading, item: dict[str, Any]) -> str:
        value = item.get(heading.key)
        if value is None:
            return ""
        if heading.item_type == "bytes":
            return format_bytes(value)
        if heading.key == "grade":
            color = Grade(value).color
            return f"[{color}]{value}[/{color}]"
        if isinstance(value, float):
            return f"{value:.2f}"
        return str(value)
