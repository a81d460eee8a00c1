"""
Console output formatting using Rich.
"""

from datetime import date
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from lrjs_deadline.data.comunidad_data import COMUNIDAD_NAMES
from lrjs_deadline.data.schemas import Comunidad, DeadlineReport, Holiday

WEEKDAY_NAMES = ["lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"]
MONTH_NAMES = [
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
]

SOURCE_LABELS = {
    "static": "Calendario oficial",
    "discovery": "Búsqueda local",
    "manual": "Manual",
}


def format_long_date(day: date) -> str:
    """Format as 'viernes, 13 de febrero de 2026'."""
    return f"{WEEKDAY_NAMES[day.weekday()]}, {day.day} de {MONTH_NAMES[day.month - 1]} de {day.year}"


def format_short_date(day: date) -> str:
    """Format as 'vie 13 feb'."""
    return f"{WEEKDAY_NAMES[day.weekday()][:3]} {day.day} {MONTH_NAMES[day.month - 1][:3]}"


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the console formatter."""
        self.console = console or Console()

    def print_report(self, report: DeadlineReport) -> None:
        """
        Print a deadline calculation report.

        Args:
            report: DeadlineReport to display.
        """
        result = report.result

        self.console.print()
        self.console.rule("[bold blue]Cómputo Art. 82.5 LRJS[/bold blue]")
        self.console.print()

        summary_table = Table(show_header=False, box=None)
        summary_table.add_column("Label", style="cyan", width=22)
        summary_table.add_column("Value", style="white")

        summary_table.add_row("Juicio:", format_long_date(result.trial_date))
        if report.location:
            summary_table.add_row(
                "Comunidad:",
                f"{report.location.comunidad_name} ({report.location.comunidad.value})",
            )
            summary_table.add_row("Resolución:", f"{report.location.resolution_method} ({report.location.confidence:.0%})")
        summary_table.add_row("Días inhábiles aportados:", str(report.holiday_count))

        self.console.print(Panel(summary_table, title="[bold]Datos[/bold]"))

        deadline_table = Table(show_header=False, box=None)
        deadline_table.add_column("Label", style="cyan", width=22)
        deadline_table.add_column("Value", style="white")

        deadline_table.add_row(
            "Vencimiento ordinario:",
            f"{format_long_date(result.theoretical_deadline)} a las 23:59 h",
        )
        deadline_table.add_row(
            Text("Plazo de gracia:", style="bold green"),
            Text(
                f"{format_long_date(result.prorrogue_date)} "
                f"hasta las {result.grace_cutoff.strftime('%H:%M')} h",
                style="bold green",
            ),
        )

        self.console.print(Panel(deadline_table, title="[bold]Límite improrrogable[/bold]"))

        self.print_track(result.business_days_track)

        if report.holidays:
            self.print_holidays(report.holidays, title="Festivos en el periodo")

        if report.warnings:
            self.console.print()
            for warning in report.warnings:
                self.console.print(f"[yellow]Aviso:[/yellow] {warning}")

        self.console.print()

    def print_track(self, track: List[date]) -> None:
        """Print the counted business days, numbered backwards from the trial."""
        table = Table(title="[bold]Cronología de los días hábiles[/bold]")
        table.add_column("Día", style="cyan", justify="right", width=6)
        table.add_column("Fecha", style="white", width=12)
        table.add_column("", style="dim")

        total = len(track)
        for idx, day in enumerate(track):
            table.add_row(str(total - idx), day.strftime("%d/%m/%Y"), format_short_date(day))

        self.console.print(table)

    def print_holidays(self, holidays: List[Holiday], title: str = "Festivos") -> None:
        """
        Print a table of holidays.

        Args:
            holidays: List of holidays to display.
            title: Table title.
        """
        holiday_table = Table(title=f"[bold]{title}[/bold]")
        holiday_table.add_column("Fecha", style="cyan", width=12)
        holiday_table.add_column("Día", style="dim", width=10)
        holiday_table.add_column("Nombre", style="white")
        holiday_table.add_column("Origen", style="dim")

        for holiday in holidays:
            holiday_table.add_row(
                holiday.holiday_date.strftime("%d/%m/%Y"),
                WEEKDAY_NAMES[holiday.holiday_date.weekday()],
                holiday.name,
                SOURCE_LABELS[holiday.source.value],
            )

        self.console.print(holiday_table)

    def print_holidays_for_year(self, year: int, comunidad: Optional[Comunidad], holidays: List[Holiday]) -> None:
        """
        Print all holidays for a year.

        Args:
            year: Year.
            comunidad: Community, or None for national holidays.
            holidays: List of holidays.
        """
        region = COMUNIDAD_NAMES[comunidad] if comunidad else "España (nacionales)"
        self.console.print()
        self.console.rule(f"[bold blue]Festivos {year} - {region}[/bold blue]")
        self.console.print()

        if holidays:
            self.print_holidays(holidays)
        else:
            self.console.print("[dim]No se encontraron festivos.[/dim]")

        self.console.print()

    def print_comunidades(self) -> None:
        """Print a table of all autonomous communities."""
        self.console.print()
        self.console.rule("[bold blue]Comunidades y ciudades autónomas[/bold blue]")
        self.console.print()

        table = Table()
        table.add_column("Código", style="cyan", width=8)
        table.add_column("Nombre", style="white")

        for comunidad in Comunidad:
            table.add_row(comunidad.value, COMUNIDAD_NAMES[comunidad])

        self.console.print(table)
        self.console.print()

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[bold green]OK:[/bold green] {message}")
