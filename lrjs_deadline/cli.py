"""
CLI interface for the LRJS deadline calculator.
"""

import logging
import sys
from datetime import date
from pathlib import Path

import click

from lrjs_deadline import __version__
from lrjs_deadline.config.manager import ConfigManager
from lrjs_deadline.core.calculator import create_calculator
from lrjs_deadline.core.deadline import parse_trial_date
from lrjs_deadline.core.errors import DeadlineError, UnboundedSearchError
from lrjs_deadline.core.holiday_parser import parse_holidays
from lrjs_deadline.core.holiday_provider import HolidayProvider
from lrjs_deadline.data.schemas import Comunidad, DeadlineRequest
from lrjs_deadline.output.formatter import ConsoleFormatter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

COMUNIDAD_CHOICE = click.Choice([c.value for c in Comunidad], case_sensitive=False)


def load_config(config_path, verbose: bool = False):
    """Load configuration and apply its log level."""
    cfg = ConfigManager(config_path).load_config()
    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)
    return cfg


@click.group()
@click.version_option(version=__version__, prog_name="lrjs-deadline")
def main():
    """LRJS Deadline Calculator - Art. 82.5 LRJS filing deadlines with the grace day."""
    pass


@main.command()
@click.option(
    "--trial", "-t",
    required=True,
    help="Trial date (YYYY-MM-DD, DD/MM/YYYY, or DD.MM.YYYY)",
)
@click.option(
    "--location", "-l",
    help="Place of the court (city, province or postal code)",
)
@click.option(
    "--comunidad", "-c",
    type=COMUNIDAD_CHOICE,
    help="Autonomous community code (e.g., MD, CT, AN)",
)
@click.option(
    "--holiday", "-H",
    multiple=True,
    help="Additional non-business day (YYYY-MM-DD), repeatable",
)
@click.option(
    "--holidays-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Text file with one YYYY-MM-DD per line",
)
@click.option(
    "--no-static",
    is_flag=True,
    default=False,
    help="Do not apply the official national/regional calendar",
)
@click.option(
    "--discover/--no-discover",
    default=True,
    help="Ask the discovery model for local holidays (if enabled in config)",
)
@click.option(
    "--format", "-f",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (default: from config)",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def calculate(trial, location, comunidad, holiday, holidays_file, no_static, discover, format, config, verbose):
    """Calculate the filing deadline for a trial date."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_config(config, verbose)
        trial_date = parse_trial_date(trial)

        extra = list(holiday)
        if holidays_file:
            extra.append(Path(holidays_file).read_text(encoding="utf-8"))

        selected = Comunidad(comunidad.upper()) if comunidad else None
        if not (location or selected) and cfg.default_comunidad:
            selected = cfg.default_comunidad

        request = DeadlineRequest(
            trial_date=trial_date,
            location=location,
            comunidad=selected,
            extra_holidays="\n".join(extra),
            use_static_calendar=cfg.static_calendar_enabled and not no_static,
            use_discovery=discover,
        )

        calculator = create_calculator(cfg)
        report = calculator.calculate(request)

        output_format = format or cfg.output_format
        if output_format == "json":
            click.echo(report.model_dump_json(indent=2))
        else:
            formatter.print_report(report)

    except UnboundedSearchError as e:
        formatter.print_error(f"{e} ({e.walk} walk, cap {e.cap} days)")
        sys.exit(1)
    except (DeadlineError, ValueError) as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        formatter.print_error(f"Unexpected error: {e}")
        sys.exit(1)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to show holidays for (default: current year)",
)
@click.option(
    "--comunidad", "-c",
    type=COMUNIDAD_CHOICE,
    default=None,
    help="Community code (default: national holidays only)",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def holidays(year, comunidad, config):
    """List official holidays for a year and community."""
    formatter = ConsoleFormatter()

    try:
        if year is None:
            year = date.today().year

        cfg = load_config(config)

        comunidad_enum = Comunidad(comunidad.upper()) if comunidad else cfg.default_comunidad
        holiday_provider = HolidayProvider(language=cfg.holiday_language)
        holiday_list = holiday_provider.get_holidays_for_year(year, comunidad_enum)

        formatter.print_holidays_for_year(year, comunidad_enum, holiday_list)

    except Exception as e:
        formatter.print_error(f"Error: {e}")
        sys.exit(1)


@main.command()
@click.argument("holidays_file", type=click.File("r", encoding="utf-8"))
def parse(holidays_file):
    """Normalize a holiday list: print the valid dates, sorted and de-duplicated."""
    for day in sorted(parse_holidays(holidays_file.read())):
        click.echo(day.isoformat())


@main.command()
def comunidades():
    """List all Spanish autonomous communities with their codes."""
    formatter = ConsoleFormatter()
    formatter.print_comunidades()


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def serve(host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn

        cfg = load_config(config)

        api_host = host or cfg.api_host
        api_port = port or cfg.api_port

        formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
        formatter.console.print("Press Ctrl+C to stop")
        formatter.console.print()

        uvicorn.run(
            "lrjs_deadline.api:app",
            host=api_host,
            port=api_port,
            reload=False,
        )

    except ImportError:
        formatter.print_error("uvicorn is required for the API server. Install it with: pip install uvicorn")
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
