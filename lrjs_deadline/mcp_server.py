"""
MCP Server for the LRJS Deadline Calculator.

This module provides an MCP (Model Context Protocol) server that exposes
the deadline calculator to MCP clients.

Supports two transport modes:
- stdio: For local desktop integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import os
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from lrjs_deadline.config.manager import ConfigManager
from lrjs_deadline.core.calculator import create_calculator
from lrjs_deadline.core.deadline import parse_trial_date
from lrjs_deadline.core.errors import DeadlineError
from lrjs_deadline.data.comunidad_data import COMUNIDAD_NAMES
from lrjs_deadline.data.schemas import Comunidad, DeadlineRequest

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

# Initialize components
calculator = create_calculator(config)


def create_mcp_server(host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """Create and configure the MCP server with tools."""
    mcp = FastMCP("LRJS Deadline Calculator", host=host, port=port)

    @mcp.tool()
    def calculate_deadline(
        trial_date: str,
        location: Optional[str] = None,
        comunidad: Optional[str] = None,
        holidays: Optional[List[str]] = None,
    ) -> dict:
        """
        Calculate the Art. 82.5 LRJS filing deadline for a Spanish labour trial.

        Counts 10 business days (Monday-Friday, excluding holidays) backwards
        from the day before the trial. The 10th is the ordinary deadline
        (until 23:59); the next business day is the grace day, valid until 15:00.

        Args:
            trial_date: Trial date in format YYYY-MM-DD (e.g., "2026-02-26")
            location: Place of the court: city, province or postal code (e.g., "Madrid", "08001")
            comunidad: Community code (e.g., "MD" for Madrid, "CT" for Cataluna)
            holidays: Additional non-business days as YYYY-MM-DD strings (e.g., local holidays)

        Returns:
            Dictionary with:
            - theoretical_deadline: 10th business day before the trial
            - prorrogue_date: grace day, filing valid until 15:00
            - business_days_track: the 10 counted business days, ascending
            - holidays: named holidays inside the counted period
            - warnings: anything the caller should double-check

        Examples:
            >>> calculate_deadline("2026-02-26", location="Madrid")
            >>> calculate_deadline("2026-02-26", comunidad="CT", holidays=["2026-02-12"])
        """
        try:
            trial = parse_trial_date(trial_date)
        except DeadlineError as e:
            return {"error": str(e)}

        comunidad_enum = None
        if comunidad:
            try:
                comunidad_enum = Comunidad(comunidad.upper())
            except ValueError:
                valid_codes = ", ".join(c.value for c in Comunidad)
                return {"error": f"Invalid comunidad code: {comunidad}. Valid codes: {valid_codes}"}

        try:
            report = calculator.calculate(
                DeadlineRequest(
                    trial_date=trial,
                    location=location,
                    comunidad=comunidad_enum,
                    extra_holidays="\n".join(holidays or []),
                    use_static_calendar=config.static_calendar_enabled,
                )
            )
        except DeadlineError as e:
            return {"error": str(e)}

        result = report.result
        return {
            "trial_date": result.trial_date.isoformat(),
            "theoretical_deadline": result.theoretical_deadline.isoformat(),
            "theoretical_deadline_time": "23:59",
            "prorrogue_date": result.prorrogue_date.isoformat(),
            "prorrogue_cutoff_time": result.grace_cutoff.strftime("%H:%M"),
            "business_days_track": [d.isoformat() for d in result.business_days_track],
            "comunidad": report.location.comunidad.value if report.location else None,
            "holidays": [
                {"date": h.holiday_date.isoformat(), "name": h.name, "source": h.source.value}
                for h in report.holidays
            ],
            "warnings": report.warnings,
        }

    @mcp.tool()
    def get_holidays(year: int, comunidad: Optional[str] = None) -> dict:
        """
        Get the official holidays for a year in Spain or one autonomous community.

        Municipal holidays are not included.

        Args:
            year: Year to get holidays for (e.g., 2026)
            comunidad: Community code (e.g., "MD", "CT"); omit for national holidays only

        Returns:
            Dictionary with year, comunidad and the list of holidays.
        """
        comunidad_enum = None
        if comunidad:
            try:
                comunidad_enum = Comunidad(comunidad.upper())
            except ValueError:
                valid_codes = ", ".join(c.value for c in Comunidad)
                return {"error": f"Invalid comunidad code: {comunidad}. Valid codes: {valid_codes}"}

        if year < 1900 or year > 2100:
            return {"error": "Year must be between 1900 and 2100"}

        holidays = calculator.holiday_provider.get_holidays_for_year(year, comunidad_enum)
        return {
            "year": year,
            "comunidad": comunidad_enum.value if comunidad_enum else None,
            "comunidad_name": COMUNIDAD_NAMES[comunidad_enum] if comunidad_enum else "España",
            "holiday_count": len(holidays),
            "holidays": [
                {"date": h.holiday_date.isoformat(), "name": h.name, "is_national": h.is_national}
                for h in holidays
            ],
        }

    @mcp.tool()
    def list_comunidades() -> dict:
        """
        List all Spanish autonomous communities and cities with their codes.

        Returns:
            Dictionary with the count and a list of {code, name}.
        """
        return {
            "count": len(Comunidad),
            "comunidades": [
                {"code": c.value, "name": COMUNIDAD_NAMES[c]}
                for c in Comunidad
            ],
        }

    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="LRJS Deadline Calculator MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", "0.0.0.0"),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", "8080")),
        help="Port to listen on (SSE mode only, default: 8080)",
    )

    args = parser.parse_args()

    mcp = create_mcp_server(host=args.host, port=args.port)
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
