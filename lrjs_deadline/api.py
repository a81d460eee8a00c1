"""
FastAPI REST API for the LRJS deadline calculator.
"""

import logging
from datetime import date
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from lrjs_deadline import __version__
from lrjs_deadline.config.manager import ConfigManager
from lrjs_deadline.core.calculator import create_calculator
from lrjs_deadline.core.deadline import parse_trial_date
from lrjs_deadline.core.errors import InvalidTrialDateError, UnboundedSearchError
from lrjs_deadline.core.holiday_parser import parse_holidays
from lrjs_deadline.data.comunidad_data import COMUNIDAD_NAMES
from lrjs_deadline.data.schemas import Comunidad, DeadlineRequest

logger = logging.getLogger(__name__)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

# Initialize components
calculator = create_calculator(config)
holiday_provider = calculator.holiday_provider


# API Models
class CalculateRequest(BaseModel):
    """Request model for deadline calculation."""

    trial_date: str = Field(..., description="Trial date (YYYY-MM-DD, DD/MM/YYYY or DD.MM.YYYY)")
    location: Optional[str] = Field(None, description="Place of the court (city, province or postal code)")
    comunidad: Optional[str] = Field(None, description="Community code (e.g., MD, CT)")
    holidays: List[str] = Field(default_factory=list, description="Additional holidays as YYYY-MM-DD")
    use_static_calendar: bool = Field(True, description="Apply the official national/regional calendar")
    use_discovery: bool = Field(True, description="Ask the discovery model for local holidays")


class HolidayResponse(BaseModel):
    """Response model for a single holiday."""

    date: date
    name: str
    source: str
    is_national: bool


class CalculateResponse(BaseModel):
    """Response model for deadline calculation."""

    trial_date: date
    theoretical_deadline: date
    theoretical_deadline_time: str
    prorrogue_date: date
    prorrogue_cutoff_time: str
    business_days_track: List[date]
    comunidad: Optional[str]
    comunidad_name: Optional[str]
    resolution_method: Optional[str]
    holiday_count: int
    holidays: List[HolidayResponse]
    warnings: List[str]


class ParseRequest(BaseModel):
    """Raw holiday text to normalize."""

    text: str = Field(..., description="One YYYY-MM-DD per line; other lines are ignored")


class ComunidadInfo(BaseModel):
    """Information about an autonomous community."""

    code: str
    name: str


def _parse_comunidad(code: Optional[str]) -> Optional[Comunidad]:
    if not code:
        return None
    try:
        return Comunidad(code.upper())
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid comunidad code: {code}. Use one of: {', '.join(c.value for c in Comunidad)}",
        )


# FastAPI app
app = FastAPI(
    title="LRJS Deadline Calculator API",
    description="Art. 82.5 LRJS filing deadlines with the Art. 45 LRJS grace day",
    version=__version__,
)


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "LRJS Deadline Calculator API",
        "version": __version__,
        "endpoints": {
            "POST /calculate": "Calculate the filing deadline for a trial",
            "POST /parse-holidays": "Normalize a free-text holiday list",
            "GET /holidays/{year}/{comunidad}": "Get official holidays for a year",
            "GET /comunidades": "List all autonomous communities",
        },
    }


@app.post("/calculate", response_model=CalculateResponse)
def calculate_deadline(request: CalculateRequest):
    """
    Calculate the filing deadline for a trial date.

    Provide the court location via:
    - location: city, province or postal code
    - comunidad: community code (e.g., MD, CT, AN)
    """
    try:
        trial_date = parse_trial_date(request.trial_date)
    except InvalidTrialDateError as e:
        raise HTTPException(status_code=400, detail=str(e))

    deadline_request = DeadlineRequest(
        trial_date=trial_date,
        location=request.location,
        comunidad=_parse_comunidad(request.comunidad),
        extra_holidays="\n".join(request.holidays),
        use_static_calendar=request.use_static_calendar and config.static_calendar_enabled,
        use_discovery=request.use_discovery,
    )

    try:
        report = calculator.calculate(deadline_request)
    except UnboundedSearchError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = report.result
    location = report.location
    return CalculateResponse(
        trial_date=result.trial_date,
        theoretical_deadline=result.theoretical_deadline,
        theoretical_deadline_time="23:59",
        prorrogue_date=result.prorrogue_date,
        prorrogue_cutoff_time=result.grace_cutoff.strftime("%H:%M"),
        business_days_track=result.business_days_track,
        comunidad=location.comunidad.value if location else None,
        comunidad_name=location.comunidad_name if location else None,
        resolution_method=location.resolution_method if location else None,
        holiday_count=report.holiday_count,
        holidays=[
            HolidayResponse(
                date=h.holiday_date,
                name=h.name,
                source=h.source.value,
                is_national=h.is_national,
            )
            for h in report.holidays
        ],
        warnings=report.warnings,
    )


@app.post("/parse-holidays", response_model=List[date])
async def parse_holiday_text(request: ParseRequest):
    """Return the valid dates of a free-text holiday list, sorted."""
    return sorted(parse_holidays(request.text))


@app.get("/holidays/{year}/{comunidad}", response_model=List[HolidayResponse])
async def get_holidays(year: int, comunidad: str):
    """
    Get all official holidays for a specific year and community.

    Use "ES" as comunidad for national holidays only.
    """
    comunidad_enum = None if comunidad.upper() == "ES" else _parse_comunidad(comunidad)

    if year < 1900 or year > 2100:
        raise HTTPException(
            status_code=400,
            detail="Year must be between 1900 and 2100",
        )

    try:
        holidays = holiday_provider.get_holidays_for_year(year, comunidad_enum)
    except Exception as e:
        logger.exception("Error fetching holidays")
        raise HTTPException(status_code=500, detail=f"Error fetching holidays: {str(e)}")

    return [
        HolidayResponse(
            date=h.holiday_date,
            name=h.name,
            source=h.source.value,
            is_national=h.is_national,
        )
        for h in holidays
    ]


@app.get("/comunidades", response_model=List[ComunidadInfo])
async def list_comunidades():
    """List all Spanish autonomous communities with their codes."""
    return [
        ComunidadInfo(code=comunidad.value, name=COMUNIDAD_NAMES[comunidad])
        for comunidad in Comunidad
    ]


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
