"""
Data models for the LRJS deadline calculator using Pydantic.
"""

from datetime import date, datetime, time
from enum import Enum
from typing import FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Non-business days beyond weekends, already validated.
HolidaySet = FrozenSet[date]


class Comunidad(str, Enum):
    """Spanish autonomous communities and cities (ISO 3166-2:ES)."""

    AN = "AN"  # Andalucia
    AR = "AR"  # Aragon
    AS = "AS"  # Asturias
    CB = "CB"  # Cantabria
    CE = "CE"  # Ceuta
    CL = "CL"  # Castilla y Leon
    CM = "CM"  # Castilla-La Mancha
    CN = "CN"  # Canarias
    CT = "CT"  # Cataluna
    EX = "EX"  # Extremadura
    GA = "GA"  # Galicia
    IB = "IB"  # Illes Balears
    MC = "MC"  # Region de Murcia
    MD = "MD"  # Comunidad de Madrid
    ML = "ML"  # Melilla
    NC = "NC"  # Navarra
    PV = "PV"  # Pais Vasco
    RI = "RI"  # La Rioja
    VC = "VC"  # Comunitat Valenciana


class HolidaySource(str, Enum):
    """Where a holiday entry came from."""

    STATIC = "static"
    DISCOVERY = "discovery"
    MANUAL = "manual"


class RawHolidayText(BaseModel):
    """Untrusted free-text holiday input, one candidate date per line."""

    text: str = Field(default="", description="Raw text, expected YYYY-MM-DD per line")

    @classmethod
    def join(cls, *chunks: str) -> "RawHolidayText":
        """Concatenate several raw sources into a single input."""
        return cls(text="\n".join(chunk for chunk in chunks if chunk))

    def lines(self) -> List[str]:
        return [line.strip() for line in self.text.split("\n")]


class Holiday(BaseModel):
    """Represents a non-business day with a name."""

    holiday_date: date = Field(..., description="Date of the holiday")
    name: str = Field(..., description="Name of the holiday")
    source: HolidaySource = Field(default=HolidaySource.STATIC, description="Origin of the entry")
    is_national: bool = Field(default=False, description="Whether it's a national holiday")


class LocationResult(BaseModel):
    """Result of location resolution."""

    comunidad: Comunidad = Field(..., description="Resolved autonomous community")
    comunidad_name: str = Field(..., description="Full name of the community")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Confidence score of resolution")
    resolution_method: str = Field(..., description="Method used: manual, postal_code or name")


class DeadlineResult(BaseModel):
    """Outcome of the Art. 82.5 LRJS computation."""

    model_config = ConfigDict(frozen=True)

    trial_date: date = Field(..., description="Date of the trial")
    theoretical_deadline: date = Field(..., description="10th business day before the trial")
    prorrogue_date: date = Field(..., description="Grace day (next business day)")
    business_days_track: List[date] = Field(..., description="Counted business days, ascending")
    grace_cutoff: time = Field(default=time(15, 0), description="Filing cutoff on the grace day")

    @field_validator("business_days_track")
    @classmethod
    def validate_track_order(cls, v: List[date]) -> List[date]:
        """Ensure the track is strictly increasing."""
        for earlier, later in zip(v, v[1:]):
            if later <= earlier:
                raise ValueError("business_days_track must be strictly increasing")
        return v

    @property
    def theoretical_deadline_at(self) -> datetime:
        return datetime.combine(self.theoretical_deadline, time(23, 59, 59))

    @property
    def prorrogue_deadline_at(self) -> datetime:
        return datetime.combine(self.prorrogue_date, self.grace_cutoff)


class DeadlineRequest(BaseModel):
    """Request model for a deadline calculation."""

    trial_date: date = Field(..., description="Date of the trial")
    location: Optional[str] = Field(default=None, description="Place of the court (city, province or postal code)")
    comunidad: Optional[Comunidad] = Field(default=None, description="Direct community specification")
    extra_holidays: str = Field(default="", description="Additional holidays, one YYYY-MM-DD per line")
    use_static_calendar: bool = Field(default=True, description="Include the official national/regional calendar")
    use_discovery: bool = Field(default=True, description="Ask the discovery model for local holidays")


class DeadlineReport(BaseModel):
    """Complete result of a deadline calculation with its inputs."""

    result: DeadlineResult = Field(..., description="Computed deadlines")
    location: Optional[LocationResult] = Field(default=None, description="Resolved location, if any")
    holidays: List[Holiday] = Field(default_factory=list, description="Named holidays inside the counted window")
    holiday_count: int = Field(..., ge=0, description="Number of distinct non-business dates supplied")
    calculation_timestamp: datetime = Field(
        default_factory=datetime.now, description="When the calculation was performed"
    )
    warnings: List[str] = Field(default_factory=list, description="Any warnings generated")


class Config(BaseModel):
    """Configuration for the deadline calculator."""

    default_comunidad: Optional[Comunidad] = Field(
        default=None, description="Default community if none can be resolved"
    )
    static_calendar_enabled: bool = Field(default=True, description="Use the holidays library calendar")
    holiday_language: str = Field(default="es", description="Language for holiday names")
    max_search_days: int = Field(default=366, ge=14, le=3660, description="Iteration cap for each walk")
    discovery_enabled: bool = Field(default=False, description="Enable model-based holiday discovery")
    ollama_endpoint: str = Field(default="http://localhost:11434", description="Ollama API endpoint")
    ollama_model: str = Field(default="llama3.1:8b", description="Model used for holiday discovery")
    ollama_timeout: int = Field(default=60, ge=1, le=600, description="Discovery timeout in seconds")
    ollama_max_retries: int = Field(default=3, ge=1, le=10, description="Discovery retry attempts")
    output_format: str = Field(default="console", description="Default output format: console or json")
    log_level: str = Field(default="INFO", description="Logging level")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")
