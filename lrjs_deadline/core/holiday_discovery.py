"""
Holiday discovery through a local Ollama model.

Asks the model for the official national, regional and local holidays of a
place and keeps every entry that carries a usable date.
"""

import json
import logging
import time
from datetime import date
from typing import Any, Dict, List

import requests

from lrjs_deadline.core.business_days import days_before
from lrjs_deadline.core.errors import HolidayDiscoveryError
from lrjs_deadline.core.holiday_parser import parse_holiday_line
from lrjs_deadline.data.schemas import Holiday, HolidaySource

logger = logging.getLogger(__name__)

# Days before the trial the backward walk normally reaches.
DISCOVERY_LOOKBACK_DAYS = 45

RETRYABLE_ERRORS = (
    requests.exceptions.ConnectionError,
    requests.exceptions.Timeout,
    requests.exceptions.HTTPError,
)

SYSTEM_PROMPT = (
    "Eres un asistente jurídico especializado en calendarios laborales de España. "
    "Respondes únicamente con JSON válido."
)

USER_PROMPT_TEMPLATE = (
    "Busca los días festivos oficiales (nacionales, autonómicos y locales) en {location} "
    "para el año {year}. Devuelve un objeto JSON con la forma "
    '{{"holidays": [{{"date": "YYYY-MM-DD", "name": "Nombre del festivo"}}]}}. '
    "Solo devuelve el JSON."
)


class OllamaClient:
    """JSON-mode completions from a local Ollama server."""

    def __init__(
        self,
        endpoint: str,
        model: str,
        timeout: int = 60,
        max_retries: int = 3,
    ):
        """
        Initialize Ollama client.

        Args:
            endpoint: Ollama API endpoint URL
            model: Model name to use
            timeout: Request timeout in seconds
            max_retries: Attempts per request before giving up
        """
        self.endpoint = endpoint.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.max_retries = max_retries

    def generate_json(self, system_prompt: str, user_prompt: str) -> Any:
        """
        Ask the model for a JSON answer and decode it.

        Args:
            system_prompt: System prompt text
            user_prompt: User prompt text

        Returns:
            The decoded answer (usually a dict, sometimes a bare list).

        Raises:
            requests.RequestException: If Ollama stays unreachable or keeps failing.
            ValueError: If the reply or the answer inside it is not valid JSON.
        """
        payload = {
            "model": self.model,
            "prompt": user_prompt,
            "system": system_prompt,
            "format": "json",
            "stream": False,
        }
        started = time.time()
        reply = self._post(payload).json()
        if not isinstance(reply, dict) or not isinstance(reply.get("response"), str):
            raise ValueError(f"Unexpected Ollama reply: {reply!r}")

        logger.debug(f"Ollama ({self.model}) answered in {time.time() - started:.1f}s")
        return json.loads(reply["response"])

    def _post(self, payload: Dict[str, Any]) -> requests.Response:
        url = f"{self.endpoint}/api/generate"
        for attempt in range(1, self.max_retries + 1):
            try:
                response = requests.post(url, json=payload, timeout=self.timeout)
                response.raise_for_status()
                return response
            except RETRYABLE_ERRORS as e:
                if attempt == self.max_retries:
                    raise
                logger.debug(f"Ollama attempt {attempt}/{self.max_retries} failed: {e}")
                time.sleep(2 ** (attempt - 1))
        raise ValueError("max_retries must be at least 1")


def discovery_years(trial_date: date) -> List[int]:
    """Years the backward walk from trial_date normally reaches."""
    earliest = days_before(trial_date, DISCOVERY_LOOKBACK_DAYS)
    return sorted({earliest.year, trial_date.year})


class HolidayDiscovery:
    """Finds local holidays for a place by asking a language model."""

    def __init__(self, client: OllamaClient):
        self.client = client

    def find_holidays(self, location: str, year: int) -> List[Holiday]:
        """
        Ask the model for the holidays of a place.

        Args:
            location: Place of the court, as typed by the user.
            year: Calendar year.

        Returns:
            Holidays with a valid date inside the year, sorted by date.

        Raises:
            HolidayDiscoveryError: If the model cannot be reached or its
                answer is not JSON.
        """
        prompt = USER_PROMPT_TEMPLATE.format(location=location, year=year)
        try:
            answer = self.client.generate_json(SYSTEM_PROMPT, prompt)
        except requests.exceptions.RequestException as e:
            raise HolidayDiscoveryError(
                f"Holiday discovery failed for {location} {year}: {e}",
                location=location,
                year=year,
            ) from e
        except ValueError as e:
            raise HolidayDiscoveryError(
                f"Holiday discovery returned invalid JSON for {location} {year}",
                location=location,
                year=year,
                context={"error": str(e)},
            ) from e

        holidays = self.parse_response(answer, year)
        logger.info(f"Holiday discovery for {location} {year}: {len(holidays)} holidays")
        return holidays

    def parse_response(self, answer: Any, year: int) -> List[Holiday]:
        """
        Extract holidays from a decoded model answer.

        Accepts {"holidays": [...]} or a bare list; entries without a
        YYYY-MM-DD date inside the year are dropped.
        """
        entries = answer.get("holidays", []) if isinstance(answer, dict) else answer
        if not isinstance(entries, list):
            entries = []

        found = {}
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            holiday_date = parse_holiday_line(str(entry.get("date", "")))
            if holiday_date is None or holiday_date.year != year:
                logger.debug(f"Dropping discovered entry {entry!r}")
                continue
            name = str(entry.get("name") or "Festivo").strip()
            found.setdefault(
                holiday_date,
                Holiday(holiday_date=holiday_date, name=name, source=HolidaySource.DISCOVERY),
            )

        return [found[d] for d in sorted(found)]
