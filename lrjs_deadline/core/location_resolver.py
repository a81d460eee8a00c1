"""
Location resolver for determining the autonomous community of a court.
"""

import re
import unicodedata
from typing import Optional

from lrjs_deadline.data.comunidad_data import (
    COMUNIDAD_NAMES,
    PLACE_NAME_MAPPING,
    POSTAL_PREFIXES,
)
from lrjs_deadline.data.schemas import Comunidad, LocationResult


class LocationResolver:
    """Resolves free-text locations to a Spanish autonomous community."""

    def resolve(self, location: Optional[str], comunidad: Optional[Comunidad] = None) -> LocationResult:
        """
        Resolve a location to a community.

        Priority order:
        1. Direct comunidad specification
        2. Community code typed as text (e.g. "MD")
        3. Postal code (province prefix)
        4. Community, province or capital name

        Args:
            location: Free-text place, e.g. "Madrid", "08001 Barcelona" or "CT".
            comunidad: Explicit community, wins over the text.

        Returns:
            LocationResult with resolved community and metadata.

        Raises:
            ValueError: If location cannot be resolved.
        """
        if comunidad:
            return self._create_result(comunidad, 1.0, "manual")

        if location:
            code = location.strip().upper()
            if code in Comunidad.__members__:
                return self._create_result(Comunidad(code), 1.0, "manual")

            postal_code = self._extract_postal_code(location)
            if postal_code:
                resolved = POSTAL_PREFIXES.get(postal_code[:2])
                if resolved:
                    return self._create_result(resolved, 0.95, "postal_code")

            resolved = self._resolve_from_name(location)
            if resolved:
                return self._create_result(resolved, 0.85, "name")

        raise ValueError(
            f"Could not resolve location {location!r}. "
            "Provide a postal code, a province or the community code."
        )

    def _resolve_from_name(self, location: str) -> Optional[Comunidad]:
        """
        Resolve a community from a place name.

        Tries the full text first, then each comma-separated part.

        Args:
            location: Place name(s).

        Returns:
            Comunidad if found, None otherwise.
        """
        normalized = self._normalize(location)
        if normalized in PLACE_NAME_MAPPING:
            return PLACE_NAME_MAPPING[normalized]

        for part in normalized.split(","):
            part = re.sub(r"\b\d{5}\b", "", part).strip()
            if part in PLACE_NAME_MAPPING:
                return PLACE_NAME_MAPPING[part]
        return None

    def _extract_postal_code(self, text: str) -> Optional[str]:
        """Extract a Spanish postal code from text."""
        match = re.search(r"\b(\d{5})\b", text)
        return match.group(1) if match else None

    @staticmethod
    def _normalize(text: str) -> str:
        """Lower-case and strip accents."""
        decomposed = unicodedata.normalize("NFKD", text.lower().strip())
        return "".join(c for c in decomposed if not unicodedata.combining(c))

    def _create_result(self, comunidad: Comunidad, confidence: float, method: str) -> LocationResult:
        return LocationResult(
            comunidad=comunidad,
            comunidad_name=COMUNIDAD_NAMES[comunidad],
            confidence=confidence,
            resolution_method=method,
        )
