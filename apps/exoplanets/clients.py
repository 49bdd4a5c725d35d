import http.client
import json
import logging
import urllib.request
from dataclasses import dataclass

from django.conf import settings

from apps.common.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT = 10  # seconds
READ_TIMEOUT = 60  # seconds, the archive aggregates the whole table per request


@dataclass(frozen=True)
class ExternalExoplanet:
    """One row of the archive query, averaged per planet name."""

    name: str
    radius: float | None = None
    mass: float | None = None
    distance: float | None = None
    orbital_period_days: float | None = None
    temperature: float | None = None

    @classmethod
    def from_row(cls, row: dict) -> "ExternalExoplanet":
        return cls(
            name=row["pl_name"],
            radius=_to_float(row.get("avg_rade")),
            mass=_to_float(row.get("avg_mass")),
            distance=_to_float(row.get("avg_dist")),
            orbital_period_days=_to_float(row.get("avg_period")),
            temperature=_to_float(row.get("avg_temp")),
        )


def _to_float(value):
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class ExternalExoplanetClient:
    """Reads averaged planet parameters from the NASA Exoplanet Archive TAP service."""

    def __init__(self, url: str | None = None, timeout: float = CONNECT_TIMEOUT + READ_TIMEOUT):
        self.url = url or settings.EXOPLANET_ARCHIVE_URL
        self.timeout = timeout

    def fetch_exoplanet_data(self) -> list[ExternalExoplanet]:
        logger.info("Fetching exoplanet data from external API")
        request = urllib.request.Request(self.url, headers={"Accept": "application/json"})
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as resp:  # noqa: S310 - configured archive URL
                rows = json.loads(resp.read())
        except (OSError, http.client.HTTPException) as err:
            logger.error("Error fetching exoplanet data: %s", err)
            raise ExternalServiceError() from err
        except (json.JSONDecodeError, UnicodeDecodeError) as err:
            logger.error("Exoplanet archive returned invalid JSON: %s", err)
            raise ExternalServiceError() from err

        if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
            logger.error("Exoplanet archive returned an unexpected payload: %.200s", rows)
            raise ExternalServiceError()

        exoplanets = [ExternalExoplanet.from_row(row) for row in rows if row.get("pl_name")]
        logger.info("Successfully fetched %s exoplanets", len(exoplanets))
        return exoplanets
