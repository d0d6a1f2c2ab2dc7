"""
Reverse geocoding via the OpenCage API.

The resolver never raises: with no API key configured, or when the lookup
fails or finds nothing, it answers with placeholder country/region values.
"""

import logging
import httpx
from pydantic import ValidationError
from typing import Any, Dict, Optional, Sequence

from travel_lens.config.settings import GeocodingSettings
from travel_lens.schemas.analyze import LocationInfo

logger = logging.getLogger(__name__)

UNKNOWN_COUNTRY = "UnknownCountry"
UNKNOWN_REGION = "UnknownRegion"

REGION_KEYS = ("state", "region", "county")
CITY_KEYS = ("city", "town", "village", "municipality")


def placeholder_location() -> LocationInfo:
    return LocationInfo(country=UNKNOWN_COUNTRY, region=UNKNOWN_REGION)


def _first_present(components: Dict[str, Any], keys: Sequence[str]) -> Optional[str]:
    for key in keys:
        value = components.get(key)
        if value:
            return value
    return None


def first_result_components(data: Any) -> Optional[Dict[str, Any]]:
    """Address components of the first result, or None when the payload has none."""
    if not isinstance(data, dict):
        return None
    results = data.get("results")
    if not isinstance(results, list) or not results:
        return None
    first = results[0]
    if not isinstance(first, dict):
        return None
    components = first.get("components")
    if components is None:
        return {}
    return components if isinstance(components, dict) else None


def location_from_components(components: Dict[str, Any]) -> LocationInfo:
    """Map OpenCage address components onto country/region/city."""
    return LocationInfo(
        country=components.get("country") or UNKNOWN_COUNTRY,
        region=_first_present(components, REGION_KEYS) or UNKNOWN_REGION,
        city=_first_present(components, CITY_KEYS),
    )


class LocationResolver:
    """Resolves coordinates to a LocationInfo using OpenCage."""

    def __init__(
        self,
        settings: GeocodingSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.transport = transport

    @property
    def enabled(self) -> bool:
        return self.settings.enabled

    async def resolve(self, lat: float, lng: float) -> LocationInfo:
        """
        Resolve a coordinate pair to country, region and city.

        Args:
            lat: Latitude
            lng: Longitude

        Returns:
            LocationInfo; placeholder values when geocoding is disabled or fails
        """
        if not self.enabled:
            return placeholder_location()

        params = {
            "key": self.settings.api_key,
            "q": f"{lat},{lng}",
            "language": self.settings.language,
            "pretty": 0,
        }

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(self.settings.api_url, params=params)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"OpenCage returned {e.response.status_code} for ({lat}, {lng})")
            return placeholder_location()
        except httpx.HTTPError as e:
            logger.warning(f"OpenCage request failed for ({lat}, {lng}): {type(e).__name__}: {e}")
            return placeholder_location()
        except ValueError:
            logger.warning(f"OpenCage returned a non-JSON body for ({lat}, {lng})")
            return placeholder_location()

        components = first_result_components(data)
        if components is None:
            logger.info(f"No usable geocoding results for ({lat}, {lng})")
            return placeholder_location()

        try:
            location = location_from_components(components)
        except ValidationError as e:
            logger.warning(f"OpenCage components for ({lat}, {lng}) did not validate: {e.error_count()} errors")
            return placeholder_location()

        logger.debug(f"Resolved ({lat}, {lng}) to {location.country}/{location.region}/{location.city}")
        return location
