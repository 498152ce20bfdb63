"""
Location lookups: reverse geocoding and the state/subdivision lists used to
populate location pickers. All lookups degrade to empty defaults on failure.
"""

from typing import Dict

from dhartisetu.endpoints.base import EndpointGroup
from dhartisetu.gateway.policies import Endpoint, FallbackOnError

UNKNOWN_LOCATION = {"city": "Unknown", "district": "Unknown", "state": "Unknown"}

REVERSE_GEOCODE = Endpoint("POST", "/location/reverse", FallbackOnError(UNKNOWN_LOCATION))
STATES = Endpoint("GET", "/location/states", FallbackOnError({"states": []}))
SUBDIVISIONS = Endpoint("GET", "/location/subdivisions", FallbackOnError({"subdivisions": []}))


class LocationAPI(EndpointGroup):

    def reverse_geocode(self, latitude: float, longitude: float) -> Dict:
        """Resolve coordinates to city/district/state ('Unknown' on failure)."""
        return REVERSE_GEOCODE.call(
            self.gateway, body={"latitude": latitude, "longitude": longitude},
        )

    def get_states(self) -> Dict:
        return STATES.call(self.gateway)

    def get_subdivisions(self) -> Dict:
        """Meteorological subdivisions, used by the rainfall forms."""
        return SUBDIVISIONS.call(self.gateway)
