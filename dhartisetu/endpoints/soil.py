"""
Soil type detection from photos and soil health assessment from lab values.
"""

from typing import Any, Dict, Union

from pydantic import BaseModel

from dhartisetu.endpoints.base import DEFAULT_LANGUAGE, EndpointGroup, as_payload, upload
from dhartisetu.gateway.policies import Endpoint

DETECT_TYPE = Endpoint("POST", "/soil/detect", multipart=True)
ASSESS_HEALTH = Endpoint("POST", "/soil-health/assess")


class SoilAPI(EndpointGroup):

    def detect_type(self, file: Any, language: str = DEFAULT_LANGUAGE) -> Dict:
        """Upload a soil photo; raises APIError on failure."""
        return upload(DETECT_TYPE, self.gateway, file, language)

    def assess_health(self, data: Union[Dict, BaseModel]) -> Dict:
        return ASSESS_HEALTH.call(self.gateway, body=as_payload(data))
