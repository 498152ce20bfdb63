"""
Irrigation water requirement calculation.
"""

from typing import Dict, Union

from pydantic import BaseModel

from dhartisetu.endpoints.base import EndpointGroup, as_payload
from dhartisetu.gateway.policies import Endpoint

CALCULATE_REQUIREMENT = Endpoint("POST", "/water/calculate")


class WaterAPI(EndpointGroup):

    def calculate_requirement(self, data: Union[Dict, BaseModel]) -> Dict:
        return CALCULATE_REQUIREMENT.call(self.gateway, body=as_payload(data))
