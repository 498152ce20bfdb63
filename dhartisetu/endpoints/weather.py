"""
Weather and environment predictions: flood, storm, rainfall, air quality
and CO2. Each takes the backend's feature dict as-is.
"""

from typing import Dict, Union

from pydantic import BaseModel

from dhartisetu.endpoints.base import EndpointGroup, as_payload
from dhartisetu.gateway.policies import Endpoint

FLOOD = Endpoint("POST", "/flood/predict")
STORM = Endpoint("POST", "/storm/predict")
RAINFALL = Endpoint("POST", "/rainfall/predict")
AQI = Endpoint("POST", "/aqi/predict")
CO2 = Endpoint("POST", "/co2/predict")


class WeatherAPI(EndpointGroup):

    def predict_flood(self, data: Union[Dict, BaseModel]) -> Dict:
        return FLOOD.call(self.gateway, body=as_payload(data))

    def predict_storm(self, data: Union[Dict, BaseModel]) -> Dict:
        return STORM.call(self.gateway, body=as_payload(data))

    def predict_rainfall(self, data: Union[Dict, BaseModel]) -> Dict:
        return RAINFALL.call(self.gateway, body=as_payload(data))

    def predict_aqi(self, data: Union[Dict, BaseModel]) -> Dict:
        return AQI.call(self.gateway, body=as_payload(data))

    def predict_co2(self, data: Union[Dict, BaseModel]) -> Dict:
        return CO2.call(self.gateway, body=as_payload(data))
