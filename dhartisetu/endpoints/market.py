"""
Market and finance: yield, price and profit predictions, plus the season
list used by the yield form.
"""

from typing import Dict, Union

from pydantic import BaseModel

from dhartisetu.endpoints.base import EndpointGroup, as_payload
from dhartisetu.gateway.policies import Endpoint, FallbackOnError

PREDICT_YIELD = Endpoint("POST", "/yield/predict")
SEASONS = Endpoint("GET", "/yield/seasons", FallbackOnError({"seasons": []}))
PREDICT_PRICE = Endpoint("POST", "/price/predict")
CALCULATE_PROFIT = Endpoint("POST", "/profit/calculate")


class MarketAPI(EndpointGroup):

    def predict_yield(self, data: Union[Dict, BaseModel]) -> Dict:
        return PREDICT_YIELD.call(self.gateway, body=as_payload(data))

    def get_seasons(self) -> Dict:
        """Cropping seasons (kharif, rabi, ...); empty list on failure."""
        return SEASONS.call(self.gateway)

    def predict_price(self, data: Union[Dict, BaseModel]) -> Dict:
        return PREDICT_PRICE.call(self.gateway, body=as_payload(data))

    def calculate_profit(self, data: Union[Dict, BaseModel]) -> Dict:
        return CALCULATE_PROFIT.call(self.gateway, body=as_payload(data))
