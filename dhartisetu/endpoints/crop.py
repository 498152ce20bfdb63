"""
Crop recommendation and the list of crops known to the yield model.
"""

from typing import Dict, Union

from pydantic import BaseModel

from dhartisetu.endpoints.base import EndpointGroup, as_payload
from dhartisetu.gateway.policies import Endpoint, FallbackOnError

RECOMMEND = Endpoint("POST", "/crop/recommend")
CROP_LIST = Endpoint("GET", "/yield/crops", FallbackOnError({"crops": []}))


class CropAPI(EndpointGroup):

    def recommend(self, data: Union[Dict, BaseModel]) -> Dict:
        """
        Recommend crops for the given soil and climate readings.

        Args:
            data: Dict or CropRecommendationRequest (N, P, K, temperature,
                humidity, ph, rainfall)

        Raises:
            APIError: If the backend call failed.
        """
        return RECOMMEND.call(self.gateway, body=as_payload(data))

    def get_crop_list(self) -> Dict:
        return CROP_LIST.call(self.gateway)
