"""
Plant disease detection from leaf images.
"""

from typing import Any, Dict

from dhartisetu.endpoints.base import DEFAULT_LANGUAGE, EndpointGroup, upload
from dhartisetu.gateway.policies import Endpoint

DETECT = Endpoint("POST", "/plant-disease/detect", multipart=True)
DETECT_BASE64 = Endpoint("POST", "/plant-disease/detect-base64")


class PlantDiseaseAPI(EndpointGroup):

    def detect(self, file: Any, language: str = DEFAULT_LANGUAGE) -> Dict:
        """
        Upload a leaf image for disease detection.

        Args:
            file: Image path, bytes, binary file object or requests file tuple
            language: Language code for the returned advice (default 'en')

        Returns:
            Backend detection result, unchanged.

        Raises:
            APIError: If the backend call failed.
        """
        return upload(DETECT, self.gateway, file, language)

    def detect_base64(self, image_data: str, language: str = DEFAULT_LANGUAGE) -> Dict:
        """Same as detect(), for an image already encoded as base64 text."""
        return DETECT_BASE64.call(
            self.gateway, body={"image_data": image_data, "language": language},
        )
