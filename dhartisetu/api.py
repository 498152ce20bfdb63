"""
DhartiSetuClient: one gateway shared by all seven endpoint groups.

    client = DhartiSetuClient()          # reads DHARTISETU_API_URL
    result = client.plant_disease.detect("leaf.jpg", language="hi")
    states = client.location.get_states()
"""

import logging
import threading
from typing import Optional

import requests

from dhartisetu.config import Settings, load_settings
from dhartisetu.endpoints import (
    CropAPI, LocationAPI, MarketAPI, PlantDiseaseAPI, SoilAPI, WaterAPI, WeatherAPI,
)
from dhartisetu.gateway.client import RequestGateway

logger = logging.getLogger(__name__)


class DhartiSetuClient:
    """
    Entry point exposing every endpoint group.

    Args:
        settings: Client settings (default: loaded from the environment)
        session: requests.Session to use for all calls (default: new session)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ):
        if settings is None:
            settings = load_settings()
        self.gateway = RequestGateway(settings, session=session)

        self.location = LocationAPI(self.gateway)
        self.plant_disease = PlantDiseaseAPI(self.gateway)
        self.soil = SoilAPI(self.gateway)
        self.crop = CropAPI(self.gateway)
        self.weather = WeatherAPI(self.gateway)
        self.market = MarketAPI(self.gateway)
        self.water = WaterAPI(self.gateway)

    @property
    def settings(self) -> Settings:
        return self.gateway.settings

    def close(self) -> None:
        self.gateway.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


_client: Optional[DhartiSetuClient] = None
_client_lock = threading.Lock()


def get_client() -> DhartiSetuClient:
    """Process-wide client, built from the environment on first use."""
    global _client
    with _client_lock:
        if _client is None:
            _client = DhartiSetuClient()
            logger.info("Initialized DhartiSetu client for %s", _client.settings.base_url)
        return _client


def reset_client() -> None:
    """Close and drop the process-wide client."""
    global _client
    with _client_lock:
        if _client is not None:
            _client.close()
        _client = None
