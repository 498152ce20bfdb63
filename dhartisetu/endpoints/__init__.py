"""
Endpoint groups, one per backend service area.

Modules:
    location       — Reverse geocoding, state and subdivision lists
    plant_disease  — Leaf image disease detection
    soil           — Soil type detection and health assessment
    crop           — Crop recommendation and crop list
    weather        — Flood, storm, rainfall, AQI and CO2 predictions
    market         — Yield, price and profit predictions, season list
    water          — Irrigation water requirement
"""

from dhartisetu.endpoints.crop import CropAPI
from dhartisetu.endpoints.location import LocationAPI
from dhartisetu.endpoints.market import MarketAPI
from dhartisetu.endpoints.plant_disease import PlantDiseaseAPI
from dhartisetu.endpoints.soil import SoilAPI
from dhartisetu.endpoints.water import WaterAPI
from dhartisetu.endpoints.weather import WeatherAPI

__all__ = [
    "CropAPI", "LocationAPI", "MarketAPI", "PlantDiseaseAPI",
    "SoilAPI", "WaterAPI", "WeatherAPI",
]
