"""
Pydantic request bodies for endpoints whose input fields are fixed.
Endpoints also accept plain dicts.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CropRecommendationRequest(BaseModel):
    """Body for CropAPI.recommend."""
    N: float = Field(..., ge=0, le=500, description="Nitrogen content (kg/ha)")
    P: float = Field(..., ge=0, le=500, description="Phosphorous content (kg/ha)")
    K: float = Field(..., ge=0, le=500, description="Potassium content (kg/ha)")
    temperature: float = Field(..., ge=-10, le=60, description="Temperature (°C)")
    humidity: float = Field(..., ge=0, le=100, description="Relative humidity (%)")
    ph: float = Field(..., ge=0, le=14, description="pH value of soil")
    rainfall: float = Field(..., ge=0, le=5000, description="Rainfall (mm)")
    language: Optional[str] = Field(None, description="Language code for advice text")

    model_config = {"json_schema_extra": {
        "examples": [{
            "N": 90, "P": 42, "K": 43, "temperature": 20.87,
            "humidity": 82.0, "ph": 6.5, "rainfall": 202.9,
        }]
    }}
