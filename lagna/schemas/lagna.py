from pydantic import BaseModel, ConfigDict
from typing import Any, Optional, List

from ..services.models import BirthInput


class LagnaRequest(BaseModel):
    # Raw values pass straight through; the engine reports every problem at once.
    date: Optional[Any] = None  # YYYY-MM-DD
    time: Optional[Any] = None  # HH:MM or HH:MM:SS
    lat: Optional[Any] = None
    lon: Optional[Any] = None
    tz: Optional[Any] = None  # UTC offset in hours, e.g. 5.5

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"date": "1990-05-21", "time": "14:35", "lat": 12.97, "lon": 77.59, "tz": 5.5}
        }
    )

    def to_birth_input(self) -> BirthInput:
        return BirthInput(
            civil_date=self.date,
            civil_time=self.time,
            latitude_deg=self.lat,
            longitude_deg=self.lon,
            utc_offset_hours=self.tz,
        )

class AnglesOut(BaseModel):
    ascendant: Optional[float] = None
    mc: Optional[float] = None
    ic: Optional[float] = None
    degenerate: bool = False
    unavailable: Optional[str] = None

class PlanetOut(BaseModel):
    name: str
    longitude: Optional[float] = None
    position: Optional[str] = None  # e.g. "Taurus 20°30′00″"
    sign: Optional[str] = None
    note: Optional[str] = None

class HouseOut(BaseModel):
    number: int
    sign: Optional[str] = None
    planets: List[str] = []
    angles: List[str] = []

class MetaOut(BaseModel):
    engine: str = "lagna"
    engine_version: str
    backend: str
    house_system: str = "whole_sign"
    zodiac: str = "tropical"
    warnings: Optional[List[str]] = None

class LagnaResponse(BaseModel):
    ascendant: Optional[str] = None
    angles: AnglesOut
    planets: List[PlanetOut]
    houses: List[HouseOut]
    computed_at_utc: str
    meta: MetaOut

class ReadingResponse(BaseModel):
    reading: str
    lagnaData: LagnaResponse
