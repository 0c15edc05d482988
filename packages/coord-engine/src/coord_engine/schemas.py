from pydantic import BaseModel, Field

from coord_engine.models import CoordinateSystem


class CoordinateIn(BaseModel):
    lng: float = Field(ge=-180, le=180, allow_inf_nan=False)
    lat: float = Field(ge=-90, le=90, allow_inf_nan=False)


class ConversionRequest(BaseModel):
    source: CoordinateSystem
    target: CoordinateSystem
    points: list[CoordinateIn] = Field(min_length=1)


class CoordinateOut(BaseModel):
    lng: float
    lat: float
    in_china: bool


class ConversionResult(BaseModel):
    source: CoordinateSystem
    target: CoordinateSystem
    points: list[CoordinateOut]
