from pydantic import BaseModel, Field
from typing import Optional, Dict, Union
from .units import DensityUnit

Number = Union[float, str]


class DimensionIn(BaseModel):
    value: Optional[Number] = None
    unit: Optional[str] = None


class DensityIn(BaseModel):
    value: float = Field(gt=0, allow_inf_nan=False)
    unit: DensityUnit = DensityUnit.LB_PER_YD3


class CalculationRequest(BaseModel):
    dimensions: Dict[str, DimensionIn] = {}
    quantity: Optional[Number] = 1
    density: Optional[DensityIn] = None


class SessionCreate(BaseModel):
    shape: str
    density: Optional[DensityIn] = None


class SessionUpdate(BaseModel):
    dimensions: Dict[str, DimensionIn] = {}
    quantity: Optional[Number] = None
