from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings

from .units import DensityUnit


class Settings(BaseSettings):
    APP_NAME: str = "Precast Calculator"
    COMPANY_NAME: str = "Precast Concrete Products"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Density per shape — value + unit (lb_per_yd3 | lb_per_ft3 | kg_per_m3)
    # NOTE: these differ between shapes because the shop's old calculators
    # drifted apart. Confirm with the plant before changing them.
    PRISM_DENSITY: float = Field(4050.0, gt=0, allow_inf_nan=False)
    PRISM_DENSITY_UNIT: DensityUnit = DensityUnit.LB_PER_YD3
    CYLINDER_DENSITY: float = Field(2400.0, gt=0, allow_inf_nan=False)
    CYLINDER_DENSITY_UNIT: DensityUnit = DensityUnit.KG_PER_M3
    TUBE_DENSITY: float = Field(2400.0, gt=0, allow_inf_nan=False)
    TUBE_DENSITY_UNIT: DensityUnit = DensityUnit.KG_PER_M3
    WALL_ASSEMBLY_DENSITY: float = Field(4000.0, gt=0, allow_inf_nan=False)
    WALL_ASSEMBLY_DENSITY_UNIT: DensityUnit = DensityUnit.LB_PER_YD3

    # Bagged mix sizes for the "how many bags" readout
    BAG_SIZES_LBS: List[int] = [60, 80]

    # Open calculator sessions kept in memory; oldest are dropped past this
    MAX_SESSIONS: int = Field(500, gt=0)

    class Config:
        env_file = ".env"


settings = Settings()
