# Length, volume and weight conversions for the concrete calculators.
# Canonical length unit is feet; every formula runs on feet.

import enum
import math
from dataclasses import dataclass

from .exceptions import InvalidInputError


class Unit(str, enum.Enum):
    INCHES = "inches"
    FEET = "feet"
    YARDS = "yards"
    METERS = "meters"
    CENTIMETERS = "centimeters"


class DensityUnit(str, enum.Enum):
    LB_PER_YD3 = "lb_per_yd3"
    LB_PER_FT3 = "lb_per_ft3"
    KG_PER_M3 = "kg_per_m3"


# Factor to feet — a unit without an entry here is not usable
LENGTH_TO_FEET = {
    Unit.INCHES: 1 / 12.0,
    Unit.FEET: 1.0,
    Unit.YARDS: 3.0,
    Unit.METERS: 1 / 0.3048,
    Unit.CENTIMETERS: 1 / 30.48,
}

# Factor to meters (the round/tube calculators on the shop floor think in metric)
LENGTH_TO_METERS = {
    Unit.INCHES: 0.0254,
    Unit.FEET: 0.3048,
    Unit.YARDS: 0.9144,
    Unit.METERS: 1.0,
    Unit.CENTIMETERS: 0.01,
}

# What people actually type into the unit box
UNIT_ALIASES = {
    "in": Unit.INCHES,
    "inch": Unit.INCHES,
    '"': Unit.INCHES,
    "ft": Unit.FEET,
    "foot": Unit.FEET,
    "'": Unit.FEET,
    "yd": Unit.YARDS,
    "yard": Unit.YARDS,
    "m": Unit.METERS,
    "meter": Unit.METERS,
    "metre": Unit.METERS,
    "metres": Unit.METERS,
    "cm": Unit.CENTIMETERS,
    "centimeter": Unit.CENTIMETERS,
}

CUBIC_FEET_PER_CUBIC_YARD = 27.0
CUBIC_METERS_PER_CUBIC_FOOT = 0.0283168
LBS_TO_KG = 0.453592
KG_TO_LBS = 2.20462
LBS_PER_TON = 2000.0


def parse_unit(value) -> Unit:
    """
    Resolve a unit from an enum member, its value, or a common alias.
    Raises ValueError for anything without a conversion factor.
    """
    if isinstance(value, Unit):
        return value
    key = str(value).strip().lower()
    try:
        return Unit(key)
    except ValueError:
        pass
    if key in UNIT_ALIASES:
        return UNIT_ALIASES[key]
    raise ValueError(f"Unsupported unit: {value!r}. Available: {[u.value for u in Unit]}")


def to_feet(value: float, unit) -> float:
    """Convert a length to feet."""
    return value * LENGTH_TO_FEET[parse_unit(unit)]


def from_feet(value_ft: float, unit) -> float:
    """Convert a length in feet back to the given unit."""
    return value_ft / LENGTH_TO_FEET[parse_unit(unit)]


def to_meters(value: float, unit) -> float:
    """Convert a length to meters."""
    return value * LENGTH_TO_METERS[parse_unit(unit)]


def convert_length(value: float, from_unit, to_unit) -> float:
    """Convert a length between any two supported units (via feet)."""
    return from_feet(to_feet(value, from_unit), to_unit)


# Canonical unit for every calculator in this package
to_canonical = to_feet


def cubic_feet_to_yards(volume_ft3: float) -> float:
    return volume_ft3 / CUBIC_FEET_PER_CUBIC_YARD


def cubic_feet_to_meters(volume_ft3: float) -> float:
    return volume_ft3 * CUBIC_METERS_PER_CUBIC_FOOT


def volume_breakdown(volume_ft3: float) -> dict:
    """Express one volume in every unit the calculators report."""
    return {
        "cubic_feet": volume_ft3,
        "cubic_yards": cubic_feet_to_yards(volume_ft3),
        "cubic_meters": cubic_feet_to_meters(volume_ft3),
    }


def weight_breakdown(weight_lbs: float) -> dict:
    """Express one weight in pounds, kilograms and short tons."""
    return {
        "lbs": weight_lbs,
        "kg": weight_lbs * LBS_TO_KG,
        "tons": weight_lbs / LBS_PER_TON,
    }


@dataclass(frozen=True)
class Density:
    """Weight per volume, kept in the unit it was quoted in."""

    value: float
    unit: DensityUnit = DensityUnit.LB_PER_YD3

    def __post_init__(self):
        if (isinstance(self.value, bool) or not isinstance(self.value, (int, float))
                or not math.isfinite(self.value) or self.value <= 0):
            raise InvalidInputError("density", "density must be a positive number", self.value)
        try:
            DensityUnit(self.unit)
        except ValueError:
            raise InvalidInputError("density", f"Unsupported density unit: {self.unit}", self.unit)

    def weight_lbs(self, volume_ft3: float) -> float:
        """
        Weight in lbs for a volume in cubic feet.
        Multiplies in the density's own unit so a lb/yd³ figure
        reproduces volume_yd3 × density exactly.
        """
        unit = DensityUnit(self.unit)
        if unit == DensityUnit.LB_PER_YD3:
            return cubic_feet_to_yards(volume_ft3) * self.value
        if unit == DensityUnit.LB_PER_FT3:
            return volume_ft3 * self.value
        return cubic_feet_to_meters(volume_ft3) * self.value * KG_TO_LBS

    @property
    def lbs_per_cubic_foot(self) -> float:
        return self.weight_lbs(1.0)

    def as_dict(self) -> dict:
        return {
            "value": self.value,
            "unit": DensityUnit(self.unit).value,
            "lbs_per_cubic_foot": self.lbs_per_cubic_foot,
        }


# Observed figures from the shop's calculators
DENSITY_PRESETS = {
    "precast_standard": Density(4050.0, DensityUnit.LB_PER_YD3),
    "wall_assembly": Density(4000.0, DensityUnit.LB_PER_YD3),
    "metric_standard": Density(2400.0, DensityUnit.KG_PER_M3),
    "generic": Density(150.0, DensityUnit.LB_PER_FT3),
    "bagged_mix": Density(133.0, DensityUnit.LB_PER_FT3),
}
