"""
Abstract base class for all shape calculators.

Input: fields dict — {dimension_name: {"value": ..., "unit": ...}, "quantity": ...}
Output: CalculationResult dict (volume + weight in every reported unit)
"""

import logging
import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..config import settings
from ..exceptions import InvalidInputError
from ..units import (
    Density,
    DensityUnit,
    Unit,
    parse_unit,
    to_feet,
    volume_breakdown,
    weight_breakdown,
)

logger = logging.getLogger(__name__)

# 1,200 or 12,500.75 — any other comma (1,5) is not a number
THOUSANDS_RE = re.compile(r"^\d{1,3}(,\d{3})+(\.\d+)?$")


@dataclass(frozen=True)
class DimensionField:
    """One named linear input on a calculator form."""

    name: str
    label: str
    default_unit: Unit = Unit.INCHES
    required: bool = True


class BaseCalculator(ABC):
    """All shape calculators inherit from this."""

    SHAPE = ""
    TITLE = ""
    DIMENSIONS: tuple = ()
    # Prefix of the *_DENSITY / *_DENSITY_UNIT pair in Settings
    DENSITY_SETTING = ""

    def __init__(self, density: Density = None, bag_sizes_lbs: list = None):
        self.density = density or self.default_density()
        self.bag_sizes_lbs = list(bag_sizes_lbs if bag_sizes_lbs is not None
                                  else settings.BAG_SIZES_LBS)

    @abstractmethod
    def calculate(self, fields: dict) -> dict:
        """
        Takes the dimension fields from the calculator form.
        Returns a CalculationResult dict, or raises InvalidInputError.
        """
        pass

    @classmethod
    def default_density(cls) -> Density:
        """Configured density for this shape."""
        value = getattr(settings, f"{cls.DENSITY_SETTING}_DENSITY")
        unit = getattr(settings, f"{cls.DENSITY_SETTING}_DENSITY_UNIT")
        return Density(float(value), DensityUnit(unit))

    @classmethod
    def field_names(cls) -> list:
        return [f.name for f in cls.DIMENSIONS]

    @classmethod
    def get_field(cls, name: str) -> DimensionField:
        for f in cls.DIMENSIONS:
            if f.name == name:
                return f
        raise InvalidInputError(
            name, f"Unknown field for {cls.SHAPE}: {name}. Available: {cls.field_names()}")

    @classmethod
    def describe(cls) -> dict:
        """Form description for the front end — fields, default units, density."""
        return {
            "shape": cls.SHAPE,
            "title": cls.TITLE,
            "fields": [
                {
                    "name": f.name,
                    "label": f.label,
                    "default_unit": f.default_unit.value,
                    "required": f.required,
                }
                for f in cls.DIMENSIONS
            ],
            "density": cls.default_density().as_dict(),
        }

    # --- Input parsing ---

    def parse_number(self, field: str, value) -> float:
        """
        Parse a non-negative number from user input ('12', '1,200', 3.5).
        Blank, non-numeric, NaN/inf and negative values are invalid.
        """
        if value is None or isinstance(value, bool):
            raise InvalidInputError(field, f"{field} is required", value)
        try:
            text = str(value).strip()
            if "," in text:
                if not THOUSANDS_RE.match(text):
                    raise ValueError(text)
                text = text.replace(",", "")
            number = float(text)
        except (ValueError, TypeError):
            raise InvalidInputError(field, f"{field} must be a number", value)
        if not math.isfinite(number):
            raise InvalidInputError(field, f"{field} must be a finite number", value)
        if number < 0:
            raise InvalidInputError(field, f"{field} cannot be negative", value)
        return number

    def parse_quantity(self, value, default: int = 1) -> int:
        """Parse the piece count. Must be a whole number of at least 1."""
        if value is None:
            return default
        number = self.parse_number("quantity", value)
        if number != int(number) or number < 1:
            raise InvalidInputError("quantity", "quantity must be a whole number of at least 1", value)
        return int(number)

    def parse_dimension(self, fields: dict, dim: DimensionField) -> float:
        """
        Read one {"value", "unit"} pair from fields and return it in feet.
        Optional fields that are absent count as zero.
        """
        raw = fields.get(dim.name)
        if raw is None:
            if dim.required:
                raise InvalidInputError(dim.name, f"{dim.label} is required")
            return 0.0

        if isinstance(raw, dict):
            value = raw.get("value")
            unit = raw.get("unit") or dim.default_unit
        elif isinstance(raw, (list, tuple)) and len(raw) == 2:
            value, unit = raw
        else:
            value, unit = raw, dim.default_unit

        number = self.parse_number(dim.name, value)
        try:
            resolved = parse_unit(unit)
        except ValueError:
            raise InvalidInputError(dim.name, f"Unsupported unit for {dim.label}: {unit}", unit)
        return to_feet(number, resolved)

    def dimensions_in_feet(self, fields: dict) -> dict:
        """Every declared dimension converted to feet."""
        return {dim.name: self.parse_dimension(fields, dim) for dim in self.DIMENSIONS}

    # --- Result builders ---

    def weight_lbs(self, volume_ft3: float) -> float:
        return self.density.weight_lbs(volume_ft3)

    def bag_counts(self, weight_lbs: float) -> dict:
        """Bags of pre-mix needed — unrounded, rounding is for display."""
        return {f"{size}_lb": weight_lbs / size for size in self.bag_sizes_lbs if size > 0}

    def make_component(self, name: str, volume_ft3: float) -> dict:
        """One piece of an assembly (base, walls, lid) with its own weight."""
        return {
            "name": name,
            "volume": volume_breakdown(volume_ft3),
            "weight": weight_breakdown(self.weight_lbs(volume_ft3)),
        }

    def make_result(self, quantity: int, dimensions_ft: dict, volume_ft3: float,
                    assumptions: list = None, components: list = None) -> dict:
        """Build the CalculationResult dict."""
        weight_lbs = self.weight_lbs(volume_ft3)
        logger.debug("%s: %.4f ft³ × %d → %.2f lbs", self.SHAPE, volume_ft3, quantity, weight_lbs)
        return {
            "shape": self.SHAPE,
            "quantity": quantity,
            "dimensions_ft": dimensions_ft,
            "volume": volume_breakdown(volume_ft3),
            "weight": weight_breakdown(weight_lbs),
            "density": self.density.as_dict(),
            "bags": self.bag_counts(weight_lbs),
            "components": components or [],
            "assumptions": assumptions or [],
        }
