"""
Annular tube calculator — circular slab or tube (hollow cylinder).

V = π × ((Do/2)² − (Di/2)²) × depth × qty

Inner diameter larger than outer is rejected; it would give negative concrete.
"""

import math

from ..exceptions import InvalidInputError
from .base import BaseCalculator, DimensionField


class TubeCalculator(BaseCalculator):

    SHAPE = "tube"
    TITLE = "Concrete Calculator - Circular Slab or Tube"
    DIMENSIONS = (
        DimensionField("outer_diameter", "Outer Diameter"),
        DimensionField("inner_diameter", "Inner Diameter"),
        DimensionField("depth", "Length or Height"),
    )
    DENSITY_SETTING = "TUBE"

    def calculate(self, fields: dict) -> dict:
        dims = self.dimensions_in_feet(fields)
        quantity = self.parse_quantity(fields.get("quantity"))

        outer_r = dims["outer_diameter"] / 2.0
        inner_r = dims["inner_diameter"] / 2.0
        if inner_r > outer_r:
            raise InvalidInputError(
                "inner_diameter",
                "Inner diameter cannot be larger than outer diameter",
                fields.get("inner_diameter"),
            )

        volume_ft3 = math.pi * (outer_r ** 2 - inner_r ** 2) * dims["depth"] * quantity

        return self.make_result(quantity, dims, volume_ft3)
