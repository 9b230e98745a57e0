"""
Solid cylinder calculator — holes, columns, round footings.

V = π × (D/2)² × H × qty
"""

import math

from ..units import Unit
from .base import BaseCalculator, DimensionField


class CylinderCalculator(BaseCalculator):

    SHAPE = "cylinder"
    TITLE = "Concrete Calculator - Holes, Columns, or Round Footings"
    DIMENSIONS = (
        DimensionField("diameter", "Diameter", default_unit=Unit.FEET),
        DimensionField("height", "Depth or Height"),
    )
    DENSITY_SETTING = "CYLINDER"

    def calculate(self, fields: dict) -> dict:
        dims = self.dimensions_in_feet(fields)
        quantity = self.parse_quantity(fields.get("quantity"))

        radius_ft = dims["diameter"] / 2.0
        volume_ft3 = math.pi * radius_ft ** 2 * dims["height"] * quantity

        return self.make_result(quantity, dims, volume_ft3)
