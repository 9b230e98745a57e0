"""
Rectangular prism calculator — slabs, square footings, walls.

V = L × W × H × qty
"""

from .base import BaseCalculator, DimensionField


class PrismCalculator(BaseCalculator):

    SHAPE = "prism"
    TITLE = "Concrete Calculator - Slabs, Square Footings, or Walls"
    DIMENSIONS = (
        DimensionField("length", "Length"),
        DimensionField("width", "Width"),
        DimensionField("height", "Height/Thickness"),
    )
    DENSITY_SETTING = "PRISM"

    def calculate(self, fields: dict) -> dict:
        dims = self.dimensions_in_feet(fields)
        quantity = self.parse_quantity(fields.get("quantity"))

        volume_ft3 = dims["length"] * dims["width"] * dims["height"] * quantity

        return self.make_result(quantity, dims, volume_ft3)
