"""
Base and wall calculator — precast box: base slab + four walls + lid.

Base:  (L + 2·ext) × (W + 2·ext) × base_thickness × qty
Walls: 4 × W × wall_thickness × (h1 + h2 + h3) × qty
Lid:   L × W × lid_thickness × qty

The wall term uses width for all four walls and sums the three heights.
That is how the plant has always quoted these boxes; it has not been
confirmed as the intended geometry (long walls would normally use length).
"""

from ..units import DensityUnit
from .base import BaseCalculator, DimensionField


class WallAssemblyCalculator(BaseCalculator):

    SHAPE = "wall_assembly"
    TITLE = "Base and Wall Calculator"
    DIMENSIONS = (
        DimensionField("length", "Length"),
        DimensionField("width", "Width"),
        DimensionField("wall_height_1", "Wall Height 1"),
        DimensionField("wall_height_2", "Wall Height 2", required=False),
        DimensionField("wall_height_3", "Wall Height 3", required=False),
        DimensionField("base_thickness", "Base Thickness"),
        DimensionField("base_extension", "Base Extended"),
        DimensionField("wall_thickness", "Wall Thickness"),
        DimensionField("lid_thickness", "Lid Thickness"),
    )
    DENSITY_SETTING = "WALL_ASSEMBLY"
    WALL_COUNT = 4

    def calculate(self, fields: dict) -> dict:
        dims = self.dimensions_in_feet(fields)
        quantity = self.parse_quantity(fields.get("quantity"))

        length = dims["length"]
        width = dims["width"]
        ext = dims["base_extension"]
        total_wall_height = dims["wall_height_1"] + dims["wall_height_2"] + dims["wall_height_3"]

        base_ft3 = (length + 2 * ext) * (width + 2 * ext) * dims["base_thickness"] * quantity
        walls_ft3 = self.WALL_COUNT * width * dims["wall_thickness"] * total_wall_height * quantity
        lid_ft3 = length * width * dims["lid_thickness"] * quantity

        components = [
            self.make_component("base", base_ft3),
            self.make_component("walls", walls_ft3),
            self.make_component("lid", lid_ft3),
        ]

        assumptions = [
            "Wall volume uses width for all %d walls across the summed wall heights." % self.WALL_COUNT,
        ]
        if DensityUnit(self.density.unit) == DensityUnit.LB_PER_YD3:
            assumptions.append("Weight at %.0f lbs per cubic yard." % self.density.value)

        return self.make_result(
            quantity,
            dims,
            base_ft3 + walls_ft3 + lid_ft3,
            assumptions=assumptions,
            components=components,
        )
