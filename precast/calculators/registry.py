"""
Calculator registry — maps shape tags to calculator classes.

The front end used to pick a calculator component by string ("square",
"round", "tube"); those legacy tags are accepted as aliases.
"""

import enum

from ..units import Density
from .base import BaseCalculator
from .cylinder import CylinderCalculator
from .prism import PrismCalculator
from .tube import TubeCalculator
from .wall_assembly import WallAssemblyCalculator


class Shape(str, enum.Enum):
    PRISM = "prism"
    CYLINDER = "cylinder"
    TUBE = "tube"
    WALL_ASSEMBLY = "wall_assembly"


CALCULATOR_REGISTRY: dict[str, type] = {
    Shape.PRISM.value: PrismCalculator,
    Shape.CYLINDER.value: CylinderCalculator,
    Shape.TUBE.value: TubeCalculator,
    Shape.WALL_ASSEMBLY.value: WallAssemblyCalculator,
}

SHAPE_ALIASES = {
    "square": Shape.PRISM.value,
    "round": Shape.CYLINDER.value,
    "wall": Shape.WALL_ASSEMBLY.value,
}


def _resolve(shape) -> str:
    key = shape.value if isinstance(shape, Shape) else str(shape).strip().lower()
    return SHAPE_ALIASES.get(key, key)


def get_calculator(shape, density: Density = None) -> BaseCalculator:
    """Returns an instance of the calculator for a shape, or raises ValueError."""
    key = _resolve(shape)
    if key not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for shape: {shape}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[key](density=density)


def has_calculator(shape) -> bool:
    """Check if a calculator exists for a shape."""
    return _resolve(shape) in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered shapes."""
    return list(CALCULATOR_REGISTRY.keys())


def calculate(shape, fields: dict, density: Density = None) -> dict:
    """Single dispatch: run the calculator for `shape` on `fields`."""
    return get_calculator(shape, density=density).calculate(fields)
