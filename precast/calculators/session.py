"""
Calculator session — the life of one open calculator form.

    empty ──edit──▶ editing ──calculate──▶ computed
                      ▲                       │
                      └─────────edit──────────┘

Any edit clears the result. Nothing is recomputed until calculate().
Invalid input leaves the result unset and is kept on `error`.
"""

import logging

from ..exceptions import InvalidInputError
from ..units import Density, parse_unit
from .registry import get_calculator

logger = logging.getLogger(__name__)

EMPTY = "empty"
EDITING = "editing"
COMPUTED = "computed"

DEFAULT_QUANTITY = 1


class CalculatorSession:

    def __init__(self, shape, density: Density = None):
        self.calculator = get_calculator(shape, density=density)
        self.shape = self.calculator.SHAPE
        self._reset()

    def _reset(self):
        self.dimensions = {
            f.name: {"value": 0, "unit": f.default_unit.value}
            for f in self.calculator.DIMENSIONS
        }
        self.quantity = DEFAULT_QUANTITY
        self.result = None
        self.error = None
        self.state = EMPTY

    def _edited(self):
        self.result = None
        self.error = None
        self.state = EDITING

    def _check_edit(self, name: str, unit=None):
        """Unknown field or unit raises before anything changes. Returns the resolved unit."""
        field = self.calculator.get_field(name)
        if unit is None:
            return None
        try:
            return parse_unit(unit).value
        except ValueError:
            raise InvalidInputError(name, f"Unsupported unit for {field.label}: {unit}", unit)

    def set_dimension(self, name: str, value=None, unit=None):
        """Replace the value and/or unit of one dimension."""
        unit = self._check_edit(name, unit)
        current = self.dimensions[name]
        self.dimensions[name] = {
            "value": current["value"] if value is None else value,
            "unit": current["unit"] if unit is None else unit,
        }
        self._edited()

    def set_quantity(self, value):
        self.quantity = value
        self._edited()

    def update(self, dimensions: dict = None, quantity=None):
        """
        Apply several edits at once (one form submit).
        Every edit is checked first; a bad one leaves the session untouched.
        """
        edits = []
        for name, change in (dimensions or {}).items():
            if isinstance(change, dict):
                value, unit = change.get("value"), change.get("unit")
            else:
                value, unit = change, None
            edits.append((name, value, self._check_edit(name, unit)))
        for name, value, unit in edits:
            self.set_dimension(name, value, unit)
        if quantity is not None:
            self.set_quantity(quantity)

    def fields(self) -> dict:
        fields = {name: dict(dim) for name, dim in self.dimensions.items()}
        fields["quantity"] = self.quantity
        return fields

    def calculate(self):
        """Compute the result. Returns it, or None when the input is invalid."""
        try:
            result = self.calculator.calculate(self.fields())
        except InvalidInputError as e:
            logger.info("%s calculation skipped: %s", self.shape, e.message)
            self.result = None
            self.error = e
            return None
        self.result = result
        self.error = None
        self.state = COMPUTED
        return result

    def clear(self):
        """Back to the defaults, as if the form was just opened."""
        self._reset()

    def snapshot(self) -> dict:
        return {
            "shape": self.shape,
            "state": self.state,
            "fields": self.fields(),
            "result": self.result,
            "error": None if self.error is None else {
                "field": self.error.field,
                "message": self.error.message,
            },
        }
