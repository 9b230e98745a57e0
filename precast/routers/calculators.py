"""
Calculator API — volume and weight for precast shapes.

GET    /api/calculators                          — shapes, their fields and densities
GET    /api/calculators/units                    — supported length units
POST   /api/calculators/{shape}/calculate        — one-shot calculation
POST   /api/calculators/sessions                 — open a calculator form
GET    /api/calculators/sessions/{id}            — current state of a form
PATCH  /api/calculators/sessions/{id}            — edit dimensions/quantity (clears result)
POST   /api/calculators/sessions/{id}/calculate  — compute
POST   /api/calculators/sessions/{id}/clear      — reset to defaults
DELETE /api/calculators/sessions/{id}            — close the form
"""

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..config import settings
from ..calculators.registry import get_calculator, has_calculator, list_calculators
from ..calculators.session import CalculatorSession
from ..exceptions import InvalidInputError
from ..units import Density, Unit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculators", tags=["calculators"])

# Open calculator forms — in process only, gone on restart.
# Capped at settings.MAX_SESSIONS; the oldest form is dropped first.
sessions: dict[str, CalculatorSession] = {}


def _density(density: Optional[schemas.DensityIn]) -> Optional[Density]:
    if density is None:
        return None
    try:
        return Density(density.value, density.unit)
    except InvalidInputError as e:
        raise _invalid(e)


def _invalid(e: InvalidInputError) -> HTTPException:
    return HTTPException(status_code=422, detail={"field": e.field, "message": e.message})


def _get_session(session_id: str) -> CalculatorSession:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Calculator session not found")
    return session


def _session_response(session_id: str, session: CalculatorSession) -> dict:
    return {"session_id": session_id, **session.snapshot()}


@router.get("")
def list_shapes():
    return {"calculators": [get_calculator(shape).describe() for shape in list_calculators()]}


@router.get("/units")
def list_units():
    return {"units": [u.value for u in Unit]}


@router.post("/sessions")
def create_session(request: schemas.SessionCreate):
    if not has_calculator(request.shape):
        raise HTTPException(status_code=404, detail=f"Unknown shape: {request.shape}")
    density = _density(request.density)
    while len(sessions) >= settings.MAX_SESSIONS:
        oldest = next(iter(sessions))
        del sessions[oldest]
        logger.info("Dropped calculator session %s (limit %d)", oldest, settings.MAX_SESSIONS)
    session_id = str(uuid.uuid4())
    sessions[session_id] = CalculatorSession(request.shape, density=density)
    logger.info("Opened %s calculator session %s", request.shape, session_id)
    return _session_response(session_id, sessions[session_id])


@router.get("/sessions/{session_id}")
def get_session(session_id: str):
    return _session_response(session_id, _get_session(session_id))


@router.patch("/sessions/{session_id}")
def update_session(session_id: str, request: schemas.SessionUpdate):
    session = _get_session(session_id)
    dimensions = {name: dim.model_dump(exclude_none=True) for name, dim in request.dimensions.items()}
    try:
        session.update(dimensions=dimensions, quantity=request.quantity)
    except InvalidInputError as e:
        raise _invalid(e)
    return _session_response(session_id, session)


@router.post("/sessions/{session_id}/calculate")
def calculate_session(session_id: str):
    session = _get_session(session_id)
    session.calculate()
    return _session_response(session_id, session)


@router.post("/sessions/{session_id}/clear")
def clear_session(session_id: str):
    session = _get_session(session_id)
    session.clear()
    return _session_response(session_id, session)


@router.delete("/sessions/{session_id}")
def close_session(session_id: str):
    _get_session(session_id)
    del sessions[session_id]
    return {"ok": True}


@router.post("/{shape}/calculate")
def calculate(shape: str, request: schemas.CalculationRequest):
    """
    Run one calculation without opening a session.

    Returns: CalculationResult dict. 404 for an unknown shape,
    422 when a dimension or the quantity can't be used.
    """
    if not has_calculator(shape):
        raise HTTPException(status_code=404, detail=f"Unknown shape: {shape}")
    calculator = get_calculator(shape, density=_density(request.density))

    fields = {name: dim.model_dump() for name, dim in request.dimensions.items()}
    fields["quantity"] = request.quantity
    try:
        return calculator.calculate(fields)
    except InvalidInputError as e:
        raise _invalid(e)
