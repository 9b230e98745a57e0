from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import calculators

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)-8s] %(name)s - %(message)s",
)
logger = logging.getLogger("precast")

app = FastAPI(
    title=settings.APP_NAME,
    description="Volume and weight calculators for precast concrete shapes",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculators.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "precast-calculator"}


@app.on_event("startup")
def log_densities():
    """Log the configured densities so drift between shapes is visible."""
    from .calculators.registry import get_calculator, list_calculators
    for shape in list_calculators():
        density = get_calculator(shape).density
        logger.info("%s density: %s %s (%.2f lb/ft³)", shape, density.value,
                    density.as_dict()["unit"], density.lbs_per_cubic_foot)
