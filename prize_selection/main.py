import logging

from fastapi import FastAPI

from prize_selection.config import (
    API_TITLE,
    API_VERSION,
    LOG_LEVEL,
    MAX_SELECTION_COUNT,
    TRIALS,
)
from prize_selection.routes import selection, success, tables

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title=API_TITLE,
    description="Weighted prize tables, multi-domain prize selection and Monte Carlo success estimates.",
    version=API_VERSION,
)

app.include_router(tables.router)
app.include_router(selection.router)
app.include_router(success.router)

# ============================================================
# HEALTH CHECK
# ============================================================

@app.get("/health", tags=["Health"], response_model=dict)
def health_check():
    return {"status": "ok"}


# ============================================================
# METADATA
# ============================================================

@app.get(
    "/info",
    tags=["Metadata"],
    summary="API info + simulation limits",
    response_model=dict
)
def info():
    return {
        "name": API_TITLE,
        "version": API_VERSION,
        "trials_per_success_calculation": TRIALS,
        "max_selection_count": MAX_SELECTION_COUNT,
    }


logger.info("%s %s ready", API_TITLE, API_VERSION)
