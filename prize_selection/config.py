import os

API_TITLE = "Prize Selection API"
API_VERSION = "1.0.0"
API_PREFIX = "/api/v1"

LOG_LEVEL = os.environ.get("PRIZE_SELECTION_LOG_LEVEL", "INFO").upper()

# Monte Carlo trials per success calculation. Fixed so callers can't DOS the server.
TRIALS = 10_000

# Ceiling on repeated selections accepted from callers
MAX_SELECTION_COUNT = 100

MULTI_CATEGORY = "Multi-Category"
UNNAMED_PRIZE_PREFIX = "Unnamed"

# Final lower bound closer to 0 than this is float drift, snapped to exactly 0
ZERO_SNAP_TOLERANCE = 1e-10
