"""Weight and coefficient constants for the EcoIndex formulas.

The composite index weighs DOM size, request count, and transferred size
3:2:1. Derived estimates are linear in the index and pivot on index 50.
"""

# ---------------------------------------------------------------------------
# Composite index
# ---------------------------------------------------------------------------
DOM_WEIGHT = 3
REQUESTS_WEIGHT = 2
SIZE_WEIGHT = 1
TOTAL_WEIGHT = DOM_WEIGHT + REQUESTS_WEIGHT + SIZE_WEIGHT

INDEX_MAX = 100
QUANTILE_STEP = 5  # index points per quantile position

# ---------------------------------------------------------------------------
# Derived estimates
# ---------------------------------------------------------------------------
INDEX_PIVOT = 50
GHG_BASE_GCO2E = 2    # gCO2e at index 50
WATER_BASE_CL = 3     # cl at index 50
