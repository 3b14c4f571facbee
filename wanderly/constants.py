"""Application constants that never change across environments.

These are true constants representing physical facts, mathematical formulas,
or fixed business logic that should never vary between dev/staging/prod.
"""

# ===== Geographic Constants =====
EARTH_RADIUS_KM = 6371  # Earth's radius in kilometers (for Haversine formula)
KM_TO_MILES = 0.621371

# Straight-line travel time estimate, minutes per km
TRAVEL_MINUTES_PER_KM = {
    "driving": 2,  # ~30 km/h
    "walking": 10,  # ~6 km/h
    "transit": 3,  # ~20 km/h
}

# ===== Rating Limits =====
MIN_REVIEW_RATING = 1.0
MAX_REVIEW_RATING = 5.0

# ===== Planner pricing (base currency units) =====
# Planning estimate and checkout use different tables on purpose.
PLANNING_PRICE_TABLE = {
    "free": 0,
    "$": 200,
    "$$": 500,
    "$$$": 1000,
}

CHECKOUT_PRICE_TABLE = {
    "free": 0,
    "$": 300,
    "$$": 750,
    "$$$": 1500,
}

TRANSPORT_COST_MULTIPLIERS = {
    "metro": 1.0,
    "bus": 0.8,
    "auto": 1.5,
    "cab": 2.5,
    "car": 3.0,
}

CHECKOUT_TAX_RATE = 0.18  # GST
CHECKOUT_SERVICE_FEE_RATE = 0.05

# ===== Time Constants =====
SECONDS_PER_DAY = 24 * 60 * 60
