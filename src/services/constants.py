"""
Constants for cycle statistics and predictions.
"""

# Number of most recent cycles fetched for predictions
PREDICTION_WINDOW = 6

# Fewer cycles than this yields an insufficient_data response
MIN_CYCLES_FOR_PREDICTION = 3

# Ovulation is expected this many days before the next period
LUTEAL_PHASE_DAYS = 14

# Fertile window bounds relative to the ovulation date
FERTILE_DAYS_BEFORE_OVULATION = 3
FERTILE_DAYS_AFTER_OVULATION = 2

PMS_DAYS_BEFORE_PERIOD = 5

INSUFFICIENT_DATA_MESSAGE = "Se necesitan al menos 3 ciclos para predicciones"

STATUS_SUCCESS = "success"
STATUS_INSUFFICIENT_DATA = "insufficient_data"
