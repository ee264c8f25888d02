"""
Handler for cycle predictions.
"""
from typing import Any, Dict

from aws_lambda_powertools import Logger

from src.services.constants import PREDICTION_WINDOW
from src.services.cycle import compute_predictions
from src.utils.dynamo import CycleStore
from src.utils.http import json_response, error_response

logger = Logger()

def get_predictions(
    event: Dict[str, Any],
    store: CycleStore,
    window: int = PREDICTION_WINDOW
) -> Dict[str, Any]:
    """
    Handle prediction request.

    Args:
        event: API Gateway Lambda proxy event
        store: Cycle record store
        window: Number of most recent cycles used for the prediction

    Returns:
        API Gateway Lambda proxy response; insufficient data is a 200
    """
    try:
        cycles = store.latest(window)
        return json_response(200, compute_predictions(cycles))
    except Exception as e:
        logger.exception("Error calculating predictions", extra={
            "error": str(e),
            "error_type": e.__class__.__name__,
            "window": window
        })
        return error_response(500, "Error en predicciones", str(e))
