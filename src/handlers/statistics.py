"""
Handler for cycle statistics.
"""
from typing import Any, Dict

from aws_lambda_powertools import Logger

from src.services.statistics import compute_statistics
from src.utils.dynamo import CycleStore
from src.utils.http import json_response, error_response

logger = Logger()

def get_statistics(event: Dict[str, Any], store: CycleStore) -> Dict[str, Any]:
    """
    Handle statistics request over the full cycle history.

    Args:
        event: API Gateway Lambda proxy event
        store: Cycle record store

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        cycles = store.list_cycles(descending=False)
        return json_response(200, compute_statistics(cycles))
    except Exception as e:
        logger.exception("Error generating statistics", extra={
            "error": str(e),
            "error_type": e.__class__.__name__
        })
        return error_response(500, "Error al calcular estadísticas", str(e))
