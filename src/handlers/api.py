"""
Lambda entry point for the cycle tracking HTTP API.

A single function serves every route behind an API Gateway proxy
integration. The store is built once per execution environment and handed to
the route handlers through CycleApi.
"""
from functools import lru_cache, partial
from typing import Any, Callable, Dict, List, Tuple

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.handlers.cycles import list_cycles, create_cycle
from src.handlers.health import get_index, get_health
from src.handlers.prediction import get_predictions
from src.handlers.statistics import get_statistics
from src.services.constants import PREDICTION_WINDOW
from src.utils.config import load_settings
from src.utils.dynamo import CycleStore
from src.utils.http import error_response, get_route, preflight_response
from src.utils.logging import configure_logger, logger

tracer = Tracer()

Route = Callable[[Dict[str, Any], CycleStore], Dict[str, Any]]

class CycleApi:
    """Routes API Gateway events to the cycle handlers."""

    def __init__(self, store: CycleStore, prediction_window: int = PREDICTION_WINDOW):
        self.store = store
        self.routes: Dict[Tuple[str, str], Route] = {
            ("GET", "/"): get_index,
            ("GET", "/api/predictions"): partial(get_predictions, window=prediction_window),
            ("GET", "/api/cycles"): list_cycles,
            ("GET", "/api/stats"): get_statistics,
            ("POST", "/api/cycles"): create_cycle,
            ("GET", "/api/health"): get_health
        }

    def endpoints(self) -> List[str]:
        """List routes as 'METHOD path' strings."""
        return [f"{method:<4} {path}" for method, path in self.routes]

    def handle(self, event: Dict[str, Any]) -> Dict[str, Any]:
        """
        Dispatch one API Gateway event.

        OPTIONS requests are answered before routing so that preflight works
        for every path.

        Args:
            event: API Gateway Lambda proxy event

        Returns:
            API Gateway Lambda proxy response
        """
        method, path = get_route(event)
        if method == "OPTIONS":
            return preflight_response()

        route = self.routes.get((method, path))
        if route is None:
            logger.info("No route matched", extra={"method": method, "path": path})
            return error_response(404, "Not found", f"{method} {path}")

        return route(event, self.store)

@lru_cache(maxsize=1)
def get_api() -> CycleApi:
    """Build the API and its store on first use."""
    settings = load_settings()
    configure_logger(settings)
    api = CycleApi(CycleStore(settings.table_name), prediction_window=settings.prediction_window)
    logger.info("Cycle API initialized", extra={
        "cors": "all origins",
        "endpoints": api.endpoints()
    })
    return api

@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Handle an API Gateway request.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        api = get_api()
    except Exception as e:
        logger.exception("Error initializing cycle API", extra={
            "error": str(e),
            "error_type": e.__class__.__name__
        })
        return error_response(500, "Error interno", str(e))
    return api.handle(event)
