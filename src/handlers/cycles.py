"""
Handlers for listing and registering cycles.
"""
from typing import Any, Dict

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from src.models.cycle import CycleCreateRequest
from src.services.exceptions import RequestValidationError
from src.utils.dynamo import CycleStore
from src.utils.http import json_response, error_response, get_json_body

logger = Logger()

MISSING_FIELDS_ERROR = "Datos incompletos"
MISSING_FIELDS_DETAILS = "Fecha de inicio y duración son obligatorios"
SAVE_ERROR = "Error al guardar ciclo"
LIST_ERROR = "Error al obtener ciclos"
CREATED_MESSAGE = "Ciclo registrado exitosamente"

def parse_cycle_request(body: Any) -> CycleCreateRequest:
    """
    Validate a cycle registration body.

    Presence of startDate and duration is checked first so that a missing
    field is reported the same way regardless of the other fields.

    Args:
        body: Decoded JSON body

    Returns:
        Validated request

    Raises:
        RequestValidationError: If required fields are missing or invalid
    """
    if not isinstance(body, dict) or not body.get("startDate") or not body.get("duration"):
        raise RequestValidationError(MISSING_FIELDS_ERROR, MISSING_FIELDS_DETAILS)

    try:
        return CycleCreateRequest.model_validate(body)
    except ValidationError as e:
        raise RequestValidationError(SAVE_ERROR, str(e))

def list_cycles(event: Dict[str, Any], store: CycleStore) -> Dict[str, Any]:
    """
    Return every stored cycle, most recent first.

    Args:
        event: API Gateway Lambda proxy event
        store: Cycle record store

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        cycles = store.list_cycles(descending=True)
        return json_response(200, [cycle.to_response() for cycle in cycles])
    except Exception as e:
        logger.exception("Error listing cycles", extra={
            "error": str(e),
            "error_type": e.__class__.__name__
        })
        return error_response(500, LIST_ERROR, str(e))

def create_cycle(event: Dict[str, Any], store: CycleStore) -> Dict[str, Any]:
    """
    Register a new cycle.

    Args:
        event: API Gateway Lambda proxy event with a JSON body containing
            startDate, duration and optional symptoms, mood and flow
        store: Cycle record store

    Returns:
        API Gateway Lambda proxy response; 400 when validation fails
    """
    try:
        try:
            body = get_json_body(event)
        except ValueError as e:
            raise RequestValidationError(SAVE_ERROR, f"Invalid JSON body: {str(e)}")

        request = parse_cycle_request(body)
        record = store.create(request)

        return json_response(200, {
            "success": True,
            "message": CREATED_MESSAGE,
            "data": record.to_response()
        })

    except RequestValidationError as e:
        logger.warning("Rejected cycle registration", extra={
            "error": e.error,
            "details": e.details
        })
        return error_response(400, e.error, e.details)
    except Exception as e:
        logger.exception("Error saving cycle", extra={
            "error": str(e),
            "error_type": e.__class__.__name__
        })
        return error_response(500, SAVE_ERROR, str(e))
