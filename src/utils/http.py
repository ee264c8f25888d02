"""
API Gateway proxy response helpers.
"""
import base64
import json
from typing import Any, Dict, Optional, Tuple

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type"
}

def json_response(status_code: int, body: Any) -> Dict[str, Any]:
    """
    Build an API Gateway proxy response with a JSON body and CORS headers.

    Args:
        status_code: HTTP status code
        body: JSON serializable payload

    Returns:
        API Gateway Lambda proxy response
    """
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **CORS_HEADERS},
        "body": json.dumps(body),
        "isBase64Encoded": False
    }

def error_response(status_code: int, error: str, details: str) -> Dict[str, Any]:
    """Build an error response in the {error, details} shape."""
    return json_response(status_code, {"error": error, "details": details})

def preflight_response() -> Dict[str, Any]:
    """Empty 200 response for OPTIONS requests."""
    return {
        "statusCode": 200,
        "headers": dict(CORS_HEADERS),
        "body": "",
        "isBase64Encoded": False
    }

def get_route(event: Dict[str, Any]) -> Tuple[str, str]:
    """
    Extract the HTTP method and path from a REST or HTTP API event.

    HTTP API events on a named stage carry the stage as the first segment of
    rawPath; it is removed so routes match on every stage.

    Returns:
        Tuple of (upper-case method, path without trailing slash)
    """
    request_context = event.get("requestContext") or {}
    method = event.get("httpMethod") or request_context.get("http", {}).get("method", "")
    path = event.get("path")
    if not path:
        path = event.get("rawPath") or "/"
        stage = request_context.get("stage")
        if stage and stage != "$default":
            prefix = f"/{stage}"
            if path == prefix or path.startswith(prefix + "/"):
                path = path[len(prefix):] or "/"
    if len(path) > 1:
        path = path.rstrip("/")
    return method.upper(), path

def get_json_body(event: Dict[str, Any]) -> Optional[Any]:
    """
    Decode the JSON body of an event.

    Returns:
        Parsed body, or None when the event carries no body

    Raises:
        ValueError: If the body is not valid JSON
    """
    body = event.get("body")
    if body is None or body == "":
        return None
    if isinstance(body, (dict, list)):
        return body
    if event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")
    return json.loads(body)
