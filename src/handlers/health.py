"""
Handlers for the API index and the health probe.
"""
from datetime import datetime, timezone
from typing import Any, Dict

from src.utils.dynamo import CycleStore
from src.utils.http import json_response

API_VERSION = "1.0.0"

def get_index(event: Dict[str, Any], store: CycleStore) -> Dict[str, Any]:
    """Describe the API and its main endpoints."""
    return json_response(200, {
        "message": "API del Ciclo Menstrual",
        "version": API_VERSION,
        "endpoints": {
            "cycles": "/api/cycles",
            "stats": "/api/stats",
            "predictions": "/api/predictions"
        }
    })

def get_health(event: Dict[str, Any], store: CycleStore) -> Dict[str, Any]:
    """Report liveness and whether the cycle table is reachable."""
    return json_response(200, {
        "status": "active",
        "serverTime": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "dbStatus": "connected" if store.is_connected() else "disconnected"
    })
