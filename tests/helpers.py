"""
Test helpers shared across test modules.
"""
import json
import uuid
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from src.models.cycle import CycleCreateRequest, CycleRecord

def make_cycle(start: date, duration: int = 5, **fields) -> CycleRecord:
    """Create a cycle record for testing."""
    return CycleRecord(start_date=start, duration=duration, **fields)


class FakeCycleStore:
    """In-memory stand-in for CycleStore."""

    def __init__(self, records: Optional[List[CycleRecord]] = None, connected: bool = True):
        self.records: List[CycleRecord] = list(records or [])
        self.connected = connected

    def create(self, request: CycleCreateRequest) -> CycleRecord:
        now = datetime.now(timezone.utc)
        record = CycleRecord(
            id=uuid.uuid4().hex,
            start_date=request.start_date,
            duration=request.duration,
            symptoms=request.symptoms,
            mood=request.mood,
            flow=request.flow,
            created_at=now,
            updated_at=now
        )
        self.records.append(record)
        return record

    def list_cycles(self, descending: bool = True, limit: Optional[int] = None) -> List[CycleRecord]:
        ordered = sorted(self.records, key=lambda r: r.start_date, reverse=descending)
        return ordered[:limit] if limit is not None else ordered

    def latest(self, limit: int) -> List[CycleRecord]:
        return self.list_cycles(descending=True, limit=limit)

    def is_connected(self) -> bool:
        return self.connected


@dataclass
class FakeLambdaContext:
    """Minimal Lambda context for handler tests."""
    function_name: str = "cycle-api"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:cycle-api"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


def api_event(method: str, path: str, body: Any = None) -> Dict[str, Any]:
    """Build an API Gateway REST proxy event."""
    return {
        "httpMethod": method,
        "path": path,
        "headers": {"Content-Type": "application/json"},
        "queryStringParameters": None,
        "body": json.dumps(body) if body is not None else None,
        "isBase64Encoded": False
    }
