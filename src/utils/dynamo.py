"""
DynamoDB access for cycle records.

All cycles live in a single partition. The sort key starts with the ISO start
date, so querying the partition returns records in chronological order and
ScanIndexForward=False returns them newest first.
"""
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError
from aws_lambda_powertools import Logger
from pydantic import ValidationError

from src.models.cycle import CycleCreateRequest, CycleRecord
from src.services.exceptions import CycleStoreError, CycleDataError

logger = Logger()

CYCLE_PARTITION = "CYCLE"

def _from_dynamo_number(value: Decimal):
    if value == value.to_integral_value():
        return int(value)
    return float(value)

def create_cycle_sk(start_date: str, cycle_id: str) -> str:
    """Create sort key for a cycle record."""
    return f"START#{start_date}#{cycle_id}"

class CycleStore:
    """
    Record store for cycles backed by a DynamoDB table.

    The store is constructed once at the composition root and passed to the
    request handlers.

    Example:
        store = CycleStore(settings.table_name)
        record = store.create(CycleCreateRequest(startDate="2024-01-01", duration=5))
        latest = store.latest(6)
    """

    def __init__(self, table_name: str, dynamodb: Optional[Any] = None):
        self.table_name = table_name
        self.dynamodb = dynamodb or boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)

    def create(self, request: CycleCreateRequest) -> CycleRecord:
        """
        Insert a new cycle record.

        Args:
            request: Validated cycle creation request

        Returns:
            The stored record including id and timestamps

        Raises:
            CycleStoreError: If the item cannot be written
        """
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
        item = {
            "PK": CYCLE_PARTITION,
            "SK": create_cycle_sk(record.start_date.isoformat(), record.id),
            **{key: value for key, value in record.to_response().items() if value is not None}
        }

        try:
            self.table.put_item(Item=item)
        except (BotoCoreError, ClientError) as e:
            logger.error("Error storing cycle", extra={
                "start_date": item["startDate"],
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise CycleStoreError(f"Failed to store cycle: {str(e)}")

        logger.info("Stored cycle", extra={
            "cycle_id": record.id,
            "start_date": item["startDate"],
            "duration": record.duration
        })
        return record

    def list_cycles(self, descending: bool = True, limit: Optional[int] = None) -> List[CycleRecord]:
        """
        Query cycle records ordered by start date.

        Args:
            descending: Newest first when True, oldest first otherwise
            limit: Maximum number of records to return, all when None

        Returns:
            List of cycle records

        Raises:
            CycleStoreError: If the table cannot be queried
            CycleDataError: If a stored item is not a valid cycle record
        """
        query_args: Dict[str, Any] = {
            "KeyConditionExpression": Key("PK").eq(CYCLE_PARTITION),
            "ScanIndexForward": not descending
        }
        if limit is not None:
            query_args["Limit"] = limit

        items: List[Dict[str, Any]] = []
        try:
            while True:
                response = self.table.query(**query_args)
                items.extend(response.get('Items', []))
                last_key = response.get('LastEvaluatedKey')
                if not last_key or (limit is not None and len(items) >= limit):
                    break
                query_args["ExclusiveStartKey"] = last_key
        except (BotoCoreError, ClientError) as e:
            logger.error("Error querying cycles", extra={
                "descending": descending,
                "limit": limit,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise CycleStoreError(f"Failed to query cycles: {str(e)}")

        if limit is not None:
            items = items[:limit]

        logger.debug("Queried cycles", extra={
            "descending": descending,
            "limit": limit,
            "count": len(items)
        })
        return [self._to_record(item) for item in items]

    def latest(self, limit: int) -> List[CycleRecord]:
        """Return the most recent records, newest first."""
        return self.list_cycles(descending=True, limit=limit)

    def is_connected(self) -> bool:
        """Check whether the backing table can be reached."""
        try:
            self.table.meta.client.describe_table(TableName=self.table_name)
            return True
        except (BotoCoreError, ClientError) as e:
            logger.warning("Cycle table not reachable", extra={
                "table_name": self.table_name,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            return False

    @staticmethod
    def _to_record(item: Dict[str, Any]) -> CycleRecord:
        data = {
            key: _from_dynamo_number(value) if isinstance(value, Decimal) else value
            for key, value in item.items()
            if key not in ("PK", "SK")
        }
        try:
            return CycleRecord.model_validate(data)
        except ValidationError as e:
            raise CycleDataError(f"Invalid cycle item {item.get('SK')}: {str(e)}")
