"""DynamoDB Attendance Store implementation."""

import asyncio
from collections.abc import Iterator, Sequence
from contextlib import nullcontext
from decimal import Decimal
from typing import Any, ContextManager

import boto3
import structlog
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError

from ....domain.rsvp import AttendanceRepository, Attendee, RsvpSubmission
from ....domain.rsvp import keys
from ....domain.shared import DependencyError, DuplicateRsvpError
from ...observability import TracingService

logger = structlog.get_logger()

# BatchGetItem accepts at most 100 keys per call.
BATCH_GET_LIMIT = 100


class DynamoDBAttendanceStore(AttendanceRepository):
    """Attendance store backed by a single DynamoDB table.

    Every record for an event lives in the partition ``EVENT#<id>``.
    Respondent records are inserted with a key-absence condition in the
    same TransactWriteItems call that ADDs one to the response counter,
    so a respondent and its counter bump commit together or not at all.
    """

    def __init__(
        self,
        table_name: str,
        client: Any = None,
        region_name: str = "ap-northeast-1",
        tracing: TracingService | None = None,
        max_unprocessed_retries: int = 3,
        retry_backoff_seconds: float = 0.05,
    ):
        self._client = client or boto3.client("dynamodb", region_name=region_name)
        self._table_name = table_name
        self._tracing = tracing
        self._max_unprocessed_retries = max_unprocessed_retries
        self._retry_backoff_seconds = retry_backoff_seconds
        self._serializer = TypeSerializer()
        self._deserializer = TypeDeserializer()

    @property
    def table_name(self) -> str:
        return self._table_name

    def _trace(self, operation: str, event_id: str) -> ContextManager[None]:
        if self._tracing is None:
            return nullcontext()
        return self._tracing.trace_store_operation(operation, event_id)

    def _serialize(self, item: dict[str, Any]) -> dict[str, Any]:
        return {k: self._serializer.serialize(v) for k, v in item.items()}

    def _deserialize(self, item: dict[str, Any]) -> dict[str, Any]:
        return {k: _plain(self._deserializer.deserialize(v)) for k, v in item.items()}

    async def record_response(self, submission: RsvpSubmission, created_at: int) -> None:
        """Record a respondent and increment its counter atomically.

        The Put is conditioned on the respondent key not existing; the
        Update ADDs one to the counter, creating it on first use.
        """
        respondent = {
            **keys.respondent_key(submission.event_id, submission.email),
            "full_name": submission.full_name,
            "email": submission.email,
            "response": submission.response,
            "created_at": created_at,
        }

        transact_items = [
            {
                "Put": {
                    "TableName": self._table_name,
                    "Item": self._serialize(respondent),
                    "ConditionExpression": (
                        "attribute_not_exists(pk) AND attribute_not_exists(sk)"
                    ),
                }
            },
            {
                "Update": {
                    "TableName": self._table_name,
                    "Key": self._serialize(
                        keys.counter_key(submission.event_id, submission.response)
                    ),
                    "UpdateExpression": "ADD #count :one",
                    "ExpressionAttributeNames": {"#count": "count"},
                    "ExpressionAttributeValues": {":one": {"N": "1"}},
                }
            },
        ]

        try:
            with self._trace("transact_write", submission.event_id):
                self._client.transact_write_items(TransactItems=transact_items)

        except ClientError as e:
            if _is_duplicate_respondent(e):
                raise DuplicateRsvpError() from None

            logger.error(
                "rsvp_transaction_failed",
                event_id=submission.event_id,
                operation="transact_write_items",
                error_code=_error_code(e),
                cancellation_reasons=_cancellation_codes(e),
                error=str(e),
            )
            raise DependencyError() from e

        except BotoCoreError as e:
            logger.error(
                "rsvp_transaction_failed",
                event_id=submission.event_id,
                operation="transact_write_items",
                error=str(e),
            )
            raise DependencyError() from e

        logger.info(
            "respondent_stored",
            event_id=submission.event_id,
            response=submission.response,
        )

    async def get_counts(self, event_id: str, responses: Sequence[str]) -> dict[str, int]:
        """Batch point-read the counter records for ``responses``."""
        counts: dict[str, int] = {}
        request_keys = [self._serialize(keys.counter_key(event_id, r)) for r in responses]

        for chunk in _chunks(request_keys, BATCH_GET_LIMIT):
            pending: dict[str, Any] = {
                self._table_name: {"Keys": chunk, "ConsistentRead": True}
            }
            attempt = 0

            while pending:
                try:
                    with self._trace("batch_get", event_id):
                        result = self._client.batch_get_item(RequestItems=pending)
                except (ClientError, BotoCoreError) as e:
                    logger.error(
                        "counter_read_failed",
                        event_id=event_id,
                        operation="batch_get_item",
                        error=str(e),
                    )
                    raise DependencyError() from e

                for raw in result.get("Responses", {}).get(self._table_name, []):
                    item = self._deserialize(raw)
                    response = keys.response_from_counter_key(item[keys.SORT_KEY])
                    counts[response] = int(item.get("count", 0))

                pending = result.get("UnprocessedKeys") or {}
                if not pending:
                    break

                attempt += 1
                if attempt > self._max_unprocessed_retries:
                    logger.error(
                        "counter_read_incomplete",
                        event_id=event_id,
                        operation="batch_get_item",
                        attempts=attempt,
                    )
                    raise DependencyError()
                await asyncio.sleep(self._retry_backoff_seconds * (2 ** (attempt - 1)))

        return counts

    async def list_respondents(
        self,
        event_id: str,
        response: str | None = None,
    ) -> list[Attendee]:
        """Range query on the event partition for RESPONDENT# records."""
        params: dict[str, Any] = {
            "TableName": self._table_name,
            "KeyConditionExpression": "pk = :pk AND begins_with(sk, :prefix)",
            "ExpressionAttributeValues": {
                ":pk": {"S": keys.event_partition_key(event_id)},
                ":prefix": {"S": keys.RESPONDENT_PREFIX},
            },
        }
        if response:
            params["FilterExpression"] = "#response = :response"
            params["ExpressionAttributeNames"] = {"#response": "response"}
            params["ExpressionAttributeValues"][":response"] = {"S": response}

        attendees: list[Attendee] = []
        try:
            while True:
                with self._trace("query", event_id):
                    result = self._client.query(**params)

                for raw in result.get("Items", []):
                    attendees.append(self._to_attendee(self._deserialize(raw)))

                last_key = result.get("LastEvaluatedKey")
                if not last_key:
                    break
                params["ExclusiveStartKey"] = last_key

        except (ClientError, BotoCoreError) as e:
            logger.error(
                "respondent_query_failed",
                event_id=event_id,
                operation="query",
                error=str(e),
            )
            raise DependencyError() from e

        return attendees

    @staticmethod
    def _to_attendee(item: dict[str, Any]) -> Attendee:
        email = item.get("email") or keys.email_from_respondent_key(item[keys.SORT_KEY])
        created_at = item.get("created_at")
        return Attendee(
            full_name=item.get("full_name"),
            email=email,
            response=item.get("response"),
            timestamp=int(created_at) if created_at is not None else None,
        )


def _plain(value: Any) -> Any:
    """Convert DynamoDB Decimals back to ints/floats."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value


def _chunks(items: list[Any], size: int) -> Iterator[list[Any]]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


def _error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")


def _cancellation_codes(error: ClientError) -> list[str]:
    reasons = error.response.get("CancellationReasons") or []
    return [reason.get("Code", "None") for reason in reasons]


def _is_duplicate_respondent(error: ClientError) -> bool:
    """Tell a failed key-absence check apart from other aborts.

    The respondent Put is the first transaction item, so its
    cancellation reason is the first one reported.
    """
    code = _error_code(error)
    if code == "ConditionalCheckFailedException":
        return True
    if code != "TransactionCanceledException":
        return False

    reasons = _cancellation_codes(error)
    if reasons:
        return reasons[0] == "ConditionalCheckFailed"

    # Older botocore releases only expose the reasons in the message,
    # e.g. "... cancellation reasons [ConditionalCheckFailed, None]".
    message = error.response.get("Error", {}).get("Message", "")
    return "[ConditionalCheckFailed" in message
