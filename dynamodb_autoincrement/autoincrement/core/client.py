"""
DynamoDB client wrapper with error handling.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import boto3
from boto3.dynamodb.conditions import ConditionBase
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import ClientError

from ..constants import (
    CODE_ACCESS_DENIED,
    CODE_CONDITIONAL_CHECK_FAILED,
    CODE_RESOURCE_NOT_FOUND,
    CODE_TRANSACTION_CANCELED,
    CODE_VALIDATION,
    CONFLICT_REASONS,
    MAX_TRANSACTION_ITEMS,
    REASON_NONE,
    SIZE_REASONS,
    THROTTLING_CODES,
    THROTTLING_REASONS,
)
from ..exceptions import (
    AutoIncrementError,
    AWSPermissionError,
    AWSThrottlingError,
    ConditionFailedError,
    ItemSizeError,
    TableNotFoundError,
    TransactionConflictError,
)
from ..models import ConditionalPut
from .base_client import BaseClient
from .conditions import build_condition_kwargs


class DynamoDBClient(BaseClient):
    """DynamoDB client wrapper with error handling.

    Only the low-level boto3 client is used, so one instance can be shared
    by threads putting to the same counter.
    """

    def __init__(
        self,
        region: str | None = None,
        profile: str | None = None,
        endpoint_url: str | None = None,
        client: Any = None,
    ):
        """
        Initialize DynamoDB client.

        Args:
            region: AWS region (optional, uses SDK default)
            profile: AWS profile (optional, uses SDK default)
            endpoint_url: Endpoint override, e.g. DynamoDB Local (optional)
            client: Ready-made boto3 DynamoDB client (optional)
        """
        if client is None:
            session = boto3.Session(profile_name=profile, region_name=region)
            client = session.client("dynamodb", endpoint_url=endpoint_url)
        self.client = client
        self.serializer = TypeSerializer()
        self.deserializer = TypeDeserializer()

    def get_item(
        self,
        table_name: str,
        key: Mapping[str, Any],
        attributes: Sequence[str] | None = None,
    ) -> dict[str, Any] | None:
        """
        Get item by key with a strongly consistent read.

        Args:
            table_name: Table to read from
            key: Key to retrieve
            attributes: Attribute names to fetch (optional, default all)

        Returns:
            Item if found, None otherwise

        Raises:
            AutoIncrementError: For DynamoDB errors
        """
        kwargs: dict[str, Any] = {
            "TableName": table_name,
            "Key": self._serialize(key),
            "ConsistentRead": True,
        }
        if attributes:
            names = {f"#a{idx}": name for idx, name in enumerate(attributes)}
            kwargs["ProjectionExpression"] = ", ".join(names)
            kwargs["ExpressionAttributeNames"] = names

        try:
            response = self.client.get_item(**kwargs)
        except ClientError as e:
            self._handle_error(e, table_name)
            raise  # For type checker

        item = response.get("Item")
        if item is None:
            return None
        return self._deserialize(item)

    def put_item(
        self,
        table_name: str,
        item: Mapping[str, Any],
        condition: ConditionBase | None = None,
    ) -> None:
        """
        Put item with optional condition.

        Args:
            table_name: Table to write to
            item: Item to put
            condition: Optional condition

        Raises:
            ConditionFailedError: If condition fails
            AutoIncrementError: For other DynamoDB errors
        """
        request = self._put_request(ConditionalPut(table_name, dict(item), condition))
        try:
            self.client.put_item(**request)
        except ClientError as e:
            self._handle_error(e, table_name)
            raise  # For type checker

    def transact_write_items(self, puts: Sequence[ConditionalPut]) -> None:
        """
        Put all items in one all-or-nothing transaction.

        Args:
            puts: Conditional puts to apply

        Raises:
            TransactionConflictError: If a condition failed or another transaction conflicted
            CapacityError: If the transaction hit size or throughput limits
            AutoIncrementError: For other DynamoDB errors
        """
        if not puts:
            raise AutoIncrementError("Transaction requires at least one operation")
        if len(puts) > MAX_TRANSACTION_ITEMS:
            raise AutoIncrementError(
                f"Transaction cannot exceed {MAX_TRANSACTION_ITEMS} operations"
            )

        transact_items = [{"Put": self._put_request(put)} for put in puts]
        try:
            self.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            self._handle_error(e)
            raise  # For type checker

    def _put_request(self, put: ConditionalPut) -> dict[str, Any]:
        """Build low-level put parameters, shared by PutItem and TransactWriteItems."""
        request: dict[str, Any] = {
            "TableName": put.table_name,
            "Item": self._serialize(put.item),
        }
        request.update(build_condition_kwargs(put.condition, self.serializer))
        return request

    def _serialize(self, item: Mapping[str, Any]) -> dict[str, Any]:
        return {name: self.serializer.serialize(value) for name, value in item.items()}

    def _deserialize(self, item: Mapping[str, Any]) -> dict[str, Any]:
        return {name: self.deserializer.deserialize(value) for name, value in item.items()}

    def _handle_error(self, error: ClientError, table_name: str | None = None) -> None:
        """
        Convert boto3 errors to autoincrement exceptions.

        Args:
            error: ClientError from boto3
            table_name: Table involved in the request, if a single one

        Raises:
            ConditionFailedError: If condition check failed
            TransactionConflictError: If a transaction lost a race
            TableNotFoundError: If table not found
            AWSThrottlingError: If throttled
            ItemSizeError: If an item is too large
            AWSPermissionError: If permission denied
            AutoIncrementError: For other errors
        """
        code = error.response["Error"]["Code"]
        message = error.response["Error"].get("Message", "")

        if code == CODE_CONDITIONAL_CHECK_FAILED:
            raise ConditionFailedError(f"Condition failed: {error}")
        elif code == CODE_TRANSACTION_CANCELED:
            self._handle_cancellation(error)
        elif code == CODE_RESOURCE_NOT_FOUND:
            if table_name:
                raise TableNotFoundError(f"Table '{table_name}' not found")
            raise TableNotFoundError(f"Table not found: {message}")
        elif code in THROTTLING_CODES:
            raise AWSThrottlingError("DynamoDB throttling - retry with backoff")
        elif code == CODE_VALIDATION and "size" in message.lower():
            raise ItemSizeError(message)
        elif code == CODE_ACCESS_DENIED:
            raise AWSPermissionError("AWS permission denied")
        else:
            raise AutoIncrementError(f"DynamoDB error: {error}")

    def _handle_cancellation(self, error: ClientError) -> None:
        """
        Classify a cancelled transaction by its cancellation reasons.

        A missing reason list is treated as a conflict.
        """
        reasons = [
            reason.get("Code")
            for reason in error.response.get("CancellationReasons", [])
            if reason.get("Code") not in (None, REASON_NONE)
        ]

        if not reasons or any(reason in CONFLICT_REASONS for reason in reasons):
            raise TransactionConflictError(f"Transaction cancelled: {', '.join(reasons)}")
        elif any(reason in THROTTLING_REASONS for reason in reasons):
            raise AWSThrottlingError("DynamoDB throttling - retry with backoff")
        elif any(reason in SIZE_REASONS for reason in reasons):
            raise ItemSizeError(f"Transaction cancelled: {error}")
        else:
            raise AutoIncrementError(f"Transaction cancelled: {error}")
