"""
In-memory store implementing the same primitives as DynamoDBClient.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import copy
import threading
from collections.abc import Mapping, Sequence
from typing import Any

from boto3.dynamodb.conditions import ConditionBase

from ..constants import MAX_TRANSACTION_ITEMS
from ..exceptions import (
    AutoIncrementError,
    ConditionFailedError,
    MissingKeyError,
    TableNotFoundError,
    TransactionConflictError,
)
from ..models import ConditionalPut
from ..utils import validate_table_name
from .base_client import BaseClient
from .conditions import evaluate_condition


class MemoryClient(BaseClient):
    """A memory-backed store.

    Tables are declared with their key attribute names, the way a DynamoDB
    table declares its key schema. Every primitive runs under one lock, so
    condition checks and writes are atomic with respect to each other.
    """

    def __init__(self, key_schema: Mapping[str, Sequence[str]] | None = None) -> None:
        self.tables: dict[str, dict[tuple[Any, ...], dict[str, Any]]] = {}
        self.key_schema: dict[str, tuple[str, ...]] = {}
        self._lock = threading.Lock()
        for table_name, key_names in (key_schema or {}).items():
            self.create_table(table_name, key_names)

    def create_table(self, table_name: str, key_names: Sequence[str]) -> None:
        validate_table_name(table_name)
        if not key_names:
            raise ValueError(f"Table '{table_name}' needs at least one key attribute")
        with self._lock:
            self.key_schema[table_name] = tuple(key_names)
            self.tables.setdefault(table_name, {})

    def get_item(
        self,
        table_name: str,
        key: Mapping[str, Any],
        attributes: Sequence[str] | None = None,
    ) -> dict[str, Any] | None:
        extra = set(key) - set(self._schema(table_name))
        if extra:
            raise AutoIncrementError(
                f"Key attributes {sorted(extra)} are not part of the key of '{table_name}'"
            )
        with self._lock:
            item = self.tables[table_name].get(self._key(table_name, key))
            if item is None:
                return None
            if attributes:
                return {name: copy.deepcopy(item[name]) for name in attributes if name in item}
            return copy.deepcopy(item)

    def put_item(
        self,
        table_name: str,
        item: Mapping[str, Any],
        condition: ConditionBase | None = None,
    ) -> None:
        key = self._key(table_name, item)
        with self._lock:
            table = self.tables[table_name]
            if not evaluate_condition(condition, table.get(key)):
                raise ConditionFailedError(
                    f"Condition failed: put to '{table_name}' at key {key}"
                )
            table[key] = copy.deepcopy(dict(item))

    def transact_write_items(self, puts: Sequence[ConditionalPut]) -> None:
        if not puts:
            raise AutoIncrementError("Transaction requires at least one operation")
        if len(puts) > MAX_TRANSACTION_ITEMS:
            raise AutoIncrementError(
                f"Transaction cannot exceed {MAX_TRANSACTION_ITEMS} operations"
            )

        targets = [(put.table_name, self._key(put.table_name, put.item)) for put in puts]
        if len(set(targets)) != len(targets):
            raise AutoIncrementError(
                "Transaction request cannot include multiple operations on one item"
            )

        with self._lock:
            failed = [
                idx
                for idx, (put, (table_name, key)) in enumerate(zip(puts, targets))
                if not evaluate_condition(put.condition, self.tables[table_name].get(key))
            ]
            if failed:
                raise TransactionConflictError(
                    f"Transaction cancelled: condition failed for operations {failed}"
                )
            for put, (table_name, key) in zip(puts, targets):
                self.tables[table_name][key] = copy.deepcopy(dict(put.item))

    def scan(self, table_name: str) -> list[dict[str, Any]]:
        """Return copies of all items in a table, ordered by key."""
        self._schema(table_name)
        with self._lock:
            table = self.tables[table_name]
            return [copy.deepcopy(table[key]) for key in sorted(table)]

    def _schema(self, table_name: str) -> tuple[str, ...]:
        try:
            return self.key_schema[table_name]
        except KeyError:
            raise TableNotFoundError(f"Table '{table_name}' not found")

    def _key(self, table_name: str, record: Mapping[str, Any]) -> tuple[Any, ...]:
        names = self._schema(table_name)
        missing = [name for name in names if record.get(name) is None]
        if missing:
            raise MissingKeyError(
                f"Item for '{table_name}' is missing key attributes: {', '.join(missing)}"
            )
        return tuple(record[name] for name in names)
