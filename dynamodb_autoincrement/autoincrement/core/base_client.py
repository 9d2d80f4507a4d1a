"""
Abstract store interface consumed by the counters.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from boto3.dynamodb.conditions import ConditionBase

from ..models import ConditionalPut


class BaseClient(ABC):
    """Key-value store offering point reads, conditional puts and transactions.

    Conditions are ``boto3.dynamodb.conditions`` objects and are evaluated by
    the store against the persisted item at commit time.
    """

    @abstractmethod
    def get_item(
        self,
        table_name: str,
        key: Mapping[str, Any],
        attributes: Sequence[str] | None = None,
    ) -> dict[str, Any] | None:
        """Get item by key, or None if it does not exist.

        When ``attributes`` is given only those attributes are returned.
        """

    @abstractmethod
    def put_item(
        self,
        table_name: str,
        item: Mapping[str, Any],
        condition: ConditionBase | None = None,
    ) -> None:
        """Put item, replacing any item with the same key.

        Raises ConditionFailedError if ``condition`` does not hold.
        """

    @abstractmethod
    def transact_write_items(self, puts: Sequence[ConditionalPut]) -> None:
        """Apply all puts atomically or none of them.

        Raises TransactionConflictError if any condition does not hold.
        """
