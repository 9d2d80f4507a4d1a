"""
Optimistic retry loop shared by both counter variants.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Protocol

from ..exceptions import TransactionConflictError
from ..logging_config import get_logger
from ..models import ConditionalPut, WriteSet
from .base_client import BaseClient

logger = get_logger(__name__)


class Planner(Protocol):
    """Computes the writes that advance a counter by one."""

    def next(self, item: Mapping[str, Any]) -> WriteSet: ...


class RetryingWriter:
    """Commit write sets, recomputing them whenever another writer wins.

    In the default (safe) mode every write set is committed as one
    transaction; a cancelled transaction means another writer advanced the
    counter first, so the write set is recomputed from fresh reads and tried
    again. There is no backoff and no retry limit.

    With ``dangerously=True`` the puts of a write set are sent independently
    and in parallel. Conflicts are not retried, and a failed put does not
    undo its siblings, so the store can be left inconsistent. Only use it
    when a single writer touches the counter.
    """

    def __init__(self, client: BaseClient, dangerously: bool = False):
        self.client = client
        self.dangerously = dangerously

    def put(self, planner: Planner, item: Mapping[str, Any]) -> int:
        """
        Advance the counter and write the item.

        Args:
            planner: Computes the write set from the current store state
            item: Caller-supplied attributes

        Returns:
            The counter value that was committed

        Raises:
            ConditionFailedError: A put failed in dangerous mode
            CapacityError: DynamoDB size or throughput limits were hit
            AutoIncrementError: For other store errors
        """
        attempt = 0
        while True:
            attempt += 1
            write_set = planner.next(item)

            if self.dangerously:
                self._put_independently(write_set.puts)
            else:
                try:
                    self.client.transact_write_items(write_set.puts)
                except TransactionConflictError:
                    logger.debug(
                        f"Lost race for value {write_set.next_counter} "
                        f"(attempt {attempt}), retrying"
                    )
                    continue

            logger.debug(f"Committed value {write_set.next_counter} after {attempt} attempt(s)")
            return write_set.next_counter

    def _put_independently(self, puts: Sequence[ConditionalPut]) -> None:
        """Send every put at once; wait for all, then raise the first failure."""
        with ThreadPoolExecutor(max_workers=max(len(puts), 1)) as executor:
            futures = [
                executor.submit(self.client.put_item, put.table_name, put.item, put.condition)
                for put in puts
            ]
        for future in futures:
            future.result()
