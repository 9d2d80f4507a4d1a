"""Shared pytest fixtures."""

import threading
from collections.abc import Callable
from typing import Any

import pytest

from dynamodb_autoincrement.autoincrement.core.memory_client import MemoryClient
from dynamodb_autoincrement.autoincrement.models import AutoIncrementConfig

N = 20

TABLES = {
    "autoincrement": ["tableName"],
    "widgets": ["widgetID"],
    "widgetHistory": ["widgetID", "version"],
}


class ContendedClient(MemoryClient):
    """Memory store that can hold every caller's first read until all callers have read.

    Once armed with ``contend(parties)``, each thread's first ``get_item``
    waits on a barrier, so all of them compute their write sets from the
    same state before anyone commits. The barrier disarms itself once all
    parties have passed it.
    """

    def __init__(self, key_schema: dict[str, list[str]]) -> None:
        super().__init__(key_schema)
        self.barrier: threading.Barrier | None = None
        self.waited: set[int] = set()

    def contend(self, parties: int) -> None:
        self.barrier = threading.Barrier(parties, timeout=10)
        self.waited = set()

    def get_item(self, table_name, key, attributes=None):
        item = super().get_item(table_name, key, attributes)
        barrier = self.barrier
        ident = threading.get_ident()
        if barrier is not None and ident not in self.waited:
            self.waited.add(ident)
            barrier.wait()
            # Every party has read; later reads go straight through
            self.barrier = None
        return item


def run_concurrently(fn: Callable[[], Any], count: int) -> list[Any]:
    """Call ``fn`` from ``count`` threads; return results or raised exceptions."""
    results: list[Any] = [None] * count

    def target(idx: int) -> None:
        try:
            results[idx] = fn()
        except Exception as e:  # noqa: BLE001
            results[idx] = e

    threads = [threading.Thread(target=target, args=(idx,)) for idx in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return results


@pytest.fixture
def client():
    """Memory store with the widget tables."""
    return ContendedClient(TABLES)


@pytest.fixture
def counter_config(client):
    """Config for numbering widgets from a counter record."""
    return AutoIncrementConfig(
        client=client,
        counter_table_name="autoincrement",
        counter_table_key={"tableName": "widgets"},
        attribute_name="widgetID",
        table_name="widgets",
        initial_value=1,
    )


@pytest.fixture
def history_config(client):
    """Config for versioning widget 1 with a history table."""
    return AutoIncrementConfig(
        client=client,
        counter_table_name="widgets",
        counter_table_key={"widgetID": 1},
        attribute_name="version",
        table_name="widgetHistory",
        initial_value=1,
    )
