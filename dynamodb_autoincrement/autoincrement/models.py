"""
Type models for autoincrement operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from boto3.dynamodb.conditions import ConditionBase

from .constants import DEFAULT_INITIAL_VALUE
from .utils import validate_key, validate_table_name

if TYPE_CHECKING:
    from .core.base_client import BaseClient


@dataclass
class AutoIncrementConfig:
    """Construction parameters shared by both counter variants.

    For ``DynamoDBAutoIncrement`` the counter table holds one record per
    counter and ``table_name`` receives the numbered items. For
    ``DynamoDBHistoryAutoIncrement`` the counter table holds the current
    item and ``table_name`` receives its history.
    """

    client: BaseClient
    counter_table_name: str
    counter_table_key: dict[str, Any]
    attribute_name: str
    table_name: str
    initial_value: int = DEFAULT_INITIAL_VALUE
    # None means the counter lives in attribute_name
    counter_attribute_name: str | None = None
    dangerously: bool = False
    copy_item: bool = False

    def __post_init__(self) -> None:
        validate_table_name(self.counter_table_name)
        validate_table_name(self.table_name)
        validate_key(self.counter_table_key)
        if not self.attribute_name:
            raise ValueError("Attribute name cannot be empty")
        if isinstance(self.initial_value, bool) or not isinstance(self.initial_value, int):
            raise ValueError("Initial value must be an integer")
        if self.initial_value < 0:
            raise ValueError("Initial value cannot be negative")


@dataclass(frozen=True)
class ConditionalPut:
    """A single put, guarded by an optional condition."""

    table_name: str
    item: dict[str, Any]
    condition: ConditionBase | None = None


@dataclass
class WriteSet:
    """Puts that advance a counter by one, plus the value they install."""

    next_counter: int
    puts: list[ConditionalPut] = field(default_factory=list)
