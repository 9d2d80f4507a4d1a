"""
Auto-incrementing counter kept in its own table.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from collections.abc import Mapping
from typing import Any

from ..models import AutoIncrementConfig, ConditionalPut, WriteSet
from ..utils import counter_value, merge_item, without_keys
from .conditions import attribute_absent, counter_guard
from .writer import RetryingWriter


class DynamoDBAutoIncrement:
    """Put items with an auto-incrementing attribute.

    The last issued value lives in the counter table, on the record at
    ``counter_table_key``. Each put inserts the item into ``table_name``
    with ``attribute_name`` set to the next value.

    Example:

        autoincrement = DynamoDBAutoIncrement(
            AutoIncrementConfig(
                client=DynamoDBClient(),
                counter_table_name="autoincrementHelper",
                counter_table_key={"autoincrementHelperForTable": "widgets"},
                counter_attribute_name="widgetIDCounter",
                attribute_name="widgetID",
                table_name="widgets",
                initial_value=1,
            )
        )
        widget_id = autoincrement.put({"widgetName": "runcible spoon"})

    With ``copy_item=True`` the counter record keeps its other attributes
    across increments. A counter record that exists without a counter
    attribute is numbered first: it is copied into ``table_name`` at
    ``initial_value`` and the new item gets the value after it.
    """

    def __init__(self, config: AutoIncrementConfig):
        self.config = config
        self.writer = RetryingWriter(config.client, config.dangerously)

    @property
    def counter_attribute_name(self) -> str:
        return self.config.counter_attribute_name or self.config.attribute_name

    def put(self, item: Mapping[str, Any]) -> int:
        """Insert the item under the next counter value and return that value."""
        return self.writer.put(self, item)

    def get_last(self) -> int | None:
        """Return the last issued value, or None if nothing was issued yet."""
        record = self.config.client.get_item(
            self.config.counter_table_name,
            self.config.counter_table_key,
            [self.counter_attribute_name],
        )
        return counter_value(record, self.counter_attribute_name)

    def next(self, item: Mapping[str, Any]) -> WriteSet:
        config = self.config
        counter_name = self.counter_attribute_name

        record = config.client.get_item(
            config.counter_table_name,
            config.counter_table_key,
            None if config.copy_item else [counter_name],
        )
        counter = counter_value(record, counter_name)

        bootstrap: list[ConditionalPut] = []
        if counter is None:
            next_counter = config.initial_value
            if config.copy_item and record:
                # The record predates the counter: it takes the initial value
                bootstrap.append(
                    ConditionalPut(
                        config.table_name,
                        {
                            **without_keys(record, config.counter_table_key),
                            config.attribute_name: next_counter,
                        },
                        attribute_absent(config.attribute_name),
                    )
                )
                next_counter += 1
        else:
            next_counter = counter + 1

        base = record if config.copy_item and record else {}
        counter_put = ConditionalPut(
            config.counter_table_name,
            merge_item(base, config.counter_table_key, counter_name, next_counter),
            counter_guard(counter_name, counter),
        )
        item_put = ConditionalPut(
            config.table_name,
            {**item, config.attribute_name: next_counter},
            attribute_absent(config.attribute_name),
        )

        return WriteSet(next_counter, [counter_put, *bootstrap, item_put])
