"""
Condition helpers shared by the DynamoDB and in-memory clients.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from collections.abc import Mapping
from typing import Any

from boto3.dynamodb.conditions import Attr, ConditionBase, ConditionExpressionBuilder
from boto3.dynamodb.types import TypeSerializer


def attribute_absent(name: str) -> ConditionBase:
    """Condition that holds when the stored item has no ``name`` attribute."""
    return Attr(name).not_exists()


def attribute_equals(name: str, value: Any) -> ConditionBase:
    """Condition that holds when the stored ``name`` attribute equals ``value``."""
    return Attr(name).eq(value)


def counter_guard(name: str, counter: int | None) -> ConditionBase:
    """
    Guard a counter write against a concurrent writer.

    Args:
        name: Counter attribute name
        counter: Counter value that was read, or None if it was absent

    Returns:
        ``attribute_not_exists(name)`` when nothing was read, otherwise
        ``name = counter``
    """
    if counter is None:
        return attribute_absent(name)
    return attribute_equals(name, counter)


def build_condition_kwargs(
    condition: ConditionBase | None,
    serializer: TypeSerializer | None = None,
) -> dict[str, Any]:
    """
    Render a condition as low-level DynamoDB request parameters.

    Args:
        condition: Condition to render, or None
        serializer: Serializer for placeholder values

    Returns:
        Dictionary with ConditionExpression and, when needed,
        ExpressionAttributeNames and ExpressionAttributeValues
    """
    if condition is None:
        return {}

    serializer = serializer or TypeSerializer()
    built = ConditionExpressionBuilder().build_expression(condition)

    kwargs: dict[str, Any] = {"ConditionExpression": built.condition_expression}
    if built.attribute_name_placeholders:
        kwargs["ExpressionAttributeNames"] = dict(built.attribute_name_placeholders)
    if built.attribute_value_placeholders:
        kwargs["ExpressionAttributeValues"] = {
            placeholder: serializer.serialize(value)
            for placeholder, value in built.attribute_value_placeholders.items()
        }
    return kwargs


def evaluate_condition(condition: ConditionBase | None, item: Mapping[str, Any] | None) -> bool:
    """
    Evaluate a condition against a stored item.

    Supports the operators the counters use: attribute existence, equality,
    and AND/OR/NOT combinations of those.

    Args:
        condition: Condition to evaluate, or None (always holds)
        item: Stored item, or None if there is none

    Returns:
        True if the condition holds

    Raises:
        ValueError: If the condition uses an unsupported operator
    """
    if condition is None:
        return True

    item = item or {}
    expression = condition.get_expression()
    operator = expression["operator"]
    values = expression["values"]

    if operator == "AND":
        return all(evaluate_condition(value, item) for value in values)
    if operator == "OR":
        return any(evaluate_condition(value, item) for value in values)
    if operator == "NOT":
        return not evaluate_condition(values[0], item)

    name = values[0].name
    if operator == "attribute_not_exists":
        return name not in item
    if operator == "attribute_exists":
        return name in item
    if operator == "=":
        return name in item and item[name] == values[1]
    if operator == "<>":
        return name in item and item[name] != values[1]

    raise ValueError(f"Unsupported condition operator: {operator}")
