"""
Utility functions for autoincrement operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import json
import sys
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from .constants import (
    EXIT_CAPACITY,
    EXIT_NOT_FOUND,
    EXIT_STORE_ERROR,
    EXIT_USAGE,
    MAX_TABLE_NAME_LENGTH,
    MIN_TABLE_NAME_LENGTH,
)
from .exceptions import AutoIncrementError, CapacityError, ConditionFailedError, MissingKeyError


def merge_item(
    item: Mapping[str, Any],
    key: Mapping[str, Any],
    attribute_name: str,
    value: int,
) -> dict[str, Any]:
    """
    Build the record to store from caller attributes, a key and a counter value.

    Later sources win: key attributes override caller attributes, and the
    counter value overrides both.

    Args:
        item: Caller-supplied attributes
        key: Key attributes addressing the record
        attribute_name: Name of the counter/version attribute
        value: Counter value to assign

    Returns:
        New record dictionary
    """
    return {**item, **key, attribute_name: value}


def without_keys(item: Mapping[str, Any], key: Mapping[str, Any]) -> dict[str, Any]:
    """
    Copy an item, dropping the attributes that make up a key.

    Args:
        item: Source item
        key: Key whose attribute names are removed

    Returns:
        New dictionary without the key attributes
    """
    return {name: value for name, value in item.items() if name not in key}


def counter_value(item: Mapping[str, Any] | None, attribute_name: str) -> int | None:
    """
    Read an integer counter attribute from an item.

    DynamoDB returns numbers as Decimal, so the value is normalized to int.

    Args:
        item: Item as returned by the store, or None
        attribute_name: Counter attribute name

    Returns:
        Counter value, or None if the item or attribute is absent

    Raises:
        AutoIncrementError: If the stored value is not an integer
    """
    if item is None:
        return None
    value = item.get(attribute_name)
    if value is None:
        return None
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise AutoIncrementError(f"Counter attribute '{attribute_name}' is not a number: {value!r}")
    if number != value:
        raise AutoIncrementError(f"Counter attribute '{attribute_name}' is not an integer: {value}")
    return number


def parse_json_object(text: str, name: str = "value") -> dict[str, Any]:
    """
    Parse a JSON object from the command line.

    Floats are parsed as Decimal because boto3 refuses Python floats.

    Args:
        text: JSON text
        name: What is being parsed, used in error messages

    Returns:
        Parsed dictionary

    Raises:
        ValueError: If the text is not a JSON object
    """
    try:
        data = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON for {name}: {e}")
    if not isinstance(data, dict):
        raise ValueError(f"{name} must be a JSON object")
    return data


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def output_json(data: Any, quiet: bool = False) -> None:
    """
    Output JSON to stdout.

    Args:
        data: Data to output as JSON
        quiet: If True, suppress output
    """
    if not quiet:
        print(json.dumps(data, default=_json_default))


def output_text(message: str, quiet: bool = False) -> None:
    """
    Output text to stdout.

    Args:
        message: Message to output
        quiet: If True, suppress output
    """
    if not quiet:
        print(message)


def error_json(error: str, solution: str, exit_code: int) -> str:
    """
    Format error as JSON.

    Args:
        error: Error message
        solution: Solution suggestion
        exit_code: Exit code

    Returns:
        Error as a JSON document
    """
    return json.dumps({"error": error, "solution": solution, "exit_code": exit_code})


def error_text(error: str, solution: str) -> str:
    """
    Format error as human-readable text.

    Args:
        error: Error message
        solution: Solution suggestion

    Returns:
        Formatted error message
    """
    return f"❌ Error: {error}\n\n💡 Solution: {solution}"


def validate_table_name(table_name: str) -> bool:
    """
    Validate DynamoDB table name.

    Args:
        table_name: Table name to validate

    Returns:
        True if valid

    Raises:
        ValueError: If table name is invalid
    """
    if not table_name:
        raise ValueError("Table name cannot be empty")
    if len(table_name) < MIN_TABLE_NAME_LENGTH or len(table_name) > MAX_TABLE_NAME_LENGTH:
        raise ValueError("Table name must be between 3 and 255 characters")
    if not all(c.isalnum() or c in "-_." for c in table_name):
        raise ValueError(
            "Table name can only contain alphanumeric characters, hyphens, underscores, and periods"
        )
    return True


def validate_key(key: Mapping[str, Any]) -> bool:
    """
    Validate a record key.

    Args:
        key: Mapping of key attribute names to values

    Returns:
        True if valid

    Raises:
        MissingKeyError: If the key is empty or has unset attributes
    """
    if not key:
        raise MissingKeyError("Key must contain at least one attribute")
    missing = sorted(name for name, value in key.items() if value is None or value == "")
    if missing:
        raise MissingKeyError(f"Key attributes have no value: {', '.join(missing)}")
    return True


def output_error(error: str, solution: str, exit_code: int, text_format: bool = False) -> None:
    """
    Output error message and exit.

    Args:
        error: Error message
        solution: Solution suggestion
        exit_code: Exit code
        text_format: If True, output as text; otherwise JSON
    """
    if text_format:
        sys.stderr.write(error_text(error, solution) + "\n")
    else:
        sys.stderr.write(error_json(error, solution, exit_code) + "\n")
    sys.exit(exit_code)


def exit_for_error(error: Exception, text_format: bool = False) -> None:
    """
    Report an autoincrement failure with a suggested solution and exit.

    Args:
        error: Exception raised by an operation
        text_format: If True, output as text; otherwise JSON
    """
    if isinstance(error, ValueError):
        output_error(str(error), "Check the command arguments", EXIT_USAGE, text_format)
    elif isinstance(error, MissingKeyError):
        output_error(str(error), "Provide every key attribute of the record", EXIT_NOT_FOUND, text_format)
    elif isinstance(error, CapacityError):
        output_error(str(error), "Reduce item size or request rate", EXIT_CAPACITY, text_format)
    elif isinstance(error, ConditionFailedError):
        output_error(
            str(error),
            "Another writer won the race; do not use --dangerously with concurrent writers",
            EXIT_STORE_ERROR,
            text_format,
        )
    else:
        output_error(str(error), "Check tables exist and AWS credentials", EXIT_STORE_ERROR, text_format)
