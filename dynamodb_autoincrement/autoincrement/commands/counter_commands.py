"""
Counter commands for autoincrement.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import click

from ..constants import (
    DEFAULT_ATTRIBUTE_NAME,
    DEFAULT_COUNTER_TABLE_NAME,
    DEFAULT_INITIAL_VALUE,
    DEFAULT_TABLE_NAME,
    EXIT_USAGE,
)
from ..core.client import DynamoDBClient
from ..core.counter_operations import DynamoDBAutoIncrement
from ..doc_data import get_doc_data
from ..doc_generator import display_doc, generate_doc
from ..exceptions import AutoIncrementError
from ..logging_config import get_logger, setup_logging
from ..models import AutoIncrementConfig
from ..utils import exit_for_error, output_json, output_text, parse_json_object

logger = get_logger(__name__)


@click.command("put")
@click.argument("item", required=False)
@click.option(
    "--counter-table",
    envvar="AUTOINCREMENT_COUNTER_TABLE",
    default=DEFAULT_COUNTER_TABLE_NAME,
    help="Table holding the counter record",
)
@click.option("--counter-key", help="Key of the counter record as JSON, e.g. '{\"tableName\": \"widgets\"}'")
@click.option(
    "--attribute",
    envvar="AUTOINCREMENT_ATTRIBUTE",
    default=DEFAULT_ATTRIBUTE_NAME,
    help="Attribute of the new item that receives the value",
)
@click.option("--counter-attribute", help="Counter attribute on the counter record (default: --attribute)")
@click.option(
    "--table",
    envvar="AUTOINCREMENT_TABLE",
    default=DEFAULT_TABLE_NAME,
    help="Table receiving the new item",
)
@click.option("--initial-value", type=int, default=DEFAULT_INITIAL_VALUE, help="First value issued")
@click.option("--copy-item", is_flag=True, help="Keep the other attributes of the counter record")
@click.option("--dangerously", is_flag=True, help="Skip transactions (single writer only)")
@click.option("--region", envvar="AWS_REGION", help="AWS region")
@click.option("--profile", envvar="AWS_PROFILE", help="AWS profile")
@click.option("--endpoint-url", envvar="AWS_ENDPOINT_URL", help="DynamoDB endpoint (e.g. DynamoDB Local)")
@click.option("--text", is_flag=True, help="Output as human-readable text")
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)",
)
@click.option(
    "--doc",
    is_flag=True,
    help="Show AI agent-optimized documentation (semantics, guarantees, failure modes)",
)
@click.pass_context
def put_command(
    ctx: click.Context,
    item: str | None,
    counter_table: str,
    counter_key: str | None,
    attribute: str,
    counter_attribute: str | None,
    table: str,
    initial_value: int,
    copy_item: bool,
    dangerously: bool,
    region: str | None,
    profile: str | None,
    endpoint_url: str | None,
    text: bool,
    verbose: int,
    doc: bool,
) -> None:
    """Insert an item with the next auto-incrementing ID.

    The counter is read, advanced, and written together with the item in one
    transaction. Concurrent writers never receive the same value.

    Examples:

    \b
        # Number a new widget
        dynamodb-autoincrement put '{"widgetName": "runcible spoon"}' \\
            --counter-key '{"tableName": "widgets"}' --attribute widgetID

    \b
        # Separate counter attribute name
        dynamodb-autoincrement put '{}' --counter-key '{"tableName": "widgets"}' \\
            --counter-attribute widgetIDCounter --attribute widgetID

    \b
    Output Format:
        Returns JSON:
        {"table": "widgets", "attribute": "widgetID", "value": 1}
    """
    if doc:
        display_doc(generate_doc(**get_doc_data("put")))  # type: ignore[arg-type]

    setup_logging(verbose)

    if item is None or counter_key is None:
        logger.error("Missing required ITEM argument or --counter-key option")
        click.echo("Try 'dynamodb-autoincrement put --help' for usage", err=True)
        ctx.exit(EXIT_USAGE)

    try:
        logger.info(f"Putting item into '{table}' with counter from '{counter_table}'")
        logger.debug(f"Key: {counter_key}, Attribute: {attribute}, Dangerously: {dangerously}")

        config = AutoIncrementConfig(
            client=DynamoDBClient(region, profile, endpoint_url),
            counter_table_name=counter_table,
            counter_table_key=parse_json_object(counter_key, "counter key"),
            attribute_name=attribute,
            counter_attribute_name=counter_attribute,
            table_name=table,
            initial_value=initial_value,
            copy_item=copy_item,
            dangerously=dangerously,
        )
        value = DynamoDBAutoIncrement(config).put(parse_json_object(item, "item"))

        if text:
            output_text(f"✅ {table}.{attribute} = {value}")
        else:
            output_json({"table": table, "attribute": attribute, "value": value})

    except (AutoIncrementError, ValueError) as e:
        exit_for_error(e, text)


@click.command("get-last")
@click.option(
    "--counter-table",
    envvar="AUTOINCREMENT_COUNTER_TABLE",
    default=DEFAULT_COUNTER_TABLE_NAME,
    help="Table holding the counter record (or the current item)",
)
@click.option("--counter-key", required=True, help="Key of the counter record as JSON")
@click.option(
    "--attribute",
    envvar="AUTOINCREMENT_ATTRIBUTE",
    default=DEFAULT_ATTRIBUTE_NAME,
    help="Counter (or version) attribute",
)
@click.option("--region", envvar="AWS_REGION", help="AWS region")
@click.option("--profile", envvar="AWS_PROFILE", help="AWS profile")
@click.option("--endpoint-url", envvar="AWS_ENDPOINT_URL", help="DynamoDB endpoint (e.g. DynamoDB Local)")
@click.option("--text", is_flag=True, help="Output as human-readable text")
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)",
)
def get_last_command(
    counter_table: str,
    counter_key: str,
    attribute: str,
    region: str | None,
    profile: str | None,
    endpoint_url: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Read the last issued value of a counter.

    Works for both plain counters and versioned items; nothing is written.

    Examples:

    \b
        # Last widget ID
        dynamodb-autoincrement get-last --counter-key '{"tableName": "widgets"}' \\
            --attribute widgetID

    \b
        # Current version of widget 42
        dynamodb-autoincrement get-last --counter-table widgets \\
            --counter-key '{"widgetID": 42}' --attribute version

    \b
    Output Format:
        Returns JSON (value is null if nothing was issued yet):
        {"attribute": "widgetID", "value": 12}
    """
    setup_logging(verbose)

    try:
        logger.info(f"Reading counter '{attribute}' from '{counter_table}'")
        logger.debug(f"Key: {counter_key}, Region: {region}")

        config = AutoIncrementConfig(
            client=DynamoDBClient(region, profile, endpoint_url),
            counter_table_name=counter_table,
            counter_table_key=parse_json_object(counter_key, "counter key"),
            attribute_name=attribute,
            table_name=counter_table,
        )
        value = DynamoDBAutoIncrement(config).get_last()

        if text:
            output_text(f"{attribute} = {value if value is not None else '(none)'}")
        else:
            output_json({"attribute": attribute, "value": value})

    except (AutoIncrementError, ValueError) as e:
        exit_for_error(e, text)
