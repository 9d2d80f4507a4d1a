"""
History commands for autoincrement.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import click

from ..constants import DEFAULT_INITIAL_VALUE, DEFAULT_VERSION_ATTRIBUTE_NAME, EXIT_NOT_FOUND, EXIT_USAGE
from ..core.client import DynamoDBClient
from ..core.history_operations import DynamoDBHistoryAutoIncrement
from ..doc_data import get_doc_data
from ..doc_generator import display_doc, generate_doc
from ..exceptions import AutoIncrementError
from ..logging_config import get_logger, setup_logging
from ..models import AutoIncrementConfig
from ..utils import exit_for_error, output_error, output_json, output_text, parse_json_object

logger = get_logger(__name__)


@click.command("history-put")
@click.argument("item", required=False)
@click.option("--counter-table", envvar="AUTOINCREMENT_COUNTER_TABLE", help="Table holding the current item")
@click.option("--counter-key", help="Key of the current item as JSON, e.g. '{\"widgetID\": 42}'")
@click.option(
    "--attribute",
    default=DEFAULT_VERSION_ATTRIBUTE_NAME,
    help="Version attribute (also the sort key of the history table)",
)
@click.option("--table", envvar="AUTOINCREMENT_TABLE", help="History table")
@click.option("--initial-value", type=int, default=DEFAULT_INITIAL_VALUE, help="First version number")
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
def history_put_command(
    ctx: click.Context,
    item: str | None,
    counter_table: str | None,
    counter_key: str | None,
    attribute: str,
    table: str | None,
    initial_value: int,
    dangerously: bool,
    region: str | None,
    profile: str | None,
    endpoint_url: str | None,
    text: bool,
    verbose: int,
    doc: bool,
) -> None:
    """Write a new version of an item and record it in the history table.

    Examples:

    \b
        # Rename widget 42
        dynamodb-autoincrement history-put '{"widgetName": "Handy Widget"}' \\
            --counter-table widgets --counter-key '{"widgetID": 42}' \\
            --table widgetHistory

    \b
    Output Format:
        Returns JSON:
        {"key": {"widgetID": 42}, "version": 3}
    """
    if doc:
        display_doc(generate_doc(**get_doc_data("history-put")))  # type: ignore[arg-type]

    setup_logging(verbose)

    if item is None or counter_key is None or counter_table is None or table is None:
        logger.error("Missing ITEM, --counter-table, --counter-key or --table")
        click.echo("Try 'dynamodb-autoincrement history-put --help' for usage", err=True)
        ctx.exit(EXIT_USAGE)

    try:
        logger.info(f"Writing new version to '{counter_table}' with history in '{table}'")
        logger.debug(f"Key: {counter_key}, Attribute: {attribute}, Dangerously: {dangerously}")

        key = parse_json_object(counter_key, "counter key")
        config = AutoIncrementConfig(
            client=DynamoDBClient(region, profile, endpoint_url),
            counter_table_name=counter_table,
            counter_table_key=key,
            attribute_name=attribute,
            table_name=table,
            initial_value=initial_value,
            dangerously=dangerously,
        )
        version = DynamoDBHistoryAutoIncrement(config).put(parse_json_object(item, "item"))

        if text:
            output_text(f"✅ {counter_key} is now at {attribute} {version}")
        else:
            output_json({"key": key, attribute: version})

    except (AutoIncrementError, ValueError) as e:
        exit_for_error(e, text)


@click.command("history-get")
@click.option("--counter-table", required=True, envvar="AUTOINCREMENT_COUNTER_TABLE", help="Table holding the current item")
@click.option("--counter-key", required=True, help="Key of the current item as JSON")
@click.option("--attribute", default=DEFAULT_VERSION_ATTRIBUTE_NAME, help="Version attribute")
@click.option("--table", required=True, envvar="AUTOINCREMENT_TABLE", help="History table")
@click.option("--version", "version", type=int, help="Version to read (default: current item)")
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
def history_get_command(
    counter_table: str,
    counter_key: str,
    attribute: str,
    table: str,
    version: int | None,
    region: str | None,
    profile: str | None,
    endpoint_url: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Read the current item, or one of its versions from the history.

    Examples:

    \b
        # Current state of widget 42
        dynamodb-autoincrement history-get --counter-table widgets \\
            --counter-key '{"widgetID": 42}' --table widgetHistory

    \b
        # Version 1 of widget 42
        dynamodb-autoincrement history-get --counter-table widgets \\
            --counter-key '{"widgetID": 42}' --table widgetHistory --version 1

    \b
    Output Format:
        Returns the item as JSON
    """
    setup_logging(verbose)

    try:
        logger.info(f"Reading {'current item' if version is None else f'version {version}'}")
        logger.debug(f"Key: {counter_key}, Current: {counter_table}, History: {table}")

        config = AutoIncrementConfig(
            client=DynamoDBClient(region, profile, endpoint_url),
            counter_table_name=counter_table,
            counter_table_key=parse_json_object(counter_key, "counter key"),
            attribute_name=attribute,
            table_name=table,
        )
        item = DynamoDBHistoryAutoIncrement(config).get(version)

    except (AutoIncrementError, ValueError) as e:
        exit_for_error(e, text)
        return

    if item is None:
        what = "Current item" if version is None else f"Version {version}"
        output_error(f"{what} not found", "Write it first with history-put", EXIT_NOT_FOUND, text)

    if text:
        for name, value in sorted(item.items()):  # type: ignore[union-attr]
            output_text(f"{name} = {value}")
    else:
        output_json(item)
