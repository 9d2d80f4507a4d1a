"""CLI entry point for dynamodb-autoincrement.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import click

from dynamodb_autoincrement.autoincrement.commands.counter_commands import (
    get_last_command,
    put_command,
)
from dynamodb_autoincrement.autoincrement.commands.history_commands import (
    history_get_command,
    history_put_command,
)


@click.group()
@click.version_option(version="0.1.0")
def main() -> None:
    """Auto-incrementing IDs and versions for DynamoDB using optimistic locking"""
    pass


# Register counter commands
main.add_command(put_command)
main.add_command(get_last_command)

# Register history commands
main.add_command(history_put_command)
main.add_command(history_get_command)

if __name__ == "__main__":
    main()
