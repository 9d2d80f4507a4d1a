"""
Documentation data for the autoincrement commands.

Structured data for AI agent-optimized documentation generation.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Any

PUT_DOC = {
    "name": "put - Insert Item With Auto-Incrementing ID",
    "synopsis": (
        "dynamodb-autoincrement put ITEM_JSON --counter-table NAME "
        "--counter-key KEY_JSON --attribute NAME --table NAME [--initial-value N]"
    ),
    "description": (
        "Reads the last issued value from the counter record, computes the next one, "
        "and writes the counter and the new item in one DynamoDB transaction. "
        "If another writer advanced the counter first, the transaction is cancelled "
        "and the whole read-compute-write cycle starts over."
    ),
    "properties": {
        "Concurrency control": "Optimistic (conditional writes, no locks)",
        "Complexity": "1 read + 1 transaction per attempt",
        "Retries": "Unbounded, no backoff, on conflict only",
        "Consistency": "Strongly consistent read of the counter",
    },
    "guarantees": [
        "Uniqueness: at most one item is committed per value",
        "Gap-free: concurrent puts receive consecutive values",
        "Atomicity: counter and item are written together or not at all",
        "No resurrection: an item whose ID attribute already exists is never overwritten",
    ],
    "when_to_apply": [
        "Human-friendly IDs: sequential order, ticket or invoice numbers",
        "Migrating from SQL sequences to DynamoDB",
        "Per-tenant numbering: one counter record per tenant",
    ],
    "examples": [
        {
            "title": "Number a new widget",
            "code": (
                "dynamodb-autoincrement put '{\"widgetName\": \"runcible spoon\"}' \\\n"
                "    --counter-table autoincrement --counter-key '{\"tableName\": \"widgets\"}' \\\n"
                "    --attribute widgetID --table widgets"
            ),
        },
        {
            "title": "Extract the new ID",
            "code": "dynamodb-autoincrement put '{}' ... | jq -r '.value'",
        },
    ],
    "failure_modes": [
        "ConditionFailedError: with --dangerously, a concurrent writer won a race",
        "ItemSizeError: item exceeds the 400KB DynamoDB item size limit",
        "AWSThrottlingError: table throughput exceeded (not retried)",
        "TableNotFoundError: counter or item table missing",
    ],
    "see_also": ["get-last(1)", "history-put(1)"],
}

HISTORY_PUT_DOC = {
    "name": "history-put - Write New Version Of An Item",
    "synopsis": (
        "dynamodb-autoincrement history-put ITEM_JSON --counter-table CURRENT_TABLE "
        "--counter-key KEY_JSON --attribute VERSION_ATTR --table HISTORY_TABLE"
    ),
    "description": (
        "Treats the current item's version attribute as the counter. Each put writes "
        "the new version to the history table and replaces the current item, in one "
        "transaction. A current item without a version is first copied into the "
        "history at the initial value."
    ),
    "properties": {
        "Concurrency control": "Optimistic (conditional writes, no locks)",
        "History": "Append-only, one record per version",
        "Retries": "Unbounded, no backoff, on conflict only",
    },
    "guarantees": [
        "Append-only: history records are never overwritten",
        "Current item version always equals the highest history version",
        "Untracked items keep their old state as the first version",
    ],
    "when_to_apply": [
        "Audit trails: every change of a record is retained",
        "Optimistic editing: clients learn which version they wrote",
    ],
    "examples": [
        {
            "title": "Rename widget 42",
            "code": (
                "dynamodb-autoincrement history-put '{\"widgetName\": \"Handy Widget\"}' \\\n"
                "    --counter-table widgets --counter-key '{\"widgetID\": 42}' \\\n"
                "    --attribute version --table widgetHistory"
            ),
        },
    ],
    "failure_modes": [
        "ConditionFailedError: with --dangerously, a concurrent writer won a race",
        "ItemSizeError: item exceeds the 400KB DynamoDB item size limit",
        "MissingKeyError: --counter-key is empty",
    ],
    "see_also": ["history-get(1)", "get-last(1)", "put(1)"],
}

PRIMITIVES_DOCS = {
    "put": PUT_DOC,
    "history-put": HISTORY_PUT_DOC,
}


def get_doc_data(command: str) -> dict[str, Any] | None:
    """
    Retrieve documentation data for a command.

    Args:
        command: Command name (e.g., "put", "history-put")

    Returns:
        Documentation data dictionary or None if not found
    """
    return PRIMITIVES_DOCS.get(command)
