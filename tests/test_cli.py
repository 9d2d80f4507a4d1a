"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from dynamodb_autoincrement.autoincrement.commands import counter_commands, history_commands
from dynamodb_autoincrement.autoincrement.core.memory_client import MemoryClient
from dynamodb_autoincrement.cli import main

COUNTER_ARGS = ["--counter-table", "autoincrement", "--counter-key", '{"tableName": "widgets"}']
COUNTER_PUT_ARGS = [*COUNTER_ARGS, "--attribute", "widgetID", "--table", "widgets"]
HISTORY_ARGS = [
    "--counter-table",
    "widgets",
    "--counter-key",
    '{"widgetID": 42}',
    "--table",
    "widgetHistory",
]


@pytest.fixture
def store(monkeypatch):
    store = MemoryClient(
        {
            "autoincrement": ["tableName"],
            "widgets": ["widgetID"],
            "widgetHistory": ["widgetID", "version"],
        }
    )
    monkeypatch.setattr(counter_commands, "DynamoDBClient", lambda *args, **kwargs: store)
    monkeypatch.setattr(history_commands, "DynamoDBClient", lambda *args, **kwargs: store)
    return store


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(main, list(args))


class TestPut:
    def test_issues_consecutive_ids(self, runner, store):
        first = invoke(runner, "put", '{"widgetName": "spoon"}', *COUNTER_PUT_ARGS)
        second = invoke(runner, "put", '{"widgetName": "fork"}', *COUNTER_PUT_ARGS)

        assert first.exit_code == 0, first.output
        assert json.loads(first.stdout) == {"table": "widgets", "attribute": "widgetID", "value": 1}
        assert json.loads(second.stdout)["value"] == 2
        assert store.get_item("widgets", {"widgetID": 2}) == {"widgetName": "fork", "widgetID": 2}

    def test_text_output(self, runner, store):
        result = invoke(runner, "put", "{}", *COUNTER_PUT_ARGS, "--text")

        assert result.exit_code == 0
        assert "widgets.widgetID = 1" in result.stdout

    def test_initial_value(self, runner, store):
        result = invoke(runner, "put", "{}", *COUNTER_PUT_ARGS, "--initial-value", "100")

        assert json.loads(result.stdout)["value"] == 100

    def test_invalid_json_is_a_usage_error(self, runner, store):
        result = invoke(runner, "put", "{not json", *COUNTER_PUT_ARGS)

        assert result.exit_code == 2

    def test_missing_counter_key_is_a_usage_error(self, runner, store):
        result = invoke(runner, "put", "{}", "--table", "widgets")

        assert result.exit_code == 2

    def test_missing_table_is_a_store_error(self, runner, store):
        result = invoke(runner, "put", "{}", *COUNTER_ARGS, "--table", "gadgets")

        assert result.exit_code == 3

    def test_doc(self, runner):
        result = invoke(runner, "put", "--doc")

        assert result.exit_code == 0
        assert "GUARANTEES" in result.output


class TestGetLast:
    def test_nothing_issued(self, runner, store):
        result = invoke(runner, "get-last", *COUNTER_ARGS, "--attribute", "widgetID")

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"attribute": "widgetID", "value": None}

    def test_after_put(self, runner, store):
        invoke(runner, "put", "{}", *COUNTER_PUT_ARGS)
        invoke(runner, "put", "{}", *COUNTER_PUT_ARGS)

        result = invoke(runner, "get-last", *COUNTER_ARGS, "--attribute", "widgetID")

        assert json.loads(result.stdout)["value"] == 2


class TestHistory:
    def test_put_then_get(self, runner, store):
        first = invoke(runner, "history-put", '{"widgetName": "Handy Widget"}', *HISTORY_ARGS)
        second = invoke(runner, "history-put", '{"widgetName": "Handier Widget"}', *HISTORY_ARGS)

        assert first.exit_code == 0, first.output
        assert json.loads(first.stdout) == {"key": {"widgetID": 42}, "version": 1}
        assert json.loads(second.stdout)["version"] == 2

        current = invoke(runner, "history-get", *HISTORY_ARGS)
        old = invoke(runner, "history-get", *HISTORY_ARGS, "--version", "1")

        assert json.loads(current.stdout) == {
            "widgetID": 42,
            "version": 2,
            "widgetName": "Handier Widget",
        }
        assert json.loads(old.stdout)["widgetName"] == "Handy Widget"

    def test_missing_version(self, runner, store):
        invoke(runner, "history-put", "{}", *HISTORY_ARGS)

        result = invoke(runner, "history-get", *HISTORY_ARGS, "--version", "5")

        assert result.exit_code == 1

    def test_missing_arguments(self, runner, store):
        result = invoke(runner, "history-put", "{}", "--counter-key", '{"widgetID": 42}')

        assert result.exit_code == 2

    def test_get_last_reads_current_version(self, runner, store):
        invoke(runner, "history-put", "{}", *HISTORY_ARGS)

        result = invoke(
            runner,
            "get-last",
            "--counter-table",
            "widgets",
            "--counter-key",
            '{"widgetID": 42}',
            "--attribute",
            "version",
        )

        assert json.loads(result.stdout) == {"attribute": "version", "value": 1}

    def test_doc(self, runner):
        result = invoke(runner, "history-put", "--doc")

        assert result.exit_code == 0
        assert "GUARANTEES" in result.output
