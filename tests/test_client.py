"""Tests for the DynamoDB client wrapper against stubbed AWS responses."""

from decimal import Decimal

import boto3
import pytest
from botocore.stub import Stubber

from dynamodb_autoincrement.autoincrement.core.client import DynamoDBClient
from dynamodb_autoincrement.autoincrement.core.conditions import attribute_absent, attribute_equals
from dynamodb_autoincrement.autoincrement.core.counter_operations import DynamoDBAutoIncrement
from dynamodb_autoincrement.autoincrement.exceptions import (
    AutoIncrementError,
    AWSPermissionError,
    AWSThrottlingError,
    ConditionFailedError,
    ItemSizeError,
    TableNotFoundError,
    TransactionConflictError,
)
from dynamodb_autoincrement.autoincrement.models import AutoIncrementConfig, ConditionalPut

NOT_EXISTS = {
    "ConditionExpression": "attribute_not_exists(#n0)",
    "ExpressionAttributeNames": {"#n0": "widgetID"},
}


def equals(value):
    return {
        "ConditionExpression": "#n0 = :v0",
        "ExpressionAttributeNames": {"#n0": "widgetID"},
        "ExpressionAttributeValues": {":v0": {"N": str(value)}},
    }


@pytest.fixture
def stubber():
    boto_client = boto3.client(
        "dynamodb",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(boto_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def client(stubber):
    return DynamoDBClient(client=stubber.client)


def cancellation(stubber, *codes):
    stubber.add_client_error(
        "transact_write_items",
        service_error_code="TransactionCanceledException",
        service_message="Transaction cancelled",
        modeled_fields={"CancellationReasons": [{"Code": code} for code in codes]},
    )


class TestGetItem:
    def test_consistent_projected_read(self, client, stubber):
        stubber.add_response(
            "get_item",
            {"Item": {"tableName": {"S": "widgets"}, "widgetID": {"N": "3"}}},
            {
                "TableName": "autoincrement",
                "Key": {"tableName": {"S": "widgets"}},
                "ConsistentRead": True,
                "ProjectionExpression": "#a0",
                "ExpressionAttributeNames": {"#a0": "widgetID"},
            },
        )

        item = client.get_item("autoincrement", {"tableName": "widgets"}, ["widgetID"])

        assert item == {"tableName": "widgets", "widgetID": Decimal(3)}

    def test_missing_item(self, client, stubber):
        stubber.add_response(
            "get_item",
            {},
            {"TableName": "widgets", "Key": {"widgetID": {"N": "1"}}, "ConsistentRead": True},
        )

        assert client.get_item("widgets", {"widgetID": 1}) is None

    def test_missing_table(self, client, stubber):
        stubber.add_client_error("get_item", service_error_code="ResourceNotFoundException")

        with pytest.raises(TableNotFoundError, match="'widgets'"):
            client.get_item("widgets", {"widgetID": 1})


class TestPutItem:
    def test_conditional_put(self, client, stubber):
        stubber.add_response(
            "put_item",
            {},
            {
                "TableName": "widgets",
                "Item": {"widgetID": {"N": "1"}, "name": {"S": "spoon"}},
                **NOT_EXISTS,
            },
        )

        client.put_item("widgets", {"widgetID": 1, "name": "spoon"}, attribute_absent("widgetID"))

    def test_condition_failed(self, client, stubber):
        stubber.add_client_error("put_item", service_error_code="ConditionalCheckFailedException")

        with pytest.raises(ConditionFailedError):
            client.put_item("widgets", {"widgetID": 1}, attribute_absent("widgetID"))

    @pytest.mark.parametrize(
        "code,message,error",
        [
            ("ProvisionedThroughputExceededException", "", AWSThrottlingError),
            ("ThrottlingException", "", AWSThrottlingError),
            ("ValidationException", "Item size has exceeded the maximum allowed size", ItemSizeError),
            ("AccessDeniedException", "", AWSPermissionError),
            ("InternalServerError", "", AutoIncrementError),
        ],
    )
    def test_error_mapping(self, client, stubber, code, message, error):
        stubber.add_client_error("put_item", service_error_code=code, service_message=message)

        with pytest.raises(error):
            client.put_item("widgets", {"widgetID": 1})

    def test_other_validation_errors_are_not_size_errors(self, client, stubber):
        stubber.add_client_error(
            "put_item",
            service_error_code="ValidationException",
            service_message="One or more parameter values were invalid",
        )

        with pytest.raises(AutoIncrementError) as excinfo:
            client.put_item("widgets", {"widgetID": 1})
        assert not isinstance(excinfo.value, ItemSizeError)


class TestTransactWriteItems:
    def test_sends_all_puts_in_one_transaction(self, client, stubber):
        stubber.add_response(
            "transact_write_items",
            {},
            {
                "TransactItems": [
                    {
                        "Put": {
                            "TableName": "autoincrement",
                            "Item": {"tableName": {"S": "widgets"}, "widgetID": {"N": "5"}},
                            **equals(4),
                        }
                    },
                    {
                        "Put": {
                            "TableName": "widgets",
                            "Item": {"widgetID": {"N": "5"}},
                            **NOT_EXISTS,
                        }
                    },
                ]
            },
        )

        client.transact_write_items(
            [
                ConditionalPut(
                    "autoincrement",
                    {"tableName": "widgets", "widgetID": 5},
                    attribute_equals("widgetID", 4),
                ),
                ConditionalPut("widgets", {"widgetID": 5}, attribute_absent("widgetID")),
            ]
        )

    @pytest.mark.parametrize(
        "codes",
        [
            ("ConditionalCheckFailed", "None"),
            ("None", "TransactionConflict"),
            (),
        ],
    )
    def test_conflicts(self, client, stubber, codes):
        cancellation(stubber, *codes)

        with pytest.raises(TransactionConflictError):
            client.transact_write_items([ConditionalPut("widgets", {"widgetID": 1})])

    def test_throttled_transaction(self, client, stubber):
        cancellation(stubber, "None", "ThrottlingError")

        with pytest.raises(AWSThrottlingError):
            client.transact_write_items([ConditionalPut("widgets", {"widgetID": 1})])

    def test_oversized_transaction(self, client, stubber):
        cancellation(stubber, "ValidationError", "None")

        with pytest.raises(ItemSizeError):
            client.transact_write_items([ConditionalPut("widgets", {"widgetID": 1})])

    def test_rejects_empty_transaction(self, client):
        with pytest.raises(AutoIncrementError, match="at least one"):
            client.transact_write_items([])

    def test_rejects_oversized_transaction(self, client):
        puts = [ConditionalPut("widgets", {"widgetID": idx}) for idx in range(101)]

        with pytest.raises(AutoIncrementError, match="cannot exceed"):
            client.transact_write_items(puts)


class TestAutoIncrementRequests:
    @pytest.fixture
    def autoincrement(self, client):
        return DynamoDBAutoIncrement(
            AutoIncrementConfig(
                client=client,
                counter_table_name="autoincrement",
                counter_table_key={"tableName": "widgets"},
                attribute_name="widgetID",
                table_name="widgets",
            )
        )

    def expect_read(self, stubber, counter):
        response = {}
        if counter is not None:
            response = {"Item": {"widgetID": {"N": str(counter)}}}
        stubber.add_response(
            "get_item",
            response,
            {
                "TableName": "autoincrement",
                "Key": {"tableName": {"S": "widgets"}},
                "ConsistentRead": True,
                "ProjectionExpression": "#a0",
                "ExpressionAttributeNames": {"#a0": "widgetID"},
            },
        )

    def write_set(self, counter, condition):
        return {
            "TransactItems": [
                {
                    "Put": {
                        "TableName": "autoincrement",
                        "Item": {"tableName": {"S": "widgets"}, "widgetID": {"N": str(counter)}},
                        **condition,
                    }
                },
                {
                    "Put": {
                        "TableName": "widgets",
                        "Item": {"widgetName": {"S": "spoon"}, "widgetID": {"N": str(counter)}},
                        **NOT_EXISTS,
                    }
                },
            ]
        }

    def test_first_put(self, autoincrement, stubber):
        self.expect_read(stubber, None)
        stubber.add_response("transact_write_items", {}, self.write_set(1, NOT_EXISTS))

        assert autoincrement.put({"widgetName": "spoon"}) == 1

    def test_retries_after_losing_a_race(self, autoincrement, stubber):
        self.expect_read(stubber, None)
        cancellation(stubber, "ConditionalCheckFailed", "None")
        self.expect_read(stubber, 1)
        stubber.add_response("transact_write_items", {}, self.write_set(2, equals(1)))

        assert autoincrement.put({"widgetName": "spoon"}) == 2

    def test_fatal_errors_are_not_retried(self, autoincrement, stubber):
        self.expect_read(stubber, 7)
        cancellation(stubber, "None", "ValidationError")

        with pytest.raises(ItemSizeError):
            autoincrement.put({"widgetName": "spoon"})
