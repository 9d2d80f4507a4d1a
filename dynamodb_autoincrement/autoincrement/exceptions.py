"""
Custom exceptions for autoincrement operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""


class AutoIncrementError(Exception):
    """Base exception for autoincrement operations."""

    pass


class ConditionFailedError(AutoIncrementError):
    """Conditional put failed."""

    pass


class TransactionConflictError(AutoIncrementError):
    """Transaction was cancelled because a condition failed or another transaction won.

    The writer recovers from this by recomputing the write set from fresh reads.
    """

    pass


class CapacityError(AutoIncrementError):
    """DynamoDB rejected the request for size or throughput reasons."""

    pass


class AWSThrottlingError(CapacityError):
    """DynamoDB throttling occurred."""

    pass


class ItemSizeError(CapacityError):
    """Item or item collection exceeds DynamoDB size limits."""

    pass


class MissingKeyError(AutoIncrementError):
    """A key attribute needed to address a record is missing."""

    pass


class AWSPermissionError(AutoIncrementError):
    """AWS permission denied."""

    pass


class TableNotFoundError(AutoIncrementError):
    """DynamoDB table does not exist."""

    pass
