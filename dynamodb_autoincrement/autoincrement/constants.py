"""
Constants for autoincrement operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

# Default table names
DEFAULT_COUNTER_TABLE_NAME = "autoincrement"
DEFAULT_TABLE_NAME = "widgets"

# Default attribute names
DEFAULT_ATTRIBUTE_NAME = "id"
DEFAULT_VERSION_ATTRIBUTE_NAME = "version"

# Counters start here unless configured otherwise
DEFAULT_INITIAL_VALUE = 1

# DynamoDB limits
MAX_TABLE_NAME_LENGTH = 255
MIN_TABLE_NAME_LENGTH = 3
MAX_TRANSACTION_ITEMS = 100

# Error codes returned by DynamoDB
CODE_CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"
CODE_TRANSACTION_CANCELED = "TransactionCanceledException"
CODE_RESOURCE_NOT_FOUND = "ResourceNotFoundException"
CODE_ACCESS_DENIED = "AccessDeniedException"
CODE_VALIDATION = "ValidationException"
THROTTLING_CODES = frozenset(
    {
        "ProvisionedThroughputExceededException",
        "ThrottlingException",
        "RequestLimitExceeded",
    }
)

# Cancellation reason codes inside a TransactionCanceledException
REASON_CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailed"
REASON_TRANSACTION_CONFLICT = "TransactionConflict"
REASON_NONE = "None"
CONFLICT_REASONS = frozenset({REASON_CONDITIONAL_CHECK_FAILED, REASON_TRANSACTION_CONFLICT})
THROTTLING_REASONS = frozenset({"ProvisionedThroughputExceeded", "ThrottlingError"})
SIZE_REASONS = frozenset({"ItemCollectionSizeLimitExceeded", "ValidationError"})

# CLI exit codes
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2
EXIT_STORE_ERROR = 3
EXIT_CAPACITY = 4
