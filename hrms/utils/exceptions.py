from enum import Enum

from fastapi import status


class ErrorKind(str, Enum):
    INVALID_ID = "invalid_id"
    INVALID_BODY = "invalid_body"
    NOT_MATCHED = "not_matched"
    NOT_FOUND = "not_found"
    STORE_FAILURE = "store_failure"


ERROR_STATUS = {
    ErrorKind.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_BODY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_MATCHED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class HrmsError(Exception):
    """Base error for employee operations, rendered at the HTTP boundary"""

    kind = ErrorKind.STORE_FAILURE
    default_message = "Unexpected database error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return ERROR_STATUS[self.kind]


class InvalidIdError(HrmsError):
    kind = ErrorKind.INVALID_ID
    default_message = "Invalid employee ID"


class InvalidBodyError(HrmsError):
    kind = ErrorKind.INVALID_BODY
    default_message = "Invalid employee payload"


class NotMatchedError(HrmsError):
    kind = ErrorKind.NOT_MATCHED
    default_message = "No employee matches the given ID"


class NotFoundError(HrmsError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Employee not found"


class StoreError(HrmsError):
    kind = ErrorKind.STORE_FAILURE


class DatabaseConnectionError(Exception):
    """Raised when MongoDB cannot be reached at startup"""
