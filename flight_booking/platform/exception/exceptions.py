class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class TransactionStateError(CustomBaseError):
    """Raised when transactional code is driven out of order (a caller defect, never retried)"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class StorageError(CustomBaseError):
    """Storage layer failure that aborted the current transaction"""

    retryable = False

    def __init__(self, message: str, status_code: int = 503) -> None:
        super().__init__(message, status_code)


class SerializationConflictError(StorageError):
    """The store refused to serialize this transaction against a concurrent one.

    The whole check-and-write sequence may be re-run by the caller.
    """

    retryable = True

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)
