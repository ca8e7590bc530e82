# statwatch/core/exceptions.py

class StatwatchError(Exception):
    """Base exception for all application errors"""
    pass

class ConfigurationError(StatwatchError):
    """Invalid probe configuration"""
    pass

class FetchError(StatwatchError):
    """Base exception for a failed poll (request, response or body)"""
    pass

class TransportError(FetchError):
    """Request could not complete (DNS, connection refused, timeout)"""
    pass

class UnexpectedStatus(FetchError):
    """Server answered with something other than 200 OK"""

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"unexpected status: {status}")

class ReadError(FetchError):
    """Response body could not be read"""
    pass

class FormatError(FetchError):
    """Body does not hold the expected number of fields"""

    def __init__(self, field_count: int, expected: int):
        self.field_count = field_count
        self.expected = expected
        super().__init__(
            f"invalid data format: expected {expected} fields, got {field_count}"
        )

class ParseError(FetchError):
    """A field could not be converted to its numeric type"""

    def __init__(self, field: str, value: str, reason: str = ""):
        self.field = field
        self.value = value
        message = f"failed to parse {field}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
