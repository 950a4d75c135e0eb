"""
IPX Exceptions
==============
Exception classes for message preparation and gateway transport.
"""

from typing import Optional


class IPXError(Exception):
    """Base exception for all IPX client errors."""
    pass


class PreSendError(IPXError):
    """Raised when a message is rejected before contacting the gateway."""
    pass


class EncodingError(PreSendError):
    """Raised when the message is not valid UTF-8."""

    def __init__(self, message: str = "Message does not look like UTF-8"):
        super().__init__(message)


class AlphabetError(PreSendError):
    """Raised when the message contains characters outside GSM-7."""

    def __init__(self, message: str = "Message contains invalid characters", invalid: str = ""):
        super().__init__(message)
        self.invalid = invalid


class TooManySegmentsError(PreSendError):
    """Raised when a message would need more concatenated parts than allowed."""

    def __init__(self, parts: int, limit: int):
        super().__init__("Max %d concatenated messages" % limit)
        self.parts = parts
        self.limit = limit


class PartialSuccessParseError(IPXError):
    """Raised when a partial success response carries no per-recipient codes."""

    def __init__(self, response_message: str):
        super().__init__(f"Cannot parse partial success response: {response_message!r}")
        self.response_message = response_message


class TransportFault(IPXError):
    """Base exception for gateway transport failures."""

    def __init__(self, fault_code: str, fault_string: str, status_code: Optional[int] = None):
        self.fault_code = fault_code
        self.fault_string = fault_string
        self.status_code = status_code
        super().__init__(f"[{fault_code}] {fault_string}")


class SoapFault(TransportFault):
    """Raised when the gateway answers with a SOAP Fault."""
    pass


class ConnectionFailure(TransportFault):
    """Raised when the gateway is unreachable, times out or answers with a bad HTTP status."""
    pass


class InvalidOptionError(PreSendError):
    """Raised when a send option cannot be converted to its gateway type."""

    def __init__(self, option: str, value):
        super().__init__(f"Invalid send option {option}: {value!r}")
        self.option = option
        self.value = value
