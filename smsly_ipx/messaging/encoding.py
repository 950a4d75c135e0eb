"""
Encoding Validation
===================
UTF-8 and GSM-7 checks run before a message is sent.
"""

from typing import Union

from ..exceptions import AlphabetError, EncodingError
from .models import GSM7_ALLOWED, GSM7_EXTENDED


def ensure_utf8(message: Union[str, bytes]) -> str:
    """
    Return the message as text, verifying it is well-formed UTF-8.

    Args:
        message: Message content, raw bytes or text

    Returns:
        Decoded message text

    Raises:
        EncodingError: If the bytes are not UTF-8 or the text holds lone surrogates
    """
    try:
        if isinstance(message, bytes):
            return message.decode("utf-8")
        message.encode("utf-8")
    except UnicodeError as e:
        raise EncodingError() from e
    return message


def is_gsm7(message: str) -> bool:
    """Check that every character is sendable with the GSM default alphabet."""
    return all(char in GSM7_ALLOWED for char in message)


def validate_gsm7(message: str) -> None:
    """
    Validate a message against the GSM-7 alphabet.

    Raises:
        AlphabetError: If any character falls outside the alphabet
    """
    invalid = "".join(sorted({char for char in message if char not in GSM7_ALLOWED}))
    if invalid:
        raise AlphabetError(invalid=invalid)


def count_extended_characters(message: str) -> int:
    """
    Count characters from the GSM-7 extension table.

    Each one is sent as an escape plus the character, so it takes two
    positions in a segment.
    """
    return sum(1 for char in message if char in GSM7_EXTENDED)
