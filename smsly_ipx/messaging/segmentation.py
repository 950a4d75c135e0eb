"""
Message Segmentation
====================
Splitting of long messages into concatenated parts with an 8-bit UDH.
"""

import random
from typing import List, Optional

from ..exceptions import TooManySegmentsError
from .encoding import count_extended_characters
from .models import (
    MAX_MESSAGE_PARTS,
    SINGLE_MESSAGE_LENGTH,
    UDH_PREFIX,
    UDH_RESERVED_LENGTH,
    UDH_SEQUENCE_OFFSET,
    MessagePart,
)


def hex_byte(value: int) -> str:
    """Format a value as a zero-padded, lowercase two digit hex byte."""
    return format(value, "02x")


def max_segment_length(message: str) -> int:
    """
    Maximum characters that fit a single, unconcatenated SMS.

    Args:
        message: Message content

    Returns:
        160 minus the number of extended characters
    """
    return SINGLE_MESSAGE_LENGTH - count_extended_characters(message)


def split_message(message: str) -> List[str]:
    """
    Split a message into the payloads of its parts.

    Lengths are counted in code points. When the message does not fit a
    single SMS, room for the UDH is reserved in every part.

    Args:
        message: Message content

    Returns:
        Ordered list of payloads, joining back to the original message

    Raises:
        TooManySegmentsError: If the extended characters leave no room for
            a payload once the UDH is reserved
    """
    max_len = max_segment_length(message)
    if len(message) <= max_len:
        return [message]

    max_len -= UDH_RESERVED_LENGTH
    if max_len < 1:
        # At best one character per part
        raise TooManySegmentsError(parts=len(message), limit=MAX_MESSAGE_PARTS)
    return [message[i:i + max_len] for i in range(0, len(message), max_len)]


def build_udh(reference: int, count: int, sequence: int = 1) -> str:
    """
    Build a concatenation User Data Header.

    Args:
        reference: Reference shared by all parts (1-255)
        count: Total number of parts
        sequence: 1-based number of this part

    Returns:
        Hex encoded header, e.g. ``050003a70301``
    """
    if not 1 <= reference <= 255:
        raise ValueError(f"UDH reference must be in 1..255, got {reference}")
    return UDH_PREFIX + hex_byte(reference) + hex_byte(count) + hex_byte(sequence)


def with_sequence(udh: str, sequence: int) -> str:
    """Return the header with only its sequence byte replaced."""
    return udh[:UDH_SEQUENCE_OFFSET] + hex_byte(sequence) + udh[UDH_SEQUENCE_OFFSET + 2:]


def segment_message(
    message: str,
    rng: Optional[random.Random] = None,
    max_parts: int = MAX_MESSAGE_PARTS,
) -> List[MessagePart]:
    """
    Turn a validated message into the parts to send.

    Args:
        message: GSM-7 validated message content
        rng: Random source for the UDH reference
        max_parts: Maximum number of concatenated parts

    Returns:
        Ordered message parts; a single part carries no UDH

    Raises:
        TooManySegmentsError: If more than ``max_parts`` parts are needed
    """
    payloads = split_message(message)

    if len(payloads) > max_parts:
        raise TooManySegmentsError(parts=len(payloads), limit=max_parts)

    if len(payloads) == 1:
        return [MessagePart(sequence=1, payload=payloads[0])]

    reference = (rng or random).randint(1, 255)
    udh = build_udh(reference, len(payloads))
    return [
        MessagePart(sequence=i, payload=payload, udh=with_sequence(udh, i))
        for i, payload in enumerate(payloads, start=1)
    ]
