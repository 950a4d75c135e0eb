"""
Message Encoding and Segmentation
=================================
GSM-7 validation and concatenated SMS splitting.
"""

from .models import (
    GSM7_ALLOWED,
    GSM7_EXTENDED,
    MAX_MESSAGE_PARTS,
    NULL_VALUE,
    MessagePart,
)
from .encoding import ensure_utf8, is_gsm7, validate_gsm7, count_extended_characters
from .segmentation import (
    build_udh,
    hex_byte,
    max_segment_length,
    segment_message,
    split_message,
)

__all__ = [
    # Models
    "GSM7_ALLOWED",
    "GSM7_EXTENDED",
    "MAX_MESSAGE_PARTS",
    "NULL_VALUE",
    "MessagePart",
    # Encoding
    "ensure_utf8",
    "is_gsm7",
    "validate_gsm7",
    "count_extended_characters",
    # Segmentation
    "build_udh",
    "hex_byte",
    "max_segment_length",
    "segment_message",
    "split_message",
]
