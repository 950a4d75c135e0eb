"""
Messaging Models
================
Character sets and message part model used for segmentation.
"""

from dataclasses import dataclass
from typing import Optional


# Printable ASCII plus the GSM-7 characters accepted by the gateway
GSM7_ALLOWED = frozenset(
    [chr(code) for code in range(0x20, 0x7F)]
    + list("£¥èéùìòÇ\rØø\nÅåΔ_ΦΓΛΩΠΨΣΘΞ\x1bÆæßÉ ¤¡ÄÖÑÜ§¿äöñüà\x0c€")
)

# GSM-7 extension table characters (occupy two positions)
GSM7_EXTENDED = frozenset("\x0c^{}\\[~]|€")

SINGLE_MESSAGE_LENGTH = 160
UDH_RESERVED_LENGTH = 7
MAX_MESSAGE_PARTS = 5

# 8-bit concatenation header: UDHL, IEI, IEDL
UDH_PREFIX = "050003"
UDH_SEQUENCE_OFFSET = 10

# Placeholder for request fields this client leaves unset
NULL_VALUE = "#NULL#"


@dataclass(frozen=True)
class MessagePart:
    """One physical SMS of a (possibly concatenated) message."""
    sequence: int
    payload: str
    udh: Optional[str] = None

    @property
    def is_concatenated(self) -> bool:
        return self.udh is not None
