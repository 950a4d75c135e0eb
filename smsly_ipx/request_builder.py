"""
Request Builder
===============
Assembles the gateway ``send`` request for one message part.
"""

from typing import Sequence

from .messaging.models import NULL_VALUE, MessagePart
from .models import SendOptions, SendRequest


def join_recipients(recipients: Sequence[str]) -> str:
    """Destination address field for one or more recipients."""
    return ";".join(recipients)


def build_request(
    *,
    sender: str,
    recipients: Sequence[str],
    part: MessagePart,
    options: SendOptions,
    username: str,
    password: str,
    tariff_class: str,
) -> SendRequest:
    """
    Build the request for a single message part.

    Field values are not validated here; the gateway reports invalid
    fields through its response codes.

    Args:
        sender: Originating address
        recipients: Destination MSISDNs (or aliases)
        part: Message part to send
        options: Send options for the whole message
        username: IPX username
        password: IPX password
        tariff_class: IPX tariff class

    Returns:
        Immutable request record
    """
    return SendRequest(
        originating_address=sender,
        originator_ton=options.originator_ton,
        destination_address=join_recipients(recipients),
        user_data=part.payload,
        user_data_header=part.udh if part.is_concatenated else NULL_VALUE,
        dcs=options.data_coding_scheme,
        relative_validity_time=str(options.validity_time) if options.validity_time else "-1",
        status_report_flags="1" if options.delivery_report else "0",
        tariff_class=tariff_class,
        username=username,
        password=password,
    )
