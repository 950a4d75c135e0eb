"""
IPX Code Descriptions
=====================
Descriptions for the numeric codes returned by the IPX gateway, both on
send responses and in delivery reports.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Any, Mapping


class ResponseCode(IntEnum):
    """Send response codes the client acts on."""
    SUCCESS = 0
    PARTIAL_SUCCESS = 50


UNKNOWN_RESPONSE_CODE = "[UNKNOWN RESPONSE CODE, CHECK IPX MANUAL]"
UNKNOWN_REASON_CODE = "[UNKNOWN REASON CODE, CHECK IPX MANUAL]"
UNKNOWN_STATUS_CODE = "[UNKNOWN STATUS CODE, CHECK IPX MANUAL]"


SEND_RESPONSE_CODES: Mapping[int, str] = MappingProxyType({
    0: "Successfully executed.",
    1: "Incorrect username or password or Service Provider is barred by IPX.",
    2: "The Consumer is blocked by IPX, i.e. blocked for premium services or this specific service.",
    3: "The operation is blocked for the Service Provider.",
    4: "The Consumer is unknown to IPX. Or if alias was used in the request; alias not found.",
    5: "The Consumer has blocked this service in IPX.",
    6: "The originating address is not supported by account, e.g. the Short code is not provisioned for the destination operator.",
    7: "The alpha originating address is not supported by account.",
    8: "The MSISDN originating address not supported by account.",
    9: "GSM extended not supported by account.",
    10: "Unicode not supported by account.",
    11: "Status report not supported by account.",
    12: "The required capability (other than the above) for sending the message is not supported.",
    13: "IPX could not route the SMS message to an Operator.",
    14: "The Service Provider is sending the SMS messages to IPX too fast.",
    15: "The Operator is currently receiving too many SMS messages.",
    16: "Protocol ID not supported by account.",
    17: "The Service Provider is exceeding the charging frequency limit provided to IPX during the subscription setup. Only applicable for subscription references.",
    50: "Partial success when sending an SMS message to multiple recipients. The response message field contains a list of response codes where the position of the response code correlates to the position of the MSISDN in the request.",
    99: "Other IPX error, contact IPX support for more information.",
    100: "The destination address (MSISDN, or alias) is invalid.",
    101: "The tariff class is invalid, or not registered by IPX.",
    102: "The reference ID is invalid, maybe the reference ID is already used, too old or unknown.",
    103: "The account name is invalid.",
    104: "The service category is invalid.",
    105: "The service meta data is invalid.",
    106: "The originating address (short code) is invalid.",
    107: "The alphanumeric (including MSISDN) originating address is invalid.",
    108: "The validity time is invalid.",
    109: "The delivery time is invalid.",
    110: "The user data, i.e. the SMS message, is invalid.",
    111: "The SMS message length is invalid.",
    112: "The user data header is invalid.",
    113: "The DCS is invalid.",
    114: "The PID is invalid.",
    115: "The status report flags are invalid.",
    116: "The originator TON is invalid.",
    117: "The VAT is invalid or not supported by the destination Operator.",
    118: "The campaign name is invalid.",
    119: "The service name is invalid.",
    200: "Operator integration error, reason code may apply.",
    201: "Operation failed due to communication error with the Operator, The operation failed.",
    202: "Operation failed due to communication error with the Operator, read timeout during operation request. The operation status unknown.",
    299: "Other Operator integration error.",
})

SEND_REASON_CODES: Mapping[int, str] = MappingProxyType({
    0: "Reason code is not applicable.",
    1000: "Response from the Operator, the Operator does not recognize the Consumer.",
    1001: "Response from the Operator, the Consumer is blocked (for these types of services).",
    1002: "Response from the Operator, the Consumer cannot fulfil the purchase.",
    1003: "Response from the Operator, the operation is rejected.",
    1005: "Response from the Operator, the operation is rejected.",
    1006: "The requested charging operation cannot be performed by IPX.",
    1007: "Response from the Operator, the subscriber is blocked for this service.",
    1008: "Response from the Operator, the subscriber must register at the Operator to enable the service.",
    1009: "Response from the Operator, the subscription is terminated (applicable in case the reference ID refers to a subscription).",
    1010: "Response from the Operator, the Consumer has been blocked by a parental block.",
    1011: "Response from the Operator, the Consumer’s accumulated amount spent has exceeded the Operator limit. .",
    1012: "Response from the Operator, the Consumer’s accumulated amount spent has exceeded the Consumer specific limit.",
    1013: "Response from the Operator, in case the Operator provides alternate payment methods for the Consumer (e.g. credit card), this alternate method failed.",
    1014: "Response from the Operator, the charging event was rejected by the Operator due to too frequent charging events.",
    1015: "Response from Operator, the charging event violates the operator constraints.",
    1016: "Response from the Operator, the subscriber is temporary blocked for this service.",
})

DELIVERY_STATUS_CODES: Mapping[int, str] = MappingProxyType({
    0: "Delivered",
    2: "Deleted",
})

DELIVERY_REASON_CODES: Mapping[int, str] = MappingProxyType({
    100: "Expired.",
    101: "Rejected.",
    102: "Format error.",
    103: "Other error.",
    110: "Subscriber unknown.",
    111: "Subscriber barred.",
    112: "Subscriber not provisioned.",
    113: "Subscriber unavailable.",
    120: "SMSC failure.",
    121: "SMSC congestion.",
    122: "SMSC roaming.",
    130: "Handset error.",
    131: "Handset memory exceeded .",
    140: "Charging error.",
    141: "Charging balance too low.",
})


def _describe(code: Any, table: Mapping[int, str], unknown: str) -> str:
    try:
        if isinstance(code, (int, float)):
            number = int(code)
        else:
            number = int(str(code).strip())
    except (TypeError, ValueError, OverflowError):
        return ""
    return table.get(number, unknown)


def get_send_response_code_description(code: Any) -> str:
    """
    Describe a send response code.

    Args:
        code: Response code, as an int or numeric string

    Returns:
        Description, the unknown-code sentinel, or "" for non-numeric input
    """
    return _describe(code, SEND_RESPONSE_CODES, UNKNOWN_RESPONSE_CODE)


def get_send_reason_code_description(code: Any) -> str:
    """Describe a send reason code."""
    return _describe(code, SEND_REASON_CODES, UNKNOWN_REASON_CODE)


def get_delivery_report_status_code_description(code: Any) -> str:
    """Describe a delivery report status code."""
    return _describe(code, DELIVERY_STATUS_CODES, UNKNOWN_STATUS_CODE)


def get_delivery_report_reason_code_description(code: Any) -> str:
    """Describe a delivery report reason code."""
    return _describe(code, DELIVERY_REASON_CODES, UNKNOWN_REASON_CODE)
