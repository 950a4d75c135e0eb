"""
SMSLY IPX SDK
=============
Client for the IPX SOAP SMS gateway: sending (with concatenation and
multi-recipient handling), gateway code descriptions and callback decoding.
"""

__version__ = "0.1.0"

# Client
from smsly_ipx.client import IPXClient, parse_partial_success, prune_recipients
from smsly_ipx.config import IPXConfig

# Models
from smsly_ipx.models import (
    DeliveryReport,
    GatewayResponse,
    InboundSMS,
    OriginatorTON,
    SendError,
    SendOptions,
    SendOutcome,
    SendRequest,
    SendResult,
    SendSuccess,
)

# Codes
from smsly_ipx.codes import (
    ResponseCode,
    get_delivery_report_reason_code_description,
    get_delivery_report_status_code_description,
    get_send_reason_code_description,
    get_send_response_code_description,
)

# Callbacks
from smsly_ipx.callbacks import (
    acknowledgement_response,
    get_acknowledgement_text,
    get_delivery_report,
    get_sms,
    read_request_params,
)

# Exceptions
from smsly_ipx.exceptions import (
    AlphabetError,
    ConnectionFailure,
    EncodingError,
    IPXError,
    InvalidOptionError,
    PartialSuccessParseError,
    PreSendError,
    SoapFault,
    TooManySegmentsError,
    TransportFault,
)

__all__ = [
    "__version__",
    # Client
    "IPXClient",
    "IPXConfig",
    "parse_partial_success",
    "prune_recipients",
    # Models
    "DeliveryReport",
    "GatewayResponse",
    "InboundSMS",
    "OriginatorTON",
    "SendError",
    "SendOptions",
    "SendOutcome",
    "SendRequest",
    "SendResult",
    "SendSuccess",
    # Codes
    "ResponseCode",
    "get_delivery_report_reason_code_description",
    "get_delivery_report_status_code_description",
    "get_send_reason_code_description",
    "get_send_response_code_description",
    # Callbacks
    "acknowledgement_response",
    "get_acknowledgement_text",
    "get_delivery_report",
    "get_sms",
    "read_request_params",
    # Exceptions
    "AlphabetError",
    "ConnectionFailure",
    "EncodingError",
    "IPXError",
    "InvalidOptionError",
    "PartialSuccessParseError",
    "PreSendError",
    "SoapFault",
    "TooManySegmentsError",
    "TransportFault",
]
