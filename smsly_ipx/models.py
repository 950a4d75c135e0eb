"""
IPX Models
==========
Send options, gateway request/response records, per-part results and
inbound callback records.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidOptionError
from .messaging.models import NULL_VALUE


def _int_option(options: Mapping[str, Any], key: str) -> Optional[int]:
    value = options.get(key)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidOptionError(key, value)


class OriginatorTON(IntEnum):
    """Type of number of the originating address."""
    SHORT_NUMBER = 0
    ALPHANUMERIC = 1
    MSISDN = 2


class DataCodingScheme(IntEnum):
    """DCS values selected by the client when no override is given."""
    FLASH = 16
    GSM_DEFAULT = 17


@dataclass(frozen=True)
class SendOptions:
    """Per-call send options."""
    originator_ton: int = OriginatorTON.ALPHANUMERIC
    dcs: Optional[int] = None
    flash: bool = False
    delivery_report: bool = False
    validity_time: Optional[int] = None  # Relative, in minutes

    @classmethod
    def from_dict(cls, options: Optional[Mapping[str, Any]]) -> "SendOptions":
        """
        Build options from the gateway style option keys.

        Recognized keys: ``originatorTON``, ``DCS``, ``flash``,
        ``delivery_report`` and ``validity_time``.

        Raises:
            InvalidOptionError: If a numeric option is not a number
        """
        options = options or {}
        ton = _int_option(options, "originatorTON")
        dcs = _int_option(options, "DCS")
        validity = _int_option(options, "validity_time") if options.get("validity_time") else None
        return cls(
            originator_ton=ton if ton is not None else OriginatorTON.ALPHANUMERIC,
            dcs=dcs,
            flash=bool(options.get("flash", False)),
            delivery_report=bool(options.get("delivery_report", False)),
            validity_time=validity,
        )

    @property
    def data_coding_scheme(self) -> int:
        if self.dcs is not None:
            return self.dcs
        if self.flash:
            return DataCodingScheme.FLASH
        return DataCodingScheme.GSM_DEFAULT


class SendRequest(BaseModel):
    """A single ``send`` request as posted to the gateway."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    correlation_id: str = Field(NULL_VALUE, alias="correlationId")
    originating_address: str = Field(alias="originatingAddress")
    originator_ton: int = Field(OriginatorTON.ALPHANUMERIC, alias="originatorTON")
    destination_address: str = Field(alias="destinationAddress")
    user_data: str = Field(alias="userData")
    user_data_header: str = Field(NULL_VALUE, alias="userDataHeader")
    dcs: int = Field(DataCodingScheme.GSM_DEFAULT, alias="DCS")
    pid: str = Field("-1", alias="PID")
    relative_validity_time: str = Field("-1", alias="relativeValidityTime")
    delivery_time: str = Field(NULL_VALUE, alias="deliveryTime")
    status_report_flags: str = Field("0", alias="statusReportFlags")
    account_name: str = Field(NULL_VALUE, alias="accountName")
    tariff_class: str = Field("SEK0", alias="tariffClass")
    vat: str = Field("-1", alias="VAT")
    reference_id: str = Field(NULL_VALUE, alias="referenceId")
    service_name: str = Field(NULL_VALUE, alias="serviceName")
    service_category: str = Field(NULL_VALUE, alias="serviceCategory")
    service_meta_data: str = Field(NULL_VALUE, alias="serviceMetaData")
    campaign_name: str = Field(NULL_VALUE, alias="campaignName")
    username: str = Field(alias="username")
    password: str = Field(alias="password", repr=False)

    def to_wire(self) -> Dict[str, str]:
        """Return the request fields by gateway name, in envelope order."""
        return {
            key: format(value, "d") if isinstance(value, int) else str(value)
            for key, value in self.model_dump(by_alias=True).items()
        }


class GatewayResponse(BaseModel):
    """Response of a ``send`` call."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    response_code: int = Field(alias="responseCode")
    response_message: str = Field("", alias="responseMessage")
    reason_code: int = Field(0, alias="reasonCode")
    temporary_error: bool = Field(False, alias="temporaryError")
    billing_status: int = Field(0, alias="billingStatus")
    vat: float = Field(0.0, alias="VAT")
    message_id: str = Field("", alias="messageId")
    correlation_id: str = Field("", alias="correlationId")


@dataclass(frozen=True)
class SendSuccess:
    """A message part accepted by the gateway (fully or partially)."""
    message_id: str
    response_code: int
    response_message: str
    recipient: str
    correlation_id: str = ""
    reason_code: int = 0
    temporary_error: bool = False
    billing_status: int = 0
    vat: float = 0.0
    sequence: int = 1

    @property
    def is_error(self) -> bool:
        return False

    @classmethod
    def from_response(cls, response: GatewayResponse, recipient: str, sequence: int) -> "SendSuccess":
        return cls(
            message_id=response.message_id,
            response_code=response.response_code,
            response_message=response.response_message,
            recipient=recipient,
            correlation_id=response.correlation_id,
            reason_code=response.reason_code,
            temporary_error=response.temporary_error,
            billing_status=response.billing_status,
            vat=response.vat,
            sequence=sequence,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "correlationId": self.correlation_id,
            "messageId": self.message_id,
            "responseCode": self.response_code,
            "reasonCode": self.reason_code,
            "responseMessage": self.response_message,
            "temporaryError": self.temporary_error,
            "billingStatus": self.billing_status,
            "VAT": self.vat,
            "recipient": self.recipient,
        }


@dataclass(frozen=True)
class SendError:
    """A send that stopped, before or while contacting the gateway."""
    error: str
    sequence: Optional[int] = None
    response_code: Optional[int] = None
    reason_code: Optional[int] = None

    @property
    def is_error(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error}


SendResult = Union[SendSuccess, SendError]


@dataclass
class SendOutcome:
    """Results of one ``send_sms`` call, one entry per part sent or attempted."""
    results: List[SendResult] = field(default_factory=list)
    # Recipients left after partial success pruning
    recipients: List[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return bool(self.results) and not any(result.is_error for result in self.results)

    @property
    def errors(self) -> List[SendError]:
        return [result for result in self.results if isinstance(result, SendError)]

    def to_list(self) -> List[Dict[str, Any]]:
        return [result.to_dict() for result in self.results]


@dataclass(frozen=True)
class DeliveryReport:
    """Delivery report posted back by the gateway."""
    message_id: str
    destination_address: Optional[str]
    status_code: Optional[str]
    timestamp: Optional[str]
    operator: Optional[str]
    reason_code: Union[int, str] = 0
    operator_timestamp: str = ""
    status_text: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "MessageId": self.message_id,
            "DestinationAddress": self.destination_address,
            "StatusCode": self.status_code,
            "TimeStamp": self.timestamp,
            "Operator": self.operator,
            "ReasonCode": self.reason_code,
            "OperatorTimeStamp": self.operator_timestamp,
            "StatusText": self.status_text,
        }


@dataclass(frozen=True)
class InboundSMS:
    """Mobile originated SMS forwarded by the gateway."""
    destination_address: Optional[str]
    originator_address: Optional[str]
    message: Optional[str]
    message_id: str
    # Arrival time at the operator SMSC, CET/CEST
    timestamp: Optional[str]
    operator: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "DestinationAddress": self.destination_address,
            "OriginatorAddress": self.originator_address,
            "Message": self.message,
            "MessageId": self.message_id,
            "TimeStamp": self.timestamp,
            "Operator": self.operator,
        }
