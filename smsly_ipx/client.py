"""
IPX Client
==========
Sends SMS through the IPX SOAP gateway and decodes the callbacks IPX
posts back.

Usage:
    from smsly_ipx import IPXClient, IPXConfig

    client = IPXClient(IPXConfig(username="user", password="secret"))
    outcome = client.send_sms(
        "Hello!",
        ["46700000001", "46700000002"],
        "SMSLY",
        {"delivery_report": True},
    )
    for result in outcome.results:
        if result.is_error:
            ...
"""

import random
import re
from typing import Any, List, Mapping, Optional, Sequence, Union

import structlog

from . import callbacks
from .codes import (
    ResponseCode,
    get_delivery_report_reason_code_description,
    get_delivery_report_status_code_description,
    get_send_reason_code_description,
    get_send_response_code_description,
)
from .config import IPXConfig
from .exceptions import (
    PartialSuccessParseError,
    PreSendError,
    SoapFault,
    TooManySegmentsError,
    TransportFault,
)
from .messaging import ensure_utf8, segment_message, validate_gsm7
from .models import (
    DeliveryReport,
    GatewayResponse,
    InboundSMS,
    SendError,
    SendOptions,
    SendOutcome,
    SendSuccess,
)
from .request_builder import build_request, join_recipients
from .transport import SoapTransport, Transport

logger = structlog.get_logger(__name__)

PARTIAL_SUCCESS_PATTERN = re.compile(r"Partial success: \((.*?)\)")


def parse_partial_success(response_message: str) -> List[str]:
    """
    Extract the per-recipient response codes of a partial success.

    Args:
        response_message: e.g. ``"Partial success: (0;100;0)"``

    Returns:
        Codes in recipient order

    Raises:
        PartialSuccessParseError: If the message holds no code list
    """
    match = PARTIAL_SUCCESS_PATTERN.search(response_message or "")
    if not match:
        raise PartialSuccessParseError(response_message)
    return [code.strip() for code in match.group(1).split(";")]


def prune_recipients(recipients: Sequence[str], codes: Sequence[str]) -> List[str]:
    """Drop every recipient whose positional response code is not zero."""
    return [
        recipient
        for position, recipient in enumerate(recipients)
        if position >= len(codes) or codes[position] == "0"
    ]


def format_gateway_error(response: GatewayResponse) -> str:
    """Describe a rejected send."""
    text = (
        "Cannot send SMS (IPX error)\n"
        f"IPX-responseCode: {response.response_code}\n"
        f"IPX-responseMessage: {response.response_message} "
        f"({get_send_response_code_description(response.response_code)})"
    )
    if response.reason_code:
        text += (
            f"\nIPX-reasonCode: {response.reason_code} "
            f"({get_send_reason_code_description(response.reason_code)})"
        )
    return text


def format_transport_error(fault: TransportFault) -> str:
    if isinstance(fault, SoapFault):
        return (
            "Cannot send SMS (SOAP error)\n"
            f"SOAP-faultcode: {fault.fault_code}\n"
            f"SOAP-faultstring: {fault.fault_string}"
        )
    return f"Connection error: {fault.fault_string}"


class IPXClient:
    """
    IPX SMS gateway client.

    Handles single and multiple recipients and concatenation of long
    messages, so one call may send several parts. Parts are sent one at a
    time, in order, and the first failure stops the remaining parts.

    Not thread-safe: the transport is created once and reused.
    """

    get_send_response_code_description = staticmethod(get_send_response_code_description)
    get_send_reason_code_description = staticmethod(get_send_reason_code_description)
    get_delivery_report_status_code_description = staticmethod(get_delivery_report_status_code_description)
    get_delivery_report_reason_code_description = staticmethod(get_delivery_report_reason_code_description)
    get_acknowledgement_text = staticmethod(callbacks.get_acknowledgement_text)

    def __init__(
        self,
        config: Optional[IPXConfig] = None,
        transport: Optional[Transport] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            config: Gateway configuration, read from the environment if omitted
            transport: Transport to use instead of the SOAP transport
            rng: Random source for concatenation references
        """
        self.config = config or IPXConfig()
        self.http_method = callbacks.normalize_method(self.config.http_method)
        self.tariff_class = self.config.tariff_class
        self._transport = transport
        self._rng = rng

    @classmethod
    def from_env(cls) -> "IPXClient":
        return cls(IPXConfig())

    def set_http_method(self, http_method: str) -> None:
        """Set how IPX delivers SMS and delivery reports ("post" or "get")."""
        self.http_method = callbacks.normalize_method(http_method)

    def set_tariff_class(self, tariff_class: str) -> None:
        """Set the IPX tariff class. SEK0 is a standard message to Sweden."""
        self.tariff_class = tariff_class

    def set_transport(self, transport: Transport) -> None:
        """Use the given transport; connection settings in the config are then ignored."""
        self._transport = transport

    def get_transport(self) -> Transport:
        if self._transport is None:
            self._transport = SoapTransport.from_config(self.config)
            logger.info("IPX transport created", wsdl=self.config.wsdl_url)
        return self._transport

    def close(self) -> None:
        if self._transport is not None:
            self._transport.close()
            self._transport = None

    def send_sms(
        self,
        message: Union[str, bytes],
        recipient: Union[str, Sequence[str]],
        sender: str,
        options: Union[SendOptions, Mapping[str, Any], None] = None,
    ) -> SendOutcome:
        """
        Send an SMS to one or more recipients.

        Args:
            message: Message text (UTF-8)
            recipient: One recipient or a list of recipients
            sender: Originating address
            options: SendOptions or a dict of gateway style option keys

        Returns:
            SendOutcome with one result per part sent or attempted, and the
            recipients left after partial success pruning
        """
        recipients = [recipient] if isinstance(recipient, str) else list(recipient)
        outcome = SendOutcome(recipients=recipients)
        log = logger.bind(sender=sender, recipients=len(recipients))

        try:
            if not isinstance(options, SendOptions):
                options = SendOptions.from_dict(options)
            text = ensure_utf8(message)
            validate_gsm7(text)
            parts = segment_message(text, rng=self._rng)
        except TooManySegmentsError as e:
            log.warning("SMS rejected before send", reason=str(e), parts=e.parts)
            outcome.results.append(SendError(error=str(e)))
            return outcome
        except PreSendError as e:
            log.warning("SMS rejected before send", reason=str(e))
            outcome.results.append(SendError(error=f"Cannot send SMS (pre-send error)\n{e}"))
            return outcome

        for part in parts:
            recipient_string = join_recipients(outcome.recipients)
            request = build_request(
                sender=sender,
                recipients=outcome.recipients,
                part=part,
                options=options,
                username=self.config.username,
                password=self.config.password,
                tariff_class=self.tariff_class,
            )

            try:
                response = self.get_transport().send(request)
            except TransportFault as e:
                log.error(
                    "IPX send failed",
                    sequence=part.sequence,
                    fault_code=e.fault_code,
                    fault_string=e.fault_string,
                )
                outcome.results.append(SendError(error=format_transport_error(e), sequence=part.sequence))
                break

            if response.response_code not in (ResponseCode.SUCCESS, ResponseCode.PARTIAL_SUCCESS):
                log.error(
                    "IPX rejected SMS",
                    sequence=part.sequence,
                    response_code=response.response_code,
                    reason_code=response.reason_code,
                    temporary_error=response.temporary_error,
                )
                outcome.results.append(SendError(
                    error=format_gateway_error(response),
                    sequence=part.sequence,
                    response_code=response.response_code,
                    reason_code=response.reason_code,
                ))
                break

            if response.response_code == ResponseCode.PARTIAL_SUCCESS:
                try:
                    codes = parse_partial_success(response.response_message)
                except PartialSuccessParseError as e:
                    log.error("IPX partial success unreadable", sequence=part.sequence, error=str(e))
                    outcome.results.append(SendError(
                        error=f"Cannot send SMS (IPX error)\n{e}",
                        sequence=part.sequence,
                        response_code=response.response_code,
                    ))
                    break
                outcome.recipients = prune_recipients(outcome.recipients, codes)
                log.warning(
                    "IPX partial success",
                    sequence=part.sequence,
                    codes=codes,
                    remaining=len(outcome.recipients),
                )

            outcome.results.append(SendSuccess.from_response(response, recipient_string, part.sequence))
            log.info(
                "IPX part sent",
                sequence=part.sequence,
                total=len(parts),
                message_id=response.message_id,
            )

            if not outcome.recipients and part.sequence < len(parts):
                log.warning("No recipients left, remaining parts not sent", sequence=part.sequence)
                break

        return outcome

    def _callback_params(
        self,
        query: Optional[Mapping[str, Any]],
        form: Optional[Mapping[str, Any]],
    ) -> Mapping[str, Any]:
        return callbacks.select_params(self.http_method, query=query, form=form)

    def get_delivery_report(
        self,
        query: Optional[Mapping[str, Any]] = None,
        form: Optional[Mapping[str, Any]] = None,
    ) -> Optional[DeliveryReport]:
        """
        Decode a delivery report sent to your server.

        Args:
            query: Query string parameters of the callback
            form: Form body parameters of the callback

        Returns:
            DeliveryReport, or None if the callback is not a delivery report
        """
        return callbacks.get_delivery_report(self._callback_params(query, form))

    def get_sms(
        self,
        query: Optional[Mapping[str, Any]] = None,
        form: Optional[Mapping[str, Any]] = None,
    ) -> Optional[InboundSMS]:
        """Decode an inbound SMS sent to your server, or None if there is none."""
        return callbacks.get_sms(self._callback_params(query, form))
