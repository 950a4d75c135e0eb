"""
Inbound Callbacks
=================
Decoding of delivery reports and mobile originated SMS that IPX posts to
the service provider, and the acknowledgement returned to IPX.

Usage (Starlette/FastAPI):
    from smsly_ipx.callbacks import (
        read_request_params,
        get_delivery_report,
        acknowledgement_response,
    )

    async def delivery_report(request):
        params = await read_request_params(request, method="post")
        report = get_delivery_report(params)
        if report is None:
            return acknowledgement_response(False)
        ...
        return acknowledgement_response(True)
"""

from typing import Any, Mapping, Optional

import structlog
from starlette.requests import Request
from starlette.responses import Response

from .models import DeliveryReport, InboundSMS

logger = structlog.get_logger(__name__)

HTTP_METHODS = ("get", "post")


def normalize_method(method: str) -> str:
    """Validate the configured callback HTTP method."""
    normalized = (method or "").strip().lower()
    if normalized not in HTTP_METHODS:
        raise ValueError(f"Unsupported callback HTTP method: {method!r}")
    return normalized


def select_params(
    method: str,
    query: Optional[Mapping[str, Any]] = None,
    form: Optional[Mapping[str, Any]] = None,
) -> Mapping[str, Any]:
    """
    Pick the parameter set IPX uses for the configured method.

    Args:
        method: "get" or "post"
        query: Query string parameters
        form: Form body parameters

    Returns:
        The parameters matching the method (empty if not given)
    """
    if normalize_method(method) == "get":
        return query or {}
    return form or {}


async def read_request_params(request: Request, method: str = "post") -> Mapping[str, Any]:
    """Read the callback parameters from a Starlette request."""
    if normalize_method(method) == "get":
        return dict(request.query_params)
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def get_delivery_report(params: Mapping[str, Any]) -> Optional[DeliveryReport]:
    """
    Decode a delivery report.

    Args:
        params: Callback parameters

    Returns:
        DeliveryReport, or None when the request carries no MessageId
    """
    if "MessageId" not in params:
        logger.debug("Callback is not a delivery report", keys=sorted(params))
        return None

    return DeliveryReport(
        message_id=params["MessageId"],
        destination_address=params.get("DestinationAddress"),
        status_code=params.get("StatusCode"),
        timestamp=params.get("TimeStamp"),
        operator=params.get("Operator"),
        reason_code=params.get("ReasonCode", 0),
        operator_timestamp=params.get("OperatorTimeStamp", ""),
        status_text=params.get("StatusText", ""),
    )


def get_sms(params: Mapping[str, Any]) -> Optional[InboundSMS]:
    """
    Decode a mobile originated SMS.

    Args:
        params: Callback parameters

    Returns:
        InboundSMS, or None when the request carries no MessageId
    """
    if "MessageId" not in params:
        logger.debug("Callback is not an inbound SMS", keys=sorted(params))
        return None

    return InboundSMS(
        destination_address=params.get("DestinationAddress"),
        originator_address=params.get("OriginatorAddress"),
        message=params.get("Message"),
        message_id=params["MessageId"],
        timestamp=params.get("TimeStamp"),
        operator=params.get("Operator"),
    )


def get_acknowledgement_text(ack: bool = True) -> str:
    """Body acknowledging (or rejecting) an inbound SMS or delivery report."""
    return '<DeliveryResponse ack="%s"/>' % ("true" if ack else "false")


def acknowledgement_response(ack: bool = True) -> Response:
    """Starlette response carrying the acknowledgement body."""
    return Response(content=get_acknowledgement_text(ack), media_type="text/xml")
