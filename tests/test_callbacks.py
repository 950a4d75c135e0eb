"""
Unit Tests for Inbound Callback Decoding
========================================
"""

import pytest
from starlette.applications import Starlette
from starlette.routing import Route
from starlette.testclient import TestClient

from smsly_ipx.callbacks import (
    acknowledgement_response,
    get_acknowledgement_text,
    get_delivery_report,
    get_sms,
    read_request_params,
    select_params,
)


def create_app(method: str) -> Starlette:
    async def delivery_report(request):
        params = await read_request_params(request, method=method)
        report = get_delivery_report(params)
        if report is None:
            return acknowledgement_response(False)
        return acknowledgement_response(report.status_code == "0")

    return Starlette(routes=[
        Route("/ipx/dr", delivery_report, methods=["GET", "POST"]),
    ])


class TestDeliveryReport:
    """Tests for delivery report decoding."""

    def test_full_report(self):
        report = get_delivery_report({
            "MessageId": "1-100",
            "DestinationAddress": "46700000001",
            "StatusCode": "1",
            "TimeStamp": "20260101 12:00:00",
            "Operator": "Telia",
            "ReasonCode": "113",
            "OperatorTimeStamp": "20260101 12:00:01",
            "StatusText": "Unavailable",
        })

        assert report.to_dict() == {
            "MessageId": "1-100",
            "DestinationAddress": "46700000001",
            "StatusCode": "1",
            "TimeStamp": "20260101 12:00:00",
            "Operator": "Telia",
            "ReasonCode": "113",
            "OperatorTimeStamp": "20260101 12:00:01",
            "StatusText": "Unavailable",
        }

    def test_defaults(self):
        """Optional fields fall back to the vendor defaults."""
        report = get_delivery_report({"MessageId": "1-101", "StatusCode": "0"})

        assert report.reason_code == 0
        assert report.operator_timestamp == ""
        assert report.status_text == ""
        assert report.operator is None

    def test_missing_message_id(self):
        assert get_delivery_report({"StatusCode": "0"}) is None
        assert get_delivery_report({}) is None


class TestInboundSMS:
    def test_sms(self):
        sms = get_sms({
            "DestinationAddress": "72000",
            "OriginatorAddress": "46700000001",
            "Message": "STOP",
            "MessageId": "1-200",
            "TimeStamp": "20260101 12:00:00",
            "Operator": "Tele2",
        })

        assert sms.message == "STOP"
        assert sms.to_dict()["OriginatorAddress"] == "46700000001"

    def test_missing_message_id(self):
        assert get_sms({"Message": "STOP"}) is None


class TestParameterSelection:
    def test_select_post(self):
        assert select_params("post", query={"a": "1"}, form={"b": "2"}) == {"b": "2"}

    def test_select_get(self):
        assert select_params("GET", query={"a": "1"}, form={"b": "2"}) == {"a": "1"}

    def test_select_missing(self):
        assert select_params("get") == {}

    def test_unsupported_method(self):
        with pytest.raises(ValueError):
            select_params("put")


class TestAcknowledgement:
    def test_text(self):
        assert get_acknowledgement_text() == '<DeliveryResponse ack="true"/>'
        assert get_acknowledgement_text(False) == '<DeliveryResponse ack="false"/>'

    def test_post_callback(self):
        client = TestClient(create_app("post"))

        response = client.post("/ipx/dr", data={"MessageId": "1-300", "StatusCode": "0"})

        assert response.status_code == 200
        assert response.text == '<DeliveryResponse ack="true"/>'
        assert response.headers["content-type"].startswith("text/xml")

    def test_get_callback(self):
        client = TestClient(create_app("get"))

        response = client.get("/ipx/dr", params={"MessageId": "1-301", "StatusCode": "2"})

        assert response.text == '<DeliveryResponse ack="false"/>'

    def test_post_callback_ignores_query(self):
        client = TestClient(create_app("post"))

        response = client.post("/ipx/dr?MessageId=1-302&StatusCode=0", data={})

        assert response.text == '<DeliveryResponse ack="false"/>'
