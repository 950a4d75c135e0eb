"""
Shared fixtures for smsly-ipx tests.
"""

import random
from unittest.mock import MagicMock

import pytest

from smsly_ipx import GatewayResponse, IPXClient, IPXConfig


def build_response(code: int = 0, message: str = "Success", **fields) -> GatewayResponse:
    data = {
        "responseCode": code,
        "responseMessage": message,
        "reasonCode": 0,
        "temporaryError": False,
        "billingStatus": 0,
        "VAT": -1.0,
        "messageId": "msg-1",
        "correlationId": "",
    }
    data.update(fields)
    return GatewayResponse.model_validate(data)


@pytest.fixture
def config():
    return IPXConfig(
        username="ipx-user",
        password="ipx-secret",
        wsdl_url="https://ipx.test/api/services2/SmsApi52?wsdl",
        http_method="post",
        tariff_class="SEK0",
    )


@pytest.fixture
def transport():
    fake = MagicMock()
    fake.send.return_value = build_response()
    return fake


@pytest.fixture
def client(config, transport):
    return IPXClient(config, transport=transport, rng=random.Random(42))


@pytest.fixture
def make_response():
    return build_response
