"""
Unit Tests for Send Options and Request Building
================================================
"""

import pytest

from smsly_ipx.exceptions import InvalidOptionError
from smsly_ipx.messaging import MessagePart
from smsly_ipx.models import OriginatorTON, SendOptions
from smsly_ipx.request_builder import build_request


def _build(options=None, recipients=("46700000001",), part=None):
    return build_request(
        sender="SMSLY",
        recipients=list(recipients),
        part=part or MessagePart(sequence=1, payload="Hello"),
        options=options or SendOptions(),
        username="user",
        password="secret",
        tariff_class="SEK0",
    )


class TestSendOptions:
    """Tests for option parsing."""

    def test_defaults(self):
        options = SendOptions.from_dict(None)

        assert options.originator_ton == OriginatorTON.ALPHANUMERIC
        assert options.data_coding_scheme == 17
        assert options.delivery_report is False
        assert options.validity_time is None

    def test_from_gateway_keys(self):
        options = SendOptions.from_dict({
            "originatorTON": "2",
            "DCS": 8,
            "flash": True,
            "delivery_report": True,
            "validity_time": 60,
        })

        assert options.originator_ton == 2
        assert options.data_coding_scheme == 8
        assert options.delivery_report is True
        assert options.validity_time == 60

    def test_non_numeric_option(self):
        """Numeric options that are not numbers are rejected."""
        with pytest.raises(InvalidOptionError) as exc_info:
            SendOptions.from_dict({"originatorTON": "alpha"})

        assert exc_info.value.option == "originatorTON"
        assert exc_info.value.value == "alpha"

    def test_flash_dcs(self):
        assert SendOptions(flash=True).data_coding_scheme == 16

    def test_dcs_override_wins_over_flash(self):
        assert SendOptions(flash=True, dcs=0).data_coding_scheme == 0


class TestBuildRequest:
    """Tests for request assembly."""

    def test_single_part_request(self):
        request = _build()
        wire = request.to_wire()

        assert wire["originatingAddress"] == "SMSLY"
        assert wire["originatorTON"] == "1"
        assert wire["destinationAddress"] == "46700000001"
        assert wire["userData"] == "Hello"
        assert wire["userDataHeader"] == "#NULL#"
        assert wire["DCS"] == "17"
        assert wire["PID"] == "-1"
        assert wire["VAT"] == "-1"
        assert wire["relativeValidityTime"] == "-1"
        assert wire["statusReportFlags"] == "0"
        assert wire["tariffClass"] == "SEK0"
        assert wire["correlationId"] == "#NULL#"
        assert wire["username"] == "user"
        assert wire["password"] == "secret"

    def test_wire_field_order(self):
        keys = list(_build().to_wire())

        assert keys[0] == "correlationId"
        assert keys[-2:] == ["username", "password"]
        assert len(keys) == 21

    def test_multiple_recipients_joined(self):
        request = _build(recipients=["4670001", "4670002", "4670003"])

        assert request.destination_address == "4670001;4670002;4670003"

    def test_options_applied(self):
        request = _build(SendOptions(delivery_report=True, validity_time=30, flash=True))

        assert request.status_report_flags == "1"
        assert request.relative_validity_time == "30"
        assert request.dcs == 16

    def test_udh_copied_from_part(self):
        part = MessagePart(sequence=2, payload="world", udh="050003a70202")

        assert part.is_concatenated
        assert _build(part=part).user_data_header == "050003a70202"

    def test_password_not_in_repr(self):
        assert "secret" not in repr(_build())
