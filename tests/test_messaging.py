"""
Unit Tests for Message Encoding and Segmentation
================================================
"""

import math
import random

import pytest

from smsly_ipx.exceptions import AlphabetError, EncodingError, TooManySegmentsError
from smsly_ipx.messaging import (
    build_udh,
    count_extended_characters,
    ensure_utf8,
    is_gsm7,
    max_segment_length,
    segment_message,
    split_message,
    validate_gsm7,
)


class TestEncoding:
    """Tests for UTF-8 and GSM-7 validation."""

    def test_ensure_utf8_decodes_bytes(self):
        """UTF-8 bytes should be decoded to text."""
        assert ensure_utf8("Hej då €".encode("utf-8")) == "Hej då €"

    def test_ensure_utf8_rejects_invalid_bytes(self):
        """Latin-1 bytes are not UTF-8."""
        with pytest.raises(EncodingError):
            ensure_utf8("Hej då".encode("latin-1"))

    def test_ensure_utf8_rejects_lone_surrogate(self):
        with pytest.raises(EncodingError):
            ensure_utf8("abc\ud800")

    def test_plain_text_is_gsm7(self):
        assert is_gsm7("Hello World! 123 @#%&*()")

    def test_extension_characters_are_gsm7(self):
        """Accented, Greek and euro characters are in the alphabet."""
        assert is_gsm7("åäö ÅÄÖ ΔΦΓΛΩΠΨΣΘΞ € £ ¥ ¿¡ §\n\r")

    def test_emoji_is_not_gsm7(self):
        assert not is_gsm7("Hello 😀")

    def test_validate_gsm7_reports_invalid_characters(self):
        with pytest.raises(AlphabetError) as exc_info:
            validate_gsm7("Hello 你好")

        assert "你" in exc_info.value.invalid
        assert str(exc_info.value) == "Message contains invalid characters"

    def test_count_extended_characters(self):
        """Extension table characters, form feed included, are counted."""
        assert count_extended_characters("{a}[b]~|^\\€\x0c") == 10
        assert count_extended_characters("plain text") == 0


class TestSegmentation:
    """Tests for message splitting and UDH construction."""

    def test_max_segment_length(self):
        assert max_segment_length("A" * 10) == 160
        assert max_segment_length("€ and {braces}") == 157

    def test_short_message_is_single_part(self):
        parts = segment_message("A" * 160)

        assert len(parts) == 1
        assert parts[0].udh is None
        assert parts[0].sequence == 1
        assert parts[0].payload == "A" * 160

    def test_extended_characters_shorten_single_message(self):
        """A 159 character message with two euro signs must be split."""
        message = "€€" + "A" * 157

        payloads = split_message(message)

        assert len(payloads) == math.ceil(len(message) / (160 - 2 - 7))
        assert "".join(payloads) == message

    def test_split_long_message(self):
        message = "".join(chr(ord("a") + i % 26) for i in range(400))

        payloads = split_message(message)

        assert [len(p) for p in payloads] == [153, 153, 94]
        assert "".join(payloads) == message

    def test_split_counts_code_points(self):
        """Multi-byte characters count as one position."""
        message = "å" * 161

        payloads = split_message(message)

        assert [len(p) for p in payloads] == [153, 8]

    def test_build_udh(self):
        assert build_udh(167, 3, 1) == "050003a70301"
        assert build_udh(5, 2, 2) == "050003050202"

    def test_build_udh_rejects_reference_out_of_range(self):
        with pytest.raises(ValueError):
            build_udh(0, 2, 1)
        with pytest.raises(ValueError):
            build_udh(256, 2, 1)

    def test_concatenated_parts_share_reference(self):
        parts = segment_message("B" * 400, rng=random.Random(7))

        references = {part.udh[6:8] for part in parts}
        assert len(references) == 1
        assert references.pop() != "00"
        assert [part.udh[8:10] for part in parts] == ["03", "03", "03"]
        assert [part.udh[10:12] for part in parts] == ["01", "02", "03"]
        assert [part.sequence for part in parts] == [1, 2, 3]
        assert all(part.udh.startswith("050003") for part in parts)

    def test_five_parts_allowed(self):
        parts = segment_message("C" * (153 * 5))

        assert len(parts) == 5
        assert parts[-1].udh.endswith("0505")

    def test_six_parts_rejected(self):
        with pytest.raises(TooManySegmentsError) as exc_info:
            segment_message("C" * (153 * 5 + 1))

        assert exc_info.value.parts == 6
        assert str(exc_info.value) == "Max 5 concatenated messages"

    @pytest.mark.parametrize("message", ["{" * 153, "€" * 160, "|" * 154])
    def test_extended_characters_leave_no_room(self, message):
        """Messages made of extended characters cannot be split at all."""
        with pytest.raises(TooManySegmentsError):
            split_message(message)
        with pytest.raises(TooManySegmentsError):
            segment_message(message)
