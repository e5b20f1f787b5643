"""Tests for prefix handling, type id extraction and result conversion."""

import struct

import pytest

from counterparty_unpack import UnpackConfig, decode, is_protocol_data
from counterparty_unpack.binary import ByteReader
from counterparty_unpack.dispatch import Dispatcher, read_type_id, split_message
from counterparty_unpack.errors import DecodeError
from counterparty_unpack.logging import Logger, LoggerConfig, LogLevel, MemoryLogHandler
from counterparty_unpack.protocol import PREFIX, Network, pack_address


@pytest.fixture
def memory_handler():
    return MemoryLogHandler()


@pytest.fixture
def logged_dispatcher(memory_handler):
    logger = Logger(
        name="unpack",
        config=LoggerConfig(base_level=LogLevel.DEBUG),
        handlers=[memory_handler],
    )
    return Dispatcher(UnpackConfig(logger=logger)), logger


def send_payload(asset=1, quantity=100_000_000):
    return struct.pack(">QQ", asset, quantity)


class TestTypeId:
    @pytest.mark.parametrize(
        ("data", "type_id", "consumed"),
        [
            (b"\x02rest", 2, 1),
            (b"\xff", 255, 1),
            (b"\x00\x00\x00\x00rest", 0, 4),
            (b"\x00\x00\x00\x02", 2, 4),
            (b"\x00\x00\x01\x00", 256, 4),
        ],
    )
    def test_read_type_id(self, data, type_id, consumed):
        reader = ByteReader(data)
        assert read_type_id(reader) == type_id
        assert reader.offset == consumed

    @pytest.mark.parametrize("data", [b"", b"\x00", b"\x00\x00\x00"])
    def test_read_type_id_short(self, data):
        with pytest.raises(DecodeError, match="Could not extract message type ID"):
            read_type_id(ByteReader(data))

    def test_split_message(self):
        raw = split_message(PREFIX + b"\x46" + b"\xaa" * 32)
        assert raw.type_id == 70
        assert raw.payload == b"\xaa" * 32


class TestDecode:
    """End-to-end behaviour of the dispatcher."""

    def test_legacy_four_byte_send(self, message, asset_id):
        result = decode(message(0, send_payload(asset_id("XCP"))))
        assert result.success
        assert result.message_type == "send"
        assert result.message_type_id == 0
        assert result.data.asset == "XCP"
        assert result.data.quantity == 100_000_000

    def test_legacy_form_of_one_byte_id(self, message, packed_addresses):
        payload = send_payload() + packed_addresses[0]
        assert decode(message(2, payload, legacy=True)) == decode(message(2, payload))

    def test_short_cancel_fails_with_length_error(self, message):
        payload = b"\x11" * 31
        result = decode(message(70, payload))
        assert not result.success
        assert "Invalid cancel length" in result.error
        assert result.message_type == "cancel"
        assert result.message_type_id == 70
        assert result.raw_payload == payload
        assert result.data is None

    def test_unknown_type_is_unsupported_not_failed(self, message):
        result = decode(message(99, b"\x01\x02"))
        assert result.success
        assert not result.supported
        assert not result.decoded
        assert result.message_type == "unknown_99"
        assert result.error == "Unsupported message type: unknown_99 (ID: 99)"
        assert result.raw_payload == b"\x01\x02"

    @pytest.mark.parametrize(
        ("data", "error"),
        [
            (b"", "Data too short"),
            (b"CNTRPRTY", "Data too short"),
            (b"XXTRPRTY\x02", "Missing CNTRPRTY prefix"),
            (PREFIX + b"\x00\x00", "Could not extract message type ID"),
        ],
    )
    def test_envelope_errors(self, data, error):
        result = decode(data)
        assert not result.success
        assert error in result.error
        assert result.message_type_id == -1
        assert result.message_type is None

    def test_hex_input(self, message):
        data = message(0, send_payload())
        assert decode(data.hex()) == decode(data)
        assert decode("0x" + data.hex()).success

    def test_bad_hex_input(self):
        result = decode("CNTRPRTY")
        assert not result.success

    def test_invalid_input_type(self):
        result = decode(12345)
        assert not result.success
        assert "Invalid payload type" in result.error

    def test_deterministic(self, message, packed_addresses):
        data = message(2, send_payload() + packed_addresses[1] + b"memo")
        assert decode(data) == decode(data)

    def test_network_from_config(self, message, mainnet_vectors):
        payload = send_payload() + pack_address(mainnet_vectors["p2wpkh"])
        testnet = decode(message(2, payload), UnpackConfig(network=Network.TESTNET))
        assert testnet.data.destination.startswith("tb1")
        assert decode(message(2, payload)).data.destination == mainnet_vectors["p2wpkh"]

    def test_unexpected_decoder_exception_is_captured(self, message, monkeypatch):
        def explode(payload, ctx):
            raise RuntimeError("boom")

        monkeypatch.setattr(
            "counterparty_unpack.dispatch.dispatcher.get_decoder", lambda type_id: explode
        )
        result = Dispatcher().decode(message(70, b"\x00" * 32))
        assert not result.success
        assert result.error == "boom"


class TestTruncation:
    """Dropping trailing bytes from a payload without a free tail always fails."""

    @staticmethod
    def samples(packed: bytes) -> list[tuple[int, bytes]]:
        return [
            (0, send_payload()),
            (2, send_payload() + packed),
            (3, struct.pack(">H", 1) + packed + ((((0b01 << 64) | 1) << 64 | 5) << 6).to_bytes(17, "big")),
            (4, packed + b"\x03"),
            (10, struct.pack(">QQQQHQ", 1, 1, 0, 1, 10, 0)),
            (11, bytes(64)),
            (12, struct.pack(">QQQQB", 1, 1, 10, 100, 0)),
            (13, b"\x00"),
            (20, struct.pack(">QQ?", 1, 1, True)),
            (22, struct.pack(">QQ???If", 1, 1, True, False, False, 0, 0.0)),
            (30, struct.pack(">IdI", 1, 1.0, 0)),
            (40, struct.pack(">HIQQdII", 0, 1, 1, 1, 0.0, 5040, 10)),
            (50, struct.pack(">QQ", 1, 26**3)),
            (70, bytes(32)),
            (110, struct.pack(">QQ", 1, 1)),
        ]

    def test_every_strict_prefix_fails(self, message, packed_addresses):
        for type_id, payload in self.samples(packed_addresses[0]):
            assert decode(message(type_id, payload)).success, type_id
            for length in range(len(payload)):
                result = decode(message(type_id, payload[:length]))
                assert not result.success, (type_id, length)


class TestIsProtocolData:
    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (PREFIX + b"\x02", True),
            ((PREFIX + b"\x02").hex(), True),
            (b"CNTRPRT", False),
            (b"\x6a\x4c\x50", False),
            ("not hex", False),
            (None, False),
        ],
    )
    def test_is_protocol_data(self, data, expected):
        assert is_protocol_data(data) is expected


class TestResultConversion:
    def test_to_dict(self, message, asset_id):
        payload = send_payload(asset_id("XCP"), 5)
        as_dict = decode(message(0, payload)).to_dict()
        assert as_dict["success"] is True
        assert as_dict["message_type"] == "send"
        assert as_dict["data"] == {"asset": "XCP", "quantity": 5}
        assert as_dict["raw_payload"] == payload.hex()

    def test_to_dict_of_failure(self):
        as_dict = decode(b"").to_dict()
        assert as_dict["success"] is False
        assert as_dict["data"] is None
        assert as_dict["raw_payload"] == ""


class TestDispatcherLogging:
    def test_failure_logged_at_warning(self, logged_dispatcher, memory_handler, message):
        dispatcher, logger = logged_dispatcher
        dispatcher.decode(message(70, b"\x00" * 31))
        logger.flush()
        assert any("[WARNING]" in line and "Decode failed" in line for line in memory_handler.lines)

    def test_unsupported_logged_at_debug(self, logged_dispatcher, memory_handler, message):
        dispatcher, logger = logged_dispatcher
        dispatcher.decode(message(99, b""))
        logger.flush()
        assert any("[DEBUG]" in line and "unknown_99" in line for line in memory_handler.lines)

    def test_compact_marker_logged(self, logged_dispatcher, memory_handler, message):
        dispatcher, logger = logged_dispatcher
        result = dispatcher.decode(message(91, b"\xa2\x01\x02"))
        logger.flush()
        assert not result.success
        assert any("Compact encoding marker 0xa2 on fairmint" in line for line in memory_handler.lines)

    def test_success_is_silent(self, logged_dispatcher, memory_handler, message):
        dispatcher, logger = logged_dispatcher
        assert dispatcher.decode(message(0, send_payload())).success
        logger.flush()
        assert memory_handler.lines == []
