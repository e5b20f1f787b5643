import pytest

from counterparty_unpack.protocol import (
    MESSAGE_TYPE_NAMES,
    MIN_MESSAGE_LENGTH,
    PREFIX,
    PREFIX_HEX,
    MessageTypeId,
    Network,
    has_prefix,
    message_type_name,
)


class TestProtocolConstants:
    def test_prefix(self):
        assert PREFIX == b"CNTRPRTY"
        assert PREFIX_HEX == "434e545250525459"
        assert MIN_MESSAGE_LENGTH == 9

    def test_every_type_id_has_a_name(self):
        assert set(MESSAGE_TYPE_NAMES) == set(MessageTypeId)
        assert len(set(MESSAGE_TYPE_NAMES.values())) == len(MessageTypeId)

    @pytest.mark.parametrize(
        ("type_id", "name"),
        [(0, "send"), (2, "enhanced_send"), (3, "mpma_send"), (70, "cancel"), (110, "destroy")],
    )
    def test_message_type_name(self, type_id, name):
        assert message_type_name(type_id) == name

    def test_unknown_type_name(self):
        assert message_type_name(99) == "unknown_99"

    @pytest.mark.parametrize(
        ("network", "hrp"),
        [(Network.MAINNET, "bc"), (Network.TESTNET, "tb"), (Network.REGTEST, "bcrt")],
    )
    def test_bech32_hrp(self, network, hrp):
        assert network.bech32_hrp == hrp


class TestHasPrefix:
    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (b"CNTRPRTY\x02", True),
            (b"CNTRPRTY", True),
            (b"CNTRPRT", False),
            (b"cntrprty\x02", False),
            (b"XXTRPRTY\x02", False),
            (b"", False),
        ],
    )
    def test_exact_comparison(self, data, expected):
        assert has_prefix(data) is expected
