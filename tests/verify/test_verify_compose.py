"""Tests for checking composed payloads against their compose params."""

import struct

import pytest

from counterparty_unpack import verify_compose
from counterparty_unpack.protocol import pack_address
from counterparty_unpack.verify import COMPOSE_TYPE_IDS, Criticality
from counterparty_unpack.verify.schema import (
    PARAM_SCHEMA,
    critical_params,
    dangerous_params,
    get_message_schema,
    get_schema_by_type_id,
)


@pytest.fixture
def send_message(message, asset_id, packed_addresses):
    payload = struct.pack(">QQ", asset_id("XCP"), 500) + packed_addresses[0]
    return message(2, payload)


class TestSchema:
    def test_every_compose_type_has_a_schema(self):
        for type_ids in COMPOSE_TYPE_IDS.values():
            for type_id in type_ids:
                assert get_schema_by_type_id(type_id) is not None

    def test_issuance_schema_covers_all_layouts(self):
        schema = get_message_schema("issuance")
        assert set(schema.type_ids) == {20, 21, 22, 23}

    def test_criticality_lookups(self):
        assert [p.name for p in critical_params("order")] == [
            "give_asset",
            "give_quantity",
            "get_asset",
            "get_quantity",
        ]
        assert {p.name for p in dangerous_params("issuance")} == {"divisible", "lock", "reset"}
        assert critical_params("nope") == ()

    def test_every_param_has_a_risk(self):
        for schema in PARAM_SCHEMA.values():
            for spec in schema.params:
                assert spec.risk


class TestComposeSend:
    def test_matching_params(self, send_message, addresses):
        result = verify_compose(
            send_message, "send", {"asset": "XCP", "quantity": "500", "destination": addresses[0]}
        )
        assert result.valid
        assert result.errors == ()
        assert result.message_type == "enhanced_send"

    def test_oversized_quantity_string(self, send_message, addresses):
        params = {"asset": "XCP", "quantity": "1" * 5000, "destination": addresses[0]}
        result = verify_compose(send_message, "send", params)
        assert not result.valid
        assert [m.field for m in result.critical_mismatches] == ["quantity"]
        assert result.errors[0].startswith("[CRITICAL] Quantity mismatch: expected")

    def test_wrong_destination(self, send_message, addresses):
        result = verify_compose(
            send_message, "send", {"asset": "XCP", "quantity": 500, "destination": addresses[1]}
        )
        assert not result.valid
        assert [m.field for m in result.critical_mismatches] == ["destination"]
        assert result.errors == (
            f'[CRITICAL] Destination mismatch: expected "{addresses[1]}", got "{addresses[0]}"',
        )

    def test_missing_required_param(self, send_message):
        result = verify_compose(send_message, "send", {"quantity": 500})
        assert not result.valid
        assert result.critical_mismatches[0].field == "asset"

    def test_memo_difference_is_a_warning(self, message, packed_addresses):
        payload = struct.pack(">QQ", 1, 500) + packed_addresses[0] + b"hello"
        result = verify_compose(message(2, payload), "send", {"asset": "XCP", "quantity": 500, "memo": "bye"})
        assert result.valid
        assert [m.field for m in result.info_mismatches] == ["memo"]
        assert result.warnings == ('Memo mismatch: expected "bye", got "hello"',)

    def test_type_mismatch(self, send_message):
        result = verify_compose(send_message, "order", {})
        assert not result.valid
        assert result.errors == ("Message type mismatch: expected order, got enhanced_send",)
        assert result.critical_mismatches[0].field == "message_type"

    def test_unknown_compose_type_skipped(self, send_message):
        result = verify_compose(send_message, "frobnicate", {})
        assert result.valid
        assert result.warnings == ("Unknown compose type: frobnicate, skipping verification",)

    def test_decode_failure_invalid(self, message):
        result = verify_compose(message(70, b"\x00" * 31), "cancel", {})
        assert not result.valid
        assert result.decode_failed
        assert "Invalid cancel length" in result.errors[0]

    def test_hex_payload(self, send_message, addresses):
        params = {"asset": "XCP", "quantity": 500, "destination": addresses[0]}
        assert verify_compose(send_message.hex(), "send", params).valid


class TestComposeOther:
    def test_issuance_lock_is_dangerous(self, message, asset_id):
        payload = struct.pack(">QQ???If", asset_id("PEPECASH"), 1000, True, True, False, 0, 0.0)
        result = verify_compose(
            message(22, payload), "issuance", {"asset": "PEPECASH", "quantity": 1000, "lock": False}
        )
        assert not result.valid
        assert [m.field for m in result.dangerous_mismatches] == ["lock"]
        assert result.errors == ("[DANGEROUS] Lock mismatch: expected false, got true",)

    def test_dispenser_with_older_rate_name(self, message, asset_id):
        payload = struct.pack(">QQQQB", asset_id("PEPECASH"), 10, 100, 5000, 0)
        params = {
            "asset": "PEPECASH",
            "give_quantity": 10,
            "escrow_quantity": 100,
            "satoshirate": 5000,
            "status": 0,
        }
        assert verify_compose(message(12, payload), "dispenser", params).valid

    def test_mpma_parallel_lists(self, message, addresses, packed_addresses):
        # two-entry table, one XCP group paying 100 to entry 0 and 200 to entry 1
        bits = "0" + "1" + format(1, "064b") + "1" + "0" + format(100, "064b") + "0"
        bits += "1" + format(200, "064b") + "0" + "0"
        bits += "0" * (-len(bits) % 8)
        stream = int(bits, 2).to_bytes(len(bits) // 8, "big")
        payload = struct.pack(">H", 2) + packed_addresses[0] + packed_addresses[1] + stream
        data = message(3, payload)

        params = {"assets": "XCP,XCP", "destinations": ",".join(addresses[:2]), "quantities": "100,200"}
        assert verify_compose(data, "mpma", params).valid

        params["quantities"] = "100,201"
        result = verify_compose(data, "mpma", params)
        assert [m.field for m in result.critical_mismatches] == ["sends[1].quantity"]

        result = verify_compose(data, "mpma", {"assets": ["XCP"], "quantities": [100]})
        assert [m.field for m in result.critical_mismatches] == ["sends.count"]

    def test_cancel_hash_case_insensitive(self, message):
        offer = bytes(range(32))
        result = verify_compose(message(70, offer), "cancel", {"offer_hash": offer.hex().upper()})
        assert result.valid

    def test_segwit_destination(self, message, mainnet_vectors):
        payload = struct.pack(">QQ", 1, 5) + pack_address(mainnet_vectors["p2wpkh"])
        params = {"asset": "XCP", "quantity": 5, "destination": mainnet_vectors["p2wpkh"].upper()}
        assert verify_compose(message(2, payload), "send", params).valid

    def test_mismatch_ordering_groups_by_criticality(self, message, asset_id):
        payload = struct.pack(">QQQQHQ", asset_id("XCP"), 1, asset_id("PEPECASH"), 2, 10, 0)
        params = {
            "give_asset": "XCP",
            "give_quantity": 9,
            "get_asset": "PEPECASH",
            "get_quantity": 2,
            "expiration": 99,
        }
        result = verify_compose(message(10, payload), "order", params)
        assert [m.criticality for m in result.mismatches] == [Criticality.CRITICAL, Criticality.DANGEROUS]
