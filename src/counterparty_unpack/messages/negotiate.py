"""Two-stage format negotiation for message families with a compact form.

Fairminter and fairmint payloads may open with a CBOR map header byte
(0xA0..0xBF), marking the compact structured encoding. Decoding runs a probe
for that form first and falls back to the legacy pipe-delimited decoder when
the probe yields nothing. The probe never consumes or rewrites bytes, so the
fallback always sees the payload exactly as received.
"""

from collections.abc import Callable

from counterparty_unpack.messages.records import DecodeContext, DecodedRecord

COMPACT_MARKER_MIN = 0xA0
COMPACT_MARKER_MAX = 0xBF

Probe = Callable[[bytes, DecodeContext], DecodedRecord | None]
LegacyDecoder = Callable[[bytes, DecodeContext], DecodedRecord]


def has_compact_marker(payload: bytes) -> bool:
    return bool(payload) and COMPACT_MARKER_MIN <= payload[0] <= COMPACT_MARKER_MAX


def probe_compact(payload: bytes, ctx: DecodeContext) -> DecodedRecord | None:
    """Attempt the compact structured decode.

    Only the marker is recognised; the structured body is not decoded, so
    this always returns None and decoding continues with the legacy form.
    """
    if not has_compact_marker(payload):
        return None
    # TODO: decode the CBOR map body once the field keys for both families are pinned down.
    return None


def negotiate(
    payload: bytes,
    ctx: DecodeContext,
    probe: Probe,
    legacy: LegacyDecoder,
) -> DecodedRecord:
    """Run the probe stage, then the legacy stage if the probe declined.

    Args:
        payload (bytes): Prefix-stripped message payload.
        ctx (DecodeContext): Passed unchanged to both stages.
        probe (Probe): Returns a record or None without raising on a miss.
        legacy (LegacyDecoder): Raises DecodeError on malformed input.

    Returns:
        DecodedRecord: Whichever stage produced a record.

    """
    record = probe(payload, ctx)
    if record is not None:
        return record
    return legacy(payload, ctx)
