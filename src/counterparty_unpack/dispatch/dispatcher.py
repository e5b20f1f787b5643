"""Prefix check, type id extraction and routing to the per-type decoders."""

from counterparty_unpack.binary.hexutil import ensure_bytes
from counterparty_unpack.binary.reader import ByteReader
from counterparty_unpack.config import UnpackConfig
from counterparty_unpack.dispatch.result import RawMessage, UnpackResult
from counterparty_unpack.dispatch.table import get_decoder
from counterparty_unpack.errors import DecodeError
from counterparty_unpack.messages.negotiate import has_compact_marker
from counterparty_unpack.messages.records import DecodeContext
from counterparty_unpack.protocol.constants import (
    LEGACY_TYPE_ID_LENGTH,
    MIN_MESSAGE_LENGTH,
    PREFIX_LENGTH,
    MessageTypeId,
    has_prefix,
    message_type_name,
)

_NEGOTIATED_TYPE_IDS = frozenset({MessageTypeId.FAIRMINTER, MessageTypeId.FAIRMINT})


def read_type_id(reader: ByteReader) -> int:
    """Consume the type id at the reader's position.

    A non-zero leading byte is the whole id. A zero leading byte marks the
    legacy form, read as 4 big-endian bytes starting at that zero byte.

    Raises:
        DecodeError: If no byte is available, or fewer than 4 for the legacy form.

    """
    if reader.remaining < 1:
        raise DecodeError("Could not extract message type ID; no bytes after prefix")
    if reader.peek(1)[0] != 0:
        return reader.read_uint8()
    if reader.remaining < LEGACY_TYPE_ID_LENGTH:
        raise DecodeError(
            f"Could not extract message type ID; legacy id needs "
            f"{LEGACY_TYPE_ID_LENGTH} bytes but only {reader.remaining} remain"
        )
    return reader.read_uint32()


def split_message(data: bytes) -> RawMessage:
    """Validate the prefix and split a message into its type id and payload.

    Raises:
        DecodeError: If the message is too short, lacks the prefix, or has
            no readable type id.

    """
    if len(data) < MIN_MESSAGE_LENGTH:
        raise DecodeError(
            f"Data too short for Counterparty message; expected at least "
            f"{MIN_MESSAGE_LENGTH} bytes but got {len(data)}"
        )
    if not has_prefix(data):
        raise DecodeError("Missing CNTRPRTY prefix")

    reader = ByteReader(data[PREFIX_LENGTH:])
    type_id = read_type_id(reader)
    return RawMessage(type_id=type_id, payload=reader.read_remaining())


class Dispatcher:
    """Routes raw messages to decoders and converts every failure to a result.

    Calls never raise. Decode failures are logged at WARNING and unsupported
    type ids at DEBUG when the config carries a logger.
    """

    def __init__(self, config: UnpackConfig | None = None):
        """Initializes the Dispatcher.

        Args:
            config (UnpackConfig, optional): Network and logger settings.
                Defaults to UnpackConfig.default().

        """
        self._config = config if config is not None else UnpackConfig.default()
        self._logger = self._config.logger

    @property
    def config(self) -> UnpackConfig:
        return self._config

    def is_protocol_data(self, data: bytes | bytearray | memoryview | str) -> bool:
        """Fast check for the magic prefix; invalid input is simply False."""
        try:
            return has_prefix(ensure_bytes(data))
        except DecodeError:
            return False

    def _fail(self, error: str, raw: RawMessage | None = None) -> UnpackResult:
        if self._logger is not None:
            self._logger.warning(f"Decode failed: {error}")
        if raw is None:
            return UnpackResult(success=False, error=error)
        return UnpackResult(
            success=False,
            error=error,
            message_type_id=raw.type_id,
            message_type=message_type_name(raw.type_id),
            raw_payload=raw.payload,
        )

    def decode(self, data: bytes | bytearray | memoryview | str) -> UnpackResult:
        """Decode a full message (prefix, type id and payload).

        Args:
            data: Message bytes, or the same as a hex string.

        Returns:
            UnpackResult: Always a result; failures carry success=False and
                an error text. Unknown type ids succeed with supported=False.

        """
        try:
            raw = split_message(ensure_bytes(data))
        except DecodeError as exc:
            return self._fail(str(exc))

        type_name = message_type_name(raw.type_id)
        decoder = get_decoder(raw.type_id)
        if decoder is None:
            error = f"Unsupported message type: {type_name} (ID: {raw.type_id})"
            if self._logger is not None:
                self._logger.debug(error)
            return UnpackResult(
                success=True,
                error=error,
                message_type_id=raw.type_id,
                message_type=type_name,
                raw_payload=raw.payload,
                supported=False,
            )

        if (
            self._logger is not None
            and raw.type_id in _NEGOTIATED_TYPE_IDS
            and has_compact_marker(raw.payload)
        ):
            self._logger.debug(
                f"Compact encoding marker {raw.payload[0]:#04x} on {type_name}; "
                f"falling back to legacy decode"
            )

        ctx = DecodeContext(type_id=raw.type_id, network=self._config.network)
        try:
            record = decoder(raw.payload, ctx)
        except Exception as exc:
            return self._fail(str(exc) or type(exc).__name__, raw)

        return UnpackResult(
            success=True,
            message_type_id=raw.type_id,
            message_type=type_name,
            data=record,
            raw_payload=raw.payload,
        )


_DEFAULT_DISPATCHER = Dispatcher()


def decode(
    data: bytes | bytearray | memoryview | str, config: UnpackConfig | None = None
) -> UnpackResult:
    """Decode with the default dispatcher, or a one-off one for config."""
    if config is None:
        return _DEFAULT_DISPATCHER.decode(data)
    return Dispatcher(config).decode(data)


def is_protocol_data(data: bytes | bytearray | memoryview | str) -> bool:
    return _DEFAULT_DISPATCHER.is_protocol_data(data)
