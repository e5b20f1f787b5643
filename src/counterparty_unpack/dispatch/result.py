import msgspec
from msgspec import Struct

from counterparty_unpack.messages.records import DecodedRecord


class RawMessage(Struct, frozen=True):
    """Prefix-stripped payload plus the type id read in front of it."""

    type_id: int
    payload: bytes


class UnpackResult(Struct, frozen=True):
    """Outcome of a single decode call.

    Attributes:
        success (bool): True when the payload decoded, or when its type id is
            simply not supported.
        error (str, optional): Failure reason, or the unsupported-type note.
        message_type_id (int): Extracted type id; -1 if none could be read.
        message_type (str, optional): Name for the type id.
        data (DecodedRecord, optional): The decoded record on success.
        raw_payload (bytes): Payload bytes following the type id.
        supported (bool): False when no decoder exists for the type id.

    """

    success: bool
    error: str | None = None
    message_type_id: int = -1
    message_type: str | None = None
    data: DecodedRecord | None = None
    raw_payload: bytes = b""
    supported: bool = True

    @property
    def decoded(self) -> bool:
        """True only when a record was actually produced."""
        return self.success and self.data is not None

    def to_dict(self) -> dict:
        """Convert to builtin types, rendering the raw payload as hex."""
        result = msgspec.to_builtins(self, builtin_types=(bytes,))
        result["raw_payload"] = self.raw_payload.hex()
        return result
