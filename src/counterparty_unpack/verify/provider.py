"""Verification of a payload against an externally supplied description.

The payload bytes are authoritative. The description is untrusted and only
ever narrows what passes: a payload that cannot be decoded locally fails no
matter what the description says.
"""

from collections.abc import Mapping
from typing import Self

import msgspec
from msgspec import Struct

from counterparty_unpack.binary.hexutil import ensure_bytes
from counterparty_unpack.config import UnpackConfig
from counterparty_unpack.dispatch import Dispatcher
from counterparty_unpack.errors import DecodeError
from counterparty_unpack.protocol.constants import has_prefix
from counterparty_unpack.verify.compare import to_int
from counterparty_unpack.verify.engine import compare_record
from counterparty_unpack.verify.result import Mismatch, VerificationResult
from counterparty_unpack.verify.schema import Criticality, get_schema_by_type_id

_TYPE_KEYS = ("messageType", "message_type")
_TYPE_ID_KEYS = ("messageTypeId", "message_type_id")
_DATA_KEYS = ("messageData", "message_data", "params")


def _first(data: Mapping[str, object], keys: tuple[str, ...]) -> object | None:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


class ExternalDescription(Struct, frozen=True):
    """What a remote service claims a payload contains.

    Attributes:
        message_type (str, optional): Claimed type name, e.g. 'order'.
        message_type_id (int, optional): Claimed numeric type id.
        message_data (dict): Claimed field values, under any accepted spelling.
        description (str, optional): Free-form text; never compared.

    """

    message_type: str | None = None
    message_type_id: int | str | None = None
    message_data: dict[str, object] = msgspec.field(default_factory=dict)
    description: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> Self:
        """Build from a camelCase or snake_case mapping.

        Raises:
            ValueError: If the field data is present but is not a mapping.

        """
        message_data = _first(data, _DATA_KEYS)
        if message_data is None:
            message_data = {}
        if not isinstance(message_data, Mapping):
            raise ValueError(
                f"Invalid message data; expected a mapping but got {type(message_data).__name__}"
            )
        type_name = _first(data, _TYPE_KEYS)
        description = data.get("description")
        return cls(
            message_type=str(type_name) if type_name is not None else None,
            message_type_id=_first(data, _TYPE_ID_KEYS),
            message_data=dict(message_data),
            description=description if isinstance(description, str) else None,
        )


def _summarize(prefix: str, mismatches: list[Mismatch]) -> str:
    return f"{prefix}: " + "; ".join(m.describe() for m in mismatches)


def verify(
    payload: bytes | bytearray | memoryview | str | None,
    description: ExternalDescription | Mapping[str, object] | None = None,
    config: UnpackConfig | None = None,
) -> VerificationResult:
    """Verify a payload, optionally against an external description.

    Args:
        payload: Full message (prefix, type id and body) as bytes or hex.
            Empty or missing input is not a protocol message.
        description: Claimed contents, as an ExternalDescription or a mapping
            with messageType / messageTypeId / messageData keys.
        config (UnpackConfig, optional): Network and logger settings.

    Returns:
        VerificationResult: Fails on any local decode failure and on any
            critical or dangerous mismatch. Informational mismatches are
            reported but do not fail the result.

    """
    config = config if config is not None else UnpackConfig.default()
    logger = config.logger

    if payload is None:
        return VerificationResult(passed=True)
    try:
        data = ensure_bytes(payload)
    except DecodeError:
        return VerificationResult(passed=True)
    if not data or not has_prefix(data):
        return VerificationResult(passed=True)

    local = Dispatcher(config).decode(data)
    if not local.success:
        error = local.error or "Failed to unpack transaction locally"
        return VerificationResult(
            passed=False,
            warning=error,
            mismatches=(Mismatch("local_unpack", error, None, Criticality.CRITICAL),),
            local_unpack=local,
        )

    unverifiable = None
    if not local.supported:
        unverifiable = (
            f"Message type {local.message_type} (ID: {local.message_type_id}) "
            f"could not be verified field-by-field"
        )

    if description is None:
        return VerificationResult(passed=True, warning=unverifiable, local_unpack=local)

    if not isinstance(description, ExternalDescription):
        try:
            description = ExternalDescription.from_mapping(description)
        except ValueError as exc:
            mismatch = Mismatch(
                "messageData", None, _first(description, _DATA_KEYS), Criticality.CRITICAL
            )
            if logger is not None:
                logger.warning(f"Verification of {local.message_type} rejected description: {exc}")
            return VerificationResult(
                passed=False,
                warning=_summarize("Verification failed", [mismatch]),
                mismatches=(mismatch,),
                local_unpack=local,
            )

    mismatches: list[Mismatch] = []
    if description.message_type != local.message_type:
        mismatches.append(
            Mismatch("message_type", local.message_type, description.message_type)
        )
    if to_int(description.message_type_id) != local.message_type_id:
        mismatches.append(
            Mismatch("message_type_id", local.message_type_id, description.message_type_id)
        )

    schema = get_schema_by_type_id(local.message_type_id)
    if schema is not None and local.data is not None:
        mismatches.extend(compare_record(schema, local.data, description.message_data))

    blocking = [m for m in mismatches if m.criticality != Criticality.INFORMATIONAL]
    if logger is not None:
        for mismatch in mismatches:
            logger.warning(
                f"Verification mismatch on {local.message_type} [{mismatch.criticality}] {mismatch.describe()}"
            )

    if blocking:
        return VerificationResult(
            passed=False,
            warning=_summarize("Verification failed", mismatches),
            mismatches=tuple(mismatches),
            local_unpack=local,
        )

    warning = unverifiable
    if mismatches:
        warning = _summarize("Informational differences", mismatches)
    return VerificationResult(
        passed=True,
        warning=warning,
        mismatches=tuple(mismatches),
        local_unpack=local,
    )
