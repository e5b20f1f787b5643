"""Verification of a composed payload against the request that produced it."""

from collections.abc import Mapping

from counterparty_unpack.config import UnpackConfig
from counterparty_unpack.dispatch import Dispatcher
from counterparty_unpack.protocol.constants import ISSUANCE_TYPE_IDS, MessageTypeId
from counterparty_unpack.verify.engine import compare_record
from counterparty_unpack.verify.result import ComposeVerificationResult, Mismatch
from counterparty_unpack.verify.schema import Criticality, get_schema_by_type_id

_SENDS = frozenset({MessageTypeId.SEND, MessageTypeId.ENHANCED_SEND})

# Compose request type -> type ids the resulting payload may carry.
COMPOSE_TYPE_IDS: dict[str, frozenset[int]] = {
    "send": _SENDS,
    "enhanced_send": _SENDS,
    "mpma": frozenset({MessageTypeId.MPMA_SEND}),
    "sweep": frozenset({MessageTypeId.SWEEP}),
    "order": frozenset({MessageTypeId.ORDER}),
    "btcpay": frozenset({MessageTypeId.BTC_PAY}),
    "dispenser": frozenset({MessageTypeId.DISPENSER}),
    "dispense": frozenset({MessageTypeId.DISPENSE}),
    "issuance": ISSUANCE_TYPE_IDS,
    "broadcast": frozenset({MessageTypeId.BROADCAST}),
    "bet": frozenset({MessageTypeId.BET}),
    "dividend": frozenset({MessageTypeId.DIVIDEND}),
    "cancel": frozenset({MessageTypeId.CANCEL}),
    "fairminter": frozenset({MessageTypeId.FAIRMINTER}),
    "fairmint": frozenset({MessageTypeId.FAIRMINT}),
    "utxo": frozenset({MessageTypeId.UTXO}),
    "attach": frozenset({MessageTypeId.ATTACH}),
    "detach": frozenset({MessageTypeId.DETACH}),
    "destroy": frozenset({MessageTypeId.DESTROY}),
}

_ERROR_TAGS = {
    Criticality.CRITICAL: "[CRITICAL]",
    Criticality.DANGEROUS: "[DANGEROUS]",
}


def verify_compose(
    payload: bytes | bytearray | memoryview | str,
    compose_type: str,
    params: Mapping[str, object] | None = None,
    config: UnpackConfig | None = None,
) -> ComposeVerificationResult:
    """Check that a composed payload does what the compose request asked for.

    Args:
        payload: Full message (prefix, type id and body) as bytes or hex.
        compose_type (str): Requested compose type, e.g. 'send' or 'order'.
        params (Mapping[str, object], optional): The request params.
        config (UnpackConfig, optional): Network and logger settings.

    Returns:
        ComposeVerificationResult: Invalid on a decode failure, a message
            type other than the one requested, or any critical or dangerous
            param mismatch. Unknown compose types are skipped with a warning.

    """
    config = config if config is not None else UnpackConfig.default()
    params = params if params is not None else {}
    logger = config.logger

    local = Dispatcher(config).decode(payload)
    if not local.success or local.data is None:
        return ComposeVerificationResult(
            valid=False,
            errors=(local.error or "Failed to unpack transaction",),
            message_type=local.message_type,
            local_unpack=local,
        )

    accepted = COMPOSE_TYPE_IDS.get(compose_type)
    if accepted is None:
        return ComposeVerificationResult(
            valid=True,
            warnings=(f"Unknown compose type: {compose_type}, skipping verification",),
            message_type=local.message_type,
            local_unpack=local,
        )

    if local.message_type_id not in accepted:
        mismatch = Mismatch("message_type", local.message_type, compose_type)
        return ComposeVerificationResult(
            valid=False,
            critical_mismatches=(mismatch,),
            errors=(f"Message type mismatch: expected {compose_type}, got {local.message_type}",),
            message_type=local.message_type,
            local_unpack=local,
        )

    schema = get_schema_by_type_id(local.message_type_id)
    mismatches = compare_record(schema, local.data, params) if schema is not None else []

    grouped: dict[Criticality, list[Mismatch]] = {level: [] for level in Criticality}
    errors, warnings = [], []
    for mismatch in mismatches:
        grouped[mismatch.criticality].append(mismatch)
        tag = _ERROR_TAGS.get(mismatch.criticality)
        if tag is None:
            warnings.append(mismatch.describe_expected())
        else:
            errors.append(f"{tag} {mismatch.describe_expected()}")
        if logger is not None:
            logger.warning(f"Compose verification mismatch on {compose_type}: {mismatch.describe_expected()}")

    return ComposeVerificationResult(
        valid=not grouped[Criticality.CRITICAL] and not grouped[Criticality.DANGEROUS],
        critical_mismatches=tuple(grouped[Criticality.CRITICAL]),
        dangerous_mismatches=tuple(grouped[Criticality.DANGEROUS]),
        info_mismatches=tuple(grouped[Criticality.INFORMATIONAL]),
        errors=tuple(errors),
        warnings=tuple(warnings),
        message_type=local.message_type,
        local_unpack=local,
    )
