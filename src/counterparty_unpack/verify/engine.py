"""Schema-driven field comparison shared by both verification entry points."""

from collections.abc import Mapping, Sequence

from counterparty_unpack.messages.records import DecodedRecord, MpmaSend
from counterparty_unpack.verify.aliases import lookup
from counterparty_unpack.verify.compare import values_equal
from counterparty_unpack.verify.result import Mismatch
from counterparty_unpack.verify.schema import FieldKind, MessageSchema, ParamSpec

_MISSING = object()


def _as_list(value: object) -> list | None:
    if value is None:
        return None
    if isinstance(value, str):
        return [part.strip() for part in value.split(",")]
    if isinstance(value, Sequence):
        return list(value)
    return None


def external_sends(data: Mapping[str, object]) -> list[Mapping[str, object]] | None:
    """Collect external MPMA recipients, or None if none were described.

    Accepts a list of per-recipient mappings under 'sends' or 'destinations',
    or parallel 'assets' / 'destinations' / 'quantities' lists (or comma
    separated strings) as compose requests carry them.
    """
    sends = lookup(data, "sends")
    if isinstance(sends, Sequence) and not isinstance(sends, str):
        if all(isinstance(item, Mapping) for item in sends):
            return list(sends)

    assets = _as_list(data.get("assets"))
    destinations = _as_list(data.get("destinations"))
    quantities = _as_list(data.get("quantities"))
    columns = [column for column in (assets, destinations, quantities) if column is not None]
    if not columns:
        return None

    count = max(len(column) for column in columns)

    def cell(column: list | None, index: int) -> object:
        if column is None or index >= len(column):
            return None
        return column[index]

    return [
        {
            "asset": cell(assets, i),
            "destination": cell(destinations, i),
            "quantity": cell(quantities, i),
        }
        for i in range(count)
    ]


def _compare_sends(spec: ParamSpec, record: MpmaSend, data: Mapping[str, object]) -> list[Mismatch]:
    external = external_sends(data)
    if external is None:
        if spec.required:
            return [Mismatch(spec.name, len(record.sends), None, spec.criticality, spec.risk)]
        return []

    if len(external) != len(record.sends):
        return [
            Mismatch(
                f"{spec.name}.count",
                len(record.sends),
                len(external),
                spec.criticality,
                spec.risk,
            )
        ]

    mismatches = []
    for i, (local, claimed) in enumerate(zip(record.sends, external)):
        for field, kind, required in (
            ("asset", FieldKind.ASSET, True),
            ("quantity", FieldKind.QUANTITY, True),
            ("destination", FieldKind.ADDRESS, False),
        ):
            value = lookup(claimed, field)
            if value is None and not required:
                continue
            local_value = getattr(local, field)
            if not values_equal(kind, local_value, value):
                mismatches.append(
                    Mismatch(f"{spec.name}[{i}].{field}", local_value, value, spec.criticality, spec.risk)
                )
    return mismatches


def compare_record(
    schema: MessageSchema,
    record: DecodedRecord,
    data: Mapping[str, object],
) -> list[Mismatch]:
    """Compare a decoded record against external data, field by field.

    Args:
        schema (MessageSchema): Fields to compare and how.
        record (DecodedRecord): The locally decoded record.
        data (Mapping[str, object]): External values under any accepted spelling.

    Returns:
        list[Mismatch]: One entry per differing field, in schema order.
            Fields the record does not carry are skipped.

    """
    mismatches: list[Mismatch] = []
    for spec in schema.params:
        if spec.kind == FieldKind.SENDS:
            if isinstance(record, MpmaSend):
                mismatches.extend(_compare_sends(spec, record, data))
            continue

        local = getattr(record, spec.name, _MISSING)
        if local is _MISSING:
            continue

        external = lookup(data, spec.name)
        if external is None and not spec.required:
            continue

        if not values_equal(spec.kind, local, external):
            mismatches.append(Mismatch(spec.name, local, external, spec.criticality, spec.risk))
    return mismatches
