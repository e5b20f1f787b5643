import msgspec
from msgspec import Struct

from counterparty_unpack.dispatch.result import UnpackResult
from counterparty_unpack.verify.schema import Criticality


def format_value(value: object) -> str:
    """Render a value for mismatch text: JSON where possible, else str()."""
    try:
        return msgspec.json.encode(value).decode("utf-8")
    except (TypeError, msgspec.EncodeError):
        return str(value)


class Mismatch(Struct, frozen=True):
    """One field whose local and external values disagree.

    Attributes:
        field (str): Canonical field name, e.g. 'destination' or 'sends[1].quantity'.
        local (object): Value decoded from the payload bytes.
        external (object): Value claimed by the external description or request.
        criticality (Criticality): How much the difference matters.
        risk (str, optional): What goes wrong if the difference is ignored.

    """

    field: str
    local: object = None
    external: object = None
    criticality: Criticality = Criticality.CRITICAL
    risk: str | None = None

    def describe(self) -> str:
        return f"{self.field}: local={format_value(self.local)}, external={format_value(self.external)}"

    def describe_expected(self) -> str:
        """Render as 'Field mismatch: expected <external>, got <local>'."""
        label = self.field[:1].upper() + self.field[1:].replace("_", " ")
        return (
            f"{label} mismatch: expected {format_value(self.external)}, "
            f"got {format_value(self.local)}"
        )


class VerificationResult(Struct, frozen=True):
    """Outcome of checking a payload against an external description.

    Attributes:
        passed (bool): False on a failed local decode or on any critical or
            dangerous mismatch.
        warning (str, optional): Human-readable summary of the failure, or
            of why a passing result still deserves attention.
        mismatches (tuple[Mismatch, ...]): Every differing field, in
            comparison order.
        local_unpack (UnpackResult, optional): The local decode, when one ran.

    """

    passed: bool
    warning: str | None = None
    mismatches: tuple[Mismatch, ...] = ()
    local_unpack: UnpackResult | None = None

    @property
    def decode_failed(self) -> bool:
        return self.local_unpack is not None and not self.local_unpack.success


class ComposeVerificationResult(Struct, frozen=True):
    """Outcome of checking a payload against the params it was composed from.

    Attributes:
        valid (bool): True when no critical or dangerous mismatch was found.
        critical_mismatches (tuple[Mismatch, ...]): Funds at risk.
        dangerous_mismatches (tuple[Mismatch, ...]): Harmful side effects.
        info_mismatches (tuple[Mismatch, ...]): Metadata differences only.
        errors (tuple[str, ...]): Decode failure, type mismatch, or one
            '[CRITICAL]' / '[DANGEROUS]' line per blocking mismatch.
        warnings (tuple[str, ...]): One line per informational mismatch, or
            the reason verification was skipped.
        message_type (str, optional): Type name of the local decode.
        local_unpack (UnpackResult, optional): The local decode, when one ran.

    """

    valid: bool
    critical_mismatches: tuple[Mismatch, ...] = ()
    dangerous_mismatches: tuple[Mismatch, ...] = ()
    info_mismatches: tuple[Mismatch, ...] = ()
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    message_type: str | None = None
    local_unpack: UnpackResult | None = None

    @property
    def decode_failed(self) -> bool:
        return self.local_unpack is not None and not self.local_unpack.success

    @property
    def mismatches(self) -> tuple[Mismatch, ...]:
        return self.critical_mismatches + self.dangerous_mismatches + self.info_mismatches
