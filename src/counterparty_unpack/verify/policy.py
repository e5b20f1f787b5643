from enum import StrEnum
from typing import Self

from counterparty_unpack.config import UnpackConfig
from counterparty_unpack.verify.result import ComposeVerificationResult, VerificationResult


class Decision(StrEnum):
    """What an approval workflow should do with a signing request."""

    PROCEED = "proceed"
    WARN = "warn"
    BLOCK = "block"


class ApprovalPolicy:
    """Maps verification results onto signing decisions.

    A payload that could not be decoded locally is always blocked. A failed
    comparison blocks in strict mode and warns otherwise. A passing result
    that still carries a warning (unsupported type, informational
    differences, skipped compose type) warns.
    """

    def __init__(self, strict: bool = True):
        self.strict = strict

    @classmethod
    def from_config(cls, config: UnpackConfig) -> Self:
        return cls(strict=config.strict)

    def decide(
        self,
        result: VerificationResult | ComposeVerificationResult,
        strict: bool | None = None,
    ) -> Decision:
        """Decide for a single result.

        Args:
            result: Output of verify or verify_compose.
            strict (bool, optional): Overrides the policy's own strictness.

        Returns:
            Decision: PROCEED, WARN or BLOCK.

        """
        strict = self.strict if strict is None else strict

        if result.decode_failed:
            return Decision.BLOCK

        if isinstance(result, ComposeVerificationResult):
            ok, has_warning = result.valid, bool(result.warnings or result.info_mismatches)
        else:
            ok, has_warning = result.passed, bool(result.warning or result.mismatches)

        if not ok:
            return Decision.BLOCK if strict else Decision.WARN
        if has_warning:
            return Decision.WARN
        return Decision.PROCEED
