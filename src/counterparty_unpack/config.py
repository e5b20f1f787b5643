"""Top-level configuration shared by the dispatcher and the verifier."""

from typing import Self

from msgspec import Struct

from counterparty_unpack.logging import Logger
from counterparty_unpack.protocol.constants import Network


class UnpackConfig(Struct):
    """Configuration for decoding and verification.

    Attributes:
        network (Network): Network used to render segwit addresses.
        strict (bool): If True, verification mismatches block signing rather
            than only warning.
        logger (Logger, optional): Receives decode failures and verification
            mismatches. No logging happens when unset.

    """

    network: Network = Network.MAINNET
    strict: bool = True
    logger: Logger | None = None

    def __post_init__(self) -> None:
        """Validate the network and logger types."""
        if not isinstance(self.network, Network):
            raise ValueError(
                f"Invalid network; expected one of {[n.value for n in Network]} but got {self.network!r}"
            )
        if self.logger is not None and not isinstance(self.logger, Logger):
            raise ValueError(
                f"Invalid logger; expected Logger but got {type(self.logger).__name__}"
            )

    @classmethod
    def default(cls) -> Self:
        """Return a strict mainnet config without logging."""
        return cls(network=Network.MAINNET, strict=True, logger=None)
