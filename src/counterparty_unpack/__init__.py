"""Decoding and verification of Counterparty messages carried in OP_RETURN outputs."""

from .config import (
    UnpackConfig as UnpackConfig,
)
from .dispatch import (
    Dispatcher as Dispatcher,
)
from .dispatch import (
    UnpackResult as UnpackResult,
)
from .dispatch import (
    decode as decode,
)
from .dispatch import (
    is_protocol_data as is_protocol_data,
)
from .errors import (
    AddressError as AddressError,
)
from .errors import (
    AssetIdError as AssetIdError,
)
from .errors import (
    DecodeError as DecodeError,
)
from .errors import (
    UnpackError as UnpackError,
)
from .protocol import (
    MessageTypeId as MessageTypeId,
)
from .protocol import (
    Network as Network,
)
from .verify import (
    ApprovalPolicy as ApprovalPolicy,
)
from .verify import (
    ComposeVerificationResult as ComposeVerificationResult,
)
from .verify import (
    Decision as Decision,
)
from .verify import (
    ExternalDescription as ExternalDescription,
)
from .verify import (
    Mismatch as Mismatch,
)
from .verify import (
    VerificationResult as VerificationResult,
)
from .verify import (
    verify as verify,
)
from .verify import (
    verify_compose as verify_compose,
)

__all__ = [
    "AddressError",
    "ApprovalPolicy",
    "AssetIdError",
    "ComposeVerificationResult",
    "Decision",
    "DecodeError",
    "Dispatcher",
    "ExternalDescription",
    "MessageTypeId",
    "Mismatch",
    "Network",
    "UnpackConfig",
    "UnpackError",
    "UnpackResult",
    "VerificationResult",
    "decode",
    "is_protocol_data",
    "verify",
    "verify_compose",
]
