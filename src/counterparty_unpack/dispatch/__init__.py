"""Message dispatch: prefix and type id handling plus the decoder table."""

from .dispatcher import (
    Dispatcher as Dispatcher,
)
from .dispatcher import (
    decode as decode,
)
from .dispatcher import (
    is_protocol_data as is_protocol_data,
)
from .dispatcher import (
    read_type_id as read_type_id,
)
from .dispatcher import (
    split_message as split_message,
)
from .result import (
    RawMessage as RawMessage,
)
from .result import (
    UnpackResult as UnpackResult,
)
from .table import (
    DECODERS as DECODERS,
)
from .table import (
    get_decoder as get_decoder,
)
from .table import (
    supported_type_ids as supported_type_ids,
)

__all__ = [
    "DECODERS",
    "Dispatcher",
    "RawMessage",
    "UnpackResult",
    "decode",
    "get_decoder",
    "is_protocol_data",
    "read_type_id",
    "split_message",
    "supported_type_ids",
]
