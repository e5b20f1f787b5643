"""Protocol constants plus address, asset and subasset codecs."""

from .address import (
    PACKED_ADDRESS_LENGTH as PACKED_ADDRESS_LENGTH,
)
from .address import (
    addresses_equal as addresses_equal,
)
from .address import (
    is_segwit_packed as is_segwit_packed,
)
from .address import (
    pack_address as pack_address,
)
from .address import (
    unpack_address as unpack_address,
)
from .address import (
    witness_version as witness_version,
)
from .asset import (
    asset_id_to_name as asset_id_to_name,
)
from .asset import (
    asset_name_to_id as asset_name_to_id,
)
from .constants import (
    MESSAGE_TYPE_NAMES as MESSAGE_TYPE_NAMES,
)
from .constants import (
    MIN_MESSAGE_LENGTH as MIN_MESSAGE_LENGTH,
)
from .constants import (
    PREFIX as PREFIX,
)
from .constants import (
    PREFIX_HEX as PREFIX_HEX,
)
from .constants import (
    MessageTypeId as MessageTypeId,
)
from .constants import (
    Network as Network,
)
from .constants import (
    has_prefix as has_prefix,
)
from .constants import (
    message_type_name as message_type_name,
)
from .subasset import (
    compact_subasset_longname as compact_subasset_longname,
)
from .subasset import (
    expand_subasset_longname as expand_subasset_longname,
)

__all__ = [
    "MESSAGE_TYPE_NAMES",
    "MIN_MESSAGE_LENGTH",
    "PACKED_ADDRESS_LENGTH",
    "PREFIX",
    "PREFIX_HEX",
    "MessageTypeId",
    "Network",
    "addresses_equal",
    "asset_id_to_name",
    "asset_name_to_id",
    "compact_subasset_longname",
    "expand_subasset_longname",
    "has_prefix",
    "is_segwit_packed",
    "message_type_name",
    "pack_address",
    "unpack_address",
    "witness_version",
]
