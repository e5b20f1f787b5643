"""Exception hierarchy for decoding and verification."""


class UnpackError(Exception):
    """Base class for all errors raised by this package."""


class DecodeError(UnpackError, ValueError):
    """Raised when a payload cannot be decoded into a message record."""


class AddressError(DecodeError):
    """Raised when a packed address cannot be converted to or from text."""


class AssetIdError(DecodeError):
    """Raised when an asset id or asset name is outside its valid range."""
