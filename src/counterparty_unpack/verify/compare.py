"""Type-aware equality between locally decoded values and external values.

External values arrive from JSON-ish sources, so the same quantity may be an
int, a decimal string or an integral float. Booleans are never quantities,
and a float with a fractional part never equals an integer.
"""

import math

from counterparty_unpack.protocol.address import addresses_equal as _addresses_equal
from counterparty_unpack.verify.schema import FieldKind

FLOAT_TOLERANCE = 1e-4
# Decimal digits in 2**64 - 1; longer strings cannot be protocol quantities.
MAX_QUANTITY_DIGITS = 20

_TRUE_STRINGS = frozenset({"1", "true", "yes"})
_FALSE_STRINGS = frozenset({"0", "false", "no"})


def to_int(value: object) -> int | None:
    """Normalize a quantity-like value to int, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return None
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text[:1] in ("-", "+") else text
        if len(digits) <= MAX_QUANTITY_DIGITS and digits.isascii() and digits.isdigit():
            return int(text)
    return None


def to_bool(value: object) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    return None


def to_float(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def quantities_equal(local: object, external: object) -> bool:
    left, right = to_int(local), to_int(external)
    return left is not None and right is not None and left == right


def assets_equal(local: object, external: object) -> bool:
    if not isinstance(local, str) or not isinstance(external, str):
        return False
    if not local or not external:
        return False
    return local.upper() == external.upper()


def hashes_equal(local: object, external: object) -> bool:
    if not isinstance(local, str) or not isinstance(external, str):
        return False
    return local.lower() == external.lower()


def addresses_equal(local: object, external: object) -> bool:
    if not isinstance(local, str) or not isinstance(external, str):
        return False
    return _addresses_equal(local, external)


def bools_equal(local: object, external: object) -> bool:
    left, right = to_bool(local), to_bool(external)
    return left is not None and left == right


def floats_equal(local: object, external: object) -> bool:
    left, right = to_float(local), to_float(external)
    if left is None or right is None:
        return False
    return abs(left - right) <= FLOAT_TOLERANCE


def texts_equal(local: object, external: object) -> bool:
    if local is None or external is None:
        return local is None and external is None
    return str(local) == str(external)


_EQUALITY = {
    FieldKind.QUANTITY: quantities_equal,
    FieldKind.ASSET: assets_equal,
    FieldKind.ADDRESS: addresses_equal,
    FieldKind.HASH: hashes_equal,
    FieldKind.BOOL: bools_equal,
    FieldKind.FLOAT: floats_equal,
    FieldKind.TEXT: texts_equal,
}


def values_equal(kind: FieldKind, local: object, external: object) -> bool:
    """Compare two scalar values under the rule for the given field kind.

    Raises:
        ValueError: If the kind has no scalar rule (e.g. SENDS).

    """
    try:
        equal = _EQUALITY[kind]
    except KeyError:
        raise ValueError(f"No scalar equality rule for field kind {kind}") from None
    return equal(local, external)
