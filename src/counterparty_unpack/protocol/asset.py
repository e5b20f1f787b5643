"""Asset id <-> asset name codec.

Ids map onto three namespaces:

    - 0 and 1 are the native BTC and XCP assets.
    - [26^3, 26^12) are named assets, spelled in base 26 with A..Z digits.
    - [26^12 + 1, 2^64 - 1] are numeric assets, spelled 'A' + decimal id.

Every other id, including 26^12 itself, is rejected, which keeps the mapping
reversible in both directions.
"""

from counterparty_unpack.errors import AssetIdError

B26_DIGITS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

BTC = "BTC"
XCP = "XCP"
BTC_ID = 0
XCP_ID = 1

MIN_NAMED_ID = 26**3
MAX_NAMED_ID = 26**12 - 1
MIN_NUMERIC_ID = 26**12 + 1
MAX_NUMERIC_ID = 2**64 - 1

MIN_NAME_LENGTH = 4
MAX_NAMED_LENGTH = 12


def asset_id_to_name(asset_id: int) -> str:
    """Convert a numeric asset id to its human-readable name.

    Raises:
        AssetIdError: If the id falls outside every namespace.

    """
    if asset_id == BTC_ID:
        return BTC
    if asset_id == XCP_ID:
        return XCP
    if asset_id < MIN_NAMED_ID:
        raise AssetIdError(f"Asset id too low: {asset_id}")
    if asset_id > MAX_NUMERIC_ID:
        raise AssetIdError(f"Asset id too high: {asset_id}")
    if asset_id >= MIN_NUMERIC_ID:
        return f"A{asset_id}"
    if asset_id > MAX_NAMED_ID:
        raise AssetIdError(f"Asset id not in any namespace: {asset_id}")

    digits = []
    n = asset_id
    while n > 0:
        n, r = divmod(n, 26)
        digits.append(B26_DIGITS[r])
    return "".join(reversed(digits))


def _numeric_name_to_id(asset_name: str) -> int:
    digits = asset_name[1:]
    if not digits.isdigit() or not digits.isascii():
        raise AssetIdError(f"Non-numeric asset name starts with 'A': {asset_name}")
    asset_id = int(digits)
    if not (MIN_NUMERIC_ID <= asset_id <= MAX_NUMERIC_ID):
        raise AssetIdError(f"Numeric asset name not in range: {asset_name}")
    if asset_name != f"A{asset_id}":
        raise AssetIdError(f"Numeric asset name has leading zeros: {asset_name}")
    return asset_id


def asset_name_to_id(asset_name: str) -> int:
    """Convert an asset name to its numeric id.

    Raises:
        AssetIdError: If the name is malformed or maps outside the id ranges.

    """
    if asset_name == BTC:
        return BTC_ID
    if asset_name == XCP:
        return XCP_ID
    if len(asset_name) < MIN_NAME_LENGTH:
        raise AssetIdError(f"Asset name too short: {asset_name!r}")
    if asset_name[0] == "A":
        return _numeric_name_to_id(asset_name)
    if len(asset_name) > MAX_NAMED_LENGTH:
        raise AssetIdError(f"Long asset names must be numeric: {asset_name}")

    n = 0
    for char in asset_name:
        digit = B26_DIGITS.find(char)
        if digit < 0:
            raise AssetIdError(f"Invalid character in asset name: {char!r}")
        n = n * 26 + digit

    if n < MIN_NAMED_ID:
        raise AssetIdError(f"Asset name too short: {asset_name}")
    return n
