"""
Cache-busting keys for GET requests.
"""
from typing import Mapping

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_MODULUS = 2147483647


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def create_hash_from_headers(headers: Mapping[str, str], length: int = 5) -> str:
    """
    Create a short, order-independent token from a header mapping.

    Entries are sorted by key and joined as ``key:value`` pairs with ``|``, then
    folded into a 31-based rolling hash and encoded in base 36. Identical
    header sets always give the same token; collisions are acceptable since
    the token only partitions CDN caches.

    Args:
        headers: Header names mapped to values
        length: Maximum length of the token

    Returns:
        Lowercase base-36 string of at most ``length`` characters
    """
    joined = "|".join(f"{key}:{value}" for key, value in sorted(headers.items(), key=lambda kv: kv[0]))

    acc = 0
    for char in joined:
        acc = (acc * 31 + ord(char)) % _MODULUS

    return _to_base36(acc)[:length]
