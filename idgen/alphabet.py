"""
Base62 alphabet and numeral helpers.

Symbol order is 0-9, A-Z, a-z. Numeric value and ASCII order coincide,
so fixed-width base62 numerals sort lexicographically by value.
"""

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)
ZERO = ALPHABET[0]
MAX = ALPHABET[-1]

_INDEX = {symbol: value for value, symbol in enumerate(ALPHABET)}


def _symbol_value(symbol):
    try:
        return _INDEX[symbol]
    except KeyError:
        raise ValueError(f"invalid base62 symbol {symbol!r}") from None


def encode_base62(value):
    """Encode a non-negative integer as a base62 string (0 -> "0")."""
    if value < 0:
        raise ValueError(f"cannot encode negative value {value}")
    if value == 0:
        return ZERO

    chars = []
    while value > 0:
        value, remainder = divmod(value, BASE)
        chars.append(ALPHABET[remainder])

    return "".join(reversed(chars))


def pad_base62(value, width):
    """Encode and left-pad with ZERO to `width`. Never truncates."""
    return encode_base62(value).rjust(width, ZERO)


def decode_base62(text):
    """Decode a base62 string back to an integer."""
    if not text:
        raise ValueError("cannot decode empty string")

    value = 0
    for symbol in text:
        value = value * BASE + _symbol_value(symbol)
    return value


def increment_base62(text):
    """
    Add one to a fixed-width big-endian base62 numeral.

    Returns None when the carry runs past the leftmost symbol, i.e. every
    symbol was already MAX.
    """
    chars = list(text)
    carry = 1

    for i in range(len(chars) - 1, -1, -1):
        value = _symbol_value(chars[i]) + carry
        if value < BASE:
            chars[i] = ALPHABET[value]
            carry = 0
            break
        chars[i] = ZERO

    if carry:
        return None

    return "".join(chars)


def is_base62(text):
    """True if `text` is non-empty and uses only alphabet symbols."""
    return bool(text) and all(symbol in _INDEX for symbol in text)
