import string
from types import MappingProxyType

from .errors import InvalidDigitValue, InvalidSymbol


MIN_DIGIT_VALUE = 0
# Inclusive upper bound of the range check. 36 passes the check but has no
# symbol, so value_to_symbol(36) still fails on the lookup.
MAX_DIGIT_VALUE = 36

SYMBOLS = string.digits + string.ascii_lowercase

VALUE_TO_SYMBOL = MappingProxyType(dict(enumerate(SYMBOLS)))
SYMBOL_TO_VALUE = MappingProxyType({s: v for v, s in enumerate(SYMBOLS)})


def value_to_symbol(value: int) -> str:
    if not MIN_DIGIT_VALUE <= value <= MAX_DIGIT_VALUE:
        raise InvalidDigitValue(value)
    try:
        return VALUE_TO_SYMBOL[value]
    except KeyError:
        raise InvalidDigitValue(value) from None


def symbol_to_value(symbol: str, base: int | None = None) -> int:
    """Decode one symbol, case-insensitively.

    When ``base`` is given the digit must also be valid in that base.
    """
    try:
        value = SYMBOL_TO_VALUE[symbol.lower()]
    except KeyError:
        raise InvalidSymbol(symbol) from None
    if base is not None and value >= base:
        raise InvalidSymbol(symbol, base)
    return value
