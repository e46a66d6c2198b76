import logging
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Overflow,
    ROUND_HALF_EVEN,
)

from .errors import InvalidBase
from .symbols import symbol_to_value, value_to_symbol


logger = logging.getLogger(__name__)

MIN_BASE = 0
MAX_BASE = 36
DECIMAL_BASE = 10

SEPARATOR = "."
MAX_FRACTION_DIGITS = 100
DECIMAL128_PRECISION = 34
DISPLAY_SCALE = 5

# Negative powers of the source base: 34 significant digits, unbounded exponent.
DECIMAL128 = Context(
    prec=DECIMAL128_PRECISION,
    rounding=ROUND_HALF_EVEN,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
)

# Sums and products only; any rounding here traps.
EXACT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
)


def parse_base(value: str) -> int:
    try:
        base = int(value)
    except ValueError:
        raise InvalidBase(f"Base must be an integer, got '{value}'.") from None

    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}.")
    return base


def parse_base_pair(value: str) -> tuple[int, int]:
    parts = value.split()
    if len(parts) != 2:
        raise InvalidBase("Enter exactly two bases: {source base} {target base}.")
    return parse_base(parts[0]), parse_base(parts[1])


def _split(numeral: str) -> tuple[str, str | None]:
    integer_part, separator, fraction_part = numeral.partition(SEPARATOR)
    if not separator:
        return integer_part, None
    return integer_part, fraction_part


def _integer_value(digits: str, base: int) -> int:
    total = 0
    for index, symbol in enumerate(reversed(digits)):
        total += symbol_to_value(symbol, base) * base ** index
    return total


def base_to_decimal(numeral: str, source_base: int) -> str:
    """Convert ``numeral`` written in ``source_base`` to a decimal string.

    A fractional result keeps the full 34-digit tail of the negative powers;
    trimming it is left to round_fraction().
    """
    if source_base == DECIMAL_BASE:
        return numeral

    integer_part, fraction_part = _split(numeral)
    integer_sum = _integer_value(integer_part, source_base)
    if fraction_part is None:
        return str(integer_sum)

    total = Decimal(integer_sum)
    for index, symbol in enumerate(fraction_part):
        value = Decimal(symbol_to_value(symbol, source_base))
        weight = DECIMAL128.power(Decimal(source_base), -1 - index)
        total = EXACT.add(total, EXACT.multiply(value, weight))

    return format(total, "f")


def decimal_to_base(numeral: str, target_base: int) -> str:
    """Convert a decimal string to ``target_base``.

    The fractional expansion stops once the residue is exactly zero or after
    MAX_FRACTION_DIGITS digits, whichever comes first.
    """
    if target_base == DECIMAL_BASE:
        return numeral
    if target_base < 2:
        raise InvalidBase(f"Cannot write a number in base {target_base}.")

    integer_part, fraction_part = _split(numeral)

    quotient = _integer_value(integer_part, DECIMAL_BASE)
    digits = []
    while True:
        quotient, remainder = divmod(quotient, target_base)
        digits.append(value_to_symbol(remainder))
        if quotient == 0:
            break
    converted = "".join(reversed(digits))

    if fraction_part is None:
        return converted

    for symbol in fraction_part:
        symbol_to_value(symbol, DECIMAL_BASE)

    fraction = Decimal(f"0.{fraction_part}")
    base = Decimal(target_base)
    fraction_digits = []
    while True:
        product = EXACT.multiply(fraction, base)
        digit = int(product)
        fraction_digits.append(value_to_symbol(digit))
        fraction = EXACT.subtract(product, Decimal(digit))
        if fraction == 0:
            break
        if len(fraction_digits) >= MAX_FRACTION_DIGITS:
            logger.debug(
                "%s has no finite expansion in base %d, stopped after %d digits",
                numeral, target_base, MAX_FRACTION_DIGITS,
            )
            break

    return converted + SEPARATOR + "".join(fraction_digits)


def convert_base(numeral: str, source_base: int, target_base: int) -> str:
    if source_base == target_base:
        return numeral

    decimal = base_to_decimal(numeral, source_base)
    logger.debug("%s (base %d) -> %s (base 10)", numeral, source_base, decimal)
    return decimal_to_base(decimal, target_base)


def round_fraction(numeral: str, scale: int) -> str:
    """Truncate or zero-pad the fractional part to exactly ``scale`` digits."""
    if scale < 0:
        raise ValueError(f"Scale must be non-negative, got {scale}.")

    integer_part, fraction_part = _split(numeral)
    if fraction_part is None:
        return numeral

    return f"{integer_part}{SEPARATOR}{fraction_part[:scale].ljust(scale, '0')}"
