from .converter import (
    DISPLAY_SCALE,
    MAX_FRACTION_DIGITS,
    base_to_decimal,
    convert_base,
    decimal_to_base,
    parse_base,
    parse_base_pair,
    round_fraction,
)
from .errors import ConversionError, InvalidBase, InvalidDigitValue, InvalidSymbol
from .symbols import symbol_to_value, value_to_symbol

__all__ = [
    "DISPLAY_SCALE",
    "MAX_FRACTION_DIGITS",
    "ConversionError",
    "InvalidBase",
    "InvalidDigitValue",
    "InvalidSymbol",
    "base_to_decimal",
    "convert_base",
    "decimal_to_base",
    "parse_base",
    "parse_base_pair",
    "round_fraction",
    "symbol_to_value",
    "value_to_symbol",
]
