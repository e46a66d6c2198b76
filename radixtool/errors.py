class ConversionError(ValueError):
    pass


class InvalidSymbol(ConversionError):
    def __init__(self, symbol: str, base: int | None = None) -> None:
        self.symbol = symbol
        self.base = base
        if base is None:
            message = f"'{symbol}' is not a valid latin letter/digit."
        else:
            message = f"'{symbol}' is not a valid digit in base {base}."
        super().__init__(message)


class InvalidDigitValue(ConversionError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Cannot represent {value} as a latin character.")


class InvalidBase(ConversionError):
    pass
