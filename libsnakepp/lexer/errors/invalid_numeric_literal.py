from libsnakepp.exceptions import SnakeppError
from libsnakepp.lexer.tokens import TokenLocation


class InvalidNumericLiteralError(SnakeppError):
    def __init__(self, at: TokenLocation, number_raw: str) -> None:
        self.number_raw = number_raw
        self.at = at

    def __repr__(self) -> str:
        return f"""Invalid numeric literal '{self.number_raw}' at {self.at}!

Numbers may be decimal, hexadecimal (`0x`), binary (`0b`), octal (leading `0`) or floating point,
optionally followed by an C suffix (e.g `u`, `l`, `f`).

{self.generic_error_name}"""
