from libsnakepp.exceptions import SnakeppError
from libsnakepp.lexer.tokens import TokenLocation


class AmbiguousHexadecimalAlphabetError(SnakeppError):
    def __init__(self, at: TokenLocation, number_raw: str) -> None:
        self.number_raw = number_raw
        self.at = at

    def __repr__(self) -> str:
        return f"""Ambiguous hex (16-base) alphabet at {self.at}!

Invalid number: '{self.number_raw}'
Hexadecimal numbers must consist only from symbols of hex alphabet (0-F)

{self.generic_error_name}"""
