from libsnakepp.exceptions import SnakeppError
from libsnakepp.lexer.tokens import TokenLocation


class UnexpectedSymbolError(SnakeppError):
    def __init__(self, at: TokenLocation, symbol: str) -> None:
        self.at = at
        self.symbol = symbol

    def __repr__(self) -> str:
        return f"""Unexpected symbol '{self.symbol}' at {self.at}!

This symbol cannot start any token (identifier, number, literal or punctuator).

{self.generic_error_name}"""
