from libsnakepp.exceptions import SnakeppError
from libsnakepp.lexer.tokens import TokenLocation


class EmptyCharacterLiteralError(SnakeppError):
    def __init__(self, open_quote_at: TokenLocation) -> None:
        self.open_quote_at = open_quote_at

    def __repr__(self) -> str:
        return f"""Empty character literal at {self.open_quote_at}!

Expected single *symbol* in character literal but got nothing.

{self.generic_error_name}"""
