from libsnakepp.exceptions import SnakeppError
from libsnakepp.lexer.tokens import TokenLocation


class UnclosedStringQuoteError(SnakeppError):
    def __init__(self, open_quote_at: TokenLocation) -> None:
        self.open_quote_at = open_quote_at

    def __repr__(self) -> str:
        return f"""Unclosed string quote at {self.open_quote_at}!

Did you forgot to close string or mistyped string quote?
Multi-line strings are prohibited, use line continuation (`\\`) if this was your intention

{self.generic_error_name}"""
