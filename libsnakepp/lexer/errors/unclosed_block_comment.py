from libsnakepp.exceptions import SnakeppError
from libsnakepp.lexer.tokens import TokenLocation


class UnclosedBlockCommentError(SnakeppError):
    def __init__(self, opened_at: TokenLocation) -> None:
        self.opened_at = opened_at

    def __repr__(self) -> str:
        return f"""Unclosed block comment opened at {self.opened_at}!

Block comment (`/*`) must be closed with `*/` before end of file.

{self.generic_error_name}"""
