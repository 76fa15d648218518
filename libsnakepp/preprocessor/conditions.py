"""Conditional compilation blocks (`#ifdef`, `#ifndef`, `#else`, `#endif`)."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from libsnakepp.lexer.keywords import PreprocessorKeyword
from libsnakepp.lexer.tokens import Token, TokenType

from ._state import ConditionalBlock
from .exceptions import (
    PreprocessorDuplicateElseError,
    PreprocessorUnmatchedConditionalDirectiveError,
    PreprocessorUnterminatedConditionalBlockError,
)
from .macros.exceptions import (
    PreprocessorMacroNonIdentifierNameError,
    PreprocessorNoMacroNameError,
)

if TYPE_CHECKING:
    from ._state import PreprocessorState

CONDITIONAL_KEYWORDS = (
    PreprocessorKeyword.IF_DEFINED,
    PreprocessorKeyword.IF_NOT_DEFINED,
    PreprocessorKeyword.ELSE,
    PreprocessorKeyword.END_IF,
)


def resolve_conditional_block_from_token(
    token: Token,
    state: PreprocessorState,
) -> None:
    """Open, flip or close conditional block from given directive.

    Inactive blocks are still tracked, so nesting is resolved properly while skipping.
    """
    assert token.type == TokenType.KEYWORD
    keyword = token.value
    assert isinstance(keyword, PreprocessorKeyword)
    assert keyword in CONDITIONAL_KEYWORDS

    match keyword:
        case PreprocessorKeyword.IF_DEFINED | PreprocessorKeyword.IF_NOT_DEFINED:
            _open_conditional_block(token, keyword, state)
        case PreprocessorKeyword.ELSE:
            _flip_conditional_block(token, state)
        case PreprocessorKeyword.END_IF:
            _close_conditional_block(token, state)

    _consume_until_end_of_line(state)


def ensure_conditional_blocks_closed(state: PreprocessorState) -> None:
    """Fail if some block was left opened at the end of an input."""
    if state.conditions:
        raise PreprocessorUnterminatedConditionalBlockError(
            block_location=state.conditions[-1].location,
        )


def _open_conditional_block(
    token: Token,
    keyword: PreprocessorKeyword,
    state: PreprocessorState,
) -> None:
    parent_is_active = state.is_active_block
    if not parent_is_active:
        # Condition of an skipped block is not relevant (and may be malformed)
        state.conditions.append(
            ConditionalBlock(
                location=token.location,
                parent_is_active=False,
                condition=False,
            ),
        )
        return

    name_token = next(state.tokenizer, None)
    if not name_token or name_token.type == TokenType.EOL:
        raise PreprocessorNoMacroNameError(location=token.location)
    if name_token.type != TokenType.IDENTIFIER:
        raise PreprocessorMacroNonIdentifierNameError(token=name_token)

    is_defined = name_token.text in state.macros
    state.conditions.append(
        ConditionalBlock(
            location=token.location,
            parent_is_active=True,
            condition=is_defined
            if keyword == PreprocessorKeyword.IF_DEFINED
            else not is_defined,
        ),
    )


def _flip_conditional_block(token: Token, state: PreprocessorState) -> None:
    if not state.conditions:
        raise PreprocessorUnmatchedConditionalDirectiveError(
            keyword=PreprocessorKeyword.ELSE,
            location=token.location,
        )

    block = state.conditions.pop()
    if block.has_else:
        raise PreprocessorDuplicateElseError(
            location=token.location,
            block_location=block.location,
        )
    state.conditions.append(replace(block, has_else=True))


def _close_conditional_block(token: Token, state: PreprocessorState) -> None:
    if not state.conditions:
        raise PreprocessorUnmatchedConditionalDirectiveError(
            keyword=PreprocessorKeyword.END_IF,
            location=token.location,
        )
    state.conditions.pop()


def _consume_until_end_of_line(state: PreprocessorState) -> None:
    """Drop rest of an directive line (e.g `#endif // NAME`, comments are already dropped by lexer)."""
    while token := next(state.tokenizer, None):
        if token.type in (TokenType.EOL, TokenType.EOF):
            break
