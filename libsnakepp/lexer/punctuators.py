"""Punctuators of C-like languages, matched by longest prefix."""

from libsnakepp.lexer.tokens import TokenType

PUNCTUATORS_MAPPING = {
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LCURLY,
    "}": TokenType.RCURLY,
    ".": TokenType.DOT,
    "...": TokenType.ELLIPSIS,
    "->": TokenType.ARROW,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    "?": TokenType.QUESTION,
    "#": TokenType.HASH,
    "##": TokenType.HASH_HASH,
    "+": TokenType.PLUS,
    "++": TokenType.PLUS_PLUS,
    "+=": TokenType.PLUS_ASSIGN,
    "-": TokenType.MINUS,
    "--": TokenType.MINUS_MINUS,
    "-=": TokenType.MINUS_ASSIGN,
    "*": TokenType.STAR,
    "*=": TokenType.STAR_ASSIGN,
    "/": TokenType.SLASH,
    "/=": TokenType.SLASH_ASSIGN,
    "%": TokenType.PERCENT,
    "%=": TokenType.PERCENT_ASSIGN,
    "&": TokenType.AMPERSAND,
    "&&": TokenType.AMPERSAND_AMPERSAND,
    "&=": TokenType.AMPERSAND_ASSIGN,
    "|": TokenType.PIPE,
    "||": TokenType.PIPE_PIPE,
    "|=": TokenType.PIPE_ASSIGN,
    "^": TokenType.CARET,
    "^=": TokenType.CARET_ASSIGN,
    "~": TokenType.TILDE,
    "!": TokenType.EXCLAMATION,
    "<<": TokenType.SHIFT_LEFT,
    "<<=": TokenType.SHIFT_LEFT_ASSIGN,
    ">>": TokenType.SHIFT_RIGHT,
    ">>=": TokenType.SHIFT_RIGHT_ASSIGN,
    "=": TokenType.ASSIGNMENT,
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "<": TokenType.LESS,
    "<=": TokenType.LESS_EQUAL,
    ">": TokenType.GREATER,
    ">=": TokenType.GREATER_EQUAL,
}

# Longest first, so `<<=` wins over `<<` and `<`
_PUNCTUATORS_BY_LENGTH = sorted(PUNCTUATORS_MAPPING, key=len, reverse=True)


def match_punctuator(line: str, col: int) -> str | None:
    """Find longest punctuator that line has at given column, if any."""
    for punctuator in _PUNCTUATORS_BY_LENGTH:
        if line.startswith(punctuator, col):
            return punctuator
    return None
