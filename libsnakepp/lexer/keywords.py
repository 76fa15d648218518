from enum import Enum, auto


class PreprocessorKeyword(Enum):
    """Directives that are resolved by preprocessor (when written within source, not produced by macros)."""

    DEFINE = auto()
    UNDEFINE = auto()

    INCLUDE = auto()

    IF_DEFINED = auto()
    IF_NOT_DEFINED = auto()
    ELSE = auto()
    END_IF = auto()


# Directive names as they appear after `#` (whitespace in between is allowed, e.g `#  define`)
DIRECTIVE_TO_PREPROCESSOR_KEYWORD = {
    "define": PreprocessorKeyword.DEFINE,
    "undef": PreprocessorKeyword.UNDEFINE,
    "include": PreprocessorKeyword.INCLUDE,
    "ifdef": PreprocessorKeyword.IF_DEFINED,
    "ifndef": PreprocessorKeyword.IF_NOT_DEFINED,
    "else": PreprocessorKeyword.ELSE,
    "endif": PreprocessorKeyword.END_IF,
}
KEYWORD_TO_NAME = {v: f"#{k}" for k, v in DIRECTIVE_TO_PREPROCESSOR_KEYWORD.items()}
