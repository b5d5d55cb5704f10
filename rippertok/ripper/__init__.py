"""Input side: the Ripper token vocabulary."""

from rippertok.ripper.load import load_lex_dump, raw_token_from_row, raw_tokens_from_lex
from rippertok.ripper.state import LexerState
from rippertok.ripper.tokens import NUMERIC_KINDS, PrimitiveKind, RawToken

__all__ = [
    "NUMERIC_KINDS",
    "LexerState",
    "PrimitiveKind",
    "RawToken",
    "load_lex_dump",
    "raw_token_from_row",
    "raw_tokens_from_lex",
]
