"""Output side: the target grammar's token vocabulary."""

from rippertok.tokens.kind import OutputKind
from rippertok.tokens.token import Literal, OutputToken, dump_tokens, token_text

__all__ = [
    "Literal",
    "OutputKind",
    "OutputToken",
    "dump_tokens",
    "token_text",
]
