"""Translate Ruby ``Ripper.lex`` tokens into whitequark ``parser`` tokens."""

from rippertok.diagnostics import (
    TranslationError,
    UnmappedKeywordText,
    UnmappedOperatorText,
    UnmappedPrimitiveKind,
)
from rippertok.ripper import LexerState, PrimitiveKind, RawToken, load_lex_dump, raw_tokens_from_lex
from rippertok.text import SourceBuffer, TextRange
from rippertok.tokens import OutputKind, OutputToken
from rippertok.translate import TokenizerProfile, TranslateOptions, Translator, translate

__all__ = [
    "LexerState",
    "OutputKind",
    "OutputToken",
    "PrimitiveKind",
    "RawToken",
    "SourceBuffer",
    "TextRange",
    "TokenizerProfile",
    "TranslateOptions",
    "TranslationError",
    "Translator",
    "UnmappedKeywordText",
    "UnmappedOperatorText",
    "UnmappedPrimitiveKind",
    "load_lex_dump",
    "raw_tokens_from_lex",
    "translate",
]
