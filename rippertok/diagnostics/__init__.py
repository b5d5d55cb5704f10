"""Diagnostics."""

from rippertok.diagnostics.codes import (
    TRANSLATE_UNMAPPED_KEYWORD,
    TRANSLATE_UNMAPPED_OPERATOR,
    TRANSLATE_UNMAPPED_PRIMITIVE_KIND,
    DiagnosticSpec,
    Severity,
)
from rippertok.diagnostics.diagnostic import Diagnostic
from rippertok.diagnostics.errors import (
    TranslationError,
    UnmappedKeywordText,
    UnmappedOperatorText,
    UnmappedPrimitiveKind,
)

__all__ = [
    "TRANSLATE_UNMAPPED_KEYWORD",
    "TRANSLATE_UNMAPPED_OPERATOR",
    "TRANSLATE_UNMAPPED_PRIMITIVE_KIND",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "TranslationError",
    "UnmappedKeywordText",
    "UnmappedOperatorText",
    "UnmappedPrimitiveKind",
]
