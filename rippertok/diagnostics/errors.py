"""Fatal translation errors.

None of these are recoverable: each one means the translation tables and
the tokenizer that produced the input disagree about the token vocabulary.
"""

from rippertok.diagnostics.codes import (
    TRANSLATE_UNMAPPED_KEYWORD,
    TRANSLATE_UNMAPPED_OPERATOR,
    TRANSLATE_UNMAPPED_PRIMITIVE_KIND,
    DiagnosticSpec,
)
from rippertok.diagnostics.diagnostic import Diagnostic
from rippertok.ripper import RawToken
from rippertok.text import TextRange


class TranslationError(Exception):
    spec: DiagnosticSpec

    def __init__(self, token: RawToken, range: TextRange) -> None:
        self.token = token
        self.range = range
        super().__init__(f"{self.spec.message} {self.detail} at {token.line}:{token.column}")

    @property
    def detail(self) -> str:
        return f"{self.token.kind} {self.token.text!r}"

    @property
    def diagnostic(self) -> Diagnostic:
        return Diagnostic.from_spec(self.spec, self.range, detail=self.detail)


class UnmappedPrimitiveKind(TranslationError):
    spec = TRANSLATE_UNMAPPED_PRIMITIVE_KIND

    @property
    def detail(self) -> str:
        return repr(self.token.kind)


class UnmappedOperatorText(TranslationError):
    spec = TRANSLATE_UNMAPPED_OPERATOR

    @property
    def detail(self) -> str:
        return repr(self.token.text)


class UnmappedKeywordText(TranslationError):
    spec = TRANSLATE_UNMAPPED_KEYWORD

    @property
    def detail(self) -> str:
        return repr(self.token.text)
