"""Single-pass translation of Ripper tokens into the target taxonomy."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from rippertok.diagnostics import UnmappedKeywordText, UnmappedOperatorText, UnmappedPrimitiveKind
from rippertok.ripper import LexerState, PrimitiveKind, RawToken
from rippertok.text import LineIndex, SourceBuffer, TextRange
from rippertok.tokens import Literal, OutputKind, OutputToken
from rippertok.translate import folding, literals, rules
from rippertok.translate.cursor import ResumableCursor
from rippertok.translate.folding import token_range
from rippertok.translate.options import TranslateOptions
from rippertok.translate.tables import (
    DIRECT_KINDS,
    DROPPED_KINDS,
    KEYWORDS,
    MODIFIER_KEYWORDS,
    OP_ASSIGN,
    OPERATORS,
    WORD_LIST_OPENERS,
)

logger = logging.getLogger(__name__)


class Translator:
    """Translate one buffer's token stream.

    A translator is single use: it owns the line index and cursor for exactly
    one run of :meth:`translate`.
    """

    def __init__(
        self,
        buffer: SourceBuffer,
        tokens: Sequence[RawToken],
        options: TranslateOptions | None = None,
    ) -> None:
        self._buffer = buffer
        self._lines = LineIndex.build(buffer)
        self._cursor = ResumableCursor(tokens)
        self._options = options if options is not None else TranslateOptions()
        self._state = LexerState.BEG
        self._results: list[OutputToken] = []
        self._done = False

    def translate(self) -> list[OutputToken]:
        if self._done:
            raise RuntimeError("Translator instances are single use")
        self._done = True

        cursor = self._cursor
        while not cursor.is_exhausted:
            self._results.extend(self._translate_token(cursor.current))
            self._state = cursor.last_consumed.next_state
            cursor.advance()

        logger.debug("translated %s into %d tokens", self._buffer.name, len(self._results))
        return self._results

    def _translate_token(self, token: RawToken) -> list[OutputToken]:
        kind = token.kind

        if kind in DROPPED_KINDS:
            return []

        if (direct := DIRECT_KINDS.get(kind)) is not None:
            return [self._emit(direct, token.text, token)]

        if (word_list := WORD_LIST_OPENERS.get(kind)) is not None:
            return folding.fold_word_list(self._cursor, self._lines, word_list)

        if kind == self._options.char_kind:
            return [self._emit(OutputKind.CHARACTER, literals.character_payload(token.text), token)]

        match kind:
            case PrimitiveKind.IDENT:
                if token.text.endswith(("!", "?")):
                    return [self._emit(OutputKind.FID, token.text, token)]
                return [self._emit(OutputKind.IDENTIFIER, token.text, token)]
            case PrimitiveKind.KW:
                return [self._keyword(token)]
            case PrimitiveKind.OP:
                return [self._operator(token)]
            case PrimitiveKind.INT:
                return self._integer(token)
            case PrimitiveKind.FLOAT:
                return [self._emit(OutputKind.FLOAT, literals.parse_float(token.text), token)]
            case PrimitiveKind.RATIONAL:
                return [self._emit(OutputKind.RATIONAL, literals.parse_rational(token.text), token)]
            case PrimitiveKind.IMAGINARY:
                return [self._emit(OutputKind.IMAGINARY, literals.parse_imaginary(token.text), token)]
            case PrimitiveKind.BACKREF:
                number = literals.nth_ref_number(token.text)
                if number is not None:
                    return [self._emit(OutputKind.NTH_REF, number, token)]
                return [self._emit(OutputKind.BACK_REF, token.text, token)]
            case PrimitiveKind.LABEL:
                return [self._emit(OutputKind.LABEL, token.text.removesuffix(":"), token)]
            case PrimitiveKind.LABEL_END:
                return [self._emit(OutputKind.LABEL_END, token.text.removesuffix(":"), token)]
            case PrimitiveKind.EMBVAR:
                return [self._emit(OutputKind.STRING_DVAR, None, token)]
            case PrimitiveKind.WORDS_SEP:
                return [self._emit(OutputKind.SPACE, None, token)]
            case PrimitiveKind.LBRACE:
                return [self._emit(rules.lbrace_kind(self._state), token.text, token)]
            case PrimitiveKind.LBRACKET:
                return [self._emit(rules.lbracket_kind(self._state), token.text, token)]
            case PrimitiveKind.LPAREN:
                return [self._emit(rules.lparen_kind(self._state), token.text, token)]
            case PrimitiveKind.NL | PrimitiveKind.IGNORED_NL:
                return folding.line_end(self._cursor, self._lines)
            case PrimitiveKind.COMMENT:
                return folding.comment(self._cursor, self._lines)
            case PrimitiveKind.TSTRING_BEG:
                return folding.fold_string(self._cursor, self._lines)
            case PrimitiveKind.SYMBEG:
                return folding.fold_symbol(self._cursor, self._lines)
            case PrimitiveKind.REGEXP_END:
                return folding.split_regexp_end(token, self._lines)
            case PrimitiveKind.EMBDOC_BEG:
                return folding.fold_embdoc(self._cursor, self._lines)
            case PrimitiveKind.HEREDOC_BEG:
                return folding.heredoc_open(self._cursor, self._lines)
            case PrimitiveKind.HEREDOC_END:
                return folding.heredoc_close(self._cursor, self._lines)
            case PrimitiveKind.DATA_END:
                self._cursor.finish()
                return []
            case _:
                raise UnmappedPrimitiveKind(token, self._range(token))

    def _keyword(self, token: RawToken) -> OutputToken:
        if token.text in MODIFIER_KEYWORDS:
            return self._emit(rules.modifier_keyword_kind(self._state, token.text), token.text, token)
        kind = KEYWORDS.get(token.text)
        if kind is None:
            raise UnmappedKeywordText(token, self._range(token))
        return self._emit(kind, token.text, token)

    def _operator(self, token: RawToken) -> OutputToken:
        text = token.text
        match text:
            case "::":
                return self._emit(rules.colon2_kind(self._state), text, token)
            case "-":
                return self._emit(rules.minus_kind(self._state, self._cursor.peek_kind(1)), text, token)
            case "&":
                return self._emit(rules.ampersand_kind(self._state), text, token)
            case ".." | "...":
                return self._emit(rules.range_kind(self._state, text), text, token)

        if text in OP_ASSIGN:
            return self._emit(OutputKind.OP_ASGN, rules.op_assign_payload(text), token)

        kind = OPERATORS.get(text)
        if kind is None:
            raise UnmappedOperatorText(token, self._range(token))
        return self._emit(kind, text, token)

    def _integer(self, token: RawToken) -> list[OutputToken]:
        text = token.text
        if text.startswith("+") and self._options.split_signed_integers:
            return [
                OutputToken(OutputKind.UNARY_NUM, "+", self._lines.range(token.line, token.column, 1)),
                OutputToken(
                    OutputKind.INTEGER,
                    literals.parse_integer(text[1:]),
                    self._lines.range(token.line, token.column + 1, token.byte_len - 1),
                ),
            ]
        return [self._emit(OutputKind.INTEGER, literals.parse_integer(text), token)]

    def _emit(self, kind: OutputKind, payload: Literal, token: RawToken) -> OutputToken:
        return OutputToken(kind, payload, self._range(token))

    def _range(self, token: RawToken) -> TextRange:
        return token_range(self._lines, token)


def translate(
    buffer: SourceBuffer,
    tokens: Sequence[RawToken],
    options: TranslateOptions | None = None,
) -> list[OutputToken]:
    """Translate a ``Ripper.lex`` token sequence for ``buffer``."""
    return Translator(buffer, tokens, options).translate()
