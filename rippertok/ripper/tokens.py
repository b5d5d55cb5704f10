"""Primitive tokens as produced by ``Ripper.lex``."""

from dataclasses import dataclass
from enum import StrEnum

from rippertok.ripper.state import LexerState


class PrimitiveKind(StrEnum):
    """Ripper scanner event names consumed by the translator."""

    BACKREF = "on_backref"
    BACKTICK = "on_backtick"
    CHAR = "on_CHAR"
    COMMA = "on_comma"
    COMMENT = "on_comment"
    CONST = "on_const"
    CVAR = "on_cvar"
    DATA_END = "on___end__"
    EMBDOC = "on_embdoc"
    EMBDOC_BEG = "on_embdoc_beg"
    EMBDOC_END = "on_embdoc_end"
    EMBEXPR_BEG = "on_embexpr_beg"
    EMBEXPR_END = "on_embexpr_end"
    EMBVAR = "on_embvar"
    FLOAT = "on_float"
    GVAR = "on_gvar"
    HEREDOC_BEG = "on_heredoc_beg"
    HEREDOC_END = "on_heredoc_end"
    IDENT = "on_ident"
    IGNORED_NL = "on_ignored_nl"
    IGNORED_SP = "on_ignored_sp"
    IMAGINARY = "on_imaginary"
    INT = "on_int"
    IVAR = "on_ivar"
    KW = "on_kw"
    LABEL = "on_label"
    LABEL_END = "on_label_end"
    LBRACE = "on_lbrace"
    LBRACKET = "on_lbracket"
    LPAREN = "on_lparen"
    NL = "on_nl"
    OP = "on_op"
    PERIOD = "on_period"
    QSYMBOLS_BEG = "on_qsymbols_beg"
    QWORDS_BEG = "on_qwords_beg"
    RATIONAL = "on_rational"
    RBRACE = "on_rbrace"
    RBRACKET = "on_rbracket"
    REGEXP_BEG = "on_regexp_beg"
    REGEXP_END = "on_regexp_end"
    RPAREN = "on_rparen"
    SEMICOLON = "on_semicolon"
    SP = "on_sp"
    SYMBEG = "on_symbeg"
    SYMBOLS_BEG = "on_symbols_beg"
    TLAMBDA = "on_tlambda"
    TLAMBEG = "on_tlambeg"
    TSTRING_BEG = "on_tstring_beg"
    TSTRING_CONTENT = "on_tstring_content"
    TSTRING_END = "on_tstring_end"
    WORDS_BEG = "on_words_beg"
    WORDS_SEP = "on_words_sep"


NUMERIC_KINDS: frozenset[str] = frozenset(
    {
        PrimitiveKind.INT,
        PrimitiveKind.FLOAT,
        PrimitiveKind.RATIONAL,
        PrimitiveKind.IMAGINARY,
    }
)


@dataclass(frozen=True, slots=True)
class RawToken:
    """A single ``Ripper.lex`` entry.

    ``kind`` is kept as a plain string: kinds this package does not know are
    rejected by the translator, not by construction.
    """

    line: int
    column: int
    kind: str
    text: str
    next_state: LexerState

    @property
    def position(self) -> tuple[int, int]:
        return (self.line, self.column)

    @property
    def byte_len(self) -> int:
        return len(self.text.encode("utf-8"))

    def ends_line(self) -> bool:
        """Whether this token terminates a physical source line."""
        if self.kind in (PrimitiveKind.NL, PrimitiveKind.IGNORED_NL):
            return True
        return self.kind == PrimitiveKind.COMMENT and self.text.endswith("\n")
