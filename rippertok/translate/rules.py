"""State-dependent classification of ambiguous lexemes.

Every rule is a pure function of the lexer state the tokenizer was in
*before* the lexeme (and, for ``-``, the kind of the following token).
"""

from rippertok.ripper import NUMERIC_KINDS, LexerState
from rippertok.tokens import OutputKind
from rippertok.translate.tables import MODIFIER_KEYWORDS

_END_LABEL = LexerState.END | LexerState.LABEL


def is_modifier(state: LexerState) -> bool:
    """Whether ``if``/``unless``/... in this state is the statement-modifier form."""
    return state not in (LexerState.BEG, LexerState.FNAME, LexerState.CLASS)


def lbrace_kind(state: LexerState) -> OutputKind:
    if state == LexerState.END:
        return OutputKind.LCURLY
    if state == LexerState.ENDARG:
        return OutputKind.LBRACE_ARG
    return OutputKind.LBRACE


def lbracket_kind(state: LexerState) -> OutputKind:
    if state == LexerState.BEG:
        return OutputKind.LBRACK
    return OutputKind.LBRACK2


def lparen_kind(state: LexerState) -> OutputKind:
    if state.has_begin_bit() or state == LexerState.MID:
        return OutputKind.LPAREN
    if state in (LexerState.CMDARG, LexerState.ARG, _END_LABEL):
        return OutputKind.LPAREN_ARG
    return OutputKind.LPAREN2


def ampersand_kind(state: LexerState) -> OutputKind:
    if state == LexerState.BEG:
        return OutputKind.AMPER
    return OutputKind.AMPER2


def minus_kind(state: LexerState, lookahead: str | None) -> OutputKind:
    """Classify ``-``; ``lookahead`` is the next token's primitive kind, if any."""
    if state.has_begin_bit() or state == LexerState.CMDARG:
        if lookahead in NUMERIC_KINDS:
            return OutputKind.UNARY_NUM
        return OutputKind.UMINUS
    return OutputKind.MINUS


def colon2_kind(state: LexerState) -> OutputKind:
    if state == LexerState.BEG:
        return OutputKind.COLON3
    return OutputKind.COLON2


def range_kind(state: LexerState, text: str) -> OutputKind:
    """Classify ``..`` and ``...``."""
    beginless = state == LexerState.BEG
    if text == "..":
        return OutputKind.BDOT2 if beginless else OutputKind.DOT2
    return OutputKind.BDOT3 if beginless else OutputKind.DOT3


def modifier_keyword_kind(state: LexerState, text: str) -> OutputKind:
    block, modifier = MODIFIER_KEYWORDS[text]
    return modifier if is_modifier(state) else block


def op_assign_payload(text: str) -> str:
    """``"||="`` -> ``"||"``."""
    return text.removesuffix("=")
