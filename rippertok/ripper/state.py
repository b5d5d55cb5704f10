"""Ripper lexer states."""

from enum import IntFlag


class LexerState(IntFlag):
    """Mirror of Ripper's ``EXPR_*`` bits (``Ripper::Lexer::State#to_i``)."""

    NONE = 0
    BEG = 1 << 0
    END = 1 << 1
    ENDARG = 1 << 2
    ENDFN = 1 << 3
    ARG = 1 << 4
    CMDARG = 1 << 5
    MID = 1 << 6
    FNAME = 1 << 7
    DOT = 1 << 8
    CLASS = 1 << 9
    LABEL = 1 << 10
    LABELED = 1 << 11
    FITEM = 1 << 12

    def has_begin_bit(self) -> bool:
        return bool(self & LexerState.BEG)

    @staticmethod
    def parse(text: str) -> "LexerState":
        """Parse Ripper's textual form, e.g. ``"BEG|LABEL"`` or ``"EXPR_END"``."""
        state = LexerState.NONE
        for part in text.split("|"):
            name = part.strip().removeprefix("EXPR_")
            try:
                state |= LexerState[name]
            except KeyError:
                raise ValueError(f"Unknown lexer state: {part!r}") from None
        return state

    def __str__(self) -> str:
        if not self:
            return "NONE"
        return "|".join(member.name for member in LexerState if member.value and self & member)
