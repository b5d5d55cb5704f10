"""Output tokens."""

from dataclasses import dataclass
from fractions import Fraction
from typing import TypeAlias

from rippertok.text import SourceBuffer, TextRange
from rippertok.tokens.kind import OutputKind

Literal: TypeAlias = str | int | float | Fraction | complex | None


@dataclass(frozen=True, slots=True)
class OutputToken:
    """A single translated token: kind, literal payload and byte range."""

    kind: OutputKind
    payload: Literal
    range: TextRange

    def as_tuple(self) -> tuple[str, tuple[Literal, tuple[int, int]]]:
        """The ``[type, [value, range]]`` shape used by the target grammar."""
        return (str(self.kind), (self.payload, self.range.as_tuple()))


def token_text(buffer: SourceBuffer, token: OutputToken) -> str:
    """Get the source text covered by a token."""
    return buffer.slice(token.range)


def dump_tokens(tokens: list[OutputToken], buffer: SourceBuffer) -> None:
    """Print token list with kind, range, payload, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(buffer, tok)
        print(f"{i:03d} {tok.kind.value:<15} range={tok.range.as_tuple()} payload={tok.payload!r} text={text!r}")
