"""Load ``Ripper.lex`` output into raw tokens.

Dumps are produced on the Ruby side with, for example::

    ruby -rripper -rjson -e 'puts Ripper.lex(ARGF.read).map { |pos, kind, text, state| [pos, kind, text, state.to_i] }.to_json' file.rb
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import json
from pathlib import Path
from typing import Any

from rippertok.ripper.state import LexerState
from rippertok.ripper.tokens import RawToken


def raw_token_from_row(row: Sequence[Any]) -> RawToken:
    """Convert one ``[[line, column], kind, text, state]`` row."""
    try:
        (line, column), kind, text, state = row
    except (TypeError, ValueError):
        raise ValueError(f"Malformed lex row: {row!r}") from None

    if isinstance(state, str):
        next_state = LexerState.parse(state)
    else:
        next_state = LexerState(int(state))

    return RawToken(
        line=int(line),
        column=int(column),
        kind=str(kind).removeprefix(":"),
        text=str(text),
        next_state=next_state,
    )


def raw_tokens_from_lex(rows: Iterable[Sequence[Any]]) -> list[RawToken]:
    return [raw_token_from_row(row) for row in rows]


def load_lex_dump(path: Path) -> list[RawToken]:
    """Read a JSON array of lex rows from disk."""
    rows = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(rows, list):
        raise ValueError(f"{path}: expected a JSON array of lex rows")
    return raw_tokens_from_lex(rows)
