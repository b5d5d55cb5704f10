import json
from pathlib import Path

import pytest

from rippertok.ripper import LexerState, PrimitiveKind, load_lex_dump, raw_token_from_row


def test_lexer_state_parses_ripper_text() -> None:
    assert LexerState.parse("BEG") == LexerState.BEG
    assert LexerState.parse("END|LABEL") == LexerState.END | LexerState.LABEL
    assert LexerState.parse("EXPR_ARG|EXPR_LABELED") == LexerState.ARG | LexerState.LABELED
    assert LexerState.parse("NONE") == LexerState.NONE


def test_lexer_state_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        LexerState.parse("BEG|SIDEWAYS")


def test_lexer_state_str_round_trips_ripper_text() -> None:
    assert str(LexerState.END | LexerState.LABEL) == "END|LABEL"
    assert str(LexerState.NONE) == "NONE"


def test_has_begin_bit() -> None:
    assert LexerState.BEG.has_begin_bit()
    assert (LexerState.BEG | LexerState.LABEL).has_begin_bit()
    assert not LexerState.MID.has_begin_bit()


def test_raw_token_from_row_accepts_numeric_and_symbolic_states() -> None:
    token = raw_token_from_row([[3, 4], ":on_ident", "foo", 1026])

    assert token.position == (3, 4)
    assert token.kind == PrimitiveKind.IDENT
    assert token.text == "foo"
    assert token.next_state == LexerState.END | LexerState.LABEL

    labeled = raw_token_from_row([[1, 0], "on_label", "a:", "ARG|LABELED"])
    assert labeled.next_state == LexerState.ARG | LexerState.LABELED


def test_raw_token_from_row_rejects_malformed_rows() -> None:
    with pytest.raises(ValueError):
        raw_token_from_row([[1, 0], "on_ident", "foo"])


def test_unknown_kinds_are_kept_as_text() -> None:
    token = raw_token_from_row([[1, 0], "on_frobnicate", "x", "BEG"])

    assert token.kind == "on_frobnicate"


def test_ends_line() -> None:
    assert raw_token_from_row([[1, 0], "on_nl", "\n", "BEG"]).ends_line()
    assert raw_token_from_row([[1, 0], "on_ignored_nl", "\n", "BEG"]).ends_line()
    assert raw_token_from_row([[1, 0], "on_comment", "# x\n", "BEG"]).ends_line()
    assert not raw_token_from_row([[1, 0], "on_comment", "# x", "BEG"]).ends_line()
    assert not raw_token_from_row([[1, 0], "on_sp", " ", "BEG"]).ends_line()


def test_load_lex_dump(tmp_path: Path) -> None:
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps([[[1, 0], "on_ident", "x", 32], [[1, 1], "on_nl", "\n", 1]]), encoding="utf-8")

    tokens = load_lex_dump(path)

    assert [token.kind for token in tokens] == ["on_ident", "on_nl"]
    assert tokens[0].next_state == LexerState.CMDARG


def test_load_lex_dump_requires_an_array(tmp_path: Path) -> None:
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps({"tokens": []}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_lex_dump(path)
