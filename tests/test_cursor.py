import pytest

from rippertok.ripper import raw_tokens_from_lex
from rippertok.translate import ResumableCursor


def _cursor(*kinds: str) -> ResumableCursor:
    rows = [((1, index), kind, "x", "BEG") for index, kind in enumerate(kinds)]
    return ResumableCursor(raw_tokens_from_lex(rows))


def _walk(cursor: ResumableCursor) -> list[int]:
    seen: list[int] = []
    while not cursor.is_exhausted:
        seen.append(cursor.index)
        cursor.advance()
    return seen


def test_advance_and_peek() -> None:
    cursor = _cursor("on_ident", "on_int")

    assert cursor.peek_kind(1) == "on_int"
    assert cursor.peek_kind(2) is None
    assert _walk(cursor) == [0, 1]


def test_consume_folds_following_tokens() -> None:
    cursor = _cursor("on_tstring_beg", "on_tstring_content", "on_tstring_end", "on_nl")
    cursor.consume(2)

    assert cursor.last_consumed.kind == "on_tstring_end"
    cursor.advance()
    assert cursor.index == 3


def test_only_one_pending_jump() -> None:
    cursor = _cursor("on_ident", "on_int", "on_int")
    cursor.consume(1)

    with pytest.raises(RuntimeError):
        cursor.consume(1)


def test_heredoc_jumps_visit_tokens_in_grammar_order() -> None:
    # x <<A nl body A-end y
    cursor = _cursor("on_ident", "on_heredoc_beg", "on_nl", "on_tstring_content", "on_heredoc_end", "on_ident")
    visited: list[int] = []
    while not cursor.is_exhausted:
        visited.append(cursor.index)
        kind = cursor.current.kind
        if kind == "on_heredoc_beg":
            assert cursor.open_heredoc()
        elif kind == "on_heredoc_end":
            cursor.close_heredoc()
        elif kind == "on_nl":
            cursor.end_line()
        cursor.advance()

    assert visited == [0, 1, 3, 4, 2, 5]


def test_heredoc_without_line_end_does_not_move() -> None:
    cursor = _cursor("on_heredoc_beg", "on_tstring_content")

    assert cursor.open_heredoc() is False
    cursor.advance()
    assert cursor.index == 1


def test_end_line_without_heredoc_is_a_no_op() -> None:
    cursor = _cursor("on_nl", "on_ident")
    cursor.end_line()

    assert _walk(cursor) == [0, 1]
