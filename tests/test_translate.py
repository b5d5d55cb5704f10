import pytest

from rippertok import (
    OutputKind,
    SourceBuffer,
    TokenizerProfile,
    TranslateOptions,
    Translator,
    UnmappedKeywordText,
    UnmappedOperatorText,
    UnmappedPrimitiveKind,
    raw_tokens_from_lex,
    translate,
)
from tests._debug import debug_dump_tokens
from tests._shared_cases import TRANSLATE_CASES, TranslateCase, case_id


def _translate_rows(source: str, rows, options: TranslateOptions | None = None):
    buffer = SourceBuffer(name="test.rb", source=source)
    return translate(buffer, raw_tokens_from_lex(rows), options)


@pytest.mark.parametrize("case", TRANSLATE_CASES, ids=case_id)
def test_translation_matches_expected_tokens(case: TranslateCase) -> None:
    tokens = translate(case.buffer, case.tokens)
    debug_dump_tokens(case.name, case.buffer, tokens)

    actual = [(str(tok.kind), tok.payload, tok.range.as_tuple()) for tok in tokens]
    assert actual == list(case.expected)


@pytest.mark.parametrize("case", TRANSLATE_CASES, ids=case_id)
def test_every_range_lies_within_the_buffer(case: TranslateCase) -> None:
    buffer = case.buffer
    for tok in translate(buffer, case.tokens):
        assert buffer.full_range.contains_range(tok.range), tok


@pytest.mark.parametrize("case", TRANSLATE_CASES, ids=case_id)
def test_translation_is_deterministic(case: TranslateCase) -> None:
    assert translate(case.buffer, case.tokens) == translate(case.buffer, case.tokens)


def test_empty_input_produces_no_tokens() -> None:
    assert translate(SourceBuffer(name="empty.rb", source=""), []) == []


def test_heredoc_body_precedes_rest_of_opener_line() -> None:
    case = next(c for c in TRANSLATE_CASES if c.name == "squiggly_heredoc")
    kinds = [tok.kind for tok in translate(case.buffer, case.tokens) if tok.kind != OutputKind.NL]

    assert kinds == [
        OutputKind.IDENTIFIER,
        OutputKind.EQL,
        OutputKind.STRING_BEG,
        OutputKind.STRING_CONTENT,
        OutputKind.STRING_END,
        OutputKind.IDENTIFIER,
    ]


def test_as_tuple_uses_target_grammar_shape() -> None:
    tokens = _translate_rows(":foo", [((1, 0), "on_symbeg", ":", "FNAME"), ((1, 1), "on_ident", "foo", "END")])

    assert [tok.as_tuple() for tok in tokens] == [("tSYMBOL", ("foo", (0, 4)))]


def test_state_after_fold_comes_from_last_consumed_token() -> None:
    # ``:a if b``: the symbol ends in END, so ``if`` is a modifier.
    rows = [
        ((1, 0), "on_symbeg", ":", "FNAME"),
        ((1, 1), "on_ident", "a", "END"),
        ((1, 2), "on_sp", " ", "END"),
        ((1, 3), "on_kw", "if", "BEG"),
        ((1, 5), "on_sp", " ", "BEG"),
        ((1, 6), "on_ident", "b", "ARG"),
    ]
    tokens = _translate_rows(":a if b", rows)

    assert tokens[1].kind == OutputKind.KW_IF_MOD


def test_signed_integer_is_split_by_default() -> None:
    rows = [
        ((1, 0), "on_ident", "foo", "CMDARG"),
        ((1, 3), "on_sp", " ", "CMDARG"),
        ((1, 4), "on_int", "+1", "END"),
    ]
    tokens = _translate_rows("foo +1", rows)

    assert [(tok.kind, tok.payload, tok.range.as_tuple()) for tok in tokens[1:]] == [
        (OutputKind.UNARY_NUM, "+", (4, 5)),
        (OutputKind.INTEGER, 1, (5, 6)),
    ]


def test_legacy_profile_keeps_signed_integer_whole() -> None:
    rows = [
        ((1, 0), "on_ident", "foo", "CMDARG"),
        ((1, 3), "on_sp", " ", "CMDARG"),
        ((1, 4), "on_int", "+1", "END"),
    ]
    options = TranslateOptions.for_profile(TokenizerProfile.LEGACY)
    tokens = _translate_rows("foo +1", rows, options)

    assert [(tok.kind, tok.payload, tok.range.as_tuple()) for tok in tokens[1:]] == [
        (OutputKind.INTEGER, 1, (4, 6)),
    ]


def test_character_literal_kind_follows_profile() -> None:
    current = _translate_rows("?a", [((1, 0), "on_CHAR", "?a", "END")])
    assert [(tok.kind, tok.payload) for tok in current] == [(OutputKind.CHARACTER, "a")]

    legacy = TranslateOptions.for_profile(TokenizerProfile.LEGACY)
    translated = _translate_rows("?a", [((1, 0), "on_char", "?a", "END")], legacy)
    assert [(tok.kind, tok.payload) for tok in translated] == [(OutputKind.CHARACTER, "a")]

    with pytest.raises(UnmappedPrimitiveKind):
        _translate_rows("?a", [((1, 0), "on_CHAR", "?a", "END")], legacy)


def test_numeric_literal_payloads() -> None:
    rows = [
        ((1, 0), "on_float", "1.5", "END"),
        ((1, 3), "on_sp", " ", "END"),
        ((1, 4), "on_rational", "3r", "END"),
        ((1, 6), "on_sp", " ", "END"),
        ((1, 7), "on_imaginary", "2i", "END"),
        ((1, 9), "on_sp", " ", "END"),
        ((1, 10), "on_int", "0x1f", "END"),
    ]
    tokens = _translate_rows("1.5 3r 2i 0x1f", rows)

    assert [(tok.kind, tok.payload) for tok in tokens] == [
        (OutputKind.FLOAT, 1.5),
        (OutputKind.RATIONAL, 3),
        (OutputKind.IMAGINARY, 2j),
        (OutputKind.INTEGER, 31),
    ]


def test_unknown_primitive_kind_is_fatal() -> None:
    with pytest.raises(UnmappedPrimitiveKind) as excinfo:
        _translate_rows("x y", [((1, 0), "on_ident", "x", "CMDARG"), ((1, 2), "on_frobnicate", "y", "BEG")])

    error = excinfo.value
    assert error.token.kind == "on_frobnicate"
    assert error.range.as_tuple() == (2, 3)
    assert error.diagnostic.code == "TRANSLATE_UNMAPPED_PRIMITIVE_KIND"
    assert error.diagnostic.category == "translate"
    assert "on_frobnicate" in str(error)


def test_unknown_operator_text_is_fatal() -> None:
    with pytest.raises(UnmappedOperatorText) as excinfo:
        _translate_rows("<~", [((1, 0), "on_op", "<~", "BEG")])

    assert excinfo.value.diagnostic.code == "TRANSLATE_UNMAPPED_OPERATOR"


def test_unknown_keyword_text_is_fatal() -> None:
    with pytest.raises(UnmappedKeywordText) as excinfo:
        _translate_rows("frob", [((1, 0), "on_kw", "frob", "BEG")])

    assert excinfo.value.diagnostic.code == "TRANSLATE_UNMAPPED_KEYWORD"


def test_translator_is_single_use() -> None:
    buffer = SourceBuffer(name="x.rb", source="x")
    translator = Translator(buffer, raw_tokens_from_lex([((1, 0), "on_ident", "x", "CMDARG")]))
    translator.translate()

    with pytest.raises(RuntimeError):
        translator.translate()
