"""Folding of multi-token runs into the target token shape."""

import logging
import re

from rippertok.ripper import PrimitiveKind, RawToken
from rippertok.text import LineIndex, TextRange
from rippertok.tokens import OutputKind, OutputToken
from rippertok.translate.cursor import ResumableCursor

logger = logging.getLogger(__name__)

_HEREDOC_PREFIX = re.compile(r"(.+?)[A-Za-z_]")
_QUOTES = ("\"", "'")


def token_range(lines: LineIndex, token: RawToken) -> TextRange:
    return lines.range(token.line, token.column, token.byte_len)


def chomp(text: str) -> str:
    """Remove one trailing line terminator."""
    if text.endswith("\r\n"):
        return text[:-2]
    return text.removesuffix("\n")


def _chomped_range(lines: LineIndex, token: RawToken) -> TextRange:
    return lines.range(token.line, token.column, len(chomp(token.text).encode("utf-8")))


def fold_string(cursor: ResumableCursor, lines: LineIndex) -> list[OutputToken]:
    """Fold ``"" / "text"`` (no interpolation) into a single ``tSTRING``."""
    opener = cursor.current
    start = token_range(lines, opener)

    if opener.text in _QUOTES:
        following = cursor.peek(1)
        if following is not None and following.kind == PrimitiveKind.TSTRING_END:
            cursor.consume(1)
            return [OutputToken(OutputKind.STRING, "", start.cover(token_range(lines, following)))]

        closer = cursor.peek(2)
        if (
            following is not None
            and closer is not None
            and following.kind == PrimitiveKind.TSTRING_CONTENT
            and closer.kind == PrimitiveKind.TSTRING_END
        ):
            cursor.consume(2)
            return [OutputToken(OutputKind.STRING, following.text, start.cover(token_range(lines, closer)))]

    return [OutputToken(OutputKind.STRING_BEG, opener.text, start)]


def fold_symbol(cursor: ResumableCursor, lines: LineIndex) -> list[OutputToken]:
    """Fold ``:name`` into a single ``tSYMBOL``; quoted symbols stay open."""
    opener = cursor.current
    start = token_range(lines, opener)
    content = cursor.peek(1)

    if opener.text == ":" and content is not None:
        cursor.consume(1)
        return [OutputToken(OutputKind.SYMBOL, content.text, start.cover(token_range(lines, content)))]

    return [OutputToken(OutputKind.SYMBEG, opener.text, start)]


def split_regexp_end(token: RawToken, lines: LineIndex) -> list[OutputToken]:
    """``/im`` -> ``tSTRING_END "/"`` + ``tREGEXP_OPT "im"``."""
    delimiter = token.text[0]
    delimiter_len = len(delimiter.encode("utf-8"))
    options = token.text[1:]
    return [
        OutputToken(OutputKind.STRING_END, delimiter, lines.range(token.line, token.column, delimiter_len)),
        OutputToken(
            OutputKind.REGEXP_OPT,
            options,
            lines.range(token.line, token.column + delimiter_len, len(options.encode("utf-8"))),
        ),
    ]


def fold_embdoc(cursor: ResumableCursor, lines: LineIndex) -> list[OutputToken]:
    """Fold ``=begin ... =end`` into one ``tCOMMENT``."""
    opener = cursor.current
    end_index = cursor.find_forward(PrimitiveKind.EMBDOC_END)
    if end_index is None:
        raise ValueError(f"Unterminated embedded document at {opener.line}:{opener.column}")

    run = cursor.run_through(end_index)
    text = "".join(token.text for token in run)
    closer = run[-1]

    cursor.consume_through(end_index)
    return [OutputToken(OutputKind.COMMENT, text, token_range(lines, opener).cover(token_range(lines, closer)))]


def fold_word_list(cursor: ResumableCursor, lines: LineIndex, kind: OutputKind) -> list[OutputToken]:
    """Emit a ``%w``-style opener, swallowing the separator right after it."""
    opener = cursor.current
    if cursor.peek_kind(1) == PrimitiveKind.WORDS_SEP:
        cursor.consume(1)
    return [OutputToken(kind, opener.text, token_range(lines, opener))]


def comment(cursor: ResumableCursor, lines: LineIndex) -> list[OutputToken]:
    token = cursor.current
    result = [OutputToken(OutputKind.COMMENT, chomp(token.text), _chomped_range(lines, token))]
    if token.ends_line():
        cursor.end_line()
    return result


def line_end(cursor: ResumableCursor, lines: LineIndex) -> list[OutputToken]:
    result = [OutputToken(OutputKind.NL, None, token_range(lines, cursor.current))]
    cursor.end_line()
    return result


def heredoc_open(cursor: ResumableCursor, lines: LineIndex) -> list[OutputToken]:
    """Emit ``tSTRING_BEG`` and move on to the heredoc body."""
    token = cursor.current
    match = _HEREDOC_PREFIX.match(token.text)
    prefix = match.group(1) if match is not None else token.text
    result = [OutputToken(OutputKind.STRING_BEG, prefix, token_range(lines, token))]
    if not cursor.open_heredoc():
        logger.debug("heredoc opener at %d:%d has no line end after it", token.line, token.column)
    return result


def heredoc_close(cursor: ResumableCursor, lines: LineIndex) -> list[OutputToken]:
    """Emit ``tSTRING_END`` and go back to the rest of the opener's line."""
    token = cursor.current
    result = [OutputToken(OutputKind.STRING_END, chomp(token.text), _chomped_range(lines, token))]
    cursor.close_heredoc()
    return result
