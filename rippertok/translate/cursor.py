"""Resumable cursor over the raw token sequence.

Folding never assigns the position directly; it asks the cursor to consume
or to jump, and the cursor applies the move on the next ``advance``.
"""

from collections.abc import Sequence
import logging

from rippertok.ripper import RawToken

logger = logging.getLogger(__name__)


class ResumableCursor:
    """Index into a token sequence with explicit heredoc resume points.

    ``heredoc_openers`` is a stack of opener indices whose body is being
    translated; ``line_resume`` is the index of the last heredoc terminator,
    where translation continues once the opener line has been replayed.
    """

    def __init__(self, tokens: Sequence[RawToken]) -> None:
        self._tokens = tokens
        self._index = 0
        self._next: int | None = None
        self._last = 0
        self._heredoc_openers: list[int] = []
        self._line_resume: int | None = None

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_exhausted(self) -> bool:
        return self._index >= len(self._tokens)

    @property
    def current(self) -> RawToken:
        return self._tokens[self._index]

    def peek(self, ahead: int = 1) -> RawToken | None:
        """Token ``ahead`` positions after the current one, or ``None`` past the end."""
        index = self._index + ahead
        if index >= len(self._tokens):
            return None
        return self._tokens[index]

    def peek_kind(self, ahead: int = 1) -> str | None:
        token = self.peek(ahead)
        return token.kind if token is not None else None

    def find_forward(self, kind: str) -> int | None:
        """Index of the next token of ``kind``, starting at the current token."""
        for index in range(self._index, len(self._tokens)):
            if self._tokens[index].kind == kind:
                return index
        return None

    @property
    def last_consumed(self) -> RawToken:
        """Last token belonging to the current step (the current one unless folded)."""
        return self._tokens[self._last]

    def run_through(self, index: int) -> list[RawToken]:
        """Tokens from the current one up to and including ``index``."""
        return list(self._tokens[self._index : index + 1])

    def advance(self) -> None:
        if self._next is not None:
            self._index = self._next
            self._next = None
        else:
            self._index += 1
        self._last = self._index

    def consume(self, count: int) -> None:
        """Treat the next ``count`` tokens as part of the current one."""
        self._last = self._index + count
        self._jump(self._index + 1 + count)

    def consume_through(self, index: int) -> None:
        if index < self._index:
            raise ValueError("Cannot consume backwards")
        self._last = index
        self._jump(index + 1)

    def finish(self) -> None:
        """Stop after the current token."""
        self._jump(len(self._tokens))

    def open_heredoc(self) -> bool:
        """Jump from a heredoc opener to the start of its body.

        Returns ``False`` when the opener has no line end after it, in which
        case the stream is already in grammar order and nothing moves.
        """
        if self._line_resume is not None:
            body = self._line_resume + 1
        else:
            line_end = self._find_line_end()
            if line_end is None:
                return False
            body = line_end + 1

        self._heredoc_openers.append(self._index)
        logger.debug("heredoc opener at %d, body at %d", self._index, body)
        self._jump(body)
        return True

    def close_heredoc(self) -> None:
        """Jump from a heredoc terminator back to the token after its opener."""
        if not self._heredoc_openers:
            return
        opener = self._heredoc_openers.pop()
        self._line_resume = self._index
        logger.debug("heredoc terminator at %d, replaying opener line from %d", self._index, opener + 1)
        self._jump(opener + 1)

    def end_line(self) -> None:
        """At a line end, skip the heredoc bodies that were already translated."""
        if self._line_resume is None or self._heredoc_openers:
            return
        logger.debug("line end at %d, resuming at %d", self._index, self._line_resume + 1)
        self._jump(self._line_resume + 1)
        self._line_resume = None

    def _find_line_end(self) -> int | None:
        for index in range(self._index + 1, len(self._tokens)):
            if self._tokens[index].ends_line():
                return index
        return None

    def _jump(self, index: int) -> None:
        if self._next is not None:
            raise RuntimeError(f"Cursor already has a pending jump to {self._next}")
        self._next = index
