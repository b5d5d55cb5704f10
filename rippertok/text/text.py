from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of UTF-8 byte length / byte offset into a buffer."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def from_int(value: int) -> "TextSize":
        """Create a TextSize from an integer."""
        return TextSize(value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


ZERO: Final[TextSize] = TextSize(0)
"""Constant representing a TextSize of zero."""


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open byte range [start, end) in a source buffer.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def at(offset: TextSize, length: TextSize) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset.value, offset.value + length.value)

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset.value, offset.value)

    @property
    def start(self) -> TextSize:
        """Get the start offset as a TextSize."""
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        """Get the end offset as a TextSize."""
        return TextSize(self._end)

    def is_empty(self) -> bool:
        """Check if the range is empty."""
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def contains_range(self, other: "TextRange") -> bool:
        """Check if the range fully contains another range."""
        return self._start <= other._start and other._end <= self._end

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both this range and another range."""
        return TextRange(min(self._start, other._start), max(self._end, other._end))

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"
