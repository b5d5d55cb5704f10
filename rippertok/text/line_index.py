"""Line/column to byte offset conversion."""

from dataclasses import dataclass

from rippertok.text.buffer import SourceBuffer
from rippertok.text.text import TextRange, TextSize


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Cumulative byte offsets of every line start in one buffer.

    ``starts[n]`` is the byte offset at which line ``n + 1`` begins. Lines end
    at ``\\n`` only; a trailing unterminated line adds its end as a final
    boundary. An empty buffer has the single boundary ``0``.
    """

    buffer: SourceBuffer
    starts: tuple[int, ...]

    @staticmethod
    def build(buffer: SourceBuffer) -> "LineIndex":
        encoded = buffer.encoded
        starts = [0]
        newline = encoded.find(b"\n")
        while newline != -1:
            starts.append(newline + 1)
            newline = encoded.find(b"\n", newline + 1)
        if starts[-1] < len(encoded):
            starts.append(len(encoded))
        return LineIndex(buffer=buffer, starts=tuple(starts))

    def offset(self, line: int, column: int) -> TextSize:
        """Byte offset of a 1-based line and 0-based byte column."""
        if line < 1 or line > len(self.starts):
            raise ValueError(f"Line {line} is outside of {self.buffer.name!r}")
        return TextSize.from_int(self.starts[line - 1] + column)

    def range(self, line: int, column: int, length: int) -> TextRange:
        start = self.offset(line, column)
        result = TextRange.at(start, TextSize.from_int(length))
        if not self.buffer.full_range.contains_range(result):
            raise ValueError(f"{result!r} is outside of {self.buffer.name!r} ({self.buffer.byte_len.value} bytes)")
        return result
