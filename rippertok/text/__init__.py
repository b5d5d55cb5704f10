"""Text primitives: byte sizes, ranges, buffers and line offsets."""

from rippertok.text.buffer import SourceBuffer
from rippertok.text.line_index import LineIndex
from rippertok.text.text import ZERO, TextRange, TextSize

__all__ = [
    "ZERO",
    "LineIndex",
    "SourceBuffer",
    "TextRange",
    "TextSize",
]
