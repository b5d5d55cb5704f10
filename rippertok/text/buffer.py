"""Source buffers borrowed by a translation."""

from dataclasses import dataclass, field

from rippertok.text.text import ZERO, TextRange, TextSize


@dataclass(frozen=True, slots=True)
class SourceBuffer:
    """Immutable source text plus the name it was read from."""

    name: str
    source: str
    _encoded: bytes = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_encoded", self.source.encode("utf-8"))

    @property
    def encoded(self) -> bytes:
        return self._encoded

    @property
    def byte_len(self) -> TextSize:
        return TextSize.from_int(len(self._encoded))

    @property
    def full_range(self) -> TextRange:
        return TextRange.at(ZERO, self.byte_len)

    def slice(self, range: TextRange) -> str:
        """Get the text covered by a byte range."""
        return self._encoded[range.start.value : range.end.value].decode("utf-8")
