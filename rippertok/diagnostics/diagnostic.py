"""Diagnostics core types."""

from dataclasses import dataclass

from rippertok.diagnostics.codes import DiagnosticSpec, Severity
from rippertok.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic describing a translation failure."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, *, detail: str | None = None) -> "Diagnostic":
        message = spec.message if detail is None else f"{spec.message} {detail}"
        return Diagnostic(
            code=spec.code,
            message=message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
