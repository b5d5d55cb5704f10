"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


TRANSLATE_UNMAPPED_PRIMITIVE_KIND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TRANSLATE_UNMAPPED_PRIMITIVE_KIND",
    message="Unknown primitive token kind.",
    hint="The tokenizer emitted a token kind this translator has no mapping for; check the Ruby version.",
    severity="error",
    category="translate",
)

TRANSLATE_UNMAPPED_OPERATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TRANSLATE_UNMAPPED_OPERATOR",
    message="Unknown operator text.",
    hint="Add the operator to the operator table or a disambiguation rule.",
    severity="error",
    category="translate",
)

TRANSLATE_UNMAPPED_KEYWORD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TRANSLATE_UNMAPPED_KEYWORD",
    message="Unknown keyword text.",
    hint="Add the keyword to the keyword table.",
    severity="error",
    category="translate",
)
