"""Translation of Ripper tokens into the whitequark parser taxonomy."""

from rippertok.translate.cursor import ResumableCursor
from rippertok.translate.driver import Translator, translate
from rippertok.translate.options import TokenizerProfile, TranslateOptions

__all__ = [
    "ResumableCursor",
    "TokenizerProfile",
    "TranslateOptions",
    "Translator",
    "translate",
]
