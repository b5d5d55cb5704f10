"""Translator profiles and configuration options."""

from dataclasses import dataclass
from enum import StrEnum

from rippertok.ripper import PrimitiveKind


class TokenizerProfile(StrEnum):
    """Revision of the tokenizer output the translator is paired with."""

    CURRENT = "current"
    LEGACY = "legacy"


@dataclass(frozen=True, slots=True)
class TranslateOptions:
    """Compatibility switches for differences between tokenizer revisions."""

    profile: TokenizerProfile = TokenizerProfile.CURRENT
    split_signed_integers: bool = True
    char_kind: str = PrimitiveKind.CHAR

    @staticmethod
    def for_profile(profile: TokenizerProfile) -> "TranslateOptions":
        if profile == TokenizerProfile.LEGACY:
            return TranslateOptions(
                profile=profile,
                split_signed_integers=False,
                char_kind="on_char",
            )

        return TranslateOptions(
            profile=profile,
            split_signed_integers=True,
            char_kind=PrimitiveKind.CHAR,
        )
