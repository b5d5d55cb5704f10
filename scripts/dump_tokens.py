#!/usr/bin/env python
"""Translate a ``Ripper.lex`` JSON dump and print or write the result."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rippertok import OutputToken, SourceBuffer, TokenizerProfile, TranslateOptions, load_lex_dump, translate
from rippertok.tokens import token_text


def format_token(idx: int, token: OutputToken, buffer: SourceBuffer) -> str:
    return (
        f"[{idx}] {token.kind.value} "
        f"payload={token.payload!r} "
        f"range={token.range.as_tuple()} "
        f"text={token_text(buffer, token)!r}"
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Translate a Ripper.lex dump into parser tokens")
    parser.add_argument("source", type=Path, help="Ruby source file the dump was produced from")
    parser.add_argument("dump", type=Path, help="JSON array of Ripper.lex rows")
    parser.add_argument("--output", type=Path, default=None, help="Write tokens here instead of stdout")
    parser.add_argument(
        "--profile",
        choices=[profile.value for profile in TokenizerProfile],
        default=TokenizerProfile.CURRENT.value,
        help="Tokenizer revision the dump came from (default: current)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log cursor jumps")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="[%(levelname)s] %(message)s")

    buffer = SourceBuffer(name=str(args.source), source=args.source.read_text(encoding="utf-8"))
    options = TranslateOptions.for_profile(TokenizerProfile(args.profile))
    tokens = translate(buffer, load_lex_dump(args.dump), options)
    lines = [format_token(idx, token, buffer) for idx, token in enumerate(tokens)]

    if args.output is None:
        print("\n".join(lines))
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")

    print(f"Wrote {len(tokens)} tokens to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
