#!/usr/bin/env python3
"""Quick perf benchmark for token translation.

Expects a directory of ``<name>.rb`` files, each next to a ``<name>.rb.json``
``Ripper.lex`` dump.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import statistics
import time

from tqdm import tqdm

from rippertok import RawToken, SourceBuffer, load_lex_dump, translate


def _collect_pairs(root: Path) -> list[tuple[SourceBuffer, list[RawToken]]]:
    pairs: list[tuple[SourceBuffer, list[RawToken]]] = []
    for source_path in sorted(root.rglob("*.rb")):
        dump_path = source_path.with_name(source_path.name + ".json")
        if not dump_path.is_file():
            continue
        buffer = SourceBuffer(name=str(source_path), source=source_path.read_text(encoding="utf-8"))
        pairs.append((buffer, load_lex_dump(dump_path)))
    return pairs


def _run_once(
    pairs: list[tuple[SourceBuffer, list[RawToken]]],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_in = 0
    total_out = 0
    iterator = tqdm(pairs, desc=label, unit="file") if show_progress else pairs
    for buffer, tokens in iterator:
        total_in += len(tokens)
        total_out += len(translate(buffer, tokens))
    duration = time.perf_counter() - start
    return duration, total_in, total_out


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark token translation throughput")
    parser.add_argument("root", type=Path, help="Directory with .rb files and .rb.json dumps")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    pairs = _collect_pairs(root)
    if not pairs:
        raise SystemExit(f"No .rb/.rb.json pairs found under {root}")

    show_progress = not args.no_progress
    for warmup_idx in range(max(args.warmups, 0)):
        _run_once(pairs, label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}", show_progress=show_progress)

    timings: list[float] = []
    tokens_in = 0
    tokens_out = 0
    for run_idx in range(max(args.runs, 1)):
        duration, tokens_in, tokens_out = _run_once(
            pairs,
            label=f"run {run_idx + 1}/{max(args.runs, 1)}",
            show_progress=show_progress,
        )
        timings.append(duration)

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {len(pairs)}")
    print(f"Tokens in/out: {tokens_in}/{tokens_out}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Tokens/s (mean): {tokens_in / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
