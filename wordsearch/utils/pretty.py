"""Pretty-print helpers for word-search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from ..core.models import WordSearchResult


def format_grid(grid: Sequence[Sequence[str]]) -> str:
    width = len(grid[0]) if grid else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(grid):
        row_render = " ".join(f"{letter:>2}" for letter in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid: Sequence[Sequence[str]], *, label: str | None = None, stream=None) -> None:
    """Print the letter grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def print_puzzle_stats(result: WordSearchResult, *, stream=None) -> None:
    """Print grid + placement stats for a generated puzzle."""

    stream = stream or sys.stdout
    print(format_grid(result.grid), file=stream)

    total_words = len(result.placed_words) + len(result.dropped_words)
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {result.height} x {result.width} ({result.height * result.width} cells)", file=stream)
    covered = {cell for placed in result.placements for cell in placed.cells}
    if result.height and result.width:
        print(f"  Word letters:  {len(covered)} ({len(covered) / (result.height * result.width) * 100:.0f}%)", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(result.placed_words)}/{total_words}", file=stream)
    lengths: List[int] = [len(word) for word in result.placed_words]
    if lengths:
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
    directions = Counter(placed.direction.value for placed in result.placements)
    if directions:
        dist_parts = [f"{name}:{count}" for name, count in sorted(directions.items())]
        print(f"  Directions:    {' '.join(dist_parts)}", file=stream)
    for placed in result.placements:
        print(f"    {placed.word:<16} {placed.start} -> {placed.end}", file=stream)
    if result.dropped_words:
        print(f"  Dropped:       {', '.join(result.dropped_words)}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
