"""Boggle-style word search along rows, columns and down-right diagonals."""

from __future__ import annotations

import re
import sys
from typing import List, Optional, Sequence, Set, Tuple

from .mt19937 import MT19937

Board = List[List[str]]

# Scrabble tile counts for A..Z.
LETTER_FREQUENCIES = (
    9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1,
)

_LETTERS = "".join(
    chr(ord("A") + index) * count for index, count in enumerate(LETTER_FREQUENCIES)
)

_DIRECTIONS = ((0, 1), (1, 0), (1, 1))

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def gen_board(n: int, seed: int) -> Board:
    """Return an ``n`` by ``n`` board of letters drawn with Scrabble frequencies."""
    generator = MT19937(seed)
    return [
        [_LETTERS[generator() % len(_LETTERS)] for _ in range(n)]
        for _ in range(n)
    ]


def format_board(board: Board) -> str:
    """Render the board with each letter right-aligned in a two-character cell."""
    return "".join("".join(f"{cell:>2}" for cell in row) + "\n" for row in board)


def print_board(board: Board) -> None:
    """Write the board to standard output."""
    sys.stdout.write(format_board(board))


def parse_dict(fname: str) -> Tuple[Set[str], Set[str]]:
    """Read whitespace-separated words; return the words and all their proper prefixes.

    The prefix set always contains the empty string.
    """
    try:
        with open(fname, encoding="utf-8") as stream:
            text = stream.read()
    except OSError as exc:
        raise ValueError("unable to open dictionary file") from exc
    words: Set[str] = set()
    prefixes: Set[str] = {""}
    for word in text.split():
        words.add(word)
        prefixes.update(word[:i] for i in range(1, len(word)))
    return words, prefixes


def _longest_word(
    dictionary: Set[str],
    prefix: Set[str],
    board: Board,
    row: int,
    col: int,
    drow: int,
    dcol: int,
) -> Optional[str]:
    """Follow one direction from a cell and return the longest dictionary word met."""
    n = len(board)
    word = ""
    longest: Optional[str] = None
    while row < n and col < n:
        word += board[row][col]
        is_word = word in dictionary
        if not is_word and word not in prefix:
            break
        if is_word:
            longest = word
        row += drow
        col += dcol
    return longest


def boggle(dictionary: Set[str], prefix: Set[str], board: Board) -> Set[str]:
    """Find words reading right, down or down-right, keeping only the longest per start."""
    found: Set[str] = set()
    n = len(board)
    for row in range(n):
        for col in range(n):
            for drow, dcol in _DIRECTIONS:
                word = _longest_word(dictionary, prefix, board, row, col, drow, dcol)
                if word is not None:
                    found.add(word)
    return found


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("Usage: boggle-driver <size> <seed> <dictionary file>")
        return 1
    size = max(_atoi(args[0]), 0)
    seed = _atoi(args[1])
    board = gen_board(size, seed)
    print_board(board)
    try:
        dictionary, prefix = parse_dict(args[2])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    found = boggle(dictionary, prefix, board)
    print(f"Found {len(found)} words:")
    print(", ".join(sorted(found)))
    return 0


if __name__ == "__main__":
    sys.exit(main())