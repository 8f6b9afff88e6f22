"""Base-36 chunked string hash with randomisable multipliers."""

from __future__ import annotations

import sys
import time
from typing import List, Optional, Sequence

from .mt19937 import MT19937

_MASK64 = (1 << 64) - 1
_NPOS = _MASK64

DEBUG_R_VALUES = (983132572, 1468777056, 552714139, 984953261, 261934300)


class MyStringHash:
    """Hash a string of letters and digits as up to five base-36 chunks of six."""

    def __init__(self, debug: bool = True) -> None:
        self.r_values: List[int] = list(DEBUG_R_VALUES)
        if not debug:
            self.generate_r_values()

    def __call__(self, k: str) -> int:
        w = [0, 0, 0, 0, 0]
        slot = 4
        end = len(k)
        while end > 0 and slot >= 0:
            start = max(0, end - 6)
            chunk = 0
            for ch in k[start:end]:
                chunk = (chunk * 36 + self.letter_digit_to_number(ch)) & _MASK64
            w[slot] = chunk
            slot -= 1
            end -= 6
        return sum(r * x for r, x in zip(self.r_values, w)) & _MASK64

    def letter_digit_to_number(self, letter: str) -> int:
        """Map a-z/A-Z to 0-25 and 0-9 to 26-35; anything else maps to 2**64-1."""
        if "0" <= letter <= "9":
            return ord(letter) - ord("0") + 26
        if "a" <= letter <= "z":
            return ord(letter) - ord("a")
        if "A" <= letter <= "Z":
            return ord(letter) - ord("A")
        return _NPOS

    def generate_r_values(self) -> None:
        """Replace the multipliers with values drawn from a clock-seeded generator."""
        seed = time.time_ns() & 0xFFFFFFFF
        generator = MT19937(seed)
        self.r_values = [generator() for _ in range(5)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide a string to hash")
        return 1
    key = args[0]
    print(f"h({key})={MyStringHash(True)(key)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())