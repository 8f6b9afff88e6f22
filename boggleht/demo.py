"""Small exercise of the hash table with double-hash probing."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from .hashtable import DoubleHashProber, HashTable
from .strhash import MyStringHash


def run_demo(out: Optional[TextIO] = None) -> None:
    """Insert, update, remove and look up a few keys, reporting to ``out``."""
    stream = out if out is not None else sys.stdout

    def say(line: str) -> None:
        stream.write(line + "\n")

    ht: HashTable[str, int] = HashTable(0.7, DoubleHashProber(MyStringHash()))
    for i in range(10):
        ht.insert(f"hi{i}", i)

    if ht.find("hi1") is not None:
        say("Found hi1")
        ht["hi1"] += 1
        say(f"Incremented hi1's value to: {ht['hi1']}")
    if ht.find("doesnotexist") is None:
        say("Did not find: doesnotexist")
    say(f"HT size: {len(ht)}")
    ht.remove("hi7")
    ht.remove("hi9")
    say(f"HT size: {len(ht)}")
    if ht.find("hi9") is not None:
        say("Found hi9")
    else:
        say("Did not find hi9")
    ht.insert("hi7", 17)
    say(f"size: {len(ht)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())