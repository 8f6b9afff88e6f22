# boggleht

This package holds a few hashing and word-search tools:

- `boggleht.mt19937.MT19937` is a 32-bit Mersenne Twister. For a given seed it gives the same output as the standard `mt19937` engine. Each call to an instance returns the next value in `[0, 2**32)`, and an instance can also be iterated.
- `boggleht.strhash.MyStringHash` is a case-insensitive base-36 string hash.
  - Letters map to 0–25 and digits map to 26–35.
  - The string is split from its end into chunks of up to six characters. At most five chunks are used.
  - The five chunk values are weighted by `r_values` and summed modulo 2**64.
  - `MyStringHash(True)` uses fixed debug weights. `MyStringHash(False)` draws the weights from a generator seeded by the clock (`generate_r_values`).
- `boggleht.hashtable.HashTable` is an open-addressing hash table over a fixed series of prime capacities.
  - It grows to the next capacity when the share of live and deleted slots reaches `resize_alpha`. The default is 0.4.
  - Deletion is lazy: a removed item is only marked as deleted.
  - Probing is pluggable. You can pass a `LinearProber` (the default) or a `DoubleHashProber`. The step size of a `DoubleHashProber` comes from a second hash, which is `MyStringHash()` by default.
  - `hasher` defaults to Python's `hash`, and `kequal` defaults to `==`.
- `boggleht.boggle` generates random boards with letters weighted by Scrabble tile counts. It finds dictionary words that read in a straight line to the right, downward, or diagonally down-right. From each starting cell, only the longest word in each direction is kept.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from boggleht.strhash import MyStringHash
from boggleht.hashtable import HashTable, DoubleHashProber

h = MyStringHash(True)
h("abc")          # 9953503400

table = HashTable(0.7, DoubleHashProber(MyStringHash()))
table.insert("hi1", 1)
table["hi1"] += 1
"hi1" in table    # True
table.find("hi1") # ("hi1", 2)
table.remove("hi1")
len(table)        # 0
table.empty()     # True
```

Error handling and debugging in `HashTable`:

- `at`, `table[key]` and `table[key] = value` raise `KeyError` for a key that is absent. Only `insert` adds new keys.
- `insert` raises `boggleht.hashtable.TableFullError` when no free slot is found or the largest capacity is exceeded.
- `report_all(out)` writes every occupied bucket, deleted ones included.
- `total_probes()` and `clear_total_probes()` track the probing work done.

```python
from boggleht.boggle import gen_board, parse_dict, boggle, format_board

board = gen_board(5, 42)
print(format_board(board))
words, prefixes = parse_dict("words.txt")
found = boggle(words, prefixes, board)
```

`parse_dict` reads words separated by whitespace. It returns the set of words and the set of their proper prefixes, including the empty string. If the file cannot be opened, it raises `ValueError`.

## Commands

Hash a string with the fixed debug weights:

```
str-hash-test antidisestablishmentarianism
```

Run a short hash-table demonstration that inserts, updates, removes and looks up keys:

```
ht-test
```

Generate a board from a size and a seed, print it, and list the words found:

```
boggle-driver <size> <seed> <dictionary file>
```

## Limits

- The Boggle solver does not follow paths that turn or read backwards. It finds only straight runs to the right, downward and down-right.
- The hash table keeps everything in memory and offers no iteration over its items.