"""Mersenne Twister, base-36 string hash, open-addressing hash table and a Boggle solver."""

__version__ = "0.1.0"