"""
Bit-array <-> integer conversion for generations.

Cell i contributes 1 << i, so the leftmost cell is the least significant
bit. Python ints are unbounded, so every width encodes exactly.
"""
from __future__ import annotations
from typing import List, Sequence


def encode(state: Sequence[int]) -> int:
    value = 0
    for i, cell in enumerate(state):
        if cell == 1:
            value |= 1 << i
    return value


def decode(value: int, width: int) -> List[int]:
    """Inverse of `encode`; bits at positions >= width are ignored."""
    if value < 0:
        raise ValueError(f"encoded value must be non-negative, got {value}")
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")
    return [(value >> i) & 1 for i in range(width)]


def max_value(width: int) -> int:
    """Largest integer a generation of this width can encode to."""
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")
    return (1 << width) - 1
