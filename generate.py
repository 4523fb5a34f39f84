from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple
import numpy as np
from codec import encode
from rules import RuleLike
from simulate import _check_state, _rule_code, step


@dataclass
class Sequence1D:
    '''
    A generated run: the states in order and their integer encodings.
    '''
    width: int
    rule: int
    integers: List[int] = field(default_factory=list)
    states: List[List[int]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.integers)


def iter_generations(initial: Sequence[int], width: int, rule: RuleLike) -> Iterator[List[int]]:
    """
    Endless stream of generations, starting with a copy of `initial`.
    """
    curr = list(initial)
    _check_state(curr, width)
    while True:
        yield curr
        curr = step(curr, width, rule)


def _check_length(length: int) -> None:
    if length < 0:
        raise ValueError(f"sequence length must be non-negative, got {length}")


def generate(initial: Sequence[int], width: int, rule: RuleLike, length: int) -> Tuple[List[int], List[List[int]]]:
    '''
    Return (integers, states), both `length` long. Element 0 is the initial
    state itself; element k is one step past element k-1.
    A length of 0 gives two empty lists.
    '''
    _check_length(length)
    _check_state(initial, width)
    _rule_code(rule)
    integers: List[int] = []
    states: List[List[int]] = []
    if length == 0:
        return integers, states
    for state in iter_generations(initial, width, rule):
        states.append(state)
        integers.append(encode(state))
        if len(states) == length:
            break
    return integers, states


def generate_integers(initial: Sequence[int], width: int, rule: RuleLike, length: int) -> List[int]:
    """Like `generate`, but only keeps the current generation in memory."""
    _check_length(length)
    _check_state(initial, width)
    _rule_code(rule)
    integers: List[int] = []
    if length == 0:
        return integers
    for state in iter_generations(initial, width, rule):
        integers.append(encode(state))
        if len(integers) == length:
            break
    return integers


def generate_sequence(initial: Sequence[int], width: int, rule: RuleLike, length: int) -> Sequence1D:
    integers, states = generate(initial, width, rule, length)
    return Sequence1D(width=width, rule=int(rule), integers=integers, states=states)


class InitialStateGenerator:
    '''
    Builds starting generations: a single live cell, a seeded random fill,
    or an explicit bit string.
    '''
    def __init__(self, width: int, seed: int = 42, density: float = 0.5):
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        if not (0.0 <= density <= 1.0):
            raise ValueError(f"density must be in [0, 1], got {density}")
        self.width = width
        self.density = density
        self.rng = np.random.default_rng(seed)

    def single_cell(self) -> List[int]:
        '''
        All dead except the middle cell (index width // 2), the classic
        starting point for Wolfram rule diagrams.
        '''
        state = [0] * self.width
        if self.width:
            state[self.width // 2] = 1
        return state

    def random(self) -> List[int]:
        '''
        Generate a random starting state, with the density of ones given by self.density.
        '''
        return [int(self.rng.random() < self.density) for _ in range(self.width)]

    def from_string(self, bits: str) -> List[int]:
        bits = bits.strip()
        if len(bits) != self.width:
            raise ValueError(f"initial state has {len(bits)} cells, expected width {self.width}")
        if not all(c in "01" for c in bits):
            raise ValueError("non-binary symbol found")
        return [int(c) for c in bits]
