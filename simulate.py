from typing import List, Sequence
from rules import RuleLike, WolframRule


def _check_state(state: Sequence[int], width: int) -> None:
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")
    if len(state) != width:
        raise ValueError(f"state has {len(state)} cells, expected width {width}")
    if not all(c in (0, 1) for c in state):
        raise ValueError("non-binary cell found")


def _rule_code(rule: RuleLike) -> int:
    if isinstance(rule, WolframRule):
        return rule.code
    return WolframRule(rule).code # rejects non-int codes


def _pack(state: Sequence[int], index: int, width: int) -> int:
    left = state[index - 1] if index > 0 else 0
    right = state[index + 1] if index < width - 1 else 0
    return (left << 2) | (state[index] << 1) | right


def neighborhood_value(state: Sequence[int], index: int, width: int) -> int:
    '''
    Packed 3-bit neighborhood code (left << 2) | (self << 1) | right.
    Cells outside [0, width) are treated as dead (0). Cells must be 0 or 1.
    '''
    _check_state(state, width)
    if not (0 <= index < width):
        raise ValueError(f"index {index} outside [0, {width})")
    return _pack(state, index, width)


def step(state: Sequence[int], width: int, rule: RuleLike) -> List[int]:
    '''
    One ECA step w/ outside bounds being treated as dead (0).
    Only the low 8 bits of the rule are read.
    '''
    _check_state(state, width)
    code = _rule_code(rule)
    next_state = [0] * width
    for i in range(width):
        next_state[i] = (code >> _pack(state, i, width)) & 1
    return next_state


def simulate(state: Sequence[int], width: int, rule: RuleLike, t: int = 1) -> List[int]:
    if t < 0:
        raise ValueError(f"timesteps must be non-negative, got {t}")
    curr = list(state)
    _check_state(curr, width)
    for _ in range(t):
        curr = step(curr, width, rule)
    return curr
