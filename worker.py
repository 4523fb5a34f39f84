"""
worker.py
---------
Message boundary around the engine. Hosts send plain dicts with a "type"
key ("init", "step" or "generate") and get a response dict back:

    {"type": "step", "currentCells": [0,0,1,0,0], "width": 5, "ruleset": 90}
    -> {"type": "stepped", "nextCells": [0,1,0,1,0], "nextInteger": 10}

Payloads are loosely typed (lists, tuples, numpy arrays, bytes or "0101"
strings); they are checked here and handed to the engine as List[int].
`EngineWorker` runs requests on a thread pool for hosts that must not block.
"""
from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping
import numpy as np

from codec import encode
from generate import generate
from rules import WolframRule
from simulate import step


def coerce_cells(obj: Any, width: int) -> List[int]:
    """
    Convert a bit array payload into a list of 0/1 ints of length `width`.
    Raises ValueError on wrong length or non-binary values.
    """
    if isinstance(obj, str):
        cells = list(obj.strip())
        if not all(c in "01" for c in cells):
            raise ValueError("non-binary symbol found")
        bits = [int(c) for c in cells]
    elif isinstance(obj, np.ndarray):
        if obj.ndim != 1:
            raise ValueError(f"cells must be one-dimensional, got shape {obj.shape}")
        bits = obj.tolist()
    elif isinstance(obj, (list, tuple, bytes, bytearray)):
        bits = list(obj)
    else:
        raise ValueError(f"cells of type {type(obj).__name__} not recognised")

    out: List[int] = []
    for x in bits:
        if isinstance(x, (bool, np.bool_)):
            out.append(int(x))
        elif isinstance(x, (int, np.integer)) and x in (0, 1):
            out.append(int(x))
        else:
            raise ValueError(f"invalid bit value: {x!r}")

    if len(out) != width:
        raise ValueError(f"cells have length {len(out)}, expected width {width}")
    return out


def _require(message: Mapping[str, Any], key: str) -> Any:
    if key not in message:
        raise ValueError(f"missing '{key}' key")
    return message[key]


def _non_negative_int(message: Mapping[str, Any], key: str) -> int:
    value = _require(message, key)
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 0:
        raise ValueError(f"'{key}' must be a non-negative int, got {value!r}")
    return int(value)


def _ruleset(message: Mapping[str, Any]) -> WolframRule:
    value = _require(message, "ruleset")
    if isinstance(value, np.integer):
        value = int(value)
    return WolframRule.parse(value)


@dataclass(frozen=True)
class InitRequest:
    width: int
    rule: WolframRule
    initial: List[int]

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> InitRequest:
        width = _non_negative_int(message, "width")
        return cls(width, _ruleset(message), coerce_cells(_require(message, "initialState"), width))


@dataclass(frozen=True)
class StepRequest:
    width: int
    rule: WolframRule
    current: List[int]

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> StepRequest:
        width = _non_negative_int(message, "width")
        return cls(width, _ruleset(message), coerce_cells(_require(message, "currentCells"), width))


@dataclass(frozen=True)
class GenerateRequest:
    width: int
    rule: WolframRule
    initial: List[int]
    length: int

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> GenerateRequest:
        width = _non_negative_int(message, "width")
        return cls(
            width,
            _ruleset(message),
            coerce_cells(_require(message, "initialCells"), width),
            _non_negative_int(message, "sequenceLength"),
        )


def handle_init(message: Mapping[str, Any]) -> Dict[str, Any]:
    req = InitRequest.from_message(message)
    return {
        "type": "initialized",
        "currentCells": list(req.initial),
        "currentInteger": encode(req.initial),
    }


def handle_step(message: Mapping[str, Any]) -> Dict[str, Any]:
    req = StepRequest.from_message(message)
    next_cells = step(req.current, req.width, req.rule)
    return {
        "type": "stepped",
        "nextCells": next_cells,
        "nextInteger": encode(next_cells),
    }


def handle_generate(message: Mapping[str, Any]) -> Dict[str, Any]:
    req = GenerateRequest.from_message(message)
    integers, states = generate(req.initial, req.width, req.rule, req.length)
    return {
        "type": "generated",
        "generatedIntegers": integers,
        "generatedStates": states,
    }


HANDLERS: Dict[str, Callable[[Mapping[str, Any]], Dict[str, Any]]] = {
    "init": handle_init,
    "step": handle_step,
    "generate": handle_generate,
}


def handle_message(message: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate one request and return its response. Raises ValueError on bad input."""
    if not isinstance(message, Mapping):
        raise ValueError(f"message must be a mapping, got {type(message).__name__}")
    kind = _require(message, "type")
    try:
        handler = HANDLERS[kind]
    except (KeyError, TypeError):
        raise ValueError(f"unknown message type {kind!r}") from None
    return handler(message)


class EngineWorker:
    '''
    Runs `handle_message` off the caller's thread. The engine is stateless,
    so requests need no locking and may complete in any order.
    '''
    def __init__(self, max_workers: int = 1):
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="ca-engine")

    def post(self, message: Mapping[str, Any]) -> Future:
        """Submit a request; the Future resolves to the response dict or raises ValueError."""
        return self._pool.submit(handle_message, dict(message))

    def close(self) -> None:
        self._pool.shutdown(wait=True)

    def __enter__(self) -> EngineWorker:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
