from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Union

NUM_NEIGHBORHOODS = 8 # radius-1 binary neighborhoods: (left, self, right)


@dataclass(frozen=True)
class WolframRule:
    """
    Elementary CA rule in Wolfram numbering.
    Bit k of `code` (LSB first) is the next state for neighborhood code
    k = (left << 2) | (self << 1) | right.

    Codes outside 0..255 are accepted; only the low byte is ever read.
    """
    code: int

    def __post_init__(self):
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise ValueError(f"rule code must be an int, got {type(self.code).__name__}")

    def __call__(self, neighborhood: int) -> int:
        """Return next-state bit (0/1) for a packed neighborhood code."""
        if not (0 <= neighborhood < NUM_NEIGHBORHOODS):
            raise ValueError("invalid neighborhood code")
        return (self.code >> neighborhood) & 1

    def __int__(self) -> int:
        return self.code

    @property
    def bits(self) -> str:
        '''
        Low byte as an 8-char string, most significant first (neighborhood 7 .. 0),
        the way rule tables are usually printed, e.g. rule 90 -> "01011010".
        '''
        return f"{self.code & 0xFF:08b}"

    def table(self) -> Dict[str, int]:
        """Map each neighborhood pattern ("111" .. "000") to its output bit."""
        return {f"{n:03b}": self(n) for n in reversed(range(NUM_NEIGHBORHOODS))}

    @classmethod
    def from_int(cls, code: int) -> WolframRule:
        return cls(int(code))

    @classmethod
    def parse(cls, text: Union[str, int]) -> WolframRule:
        """
        Build a rule from user input: a decimal number ("90"), a binary
        literal ("0b01011010") or a hex literal ("0x5a").
        """
        if isinstance(text, int) and not isinstance(text, bool):
            return cls(text)
        if not isinstance(text, str):
            raise ValueError(f"cannot parse rule from {text!r}")
        cleaned = text.strip().replace("_", "")
        try:
            return cls(int(cleaned, 10 if cleaned.isdigit() else 0))
        except ValueError:
            raise ValueError(f"cannot parse rule from {text!r}") from None


RuleLike = Union[int, WolframRule]

# A few well-known rules
RULE_30 = WolframRule(30)
RULE_90 = WolframRule(90)
RULE_110 = WolframRule(110)
RULE_184 = WolframRule(184)
