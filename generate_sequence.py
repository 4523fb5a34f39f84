"""
generate_sequence.py

Run a 1-D elementary CA and write each generation, with its integer
encoding, as one JSON line.

Example (single centered cell)
-------
python generate_sequence.py --width 16 --rule 90 --length 32 \
       --outfile data/rule90.jsonl

Example (seeded random start)
-------
python generate_sequence.py --width 24 --rule 30 --length 64 \
       --density 0.4 --seed 7 \
       --outfile data/rule30_random.jsonl

Each line looks like {"step":0,"state":"0000000010000000","value":256}.
"""

from __future__ import annotations
import argparse, json, pathlib
from typing import List
from generate import InitialStateGenerator, Sequence1D, generate_sequence
from rules import WolframRule


def generation_to_jsonl(step_idx: int, state: List[int], value: int) -> str:
    """
    Serialize one generation as a compact JSON line.
    """
    return json.dumps(
        {
            "step": step_idx,
            "state": "".join(map(str, state)),
            "value": value,
        },
        separators=(",", ":"),
    )


def write_sequence(seq: Sequence1D, outfile: pathlib.Path) -> None:
    outfile.parent.mkdir(parents=True, exist_ok=True)
    with outfile.open("w", encoding="utf-8") as f:
        for idx, (state, value) in enumerate(zip(seq.states, seq.integers)):
            f.write(generation_to_jsonl(idx, state, value) + "\n")


def _rule_arg(text: str) -> WolframRule:
    try:
        return WolframRule.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Generate an integer sequence from a 1-D elementary CA.")

    p.add_argument("--width", type=_non_negative, default=16, help="Number of cells per generation.")
    p.add_argument("--rule", type=_rule_arg, default=WolframRule(90), help="Wolfram rule number (decimal, 0b.. or 0x..).")
    p.add_argument("--length", type=_non_negative, default=16, help="Number of generations, including the initial one.")
    p.add_argument("--init", default=None, help="Explicit initial state as a bit string, e.g. 00100.")
    p.add_argument("--density", type=float, default=None, help="Random initial state with this probability of a live cell.")
    p.add_argument("--seed", type=int, default=42, help="RNG seed for --density.")
    p.add_argument("--outfile", type=pathlib.Path, required=True, help="Where to write the JSONL.")
    return p


def initial_state(args: argparse.Namespace) -> List[int]:
    gen = InitialStateGenerator(
        width=args.width,
        seed=args.seed,
        density=args.density if args.density is not None else 0.5,
    )
    if args.init is not None:
        return gen.from_string(args.init)
    if args.density is not None:
        return gen.random()
    return gen.single_cell()


def main(argv: List[str] | None = None) -> Sequence1D:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.init is not None and args.density is not None:
        parser.error("--init and --density are mutually exclusive")

    try:
        start = initial_state(args)
    except ValueError as exc:
        parser.error(str(exc))

    seq = generate_sequence(start, args.width, args.rule, args.length)
    write_sequence(seq, args.outfile)

    print(f"Wrote {len(seq):,} generations (rule {args.rule.code}) to {args.outfile}")
    return seq


if __name__ == "__main__":
    main()
