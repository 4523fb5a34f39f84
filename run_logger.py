"""
JSON-lines ledger of finished sequence runs, one record per line:

    {"ts":"2026-10-18T12:00:00Z","name":"rule90_center","rule":90,
     "rule_bits":"01011010","width":16,"length":32,"distinct_values":15,
     "first_value":256,"last_value":...,"outfile":"data/rule90_center.jsonl"}
"""
from __future__ import annotations

import json
import pathlib
import time

from generate import Sequence1D
from rules import WolframRule

LOG_PATH = pathlib.Path("logs") / "runs.log"


def run_record(name: str, seq: Sequence1D, outfile: pathlib.Path) -> dict:
    return {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "name": name,
        "rule": seq.rule,
        "rule_bits": WolframRule(seq.rule).bits,
        "width": seq.width,
        "length": len(seq),
        "distinct_values": len(set(seq.integers)),
        "first_value": seq.integers[0] if seq.integers else None,
        "last_value": seq.integers[-1] if seq.integers else None,
        "outfile": str(outfile),
    }


def log_run(name: str, seq: Sequence1D, outfile: pathlib.Path, *, log_file: pathlib.Path = LOG_PATH) -> dict:
    """Append the record for one run to `log_file` and return it."""
    record = run_record(name, seq, outfile)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    with log_file.open("a", encoding="utf-8") as fp:
        fp.write(json.dumps(record, separators=(",", ":")) + "\n")
    return record
