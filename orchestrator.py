#!/usr/bin/env python
"""
orchestrator.py
---------------
Produce a batch of CA sequences from a YAML config:

1. For each run in sequences.yaml:
    - build the generate_sequence.py argv from the run block
    - write <out-dir>/<name>.jsonl
    - append a summary row to results/sequences.csv
    - record the run in logs/runs.log
2. Runs with missing keys or bad values are reported and skipped
"""
from __future__ import annotations

import argparse
import csv
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List
import yaml

from generate_sequence import main as gen_cli
from run_logger import LOG_PATH, log_run

# Paths & Globals
ROOT       = Path(__file__).resolve().parent
DATA_DIR   = ROOT / "data"
RESULT_DIR = ROOT / "results"

REQUIRED_KEYS = ("name", "width", "rule", "length")


def run_argv(run_cfg: Dict[str, Any], outfile: Path) -> List[str]:
    """Translate one run block into generate_sequence.py arguments."""
    argv = [
        "--width", str(run_cfg["width"]),
        "--rule", str(run_cfg["rule"]),
        "--length", str(run_cfg["length"]),
        "--outfile", str(outfile),
    ]
    init = run_cfg.get("init", "center")
    if not isinstance(init, str):
        # unquoted bit strings load as (octal) ints
        raise ValueError(f"init must be \"center\", \"random\" or a quoted bit string, got {init!r}")
    if init == "random":
        argv += ["--density", str(run_cfg.get("density", 0.5)), "--seed", str(run_cfg.get("seed", 42))]
    elif init != "center":
        argv += ["--init", init]
    return argv


def run(
    cfg_path: Path,
    out_dir: Path = DATA_DIR,
    results_dir: Path = RESULT_DIR,
    log_file: Path = LOG_PATH,
) -> int:
    """Run every block in the config; return the number of runs written."""
    spec = yaml.safe_load(cfg_path.read_text()) or {}
    runs = spec.get("runs") or []

    out_dir.mkdir(parents=True, exist_ok=True)
    results_dir.mkdir(parents=True, exist_ok=True)

    summary_path = results_dir / "sequences.csv"
    first_write  = not summary_path.exists()
    n_done       = 0

    with summary_path.open("a", newline="") as fp_summary:
        writer = csv.writer(fp_summary)
        if first_write:
            writer.writerow([
                "date_utc",
                "name",
                "rule",
                "width",
                "length",
                "distinct_values",
                "outfile",
            ])

        for idx, run_cfg in enumerate(runs, 1):
            if not isinstance(run_cfg, dict):
                print(f"Run #{idx}: expected a mapping, got {type(run_cfg).__name__}; skipping", file=sys.stderr)
                continue
            missing = [k for k in REQUIRED_KEYS if k not in run_cfg]
            if missing:
                print(f"Run #{idx}: missing {', '.join(missing)}; skipping", file=sys.stderr)
                continue

            name    = run_cfg["name"]
            outfile = out_dir / f"{name}.jsonl"
            print(f"Generating {name} → {outfile}")
            try:
                argv = run_argv(run_cfg, outfile)
            except ValueError as exc:
                print(f"Run {name}: {exc}; skipping", file=sys.stderr)
                continue
            try:
                seq = gen_cli(argv)
            except SystemExit as exc:
                # argparse already printed the reason
                print(f"Run {name}: invalid settings (exit {exc.code}); skipping", file=sys.stderr)
                continue

            distinct = len(set(seq.integers))
            writer.writerow([
                datetime.now(timezone.utc).isoformat(timespec="seconds"),
                name,
                seq.rule,
                seq.width,
                len(seq),
                distinct,
                str(outfile),
            ])
            fp_summary.flush()

            log_run(name, seq, outfile, log_file=log_file)
            n_done += 1

    print(f"Finished {n_done}/{len(runs)} runs; summary in {summary_path}")
    return n_done


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate a batch of CA sequences")
    parser.add_argument(
        "--config",
        type=Path,
        default=ROOT / "sequences.yaml",
        help="Path to sequences.yaml",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=DATA_DIR,
        help="Directory for the per-run JSONL files",
    )
    args = parser.parse_args()
    run(args.config, out_dir=args.out_dir)
