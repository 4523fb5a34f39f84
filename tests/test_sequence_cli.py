import json
import pytest
from generate_sequence import main as gen_cli

def _read(outfile):
    return [json.loads(line) for line in outfile.read_text().splitlines()]

def test_cli_generates_jsonl(tmp_path):
    outfile = tmp_path / "demo.jsonl"
    gen_cli(["--width", "5", "--rule", "90", "--length", "3", "--init", "00010", "--outfile", str(outfile)])
    rows = _read(outfile)

    assert len(rows) == 3
    assert [r["step"] for r in rows] == [0, 1, 2]
    assert [r["state"] for r in rows] == ["00010", "00101", "01000"]
    assert [r["value"] for r in rows] == [8, 20, 2]

def _run_generator(tmp_path, *, width=10, rule="30", length=6, density=0.35, seed=77):
    """
    Helper that invokes the CLI with a random start and returns pathlib.Path to the file.
    """
    outfile = tmp_path / "nested" / "out.jsonl"   # nested dir exercises mkdir
    gen_cli(
        [
            "--width", str(width),
            "--rule", rule,
            "--length", str(length),
            "--density", str(density),
            "--seed", str(seed),
            "--outfile", str(outfile),
        ]
    )
    return outfile


def test_cli_creates_nested_directories(tmp_path):
    out_path = _run_generator(tmp_path)
    assert out_path.exists()
    assert out_path.parent.is_dir()


def test_cli_deterministic_with_seed(tmp_path):
    first = _run_generator(tmp_path, seed=123).read_text()
    second = _run_generator(tmp_path, seed=123).read_text()
    assert first == second


def test_states_match_width(tmp_path):
    width = 12
    rows = _read(_run_generator(tmp_path, width=width, length=4))

    assert len(rows) == 4
    for row in rows:
        assert len(row["state"]) == width
        assert set(row["state"]) <= {"0", "1"}
        assert 0 <= row["value"] < 2 ** width


def test_default_start_is_centered_cell(tmp_path):
    outfile = tmp_path / "center.jsonl"
    seq = gen_cli(["--width", "16", "--rule", "0x5a", "--length", "2", "--outfile", str(outfile)])
    rows = _read(outfile)
    assert rows[0]["state"] == "0000000010000000"
    assert rows[0]["value"] == 256
    assert seq.rule == 90


def test_zero_length_writes_empty_file(tmp_path):
    outfile = tmp_path / "empty.jsonl"
    gen_cli(["--length", "0", "--outfile", str(outfile)])
    assert outfile.read_text() == ""


@pytest.mark.parametrize(
    "bad",
    [
        ["--rule", "ninety"],
        ["--width", "-3"],
        ["--width", "5", "--init", "0001"],
        ["--width", "5", "--init", "00012"],
        ["--width", "5", "--init", "00010", "--density", "0.5"],
    ],
)
def test_cli_rejects_bad_arguments(tmp_path, bad):
    with pytest.raises(SystemExit) as exc:
        gen_cli(bad + ["--outfile", str(tmp_path / "x.jsonl")])
    assert exc.value.code == 2
