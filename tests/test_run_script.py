"""Tests for the terminal demonstration script."""

import importlib.util
import io
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parent.parent / "scripts" / "run_rule110.py"


@pytest.fixture(scope="module")
def run_script():
    spec = importlib.util.spec_from_file_location("run_rule110", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_run_demo_results(run_script):
    stream = io.StringIO()
    results = run_script.run_demo(size=10, cycles=4, stream=stream)

    assert results["frames"] == 5
    assert results["rule"] == 110
    assert len(stream.getvalue().splitlines()) == 5
    assert stream.getvalue().splitlines()[0] == ".........#"


def test_main_prints_frames(run_script, capsys):
    exit_code = run_script.main(["--size", "8", "--cycles", "2", "--alive-char", "@"])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == [
        ".......@",
        "......@@",
        ".....@@@",
    ]


@pytest.mark.parametrize("argv", [
    ["--size", "2"],
    ["--cycles", "-1"],
    ["--rule", "300"],
])
def test_main_rejects_bad_configuration(run_script, capsys, argv):
    assert run_script.main(argv) == 1
    assert capsys.readouterr().out == ""


def test_parser_defaults(run_script):
    args = run_script.create_parser().parse_args([])
    assert args.size == 100
    assert args.cycles == 100
    assert args.rule == 110
