# tests/test_cli.py
import pytest

from pingpong_sim import register_transition
from pingpong_sim.__main__ import build_parser, main
from conftest import reference_output

pytestmark = pytest.mark.usefixtures("restore_logging")


def test_cli_default_run_reproduces_reference_output(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == reference_output()


def test_cli_help_succeeds(capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--help"])
    assert excinfo.value.code == 0
    assert "shift_right" in capsys.readouterr().out


def test_cli_custom_initial_state_and_iterations(capsys):
    assert main(["--initial", "1,0,0", "--iterations", "2"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "run 0 in:  1,0,0",
        "run 0 out: 0,1,0",
        "=========================",
        "run 1 in:  0,1,0",
        "run 1 out: 0,0,1",
        "=========================",
    ]


def test_cli_zero_iterations_prints_nothing(capsys):
    assert main(["-n", "0"]) == 0
    assert capsys.readouterr().out == ""


def test_cli_config_file_with_override(tmp_path, capsys):
    run_file = tmp_path / "run.yaml"
    run_file.write_text("iterations: 5\ninitial_state: [2, 0]\n")
    assert main(["--config", str(run_file), "--iterations", "1"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "run 0 in:  2,0",
        "run 0 out: 0,2",
        "=========================",
    ]


def test_cli_negative_iterations_exit_code(capsys):
    assert main(["--iterations", "-1"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid Input" in captured.err


def test_cli_non_finite_initial_state(capsys):
    assert main(["--initial", "1,nan"]) == 2
    assert "non-finite" in capsys.readouterr().err


def test_cli_rejects_non_numeric_initial_state(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--initial", "1,x"])
    assert excinfo.value.code == 2
    assert "not a number" in capsys.readouterr().err


def test_cli_unknown_transition(capsys):
    assert main(["--transition", "teleport"]) == 2
    assert "Unknown Transition" in capsys.readouterr().err


def test_cli_bad_config_file(tmp_path, capsys):
    run_file = tmp_path / "run.yaml"
    run_file.write_text("initial_state: []\n")
    assert main(["--config", str(run_file)]) == 2
    assert "Schema Validation" in capsys.readouterr().err


def test_cli_transition_failure_keeps_prior_output(scratch_registry, capsys):
    calls = []

    @register_transition("fragile")
    def fragile(source, destination):
        if calls:
            raise ArithmeticError("second step refused")
        calls.append(1)
        destination[:] = source

    assert main(["--transition", "fragile", "--initial", "4,5"]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "run 0 in:  4,5",
        "run 0 out: 4,5",
        "=========================",
    ]
    assert "Transition Failure (ArithmeticError)" in captured.err
    assert "Iteration:      1" in captured.err
