# tests/test_config.py
from pathlib import Path

import pytest

from pingpong_sim import ConfigParsingError, RunConfig, RunConfigParser, SchemaValidationError
from pingpong_sim.transitions import UnknownTransitionError


# --- Fixtures ---
@pytest.fixture
def parser():
    return RunConfigParser()


def write_run_file(tmp_path: Path, text: str, name: str = "run.yaml") -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


# --- Valid Files ---

def test_parse_complete_file(parser, tmp_path):
    path = write_run_file(tmp_path, """
iterations: 3
initial_state: [1, 0, 0, 0]
transition: shift_right
""")
    config = parser.parse_file(path)
    assert config == RunConfig(
        iterations=3,
        initial_state=(1, 0, 0, 0),
        transition_name="shift_right",
        source_path=path.resolve(),
    )


def test_parse_applies_defaults(parser, tmp_path):
    path = write_run_file(tmp_path, "initial_state: [0.5, 1.5]\n")
    config = parser.parse_file(path)
    assert config.iterations == 8
    assert config.transition_name == "shift_right"
    assert config.initial_state == (0.5, 1.5)


def test_parse_dict_without_file(parser):
    config = parser.parse_dict({"initial_state": [1, 2, 3], "iterations": 0})
    assert config.iterations == 0
    assert config.source_path is None


def test_with_overrides_replaces_only_given_values(parser):
    config = parser.parse_dict({"initial_state": [1, 2, 3], "iterations": 4})
    overridden = config.with_overrides(iterations=1, initial_state=None, transition_name=None)
    assert overridden.iterations == 1
    assert overridden.initial_state == (1, 2, 3)
    assert config.iterations == 4


# --- Schema Violations ---

@pytest.mark.parametrize("yaml_text, bad_field", [
    ("initial_state: [1, 0]\niterations: -1\n", "iterations"),
    ("initial_state: [1, 0]\niterations: 2.5\n", "iterations"),
    ("initial_state: [1, 0]\niterations: true\n", "iterations"),
    ("initial_state: []\n", "initial_state"),
    ("initial_state: [1, .nan]\n", "initial_state"),
    ("initial_state: [1, .inf]\n", "initial_state"),
    ("initial_state: [true, 0]\n", "initial_state"),
    ("initial_state: ['a']\n", "initial_state"),
    ("iterations: 3\n", "initial_state"),
    ("initial_state: [1]\nspeed: 3\n", "speed"),
    ("initial_state: [1]\ntransition: ''\n", "transition"),
])
def test_schema_violations(parser, tmp_path, yaml_text, bad_field):
    path = write_run_file(tmp_path, yaml_text)
    with pytest.raises(SchemaValidationError) as excinfo:
        parser.parse_file(path)
    err = excinfo.value
    assert bad_field in err.errors
    assert bad_field in err.get_diagnostic_report()
    assert str(path.resolve()) in err.get_diagnostic_report()


def test_schema_error_report_flattens_nested_item_errors(parser):
    with pytest.raises(SchemaValidationError) as excinfo:
        parser.parse_dict({"initial_state": [1, "x"]})
    assert "Field 'initial_state.1'" in excinfo.value.get_diagnostic_report()


def test_boolean_iteration_count_is_a_schema_error(parser):
    with pytest.raises(SchemaValidationError) as excinfo:
        parser.parse_dict({"initial_state": [1, 0], "iterations": True})
    assert "boolean" in excinfo.value.get_diagnostic_report()


def test_unknown_transition_fails_at_parse_time(parser):
    with pytest.raises(UnknownTransitionError):
        parser.parse_dict({"initial_state": [1], "transition": "teleport"})


# --- File Problems ---

def test_missing_file(parser, tmp_path):
    with pytest.raises(ConfigParsingError, match="not found"):
        parser.parse_file(tmp_path / "nope.yaml")


def test_empty_file(parser, tmp_path):
    path = write_run_file(tmp_path, "")
    with pytest.raises(ConfigParsingError, match="empty"):
        parser.parse_file(path)


def test_root_must_be_mapping(parser, tmp_path):
    path = write_run_file(tmp_path, "- 1\n- 2\n")
    with pytest.raises(ConfigParsingError, match="dictionary"):
        parser.parse_file(path)


def test_invalid_yaml_syntax(parser, tmp_path):
    path = write_run_file(tmp_path, "initial_state: [1, 0\n")
    with pytest.raises(ConfigParsingError) as excinfo:
        parser.parse_file(path)
    assert "Invalid YAML syntax" in excinfo.value.get_diagnostic_report()


def test_parse_dict_rejects_non_mapping(parser):
    with pytest.raises(ConfigParsingError):
        parser.parse_dict([1, 2, 3])
