# src/pingpong_sim/__main__.py
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from pingpong_sim.config import RunConfig, RunConfigParser
from pingpong_sim.constants import DEFAULT_INITIAL_STATE, DEFAULT_ITERATIONS, DEFAULT_TRANSITION
from pingpong_sim.errors import DiagnosableError
from pingpong_sim.log_config import setup_logging
from pingpong_sim.reporting import render_records
from pingpong_sim.simulation import TransitionFailure, iterate_simulation
from pingpong_sim.transitions import available_transitions

EXIT_OK = 0
EXIT_TRANSITION_FAILURE = 1
EXIT_INVALID_INPUT = 2


def _parse_initial_state(text: str) -> tuple:
    """Parses '1,0,0.5' into (1, 0, 0.5)."""
    cells = []
    for token in text.split(","):
        token = token.strip()
        try:
            cells.append(int(token))
        except ValueError:
            try:
                cells.append(float(token))
            except ValueError:
                raise argparse.ArgumentTypeError(f"not a number: {token!r}") from None
    return tuple(cells)


def _resolve_config(args: argparse.Namespace) -> RunConfig:
    if args.config:
        config = RunConfigParser().parse_file(args.config)
    else:
        config = RunConfig(
            iterations=DEFAULT_ITERATIONS,
            initial_state=DEFAULT_INITIAL_STATE,
            transition_name=DEFAULT_TRANSITION,
        )
    return config.with_overrides(
        iterations=args.iterations,
        initial_state=args.initial,
        transition_name=args.transition,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pingpong-sim",
        description="PingPong Sim: run a double-buffered (ping-pong) simulation and print each step.",
    )
    parser.add_argument("-n", "--iterations", type=int, help=f"Number of steps to run (default {DEFAULT_ITERATIONS}).")
    parser.add_argument(
        "--initial",
        type=_parse_initial_state,
        help="Initial state as comma-separated numbers (default %s)." % ",".join(map(str, DEFAULT_INITIAL_STATE)),
    )
    parser.add_argument(
        "--transition",
        type=str,
        help=f"Registered transition name. Available: {', '.join(available_transitions())}.",
    )
    parser.add_argument("--config", type=str, help="YAML run file. Explicit flags override its values.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity; logs go to stderr.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, stream=sys.stderr)

    try:
        config = _resolve_config(args)
        records = iterate_simulation(config.iterations, config.initial_state, config.transition_name)
        render_records(records, sys.stdout)
    except TransitionFailure as e:
        print(e.get_diagnostic_report(), file=sys.stderr)
        return EXIT_TRANSITION_FAILURE
    except DiagnosableError as e:
        print(e.get_diagnostic_report(), file=sys.stderr)
        return EXIT_INVALID_INPUT
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
