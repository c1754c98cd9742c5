"""
Command-line demo: list models, show coefficient tables, evaluate one drive
vector, or simulate action paths over a drive tape CSV.

    occupant-actions list
    occupant-actions describe YunSteemers2008OutdoorTempNoNightVentilation
    occupant-actions evaluate HaldiRobinson2008IndoorOutdoorTemp \\
        --system OPEN_CLOSE --occupant ALL_STATES --user UNKNOWN 15.01 20
    occupant-actions simulate YunTuohySteemers2009IndoorTemp drives.csv --paths 500
"""

from __future__ import annotations

import argparse
import sys

import numpy as np
import pandas as pd

from behaviors import ActionDriveError, available_models, get_model
from core.config import SimulationConfig
from core.log import configure_logging
from core.schema import OccupantTransition, SystemTransition, UserType
from data_prep.loader import load_drive_csv
from engine.runner import run_action_simulation
from pm.metrics import compute_path_metrics, summarize_action_rates


def _add_state_args(p: argparse.ArgumentParser, *, required: bool) -> None:
    p.add_argument("--system", required=required, type=SystemTransition.parse,
                   help=f"system transition ({', '.join(m.name for m in SystemTransition)})")
    p.add_argument("--occupant", required=required, type=OccupantTransition.parse,
                   help=f"occupant transition ({', '.join(m.name for m in OccupantTransition)})")
    p.add_argument("--user", default=UserType.UNKNOWN, type=UserType.parse,
                   help=f"user type ({', '.join(m.name for m in UserType)}; default UNKNOWN)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="occupant-actions",
        description="Evaluate published occupant window/blind action models.",
    )
    parser.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="list registered models")

    p_desc = sub.add_parser("describe", help="show drive layout and coefficient table")
    p_desc.add_argument("model")

    p_eval = sub.add_parser("evaluate", help="action probability for one drive vector")
    p_eval.add_argument("model")
    _add_state_args(p_eval, required=True)
    p_eval.add_argument("--seed", type=int, default=None, help="seed for the sampled action")
    p_eval.add_argument("drives", nargs="+", type=float, help="drive values in model order")

    p_sim = sub.add_parser("simulate", help="sample action paths over a drive tape CSV")
    p_sim.add_argument("model")
    p_sim.add_argument("tape", help="CSV with one column per drive")
    _add_state_args(p_sim, required=False)
    p_sim.add_argument("--paths", type=int, default=SimulationConfig.n_paths)
    p_sim.add_argument("--seed", type=int, default=SimulationConfig.seed)

    return parser


def _cmd_list(args, model) -> None:
    for name in available_models():
        entry = get_model(name)
        print(f"{name}: {', '.join(entry.DRIVE_LAYOUT)}")


def _cmd_describe(args, model) -> None:
    print(f"{model.name}\ndrives: {', '.join(model.DRIVE_LAYOUT)}")
    with pd.option_context("display.width", 200, "display.max_columns", None):
        print(model.describe().to_string(index=False))


def _cmd_evaluate(args, model) -> None:
    probability = model.calculate_action_probability(args.user, args.occupant, args.system, args.drives)
    action = model.predict_action(
        args.user, args.occupant, args.system, args.drives,
        rng=np.random.default_rng(args.seed),
    )
    print(f"Probability of action: {probability:.6g}")
    print(f"Sampled action: {action}")


def _cmd_simulate(args, model) -> None:
    overrides = {
        k: v for k, v in (
            ("system_transition", args.system),
            ("occupant_transition", args.occupant),
            ("user_type", args.user),
        ) if v is not None
    }
    config = SimulationConfig(n_paths=args.paths, seed=args.seed, store_probabilities=False, **overrides)
    tape = load_drive_csv(args.tape)
    probs, actions = run_action_simulation(tape, model, config)
    summary = summarize_action_rates(compute_path_metrics(actions), probs["probability"])
    print(f"{model.name}: {len(tape)} steps, {config.n_paths} paths")
    for key, value in summary.items():
        print(f"  {key}: {value:.4f}")


_COMMANDS = {
    "list": _cmd_list,
    "describe": _cmd_describe,
    "evaluate": _cmd_evaluate,
    "simulate": _cmd_simulate,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    model = None
    if getattr(args, "model", None) is not None:
        try:
            model = get_model(args.model)
        except KeyError as e:
            print(f"error: {e.args[0]}", file=sys.stderr)
            return 2

    try:
        _COMMANDS[args.command](args, model)
    except (ActionDriveError, ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
