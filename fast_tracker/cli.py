"""Command-line interface for the fasting tracker."""

import argparse
import json
import logging
import sys
from datetime import date

from fast_tracker.config import ACTIVITY_FACTORS, GOAL_CALORIE_ADJUSTMENTS, TICK_INTERVAL_SECONDS
from fast_tracker.energy_estimator import (
    calculate_macro_targets,
    default_calories_for_goal,
    estimate_calories,
    format_estimate,
)
from fast_tracker.models import BodyProfile, FastRecord, parse_timestamp
from fast_tracker.presets import FASTING_PRESETS, format_presets, get_preset, plan_fast
from fast_tracker.ticker import FastTicker, utc_now
from fast_tracker.tracker import compute_fast_stats, format_stats, format_timer_state
from fast_tracker.window_engine import compute_timer_state

logger = logging.getLogger(__name__)


def _timestamp_arg(value: str):
    try:
        return parse_timestamp(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO timestamp: '{value}'") from None


def _date_arg(value: str):
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date (YYYY-MM-DD): '{value}'") from None


def _fail(message: str) -> None:
    print(message)
    sys.exit(1)


# --- Fast helpers ---

def _fast_from_args(args):
    """Build the fast described on the command line, or None without --start."""
    if args.start is None:
        return None

    if args.preset:
        fast = plan_fast(args.start, get_preset(args.preset))
    else:
        fast = FastRecord(start_at=args.start)

    if args.end is not None:
        fast.end_at = args.end
    if args.target_hours is not None:
        fast.target_duration_hours = args.target_hours
    if args.target_end is not None:
        fast.fast_target_end_at = args.target_end
    if args.eating_start is not None:
        fast.eating_window_start_at = args.eating_start
    if args.eating_end is not None:
        fast.eating_window_end_at = args.eating_end
    return fast


def _load_fasts(path: str) -> list:
    with open(path) as f:
        payload = json.load(f)
    if isinstance(payload, dict):
        payload = payload.get("fasts", [])
    if not isinstance(payload, list):
        raise ValueError("expected a list of fasts")
    for item in payload:
        if not isinstance(item, dict):
            raise ValueError(f"expected a fast object, got {item!r}")
    return [FastRecord.from_dict(item) for item in payload]


# --- Command handlers ---

def cmd_timer(args):
    fast = _fast_from_args(args)
    now = args.now or utc_now()
    print(format_timer_state(compute_timer_state(fast, now)))


def cmd_watch(args):
    fast = _fast_from_args(args)

    def render(state):
        print(format_timer_state(state))
        print()

    ticker = FastTicker(fast, render, interval=args.interval)
    try:
        ticker.run(max_ticks=args.ticks)
    except KeyboardInterrupt:
        ticker.stop()


def cmd_calories(args):
    profile = BodyProfile(
        sex=args.sex,
        age=args.age,
        height_cm=args.height_cm,
        weight_kg=args.weight_kg,
        activity=args.activity,
        goal=args.goal,
    )
    estimate = estimate_calories(profile)
    macros = calculate_macro_targets(estimate.target, args.goal) if args.macros else None
    print(format_estimate(estimate, macros))


def cmd_calories_default(args):
    print(f"{default_calories_for_goal(args.goal)} kcal/day")


def cmd_presets(args):
    print(format_presets())


def cmd_stats(args):
    try:
        fasts = _load_fasts(args.file)
    except FileNotFoundError:
        _fail(f"File not found: {args.file}")
    except (json.JSONDecodeError, ValueError) as e:
        _fail(f"Could not read fasts from {args.file}: {e}")

    today = args.today or utc_now().date()
    logger.debug("Loaded %d fast(s) from %s", len(fasts), args.file)
    print(format_stats(compute_fast_stats(fasts, today)))


# --- Argument parser ---

_FAST_FLAGS = [
    ("--end", "end"),
    ("--target-hours", "target_hours"),
    ("--target-end", "target_end"),
    ("--eating-start", "eating_start"),
    ("--eating-end", "eating_end"),
    ("--preset", "preset"),
]


def _add_fast_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--start", type=_timestamp_arg, help="Fast start (ISO 8601)")
    parser.add_argument("--end", type=_timestamp_arg, help="Fast end, if closed")
    parser.add_argument("--target-hours", type=float, help="Target fasting duration in hours")
    parser.add_argument("--target-end", type=_timestamp_arg, help="End of the fasting window")
    parser.add_argument("--eating-start", type=_timestamp_arg, help="Eating window start")
    parser.add_argument("--eating-end", type=_timestamp_arg, help="Eating window end")
    parser.add_argument("--preset", choices=[p.id for p in FASTING_PRESETS],
                        help="Plan the windows from a fasting protocol")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fast_tracker",
        description="Fasting timer and calorie estimator",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- timer ---
    timer_p = subparsers.add_parser("timer", help="Show the timer state of a fast")
    _add_fast_arguments(timer_p)
    timer_p.add_argument("--now", type=_timestamp_arg, help="Evaluate at this instant (default: now)")
    timer_p.set_defaults(func=cmd_timer)

    # --- watch ---
    watch_p = subparsers.add_parser("watch", help="Live timer, refreshed every tick")
    _add_fast_arguments(watch_p)
    watch_p.add_argument("--interval", type=float, default=TICK_INTERVAL_SECONDS,
                         help="Seconds between ticks")
    watch_p.add_argument("--ticks", type=int, help="Stop after this many ticks")
    watch_p.set_defaults(func=cmd_watch)

    # --- calories ---
    cal_p = subparsers.add_parser("calories", help="Estimate daily calories from a body profile")
    cal_p.add_argument("--sex", choices=["male", "female"], required=True)
    cal_p.add_argument("--age", type=int, required=True)
    cal_p.add_argument("--height-cm", type=float, required=True)
    cal_p.add_argument("--weight-kg", type=float, required=True)
    cal_p.add_argument("--activity", required=True, choices=list(ACTIVITY_FACTORS.keys()))
    cal_p.add_argument("--goal", required=True, choices=list(GOAL_CALORIE_ADJUSTMENTS.keys()))
    cal_p.add_argument("--macros", action="store_true", help="Also split the target into macros")
    cal_p.set_defaults(func=cmd_calories)

    default_p = subparsers.add_parser("calories-default", help="Default calorie target for a goal")
    default_p.add_argument("goal", choices=list(GOAL_CALORIE_ADJUSTMENTS.keys()))
    default_p.set_defaults(func=cmd_calories_default)

    # --- presets ---
    presets_p = subparsers.add_parser("presets", help="List fasting protocols")
    presets_p.set_defaults(func=cmd_presets)

    # --- stats ---
    stats_p = subparsers.add_parser("stats", help="Statistics over a JSON export of fasts")
    stats_p.add_argument("file", help="JSON file with a list of fasts")
    stats_p.add_argument("--today", type=_date_arg, help="Reference date for the streak (YYYY-MM-DD)")
    stats_p.set_defaults(func=cmd_stats)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return

    if args.command in ("timer", "watch") and args.start is None:
        given = [flag for flag, dest in _FAST_FLAGS if getattr(args, dest) is not None]
        if given:
            parser.error(f"{', '.join(given)} given without --start")

    args.func(args)
