#!/usr/bin/env python3
"""
training-load CLI.

Training-load analytics and workout safety checks over JSON exports.

Usage:
    training-load form -12.5
    training-load trend points.json --window 7
    training-load weekly activities.json
    training-load recovery points.json
    training-load race points.json --race-date 2025-04-15 --today 2025-03-20
    training-load readiness checkin.json --baseline-rhr 50 --baseline-hrv 65
    training-load validate-load proposal.json
    training-load validate-modification modification.json
"""

import argparse
import sys
from datetime import date
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.json import JSON
from rich.markup import escape
from rich import box

from .analysis import (
    aggregate_weekly_loads,
    analyze_trend,
    assess_recovery,
    project_race_readiness,
    recent_window,
)
from .exceptions import TrainingLoadError, ValidationError
from .io import (
    load_json,
    parse_activities,
    parse_check_in,
    parse_fitness_points,
    parse_modification_context,
    parse_training_history,
    parse_workout,
)
from .logging_config import configure_logging
from .metrics import classify_form
from .models import FormStatus, RiskLevel, WarningSeverity
from .services import (
    check_training_readiness,
    validate_modification,
    validate_training_load,
)

console = Console()


def get_form_color(status: FormStatus) -> str:
    """Get rich color for a form status."""
    colors = {
        FormStatus.RACE_READY: "cyan",
        FormStatus.FRESH: "green",
        FormStatus.OPTIMAL: "green",
        FormStatus.TIRED: "yellow",
        FormStatus.OVERTRAINED: "red",
    }
    return colors.get(status, "white")


def get_risk_color(risk: RiskLevel) -> str:
    """Get rich color for a risk level."""
    colors = {
        RiskLevel.LOW: "green",
        RiskLevel.MODERATE: "yellow",
        RiskLevel.HIGH: "red",
        RiskLevel.CRITICAL: "bold red",
    }
    return colors.get(risk, "white")


def get_severity_color(severity: WarningSeverity) -> str:
    """Get rich color for a warning severity."""
    colors = {
        WarningSeverity.INFO: "blue",
        WarningSeverity.WARNING: "yellow",
        WarningSeverity.DANGER: "red",
    }
    return colors.get(severity, "white")


def _print_json(data: Any) -> None:
    console.print(JSON.from_data(data), soft_wrap=True)


def _print_insufficient(message: str) -> None:
    console.print(f"[yellow]{message}[/yellow]")


def _print_warnings(warnings, recommendations) -> None:
    if warnings:
        table = Table(title="Warnings", box=box.ROUNDED)
        table.add_column("Type", style="cyan")
        table.add_column("Severity")
        table.add_column("Message")
        for w in warnings:
            table.add_row(
                w.type.value,
                Text(w.severity.value.upper(), style=get_severity_color(w.severity)),
                w.message,
            )
        console.print(table)

    for recommendation in recommendations:
        console.print(f"  - {recommendation}")
    console.print()


# =============================================================================
# Commands
# =============================================================================


def cmd_form(args) -> Optional[Dict[str, Any]]:
    """Classify a single TSB value."""
    status = classify_form(args.tsb)
    if args.json:
        return {"tsb": args.tsb, "form": status.value}

    console.print(
        Text(f"TSB {args.tsb:+.1f}: {status.value.upper()}", style=get_form_color(status))
    )
    return None


def cmd_trend(args) -> Optional[Dict[str, Any]]:
    """Show form trend over the most recent points."""
    points = parse_fitness_points(load_json(args.file))
    trend = analyze_trend(recent_window(points, args.window))

    if args.json:
        return {"trend": trend.to_dict() if trend else None}

    if trend is None:
        _print_insufficient("Not enough data for a trend (need at least 2 points).")
        return None

    table = Table(title=f"Form Trend (last {args.window} points)", box=box.ROUNDED)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Direction", trend.direction.value)
    table.add_row("TSB change", f"{trend.tsb_change:+.1f}")
    table.add_row("CTL change", f"{trend.ctl_change:+.1f}")
    table.add_row("ATL change", f"{trend.atl_change:+.1f}")
    table.add_row("Current TSB", f"{trend.current_tsb:+.1f}")
    table.add_row("Average TSB", f"{trend.average_tsb:+.1f}")
    console.print(table)
    return None


def cmd_weekly(args) -> Optional[Dict[str, Any]]:
    """Show weekly load summaries."""
    summaries = aggregate_weekly_loads(parse_activities(load_json(args.file)))

    if args.json:
        return {"weeks": [s.to_dict() for s in summaries]}

    if not summaries:
        _print_insufficient("No activities.")
        return None

    table = Table(title="Weekly Load", box=box.ROUNDED)
    table.add_column("Week", style="cyan")
    table.add_column("TSS", justify="right")
    table.add_column("Activities", justify="right")
    table.add_column("Avg TSS", justify="right")
    table.add_column("Minutes", justify="right")
    for s in summaries:
        table.add_row(
            s.week_start.isoformat(),
            f"{s.total_tss:.0f}",
            str(s.activity_count),
            f"{s.average_tss_per_activity:.1f}",
            f"{s.total_duration:.0f}",
        )
    console.print(table)
    return None


def cmd_recovery(args) -> Optional[Dict[str, Any]]:
    """Assess fatigue and overreaching."""
    assessment = assess_recovery(parse_fitness_points(load_json(args.file)))

    if args.json:
        return {"recovery": assessment.to_dict() if assessment else None}

    if assessment is None:
        _print_insufficient("Not enough data for a recovery assessment (need at least 7 points).")
        return None

    style = "red" if assessment.is_overreaching else "green"
    console.print(Panel(
        f"Fatigue: [bold]{assessment.fatigue_level.value}[/bold]\n"
        f"Suggested recovery days: {assessment.suggested_recovery_days}\n"
        f"Ramp rate: {assessment.ramp_rate:+.1f} CTL/week\n"
        f"Overreaching: [{style}]{'yes' if assessment.is_overreaching else 'no'}[/{style}]",
        title="Recovery",
    ))
    return None


def cmd_race(args) -> Optional[Dict[str, Any]]:
    """Project readiness for a race date."""
    points = parse_fitness_points(load_json(args.file))
    today = args.today or date.today().isoformat()
    readiness = project_race_readiness(points, args.race_date, today)

    if args.json:
        return {"raceReadiness": readiness.to_dict() if readiness else None}

    if readiness is None:
        _print_insufficient("No projection: race date has passed or fewer than 7 points.")
        return None

    console.print(Panel(
        f"Days until race: [bold]{readiness.days_until_race}[/bold]\n"
        f"Current form: [{get_form_color(readiness.current_form)}]"
        f"{readiness.current_form.value}[/{get_form_color(readiness.current_form)}]\n"
        f"Projected TSB: {readiness.projected_tsb:+.1f}\n"
        f"Confidence: {readiness.confidence.value}\n\n"
        f"{readiness.recommendation}",
        title="Race Readiness",
    ))
    return None


def cmd_readiness(args) -> Optional[Dict[str, Any]]:
    """Readiness traffic light from a daily check-in."""
    check_in = parse_check_in(load_json(args.file))
    assessment = check_training_readiness(check_in, args.baseline_rhr, args.baseline_hrv)

    if args.json:
        return {"readiness": assessment.to_dict()}

    color = assessment.readiness.value
    console.print(Panel(
        f"[{color}]{assessment.readiness.value.upper()}[/{color}] (score {assessment.score})",
        title="Training Readiness",
    ))
    for concern in assessment.concerns:
        console.print(f"  ! {concern}")
    for recommendation in assessment.recommendations:
        console.print(f"  - {recommendation}")
    return None


def cmd_validate_load(args) -> Optional[Dict[str, Any]]:
    """Validate a proposed workout against training history."""
    payload = load_json(args.file)
    if not isinstance(payload, dict):
        raise ValidationError("Expected an object with 'workout' and 'history'")

    workout = parse_workout(payload.get("workout"))
    history = parse_training_history(payload.get("history"))
    raw_consecutive = payload.get("consecutiveHardDays", payload.get("consecutive_hard_days", 0))
    try:
        consecutive = int(raw_consecutive)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"consecutiveHardDays must be an integer, got {raw_consecutive!r}",
            field="consecutiveHardDays",
        ) from e

    result = validate_training_load(workout, history, consecutive)

    if args.json:
        return result.to_dict()

    verdict = "ALLOWED" if result.is_valid else "NOT ALLOWED"
    console.print(Text(
        f"{verdict} - risk {result.risk.value.upper()}",
        style=get_risk_color(result.risk),
    ))
    load = result.current_load
    console.print(
        f"Weekly TSS {load.weekly_tss:.0f} | CTL {load.ctl:.1f} | ATL {load.atl:.1f} | "
        f"TSB {load.tsb:+.1f} | monotony {load.monotony or 0:.2f} | strain {load.strain or 0:.0f}"
    )
    _print_warnings(result.warnings, result.recommendations)
    return None


def cmd_validate_modification(args) -> Optional[Dict[str, Any]]:
    """Validate a user edit of a proposed workout."""
    payload = load_json(args.file)
    if not isinstance(payload, dict):
        raise ValidationError("Expected an object with 'original' and 'modified'")

    # The original is the AI proposal; the edit is user input
    original = parse_workout(payload.get("original"), strict=False)
    modified = parse_workout(payload.get("modified"))
    context = parse_modification_context(payload.get("context"))

    result = validate_modification(original, modified, context)

    if args.json:
        return result.to_dict()

    verdict = "ALLOWED" if result.is_valid else "NOT ALLOWED"
    console.print(Text(
        f"{verdict} - risk {result.risk.value.upper()}",
        style=get_risk_color(result.risk),
    ))
    _print_warnings(result.warnings, result.recommendations)

    suggestion = result.suggested_modification
    if suggestion is not None:
        console.print(
            f"Suggested: {suggestion.sport.value} {suggestion.duration_minutes:.0f} min "
            f"at {suggestion.intensity.value} (~{suggestion.estimated_tss or 0:.0f} TSS)"
        )
    return None


COMMANDS = {
    "form": cmd_form,
    "trend": cmd_trend,
    "weekly": cmd_weekly,
    "recovery": cmd_recovery,
    "race": cmd_race,
    "readiness": cmd_readiness,
    "validate-load": cmd_validate_load,
    "validate-modification": cmd_validate_modification,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="training-load",
        description="Training-load analytics and workout safety checks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  training-load form -12.5
  training-load trend points.json --window 7
  training-load race points.json --race-date 2025-04-15 --today 2025-03-20
  training-load validate-load proposal.json --json
        """,
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--log-level", help="Log level (default from settings)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    form_p = subparsers.add_parser("form", help="Classify a TSB value")
    form_p.add_argument("tsb", type=float, help="Training Stress Balance")

    trend_p = subparsers.add_parser("trend", help="Form trend from fitness points")
    trend_p.add_argument("file", help="JSON list of fitness points")
    trend_p.add_argument("--window", "-w", type=int, default=7, help="Points to analyze")

    weekly_p = subparsers.add_parser("weekly", help="Weekly load summaries")
    weekly_p.add_argument("file", help="JSON list of activities")

    recovery_p = subparsers.add_parser("recovery", help="Fatigue and overreaching")
    recovery_p.add_argument("file", help="JSON list of fitness points")

    race_p = subparsers.add_parser("race", help="Race readiness projection")
    race_p.add_argument("file", help="JSON list of fitness points")
    race_p.add_argument("--race-date", required=True, help="Race date (YYYY-MM-DD)")
    race_p.add_argument("--today", help="Reference date (YYYY-MM-DD), defaults to today")

    readiness_p = subparsers.add_parser("readiness", help="Readiness from a daily check-in")
    readiness_p.add_argument("file", help="JSON check-in")
    readiness_p.add_argument("--baseline-rhr", type=float, help="Baseline resting HR")
    readiness_p.add_argument("--baseline-hrv", type=float, help="Baseline HRV (ms)")

    load_p = subparsers.add_parser("validate-load", help="Validate a proposed workout")
    load_p.add_argument("file", help="JSON with 'workout', 'history', 'consecutiveHardDays'")

    mod_p = subparsers.add_parser("validate-modification", help="Validate a workout modification")
    mod_p.add_argument("file", help="JSON with 'original', 'modified', 'context'")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return 1

    configure_logging(args.log_level)

    try:
        result = command(args)
    except TrainingLoadError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        for err in e.details.get("errors", []):
            console.print(f"  {escape(err['loc'])}: {escape(err['msg'])}")
        return 1

    if result is not None:
        _print_json(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
