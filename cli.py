import argparse
import csv
import datetime
import logging
from typing import Optional

from algorithms.math_tools import MathTools
from algorithms.weight_converter import WeightConverter
from config import APP_VERSION, YamlConfig
from insight_service import InsightService
from models import BodyMetricSample, PersonalRecordEvent
from planner_service import PlannerService
from progression_service import ProgressionService
from settings_schema import (
    is_lower_body,
    load_settings,
    training_maxes_from_settings,
)
from stats_service import StatisticsService

METRIC_FIELDS = ("body_fat_pct", "muscle_mass", "waist", "chest", "arms", "legs")


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


def read_metrics(csv_path: str) -> list[BodyMetricSample]:
    """Read body measurements from a CSV with ``date`` and ``weight`` columns."""
    samples: list[BodyMetricSample] = []
    with open(csv_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            extra = {k: _optional_float(row.get(k)) for k in METRIC_FIELDS}
            samples.append(
                BodyMetricSample(
                    date=datetime.datetime.fromisoformat(row["date"]),
                    weight=float(row["weight"]),
                    **extra,
                )
            )
    return samples


def read_records(csv_path: str) -> list[PersonalRecordEvent]:
    """Read personal records from a CSV with date, exercise, weight and reps."""
    records: list[PersonalRecordEvent] = []
    with open(csv_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            records.append(
                PersonalRecordEvent.from_set(
                    datetime.datetime.fromisoformat(row["date"]),
                    row["exercise"],
                    float(row["weight"]),
                    int(row["reps"]),
                )
            )
    return records


def unit_label(unit: str) -> str:
    return "lbs" if unit == "lb" else unit


def print_program(config_path: str) -> None:
    settings = load_settings(YamlConfig(config_path))
    maxes = training_maxes_from_settings(settings)
    for day in PlannerService.build_four_day_program(maxes):
        print(f"{day.day_type.upper()} DAY")
        print(f"  {day.main_exercise}")
        for s in day.main_sets:
            print(f"    {s.set_number}. {s.reps} x {s.weight} ({s.percentage:.0%})")
        print(f"  {day.secondary_exercise}")
        for s in day.secondary_sets:
            print(f"    {s.set_number}. {s.reps} x {s.weight} ({s.percentage:.0%})")


def print_progress(
    config_path: str, lift: str, current: float, amrap: int, target: int
) -> None:
    settings = load_settings(YamlConfig(config_path))
    lower = is_lower_body(lift, settings)
    new_max = ProgressionService.next_training_max(current, amrap, target, lower)
    rec = ProgressionService.recommendation(amrap, target)
    print(f"{lift}: {current} -> {new_max}")
    print(rec.message)


def print_analysis(metrics_path: str, records_path: str, config_path: str) -> None:
    settings = load_settings(YamlConfig(config_path))
    samples = read_metrics(metrics_path)
    records = read_records(records_path)
    summary = StatisticsService.analyze(
        samples,
        records,
        is_male=settings.sex == "male",
        unit=settings.weight_unit,
    )
    print(f"Correlations: {len(summary.correlations)}")
    print(f"Average ratio: {summary.average_ratio:.2f}")
    print(f"Trend: {summary.trend.value}")
    if summary.best_ratio is not None:
        print(f"Best ratio: {summary.best_ratio.strength_to_weight_ratio:.2f}")
    if summary.current_ratio is not None:
        print(f"Current ratio: {summary.current_ratio.strength_to_weight_ratio:.2f}")
    comp = StatisticsService.body_composition(samples)
    label = unit_label(settings.weight_unit)
    print(f"Body weight change: {comp.weight_change:+.1f} {label} ({comp.trend.value})")
    for insight in InsightService.generate(summary, unit=label):
        print(f"- {insight}")


def main() -> None:
    parser = argparse.ArgumentParser(description="nSuns training utilities")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=APP_VERSION)
    sub = parser.add_subparsers(dest="cmd", required=True)

    orm = sub.add_parser("1rm")
    orm.add_argument("--weight", type=float, required=True)
    orm.add_argument("--reps", type=int, required=True)

    wilks = sub.add_parser("wilks")
    wilks.add_argument("--bodyweight", type=float, required=True)
    wilks.add_argument("--total", type=float, required=True)
    wilks.add_argument("--female", action="store_true")
    wilks.add_argument("--unit", choices=["kg", "lb"], default="kg")

    plan = sub.add_parser("plan")
    plan.add_argument("--config", default="settings.yaml")

    prog = sub.add_parser("progress")
    prog.add_argument("--lift", required=True)
    prog.add_argument("--current", type=float, required=True)
    prog.add_argument("--amrap", type=int, required=True)
    prog.add_argument("--target", type=int, required=True)
    prog.add_argument("--config", default="settings.yaml")

    ana = sub.add_parser("analyze")
    ana.add_argument("--metrics", required=True)
    ana.add_argument("--records", required=True)
    ana.add_argument("--config", default="settings.yaml")

    conv = sub.add_parser("convert")
    conv.add_argument("--weight", type=float, required=True)
    conv.add_argument("--unit", choices=["kg", "lb"], required=True)

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "1rm":
        print(MathTools.one_rep_max(args.weight, args.reps))
    elif args.cmd == "wilks":
        score = MathTools.wilks_score(
            WeightConverter.to_kg(args.bodyweight, args.unit),
            WeightConverter.to_kg(args.total, args.unit),
            not args.female,
        )
        print(f"{score:.2f}")
    elif args.cmd == "plan":
        print_program(args.config)
    elif args.cmd == "progress":
        print_progress(args.config, args.lift, args.current, args.amrap, args.target)
    elif args.cmd == "analyze":
        print_analysis(args.metrics, args.records, args.config)
    elif args.cmd == "convert":
        if args.unit == "kg":
            print(f"{args.weight} kg = {WeightConverter.kg_to_lb(args.weight)} lb")
        else:
            print(f"{args.weight} lb = {WeightConverter.lb_to_kg(args.weight)} kg")


if __name__ == "__main__":
    main()
