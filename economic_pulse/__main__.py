"""Command-line entry point: python -m economic_pulse <command>."""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

import pandas as pd

from economic_pulse.analysis import (
    AnalysisReporter,
    CorrelationAnalyzer,
    HealthScoreCalculator,
    InsightGenerator,
)
from economic_pulse.config import Settings
from economic_pulse.data import SeriesStore


def _print_json(payload) -> None:
    print(json.dumps(payload, indent=2, default=str, allow_nan=False))


def _cmd_insight(store: SeriesStore, args: argparse.Namespace) -> int:
    insight = InsightGenerator(store).generate_economic_insight(args.name)
    if insight is None:
        print(f"No insight available for {args.name!r} (not found or insufficient data).")
        return 1
    if args.json:
        _print_json(insight.to_dict())
        return 0

    print(f"\n{insight.indicator_name}")
    print("=" * 60)
    print(f"Current: {insight.current_value:,.2f}   Previous: {insight.previous_value:,.2f}")
    print(f"Change:  {insight.change_percent:+.2f}%  ({insight.trend}, {insight.significance})")
    print(f"\n{insight.narrative}")
    print(f"\n{insight.investment_implication}")
    print(f"\n{insight.historical_context}")
    if insight.related_indicators:
        print(f"\nRelated: {', '.join(insight.related_indicators)}")
    return 0


def _cmd_insights(store: SeriesStore, args: argparse.Namespace) -> int:
    insights = AnalysisReporter(store).generate_insights(limit=args.limit)
    if args.json:
        _print_json([i.to_dict() for i in insights])
        return 0
    for insight in insights:
        print(
            f"{insight.indicator_name:30} | {insight.change_percent:+8.2f}% | "
            f"{insight.trend:8} | {insight.significance}"
        )
    return 0


def _cmd_health(store: SeriesStore, args: argparse.Namespace) -> int:
    score = HealthScoreCalculator(store).calculate_economic_health_score()
    if args.json:
        _print_json(score.to_dict())
        return 0

    print(f"\nECONOMIC HEALTH SCORE: {score.overall_score} / 100")
    print(f"RISK: {score.risk_level}   TREND: {score.trend}")
    print("\n" + "-" * 60)
    for key, value in score.components.to_dict().items():
        print(f"  {key:20} | {value:6.1f}")
    print("\n" + "-" * 60)
    print(score.narrative)
    return 0


def _cmd_correlations(store: SeriesStore, args: argparse.Namespace) -> int:
    correlations = CorrelationAnalyzer(store).analyze_correlations()
    if args.json:
        _print_json([c.to_dict() for c in correlations])
        return 0
    if not correlations:
        print("No indicator pairs with enough aligned history.")
        return 0
    for c in correlations:
        print(
            f"{c.indicator_a_name:25} ~ {c.indicator_b_name:25} | "
            f"r={c.correlation_coeff:+.3f} | {c.strength:11} | conf {c.confidence:5.1f}"
        )
    return 0


def _cmd_signals(store: SeriesStore, args: argparse.Namespace) -> int:
    signals = AnalysisReporter(store).market_signals()
    if args.json:
        _print_json([s.to_dict() for s in signals])
        return 0
    if not signals:
        print("No market signals.")
    for signal in signals:
        print(f"[{signal.type}] strength {signal.strength:.0f}: {signal.narrative}")
    return 0


def _cmd_summary(store: SeriesStore, args: argparse.Namespace) -> int:
    summary = AnalysisReporter(store).build_summary()
    if args.json:
        _print_json(summary.to_dict())
        return 0

    print(f"\nHealth score: {summary.health_score.overall_score}/100 "
          f"({summary.health_score.risk_level} risk)")
    print(f"Data quality: {summary.data_quality:.0f}%")
    print(f"\nTop correlations ({len(summary.top_correlations)}):")
    for c in summary.top_correlations:
        print(f"  {c.indicator_a_name} ~ {c.indicator_b_name}: {c.correlation_coeff:+.2f}")
    print(f"\nKey insights ({len(summary.key_insights)}):")
    for insight in summary.key_insights:
        print(f"  {insight.narrative}")
    return 0


def _cmd_status(store: SeriesStore, args: argparse.Namespace) -> int:
    status = store.get_store_status()
    if args.json:
        _print_json(status)
        return 0
    print("\nIndicator Store Status:")
    print("-" * 80)
    for name, info in status.items():
        last = info["last_date"] or "N/A"
        print(f"{name:30} | {info['category']:15} | {info['observation_count']:6} obs | Last: {last}")
    return 0


def _cmd_load(store: SeriesStore, args: argparse.Namespace) -> int:
    df = pd.read_csv(args.csv, parse_dates=["date"])
    df["value"] = pd.to_numeric(df["value"], errors="coerce")
    df = df[["date", "value"]].dropna().set_index("date")

    store.store_indicator(
        args.name,
        category=args.category,
        source=args.source,
        frequency=args.frequency,
        units=args.units,
    )
    rows = store.store_observations(args.name, df, fetched_at=datetime.now())
    print(f"Loaded {rows} observations into {args.name!r}")
    return 0


COMMANDS = {
    "insight": _cmd_insight,
    "insights": _cmd_insights,
    "health": _cmd_health,
    "correlations": _cmd_correlations,
    "signals": _cmd_signals,
    "summary": _cmd_summary,
    "status": _cmd_status,
    "load": _cmd_load,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="economic_pulse",
        description="Economic indicator insights, health score and correlations",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--db", type=str, default=None, help="Path to the indicator database")
    sub = parser.add_subparsers(dest="command", required=True)

    insight = sub.add_parser("insight", help="Insight for one indicator")
    insight.add_argument("name", help="Indicator name, e.g. 'Unemployment Rate'")

    insights = sub.add_parser("insights", help="Insights for active indicators")
    insights.add_argument("--limit", type=int, default=10)

    sub.add_parser("health", help="Economic health score")
    sub.add_parser("correlations", help="Correlations between key indicator pairs")
    sub.add_parser("signals", help="Market signals and warnings")
    sub.add_parser("summary", help="Health score, top correlations and key insights")
    sub.add_parser("status", help="Show store contents and exit")

    load = sub.add_parser("load", help="Load a date,value CSV into the store")
    load.add_argument("name", help="Indicator name")
    load.add_argument("--csv", required=True, help="CSV file with date and value columns")
    load.add_argument("--category", required=True, help="e.g. employment, inflation")
    load.add_argument("--source", required=True, help="e.g. FRED, BLS")
    load.add_argument("--frequency", default=None)
    load.add_argument("--units", default=None)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        db_path = settings.db_path
        if args.db:
            db_path = Path(args.db)
        elif args.command != "load":
            settings.validate()

        store = SeriesStore(db_path)
        return COMMANDS[args.command](store, args)

    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    sys.exit(main())
