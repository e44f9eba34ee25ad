#!/usr/bin/env python3
"""
Generate Insights for CSV Columns.

This script:
1. Loads a CSV file with pandas
2. Runs statistical analysis on the requested columns
3. Optionally runs trend, anomaly and correlation analysis
4. Prints the insights and writes the full report as JSON

Usage:
    # Statistics only
    python run_auto_insights.py --csv data/requests.csv --column latency_ms

    # Everything, with time labels
    python run_auto_insights.py \
        --csv data/requests.csv \
        --column latency_ms --column requests \
        --timestamp-column minute \
        --trends --anomalies --correlations \
        --output report.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from auto_insights.core.config import Settings, get_settings
from auto_insights.insights import InsightOptions, InsightsEngine

logger = logging.getLogger(__name__)

SEVERITY_MARKERS = {"critical": "!!", "warning": "! ", "info": "  "}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate insights for numeric CSV columns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--csv", type=str, required=True, help="Path to the CSV file")
    parser.add_argument(
        "--column",
        action="append",
        required=True,
        help="Column to analyze (can specify multiple times)",
    )
    parser.add_argument("--timestamp-column", type=str, help="Column with time labels")
    parser.add_argument("--trends", action="store_true", help="Run trend analysis")
    parser.add_argument("--anomalies", action="store_true", help="Run anomaly detection")
    parser.add_argument("--correlations", action="store_true", help="Correlate column pairs")
    parser.add_argument("--config", type=str, help="YAML settings file")
    parser.add_argument("--output", type=str, help="Write the full report as JSON to this path")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings.from_yaml(args.config) if args.config else get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    csv_path = Path(args.csv)
    try:
        df = pd.read_csv(csv_path)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logger.error(f"Could not read {csv_path}: {e}")
        return 1

    logger.info(f"Loaded CSV: {csv_path} ({len(df)} rows, {len(df.columns)} columns)")

    engine = InsightsEngine(settings)
    report = engine.generate(
        df,
        args.column,
        InsightOptions(
            analyze_trends=args.trends,
            detect_anomalies=args.anomalies,
            analyze_correlations=args.correlations,
            timestamp_column=args.timestamp_column,
        ),
    )

    print("=" * 70)
    print(f"INSIGHTS: {csv_path.name}")
    print("=" * 70)
    for insight in report.insights:
        marker = SEVERITY_MARKERS[insight.severity.value]
        print(f"{marker} [{insight.severity.value:<8}] {insight.title}")
        print(f"     {insight.description}")
    if report.skipped_columns:
        print(f"\nSkipped columns: {', '.join(report.skipped_columns)}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(report.to_dict(), f, indent=2, ensure_ascii=False, default=str)
        logger.info(f"Report saved to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
