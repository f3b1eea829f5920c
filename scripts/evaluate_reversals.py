#!/usr/bin/env python3
"""
Render the reversal table with refund eligibility.

Usage:
  python scripts/evaluate_reversals.py
  python scripts/evaluate_reversals.py --data /path/to/reversals.json
  python scripts/evaluate_reversals.py --config-dir /path/to/config --json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from refund_engine.config import settings
from refund_engine.core.logging import setup_logging
from refund_engine.domain.schemas import ReversalRow
from refund_engine.domain.services.config_engine import ConfigEngine
from refund_engine.services.reversal_table_service import ReversalTableService

COLUMNS = [
    ("Name", "name"),
    ("Customer Location (timezone)", "customer_tz"),
    ("Sign up date", "signup_date"),
    ("Request Source", "source"),
    ("Investment Date", "investment_date"),
    ("Investment Time", "investment_time"),
    ("Refund Request Date", "request_date"),
    ("Refund Request Time", "request_time"),
    ("Eligible", "eligible"),
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate refund eligibility for reversal requests.")
    parser.add_argument("--data", default="", help="Reversal records JSON (default: packaged sample)")
    parser.add_argument("--config-dir", default="", help="Directory holding timezones.yml and rules.yml")
    parser.add_argument("--json", action="store_true", help="Print rows as JSON instead of a table")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args()


def render_table(rows: List[ReversalRow]) -> str:
    cells = [[header for header, _ in COLUMNS]]
    for row in rows:
        values = row.model_dump()
        line = [str(values[key]) for _, key in COLUMNS]
        if row.status == "unknown":
            line[-1] = f"False ({row.error_kind})"
        cells.append(line)

    widths = [max(len(line[i]) for line in cells) for i in range(len(COLUMNS))]
    out = []
    for index, line in enumerate(cells):
        out.append(" | ".join(value.ljust(widths[i]) for i, value in enumerate(line)))
        if index == 0:
            out.append("-+-".join("-" * w for w in widths))
    return "\n".join(out)


def main() -> int:
    args = parse_args()
    setup_logging(args.log_level, stream=sys.stderr, force=True)

    config_dir = Path(args.config_dir) if args.config_dir else settings.config_dir
    data_file = Path(args.data) if args.data else settings.reversals_data_file

    engine = ConfigEngine(config_dir)
    engine.load_all()

    try:
        rows = ReversalTableService(data_file, engine.rules).build_rows()
    except (FileNotFoundError, ValueError) as exc:
        print(f"Cannot read reversal data: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([row.model_dump() for row in rows], indent=2))
    else:
        print(render_table(rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
