"""CLI entry point.

This script reads a JSON object of schema.org JobPosting attributes, validates
it, and writes the JSON-LD document to disk or stdout.

Examples:
    python run_render.py --input posting.json
    python run_render.py --input posting.json --out build/posting.jsonld
    python run_render.py --input posting.json --omit-unset --verbose

Defaults (country, language, whether unset fields are emitted) come from the
environment or a `.env` file, see `job_posting_ld.config`.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from job_posting_ld import JobPostingRecord, Settings, ValidationError

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a schema.org JobPosting as JSON-LD.")
    p.add_argument("--input", type=str, required=True, help="JSON file with camelCase JobPosting attributes.")
    p.add_argument("--out", type=str, default=None, help="Output file path (default: stdout).")
    p.add_argument(
        "--omit-unset",
        action="store_true",
        help="Leave attributes that were never set out of the output instead of emitting null.",
    )
    p.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    in_path = Path(args.input).expanduser().resolve()
    try:
        data = json.loads(in_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        print(f"error: cannot read {in_path}: {exc}", file=sys.stderr)
        return 1
    if not isinstance(data, dict):
        print(f"error: {in_path} must contain a JSON object", file=sys.stderr)
        return 1
    logger.debug("Loaded %d attributes from %s", len(data), in_path)

    settings = Settings.from_env()
    include_unset = False if args.omit_unset else None
    try:
        record = JobPostingRecord.from_mapping(data, settings=settings)
        rendered = record.to_json_ld(include_unset=include_unset)
    except (ValidationError, ValueError, KeyError, TypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.out is None:
        print(rendered)
        return 0

    out_path = Path(args.out).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(rendered + "\n", encoding="utf-8")

    print(f"Wrote JobPosting JSON-LD to: {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
