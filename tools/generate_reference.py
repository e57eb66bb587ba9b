#!/usr/bin/env python3
"""
Generate (or check) the generator / fixed-point reference document.

Other implementations of the generator and fixed-point routines must reproduce
this document exactly. Typical uses:

    python -m tools.generate_reference --output tests/fixtures/reference_values.json
    python -m tools.generate_reference --check tests/fixtures/reference_values.json
    python -m tools.generate_reference --digest
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from src.core.fixpt import FixptError
from src.reference.config import load_settings, parse_log_level
from src.reference.document import build_reference_document, diff_documents
from src.reference.encoding import encode_reference_json, reference_digest
from src.reference.scenarios import ScenarioError, load_scenarios

logger = logging.getLogger("tools.generate_reference")

MAX_REPORTED_DIFFS = 10


def _check(path: Path, document: dict) -> int:
    try:
        expected = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SystemExit(f"cannot read reference file {path}: {exc}") from exc

    diffs = diff_documents(expected, document)
    if not diffs:
        logger.info("reference document matches %s", path)
        print(f"OK {path} {reference_digest(document)}")
        return 0

    print(f"MISMATCH {path}: {len(diffs)} differing entries", file=sys.stderr)
    for d in diffs[:MAX_REPORTED_DIFFS]:
        print(f"  {d}", file=sys.stderr)
    if len(diffs) > MAX_REPORTED_DIFFS:
        print(f"  ... {len(diffs) - MAX_REPORTED_DIFFS} more", file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--output", type=Path, default=settings.output_path, help="Write JSON here (default: stdout)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--check", type=Path, help="Compare against an existing JSON file instead of writing")
    mode.add_argument("--digest", action="store_true", help="Print the canonical SHA-256 digest only")
    parser.add_argument("--scenarios", type=Path, help="Alternate scenarios YAML file")
    parser.add_argument("--indent", type=int, default=settings.json_indent, help="JSON indent width")
    parser.add_argument("--log-level", default=None, help="Logging level (overrides REFGEN_LOG_LEVEL)")
    args = parser.parse_args(argv)

    level = settings.log_level
    if args.log_level:
        level = parse_log_level(args.log_level)
        if level is None:
            parser.error(f"unknown log level: {args.log_level}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        scenarios = load_scenarios(args.scenarios)
    except (OSError, ScenarioError) as exc:
        raise SystemExit(f"cannot load scenarios: {exc}") from exc

    try:
        document = build_reference_document(scenarios)
    except FixptError as exc:
        raise SystemExit(f"cannot build reference document: {exc}") from exc

    if args.check is not None:
        return _check(args.check, document)

    if args.digest:
        print(reference_digest(document))
        return 0

    text = encode_reference_json(document, indent=args.indent)
    if args.output is None:
        sys.stdout.write(text)
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(text, encoding="utf-8")
    logger.info("wrote %s (%s)", args.output, reference_digest(document))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
