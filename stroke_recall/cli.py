#!/usr/bin/env python3
"""Command-line interface for stroke comparison.

Compares a memory stroke with a trace stroke stored as JSON files, prints
the score and where the largest errors are, and optionally saves the result
to the session database or a JSON file.

Stroke files hold either ``[[x, y], ...]`` or ``[{"x": .., "y": ..}, ...]``.

Usage:
    stroke-recall compare trace.json memory.json
    stroke-recall compare trace.json memory.json --hint --db session.db
    stroke-recall compare trace.json memory.json --output result.json -v
    stroke-recall last --db session.db

Or run via the module:
    python -m stroke_recall.cli compare trace.json memory.json
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from .api.services import ComparisonService
from .api.store import SessionStore
from .config import DB_PATH, MIN_STROKE_POINTS, SAMPLE_COUNT, SCORE_SENSITIVITY
from .domain.geometry import Stroke
from .domain.result import AnalysisResult
from .exceptions import StrokeRecallError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_RESULT = 1
EXIT_INPUT_ERROR = 2


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='stroke-recall',
        description='Score a from-memory drawing against a traced reference stroke'
    )
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    compare = sub.add_parser('compare', help='Compare a memory stroke with a trace')
    compare.add_argument('trace', type=str, help='Trace stroke JSON file')
    compare.add_argument('memory', type=str, help='Memory stroke JSON file')
    compare.add_argument('--samples', '-n', type=int, default=SAMPLE_COUNT,
                         help=f'Resampling point count (default: {SAMPLE_COUNT})')
    compare.add_argument('--sensitivity', '-k', type=float, default=SCORE_SENSITIVITY,
                         help=f'Score penalty per normalized unit (default: {SCORE_SENSITIVITY})')
    compare.add_argument('--min-points', type=int, default=MIN_STROKE_POINTS,
                         help=f'Minimum points per stroke (default: {MIN_STROKE_POINTS})')
    compare.add_argument('--hint', action='store_true',
                         help='Record that the hint overlay was used')
    compare.add_argument('--db', type=str, default=None,
                         help='Session database to save the result in')
    compare.add_argument('--output', '-o', type=str, default=None,
                         help='Write the full result as JSON to this file')

    last = sub.add_parser('last', help='Show the last saved result')
    last.add_argument('--db', type=str, default=DB_PATH,
                      help=f'Session database (default: {DB_PATH})')
    return parser


def load_stroke(path: str) -> Stroke:
    """Read a stroke from a JSON file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not a JSON list of points.
    """
    data = json.loads(Path(path).read_text())
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of points")
    try:
        return Stroke.coerce(data)
    except (KeyError, TypeError, IndexError) as e:
        raise ValueError(f"{path}: invalid point data: {e}") from e


def _print_result(service: ComparisonService, result: AnalysisResult) -> None:
    print(f"Score: {result.score:.1f}")
    if result.sample_count >= 3:
        summary = service.error_summary(result)
        print(f"Highest error: {summary.region.value} "
              f"(start={summary.start:.2f} middle={summary.middle:.2f} end={summary.end:.2f})")
    if result.is_hint_used:
        print("Hint used")


def _process_compare_command(args) -> int:
    try:
        trace = load_stroke(args.trace)
        memory = load_stroke(args.memory)
    except (OSError, ValueError) as e:
        logger.error("Cannot load strokes: %s", e)
        return EXIT_INPUT_ERROR

    store = SessionStore(args.db) if args.db else None
    service = ComparisonService(store, min_points=args.min_points,
                                sample_count=args.samples,
                                sensitivity=args.sensitivity)
    try:
        service.set_reference(trace)
        result = service.submit_memory(memory, hint_used=args.hint)
    except (StrokeRecallError, ValueError) as e:
        logger.error("%s", e)
        return EXIT_INPUT_ERROR

    _print_result(service, result)

    if args.output:
        out = Path(args.output)
        try:
            out.write_text(json.dumps(result.to_dict(), indent=2))
        except OSError as e:
            logger.error("Cannot write result to %s: %s", out, e)
            return EXIT_INPUT_ERROR
        print(f"Saved to {out}")
    return EXIT_OK


def _process_last_command(args) -> int:
    if not Path(args.db).exists():
        print("No saved result")
        return EXIT_NO_RESULT
    service = ComparisonService(SessionStore(args.db))
    try:
        result = service.resume()
    except StrokeRecallError as e:
        logger.error("%s", e)
        return EXIT_INPUT_ERROR
    if result is None:
        print("No saved result")
        return EXIT_NO_RESULT
    _print_result(service, result)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Parse command-line arguments and run the selected command.

    Returns:
        Process exit code: 0 on success, 1 if ``last`` finds nothing,
        2 on invalid input.
    """
    parser = _create_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.command == 'compare':
        return _process_compare_command(args)
    return _process_last_command(args)


if __name__ == '__main__':
    raise SystemExit(main())
