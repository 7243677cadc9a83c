"""Command-line front end for chord lookup and tritone substitution.

Usage:
    chord-substituter notes <chord> [<chord> ...]
    chord-substituter find <pitches> [--exact]
    chord-substituter sub <chord> [--notes]
    chord-substituter chords

Examples:
    chord-substituter notes "C major" Bbm7 G7
    chord-substituter find C E G --exact
    chord-substituter sub G7 --notes --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from chord_substituter.chord import all_chords, find_chords_with_pitches, notes_from_chord_array
from chord_substituter.result import Err, Result
from chord_substituter.tritone import substitute, substitute_with_notes

logger = logging.getLogger("chord_substituter")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the package logger."""
    level = logging.DEBUG if verbose else logging.INFO
    handler = next((h for h in logger.handlers if isinstance(h, logging.StreamHandler)), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    else:
        handler.setStream(sys.stderr)
    handler.setLevel(level)
    logger.setLevel(level)


def result_to_dict(result: Result[Any]) -> dict[str, Any]:
    """Convert a Result to a JSON-serializable dict."""
    if isinstance(result, Err):
        return {"ok": False, "kind": result.error.kind, "error": result.error.message}
    return {"ok": True, "value": result.value}


def _emit(data: Any, args: argparse.Namespace) -> None:
    indent = 2 if args.pretty else None
    print(json.dumps(data, indent=indent, ensure_ascii=False))


def _error(result: Err) -> int:
    print(f"Error: {result.error.message}", file=sys.stderr)
    return 1


def cmd_notes(args: argparse.Namespace) -> int:
    results = notes_from_chord_array(args.chords)
    if args.json:
        _emit([{"chord": c, **result_to_dict(r)} for c, r in zip(args.chords, results)], args)
    else:
        for chord, result in zip(args.chords, results):
            if isinstance(result, Err):
                print(f"{chord}: Error: {result.error.message}")
            else:
                print(f"{chord}: {' '.join(result.value)}")
    return 1 if any(isinstance(r, Err) for r in results) else 0


def cmd_find(args: argparse.Namespace) -> int:
    result = find_chords_with_pitches(" ".join(args.pitches), match_exact=args.exact)
    if args.json:
        _emit(result_to_dict(result), args)
        return 1 if isinstance(result, Err) else 0
    if isinstance(result, Err):
        return _error(result)
    for name in result.value:
        print(name)
    return 0


def cmd_sub(args: argparse.Namespace) -> int:
    if args.notes:
        result = substitute_with_notes(args.chord)
    else:
        result = substitute(args.chord)
    if args.json:
        _emit(result_to_dict(result), args)
        return 1 if isinstance(result, Err) else 0
    if isinstance(result, Err):
        return _error(result)
    if args.notes:
        name, chord_notes = result.value
        print(f"{name}: {' '.join(chord_notes)}")
    else:
        print(result.value)
    return 0


def cmd_chords(args: argparse.Namespace) -> int:
    chords = all_chords()
    if args.json:
        _emit([{"chord": name, "notes": chord_notes} for name, chord_notes in chords], args)
    else:
        for name, chord_notes in chords:
            print(f"{name}: {' '.join(chord_notes)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chord-substituter",
        description="Look up chord notes, find chords from pitches, and substitute tritones",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s notes "C major" Bbm7
  %(prog)s find C E G --exact
  %(prog)s sub G7#9 --notes
        """,
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON output")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    notes_parser = subparsers.add_parser("notes", help="Show the notes of one or more chords")
    notes_parser.add_argument("chords", nargs="+", help='Chord strings, e.g. "C major" or Bbm7')
    notes_parser.set_defaults(func=cmd_notes)

    find_parser = subparsers.add_parser("find", help="Find chords containing the given pitches")
    find_parser.add_argument("pitches", nargs="+", help="Pitches, e.g. C E G or CEG")
    find_parser.add_argument(
        "--exact",
        action="store_true",
        help="Only match chords made of exactly these pitches",
    )
    find_parser.set_defaults(func=cmd_find)

    sub_parser = subparsers.add_parser("sub", help="Tritone-substitute a dominant chord")
    sub_parser.add_argument("chord", help="Dominant chord, e.g. G7")
    sub_parser.add_argument("--notes", action="store_true", help="Also show the substitute's notes")
    sub_parser.set_defaults(func=cmd_sub)

    chords_parser = subparsers.add_parser("chords", help="List every known chord with its notes")
    chords_parser.set_defaults(func=cmd_chords)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    logger.debug("Running %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
