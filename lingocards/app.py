import argparse
import dataclasses
import json
from pathlib import Path

from . import __version__
from .env import load_env, load_settings
from .feedback import Thresholds, evaluate
from .logger import get_logger
from .practice import PracticeSession
from .schema import load_words, search_words


def _settings():
    try:
        return load_settings()
    except ValueError as e:
        raise SystemExit(str(e))


def _thresholds(args: argparse.Namespace) -> Thresholds:
    overrides = {
        name: value
        for name, value in (("correct", args.correct), ("close", args.close))
        if value is not None
    }
    try:
        return dataclasses.replace(Thresholds.from_settings(_settings()), **overrides)
    except ValueError as e:
        raise SystemExit(str(e))


def _read_words(path: Path):
    if not path.exists():
        raise SystemExit(f"Input file not found: {path}")
    if not path.is_file():
        raise SystemExit(f"Input is not a file: {path}")
    try:
        return load_words(path)
    except OSError as e:
        raise SystemExit(f"Cannot read {path}: {e}")
    except ValueError as e:
        raise SystemExit(str(e))


def cmd_score(args: argparse.Namespace) -> None:
    feedback = evaluate(args.candidate, args.reference, _thresholds(args))
    if args.json:
        print(json.dumps(feedback.to_dict(), ensure_ascii=False))
        return
    print(f"Score: {feedback.score}")
    print(f"Tier: {feedback.tier}")


def cmd_validate(args: argparse.Namespace) -> None:
    words, errors = _read_words(Path(args.input))
    if errors:
        print("Invalid:")
        for e in errors:
            print(f" - {e}")
        raise SystemExit(2)
    print(f"Valid ({len(words)} words)")


def cmd_search(args: argparse.Namespace) -> None:
    words, errors = _read_words(Path(args.input))
    for e in errors:
        print(f"[skip] {e}")
    matches = search_words(words, args.term)
    if args.json:
        print(json.dumps([w.to_dict() for w in matches], ensure_ascii=False))
        return
    if not matches:
        print("No matching words.")
        return
    print(f"Found {len(matches)} words:\n")
    for w in matches:
        print(f"{w.id}: {w.word} - {w.translation}")
        if w.example:
            print(f"  Example: {w.example}")


def cmd_practice(args: argparse.Namespace) -> None:
    words, errors = _read_words(Path(args.input))
    for e in errors:
        print(f"[skip] {e}")
    item = next((w for w in words if w.id == args.word_id), None)
    if item is None:
        raise SystemExit(f"Word not found: {args.word_id}")
    if not args.transcript:
        raise SystemExit("Provide at least one --transcript")

    settings = _settings()
    logger = get_logger(level=settings.log_level, enable_file=not args.no_log_file)
    session = PracticeSession(item, thresholds=_thresholds(args), logger=logger)

    print(f"Word: {item.word} ({item.translation})")
    print(f"Say: {session.reference}")
    last = len(args.transcript) - 1
    for i, transcript in enumerate(args.transcript):
        feedback = session.update(transcript, final=(i == last))
        print(f"[{feedback.tier}] {feedback.score:3d}  {transcript}")

    print(f"Best: {session.best.score}")
    print(f"Revealed: {'yes' if session.revealed else 'no'}")
    logger.log_metrics_summary()


def _add_threshold_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--correct", type=int, help="Score needed for 'correct' (default: env or 90)")
    p.add_argument("--close", type=int, help="Score needed for 'close' (default: env or 70)")


def main():
    # Load .env if present (LINGOCARDS_* settings)
    load_env()
    parser = argparse.ArgumentParser(prog="lingocards", description="Vocabulary flashcards with pronunciation practice")
    parser.add_argument("--version", action="store_true", help="Show version")

    subparsers = parser.add_subparsers(dest="command")
    sc = subparsers.add_parser("score", help="Score a transcript against a reference sentence")
    sc.add_argument("--candidate", required=True, help="Spoken transcript")
    sc.add_argument("--reference", required=True, help="Reference sentence")
    sc.add_argument("--json", action="store_true", help="Print feedback as JSON")
    _add_threshold_args(sc)
    sc.set_defaults(func=cmd_score)

    val = subparsers.add_parser("validate", help="Validate a word list JSON file")
    val.add_argument("--input", required=True, help="Path to word list JSON")
    val.set_defaults(func=cmd_validate)

    srch = subparsers.add_parser("search", help="Search a word list by word or translation")
    srch.add_argument("--input", required=True, help="Path to word list JSON")
    srch.add_argument("--term", default="", help="Case-insensitive text to look for (default: list all)")
    srch.add_argument("--json", action="store_true", help="Print matches as JSON")
    srch.set_defaults(func=cmd_search)

    pr = subparsers.add_parser("practice", help="Practice one word with a sequence of transcripts")
    pr.add_argument("--input", required=True, help="Path to word list JSON")
    pr.add_argument("--word-id", required=True, help="Id of the word to practice")
    pr.add_argument("--transcript", action="append", help="Transcript update; repeat for interim results, last one is final")
    pr.add_argument("--no-log-file", action="store_true", help="Log to console only")
    _add_threshold_args(pr)
    pr.set_defaults(func=cmd_practice)

    args = parser.parse_args()

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
