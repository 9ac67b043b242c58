"""CLI entrypoint for phonolex: subcommand dispatcher."""

import argparse
import csv
import json
import logging
import sys
from pathlib import Path

from phonolex.types import WordPronunciation

# Raw tab-separated rows: quote characters are ordinary text
_TSV_FORMAT = {"delimiter": "\t", "quoting": csv.QUOTE_NONE, "quotechar": None}


def _add_shared_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared between all subcommands."""
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Log every issue as it is found (default: summary only)")


def _add_normalize_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments specific to the normalize subcommand."""
    parser.add_argument(
        "input_file", type=Path,
        help="TSV file: word, pronunciation[, language[, source edition]] per row",
    )
    parser.add_argument("--output", type=Path, default=None,
                        help="Output TSV file (default: stdout)")
    parser.add_argument("--issues", type=Path, default=None,
                        help="Write a JSON summary of all issues to this file")
    parser.add_argument("--language", default=None,
                        help="Language for rows without a language column")
    parser.add_argument("--edition", default="en",
                        help="Source edition for rows without an edition column (default: en)")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments with subcommands."""
    parser = argparse.ArgumentParser(
        prog="phonolex",
        description="Normalize IPA pronunciations onto per-language phoneme inventories",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse IPA strings and show their segments",
        description="Parse IPA pronunciations such as '/ˈbaf(ə)lmənt/' and print each alternative",
    )
    parse_parser.add_argument("pronunciations", nargs="+", help="IPA strings to parse")
    _add_shared_args(parse_parser)

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Normalize word/pronunciation pairs",
        description="Normalize words and pronunciations from a TSV file",
    )
    _add_normalize_args(normalize_parser)
    _add_shared_args(normalize_parser)

    languages_parser = subparsers.add_parser(
        "languages",
        help="Show grapheme and phoneme inventories",
        description="Print the inventories of supported languages as JSON",
    )
    languages_parser.add_argument("codes", nargs="*", default=[],
                                  help="Language codes (default: all supported)")
    _add_shared_args(languages_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    return args


def describe_segment(segment) -> str:
    """Compact text form of a segment, e.g. 'i>long' or 'n+syllabic'."""
    parts = [segment.letter]
    parts.extend(f"+{d.value}" for d in segment.diacritics)
    parts.extend(f"<{s.value}" for s in segment.left)
    parts.extend(f">{s.value}" for s in segment.right)
    return "".join(parts)


def _run_parse(args: argparse.Namespace) -> None:
    """Parse each pronunciation and print its alternatives."""
    from phonolex.ipa import ParserError, parse_ipa_string

    failed = False
    for pronunciation in args.pronunciations:
        result = parse_ipa_string(pronunciation)
        if isinstance(result, ParserError):
            failed = True
            loc = result.location
            print(
                f"Error: {pronunciation}: {result.type.value} at {loc.start}-{loc.end} "
                f"({result.text!r})",
                file=sys.stderr,
            )
            continue

        print(pronunciation)
        if not result:
            print("  (no pronunciation)")
        for i, segments in enumerate(result, start=1):
            print(f"  {i}: " + " ".join(describe_segment(s) for s in segments))

    if failed:
        sys.exit(1)


def read_word_pronunciations(
    path: Path,
    language: str | None = None,
    edition: str = "en",
) -> list[WordPronunciation]:
    """Read raw records from a TSV file.

    Raises:
        ValueError: If a row has too few columns or no language.
    """
    records = []
    with open(path, encoding="utf-8", newline="") as f:
        for line_number, row in enumerate(csv.reader(f, **_TSV_FORMAT), start=1):
            if not row or row[0].startswith("#"):
                continue
            if len(row) < 2:
                raise ValueError(f"{path}:{line_number}: expected at least 2 columns")
            row_language = row[2] if len(row) > 2 and row[2] else language
            if not row_language:
                raise ValueError(f"{path}:{line_number}: no language given")
            row_edition = row[3] if len(row) > 3 and row[3] else edition
            records.append(WordPronunciation(
                source_edition=row_edition,
                language=row_language,
                word=row[0],
                pronunciation=row[1],
            ))
    return records


def _write_normalized(entries, out) -> int:
    writer = csv.writer(out, lineterminator="\n", **_TSV_FORMAT)
    count = 0
    for entry in entries:
        for wp in entry.normalized:
            writer.writerow([wp.word, wp.pronunciation, wp.language])
            count += 1
    return count


def _run_normalize(args: argparse.Namespace) -> None:
    """Run the normalize pipeline over a TSV file."""
    from phonolex.issues import IssueLog
    from phonolex.languages import LanguageLookupError
    from phonolex.normalize import normalize_batch

    if not args.input_file.exists():
        print(f"Error: file not found: {args.input_file}", file=sys.stderr)
        sys.exit(1)

    logger = logging.getLogger("phonolex.normalize")

    try:
        records = read_word_pronunciations(args.input_file, args.language, args.edition)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    logger.info(f"Read {len(records)} record(s) from {args.input_file}")

    issues = IssueLog()
    try:
        entries = normalize_batch(records, issues=issues)
    except LanguageLookupError as e:
        print(f"Error: invalid language data: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output is None:
        count = _write_normalized(entries, sys.stdout)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            count = _write_normalized(entries, f)
        logger.info(f"Wrote {count} normalized record(s) to {args.output}")

    for language, counts in issues.counts().items():
        for message, n in counts.items():
            logger.info(f"[{language}] {n}x {message}")

    if args.issues is not None:
        args.issues.parent.mkdir(parents=True, exist_ok=True)
        args.issues.write_text(
            json.dumps(issues.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8",
        )
        logger.info(f"Wrote {len(issues)} issue(s) to {args.issues}")

    if issues.has_severe_issues():
        logger.warning("Severe issues found, see the issue summary")


def _run_languages(args: argparse.Namespace) -> None:
    """Print grapheme and phoneme inventories."""
    from phonolex.languages import available_languages, get_language_lookup

    codes = args.codes or available_languages()
    output = {}
    for code in codes:
        lookup = get_language_lookup(code)
        if lookup is None:
            print(f"Error: unsupported language: {code}", file=sys.stderr)
            sys.exit(1)
        output[code] = {
            "name": lookup.name,
            "graphemes": list(lookup.graphemes),
            "phonemes": list(lookup.phonemes),
        }
    print(json.dumps(output, ensure_ascii=False, indent=2))


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(name)s %(levelname)s: %(message)s")

    if args.command == "parse":
        _run_parse(args)
    elif args.command == "normalize":
        _run_normalize(args)
    elif args.command == "languages":
        _run_languages(args)


if __name__ == "__main__":
    main()
