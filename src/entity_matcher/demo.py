# src/entity_matcher/demo.py
import argparse
import json
import logging
import sys
from pathlib import Path


def _read_lines(path: str) -> list:
    from .engine import split_lines

    return split_lines(Path(path).read_text(encoding="utf-8"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="entity-matcher-demo",
        description="Rank target entity names for every source name and show the chosen matches.",
    )
    parser.add_argument("--source", help="File with one source name per line (default: bundled sample)")
    parser.add_argument("--target", help="File with one target name per line (default: bundled sample)")
    parser.add_argument("--threshold", type=float, default=None, help="Minimum score in [0, 1]")
    parser.add_argument("--synonyms", default=None, help='Synonym groups, e.g. "腾讯控股有限公司,腾讯"')
    parser.add_argument("--policy", choices=("first", "shortest"), default=None,
                        help="Representative term of a synonym group")
    parser.add_argument("--diff", choices=("lcs", "levenshtein", "myers"), default=None,
                        dest="diff_algorithm", help="Alignment used for the diff column")
    parser.add_argument("--keep-punctuation", action="store_true", help="Do not strip punctuation")
    parser.add_argument("--no-fullwidth", action="store_true", help="Do not fold full-width chars")
    parser.add_argument("--keep-invisible", action="store_true", help="Do not strip invisible chars")
    parser.add_argument("--top-k", type=int, default=3, dest="top_k", help="Alternatives per source")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None):
    """CLI demo: compare two name lists and print the effective match per source as JSON."""
    from .engine import (
        NormalizationOptions,
        compare_lists,
        load_options,
        load_sample,
        match_diff,
    )

    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        sample = load_sample() if not (args.source and args.target) else None
        sources = _read_lines(args.source) if args.source else sample["sources"]
        targets = _read_lines(args.target) if args.target else sample["targets"]

        overrides = {
            "normalization": NormalizationOptions(
                ignore_punctuation=not args.keep_punctuation,
                fold_fullwidth=not args.no_fullwidth,
                strip_invisible=not args.keep_invisible,
            ),
        }
        if args.threshold is not None:
            overrides["threshold"] = args.threshold
        if args.synonyms is not None:
            overrides["synonym_spec"] = args.synonyms
        elif sample is not None:
            overrides["synonym_spec"] = sample["synonym_spec"]
        if args.policy:
            overrides["representative_policy"] = args.policy
        if args.diff_algorithm:
            overrides["diff_algorithm"] = args.diff_algorithm
        options = load_options(**overrides)

        def _progress(tick):
            print(f"[{tick['index']}/{tick['total']}] {tick['source_text']}", file=sys.stderr)

        run = compare_lists(sources, targets, options, progress=_progress)
        report = []
        for row in run.board.summary_rows():
            index = row["source_index"]
            diff = match_diff(run, index)
            report.append({
                **row,
                "diff_ratio": diff["ratio"] if diff else None,
                "alternatives": [
                    {"text": c["target_text"], "score": round(c["score"], 4)}
                    for c in run.board.alternatives(index, limit=args.top_k)
                ],
            })
        print(json.dumps(report, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
