"""
Stem words from the command line or from a vocabulary file.

Each input word is written with its stem, one pair per line. Non-ASCII
words are reported and skipped unless --strict is given, in which case
the first one aborts the run.

Usage (from project root):

    python -m scripts.run_stemmer caresses ponies generalization
    python scripts/run_stemmer.py --input voc.txt --output stems.txt
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, List, Tuple

from lexikit.errors import NonAsciiInputError
from lexikit.features.stemmer import stem
from lexikit.utils.config_utils import DEFAULT_CONFIG_PATH, get_logger, load_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Stem English words.")
    parser.add_argument("words", nargs="*", help="Words to stem.")
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="File with one word per line (read in addition to positional words).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write '<word> <stem>' lines here instead of stdout.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first non-ASCII word instead of skipping it.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to config YAML (default: {DEFAULT_CONFIG_PATH}).",
    )
    return parser.parse_args()


def _read_words(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def stem_words(words: Iterable[str], strict: bool, logger) -> Iterator[Tuple[str, str]]:
    for word in words:
        try:
            yield word, stem(word)
        except NonAsciiInputError:
            if strict:
                raise
            logger.warning("Skipping non-ASCII word: %r", word)


def main() -> None:
    args = parse_args()

    cfg = load_config(args.config)
    logger = get_logger(name="run_stemmer", config=cfg, log_file_suffix="stemmer")

    words = list(args.words)
    if args.input:
        words.extend(_read_words(args.input))
    if not words:
        logger.error("No words given; pass words as arguments or use --input.")
        sys.exit(2)

    lines = [f"{word} {stemmed}" for word, stemmed in stem_words(words, args.strict, logger)]
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        logger.info("Wrote %d stems to %s", len(lines), args.output)
    else:
        print("\n".join(lines))


if __name__ == "__main__":
    main()
