"""
Build a sentiment lexicon from a ratings CSV and save it as JSON.

The ratings data of Warriner et al. (BRM-emot-submit.csv) can be
downloaded from the "Electronic supplementary material" section of
https://link.springer.com/article/10.3758/s13428-012-0314-x and is only
licensed for non-commercial use, so it is not shipped with lexikit.

This script:

- reads the CSV using the column layout from config/lexikit.yaml
- stems every word (non-ASCII words fail unless skip_non_ascii is set)
- writes the lexicon to the configured JSON path
- optionally prints the sentiment of a few probe words

Usage (from project root):

    python -m scripts.run_lexicon_creation --csv data/BRM-emot-submit.csv
"""

from __future__ import annotations

import argparse

from lexikit.data.lexicon import build_lexicon_from_csv, save_lexicon_json
from lexikit.models.sentiment import SentimentModel
from lexikit.utils.config_utils import DEFAULT_CONFIG_PATH, get_logger, load_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build a sentiment lexicon JSON file from a ratings CSV."
    )
    parser.add_argument(
        "--csv",
        type=str,
        required=True,
        help="Path to the ratings CSV.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON path (default: paths.lexicon_path from the config).",
    )
    parser.add_argument(
        "--probe",
        nargs="*",
        default=["abduction", "betrayal"],
        help="Words whose sentiment is logged after building the lexicon.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to config YAML (default: {DEFAULT_CONFIG_PATH}).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    cfg = load_config(args.config)
    logger = get_logger(name="run_lexicon_creation", config=cfg, log_file_suffix="lexicon")

    output_path = args.output
    if output_path is None:
        output_path = (cfg.get("paths", {}) or {}).get("lexicon_path", "data/lexicon.json")

    logger.info("Building lexicon from %s", args.csv)
    lexicon = build_lexicon_from_csv(args.csv, config_path=args.config)
    save_lexicon_json(lexicon, output_path)
    logger.info("Saved %d entries to %s", len(lexicon), output_path)

    model = SentimentModel(lexicon)
    for word in args.probe:
        sentiment = model.get_sentiment_for_term(word)
        logger.info(
            "%s: valence=%.2f arousal=%.2f (%s)",
            word,
            sentiment["valence"],
            sentiment["arousal"],
            model.get_term_description(word),
        )


if __name__ == "__main__":
    main()
