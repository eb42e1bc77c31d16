"""
Sentiment lexicon loading and serialization.

This module is responsible for:
- reading a lexicon stored as JSON (word -> {word, stem, avg, std, ...})
- writing a lexicon back to JSON in the same layout
- building a lexicon from a Warriner et al. style ratings CSV, stemming
  every word on the way in

The CSV column names come from the "lexicon" section of
config/lexikit.yaml, so other ratings files with the same shape can be
used without changing this code.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict
from typing import Any, Dict

import pandas as pd

from lexikit.errors import NonAsciiInputError
from lexikit.features.stemmer import stem
from lexikit.models.sentiment import Lexicon, SentimentEntry
from lexikit.utils.config_utils import (
    DEFAULT_CONFIG_PATH,
    ensure_dir_exists,
    get_config_section,
)

logger = logging.getLogger(__name__)


def _entry_from_dict(key: str, raw: Dict[str, Any]) -> SentimentEntry:
    missing = [name for name in ("avg", "std") if name not in raw]
    if missing:
        raise ValueError(f"Lexicon entry {key!r} is missing field(s): {missing}")
    word = raw.get("word", key)
    return SentimentEntry(
        word=word,
        stem=raw.get("stem") or stem(word),
        avg=[float(v) for v in raw["avg"]],
        std=[float(v) for v in raw["std"]],
        source=raw.get("dict", "custom"),
        fq=int(raw.get("fq", 0)),
    )


def _entry_to_dict(entry: SentimentEntry) -> Dict[str, Any]:
    raw = asdict(entry)
    raw["dict"] = raw.pop("source")
    return raw


def lexicon_from_dict(raw_lexicon: Dict[str, Dict[str, Any]]) -> Lexicon:
    """
    Convert a parsed JSON mapping into lexicon entries.

    Entries without a "stem" field are stemmed from their word.

    Raises
    ------
    ValueError
        If an entry lacks "avg" or "std".
    NonAsciiInputError
        If an entry without a stem has a non-ASCII word.
    """
    return {key: _entry_from_dict(key, raw) for key, raw in raw_lexicon.items()}


def load_lexicon_json(path: str) -> Lexicon:
    """
    Load a lexicon from a JSON file.

    Parameters
    ----------
    path : str
        Path to the JSON file.

    Returns
    -------
    Lexicon
        Mapping word -> SentimentEntry.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file does not hold a JSON object of entries.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Lexicon file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Lexicon file must contain a JSON object: {path}")

    return lexicon_from_dict(raw)


def save_lexicon_json(lexicon: Lexicon, path: str) -> None:
    """
    Write a lexicon to ``path`` as JSON, creating parent directories.
    """
    ensure_dir_exists(os.path.dirname(path))
    payload = {key: _entry_to_dict(entry) for key, entry in lexicon.items()}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)


def build_lexicon_from_csv(
    csv_path: str,
    config_path: str = DEFAULT_CONFIG_PATH,
) -> Lexicon:
    """
    Build a lexicon from a ratings CSV.

    Column names and the non-ASCII policy are read from the "lexicon"
    section of the config. Each word is stemmed strictly; with
    ``skip_non_ascii: true`` rows the stemmer rejects are dropped and
    counted in the log instead of failing the whole load.

    Parameters
    ----------
    csv_path : str
        Path to the ratings CSV.
    config_path : str
        Path to the YAML configuration.

    Returns
    -------
    Lexicon
        Mapping word -> SentimentEntry, tagged with source "custom".

    Raises
    ------
    FileNotFoundError
        If the CSV file cannot be found.
    ValueError
        If required columns are missing.
    NonAsciiInputError
        If a word is non-ASCII and ``skip_non_ascii`` is not set.
    """
    cfg = get_config_section("lexicon", config_path)

    word_column = cfg.get("word_column", "Word")
    valence_mean = cfg.get("valence_mean_column", "V.Mean.Sum")
    valence_std = cfg.get("valence_std_column", "V.SD.Sum")
    arousal_mean = cfg.get("arousal_mean_column", "A.Mean.Sum")
    arousal_std = cfg.get("arousal_std_column", "A.SD.Sum")
    skip_non_ascii = bool(cfg.get("skip_non_ascii", False))

    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"Lexicon CSV not found at: {csv_path}")

    df = pd.read_csv(csv_path, keep_default_na=False)

    required = [word_column, valence_mean, valence_std, arousal_mean, arousal_std]
    missing_cols = [col for col in required if col not in df.columns]
    if missing_cols:
        raise ValueError(
            f"Missing required column(s) in lexicon CSV: {missing_cols}. "
            f"Available columns: {list(df.columns)}"
        )

    lexicon: Lexicon = {}
    skipped = 0
    for record in df[required].to_dict(orient="records"):
        word = str(record[word_column])
        try:
            stemmed = stem(word)
        except NonAsciiInputError:
            if not skip_non_ascii:
                raise
            skipped += 1
            continue

        lexicon[word] = SentimentEntry(
            word=word,
            stem=stemmed,
            avg=[float(record[valence_mean]), float(record[arousal_mean])],
            std=[float(record[valence_std]), float(record[arousal_std])],
        )

    if skipped:
        logger.info("Skipped %d non-ASCII word(s) from %s", skipped, csv_path)
    logger.info("Built lexicon with %d entries from %s", len(lexicon), csv_path)
    return lexicon
