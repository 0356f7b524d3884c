"""
Parsers for the label text on RarityMon item pages.

The numbers we need are embedded in free-form labels rather than clean
fields, for example:
    Rank 12 / 500
    Rarity Score: 87.42
    Background: Blue
    3.5%

Each parser is total: a label that does not match yields a sentinel value
instead of raising, so one odd field never aborts the rest of the page.
"""

import logging
import math
import re

logger = logging.getLogger(__name__)

# Pattern: "Rank 12 / 500"
# Groups: (rank, total)
RANK_PATTERN = re.compile(r"Rank\s([0-9]+)\s/\s([0-9]+)", re.ASCII)

# Pattern: "Rarity Score: 87.42"
# Groups: (score,)
RARITY_SCORE_PATTERN = re.compile(r"Rarity\sScore:\s([0-9.]+)", re.ASCII)

# Pattern: "Background: Blue", "Eye Color: Dark-Green"
# Groups: (trait_type, trait_value)
TRAIT_PATTERN = re.compile(r"([\w\s_-]+):\s([\w\s_-]+)", re.ASCII)

MISSING_RANK = (-1, -1)
MISSING_SCORE = -1.0


def parse_rank(text: str) -> tuple[int, int]:
    """
    Parse "Rank <N> / <M>" into (rank, total).

    Returns (-1, -1) if the label does not contain a rank.
    """
    match = RANK_PATTERN.search(text.strip())
    if not match:
        return MISSING_RANK

    rank, total = match.groups()
    return int(rank), int(total)


def parse_rarity_score(text: str) -> float:
    """
    Parse "Rarity Score: <float>" into the score.

    Returns -1.0 if the label does not contain a score, or if the matched
    digits are not a valid number (e.g., "1.2.3").
    """
    match = RARITY_SCORE_PATTERN.search(text.strip())
    if not match:
        return MISSING_SCORE

    try:
        return float(match.group(1))
    except ValueError:
        return MISSING_SCORE


def parse_trait_entry(text: str) -> tuple[str, str]:
    """
    Parse "<type>: <value>" into (trait_type, trait_value).

    Returns ("", "") if the label is not a key/value pair.
    """
    match = TRAIT_PATTERN.search(text.strip())
    if not match:
        return "", ""

    trait_type, trait_value = match.groups()
    return trait_type, trait_value


def parse_percentage(text: str) -> float:
    """
    Parse a percentage label such as " 3.5% " into 3.5.

    Malformed input, including NaN, infinities and negative values, is
    coerced to 0.0 and logged, since a single odd percentage should not
    discard an otherwise complete item.
    """
    cleaned = text.replace("%", "").strip()
    try:
        value = float(cleaned)
    except ValueError:
        value = math.nan

    if not math.isfinite(value) or value < 0:
        logger.warning("Unparseable trait percentage %r, using 0.0", text)
        return 0.0
    return value
