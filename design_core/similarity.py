"""
Duplicate and near-duplicate detection for new design names.

A candidate name is checked against a snapshot of existing design names in two
independent passes: a numeric pass for short numeric design codes, and a fuzzy
pass based on case-insensitive Levenshtein distance. The result is advisory;
deciding whether to insert anyway is left to the caller.
"""

import re
from typing import Iterable, List, Optional

import Levenshtein

from design_core.models import SimilarityVerdict
from src.logger import debug

# Percentage a catalog entry must strictly exceed to count as similar
SIMILARITY_THRESHOLD = 80.0

# Lengths of the stripped candidate for which the numeric pass runs
NUMERIC_CODE_LENGTHS = (3, 4)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_design_number(text: str) -> Optional[int]:
    """
    Parse the leading base-10 integer of a design name.

    Leading whitespace and an optional sign are accepted, and parsing stops at
    the first non-digit, so "12A" gives 12 while "A12" gives None.

    Args:
        text: Design name to parse.

    Returns:
        The parsed integer, or None if the name does not start with digits.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def edit_distance(a: str, b: str) -> int:
    """
    Case-insensitive Levenshtein distance between two design names.

    Insertions, deletions and substitutions all cost 1.
    """
    return Levenshtein.distance(a.upper(), b.upper())


def similarity_score(a: str, b: str) -> float:
    """
    Similarity of two design names as a percentage.

    Computed as (max_len - distance) / max_len * 100 on the upper-cased names;
    upper-casing can change the length ("ß" becomes "SS"), so max_len is
    taken after folding. Two empty names score 0.0 rather than dividing by zero.

    Args:
        a: First design name.
        b: Second design name.

    Returns:
        float: Score between 0.0 (nothing in common) and 100.0 (same name ignoring case).
    """
    upper_a, upper_b = a.upper(), b.upper()
    max_length = max(len(upper_a), len(upper_b))
    if max_length == 0:
        return 0.0
    return (max_length - Levenshtein.distance(upper_a, upper_b)) / max_length * 100


def evaluate(
    candidate: str,
    catalog: Iterable[str],
    threshold: float = SIMILARITY_THRESHOLD,
) -> SimilarityVerdict:
    """
    Classify a candidate design name against the existing designs.

    Numeric pass: only when the stripped candidate is 3 or 4 characters long
    and starts with an integer. Every catalog entry whose leading integer is
    the same number is a conflicting match.

    Fuzzy pass: every catalog entry whose similarity score to the candidate is
    strictly greater than ``threshold`` is a similar match, unless it is the
    exact same string as the candidate. That comparison is case-sensitive, so
    an entry differing only in case is reported with a score of 100.

    Args:
        candidate: Name the user wants to add. Must not be blank; that is
            validated by the caller.
        catalog: Snapshot of existing design names. Only iterated, never modified.
        threshold: Similarity percentage an entry must exceed.

    Returns:
        SimilarityVerdict: Numeric and fuzzy matches, empty when nothing conflicts.
    """
    entries: List[str] = list(catalog)

    design_number: Optional[int] = None
    numeric_matches: List[str] = []
    if len(candidate.strip()) in NUMERIC_CODE_LENGTHS:
        design_number = parse_design_number(candidate)
    if design_number is not None:
        numeric_matches = [
            entry for entry in entries
            if parse_design_number(entry) == design_number
        ]

    similar_matches: List[str] = []
    scores = {}
    for entry in entries:
        score = similarity_score(entry, candidate)
        if score > threshold and entry != candidate:
            similar_matches.append(entry)
            scores[entry] = score

    debug(
        "Evaluated design candidate",
        candidate=candidate,
        catalog_size=len(entries),
        numeric_matches=len(numeric_matches),
        similar_matches=len(similar_matches),
    )

    return SimilarityVerdict(
        is_numeric_duplicate=bool(numeric_matches),
        conflicting_numeric_matches=numeric_matches,
        similar_matches=similar_matches,
        design_number=design_number,
        similarity_scores=scores,
    )
