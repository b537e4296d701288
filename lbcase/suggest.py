"""
"Did you mean?" suggestions for misspelled case file keys and variant names.
"""

from typing import List, Iterable

from rapidfuzz import process, fuzz

# Minimum similarity score (0-100) to consider a match
MIN_SIMILARITY_SCORE = 60

# Maximum number of suggestions to return
MAX_SUGGESTIONS = 3


def suggest_similar(
    unknown: str,
    valid_options: Iterable[str],
    min_score: int = MIN_SIMILARITY_SCORE,
    max_suggestions: int = MAX_SUGGESTIONS,
) -> List[str]:
    """
    Find the valid options closest to unknown, best match first.
    """
    options = list(valid_options)
    if not unknown or not options:
        return []

    matches = process.extract(
        unknown,
        options,
        scorer=fuzz.WRatio,
        limit=max_suggestions,
        score_cutoff=min_score,
    )

    return [ match[0] for match in matches ]


def format_suggestion(suggestions: List[str]) -> str:
    if not suggestions:
        return ""

    if len(suggestions) == 1:
        return f"Did you mean '{suggestions[0]}'?"
    quoted = [f"'{s}'" for s in suggestions]
    return f"Did you mean one of: {', '.join(quoted)}?"
