"""
Edit-distance based name similarity.

Scores how close two exercise names are on a 0..1 scale using the classic
Levenshtein distance (unit-cost insert, delete, substitute).
"""

from rapidfuzz.distance import Levenshtein


def name_similarity(a: str, b: str) -> float:
    """
    Normalized Levenshtein similarity between two strings.

    Comparison is case-sensitive; callers lower-case both sides first.

    Args:
        a: First string
        b: Second string

    Returns:
        0.0 if either string is empty, 1.0 if identical, otherwise
        1 - distance / max(len(a), len(b))
    """
    # Empty check comes first, so ("", "") scores 0.0
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    distance = Levenshtein.distance(a, b)
    return 1.0 - distance / max(len(a), len(b))
