"""
String distance helpers used to suggest table names.
"""

from typing import Iterable, Optional


def levenshtein_distance(s1: str, s2: str) -> int:
    """Levenshtein edit distance between two strings"""
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))

    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def closest_match(name: str, candidates: Iterable[str]) -> Optional[str]:
    """
    Return the candidate with the smallest edit distance to ``name``.

    The first candidate wins on equal distance. Returns None when there are
    no candidates.
    """
    best = None
    best_score = None
    for candidate in candidates:
        score = levenshtein_distance(candidate, name)
        if best_score is None or score < best_score:
            best, best_score = candidate, score
    return best
