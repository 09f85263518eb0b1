"""LevenshteinDistance: normalized edit distance between literal labels.

Used by the weighted literal mode: a mismatch between two LITERAL nodes costs
``levenshtein(a, b) / max(len(a), len(b))`` instead of a flat 1.0, so a
one-character typo is cheap and a full rewrite approaches 1.0.

This class satisfies the StringDistance Protocol structurally without
inheriting from it.
"""

from __future__ import annotations


def levenshtein_distance(a: str, b: str) -> int:
    """Compute the Levenshtein (edit) distance between two strings.

    Uses a space-optimized rolling-row dynamic-programming implementation.
    The shorter string is always placed on the inner loop to minimise
    the allocation size.  Strings are compared by Unicode code point.

    Args:
        a: First string.
        b: Second string.

    Returns:
        The minimum number of single-character edits (insertions, deletions,
        or substitutions) required to transform ``a`` into ``b``.
    """
    if a == b:
        return 0

    # Swap so that `b` is the shorter string (inner loop / row allocation)
    if len(a) < len(b):
        a, b = b, a

    if len(b) == 0:
        return len(a)

    prev_row = list(range(len(b) + 1))

    for i, ch_a in enumerate(a):
        curr_row = [i + 1] + [0] * len(b)
        for j, ch_b in enumerate(b):
            insert_cost = curr_row[j] + 1
            delete_cost = prev_row[j + 1] + 1
            replace_cost = prev_row[j] + (0 if ch_a == ch_b else 1)
            curr_row[j + 1] = min(insert_cost, delete_cost, replace_cost)
        prev_row = curr_row

    return prev_row[len(b)]


class LevenshteinDistance:
    """Levenshtein distance normalized by the longer label length.

    Example::

        from json_edit_distance.distances import LevenshteinDistance

        dist = LevenshteinDistance()
        dist.distance("John Smith", "Jon Smith")   # 0.1
        dist.distance("abc", "xyz")                # 1.0
    """

    def distance(self, a: str, b: str) -> float:
        """Return ``levenshtein(a, b) / max(len(a), len(b))``.

        Equal strings (including two empty strings) yield 0.0.  Differing
        strings yield a value in (0.0, 1.0].
        """
        if a == b:
            return 0.0
        return levenshtein_distance(a, b) / max(len(a), len(b))
