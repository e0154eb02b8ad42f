from enum import Enum

import numpy as np


class MatchingStrategy(Enum):
    FIRST = "first"
    LAST = "last"
    RANDOM = "random"


_RNG = np.random.default_rng()


def default_rng():
    return _RNG


def occurrences(haystack, pattern):
    # Advance by one character so overlapping matches are kept.
    offsets = []
    index = haystack.find(pattern)
    while index != -1:
        offsets.append(index)
        index = haystack.find(pattern, index + 1)
    return offsets


def locate(haystack, pattern, strategy=MatchingStrategy.FIRST, rng=None):
    """
    Returns the offset of the occurrence of `pattern` to rewrite, or None.
    """
    if strategy is MatchingStrategy.FIRST:
        index = haystack.find(pattern)
        return None if index == -1 else index
    if strategy is MatchingStrategy.LAST:
        index = haystack.rfind(pattern)
        return None if index == -1 else index
    if strategy is MatchingStrategy.RANDOM:
        offsets = occurrences(haystack, pattern)
        if not offsets:
            return None
        if rng is None:
            rng = default_rng()
        return offsets[int(rng.integers(len(offsets)))]
    raise ValueError(f"unknown matching strategy {strategy!r}")
