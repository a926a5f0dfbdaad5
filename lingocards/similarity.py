"""
Similarity scoring for pronunciation practice.

Responsibilities:
- Compare a speech-recognition transcript against a reference sentence.
- Return an integer percentage in [0, 100] (character-bigram Dice coefficient).

Non-Responsibilities:
- No tier or threshold decisions (see feedback.py).
- No logging, no I/O.

Invariant:
Given identical inputs, score() always returns the same value, and
score(a, b) == score(b, a).
"""

import math
from collections import Counter

from .normalize import normalize_sentence, bigrams


def shared_bigram_count(candidate_pairs: list[str], reference_pairs: list[str]) -> int:
    """
    Count bigrams common to both lists, each reference bigram usable once.

    Equivalent to scanning the reference list for every candidate bigram and
    removing the first match, but done with frequency counts.
    """
    overlap = Counter(candidate_pairs) & Counter(reference_pairs)
    return sum(overlap.values())


def score(candidate: str, reference: str) -> int:
    """
    Score how closely a spoken transcript matches a reference sentence.

    Both strings are normalized (lower-cased, stripped of everything except
    ASCII letters, digits and spaces). Empty input on either side scores 0;
    identical normalized strings score 100. Otherwise the score is
    floor(2 * shared bigrams / total bigrams * 100).

    Intended for sentence-length text. The reference behaviour matches
    bigrams pairwise (O(n*m)), so it is not meant for comparing documents.

    Args:
        candidate: Transcript from the speech recognizer
        reference: Example sentence being practiced

    Returns:
        Integer similarity in [0, 100]
    """
    clean_candidate = normalize_sentence(candidate)
    clean_reference = normalize_sentence(reference)

    if not clean_candidate or not clean_reference:
        return 0
    if clean_candidate == clean_reference:
        return 100

    candidate_pairs = bigrams(clean_candidate)
    reference_pairs = bigrams(clean_reference)

    union = len(candidate_pairs) + len(reference_pairs)
    if union == 0:
        return 0

    intersection = shared_bigram_count(candidate_pairs, reference_pairs)
    return math.floor((2.0 * intersection) / union * 100)


class SimilarityScorer:
    """Callable wrapper around score() for callers that inject a scorer."""

    def score(self, candidate: str, reference: str) -> int:
        return score(candidate, reference)

    __call__ = score
