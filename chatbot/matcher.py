"""
matcher.py
==========
Fuzzy bag-of-words matcher. Scores a user utterance against every
question key in the dataset and returns the best one.

Two tokens count as a full match when equal and as half a match when
they are within two edits of each other (Levenshtein distance).
"""

import re
from typing import Optional

import numpy as np

EXACT_CREDIT       = 1.0
FUZZY_CREDIT       = 0.5
FUZZY_MAX_DISTANCE = 2

_WHITESPACE = re.compile(r"\s+")


# ─── Tokenisation ─────────────────────────────────────────────────────────────
def tokenise(text: str) -> list[str]:
    """Lower-case and split on runs of whitespace, dropping empty tokens."""
    return [t for t in _WHITESPACE.split(text.lower()) if t]


# ─── Edit distance ────────────────────────────────────────────────────────────
def levenshtein(a: str, b: str) -> int:
    """
    Unit-cost Levenshtein distance.

    Keeps one DP row at a time. Deletions and substitutions are computed
    for the whole row at once; insertions chain left to right, which is a
    running minimum of  row[k] - k  shifted back by  j.
    """
    if a == b:
        return 0
    offsets = np.arange(len(b) + 1, dtype=np.int64)
    codes = np.array([ord(c) for c in b], dtype=np.int64)
    prev = offsets.copy()
    for i, ca in enumerate(a, 1):
        cost = (codes != ord(ca)).astype(np.int64)
        row = np.empty_like(prev)
        row[0] = i
        row[1:] = np.minimum(prev[1:] + 1, prev[:-1] + cost)
        prev = np.minimum.accumulate(row - offsets) + offsets
    return int(prev[-1])


# ─── Scoring ──────────────────────────────────────────────────────────────────
def match_score(user: str, key: str) -> float:
    """
    Every (user token, key token) pair contributes, so repeated tokens
    inflate the score and it can exceed 1. It is not clamped.
    """
    user_tokens = tokenise(user)
    key_tokens = tokenise(key)
    if not user_tokens or not key_tokens:
        return 0.0

    matches = 0.0
    for u in user_tokens:
        for k in key_tokens:
            if u == k:
                matches += EXACT_CREDIT
            elif levenshtein(u, k) <= FUZZY_MAX_DISTANCE:
                matches += FUZZY_CREDIT
    return matches / max(len(user_tokens), len(key_tokens))


# ─── Public class ─────────────────────────────────────────────────────────────
class FuzzyMatcher:
    """Build once, call  best_match(query)  to get (key, answers, score)."""

    def __init__(self, store):
        self.store = store

    def best_match(self, query: str) -> tuple[Optional[str], Optional[tuple[str, ...]], float]:
        # Dataset order is insertion order; strict ">" keeps the first key on ties.
        best_key: Optional[str] = None
        best_answers: Optional[tuple[str, ...]] = None
        best_score = 0.0
        for key, answers in self.store.entries():
            score = match_score(query, key)
            if score > best_score:
                best_key, best_answers, best_score = key, answers, score
        return best_key, best_answers, best_score
