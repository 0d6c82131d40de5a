"""
conversation.py — Response engine for the chatbot
=================================================
Keeps the recent-utterance history for a session and turns each user
message into a reply: context hook first, then the best fuzzy match
from the dataset, then a generic fallback.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np

from chatbot.matcher import FuzzyMatcher

MAX_HISTORY     = 10
MATCH_THRESHOLD = 0.5     # a match must score strictly above this

DEFAULT_RESPONSE = "I'm not sure how to respond to that."

FALLBACK_RESPONSES = [
    "I'm not quite sure about that. Could you rephrase?",
    "Interesting! Tell me more about that.",
    "I'm still learning about that topic. Could you elaborate?",
    "That's a good question! Let me think about it...",
    DEFAULT_RESPONSE,
]

ContextHook = Callable[[str, list[str]], Optional[str]]


# ── History ───────────────────────────────────────────────────────────────────

class HistoryBuffer:
    """Distinct lower-cased utterances, oldest first, at most  capacity  of them."""

    def __init__(self, capacity: int = MAX_HISTORY):
        self.capacity = capacity
        self._items: dict[str, None] = {}

    def record(self, text: str) -> None:
        # A repeat neither duplicates nor refreshes the entry.
        text = text.lower()
        if text in self._items:
            return
        self._items[text] = None
        if len(self._items) > self.capacity:
            del self._items[next(iter(self._items))]

    def is_empty(self) -> bool:
        return not self._items

    def recent(self) -> list[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, text: str) -> bool:
        return text.lower() in self._items


def no_context_reply(utterance: str, history: list[str]) -> Optional[str]:
    """Context-aware reply hook. Returns None so the dataset match is used."""
    return None


# ── Replies ───────────────────────────────────────────────────────────────────

@dataclass
class Reply:
    text: str
    source: str                   # "context" | "dataset" | "fallback"
    key: Optional[str] = None
    score: float = 0.0


class ResponseEngine:
    """
    One per session. Call  record(text)  for each accepted user message,
    then  reply(text)  (or  respond(text)  for the match details).

    Randomness comes from  rng , anything with a numpy-style
    integers(n) -> [0, n). Pass  seed  for a reproducible session.
    """

    def __init__(self, store, *, seed=None, rng=None,
                 history: Optional[HistoryBuffer] = None,
                 context_hook: ContextHook = no_context_reply):
        self.store = store
        self.matcher = FuzzyMatcher(store)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.history = history if history is not None else HistoryBuffer()
        self.context_hook = context_hook

    def record(self, text: str) -> None:
        self.history.record(text.strip())

    def respond(self, raw: str) -> Reply:
        utterance = raw.strip().lower()

        if not self.history.is_empty():
            context = self.context_hook(utterance, self.history.recent())
            if context is not None:
                return Reply(context, "context")

        key, answers, score = self.matcher.best_match(utterance)
        if score > MATCH_THRESHOLD and answers:
            return Reply(self._choose(answers), "dataset", key, score)

        return Reply(self._choose(FALLBACK_RESPONSES), "fallback", None, score)

    def reply(self, raw: str) -> str:
        return self.respond(raw).text

    def _choose(self, options: Sequence[str]) -> str:
        return options[int(self.rng.integers(len(options)))]
