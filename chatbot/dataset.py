"""
dataset.py — Question → answers store for the chatbot
=====================================================
Built once at startup from the built-in defaults, then overlaid with
the entries from the on-disk dataset file (if it can be read).

File format, one entry per  Q:  line followed by its  A:  lines:

    Q: how are you
    A: I'm doing well, thank you!
    A: All good, thanks for asking!

Anything else (blank lines, comments, an  A:  before any  Q: ) is ignored.
"""

import logging
import pathlib
from typing import Iterable, Iterator, Optional

log = logging.getLogger(__name__)

DATASET_PATH = pathlib.Path(__file__).resolve().parent.parent / "data" / "chatbot_dataset.txt"

DEFAULT_DATASET = {
    "hello": [
        "Hi there!",
        "Hello!",
        "Greetings!",
    ],
    "how are you": [
        "I'm doing well, thank you!",
        "I'm great, how are you?",
        "All good, thanks for asking!",
    ],
}

QUESTION_PREFIX = "Q:"
ANSWER_PREFIX   = "A:"


class DatasetMissing(OSError):
    """The dataset file could not be opened or stopped being readable."""


def _normalise_key(key: str) -> str:
    return key.strip().lower()


class DatasetStore:
    """
    Keys are stored lower-cased and trimmed; answers are kept verbatim as
    tuples so nothing handed out by  entries()  can change the dataset.
    """

    def __init__(self, entries: Optional[dict[str, list[str]]] = None):
        self._entries: dict[str, tuple[str, ...]] = {}
        for key, answers in (entries or {}).items():
            self.put(key, answers)

    def put(self, key: str, answers: Iterable[str]) -> None:
        answers = tuple(answers)
        if not answers:
            return
        self._entries[_normalise_key(key)] = answers

    def get(self, key: str) -> Optional[list[str]]:
        answers = self._entries.get(_normalise_key(key))
        return list(answers) if answers is not None else None

    def entries(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        return iter(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return _normalise_key(key) in self._entries


# ─── Loading ──────────────────────────────────────────────────────────────────

def parse_dataset(lines: Iterable[str], store: DatasetStore) -> None:
    """
    Feed  Q: / A:  lines into  store .

    Each entry is flushed as soon as the next  Q:  arrives, so if reading
    `lines` fails part-way the entries before the failure are already in
    the store; only the entry being accumulated is lost.
    """
    current_key: Optional[str] = None
    current_answers: list[str] = []

    for line in lines:
        line = line.strip()
        if line.startswith(QUESTION_PREFIX):
            if current_key is not None:
                store.put(current_key, list(current_answers))
            current_key = _normalise_key(line[len(QUESTION_PREFIX):])
            current_answers.clear()
        elif line.startswith(ANSWER_PREFIX):
            current_answers.append(line[len(ANSWER_PREFIX):].strip())

    if current_key is not None and current_answers:
        store.put(current_key, current_answers)


def load_dataset_file(path, store: DatasetStore) -> None:
    """Overlay the entries in  path  onto  store . Raises DatasetMissing."""
    path = pathlib.Path(path)
    try:
        f = open(path, encoding="utf-8")
    except OSError as exc:
        raise DatasetMissing(f"Dataset file {path} not found or unreadable") from exc

    before = len(store)
    with f:
        try:
            parse_dataset(f, store)
        except (OSError, UnicodeDecodeError) as exc:
            raise DatasetMissing(f"Dataset file {path} became unreadable while loading") from exc
    log.info("Loaded %s from %s (%d new keys)", path.name, path.parent, len(store) - before)


def build_dataset(path=DATASET_PATH) -> DatasetStore:
    """Defaults first, then the file on top. A missing file is not fatal."""
    store = DatasetStore(DEFAULT_DATASET)
    try:
        load_dataset_file(path, store)
    except DatasetMissing as exc:
        log.warning("%s. Continuing with %d entries.", exc, len(store))
    return store
