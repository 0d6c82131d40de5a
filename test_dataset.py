import logging

import pytest

from chatbot.dataset import (DEFAULT_DATASET, DatasetMissing, DatasetStore,
                             build_dataset, load_dataset_file, parse_dataset)
from data.seed import SAMPLE_ENTRIES, seed

# --------- Store ---------

def test_put_normalises_key_and_keeps_answers_verbatim():
    store = DatasetStore()
    store.put("  How Are YOU  ", ["  Fine, THANKS  "])
    assert store.get("how are you") == ["  Fine, THANKS  "]
    assert "HOW ARE YOU" in store
    assert list(store.entries()) == [("how are you", ("  Fine, THANKS  ",))]

def test_put_with_no_answers_is_ignored():
    store = DatasetStore({"hello": ["Hi!"]})
    store.put("hello", [])
    store.put("new", [])
    assert store.get("hello") == ["Hi!"]
    assert store.get("new") is None
    assert len(store) == 1

def test_put_overwrites_existing_key():
    store = DatasetStore({"hello": ["Hi!"]})
    store.put("HELLO", ["Howdy!"])
    assert store.get("hello") == ["Howdy!"]
    assert len(store) == 1

def test_entries_keep_insertion_order():
    store = DatasetStore()
    for key in ["c", "a", "b"]:
        store.put(key, [key.upper()])
    assert [k for k, _ in store.entries()] == ["c", "a", "b"]

def test_defaults_are_not_shared_with_the_store():
    store = DatasetStore(DEFAULT_DATASET)
    store.get("hello").append("mutated")
    assert "mutated" not in DEFAULT_DATASET["hello"]

def test_store_hands_out_no_mutable_answers():
    store = DatasetStore({"hello": ["Hi!"]})
    store.get("hello").append("changed")
    (_, answers), = store.entries()
    assert answers == ("Hi!",)
    assert store.get("hello") == ["Hi!"]

# --------- Parser ---------

def test_parse_basic_file():
    store = DatasetStore()
    parse_dataset([
        "# greetings",
        "Q: Good Morning",
        "A: Morning!",
        "  A:   Rise and shine!  ",
        "",
        "Q: bye",
        "A: See you!",
    ], store)
    assert store.get("good morning") == ["Morning!", "Rise and shine!"]
    assert store.get("bye") == ["See you!"]

def test_parse_ignores_orphan_answers_and_noise():
    store = DatasetStore()
    parse_dataset(["A: nobody asked", "random text", "q: lower-case prefix", "Q: hi", "A: Hey"], store)
    assert list(store.entries()) == [("hi", ("Hey",))]

def test_parse_question_without_answers_is_dropped():
    store = DatasetStore()
    parse_dataset(["Q: lonely", "Q: hi", "A: Hey", "Q: trailing"], store)
    assert store.get("lonely") is None
    assert store.get("trailing") is None
    assert store.get("hi") == ["Hey"]

def test_parse_keeps_entries_flushed_before_a_read_error():
    def lines():
        yield "Q: first"
        yield "A: one"
        yield "Q: second"
        yield "A: two"
        raise OSError("disk went away")

    store = DatasetStore()
    with pytest.raises(OSError):
        parse_dataset(lines(), store)
    assert store.get("first") == ["one"]
    assert store.get("second") is None

# --------- Loading ---------

def test_load_missing_file_raises(tmp_path):
    with pytest.raises(DatasetMissing):
        load_dataset_file(tmp_path / "nope.txt", DatasetStore())

def test_load_mid_read_failure_keeps_parsed_entries(tmp_path):
    path = tmp_path / "broken.txt"
    # Enough valid text that the bad bytes land well past the first read.
    filler = b"".join(b"Q: filler %d\nA: x\n" % i for i in range(5000))
    path.write_bytes(b"Q: first\nA: one\n" + filler + b"Q: pending\nA: \xff\xfe\xff\n")
    store = DatasetStore()
    with pytest.raises(DatasetMissing):
        load_dataset_file(path, store)
    assert store.get("first") == ["one"]
    assert store.get("pending") is None

def test_build_dataset_mid_read_failure_keeps_defaults_and_parsed(tmp_path, caplog):
    path = tmp_path / "broken.txt"
    filler = b"".join(b"Q: filler %d\nA: x\n" % i for i in range(5000))
    path.write_bytes(b"Q: HELLO\nA: Yo!\n" + filler + b"Q: pending\nA: \xff\xfe\xff\n")
    with caplog.at_level(logging.WARNING, logger="chatbot.dataset"):
        store = build_dataset(path)
    assert store.get("hello") == ["Yo!"]
    assert store.get("how are you") == DEFAULT_DATASET["how are you"]
    assert store.get("pending") is None
    assert any(r.levelno == logging.WARNING for r in caplog.records)

def test_build_dataset_without_file_uses_defaults(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="chatbot.dataset"):
        store = build_dataset(tmp_path / "missing.txt")
    assert store.get("hello") == DEFAULT_DATASET["hello"]
    assert store.get("how are you") == DEFAULT_DATASET["how are you"]
    assert "not found" in caplog.text

def test_build_dataset_file_overrides_defaults(tmp_path):
    path = tmp_path / "chatbot_dataset.txt"
    path.write_text("Q: HELLO\nA: Yo!\nQ: weather\nA: Sunny.\n", encoding="utf-8")
    store = build_dataset(path)
    assert store.get("hello") == ["Yo!"]
    assert store.get("weather") == ["Sunny."]
    assert store.get("how are you") == DEFAULT_DATASET["how are you"]

# --------- Sample dataset ---------

def test_seeded_file_loads_every_sample(tmp_path, capsys):
    path = tmp_path / "chatbot_dataset.txt"
    count = seed(path)
    store = DatasetStore()
    load_dataset_file(path, store)
    assert len(store) == count
    for entries in SAMPLE_ENTRIES.values():
        for question, answers in entries:
            assert store.get(question) == answers
    assert "[OK]" in capsys.readouterr().out
