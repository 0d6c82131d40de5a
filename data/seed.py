"""
seed.py — Write a sample ChatBot dataset file.
Usage:  python -m data.seed
"""

import pathlib

from chatbot.dataset import DATASET_PATH

# ── Sample entries, grouped by topic ──────────────────────────────────────────
SAMPLE_ENTRIES = {
    "General conversation": [
        ("hi", ["Hey! What's on your mind?", "Hi! How can I help you today?"]),
        ("good morning", ["Good morning! Hope your day is off to a great start."]),
        ("what is your name", ["I'm ChatBot, your friendly assistant.", "You can call me ChatBot."]),
        ("thank you", ["You're welcome!", "Happy to help!", "Anytime!"]),
        ("bye", ["Goodbye! Come back soon.", "See you later!"]),
    ],
    "Programming help": [
        ("what is python", ["Python is a high-level programming language known for its readable syntax."]),
        ("how do i learn programming", [
            "Pick one language, build small projects, and read other people's code.",
            "Start with the basics: variables, loops and functions. Then build something you care about.",
        ]),
        ("what is a function", ["A function is a named block of code that takes inputs and returns a result."]),
        ("how do i fix a bug", [
            "Reproduce it first, then narrow it down with prints or a debugger.",
            "Write a failing test for it, then make the test pass.",
        ]),
    ],
    "Movie recommendations": [
        ("recommend a movie", ["Try Inception, it's a great mind-bender.", "How about Spirited Away?"]),
        ("recommend a comedy movie", ["The Grand Budapest Hotel is a delight.", "Try Hot Fuzz!"]),
        ("recommend a sci fi movie", ["Arrival is a thoughtful pick.", "You can't go wrong with Blade Runner 2049."]),
    ],
    "Jokes and entertainment": [
        ("tell me a joke", [
            "Why do programmers prefer dark mode? Because light attracts bugs.",
            "I told my computer I needed a break, and it said: no problem, I'll go to sleep.",
        ]),
        ("tell me a fun fact", ["Honey never spoils. Archaeologists have found edible honey in ancient tombs."]),
    ],
    "Questions and answers": [
        ("what can you do", ["I can chat, help with programming questions, recommend movies and tell jokes."]),
        ("who made you", ["I was built by a small team of developers."]),
    ],
}


def seed(path=DATASET_PATH):
    path = pathlib.Path(path)
    if path.exists():
        path.unlink()
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = []
    count = 0
    for topic, entries in SAMPLE_ENTRIES.items():
        lines.append(f"# {topic}")
        for question, answers in entries:
            lines.append(f"Q: {question}")
            lines.extend(f"A: {answer}" for answer in answers)
            lines.append("")
            count += 1

    path.write_text("\n".join(lines), encoding="utf-8")
    print(f"[OK] Dataset written at {path}")
    print(f"     {count} questions in {len(SAMPLE_ENTRIES)} topics")
    return count


if __name__ == "__main__":
    seed()
