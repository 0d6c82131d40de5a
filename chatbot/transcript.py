"""
transcript.py — What the UI shells share
========================================
Message formatting ([HH:MM] sender: text), the session transcript and
the send step every shell goes through.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

USER_LABEL = "You"
BOT_LABEL  = "Bot"

TYPING_DELAY = 0.8        # seconds the bot "types" before its reply is shown
MAX_TRANSCRIPT = 200      # oldest messages are dropped past this

WELCOME_MESSAGE = """Welcome to the ChatBot!

I can help you with:
📚 General conversation
💻 Programming help
🎬 Movie recommendations
😄 Jokes and entertainment
❓ Questions and answers

Just type your message and press Enter or click Send!"""


def timestamp(when: Optional[datetime] = None) -> str:
    return (when or datetime.now()).strftime("%H:%M")


@dataclass
class Message:
    sender: str
    text: str
    time: datetime = field(default_factory=datetime.now)

    def render(self) -> str:
        return f"[{timestamp(self.time)}] {self.sender}: {self.text}"

    def to_dict(self) -> dict:
        return {"sender": self.sender, "text": self.text,
                "timestamp": timestamp(self.time)}


class Transcript:
    """In-memory only; gone when the session ends. Keeps the last  limit  messages."""

    def __init__(self, limit: int = MAX_TRANSCRIPT):
        self.limit = limit
        self.messages: list[Message] = []

    def add(self, sender: str, text: str) -> Message:
        msg = Message(sender, text)
        self.messages.append(msg)
        if len(self.messages) > self.limit:
            del self.messages[:-self.limit]
        return msg

    def __len__(self) -> int:
        return len(self.messages)


def on_send(engine, transcript: Transcript, text: str):
    """
    Handle one submission. Blank input is dropped without reaching the
    engine (returns None); otherwise returns the engine's Reply.
    """
    text = text.strip()
    if not text:
        return None
    transcript.add(USER_LABEL, text)
    engine.record(text)
    reply = engine.respond(text)
    transcript.add(BOT_LABEL, reply.text)
    return reply
