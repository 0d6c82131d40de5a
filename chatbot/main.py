"""
main.py – Console ChatBot
=========================
Answers from the Q/A dataset using fuzzy word matching.
Run:  python -m chatbot.main
"""

import logging
import time

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from chatbot.conversation import ResponseEngine
from chatbot.dataset import DATASET_PATH, build_dataset
from chatbot.transcript import (BOT_LABEL, TYPING_DELAY, WELCOME_MESSAGE,
                                Transcript, on_send, timestamp)

console = Console()

EXIT_WORDS = {"exit", "quit"}

SHOW_MATCH_INFO = False   # print the matched key and score under each reply


def setup_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def print_bot(text: str):
    console.print(f"[dim][{timestamp()}][/dim] [bold]{BOT_LABEL}:[/bold] {escape(text)}")


def chat(engine: ResponseEngine, transcript: Transcript, user_input: str):
    """One turn: typing pause, then the bot line. Blank input is skipped."""
    if not user_input.strip():
        return None
    with console.status("[dim]Bot is typing…[/dim]"):
        time.sleep(TYPING_DELAY)
        reply = on_send(engine, transcript, user_input)
    print_bot(reply.text)
    if SHOW_MATCH_INFO:
        console.print(f"[dim](match: {escape(reply.key or reply.source)}  score={reply.score:.2f})[/dim]")
    console.print()
    return reply


def main():
    setup_logging()
    engine = ResponseEngine(build_dataset(DATASET_PATH))
    transcript = Transcript()

    console.print(Panel(
        "[bold green]💬 ChatBot[/bold green]\n"
        "[dim]Fuzzy Q/A matching  •  type 'exit' to quit[/dim]",
        expand=False,
    ))
    print_bot(WELCOME_MESSAGE)
    console.print()

    while True:
        try:
            user_input = console.input(
                f"[dim][{timestamp()}][/dim] [bold cyan]You:[/bold cyan] "
            ).strip()
            if user_input.lower() in EXIT_WORDS:
                print_bot("Bye! 👋")
                break
            chat(engine, transcript, user_input)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break


if __name__ == "__main__":
    main()
