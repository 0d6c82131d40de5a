"""
server.py — ChatBot Flask server
================================
Serves the chat API and the static web view on localhost.
One conversation per server process; nothing is written to disk.
Usage:  python server.py
"""

import logging, os, threading
from flask import Flask, request, jsonify, send_from_directory
from chatbot.conversation import ResponseEngine
from chatbot.dataset import DATASET_PATH, build_dataset
from chatbot.main import setup_logging
from chatbot.transcript import BOT_LABEL, Transcript, on_send

HOST = "127.0.0.1"
PORT = 5000

log = logging.getLogger(__name__)

app = Flask(__name__, static_folder="static", static_url_path="")

# Lazy-load dataset: start server quickly, build engine on first request
engine = None
transcript = Transcript()
_lock = threading.Lock()      # replies are served one at a time


def get_engine():
    global engine
    if engine is None:
        engine = ResponseEngine(build_dataset(DATASET_PATH))
        log.info("Dataset ready (%d keys)", len(engine.store))
    return engine


# ── Routes ────────────────────────────────────────────────────────────────────

@app.route("/")
def index():
    return send_from_directory(app.static_folder, "index.html")


@app.route("/api/chat", methods=["POST"])
def chat():
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        data = {}
    message = data.get("message")
    user_msg = message.strip() if isinstance(message, str) else ""

    if not user_msg:
        return jsonify({"error": "Please type a message."}), 400

    with _lock:
        reply = on_send(get_engine(), transcript, user_msg)
        bot_msg = transcript.messages[-1]

    return jsonify({
        "reply":     reply.text,
        "source":    reply.source,
        "matched":   reply.key,
        "score":     round(reply.score, 2),
        "sender":    BOT_LABEL,
        "timestamp": bot_msg.to_dict()["timestamp"],
    })


@app.route("/api/history", methods=["GET"])
def get_history():
    """This session's transcript and the engine's recent-utterance buffer."""
    with _lock:
        return jsonify({
            "messages": [m.to_dict() for m in transcript.messages],
            "recent":   get_engine().history.recent(),
        })


if __name__ == "__main__":
    setup_logging()
    get_engine()
    print(f"\n  ChatBot is running at http://{HOST}:{PORT}\n")
    print(f"  Dataset: {os.path.abspath(DATASET_PATH)}\n")
    app.run(host=HOST, port=PORT, debug=False)
