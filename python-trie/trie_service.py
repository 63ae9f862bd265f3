"""
Trie API - a small HTTP front end over a shared in-memory Trie.

Run:
    python trie_service.py
Then insert with POST /api/insert {"word": "..."} and query
GET /api/search?prefix=...
"""

import logging
import os
import threading
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from trie import Trie

HOST = os.environ.get("TRIE_HOST", "0.0.0.0")
PORT = int(os.environ.get("TRIE_PORT", "8000"))
LOG_LEVEL = os.environ.get("TRIE_LOG_LEVEL", "INFO").upper()
MAX_RESULTS = int(os.environ.get("TRIE_MAX_RESULTS", "500"))

logger = logging.getLogger(__name__)

app = FastAPI(title="Trie API", version="0.1.0")

# handlers run in the threadpool; Trie itself is unsynchronized
trie_lock = threading.Lock()


def get_trie() -> Trie:
    if not hasattr(app.state, "trie"):
        app.state.trie = Trie()
    return app.state.trie


@app.get("/health")
def health():
    return {"ok": True}


@app.post("/api/insert")
def insert_word(data: Dict[str, Any]):
    word = data.get("word")
    if not isinstance(word, str) or not word.strip():
        raise HTTPException(status_code=400, detail="word is required")

    with trie_lock:
        get_trie().insert(word)
    return JSONResponse({"ok": True})


@app.get("/api/search")
def search_prefix(prefix: str = "", limit: Optional[int] = None):
    with trie_lock:
        matches = get_trie().search(prefix)

    if matches is None:
        raise HTTPException(status_code=404, detail="no match for prefix")
    if limit is not None:
        limit = max(1, min(limit, MAX_RESULTS))
        matches = matches[:limit]
    return {"prefix": prefix.lower(), "matches": matches}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s: %(message)s")
    logger.info("Trie API listening on http://%s:%s", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)
