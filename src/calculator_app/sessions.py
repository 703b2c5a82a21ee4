"""
In-memory registry of calculator engines, one per browser session.

Engines live until the session is dropped, evicted by MAX_SESSIONS, or the
server process exits.
"""

import threading
import uuid
from typing import Dict, Optional, Tuple

from . import config
from .engine import CalculatorEngine

# In-memory session storage
_engines: Dict[str, CalculatorEngine] = {}
_sessions_lock = threading.Lock()


def create_session() -> Tuple[str, CalculatorEngine]:
    """
    Create a new calculator session.

    Returns:
        Session ID string and its fresh engine
    """
    session_id = str(uuid.uuid4())
    engine = CalculatorEngine()
    with _sessions_lock:
        # Oldest sessions are evicted first; dicts keep insertion order
        while _engines and len(_engines) >= config.MAX_SESSIONS:
            _engines.pop(next(iter(_engines)))
        _engines[session_id] = engine
    return session_id, engine


def get_engine(session_id: str) -> Optional[CalculatorEngine]:
    """
    Get the engine for a session.

    Args:
        session_id: Session identifier

    Returns:
        The engine or None if not found
    """
    with _sessions_lock:
        return _engines.get(session_id)


def get_or_create(session_id: Optional[str]) -> Tuple[str, CalculatorEngine]:
    """Return the engine for `session_id`, starting a new session if it is unknown."""
    if session_id:
        engine = get_engine(session_id)
        if engine is not None:
            return session_id, engine
    return create_session()


def drop_session(session_id: str) -> bool:
    """Forget a session. Returns False if it did not exist."""
    with _sessions_lock:
        return _engines.pop(session_id, None) is not None


def session_count() -> int:
    with _sessions_lock:
        return len(_engines)
