"""
Canvas State Manager
====================

Manages one canvas per editor session, held in memory for as long as
the session is open.
"""

import logging
from typing import Optional, Dict
from datetime import datetime
import uuid

from .controller import CanvasController
from .property_editor import PropertyEditor

logger = logging.getLogger(__name__)


class CanvasSession:
    """Controller and property editor sharing one canvas."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        self.created_at = datetime.now()
        self.updated_at: Optional[datetime] = None
        self.controller = CanvasController()
        self.editor = PropertyEditor(self.controller)

    def touch(self) -> None:
        self.updated_at = datetime.now()


class StateManager:
    """Manages canvas sessions."""

    def __init__(self):
        self._sessions: Dict[str, CanvasSession] = {}
        logger.info("[STATE-MANAGER] Initialized")

    def create_session(self, session_id: Optional[str] = None) -> str:
        """Create a new session with optional ID."""
        if session_id is None:
            session_id = str(uuid.uuid4())

        if session_id not in self._sessions:
            self._sessions[session_id] = CanvasSession(session_id)
            logger.info(f"[STATE-MANAGER] Created session {session_id}")
        return session_id

    def get_session(self, session_id: str) -> Optional[CanvasSession]:
        """Get session state."""
        return self._sessions.get(session_id)

    def close_session(self, session_id: str) -> bool:
        """Discard a session and its canvas."""
        if self._sessions.pop(session_id, None) is None:
            return False
        logger.info(f"[STATE-MANAGER] Closed session {session_id}")
        return True

    def session_count(self) -> int:
        return len(self._sessions)
