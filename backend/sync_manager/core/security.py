"""
Auth gate: a password-unlocked flag persisted in a small JSON file,
plus the FastAPI dependency that enforces it.
"""

import json
import logging
import secrets
from pathlib import Path

from fastapi import HTTPException, Request, status

from sync_manager.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

AUTH_STATE_KEY = "isAuthenticated"
INCORRECT_PASSWORD = "Incorrect password. Please try again."


class AuthGate:
    """Boolean session flag stored under AUTH_STATE_KEY in `state_file`."""

    def __init__(self, state_file: Path, password: str) -> None:
        self._state_file = Path(state_file).expanduser()
        self._password = password

    def _read(self) -> dict:
        try:
            data = json.loads(self._state_file.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable auth state %s: %s", self._state_file, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self._state_file.parent.mkdir(parents=True, exist_ok=True)
        self._state_file.write_text(json.dumps(data), encoding="utf-8")

    def is_authenticated(self) -> bool:
        return self._read().get(AUTH_STATE_KEY) is True

    def login(self, password: str) -> None:
        if not secrets.compare_digest(password.encode(), self._password.encode()):
            logger.warning("Rejected login attempt")
            raise AuthenticationError(INCORRECT_PASSWORD)
        data = self._read()
        data[AUTH_STATE_KEY] = True
        self._write(data)
        logger.info("Logged in")

    def logout(self) -> None:
        data = self._read()
        if data.pop(AUTH_STATE_KEY, None) is not None:
            self._write(data)
        logger.info("Logged out")


async def require_authenticated(request: Request) -> None:
    """Dependency: raise 401 unless the gate flag is set."""
    gate: AuthGate = request.app.state.sync_session.auth
    if not gate.is_authenticated():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
