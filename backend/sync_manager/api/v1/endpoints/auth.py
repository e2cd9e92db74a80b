"""
Auth API: unlock, lock and status of the UI gate.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from sync_manager.core.exceptions import AuthenticationError
from sync_manager.schemas.auth import AuthStatus, LoginRequest
from sync_manager.services.session import SyncSession, get_sync_session

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=AuthStatus)
async def login(
    request: LoginRequest,
    session: SyncSession = Depends(get_sync_session),
):
    """
    Unlock the UI.

    - **password**: the configured APP_PASSWORD
    """
    try:
        session.auth.login(request.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    return AuthStatus(is_authenticated=True)


@router.post("/logout", response_model=AuthStatus)
async def logout(session: SyncSession = Depends(get_sync_session)):
    """Lock the UI again."""
    session.auth.logout()
    return AuthStatus(is_authenticated=False)


@router.get("/status", response_model=AuthStatus)
async def auth_status(session: SyncSession = Depends(get_sync_session)):
    return AuthStatus(is_authenticated=session.auth.is_authenticated())
