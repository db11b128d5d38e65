from __future__ import annotations

"""Registration and login endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from roster.core.config import Settings, get_settings
from roster.domain.models import CredentialsRequest, MessageResponse
from roster.services import roster
from roster.services.store import RosterStore, get_store

router = APIRouter(prefix="/api")


@router.post("/register", response_model=MessageResponse)
def register(
    request: Optional[CredentialsRequest] = None,
    store: RosterStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    request = request or CredentialsRequest()
    message = roster.register(store, request.username, request.password, strict=settings.strict_persistence)
    return MessageResponse(message=message)


@router.post("/login", response_model=MessageResponse)
def login(
    request: Optional[CredentialsRequest] = None,
    store: RosterStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    """Check plaintext credentials; no session or token is issued."""
    request = request or CredentialsRequest()
    message = roster.login(store, request.username, request.password, strict=settings.strict_persistence)
    return MessageResponse(message=message)
