from __future__ import annotations

"""Class and student endpoints under /api/classes."""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends

from roster.core.config import Settings, get_settings
from roster.domain.models import (
    ClassCreateRequest,
    ClassRenameRequest,
    MessageResponse,
    StudentAddRequest,
    StudentUpdateRequest,
)
from roster.services import roster
from roster.services.store import RosterStore, get_store

router = APIRouter(prefix="/api/classes")


@router.get("")
def list_classes(
    store: RosterStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> Dict[str, List[str]]:
    """Return every class name mapped to its ordered student list."""
    return roster.list_classes(store, strict=settings.strict_persistence)


@router.post("", response_model=MessageResponse)
def create_class(
    request: Optional[ClassCreateRequest] = None,
    store: RosterStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    request = request or ClassCreateRequest()
    message = roster.create_class(store, request.className, strict=settings.strict_persistence)
    return MessageResponse(message=message)


@router.delete("/{className}", response_model=MessageResponse)
def delete_class(
    className: str,
    store: RosterStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    message = roster.delete_class(store, className, strict=settings.strict_persistence)
    return MessageResponse(message=message)


@router.put("/{oldClassName}", response_model=MessageResponse)
def rename_class(
    oldClassName: str,
    request: Optional[ClassRenameRequest] = None,
    store: RosterStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    request = request or ClassRenameRequest()
    message = roster.rename_class(
        store, oldClassName, request.newClassName, strict=settings.strict_persistence
    )
    return MessageResponse(message=message)


@router.post("/{className}/students", response_model=MessageResponse)
def add_student(
    className: str,
    request: Optional[StudentAddRequest] = None,
    store: RosterStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    request = request or StudentAddRequest()
    message = roster.add_student(store, className, request.studentName, strict=settings.strict_persistence)
    return MessageResponse(message=message)


@router.delete("/{className}/students/{index}", response_model=MessageResponse)
def delete_student(
    className: str,
    index: str,
    store: RosterStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    # Index stays a string here: unparseable values must answer 400, not 422.
    message = roster.delete_student(store, className, index, strict=settings.strict_persistence)
    return MessageResponse(message=message)


@router.put("/{className}/students/{index}", response_model=MessageResponse)
def update_student(
    className: str,
    index: str,
    request: Optional[StudentUpdateRequest] = None,
    store: RosterStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    request = request or StudentUpdateRequest()
    message = roster.update_student(
        store, className, index, request.newStudentName, strict=settings.strict_persistence
    )
    return MessageResponse(message=message)
