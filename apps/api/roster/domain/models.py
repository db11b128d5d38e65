from __future__ import annotations

"""Pydantic models for the roster store and request/response payloads."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class RosterData(BaseModel):
    """The whole persisted store: credentials plus classes of students."""

    users: Dict[str, str] = Field(default_factory=dict)
    classes: Dict[str, List[str]] = Field(default_factory=dict)


class CredentialsRequest(BaseModel):
    """Register/login payload. Fields are optional so missing ones map to 400/401."""

    username: Optional[str] = None
    password: Optional[str] = None


class ClassCreateRequest(BaseModel):
    className: Optional[str] = None


class ClassRenameRequest(BaseModel):
    newClassName: Optional[str] = None


class StudentAddRequest(BaseModel):
    studentName: Optional[str] = None


class StudentUpdateRequest(BaseModel):
    newStudentName: Optional[str] = None


class MessageResponse(BaseModel):
    """Response payload carrying a human-readable confirmation or error."""

    message: str
