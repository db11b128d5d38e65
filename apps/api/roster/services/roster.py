from __future__ import annotations

"""Roster operations: validate, load the store, mutate, save, return a message.

Each operation runs its load/mutate/save cycle under the store's lock, so
concurrent requests in one process are serialized. Separate processes sharing
a store file still race and the last save wins.
"""

import logging
import re
from typing import Dict, List, Optional

from roster.core.errors import (
    AuthError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from roster.domain.models import RosterData
from roster.services.store import RosterStore

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_index(raw: str) -> Optional[int]:
    """Parse the leading integer of ``raw`` ("2abc" -> 2, "1.5" -> 1); None if there is none."""
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def _load(store: RosterStore, strict: bool) -> RosterData:
    outcome = store.read()
    if not outcome.ok and strict:
        raise PersistenceError("Could not read data store")
    return outcome.data


def _save(store: RosterStore, data: RosterData, strict: bool) -> None:
    outcome = store.save(data)
    if not outcome.ok and strict:
        raise PersistenceError("Could not save data store")


def _students(data: RosterData, class_name: str) -> List[str]:
    students = data.classes.get(class_name)
    if students is None:
        raise NotFoundError("Class not found")
    return students


def _index_in(students: List[str], raw_index: str) -> int:
    idx = parse_index(raw_index)
    if idx is None or idx < 0 or idx >= len(students):
        raise ValidationError("Invalid index")
    return idx


def register(store: RosterStore, username: Optional[str], password: Optional[str], strict: bool = False) -> str:
    if not username or not password:
        raise ValidationError("Missing username or password")
    with store.lock:
        data = _load(store, strict)
        if username in data.users:
            raise ConflictError("User exists")
        # Stored as given; credentials are compared verbatim on login.
        data.users[username] = password
        _save(store, data, strict)
    logger.info("Registered user %s", username)
    return "Registered successfully"


def login(store: RosterStore, username: Optional[str], password: Optional[str], strict: bool = False) -> str:
    with store.lock:
        data = _load(store, strict)
    stored = data.users.get(username or "")
    if not stored or stored != password:
        raise AuthError("Invalid credentials")
    return "Login success"


def list_classes(store: RosterStore, strict: bool = False) -> Dict[str, List[str]]:
    with store.lock:
        data = _load(store, strict)
    return data.classes


def create_class(store: RosterStore, class_name: Optional[str], strict: bool = False) -> str:
    if not class_name:
        raise ValidationError("Missing className")
    with store.lock:
        data = _load(store, strict)
        if class_name in data.classes:
            raise ConflictError("Class exists")
        data.classes[class_name] = []
        _save(store, data, strict)
    logger.info("Created class %s", class_name)
    return "Class added"


def delete_class(store: RosterStore, class_name: str, strict: bool = False) -> str:
    with store.lock:
        data = _load(store, strict)
        _students(data, class_name)
        del data.classes[class_name]
        _save(store, data, strict)
    logger.info("Deleted class %s", class_name)
    return "Class deleted"


def rename_class(
    store: RosterStore,
    old_class_name: str,
    new_class_name: Optional[str],
    strict: bool = False,
) -> str:
    if not new_class_name:
        raise ValidationError("Missing newClassName")
    with store.lock:
        data = _load(store, strict)
        students = _students(data, old_class_name)
        if new_class_name in data.classes:
            raise ConflictError("New class name already exists")
        data.classes[new_class_name] = students
        del data.classes[old_class_name]
        _save(store, data, strict)
    logger.info("Renamed class %s to %s", old_class_name, new_class_name)
    return "Class name updated"


def add_student(store: RosterStore, class_name: str, student_name: Optional[str], strict: bool = False) -> str:
    if not student_name:
        raise ValidationError("Missing studentName")
    with store.lock:
        data = _load(store, strict)
        _students(data, class_name).append(student_name)
        _save(store, data, strict)
    return "Student added"


def delete_student(store: RosterStore, class_name: str, index: str, strict: bool = False) -> str:
    with store.lock:
        data = _load(store, strict)
        students = _students(data, class_name)
        del students[_index_in(students, index)]
        _save(store, data, strict)
    return "Student deleted"


def update_student(
    store: RosterStore,
    class_name: str,
    index: str,
    new_student_name: Optional[str],
    strict: bool = False,
) -> str:
    if not new_student_name:
        raise ValidationError("Missing newStudentName")
    with store.lock:
        data = _load(store, strict)
        students = _students(data, class_name)
        students[_index_in(students, index)] = new_student_name
        _save(store, data, strict)
    return "Student name updated"
