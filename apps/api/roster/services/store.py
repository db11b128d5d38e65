from __future__ import annotations

"""Whole-store accessors: every request loads everything and saves everything."""

import json
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from pydantic import ValidationError as SchemaError

from roster.core.config import get_settings
from roster.domain.models import RosterData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadOutcome:
    """Result of reading the store; ``data`` is empty when ``ok`` is False."""

    data: RosterData
    ok: bool = True
    error: Optional[str] = None


@dataclass(frozen=True)
class SaveOutcome:
    ok: bool = True
    error: Optional[str] = None


class RosterStore(Protocol):
    """Storage backend for the roster: full reads and full overwrites."""

    lock: threading.Lock

    def read(self) -> LoadOutcome: ...

    def load(self) -> RosterData: ...

    def save(self, data: RosterData) -> SaveOutcome: ...


class JsonFileStore:
    """Store backed by a single pretty-printed JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.lock = threading.Lock()

    def read(self) -> LoadOutcome:
        """Read and validate the file. A missing file is an empty store, not an error."""
        if not self.path.exists():
            return LoadOutcome(data=RosterData())
        try:
            # Bytes go straight to pydantic so undecodable content is a validation error
            data = RosterData.model_validate_json(self.path.read_bytes())
        except (OSError, SchemaError) as exc:
            logger.warning("Could not read store at %s, using an empty store: %s", self.path, exc)
            return LoadOutcome(data=RosterData(), ok=False, error=str(exc))
        return LoadOutcome(data=data)

    def load(self) -> RosterData:
        """Return the stored data, or an empty store when it cannot be read."""
        return self.read().data

    def save(self, data: RosterData) -> SaveOutcome:
        """Overwrite the file with ``data``. Failures are logged and reported, never raised."""
        payload = json.dumps(data.model_dump(), indent=2, ensure_ascii=False)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            logger.exception("Failed to save store to %s", self.path)
            return SaveOutcome(ok=False, error=str(exc))
        return SaveOutcome()


class MemoryStore:
    """In-process store holding a private copy of the last saved state."""

    def __init__(self, initial: Optional[RosterData] = None) -> None:
        self.lock = threading.Lock()
        self._data = initial.model_copy(deep=True) if initial is not None else RosterData()

    def read(self) -> LoadOutcome:
        return LoadOutcome(data=self._data.model_copy(deep=True))

    def load(self) -> RosterData:
        """Return a copy of the last saved data."""
        return self.read().data

    def save(self, data: RosterData) -> SaveOutcome:
        self._data = data.model_copy(deep=True)
        return SaveOutcome()


_store: RosterStore = JsonFileStore(get_settings().resolved_data_path())


def get_store() -> RosterStore:
    """Get the process-wide store."""
    return _store
