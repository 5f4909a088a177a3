"""Mini README: File-backed persistence for the full user list.

Structure:
    * UserDataStorage - ``save_all`` overwrites the snapshot file with every
      user; ``load_all`` reads it back.

Persistence is whole-collection and overwrite-on-write: any previous file
is removed before the new snapshot is written. Missing or unreadable files
load as an empty list, and write faults are logged and reported through the
return value instead of raised, so a storage problem never ends a session.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from ..domain import User
from ..logging_utils import get_logger
from .schema import SnapshotRecord

LOGGER = get_logger(__name__)


class UserDataStorage:
    """Persist and retrieve users from a single JSON snapshot file."""

    def __init__(self, file_path: Union[str, Path]) -> None:
        self.file_path = Path(file_path)

    def save_all(self, users: List[User]) -> bool:
        """Replace the snapshot file with ``users``; return whether it was written."""

        payload = SnapshotRecord.from_domain(list(users)).model_dump(mode="json")
        try:
            if self.file_path.exists():
                self.file_path.unlink()
        except OSError as error:
            LOGGER.error("Error deleting existing file %s: %s", self.file_path, error)
            return False

        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with self.file_path.open("w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2)
        except OSError as error:
            LOGGER.error("Failed to save data to %s: %s", self.file_path, error)
            return False

        LOGGER.info("Saved %s users to %s", len(payload["users"]), self.file_path)
        return True

    def load_all(self) -> List[User]:
        """Return persisted users, or an empty list when nothing usable exists."""

        if not self.file_path.exists():
            LOGGER.info("Save file is missing: %s", self.file_path)
            return []

        try:
            with self.file_path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
            users = SnapshotRecord.model_validate(raw).to_domain()
        except (OSError, ValueError, ValidationError) as error:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
            LOGGER.warning("Failed to read the save file %s: %s", self.file_path, error)
            return []

        LOGGER.info("Loaded %s users from %s", len(users), self.file_path)
        return users
