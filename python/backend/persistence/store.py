"""Saved-game persistence: a JSON file with a one-generation backup."""

from __future__ import annotations

import json
import logging
import os
import shutil
from pathlib import Path
from typing import Any, Protocol

from backend.engine.gameplay import GameEngine
from backend.errors import SnapshotError

logger = logging.getLogger(__name__)

SAVE_FILENAME = "tiles_game_save.json"
BACKUP_FILENAME = "tiles_game_save.backup.json"


class PersistenceStore(Protocol):
    """Durable home for one engine snapshot."""

    def save(self, engine: GameEngine) -> bool: ...

    def load(self) -> GameEngine | None: ...

    def exists(self) -> bool: ...

    def delete(self) -> bool: ...


def _write_snapshot(path: Path, engine: GameEngine) -> None:
    """Write atomically: a temporary sibling first, then ``os.replace``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(json.dumps(engine.to_snapshot(), indent=2) + "\n")
        os.replace(tmp, path)
    finally:
        if tmp.exists():
            tmp.unlink()


def _read_snapshot(path: Path) -> GameEngine:
    data: Any = json.loads(path.read_text())
    if not isinstance(data, dict):
        raise SnapshotError(f"{path} does not hold a snapshot object.")
    return GameEngine.from_snapshot(data)


class JsonFileStore:
    """Loads and saves one game snapshot as JSON.

    Before each save a readable current file is copied to *backup_path*.  The new
    snapshot is written atomically, so a failed save leaves the previous
    one in place.  A save file that cannot be read falls back to the
    backup.
    """

    def __init__(self, save_path: Path, backup_path: Path | None = None) -> None:
        self.save_path = Path(save_path)
        self.backup_path = (
            Path(backup_path)
            if backup_path is not None
            else self.save_path.with_name(BACKUP_FILENAME)
        )

    @classmethod
    def in_directory(cls, data_dir: Path) -> "JsonFileStore":
        return cls(data_dir / SAVE_FILENAME, data_dir / BACKUP_FILENAME)

    def _save_is_loadable(self) -> bool:
        """True when the current save file holds a usable snapshot."""
        if not self.save_path.exists():
            return False
        try:
            _read_snapshot(self.save_path)
        except (OSError, ValueError) as exc:
            logger.warning(
                "Not backing up unreadable save %s: %s", self.save_path, exc
            )
            return False
        return True

    # -- persistence ----------------------------------------------------------

    def save(self, engine: GameEngine) -> bool:
        if engine is None:
            return False
        try:
            if self._save_is_loadable():
                shutil.copyfile(self.save_path, self.backup_path)
            _write_snapshot(self.save_path, engine)
        except OSError as exc:
            logger.error("Error saving game to %s: %s", self.save_path, exc)
            return False
        return True

    def load(self) -> GameEngine | None:
        if not self.save_path.exists():
            return None
        try:
            return _read_snapshot(self.save_path)
        except (OSError, ValueError) as exc:
            logger.warning("Error loading game from %s: %s", self.save_path, exc)
        return self._load_backup()

    def _load_backup(self) -> GameEngine | None:
        if not self.backup_path.exists():
            return None
        try:
            return _read_snapshot(self.backup_path)
        except (OSError, ValueError) as exc:
            logger.error("Error loading backup %s: %s", self.backup_path, exc)
        return None

    def exists(self) -> bool:
        return self.save_path.exists()

    def delete(self) -> bool:
        """Remove the save and its backup.  Returns False if the save survives."""
        deleted = True
        try:
            self.save_path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Could not delete %s: %s", self.save_path, exc)
            deleted = False
        try:
            self.backup_path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Could not delete %s: %s", self.backup_path, exc)
        return deleted

    # -- export / import ------------------------------------------------------

    @staticmethod
    def export_game(engine: GameEngine, path: Path) -> bool:
        if engine is None or path is None:
            return False
        try:
            _write_snapshot(Path(path), engine)
        except OSError as exc:
            logger.error("Error exporting game to %s: %s", path, exc)
            return False
        return True

    @staticmethod
    def import_game(path: Path) -> GameEngine | None:
        if path is None:
            return None
        try:
            return _read_snapshot(Path(path))
        except (OSError, ValueError) as exc:
            logger.error("Error importing game from %s: %s", path, exc)
        return None


class MemoryStore:
    """Keeps the last snapshot in memory; same contract as :class:`JsonFileStore`."""

    def __init__(self) -> None:
        self.snapshot: dict[str, Any] | None = None

    def save(self, engine: GameEngine) -> bool:
        if engine is None:
            return False
        # deep copy via JSON
        self.snapshot = json.loads(json.dumps(engine.to_snapshot()))
        return True

    def load(self) -> GameEngine | None:
        if self.snapshot is None:
            return None
        try:
            return GameEngine.from_snapshot(self.snapshot)
        except SnapshotError as exc:
            logger.warning("Stored snapshot is unusable: %s", exc)
        return None

    def exists(self) -> bool:
        return self.snapshot is not None

    def delete(self) -> bool:
        self.snapshot = None
        return True
