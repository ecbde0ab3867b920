from backend.persistence.store import (
    BACKUP_FILENAME,
    SAVE_FILENAME,
    JsonFileStore,
    MemoryStore,
    PersistenceStore,
)

__all__ = [
    "BACKUP_FILENAME",
    "JsonFileStore",
    "MemoryStore",
    "PersistenceStore",
    "SAVE_FILENAME",
]
