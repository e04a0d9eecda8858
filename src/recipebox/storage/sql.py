"""SQLAlchemy-backed key-value store."""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recipebox.logging_config import get_logger
from recipebox.models import KeyValueEntry
from recipebox.storage.base import KeyValueStore, StorageError

logger = get_logger(__name__)


class SqlKeyValueStore(KeyValueStore):
    """Stores each key as one row of the ``kv_entries`` table."""

    def __init__(self, session: Session):
        self.session = session

    @property
    def name(self) -> str:
        return "sql"

    def get(self, key: str) -> str | None:
        try:
            entry = self.session.execute(
                select(KeyValueEntry).where(KeyValueEntry.key == key)
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read {key}: {e}", key=key) from e

        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        try:
            entry = self.session.get(KeyValueEntry, key)
            if entry:
                entry.value = value
            else:
                self.session.add(KeyValueEntry(key=key, value=value))
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageError(f"Failed to write {key}: {e}", key=key) from e

        logger.debug(f"Stored {len(value)} characters under {key}")

    def delete(self, key: str) -> None:
        try:
            entry = self.session.get(KeyValueEntry, key)
            if entry:
                self.session.delete(entry)
                self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageError(f"Failed to delete {key}: {e}", key=key) from e
