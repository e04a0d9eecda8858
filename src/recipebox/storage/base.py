"""Base key-value store interface for persisted app state."""

from abc import ABC, abstractmethod


class StorageError(Exception):
    """Raised by a store when a read or write cannot be completed."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class KeyValueStore(ABC):
    """Abstract text store addressed by named keys."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return store name for logging and identification."""
        pass

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Read the raw text stored under ``key``.

        Returns:
            The stored text, or None if the key is absent.

        Raises:
            StorageError: If the backend cannot be read.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store ``value`` under ``key``, replacing any previous value.

        Raises:
            StorageError: If the backend cannot be written.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``; removing an absent key is not an error."""
        pass
