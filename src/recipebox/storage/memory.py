"""In-process key-value store."""

from recipebox.storage.base import KeyValueStore


class InMemoryStore(KeyValueStore):
    """Dict-backed store, used in tests and for throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    @property
    def name(self) -> str:
        return "memory"

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)
