"""Preference storage interface."""

from typing import Protocol


class PreferenceStore(Protocol):
    """Interface for small namespaced key-value settings."""

    def get_string(self, namespace: str, key: str) -> str | None:
        """Read a value. Returns None if not set."""
        ...

    def put_string(self, namespace: str, key: str, value: str) -> None:
        """Write a value."""
        ...
