"""Adapters - I/O implementations of ports."""

from .memory_store import InMemoryTaskStore
from .file_store import FileTaskStore
from .firebase_store import FirebaseTaskStore, TaskStoreError
from .file_preferences import FilePreferenceStore

__all__ = [
    "InMemoryTaskStore",
    "FileTaskStore",
    "FirebaseTaskStore",
    "TaskStoreError",
    "FilePreferenceStore",
]
