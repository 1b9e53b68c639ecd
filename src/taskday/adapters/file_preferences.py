"""File-based preference storage adapter."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FilePreferenceStore:
    """
    JSON-file preference storage.

    Implements PreferenceStore protocol. The file holds one object per
    namespace: {"CALENDAR-APP": {"SELECTED-DATE": "2025-01-15"}}.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get_string(self, namespace: str, key: str) -> str | None:
        value = self._load().get(namespace, {}).get(key)
        return value if isinstance(value, str) else None

    def put_string(self, namespace: str, key: str, value: str) -> None:
        data = self._load()
        data.setdefault(namespace, {})[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2))
