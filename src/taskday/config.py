"""Configuration management for taskday."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TASKDAY_HOME = Path(os.environ.get("TASKDAY_HOME", Path.home() / "taskday"))
CONFIG_FILE = TASKDAY_HOME / "config" / "taskday.conf"
DATA_DIR = TASKDAY_HOME / "data"

PREFERENCES_NAMESPACE = "CALENDAR-APP"
SELECTED_DATE_KEY = "SELECTED-DATE"

STORE_BACKENDS = ("file", "memory", "firebase")


@dataclass
class Config:
    """taskday configuration."""

    store: str = "file"
    tasks_file: str = ""
    preferences_file: str = ""
    # Firebase Realtime Database settings
    firebase_database_url: str = ""
    firebase_auth: str = ""
    firebase_path: str = "tasks"
    request_timeout: float = 10.0
    # Display
    week_start_day: str = "Sunday"
    date_label_format: str = "%Y-%m"
    restore_selected_date: bool = True

    @property
    def tasks_path(self) -> Path:
        if self.tasks_file:
            return Path(self.tasks_file).expanduser()
        return DATA_DIR / "tasks.json"

    @property
    def preferences_path(self) -> Path:
        if self.preferences_file:
            return Path(self.preferences_file).expanduser()
        return DATA_DIR / "preferences.json"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def parse_config(text: str) -> Config:
    """Parse KEY=value lines into a Config."""
    config = Config()

    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "store":
                if value.lower() in STORE_BACKENDS:
                    config.store = value.lower()
                else:
                    logger.warning(f"Unknown STORE {value!r}, using {config.store!r}")
            case "tasks_file":
                config.tasks_file = value
            case "preferences_file":
                config.preferences_file = value
            case "firebase_database_url":
                config.firebase_database_url = value
            case "firebase_auth":
                config.firebase_auth = value
            case "firebase_path":
                config.firebase_path = value or config.firebase_path
            case "request_timeout":
                try:
                    config.request_timeout = float(value)
                except ValueError:
                    logger.warning(f"Invalid REQUEST_TIMEOUT {value!r}, using default")
            case "week_start_day":
                config.week_start_day = value
            case "date_label_format":
                config.date_label_format = value
            case "restore_selected_date":
                config.restore_selected_date = _parse_bool(value)

    return config


def load_config() -> Config:
    """Load configuration from taskday.conf file."""
    if not CONFIG_FILE.exists():
        return Config()
    return parse_config(CONFIG_FILE.read_text())
