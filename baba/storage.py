"""
Persists user settings in a small on-device key-value store.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict
from baba.constants import SETTINGS_KEY
from baba.models import Gender, Language, StorageResult, UserSettings

logger = logging.getLogger(__name__)

class JsonFileStorage:
    """
    String key-value storage kept as one JSON object on disk.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self.path} does not hold a JSON object.")
        return data

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError:
            logger.warning("Discarding unreadable storage file %s", self.path)
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

class SettingsStore:
    """
    Reads and writes the single user-settings record.

    Mutators read the latest stored value before writing, so concurrent
    callers race and the last write wins.
    """

    def __init__(self, storage: JsonFileStorage, key: str = SETTINGS_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> UserSettings:
        """
        Returns the stored settings, or the defaults when absent or unreadable.
        """
        try:
            raw = self.storage.get_item(self.key)
            if raw is None:
                return UserSettings()
            return UserSettings.from_dict(json.loads(raw))
        except (OSError, ValueError) as exc:
            logger.warning("Error loading user settings: %s", exc)
            return UserSettings()

    def save(self, settings: UserSettings) -> StorageResult:
        try:
            self.storage.set_item(self.key, json.dumps(settings.to_dict()))
        except (OSError, TypeError, ValueError) as exc:
            logger.exception("Error saving user settings: %s", exc)
            return StorageResult(ok=False, error=str(exc))
        logger.debug("Saved user settings: %s", settings.to_dict())
        return StorageResult(ok=True)

    def set_gender(self, gender: Gender) -> StorageResult:
        current = self.load()
        current.user_gender = gender
        return self.save(current)

    def set_preferred_language(self, language: Language) -> StorageResult:
        current = self.load()
        current.preferred_language = language
        return self.save(current)
