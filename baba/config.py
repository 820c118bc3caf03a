"""
Handles locating on-device storage and loading the API configuration.
"""

from __future__ import annotations

import os
from pathlib import Path
from dotenv import load_dotenv
from baba.models import ApiConfig
from PyQt6.QtCore import QStandardPaths
from baba.storage import JsonFileStorage, SettingsStore
from baba.constants import APP_NAME, API_KEY_ENV_VAR, API_KEY_PLACEHOLDER

# storage location
CONFIG_DIR = Path(QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)) / APP_NAME
STORAGE_FILE = CONFIG_DIR / "storage.json"

def load_api_key(env_file: Path | None = None) -> str:
    """
    Returns the API bearer token from the environment, or a non-functional placeholder.
    """
    load_dotenv(dotenv_path=env_file)
    key = os.getenv(API_KEY_ENV_VAR)
    return key.strip() if key and key.strip() else API_KEY_PLACEHOLDER

def load_api_config(env_file: Path | None = None) -> ApiConfig:
    """
    Builds the chat-completion settings used by the translation service.
    """
    return ApiConfig(api_key=load_api_key(env_file))

def create_settings_store(path: Path | None = None) -> SettingsStore:
    """
    Returns a settings store backed by the default on-device storage file.
    """
    return SettingsStore(JsonFileStorage(path or STORAGE_FILE))
