"""
Non-visual state of the translate screen: input validation, direction and busy tracking.
"""

from __future__ import annotations

import logging
from typing import Optional
from baba.storage import SettingsStore
from baba.services.translation_service import TranslationService, TranslationWorker
from baba.models import AudienceType, TranslationRequest, TranslationResult, UserSettings

logger = logging.getLogger(__name__)

class EmptyInputError(ValueError):
    """Raised when the user submits empty or whitespace-only text."""

class TranslationInProgressError(RuntimeError):
    """Raised when a translation is submitted while another is still running."""

class TranslationSession:
    """
    Ties the settings store and translation service together for one screen.
    """

    def __init__(self, store: SettingsStore, service: TranslationService):
        self.store = store
        self.service = service
        self.audience_type: AudienceType | str = AudienceType.GENERAL
        self.last_result: Optional[TranslationResult] = None
        self.is_translating = False
        self.settings: UserSettings = store.load()

    def reload_settings(self) -> UserSettings:
        self.settings = self.store.load()
        return self.settings

    def prepare(self, text: str) -> TranslationRequest:
        """
        Validates input and builds a request in the detected direction.
        """
        if not text or not text.strip():
            raise EmptyInputError("Please enter some text to translate.")
        return TranslationRequest.for_text(
            text,
            user_gender=self.settings.user_gender,
            audience_type=self.audience_type,
        )

    def translate(self, text: str) -> TranslationResult:
        if self.is_translating:
            raise TranslationInProgressError("A translation is already running.")
        request = self.prepare(text)
        self.is_translating = True
        try:
            result = self.service.translate(request)
        finally:
            self.is_translating = False
        self._on_completed(result)
        return result

    def submit(self, text: str) -> TranslationWorker:
        """
        Starts a background translation; the session stays busy until the worker completes.
        """
        if self.is_translating:
            raise TranslationInProgressError("A translation is already running.")
        request = self.prepare(text)
        worker = self.service.get_worker(request)
        worker.completed.connect(self._on_completed)
        worker.finished.connect(self._on_finished)
        self.is_translating = True
        worker.start()
        return worker

    def _on_completed(self, result: TranslationResult) -> None:
        if result.is_fallback:
            logger.warning("Showing fallback translation: %s", result.error)
        self.last_result = result

    def _on_finished(self) -> None:
        self.is_translating = False

    def reset(self) -> None:
        self.last_result = None
