"""
Handles requests to the chat-completion API used for translation.
"""

from __future__ import annotations

import logging
import requests
from typing import Any
from baba.models import ApiConfig, TranslationRequest, TranslationResult
from PyQt6.QtCore import QThread, pyqtSignal
from baba.constants import FAILED_TRANSLATION_TEXT
from baba.prompts import build_translation_prompt

logger = logging.getLogger(__name__)

class TranslationAPIError(Exception):
    """Raised when a live translation cannot complete and the fallback should be used."""

def fallback_translation(request: TranslationRequest) -> str:
    """
    Returns the deterministic placeholder shown when the live request fails.
    """
    return f"[{request.from_language.opposite.label} translation of: {request.text}]"

def _extract_content(data: Any) -> str:
    if not isinstance(data, dict) or not isinstance(data.get("choices"), list):
        raise TranslationAPIError("Malformed response body.")
    choices = data["choices"]
    first = choices[0] if choices else None
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if isinstance(content, str) and content.strip():
        return content.strip()
    return FAILED_TRANSLATION_TEXT

class TranslationWorker(QThread):
    """
    Runs a translation without blocking the caller's thread.
    """

    completed = pyqtSignal(object)
    finished = pyqtSignal()

    def __init__(self, service: "TranslationService", request: TranslationRequest):
        super().__init__()
        self.service = service
        self.request = request

    def run(self) -> None:
        try:
            self.completed.emit(self.service.translate(self.request))
        finally:
            self.finished.emit()

class TranslationService:
    """
    Thin client for an OpenAI-style chat-completion endpoint.
    """

    def __init__(self, config: ApiConfig):
        self.config = config

    def get_worker(self, request: TranslationRequest) -> TranslationWorker:
        """
        Returns a worker that translates the given request in the background.
        """
        return TranslationWorker(self, request)

    def build_payload(self, prompt: str) -> dict:
        return {
            "model": self.config.model_name,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
        }

    def request_completion(self, prompt: str) -> str:
        """
        Sends a single chat-completion request and returns the reply text.
        """
        if not self.config.api_key:
            raise TranslationAPIError("API key is empty.")
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }
        try:
            response = requests.post(self.config.endpoint, headers=headers, json=self.build_payload(prompt))
        except (requests.RequestException, ValueError) as exc:
            # header encoding errors surface as UnicodeEncodeError
            raise TranslationAPIError(f"Request failed: {exc}") from exc
        if not response.ok:
            raise TranslationAPIError(f"Translation API error: {response.status_code}")
        try:
            data = response.json()
        except ValueError as exc:
            raise TranslationAPIError("Response body is not valid JSON.") from exc
        return _extract_content(data)

    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translates the request, substituting a placeholder on any failure.
        """
        prompt = build_translation_prompt(
            request.text,
            request.from_language,
            request.to_language,
            request.user_gender,
            request.audience_type,
        )
        error = None
        try:
            translated = self.request_completion(prompt)
            logger.info(
                "Translated %d chars %s -> %s (audience: %s)",
                len(request.text),
                request.from_language.code,
                request.to_language.code,
                request.audience_code,
            )
        except TranslationAPIError as exc:
            logger.error("Translation error: %s", exc)
            error = str(exc)
            translated = fallback_translation(request)

        return TranslationResult(
            original_text=request.text,
            translated_text=translated,
            from_language=request.from_language,
            to_language=request.to_language,
            context_used=request.audience_code,
            error=error,
        )
