"""
Stores constant values used across the application.
"""

from __future__ import annotations

from baba.models import AudienceType, Gender, Language

APP_NAME = "baba-translate"

SETTINGS_KEY = "@baba_user_settings"

API_KEY_ENV_VAR = "OPENAI_API_KEY"
API_KEY_PLACEHOLDER = "your-openai-api-key-here"

FAILED_TRANSLATION_TEXT = "Translation failed"

AUDIENCE_OPTIONS = [(audience.code, audience.label) for audience in AudienceType]
AUDIENCE_LABEL_BY_CODE = {code: label for code, label in AUDIENCE_OPTIONS}
GENDER_CODES = [gender.code for gender in Gender]
LANGUAGE_CODES = [language.code for language in Language]
