"""
Script-based language detection for English/Hebrew input.
"""

from __future__ import annotations

import re
from baba.models import Language

# Hebrew Unicode block
HEBREW_PATTERN = re.compile(r"[\u0590-\u05FF]")

def detect_language(text: str) -> Language:
    """
    Returns Hebrew if the text contains any Hebrew code point, English otherwise.
    """
    if text and HEBREW_PATTERN.search(text):
        return Language.HEBREW
    return Language.ENGLISH

def target_language_for(language: Language) -> Language:
    return language.opposite
