#!/usr/bin/python3
"""
Main entry point for the Baba translator.

Translates one text between English and Hebrew, or reads/updates the stored
user settings.
"""

import sys
import logging
import argparse
from PyQt6.QtCore import QCoreApplication
from baba.logging_setup import init_logging
from baba.models import AudienceType, Gender, Language
from baba.constants import AUDIENCE_LABEL_BY_CODE, AUDIENCE_OPTIONS, GENDER_CODES, LANGUAGE_CODES
from baba.config import create_settings_store, load_api_config
from baba.services.translation_service import TranslationService
from baba.session import EmptyInputError, TranslationSession

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gender-aware English/Hebrew translator.")
    parser.add_argument("text", nargs="?", help="text to translate (direction is detected)")
    parser.add_argument(
        "--audience",
        default="general",
        choices=[code for code, _ in AUDIENCE_OPTIONS],
        help="who the text is addressed to: " + ", ".join(
            f"{code} ({label})" for code, label in AUDIENCE_LABEL_BY_CODE.items()
        ),
    )
    parser.add_argument("--set-gender", choices=GENDER_CODES, help="store the speaker's gender")
    parser.add_argument("--set-language", choices=LANGUAGE_CODES, help="store the preferred language")
    parser.add_argument("--show-settings", action="store_true", help="print the stored settings")
    parser.add_argument("--verbose", action="store_true", help="log to the console")
    return parser

def run(argv=None) -> int:
    args = build_parser().parse_args(argv)
    log_path = init_logging(logging.DEBUG if args.verbose else logging.INFO, console=args.verbose)
    logger.info("Baba starting (logs: %s)", log_path)

    store = create_settings_store()

    updates = []
    if args.set_gender:
        updates.append(store.set_gender(Gender.from_code(args.set_gender)))
    if args.set_language:
        updates.append(store.set_preferred_language(Language.from_code(args.set_language)))
    for result in updates:
        if not result.ok:
            print(f"Warning: settings were not saved ({result.error})", file=sys.stderr)

    if args.show_settings:
        settings = store.load()
        print(f"gender: {settings.user_gender.code}")
        print(f"preferred language: {settings.preferred_language.code}")

    if args.text is None:
        return 0

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    session = TranslationSession(store, TranslationService(load_api_config()))
    session.audience_type = AudienceType.from_code(args.audience)

    try:
        worker = session.submit(args.text)
    except EmptyInputError as exc:
        print(exc, file=sys.stderr)
        return 1

    # deliver queued worker signals while waiting
    while not worker.wait(50):
        app.processEvents()
    app.processEvents()

    result = session.last_result
    if result is None:
        return 1
    if result.is_fallback:
        print("Translation service unavailable, showing placeholder.", file=sys.stderr)
    print(result.translated_text)
    return 0

if __name__ == "__main__":
    sys.exit(run())
