"""
Utilities for constructing the translation prompt sent to the chat model.
"""

from __future__ import annotations
from baba.models import AudienceType, Gender, Language, audience_code

# audience code -> context sentence; {form} is the speaker's grammatical form
AUDIENCE_CONTEXT = {
    AudienceType.MALE.code: (
        "The speaker is {form} and speaking to one male person. "
        "Use appropriate Hebrew verb conjugations and forms."
    ),
    AudienceType.FEMALE.code: (
        "The speaker is {form} and speaking to one female person. "
        "Use appropriate Hebrew verb conjugations and forms."
    ),
    AudienceType.GROUP_MALES.code: (
        "The speaker is {form} and speaking to a group of males. "
        "Use appropriate Hebrew plural masculine forms."
    ),
    AudienceType.GROUP_FEMALES.code: (
        "The speaker is {form} and speaking to a group of females. "
        "Use appropriate Hebrew plural feminine forms."
    ),
    AudienceType.MIXED_GROUP.code: (
        "The speaker is {form} and speaking to a mixed group. "
        "Use appropriate Hebrew plural forms (default to masculine plural "
        "for mixed groups as per Hebrew grammar rules)."
    ),
}

TRANSLATION_REQUIREMENTS = (
    "- Provide a natural, conversational translation",
    "- Maintain the tone and intent of the original text",
    "- Use proper grammar and conjugations for the target language",
    "- For Hebrew: Include proper nikud (vowel points) only when necessary for clarity",
    "- Keep cultural nuances and expressions when possible",
)

def build_context_instruction(
    to_language: Language,
    user_gender: Gender,
    audience_type: AudienceType | str,
) -> str:
    """
    Returns the grammatical context sentence, or an empty string when none applies.
    """
    code = audience_code(audience_type)
    if to_language is not Language.HEBREW or code == AudienceType.GENERAL.code:
        return ""
    template = AUDIENCE_CONTEXT.get(code)
    if template is None:
        return ""
    return template.format(form=user_gender.grammatical_form)

def build_translation_prompt(
    text: str,
    from_language: Language,
    to_language: Language,
    user_gender: Gender,
    audience_type: AudienceType | str,
) -> str:
    """
    Returns a prompt instructing the model to translate text with gender-aware Hebrew grammar.
    """
    context = build_context_instruction(to_language, user_gender, audience_type)
    context_block = f"Context: {context}\n\n" if context else ""
    requirements = "\n".join(TRANSLATION_REQUIREMENTS)
    return (
        "You are a professional Hebrew-English translator specializing in contextually accurate translations.\n\n"
        f"Task: Translate the following text from {from_language.label} to {to_language.label}.\n\n"
        f"{context_block}"
        f'Text to translate: "{text}"\n\n'
        f"Requirements:\n{requirements}\n\n"
        "Respond with only the translated text, no explanations or additional commentary."
    )
