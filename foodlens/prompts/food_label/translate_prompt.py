# translate_prompt.py
"""
Prompt for translating a single piece of display text.
"""


def build_translate_prompt(text: str, target_language: str) -> str:
    """
    Build the translation prompt.

    Args:
        text: Text to translate (one field value or one list element)
        target_language: Human-readable language name, e.g. "Spanish"

    Returns:
        Complete prompt string
    """
    return (
        f"Translate the following text into {target_language}.\n"
        "Keep the meaning, tone and any numbers or units unchanged. "
        "Do not add explanations, quotes or notes.\n"
        "Return STRICT JSON ONLY: {\"translatedText\": \"<translation>\"}\n\n"
        f"Text:\n{text}"
    )
