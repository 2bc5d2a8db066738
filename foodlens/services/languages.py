from typing import Dict, List, Optional

from ..config.settings import Config

# short code -> model-facing language name
LANGUAGES: Dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "hi": "Hindi",
    "ja": "Japanese",
}


def language_name(code: str) -> Optional[str]:
    return LANGUAGES.get((code or "").strip().lower())


def language_code(language: str) -> Optional[str]:
    """Short code for a language given as code ('es') or name ('Spanish'); None if unsupported."""
    t = (language or "").strip().lower()
    if t in LANGUAGES:
        return t
    return next((code for code, name in LANGUAGES.items() if name.lower() == t), None)


def is_original_language(target: str) -> bool:
    """True for the original language given either as code ('en') or name ('English')."""
    original = Config.ORIGINAL_LANGUAGE
    t = (target or "").strip().lower()
    return t == original or t == LANGUAGES[original].lower()


def language_options() -> List[Dict]:
    return [
        {"code": code, "name": name, "original": code == Config.ORIGINAL_LANGUAGE}
        for code, name in LANGUAGES.items()
    ]
