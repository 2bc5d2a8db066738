import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, List, Optional, Tuple

from ..models.analysis import TranslationBundle
from ..models.flows import TranslateTextInput
from .flows.translate_text import translate_text
from .languages import is_original_language, language_name
from ..utils.logging import get_logger

logger = get_logger(__name__)

SCALAR_FIELDS = ("product_name", "estimated_nutritional_info")
LIST_FIELDS = ("ingredients", "potential_allergens", "dietary_notes")


@dataclass(frozen=True)
class TranslationOutcome:
    """Bundle to display, plus whether it is actually translated."""
    bundle: TranslationBundle
    translated: bool
    error: Optional[str] = None


async def all_or_fallback(calls: List[Awaitable[Any]]) -> Tuple[List[Any], Optional[BaseException]]:
    """
    Await every call to completion, then report the first failure if any.

    Siblings of a failing call are not cancelled; their results are simply
    discarded by callers that fall back.
    """
    results = await asyncio.gather(*calls, return_exceptions=True)
    failure = next((r for r in results if isinstance(r, BaseException)), None)
    return results, failure


async def _translate_piece(text: Optional[str], target_language: str) -> Optional[str]:
    if not text or not text.strip():
        return text
    out = await translate_text(TranslateTextInput(text=text, target_language=target_language))
    translated = (out.translated_text or "").strip()
    # An empty translation keeps the original text rather than losing it
    return translated or text


async def translate_bundle(original: TranslationBundle, target_language: str) -> TranslationOutcome:
    """
    Translate every display field of `original` into `target_language`.

    One model call per scalar field and per list element, all concurrent.
    If any call fails the original bundle is returned verbatim; languages are
    never mixed field by field.
    """
    if is_original_language(target_language):
        return TranslationOutcome(bundle=original, translated=False)

    target = language_name(target_language) or target_language

    # (field, element index or None) for each call, in submission order
    slots: List[Tuple[str, Optional[int]]] = []
    calls: List[Awaitable[Optional[str]]] = []
    for field in SCALAR_FIELDS:
        slots.append((field, None))
        calls.append(_translate_piece(getattr(original, field), target))
    for field in LIST_FIELDS:
        for i, item in enumerate(getattr(original, field) or []):
            slots.append((field, i))
            calls.append(_translate_piece(item, target))

    results, failure = await all_or_fallback(calls)
    if failure is not None:
        logger.error("Error during content translation to %s", target, exc_info=failure)
        return TranslationOutcome(bundle=original, translated=False, error=str(failure))

    values = {
        field: list(getattr(original, field)) if getattr(original, field) is not None else None
        for field in LIST_FIELDS
    }
    for (field, index), text in zip(slots, results):
        if index is None:
            values[field] = text
        else:
            values[field][index] = text

    return TranslationOutcome(bundle=TranslationBundle(**values), translated=True)


async def translate_content(original: TranslationBundle, target_language: str) -> TranslationBundle:
    """Translate a bundle; on any failure the original bundle comes back."""
    outcome = await translate_bundle(original, target_language)
    return outcome.bundle
