# translate_text.py
from typing import Optional

from ...models.flows import TranslateTextInput, TranslateTextOutput
from ...prompts.food_label.translate_prompt import build_translate_prompt
from ..shared.gemini.gemini_client import generate_structured

FLOW_NAME = "translateText"


async def translate_text(inp: TranslateTextInput, model: Optional[str] = None) -> TranslateTextOutput:
    return await generate_structured(
        FLOW_NAME,
        build_translate_prompt(inp.text, inp.target_language),
        TranslateTextOutput,
        model=model,
        temperature=0.0,
    )
