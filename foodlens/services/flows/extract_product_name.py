# extract_product_name.py
from typing import Optional

from ...models.flows import ExtractProductNameInput, ExtractProductNameOutput
from ...prompts.food_label.product_name_prompt import build_product_name_prompt
from ..shared.gemini.gemini_client import generate_structured

FLOW_NAME = "extractProductName"


async def extract_product_name(inp: ExtractProductNameInput, model: Optional[str] = None) -> ExtractProductNameOutput:
    """Read the product name from a packaging photo. An illegible name comes back as ''."""
    out = await generate_structured(
        FLOW_NAME,
        build_product_name_prompt(),
        ExtractProductNameOutput,
        image_data_uri=inp.photo_data_uri,
        model=model,
        temperature=0.1,
    )
    out.product_name = (out.product_name or "").strip()
    return out
