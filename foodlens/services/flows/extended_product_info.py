# extended_product_info.py
from typing import Optional

from ...models.flows import GetExtendedProductInfoInput, GetExtendedProductInfoOutput
from ...prompts.food_label.extended_info_prompt import build_extended_info_prompt
from ..shared.gemini.gemini_client import generate_structured

FLOW_NAME = "getExtendedProductInfo"

NO_NUTRITION_INFO = "Not enough information to estimate nutritional values (no ingredients provided)."
NO_ALLERGEN_INFO = "Cannot determine allergens without an ingredient list."
NO_DIETARY_INFO = "Cannot determine dietary compatibility without an ingredient list."


def placeholder_extended_info() -> GetExtendedProductInfoOutput:
    return GetExtendedProductInfoOutput(
        estimated_nutritional_info=NO_NUTRITION_INFO,
        potential_allergens=[NO_ALLERGEN_INFO],
        dietary_notes=[NO_DIETARY_INFO],
    )


async def get_extended_product_info(
    inp: GetExtendedProductInfoInput, model: Optional[str] = None
) -> GetExtendedProductInfoOutput:
    """
    Estimate nutrition, allergens and dietary notes from name + ingredients.

    Without any ingredient the model is not called and fixed placeholders are
    returned instead.
    """
    if not inp.ingredients:
        return placeholder_extended_info()

    return await generate_structured(
        FLOW_NAME,
        build_extended_info_prompt(inp.product_name, inp.ingredients),
        GetExtendedProductInfoOutput,
        model=model,
    )
