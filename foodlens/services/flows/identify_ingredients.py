# identify_ingredients.py
from typing import Optional

from ...models.flows import IdentifyIngredientsInput, IdentifyIngredientsOutput
from ...prompts.food_label.ingredients_prompt import build_ingredients_prompt
from ..shared.gemini.gemini_client import generate_structured

FLOW_NAME = "identifyIngredients"


async def identify_ingredients(inp: IdentifyIngredientsInput, model: Optional[str] = None) -> IdentifyIngredientsOutput:
    """List the ingredients printed on a packaging photo, in label order."""
    out = await generate_structured(
        FLOW_NAME,
        build_ingredients_prompt(),
        IdentifyIngredientsOutput,
        image_data_uri=inp.photo_data_uri,
        model=model,
        temperature=0.1,
    )
    # Filter blanks only; order is the label's
    out.ingredients = [str(x).strip() for x in (out.ingredients or []) if str(x).strip()]
    return out
