# ingredient_details.py
from typing import Optional

from ...models.flows import GetIngredientDetailsInput, GetIngredientDetailsOutput
from ...prompts.food_label.ingredient_details_prompt import build_ingredient_details_prompt
from ..shared.gemini.gemini_client import generate_structured

FLOW_NAME = "getIngredientDetails"


async def get_ingredient_details(
    inp: GetIngredientDetailsInput, model: Optional[str] = None
) -> GetIngredientDetailsOutput:
    """Description, usage/preparation and an optional embeddable video for one ingredient."""
    return await generate_structured(
        FLOW_NAME,
        build_ingredient_details_prompt(inp.ingredient_name),
        GetIngredientDetailsOutput,
        model=model,
    )
