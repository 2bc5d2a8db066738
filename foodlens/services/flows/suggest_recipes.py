# suggest_recipes.py
from typing import Optional

from ...models.flows import SuggestRecipesInput, SuggestRecipesOutput
from ...prompts.food_label.recipes_prompt import build_recipes_prompt
from ..shared.gemini.gemini_client import generate_structured

FLOW_NAME = "suggestRecipes"

# Below this many ingredients an unnamed product is too vague to cook with
MIN_INGREDIENTS_WITHOUT_NAME = 2


async def suggest_recipes(inp: SuggestRecipesInput, model: Optional[str] = None) -> SuggestRecipesOutput:
    """Suggest 1-3 simple recipes featuring the product. May legitimately return none."""
    if not inp.product_name and len(inp.ingredients) < MIN_INGREDIENTS_WITHOUT_NAME:
        return SuggestRecipesOutput(recipes=[])

    out = await generate_structured(
        FLOW_NAME,
        build_recipes_prompt(inp.product_name, inp.ingredients),
        SuggestRecipesOutput,
        model=model,
        temperature=0.7,
        required=False,
    )
    return out or SuggestRecipesOutput(recipes=[])
