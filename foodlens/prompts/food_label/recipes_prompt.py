# recipes_prompt.py
"""
Prompt for recipe suggestions built around an identified product.
"""
from typing import List

from .extended_info_prompt import format_ingredient_lines

RECIPE_FIELDS = """
For each recipe, provide:
1. recipeName: The name of the recipe.
2. description: A brief, appealing description of the dish.
3. ingredientsList: A list of main ingredients needed, which can include the input product/ingredients and a few other common pantry staples.
4. instructions: Clear, step-by-step instructions. Use newlines for each step.
5. estimatedPrepTime: (Optional) A rough estimate of the preparation time.
6. difficulty: (Optional) The difficulty level (e.g., Easy, Medium).
"""


def build_recipes_prompt(product_name: str, ingredients: List[str]) -> str:
    """
    Build the recipe suggestion prompt.

    Args:
        product_name: Product name (may be empty)
        ingredients: Ingredient list in label order

    Returns:
        Complete prompt string
    """
    return (
        "You are a creative culinary AI that suggests simple and practical recipes.\n"
        f"Given the product name: {product_name or '(unknown)'}\n"
        "And its ingredients:\n"
        f"{format_ingredient_lines(ingredients)}\n\n"
        "Please suggest 1 to 3 simple recipes that could prominently feature or complement this product or its key ingredients.\n"
        + RECIPE_FIELDS +
        "\nIf the product is something not typically used in recipes (e.g., a breath mint) or if the ingredients are too "
        "generic or insufficient to base a recipe on, return an empty array for recipes. Focus on quality and relevance.\n"
        "Make the recipes easy to follow for a home cook.\n"
        "Return STRICT JSON ONLY: {\"recipes\": [...]}"
    )
