# extended_info_prompt.py
"""
Prompt for nutrition estimate, allergens and dietary notes of an identified product.
"""
from typing import List


def format_ingredient_lines(ingredients: List[str]) -> str:
    return "\n".join(f"- {ing}" for ing in ingredients)


def build_extended_info_prompt(product_name: str, ingredients: List[str]) -> str:
    """
    Build the extended product info prompt.

    Args:
        product_name: Product name as read from the packaging (may be empty)
        ingredients: Ingredient list in label order

    Returns:
        Complete prompt string
    """
    return (
        "You are a helpful AI assistant providing information about food products.\n"
        f"Given the product name: {product_name or '(unknown)'}\n"
        "And its ingredients:\n"
        f"{format_ingredient_lines(ingredients)}\n\n"
        "Please provide the following information based *only* on the provided product name and ingredient list:\n\n"
        "1. estimatedNutritionalInfo: Provide an AI-estimated nutritional breakdown (e.g., calories, fat, protein, carbs). "
        "Start your response with \"AI-estimated based on ingredients:\". Emphasize that this is an approximation "
        "and official packaging should be consulted for accuracy.\n"
        "2. potentialAllergens: List any potential common allergens (like dairy, gluten, nuts, soy, eggs, fish, shellfish) "
        "you can identify from the ingredient list. Use phrases like \"Contains [allergen]\" or "
        "\"May contain traces of [allergen]\" if applicable. If none are apparent, return an empty array.\n"
        "3. dietaryNotes: Provide notes on compatibility with common diets (e.g., vegan, vegetarian, gluten-free, keto). "
        "For example, \"Appears to be vegan-friendly as no animal products are listed\". "
        "If uncertain or not applicable, return an empty array.\n\n"
        "Focus solely on the provided ingredients and product name for your analysis. "
        "Do not invent information or assume ingredients not listed.\n"
        "Return STRICT JSON ONLY with keys: estimatedNutritionalInfo, potentialAllergens, dietaryNotes"
    )
