# foodlens/models/flows.py
"""Input/output schemas for each Gemini flow.

Output models double as the `response_schema` handed to Gemini, so their
field descriptions are part of what the model sees.
"""
from typing import List

from pydantic import Field

from .analysis import WireModel, Recipe, IngredientDetail

PHOTO_DESCRIPTION = (
    "A photo of food packaging, as a data URI that must include a MIME type and use Base64 encoding. "
    "Expected format: 'data:<mimetype>;base64,<encoded_data>'."
)


class ExtractProductNameInput(WireModel):
    photo_data_uri: str = Field(description=PHOTO_DESCRIPTION)


class ExtractProductNameOutput(WireModel):
    product_name: str = Field(default="", description="The name of the product extracted from the image.")


class IdentifyIngredientsInput(WireModel):
    photo_data_uri: str = Field(description=PHOTO_DESCRIPTION)


class IdentifyIngredientsOutput(WireModel):
    ingredients: List[str] = Field(
        default_factory=list,
        description="Ingredients identified from the image, in the order they appear on the label.",
    )


class ProductContext(WireModel):
    """Shared input of the flows that reason about an already identified product."""
    product_name: str = Field(default="", description="The name of the food product.")
    ingredients: List[str] = Field(default_factory=list, description="Ingredients found in the product.")


class GetExtendedProductInfoInput(ProductContext):
    pass


class GetExtendedProductInfoOutput(WireModel):
    estimated_nutritional_info: str = Field(
        description=(
            "An AI-estimated nutritional breakdown (calories, fat, protein, carbs) based on the ingredients. "
            "Preface with 'AI-estimated based on ingredients:' and state that it is an approximation."
        )
    )
    potential_allergens: List[str] = Field(
        default_factory=list,
        description="Potential common allergens, e.g. 'Contains dairy', 'May contain traces of nuts'.",
    )
    dietary_notes: List[str] = Field(
        default_factory=list,
        description="Notes on dietary compatibility, e.g. 'Appears to be vegan-friendly based on ingredients'.",
    )


class SuggestRecipesInput(ProductContext):
    pass


class SuggestRecipesOutput(WireModel):
    recipes: List[Recipe] = Field(
        default_factory=list,
        description="1 to 3 simple recipe suggestions; empty when no suitable recipe can be generated.",
    )


class TranslateTextInput(WireModel):
    text: str
    target_language: str = Field(description="Human-readable language name, e.g. 'Spanish'.")


class TranslateTextOutput(WireModel):
    translated_text: str = Field(default="", description="The text translated into the target language.")


class GetIngredientDetailsInput(WireModel):
    ingredient_name: str = Field(description="The name of the food ingredient.")


GetIngredientDetailsOutput = IngredientDetail
