# foodlens/models/analysis.py
from typing import List, Optional, Dict, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Snake_case in Python, camelCase on the wire and in model replies."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        # Absent optional fields are omitted, never sent as null
        return self.model_dump(by_alias=True, exclude_none=True)


class Recipe(WireModel):
    recipe_name: str = Field(description="The name of the suggested recipe.")
    description: str = Field(description="A brief description of the recipe.")
    ingredients_list: List[str] = Field(
        default_factory=list,
        description="Main ingredients for the recipe, including the input product/ingredients and common items.",
    )
    instructions: str = Field(description="Step-by-step instructions, one step per line.")
    estimated_prep_time: Optional[str] = Field(default=None, description='Estimated preparation time, e.g. "20 minutes".')
    difficulty: Optional[str] = Field(default=None, description='Recipe difficulty, e.g. "Easy", "Medium", "Hard".')

    @property
    def steps(self) -> List[str]:
        return [s.strip() for s in self.instructions.splitlines() if s.strip()]


class TranslationBundle(WireModel):
    """Translatable display fields of an analysis. Recipes are not part of it."""
    product_name: Optional[str] = None
    ingredients: Optional[List[str]] = None
    estimated_nutritional_info: Optional[str] = None
    potential_allergens: Optional[List[str]] = None
    dietary_notes: Optional[List[str]] = None


class AnalysisResult(WireModel):
    """Complete analysis response model"""
    product_name: Optional[str] = None
    ingredients: Optional[List[str]] = None
    estimated_nutritional_info: Optional[str] = None
    potential_allergens: Optional[List[str]] = None
    dietary_notes: Optional[List[str]] = None
    recipes: Optional[List[Recipe]] = None
    error: Optional[str] = None

    @classmethod
    def failure(cls, message: str) -> "AnalysisResult":
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_bundle(self) -> TranslationBundle:
        return TranslationBundle(
            product_name=self.product_name,
            ingredients=list(self.ingredients) if self.ingredients is not None else None,
            estimated_nutritional_info=self.estimated_nutritional_info,
            potential_allergens=list(self.potential_allergens) if self.potential_allergens is not None else None,
            dietary_notes=list(self.dietary_notes) if self.dietary_notes is not None else None,
        )


class IngredientDetail(WireModel):
    description: str = Field(description="A concise description of what the ingredient is.")
    usage_or_preparation: str = Field(
        description=(
            "How the ingredient is commonly used or prepared. For a processed ingredient that can be made "
            "at home (e.g. a sauce) give a simple method; for a raw ingredient describe its common uses."
        )
    )
    youtube_video_url: Optional[str] = Field(
        default=None,
        description=(
            "Optional full embeddable YouTube URL (https://www.youtube.com/embed/VIDEO_ID) showing how to make "
            "or use the ingredient. Omit the field when no suitable video exists."
        ),
    )

    @field_validator("youtube_video_url")
    @classmethod
    def _blank_url_is_absent(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()
