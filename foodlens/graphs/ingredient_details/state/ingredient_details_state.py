from typing import TypedDict, Optional, Dict

from ....models.analysis import IngredientDetail


class IngredientDetailsState(TypedDict):
    """State for the ingredient details workflow"""

    # Input data
    ingredient_name: str
    model: Optional[str]

    # Validation results
    validation_passed: Optional[bool]
    validation_error: Optional[str]

    # LLM result
    detail: Optional[IngredientDetail]

    # Performance tracking
    timings: Dict[str, float]
