from typing import Annotated, TypedDict, Optional, Dict, List

from ....models.analysis import Recipe
from ....utils.timing import merge_timings


class ProductAnalysisState(TypedDict):
    """State for the product analysis graph workflow."""

    # Input parameters
    photo_data_uri: str
    model: Optional[str]

    # Label reading (run in parallel)
    product_name: str
    ingredients: List[str]

    # Derived from name + ingredients (run in parallel)
    estimated_nutritional_info: Optional[str]
    potential_allergens: List[str]
    dietary_notes: List[str]
    recipes: List[Recipe]

    # Performance tracking; parallel nodes write disjoint keys
    timings: Annotated[Dict[str, float], merge_timings]
