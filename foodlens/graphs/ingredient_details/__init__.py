from .ingredient_details_graph import build_ingredient_details_graph, run_ingredient_details
from .state.ingredient_details_state import IngredientDetailsState

__all__ = ["build_ingredient_details_graph", "run_ingredient_details", "IngredientDetailsState"]
