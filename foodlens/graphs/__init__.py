"""
Graphs Module

LangGraph workflows behind the FoodLens actions. Each graph lives in its own
subdirectory.
"""

from .product_analysis import run_product_analysis, build_product_analysis_graph, ProductAnalysisState
from .ingredient_details import run_ingredient_details, build_ingredient_details_graph, IngredientDetailsState

__all__ = [
    # Product analysis graph
    "run_product_analysis",
    "build_product_analysis_graph",
    "ProductAnalysisState",

    # Ingredient details graph
    "run_ingredient_details",
    "build_ingredient_details_graph",
    "IngredientDetailsState",
]
