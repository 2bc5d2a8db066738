from .extract_product_name import extract_product_name
from .identify_ingredients import identify_ingredients
from .extended_product_info import get_extended_product_info
from .suggest_recipes import suggest_recipes
from .translate_text import translate_text
from .ingredient_details import get_ingredient_details

__all__ = [
    "extract_product_name",
    "identify_ingredients",
    "get_extended_product_info",
    "suggest_recipes",
    "translate_text",
    "get_ingredient_details",
]
