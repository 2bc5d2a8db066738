from .product_name_node import read_product_name
from .ingredients_node import read_ingredients
from .extended_info_node import describe_product
from .recipes_node import propose_recipes

__all__ = ["read_product_name", "read_ingredients", "describe_product", "propose_recipes"]
