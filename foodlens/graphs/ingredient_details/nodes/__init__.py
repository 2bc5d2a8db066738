from .validation_node import validate_input
from .fetch_node import fetch_details

__all__ = ["validate_input", "fetch_details"]
