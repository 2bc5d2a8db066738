import time
from typing import Any, Dict

from ..state.ingredient_details_state import IngredientDetailsState
from ....utils.timing import calculate_ms


def validate_input(state: IngredientDetailsState) -> Dict[str, Any]:
    """
    Validate the ingredient name before any model call.

    Rejections are reported in the state, not logged.
    """
    t0 = time.perf_counter()
    name = state.get("ingredient_name")

    error = None
    if not isinstance(name, str):
        error = "ingredient_name must be a string"
    elif not name.strip():
        error = "ingredient_name cannot be empty"

    return {
        "ingredient_name": name.strip() if error is None else name,
        "validation_passed": error is None,
        "validation_error": error,
        "timings": {**state["timings"], "validate_ms": calculate_ms(t0)},
    }
