import time
from typing import Any, Dict

from ....models.flows import IdentifyIngredientsInput
from ....services.flows.identify_ingredients import identify_ingredients
from ..state.product_analysis_state import ProductAnalysisState
from ....utils.timing import calculate_ms, log_node_summary


async def read_ingredients(state: ProductAnalysisState) -> Dict[str, Any]:
    """
    Node that transcribes the ingredient list from the packaging photo.

    Args:
        state: Current graph state containing the photo

    Returns:
        Partial state update with ingredients (label order) and timing
    """
    t0 = time.perf_counter()
    try:
        out = await identify_ingredients(
            IdentifyIngredientsInput(photo_data_uri=state["photo_data_uri"]),
            model=state.get("model"),
        )
    except Exception as e:
        log_node_summary("identify_ingredients", False, calculate_ms(t0), error=str(e)[:80])
        raise

    timing_ms = calculate_ms(t0)
    preview = ", ".join(out.ingredients[:6])
    ellipsis = "…" if len(out.ingredients) > 6 else ""
    log_node_summary("identify_ingredients", True, timing_ms, ingredients=f"[{preview}{ellipsis}]")
    return {"ingredients": list(out.ingredients), "timings": {"identify_ingredients_ms": timing_ms}}
