import time
from typing import Any, Dict

from ....models.flows import GetIngredientDetailsInput
from ....services.flows.ingredient_details import get_ingredient_details
from ..state.ingredient_details_state import IngredientDetailsState
from ....utils.timing import calculate_ms, log_node_summary


async def fetch_details(state: IngredientDetailsState) -> Dict[str, Any]:
    """
    Fetch description, usage and optional video for the validated ingredient.

    No retry: a FlowError propagates to the caller as-is.
    """
    t0 = time.perf_counter()
    try:
        detail = await get_ingredient_details(
            GetIngredientDetailsInput(ingredient_name=state["ingredient_name"]),
            model=state.get("model"),
        )
    except Exception as e:
        log_node_summary("fetch", False, calculate_ms(t0), ingredient=f"'{state['ingredient_name']}'", error=str(e)[:80])
        raise

    timing_ms = calculate_ms(t0)
    log_node_summary(
        "fetch",
        True,
        timing_ms,
        ingredient=f"'{state['ingredient_name']}'",
        video="yes" if detail.youtube_video_url else "no",
    )
    return {"detail": detail, "timings": {**state["timings"], "fetch_ms": timing_ms}}
