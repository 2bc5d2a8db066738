import time
from typing import Any, Dict

from ....models.flows import SuggestRecipesInput
from ....services.flows.suggest_recipes import suggest_recipes
from ..state.product_analysis_state import ProductAnalysisState
from ....utils.timing import calculate_ms, log_node_summary


async def propose_recipes(state: ProductAnalysisState) -> Dict[str, Any]:
    """Node that suggests recipes for the identified product."""
    t0 = time.perf_counter()
    inp = SuggestRecipesInput(
        product_name=state.get("product_name") or "",
        ingredients=state.get("ingredients") or [],
    )
    try:
        out = await suggest_recipes(inp, model=state.get("model"))
    except Exception as e:
        log_node_summary("suggest_recipes", False, calculate_ms(t0), error=str(e)[:80])
        raise

    timing_ms = calculate_ms(t0)
    log_node_summary("suggest_recipes", True, timing_ms, recipes=len(out.recipes))
    return {"recipes": list(out.recipes), "timings": {"suggest_recipes_ms": timing_ms}}
