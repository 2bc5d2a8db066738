import time
from typing import Any, Dict

from ....models.flows import GetExtendedProductInfoInput
from ....services.flows.extended_product_info import get_extended_product_info
from ..state.product_analysis_state import ProductAnalysisState
from ....utils.timing import calculate_ms, log_node_summary


async def describe_product(state: ProductAnalysisState) -> Dict[str, Any]:
    """
    Node that estimates nutrition, allergens and dietary notes.

    Runs only after both label-reading nodes have finished.
    """
    t0 = time.perf_counter()
    inp = GetExtendedProductInfoInput(
        product_name=state.get("product_name") or "",
        ingredients=state.get("ingredients") or [],
    )
    try:
        out = await get_extended_product_info(inp, model=state.get("model"))
    except Exception as e:
        log_node_summary("extended_info", False, calculate_ms(t0), error=str(e)[:80])
        raise

    timing_ms = calculate_ms(t0)
    log_node_summary(
        "extended_info",
        True,
        timing_ms,
        allergens=len(out.potential_allergens),
        notes=len(out.dietary_notes),
    )
    return {
        "estimated_nutritional_info": out.estimated_nutritional_info,
        "potential_allergens": list(out.potential_allergens),
        "dietary_notes": list(out.dietary_notes),
        "timings": {"extended_info_ms": timing_ms},
    }
