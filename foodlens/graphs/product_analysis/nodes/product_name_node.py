import time
from typing import Any, Dict

from ....models.flows import ExtractProductNameInput
from ....services.flows.extract_product_name import extract_product_name
from ..state.product_analysis_state import ProductAnalysisState
from ....utils.timing import calculate_ms, log_node_summary


async def read_product_name(state: ProductAnalysisState) -> Dict[str, Any]:
    """
    Node that reads the product name off the packaging photo.

    Args:
        state: Current graph state containing the photo

    Returns:
        Partial state update with product_name and its timing
    """
    t0 = time.perf_counter()
    try:
        out = await extract_product_name(
            ExtractProductNameInput(photo_data_uri=state["photo_data_uri"]),
            model=state.get("model"),
        )
    except Exception as e:
        log_node_summary("extract_name", False, calculate_ms(t0), error=str(e)[:80])
        raise

    timing_ms = calculate_ms(t0)
    log_node_summary("extract_name", True, timing_ms, name=f"'{out.product_name}'")
    return {"product_name": out.product_name, "timings": {"extract_name_ms": timing_ms}}
