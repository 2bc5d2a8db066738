import time
from typing import Optional

from langgraph.graph import StateGraph, END

from .state.ingredient_details_state import IngredientDetailsState
from .nodes.validation_node import validate_input
from .nodes.fetch_node import fetch_details
from ...models.analysis import IngredientDetail
from ...utils.timing import log_pipeline_summary


def _route_after_validation(state: IngredientDetailsState) -> str:
    return "fetch" if state.get("validation_passed") else END


def build_ingredient_details_graph():
    """
    Build the ingredient details graph:
    1. validate - rejects empty names locally
    2. fetch - one Gemini call for the ingredient

    Returns:
        Compiled LangGraph workflow
    """
    workflow = StateGraph(IngredientDetailsState)

    workflow.add_node("validate", validate_input)
    workflow.add_node("fetch", fetch_details)

    workflow.set_entry_point("validate")
    workflow.add_conditional_edges("validate", _route_after_validation, {"fetch": "fetch", END: END})
    workflow.add_edge("fetch", END)

    return workflow.compile()


async def run_ingredient_details(ingredient_name: str, model: Optional[str] = None) -> IngredientDetail:
    """
    Run the ingredient details workflow.

    Raises:
        ValueError: if the ingredient name is empty (no model call is made)
        FlowError: if the Gemini call fails
    """
    initial_state: IngredientDetailsState = {
        "ingredient_name": ingredient_name,
        "model": model,
        "validation_passed": None,
        "validation_error": None,
        "detail": None,
        "timings": {},
    }

    t0 = time.perf_counter()
    graph = build_ingredient_details_graph()
    final_state = await graph.ainvoke(initial_state)

    if not final_state.get("validation_passed"):
        raise ValueError(final_state.get("validation_error") or "invalid ingredient name")

    total_ms = round((time.perf_counter() - t0) * 1000.0, 2)
    log_pipeline_summary("ingredient_details", final_state["timings"], total_ms, ["validate", "fetch"])
    return final_state["detail"]
