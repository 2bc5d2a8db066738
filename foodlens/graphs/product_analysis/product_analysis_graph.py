import time
from typing import Optional

from langgraph.graph import StateGraph, START, END

from .state.product_analysis_state import ProductAnalysisState
from .nodes.product_name_node import read_product_name
from .nodes.ingredients_node import read_ingredients
from .nodes.extended_info_node import describe_product
from .nodes.recipes_node import propose_recipes
from ...utils.timing import log_pipeline_summary

LABEL_NODES = ["extract_name", "identify_ingredients"]
DERIVED_NODES = ["extended_info", "suggest_recipes"]


def build_product_analysis_graph():
    """
    Build the product analysis graph in two parallel phases:
    1. extract_name + identify_ingredients - both read the packaging photo
    2. extended_info + suggest_recipes - both start once phase 1 has fully
       finished, and receive its product name and ingredients

    A node that raises aborts the whole run (the error surfaces from ainvoke).

    Returns:
        Compiled LangGraph workflow
    """
    workflow = StateGraph(ProductAnalysisState)

    workflow.add_node("extract_name", read_product_name)
    workflow.add_node("identify_ingredients", read_ingredients)
    workflow.add_node("extended_info", describe_product)
    workflow.add_node("suggest_recipes", propose_recipes)

    # Phase 1 fans out from the start
    workflow.add_edge(START, "extract_name")
    workflow.add_edge(START, "identify_ingredients")

    # Phase 2 waits on both phase 1 nodes
    workflow.add_edge(LABEL_NODES, "extended_info")
    workflow.add_edge(LABEL_NODES, "suggest_recipes")

    workflow.add_edge("extended_info", END)
    workflow.add_edge("suggest_recipes", END)

    return workflow.compile()


async def run_product_analysis(photo_data_uri: str, model: Optional[str] = None) -> ProductAnalysisState:
    """
    Run the complete product analysis workflow.

    Args:
        photo_data_uri: Packaging photo as a base64 data URI
        model: Gemini model name (None = configured default)

    Returns:
        Final graph state with label fields, extended info and recipes

    Raises:
        Exception: whatever the first failing node raised
    """
    initial_state: ProductAnalysisState = {
        "photo_data_uri": photo_data_uri,
        "model": model,
        "product_name": "",
        "ingredients": [],
        "estimated_nutritional_info": None,
        "potential_allergens": [],
        "dietary_notes": [],
        "recipes": [],
        "timings": {},
    }

    t0_total = time.perf_counter()
    graph = build_product_analysis_graph()
    result = await graph.ainvoke(initial_state)
    total_ms = round((time.perf_counter() - t0_total) * 1000.0, 2)

    log_pipeline_summary("product_analysis", result.get("timings", {}), total_ms, LABEL_NODES + DERIVED_NODES)
    return result
