from .product_analysis_graph import build_product_analysis_graph, run_product_analysis
from .state.product_analysis_state import ProductAnalysisState

__all__ = ["build_product_analysis_graph", "run_product_analysis", "ProductAnalysisState"]
