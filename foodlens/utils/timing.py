import time
from typing import Dict, Iterable, Optional

from .logging import get_logger

logger = get_logger("foodlens.pipeline")


def calculate_ms(t0: float) -> float:
    """Calculate milliseconds elapsed since t0."""
    return round((time.perf_counter() - t0) * 1000.0, 2)


def merge_timings(left: Optional[Dict[str, float]], right: Optional[Dict[str, float]]) -> Dict[str, float]:
    """State reducer: parallel nodes each contribute their own timing keys."""
    return {**(left or {}), **(right or {})}


def log_node_summary(node_name: str, success: bool, timing_ms: float, **kwargs):
    """Log a standardized node execution summary."""
    status = "✅" if success else "❌"
    details = " ".join([f"{k}={v}" for k, v in kwargs.items()])
    line = f"[{node_name}] {status} {details} took {timing_ms} ms"
    if success:
        logger.info(line)
    else:
        logger.warning(line)


def log_pipeline_summary(pipeline: str, timings: Dict[str, float], total_ms: float, nodes: Iterable[str]):
    """Log a summary of the entire pipeline execution."""
    timing_details = ", ".join([
        f"{node} {timings.get(f'{node}_ms', '?')} ms"
        for node in nodes
    ])
    logger.info(f"[{pipeline}] ⏱ total {total_ms} ms ({timing_details})")
