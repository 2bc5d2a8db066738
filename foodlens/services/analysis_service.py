from typing import Optional

from ..graphs.product_analysis import run_product_analysis
from ..models.analysis import AnalysisResult
from ..utils.helpers import truncate_message
from ..utils.logging import get_logger

logger = get_logger(__name__)

NO_IMAGE_ERROR = "No image data provided."
ERROR_MESSAGE_LIMIT = 100


async def analyze_image(photo_data_uri: Optional[str], model: Optional[str] = None) -> AnalysisResult:
    """
    Analyze one packaging photo end to end.

    Never raises: a missing image or any failure inside the workflow comes
    back as an `AnalysisResult` carrying only `error`.
    """
    if not photo_data_uri:
        return AnalysisResult.failure(NO_IMAGE_ERROR)

    try:
        res = await run_product_analysis(photo_data_uri, model=model)
    except Exception as e:
        logger.exception("Error during image analysis")
        return AnalysisResult.failure(f"Analysis failed: {truncate_message(str(e), ERROR_MESSAGE_LIMIT)}")

    return AnalysisResult(
        product_name=res.get("product_name", ""),
        ingredients=list(res.get("ingredients") or []),
        estimated_nutritional_info=res.get("estimated_nutritional_info"),
        potential_allergens=list(res.get("potential_allergens") or []),
        dietary_notes=list(res.get("dietary_notes") or []),
        recipes=list(res.get("recipes") or []),
    )
