from dataclasses import dataclass
from typing import Optional

from ..graphs.ingredient_details import run_ingredient_details
from ..models.analysis import IngredientDetail
from ..utils.helpers import deslugify, truncate_message
from ..utils.logging import get_logger
from .shared.errors import FlowError

logger = get_logger(__name__)

RATE_LIMITED_MESSAGE = "We're experiencing high demand for this ingredient! Please try again in a few moments."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while fetching ingredient details. Please try again later."
ERROR_MESSAGE_LIMIT = 150


@dataclass(frozen=True)
class IngredientPage:
    """What the ingredient detail view renders: either details or a fetch error."""
    ingredient_name: str
    detail: Optional[IngredientDetail] = None
    fetch_error: Optional[str] = None
    rate_limited: bool = False


async def get_ingredient_details(ingredient_name: str, model: Optional[str] = None) -> IngredientDetail:
    """
    Fetch details for one ingredient. Single call, no retries.

    Raises:
        ValueError: empty ingredient name (no model call is made)
        FlowError: the Gemini call failed
    """
    return await run_ingredient_details(ingredient_name, model=model)


def describe_fetch_error(error: Exception) -> str:
    """User-facing message for a failed detail fetch."""
    if isinstance(error, FlowError) and error.is_rate_limited:
        return RATE_LIMITED_MESSAGE
    message = str(error)
    if "429" in message:
        return RATE_LIMITED_MESSAGE
    if not message:
        return UNKNOWN_ERROR_MESSAGE
    return f"An error occurred while fetching details: {truncate_message(message, ERROR_MESSAGE_LIMIT)}. Please try again later."


async def load_ingredient_page(slug: str, model: Optional[str] = None) -> IngredientPage:
    """Resolve a slug to a display name and fetch its details; never raises."""
    name = deslugify(slug)
    try:
        detail = await get_ingredient_details(name, model=model)
    except ValueError as e:
        return IngredientPage(ingredient_name=name, fetch_error=str(e))
    except Exception as e:
        logger.exception(f'Failed to fetch ingredient details for "{name}"')
        return IngredientPage(
            ingredient_name=name,
            fetch_error=describe_fetch_error(e),
            rate_limited=describe_fetch_error(e) == RATE_LIMITED_MESSAGE,
        )
    return IngredientPage(ingredient_name=name, detail=detail)
