from dataclasses import dataclass
from typing import Any, Dict, Optional

from .state import FieldState, FieldStatus, ViewState, field_states

EMPTY_MESSAGES = {
    "product_name": "Not found",
    "ingredients": "No ingredients identified for this product.",
    "estimated_nutritional_info": "No nutritional estimate available for this product.",
    "potential_allergens": "No common allergens immediately apparent from the AI analysis of the ingredient list.",
    "dietary_notes": "No specific dietary notes generated by AI for this product.",
    "recipes": "No recipe suggestions for this product.",
}


@dataclass(frozen=True)
class FieldView:
    """One rendered result block: its content, or the 'none found' message."""
    name: str
    value: Any = None
    empty_message: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.empty_message is not None


def display_field(name: str, field: FieldState) -> Optional[FieldView]:
    """Content when populated, an explicit message when empty, nothing before the analysis ran."""
    if field.status is FieldStatus.POPULATED:
        return FieldView(name=name, value=field.value)
    if field.status is FieldStatus.EMPTY:
        return FieldView(name=name, empty_message=EMPTY_MESSAGES[name])
    return None


def build_display(state: ViewState) -> Dict[str, Optional[FieldView]]:
    return {name: display_field(name, field) for name, field in field_states(state)}
