from .state import ViewState, Phase, FieldState, FieldStatus, from_result, reduce
from .display import build_display, display_field
from .controller import ViewController

__all__ = [
    "ViewState", "Phase", "FieldState", "FieldStatus", "from_result", "reduce",
    "build_display", "display_field", "ViewController",
]
