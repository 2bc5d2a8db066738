"""View state of the analyzer page.

The page is modelled as an immutable `ViewState` plus a pure
`reduce(state, event)`. Every result field carries an explicit tri-state
(`FieldStatus`): not run yet, run but empty, or populated.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Tuple, Union

from ..config.settings import Config
from ..models.analysis import AnalysisResult, TranslationBundle
from ..services.languages import language_code

NO_IMAGE_SELECTED = "Please select an image first."
TRANSLATION_FAILED = "Translation failed. Showing original content."


class Phase(str, Enum):
    IDLE = "idle"
    IMAGE_SELECTED = "image_selected"
    ANALYZING = "analyzing"
    READY = "ready"
    FAILED = "failed"
    TRANSLATING = "translating"


class FieldStatus(str, Enum):
    NOT_RUN = "not_run"
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass(frozen=True)
class FieldState:
    status: FieldStatus = FieldStatus.NOT_RUN
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> "FieldState":
        """Wrap a finished result: None, blank text and empty lists are EMPTY."""
        if value is None:
            return cls(FieldStatus.EMPTY)
        if isinstance(value, str):
            return cls(FieldStatus.POPULATED, value) if value.strip() else cls(FieldStatus.EMPTY)
        items = tuple(value)
        return cls(FieldStatus.POPULATED, items) if items else cls(FieldStatus.EMPTY)

    @property
    def has_run(self) -> bool:
        return self.status is not FieldStatus.NOT_RUN


NOT_RUN = FieldState()


@dataclass(frozen=True)
class ViewState:
    phase: Phase = Phase.IDLE
    image_data: Optional[str] = None
    error: Optional[str] = None

    product_name: FieldState = NOT_RUN
    ingredients: FieldState = NOT_RUN
    estimated_nutritional_info: FieldState = NOT_RUN
    potential_allergens: FieldState = NOT_RUN
    dietary_notes: FieldState = NOT_RUN
    recipes: FieldState = NOT_RUN

    # Original-language content of the last successful analysis
    original: Optional[TranslationBundle] = None
    language: str = Config.ORIGINAL_LANGUAGE
    pending_language: Optional[str] = None
    notification: Optional[str] = None


# --- events -----------------------------------------------------------------

@dataclass(frozen=True)
class ImageSelected:
    image_data: Optional[str]


@dataclass(frozen=True)
class SubmitRequested:
    pass


@dataclass(frozen=True)
class AnalysisCompleted:
    result: AnalysisResult


@dataclass(frozen=True)
class LanguageChanged:
    language: str


@dataclass(frozen=True)
class TranslationCompleted:
    bundle: TranslationBundle
    failed: bool = False


Event = Union[ImageSelected, SubmitRequested, AnalysisCompleted, LanguageChanged, TranslationCompleted]


def _with_bundle(state: ViewState, bundle: TranslationBundle, **changes) -> ViewState:
    return replace(
        state,
        product_name=FieldState.of(bundle.product_name),
        ingredients=FieldState.of(bundle.ingredients),
        estimated_nutritional_info=FieldState.of(bundle.estimated_nutritional_info),
        potential_allergens=FieldState.of(bundle.potential_allergens),
        dietary_notes=FieldState.of(bundle.dietary_notes),
        **changes,
    )


def _ready(state: ViewState, result: AnalysisResult) -> ViewState:
    bundle = result.to_bundle()
    return _with_bundle(
        state,
        bundle,
        phase=Phase.READY,
        error=None,
        recipes=FieldState.of(result.recipes or []),
        original=bundle,
        language=Config.ORIGINAL_LANGUAGE,
    )


def from_result(result: AnalysisResult) -> ViewState:
    """READY state showing a previously completed analysis in the original language."""
    return _ready(ViewState(), result)


def reduce(state: ViewState, event: Event) -> ViewState:
    """Return the state after `event`. Events that make no sense in the current phase are ignored."""
    if isinstance(event, ImageSelected):
        # A new image always starts over, whatever was on screen
        if not event.image_data:
            return ViewState()
        return ViewState(phase=Phase.IMAGE_SELECTED, image_data=event.image_data)

    if isinstance(event, SubmitRequested):
        if state.phase in (Phase.ANALYZING, Phase.TRANSLATING):
            return state
        if not state.image_data:
            return ViewState(phase=Phase.FAILED, error=NO_IMAGE_SELECTED)
        return ViewState(phase=Phase.ANALYZING, image_data=state.image_data)

    if isinstance(event, AnalysisCompleted):
        if state.phase is not Phase.ANALYZING:
            return state
        result = event.result
        if result.error:
            return ViewState(phase=Phase.FAILED, image_data=state.image_data, error=result.error)
        return _ready(state, result)

    if isinstance(event, LanguageChanged):
        # "English" and "en" are the same choice
        code = language_code(event.language)
        if state.phase is not Phase.READY or code is None or code == state.language:
            return state
        return replace(state, phase=Phase.TRANSLATING, pending_language=code, notification=None)

    if isinstance(event, TranslationCompleted):
        if state.phase is not Phase.TRANSLATING:
            return state
        if event.failed:
            return _with_bundle(
                state,
                state.original or TranslationBundle(),
                phase=Phase.READY,
                language=Config.ORIGINAL_LANGUAGE,
                pending_language=None,
                notification=TRANSLATION_FAILED,
            )
        return _with_bundle(
            state,
            event.bundle,
            phase=Phase.READY,
            language=state.pending_language or state.language,
            pending_language=None,
        )

    raise TypeError(f"Unknown view event: {event!r}")


def field_states(state: ViewState) -> Tuple[Tuple[str, FieldState], ...]:
    return (
        ("product_name", state.product_name),
        ("ingredients", state.ingredients),
        ("estimated_nutritional_info", state.estimated_nutritional_info),
        ("potential_allergens", state.potential_allergens),
        ("dietary_notes", state.dietary_notes),
        ("recipes", state.recipes),
    )
