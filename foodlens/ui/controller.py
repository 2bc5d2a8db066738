from typing import Awaitable, Callable, Optional

from ..models.analysis import AnalysisResult, TranslationBundle
from ..services.analysis_service import analyze_image
from ..services.languages import language_name
from ..services.translation_service import TranslationOutcome, translate_bundle
from .state import (
    AnalysisCompleted, Event, ImageSelected, LanguageChanged, Phase,
    SubmitRequested, TranslationCompleted, ViewState, from_result, reduce,
)

AnalyzeFn = Callable[[str], Awaitable[AnalysisResult]]
TranslateFn = Callable[[TranslationBundle, str], Awaitable[TranslationOutcome]]


class ViewController:
    """Drives the analyzer page: holds the current ViewState and calls the actions."""

    def __init__(self, analyze: Optional[AnalyzeFn] = None, translate: Optional[TranslateFn] = None):
        self._analyze = analyze or analyze_image
        self._translate = translate or translate_bundle
        self.state = ViewState()

    def dispatch(self, event: Event) -> ViewState:
        self.state = reduce(self.state, event)
        return self.state

    def restore(self, result: AnalysisResult) -> ViewState:
        """Show an analysis completed earlier, e.g. one posted back by the page."""
        self.state = from_result(result)
        return self.state

    def select_image(self, image_data: Optional[str]) -> ViewState:
        return self.dispatch(ImageSelected(image_data))

    async def submit(self) -> ViewState:
        state = self.dispatch(SubmitRequested())
        if state.phase is not Phase.ANALYZING:
            return state
        result = await self._analyze(state.image_data)
        return self.dispatch(AnalysisCompleted(result))

    async def change_language(self, language: str) -> ViewState:
        state = self.dispatch(LanguageChanged(language))
        if state.phase is not Phase.TRANSLATING:
            return state
        outcome = await self._translate(state.original, language_name(state.pending_language))
        return self.dispatch(TranslationCompleted(bundle=outcome.bundle, failed=outcome.error is not None))
