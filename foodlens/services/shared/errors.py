from typing import Optional


class FlowError(Exception):
    """A Gemini flow failed: API error, empty reply or schema mismatch."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429 or "429" in self.message
