"""Per-request state passed between pipeline stages"""

from dataclasses import dataclass

from ..exceptions import YdictError
from ..logging_config import get_logger
from .annotated_text import AnnotatedText

logger = get_logger(__name__)


@dataclass
class TranslationTask:
    """One lookup: its input, raw response, rendered result or failure"""

    text: str
    src: str = "en"
    tgt: str = "zh"
    limit: int | None = None
    raw: str | bytes | None = None
    result: AnnotatedText | None = None
    error: str | None = None

    def fail(self, error: str | Exception) -> None:
        """Terminate the task with a user-facing message"""
        if isinstance(error, YdictError):
            message = error.message
            if error.details:
                logger.debug(f"Failure details for '{self.text}': {error.details}")
        else:
            message = str(error)
        self.error = message
        self.result = None
        logger.warning(f"Task '{self.text}' failed: {message}")

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.result is not None
