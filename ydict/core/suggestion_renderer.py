"""Render suggestion lists with part-of-speech highlighting"""

from collections.abc import Iterable

from ..config.settings import RenderSettings, settings
from ..models.annotated_text import AnnotatedText, StyleTag
from ..models.suggest_result import SuggestionEntry, SuggestionResult
from .annotator import PartOfSpeechHighlighter
from .constants import TextConstants
from .interfaces import SuggestionRendererInterface


class SuggestionRenderer(SuggestionRendererInterface):
    """One headword per entry, its explanation indented on the next line"""

    def __init__(
        self,
        pos_tokens: Iterable[str] | None = None,
        render_settings: RenderSettings | None = None,
    ):
        self.settings = render_settings or settings.render
        tokens = self.settings.pos_tokens if pos_tokens is None else pos_tokens
        self.highlighter = PartOfSpeechHighlighter(tokens)

    def render(self, result: SuggestionResult) -> AnnotatedText:
        out = AnnotatedText()
        for i, entry in enumerate(result.entries):
            if i:
                start, end = out.append("\n")
                out.annotate(start, end, StyleTag.LINE_HEIGHT, self.settings.entry_spacing)
            out.extend(self._render_entry(entry))
        # Highlighting runs once over the joined text
        return self.highlighter.highlight(out)

    def _render_entry(self, entry: SuggestionEntry) -> AnnotatedText:
        out = AnnotatedText()
        out.append(entry.entry, StyleTag.ENTRY)
        if entry.explain:
            start, end = out.append("\n")
            out.annotate(start, end, StyleTag.LINE_HEIGHT, self.settings.explain_spacing)
            indent = TextConstants.EXPLAIN_INDENT
            start, end = out.append(indent + entry.explain, StyleTag.PLAIN)
            out.annotate(start, end, StyleTag.WRAP_PREFIX, indent)
        return out
