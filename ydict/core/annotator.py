"""Part-of-speech highlighting over rendered text"""

import re
from collections.abc import Iterable

from ..models.annotated_text import AnnotatedText, StyleTag
from .constants import TextConstants


class PartOfSpeechHighlighter:
    """Marks abbreviations such as ``n.`` or ``adj。`` in a single scan.

    A token counts only when it is not glued to preceding letters and is
    closed by an ASCII period plus space or an ideographic full stop. The
    marked span is the token and its period, without the trailing space.
    """

    def __init__(self, tokens: Iterable[str]):
        self.tokens = tuple(dict.fromkeys(t for t in tokens if t))
        self.pattern = self._compile(self.tokens)

    @staticmethod
    def _compile(tokens: tuple[str, ...]) -> re.Pattern[str] | None:
        if not tokens:
            return None
        # Longest first so "vt" wins over "v"
        alternatives = "|".join(
            re.escape(t) for t in sorted(tokens, key=len, reverse=True)
        )
        fullwidth = re.escape(TextConstants.FULLWIDTH_POS_SEPARATOR)
        # Not preceded by a letter; closed by ". " (space left out) or "。"
        return re.compile(rf"(?<![^\W\d_])(?:{alternatives})(?:\.(?= )|{fullwidth})")

    def find(self, text: str) -> list[tuple[int, int]]:
        if self.pattern is None:
            return []
        return [m.span() for m in self.pattern.finditer(text)]

    def highlight(self, annotated: AnnotatedText) -> AnnotatedText:
        """Add part-of-speech annotations to ``annotated`` in place"""
        for start, end in self.find(annotated.text):
            annotated.annotate(start, end, StyleTag.PART_OF_SPEECH)
        return annotated
