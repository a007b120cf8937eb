"""Render dictionary results into annotated display text"""

from ..config.settings import RenderSettings, settings
from ..models.annotated_text import AnnotatedText, StyleTag
from ..models.dict_result import (
    BasicEntries,
    BilingualEntries,
    DictionaryResult,
    NetworkDefinitions,
    Phonetic,
    WordForm,
)
from .constants import TextConstants
from .interfaces import DictionaryRendererInterface
from .text_processor import TextProcessor


class DictionaryRenderer(DictionaryRendererInterface):
    """Lays out phonetics, explanation, word forms and exam tags.

    Sections appear in that order, separated by a blank line; absent
    sections are skipped. The output depends only on its inputs.
    """

    def __init__(
        self,
        render_settings: RenderSettings | None = None,
        text_processor: TextProcessor | None = None,
    ):
        self.settings = render_settings or settings.render
        self.text_processor = text_processor or TextProcessor()

    def render(self, result: DictionaryResult, text: str) -> AnnotatedText:
        sections: list[AnnotatedText] = []
        if result.phonetics:
            sections.append(
                self._render_phonetics(text, result.phonetics, result.is_bilingual)
            )
        sections.append(self._render_explanation(result.explanation))
        if result.word_forms:
            sections.append(self._render_word_forms(result.word_forms))
        if result.exam_tags:
            sections.append(self._render_exam_tags(result.exam_tags))
        return AnnotatedText.join(TextConstants.SECTION_SEPARATOR, sections)

    def _render_phonetics(
        self, text: str, phonetics: list[Phonetic], first_only: bool
    ) -> AnnotatedText:
        out = AnnotatedText()
        out.append(text + TextConstants.PHONETIC_SEPARATOR)
        start = len(out)
        if first_only:
            out.append(phonetics[0].pronunciation, StyleTag.PHONETIC)
        else:
            for i, phonetic in enumerate(phonetics):
                if i:
                    out.append(TextConstants.PHONETIC_SEPARATOR)
                if phonetic.label:
                    out.append(phonetic.label, StyleTag.LABEL)
                    out.append(" ")
                out.append(phonetic.pronunciation, StyleTag.PHONETIC)
        out.annotate(start, len(out), StyleTag.HEIGHT, self.settings.phonetic_height)
        return out

    def _render_explanation(
        self, explanation: NetworkDefinitions | BilingualEntries | BasicEntries
    ) -> AnnotatedText:
        out = AnnotatedText()
        if isinstance(explanation, NetworkDefinitions):
            out.append("\n".join(explanation.definitions))
        elif isinstance(explanation, BilingualEntries):
            for i, sense in enumerate(explanation.entries):
                if i:
                    out.append("\n\n")
                out.append(sense.label, StyleTag.HEADWORD)
                out.append("\n" + TextConstants.BILINGUAL_INDENT + sense.text)
        else:
            for i, sense in enumerate(explanation.entries):
                if i:
                    out.append("\n")
                if sense.label:
                    out.append(sense.label, StyleTag.ENTRY)
                    out.append(" " + sense.text)
                else:
                    out.append(self.text_processor.normalize_brackets(sense.text))
        return out

    def _render_word_forms(self, forms: list[WordForm]) -> AnnotatedText:
        """Pairs are tab separated until a line reaches the width threshold

        Width is measured in display columns, so CJK labels count double.
        """
        out = AnnotatedText()
        for i, form in enumerate(forms):
            out.append(form.label, StyleTag.LABEL)
            out.append("  " + form.value)
            if i == len(forms) - 1:
                break
            line = out.text[out.text.rfind("\n") + 1 :]
            if self.text_processor.display_width(line) >= self.settings.word_forms_width:
                out.append("\n")
            else:
                out.append("\t")
        return out

    def _render_exam_tags(self, tags: list[str]) -> AnnotatedText:
        out = AnnotatedText()
        start, end = out.append(
            TextConstants.EXAM_TAG_SEPARATOR.join(tags), StyleTag.PHONETIC
        )
        out.annotate(start, end, StyleTag.HEIGHT, self.settings.exam_height)
        return out
