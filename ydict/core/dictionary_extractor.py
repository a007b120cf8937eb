"""Extract structured results from dict.youdao.com result pages"""

from ..exceptions import NoTranslationError
from ..logging_config import get_logger
from ..models.dict_result import (
    BasicEntries,
    BilingualEntries,
    DictionaryResult,
    NetworkDefinitions,
    Phonetic,
    Sense,
    WordForm,
)
from .constants import SelectorConstants as S
from .interfaces import DictionaryExtractorInterface, DocumentNode
from .text_processor import TextProcessor

logger = get_logger(__name__)


class DictionaryExtractor(DictionaryExtractorInterface):
    """Turns a parsed result page into a ``DictionaryResult``.

    The explanation is taken from the first non-empty source in priority
    order: bilingual category blocks, network-word definitions, then basic
    entries. A page with none of them has no translation.
    """

    def __init__(self, text_processor: TextProcessor | None = None):
        self.text_processor = text_processor or TextProcessor()

    def extract(
        self, document: DocumentNode, word: str | None = None
    ) -> DictionaryResult:
        region = document.by_id(S.MAIN_REGION_ID) or document

        explanation: BilingualEntries | NetworkDefinitions | BasicEntries | None
        bilingual = self._extract_bilingual(region)
        if bilingual:
            explanation = BilingualEntries(entries=bilingual)
        elif network := self._extract_network(region):
            explanation = NetworkDefinitions(definitions=network)
        elif basic := self._extract_basic(region):
            explanation = BasicEntries(entries=basic)
        else:
            raise NoTranslationError(word)

        logger.debug(f"Extracted {explanation.kind} explanation for '{word}'")
        return DictionaryResult(
            phonetics=self._extract_phonetics(document),
            explanation=explanation,
            exam_tags=self._extract_exam_tags(document),
            word_forms=self._extract_word_forms(document),
        )

    def _text(self, node: DocumentNode | None) -> str:
        return self.text_processor.clean_text(node.text()) if node else ""

    def _first_text(self, node: DocumentNode, class_name: str) -> str:
        found = node.by_class(class_name)
        return self._text(found[0]) if found else ""

    def _extract_phonetics(self, document: DocumentNode) -> list[Phonetic]:
        """Each ``.per-phone`` holds an accent label then the transcription"""
        out: list[Phonetic] = []
        for phone in document.by_class(S.PHONE):
            pronunciation = self._first_text(phone, S.PHONETIC)
            if not pronunciation:
                continue
            children = phone.children()
            label = self._text(children[0]) if len(children) > 1 else ""
            out.append(Phonetic(label=label, pronunciation=pronunciation))
        return out

    def _extract_bilingual(self, region: DocumentNode) -> list[Sense]:
        out: list[Sense] = []
        for block in region.by_class(S.BILINGUAL_BLOCK):
            label = self._first_text(block, S.BILINGUAL_LABEL)
            text = self._first_text(block, S.BILINGUAL_TRANS) or self._first_text(
                block, S.BILINGUAL_TRANS_FALLBACK
            )
            if text:
                out.append(Sense(label=label, text=text))
        return out

    def _extract_network(self, region: DocumentNode) -> list[str]:
        out: list[str] = []
        for container in region.by_class(S.NETWORK_CONTAINER):
            for item in container.by_class(S.NETWORK_ITEM):
                text = self._text(item)
                if text:
                    out.append(text)
        return out

    def _extract_basic(self, region: DocumentNode) -> list[Sense]:
        out: list[Sense] = []
        for block in region.by_class(S.BASIC_BLOCK):
            text = self._first_text(block, S.BASIC_TRANS)
            if not text:
                continue
            out.append(Sense(label=self._first_text(block, S.BASIC_POS), text=text))
        return out

    def _extract_exam_tags(self, document: DocumentNode) -> list[str]:
        tags = (self._text(t) for t in document.by_class(S.EXAM_TAG))
        return [t for t in tags if t]

    def _extract_word_forms(self, document: DocumentNode) -> list[WordForm]:
        out: list[WordForm] = []
        for cell in document.by_class(S.WORD_FORM_CELL):
            label = self._first_text(cell, S.WORD_FORM_NAME)
            value = self._first_text(cell, S.WORD_FORM_VALUE)
            if label and value:
                out.append(WordForm(label=label, value=value))
        return out
