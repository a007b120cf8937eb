"""Dictionary and suggestion pipelines: fetch, extract, render"""

import json
from abc import ABC, abstractmethod
from collections.abc import Callable

from ..config.settings import YoudaoSettings, settings
from ..exceptions import (
    ConfigurationError,
    NoTranslationError,
    ParseError,
    UnsupportedLanguagePairError,
    UpstreamStatusError,
)
from ..logging_config import get_logger
from ..models.task import TranslationTask
from .constants import YoudaoConstants
from .document import parse_html_document
from .interfaces import (
    DictionaryExtractorInterface,
    DictionaryRendererInterface,
    RequesterInterface,
    SuggestionExtractorInterface,
    SuggestionRendererInterface,
)
from .text_processor import TextProcessor

logger = get_logger(__name__)

Continuation = Callable[[TranslationTask], None]


def resolve_language(src: str, tgt: str) -> str:
    """Return the non-Chinese side of a Chinese-paired lookup"""
    if src == YoudaoConstants.CHINESE:
        return tgt
    if tgt == YoudaoConstants.CHINESE:
        return src
    raise UnsupportedLanguagePairError(src, tgt)


def build_dict_url(
    text: str, src: str, tgt: str, base_url: str = YoudaoConstants.DICT_URL
) -> str:
    lang = resolve_language(src, tgt)
    return (
        f"{base_url}?word={TextProcessor.hexify(text)}"
        f"&lang={TextProcessor.hexify(lang)}"
    )


def build_suggest_url(
    text: str, limit: int, base_url: str = YoudaoConstants.SUGGEST_URL
) -> str:
    return f"{base_url}?q={TextProcessor.hexify(text)}&num={limit}&doctype=json"


class _Engine(ABC):
    """Shared fetch step: store the raw body, then hand over to ``next_``"""

    def __init__(
        self,
        requester: RequesterInterface,
        youdao_settings: YoudaoSettings | None = None,
    ):
        self.requester = requester
        self.settings = youdao_settings or settings.youdao

    def _dispatch(self, task: TranslationTask, url: str, next_: Continuation) -> None:
        def done(raw: str | bytes) -> None:
            task.raw = raw
            next_(task)

        logger.debug(f"Dispatching '{task.text}' to {url}")
        self.requester.request(url, done, task.fail)

    @abstractmethod
    def parse(self, task: TranslationTask) -> None:
        """Extract and render ``task.raw`` into ``task.result``"""
        pass

    def run(self, task: TranslationTask) -> TranslationTask:
        """Fetch and parse ``task`` through the whole pipeline"""
        self.translate(task, self.parse)
        return task

    @abstractmethod
    def translate(self, task: TranslationTask, next_: Continuation) -> None:
        """Build the request URL and dispatch it"""
        pass


class YoudaoDictEngine(_Engine):
    """Looks up a headword on the dictionary result page"""

    def __init__(
        self,
        requester: RequesterInterface,
        extractor: DictionaryExtractorInterface,
        renderer: DictionaryRendererInterface,
        youdao_settings: YoudaoSettings | None = None,
    ):
        super().__init__(requester, youdao_settings)
        self.extractor = extractor
        self.renderer = renderer

    def translate(self, task: TranslationTask, next_: Continuation) -> None:
        try:
            url = build_dict_url(task.text, task.src, task.tgt, self.settings.dict_url)
        except UnsupportedLanguagePairError as e:
            task.fail(e)
            return
        self._dispatch(task, url, next_)

    def parse(self, task: TranslationTask) -> None:
        try:
            document = parse_html_document(task.raw)
            result = self.extractor.extract(document, task.text)
        except (NoTranslationError, ParseError) as e:
            task.fail(e)
            return
        task.result = self.renderer.render(result, task.text)


class YoudaoSuggestEngine(_Engine):
    """Lists near-match headwords for a query"""

    def __init__(
        self,
        requester: RequesterInterface,
        extractor: SuggestionExtractorInterface,
        renderer: SuggestionRendererInterface,
        youdao_settings: YoudaoSettings | None = None,
    ):
        super().__init__(requester, youdao_settings)
        self.extractor = extractor
        self.renderer = renderer

    def translate(self, task: TranslationTask, next_: Continuation) -> None:
        limit = task.limit if task.limit is not None else self.settings.suggest_limit
        if limit <= 0:
            task.fail(ConfigurationError("limit", limit, "must be positive"))
            return
        url = build_suggest_url(task.text, limit, self.settings.suggest_url)
        self._dispatch(task, url, next_)

    def parse(self, task: TranslationTask) -> None:
        try:
            result = self.extractor.extract(self._load_json(task.raw))
        except (UpstreamStatusError, ParseError) as e:
            task.fail(e)
            return
        task.result = self.renderer.render(result)

    @staticmethod
    def _load_json(raw: str | bytes | None) -> object:
        if raw is None:
            raise ParseError("json", "suggestion payload", "empty response body")
        try:
            return json.loads(raw)
        except ValueError as e:
            raise ParseError("json", "suggestion payload", str(e)) from e
