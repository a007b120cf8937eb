"""Factory functions for creating configured engines"""

from ..config.settings import settings
from .dictionary_extractor import DictionaryExtractor
from .dictionary_renderer import DictionaryRenderer
from .engines import YoudaoDictEngine, YoudaoSuggestEngine
from .interfaces import RequesterInterface
from .requester import RequestsRequester
from .suggestion_extractor import SuggestionExtractor
from .suggestion_renderer import SuggestionRenderer
from .text_processor import TextProcessor


def create_dict_engine(
    requester: RequesterInterface | None = None,
) -> YoudaoDictEngine:
    """Dictionary engine with default collaborators"""
    text_processor = TextProcessor()
    return YoudaoDictEngine(
        requester=requester or RequestsRequester(),
        extractor=DictionaryExtractor(text_processor),
        renderer=DictionaryRenderer(settings.render, text_processor),
        youdao_settings=settings.youdao,
    )


def create_suggest_engine(
    requester: RequesterInterface | None = None,
    pos_tokens: list[str] | None = None,
) -> YoudaoSuggestEngine:
    """Suggestion engine; ``pos_tokens`` overrides the configured token set"""
    return YoudaoSuggestEngine(
        requester=requester or RequestsRequester(),
        extractor=SuggestionExtractor(),
        renderer=SuggestionRenderer(pos_tokens, settings.render),
        youdao_settings=settings.youdao,
    )
