"""Interface definitions for core components"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from ..models.annotated_text import AnnotatedText
from ..models.dict_result import DictionaryResult
from ..models.suggest_result import SuggestionResult

DoneCallback = Callable[[Any], None]
FailCallback = Callable[[Any], None]


class RequesterInterface(ABC):
    """Dispatches one request and reports back through exactly one callback"""

    @abstractmethod
    def request(self, url: str, done: DoneCallback, fail: FailCallback) -> None:
        """Fetch ``url``; call ``done(raw_body)`` or ``fail(error)`` once"""
        pass


class DocumentNode(ABC):
    """Query capability over a parsed HTML tree"""

    @abstractmethod
    def by_class(self, name: str) -> list[DocumentNode]:
        """Descendants carrying CSS class ``name``, in document order"""
        pass

    @abstractmethod
    def by_id(self, identifier: str) -> DocumentNode | None:
        """Descendant whose id is ``identifier``"""
        pass

    @abstractmethod
    def children(self) -> list[DocumentNode]:
        """Direct element children"""
        pass

    @abstractmethod
    def text(self) -> str:
        """Concatenated text of this node and its descendants"""
        pass


class TextProcessorInterface(ABC):
    """Interface for text processing operations"""

    @abstractmethod
    def clean_text(self, text: str) -> str:
        """Clean and normalize text content"""
        pass

    @abstractmethod
    def normalize_brackets(self, text: str) -> str:
        """Replace full-width brackets with half-width ones"""
        pass

    @abstractmethod
    def hexify(self, value: str) -> str:
        """Percent-encode a URL query value"""
        pass

    @abstractmethod
    def display_width(self, text: str) -> int:
        """Terminal columns taken by the text"""
        pass


class DictionaryExtractorInterface(ABC):
    @abstractmethod
    def extract(self, document: DocumentNode, word: str | None = None) -> DictionaryResult:
        pass


class DictionaryRendererInterface(ABC):
    @abstractmethod
    def render(self, result: DictionaryResult, text: str) -> AnnotatedText:
        pass


class SuggestionExtractorInterface(ABC):
    @abstractmethod
    def extract(self, payload: Any) -> SuggestionResult:
        pass


class SuggestionRendererInterface(ABC):
    @abstractmethod
    def render(self, result: SuggestionResult) -> AnnotatedText:
        pass
