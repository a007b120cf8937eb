"""Data models for the Youdao dictionary pipelines"""

from .annotated_text import AnnotatedText, Annotation, StyleTag
from .dict_result import (
    BasicEntries,
    BilingualEntries,
    DictionaryResult,
    NetworkDefinitions,
    Phonetic,
    Sense,
    WordForm,
)
from .suggest_result import SuggestionEntry, SuggestionResult
from .task import TranslationTask

__all__ = [
    "AnnotatedText",
    "Annotation",
    "StyleTag",
    "DictionaryResult",
    "NetworkDefinitions",
    "BilingualEntries",
    "BasicEntries",
    "Phonetic",
    "Sense",
    "WordForm",
    "SuggestionEntry",
    "SuggestionResult",
    "TranslationTask",
]
