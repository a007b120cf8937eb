"""Text processing utilities for extraction and rendering"""

import re
import unicodedata
from urllib.parse import quote

from .constants import TextConstants
from .interfaces import TextProcessorInterface


class TextProcessor(TextProcessorInterface):
    """Handles text cleaning and normalization operations"""

    WHITESPACE_RE = re.compile(TextConstants.WHITESPACE_PATTERN)
    FULLWIDTH_BRACKETS_RE = re.compile(TextConstants.FULLWIDTH_BRACKETS_PATTERN)

    @classmethod
    def clean_text(cls, text: str) -> str:
        """Collapse runs of whitespace and strip the ends"""
        if not text:
            return ""
        return cls.WHITESPACE_RE.sub(" ", text.strip())

    @classmethod
    def normalize_brackets(cls, text: str) -> str:
        """Replace a full-width bracket pair with its half-width equivalent"""
        if not text:
            return text
        return cls.FULLWIDTH_BRACKETS_RE.sub(r"(\1)", text)

    @classmethod
    def hexify(cls, value: str) -> str:
        """Percent-encode every byte except unreserved URL characters"""
        return quote(str(value), safe=TextConstants.URL_SAFE_CHARS)

    @classmethod
    def display_width(cls, text: str) -> int:
        """Terminal columns taken by ``text``; wide and full-width characters count twice"""
        return sum(
            2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text
        )
