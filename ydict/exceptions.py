"""Custom exceptions for the Youdao dictionary pipelines"""

from typing import Any


class YdictError(Exception):
    """Base exception class for all application errors

    ``message`` is the user-facing text; ``details`` carries context for logs.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class UnsupportedLanguagePairError(YdictError):
    """Raised when neither side of a dictionary lookup is Chinese"""

    def __init__(self, src: str, tgt: str):
        super().__init__(
            "Only Chinese-paired translation is supported",
            {"src": src, "tgt": tgt},
        )
        self.src = src
        self.tgt = tgt


class TransportError(YdictError):
    """Raised by requesters that want to wrap a network failure"""

    def __init__(self, url: str, reason: str):
        super().__init__(reason, {"url": url})
        self.url = url
        self.reason = reason


class NoTranslationError(YdictError):
    """Raised when a dictionary page has no explanation content"""

    def __init__(self, word: str | None = None):
        super().__init__("No translation result found", {"word": word} if word else None)
        self.word = word


class UpstreamStatusError(YdictError):
    """Raised when the suggestion API answers with a non-success status

    The upstream message is shown to the user as is.
    """

    def __init__(self, code: Any, message: str):
        super().__init__(message, {"code": code})
        self.code = code


class ParseError(YdictError):
    """Raised when a response body cannot be read"""

    def __init__(self, parser_type: str, content_type: str, reason: str):
        super().__init__(
            f"Failed to parse {content_type} with {parser_type}: {reason}",
            {
                "parser_type": parser_type,
                "content_type": content_type,
                "reason": reason,
            },
        )
        self.parser_type = parser_type
        self.content_type = content_type
        self.reason = reason


class ConfigurationError(YdictError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, setting: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for '{setting}': {reason}",
            {"setting": setting, "value": value, "reason": reason},
        )
        self.setting = setting
        self.value = value
        self.reason = reason
