"""Extract suggestions from the dict.youdao.com suggest API payload"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..exceptions import ParseError, UpstreamStatusError
from ..models.suggest_result import SuggestionEntry, SuggestionResult
from .constants import YoudaoConstants
from .interfaces import SuggestionExtractorInterface


class SuggestionExtractor(SuggestionExtractorInterface):
    """Reads ``{"result": {"code", "msg"}, "data": {"entries": [...]}}``"""

    def extract(self, payload: Any) -> SuggestionResult:
        if not isinstance(payload, Mapping):
            raise ParseError("json", "suggestion payload", "top level is not an object")
        status = payload.get("result")
        if not isinstance(status, Mapping) or "code" not in status:
            raise ParseError("json", "suggestion payload", "missing result status")

        code = status.get("code")
        if code != YoudaoConstants.SUCCESS_CODE:
            message = status.get("msg")
            if not message:
                message = YoudaoConstants.STATUS_FALLBACK_MESSAGE.format(code=code)
            raise UpstreamStatusError(code, str(message))

        data = payload.get("data") or {}
        if not isinstance(data, Mapping):
            raise ParseError("json", "suggestion payload", "data is not an object")
        items = data.get("entries") or []
        if not isinstance(items, list):
            raise ParseError("json", "suggestion payload", "entries is not a list")

        try:
            entries = [
                SuggestionEntry(entry=str(item["entry"]), explain=item.get("explain"))
                for item in items
                if isinstance(item, Mapping) and item.get("entry")
            ]
        except ValidationError as e:
            raise ParseError(
                "json", "suggestion payload", f"invalid entry: {e.errors()[0]['msg']}"
            ) from e
        return SuggestionResult(status_code=code, entries=entries)
