"""Pydantic models for the suggestion API"""

from pydantic import BaseModel, Field, field_validator


class SuggestionEntry(BaseModel):
    """A near-match headword and its short explanation"""

    entry: str = Field(description="Suggested headword")
    explain: str | None = Field(None, description="Short explanation")

    @field_validator("explain")
    @classmethod
    def validate_explain(cls, v: str | None) -> str | None:
        if not v or not v.strip():
            return None
        return v.strip()


class SuggestionResult(BaseModel):
    """Suggestions for one query, in payload order"""

    status_code: int = Field(description="Upstream status code")
    entries: list[SuggestionEntry] = Field(default=[], description="Suggestions")
